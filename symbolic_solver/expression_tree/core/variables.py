from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Set

from ...exceptions import UnboundVariableError


class VariableTable:
  """Mutable mapping from variable name to value used during evaluation"""

  __slots__ = ('_values',)

  def __init__(self, values: Optional[Mapping[str, float]] = None):
    self._values: Dict[str, float] = {}
    if values:
      for name, value in values.items():
        self.set(name, value)

  @staticmethod
  def empty() -> 'VariableTable':
    return VariableTable()

  @staticmethod
  def of(*pairs) -> 'VariableTable':
    """Build a table from alternating names and values: of('x', 3.0, 'y', 1.5)"""
    if len(pairs) % 2 != 0:
      raise ValueError("VariableTable.of expects name/value pairs")
    table = VariableTable()
    for name, value in zip(pairs[::2], pairs[1::2]):
      table.set(name, value)
    return table

  @staticmethod
  def from_lists(names: Sequence[str], values: Iterable[float]) -> 'VariableTable':
    values = list(values)
    if len(names) != len(values):
      raise ValueError(f"Got {len(names)} names but {len(values)} values")
    table = VariableTable()
    for name, value in zip(names, values):
      table.set(name, value)
    return table

  def get(self, name: str) -> float:
    try:
      return self._values[name]
    except KeyError:
      raise UnboundVariableError(name) from None

  def set(self, name: str, value: float):
    if name is None:
      raise ValueError("Variable name cannot be None")
    self._values[name] = float(value)

  def unset(self, name: str):
    self._values.pop(name, None)

  def contains(self, name: str) -> bool:
    return name in self._values

  def size(self) -> int:
    return len(self._values)

  def names(self) -> Set[str]:
    return set(self._values)

  def __contains__(self, name: str) -> bool:
    return self.contains(name)

  def __len__(self) -> int:
    return self.size()

  def __iter__(self) -> Iterator[str]:
    return iter(sorted(self._values))

  def __getitem__(self, name: str) -> float:
    return self.get(name)

  def __repr__(self) -> str:
    items = ", ".join(f"{name}={self._values[name]}" for name in sorted(self._values))
    return f"VariableTable({items})"


def as_variable_table(env) -> VariableTable:
  """Accept a VariableTable, a plain mapping or None"""
  if env is None:
    return VariableTable()
  if isinstance(env, VariableTable):
    return env
  return VariableTable(env)
