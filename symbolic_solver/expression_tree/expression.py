import sympy as sp
from typing import Optional, Set
from .core.node import Node
from .core.variables import as_variable_table


class Expression:
  """Expression wrapper around an immutable node tree with string caching"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def from_string(cls, expr_str: str, strict: bool = False) -> 'Expression':
    from .parsing.parser import parse
    return cls(parse(expr_str, strict=strict))

  def evaluate(self, env=None) -> float:
    return self.root.evaluate(as_variable_table(env))

  def try_evaluate(self, env=None) -> Optional[float]:
    return self.root.try_evaluate(env)

  def differentiate(self, var_name: str) -> 'Expression':
    return Expression(self.root.differentiate(var_name))

  def optimize(self, env=None) -> 'Expression':
    return Expression(self.root.optimize(env))

  def simplify(self) -> 'Expression':
    return Expression(self.root.simplify())

  def dependencies(self) -> Set[str]:
    return self.root.dependencies()

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.infix_string()
    return self._string_cache

  def infix_string(self) -> str:
    return self.to_string()

  def postfix_string(self) -> str:
    return self.root.postfix_string()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def op_count(self) -> int:
    return self.root.op_count()

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"
