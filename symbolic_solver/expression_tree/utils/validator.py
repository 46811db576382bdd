import numpy as np
from typing import Iterable, Optional, Sequence
from ..core.node import Node
from ...exceptions import UnboundVariableError


class ExpressionValidator:

  @staticmethod
  def check_bindings(equations: Iterable[Node], var_names: Sequence[str]):
    """Raise UnboundVariableError for the first variable no name in var_names binds"""
    bound = set(var_names)
    for equation in equations:
      missing = sorted(equation.dependencies() - bound)
      if missing:
        raise UnboundVariableError(missing[0])

  @staticmethod
  def is_finite_at(node: Node, env=None) -> bool:
    value: Optional[float] = node.try_evaluate(env)
    return value is not None and bool(np.isfinite(value))

  @staticmethod
  def has_zero_coordinate(point: Sequence[float]) -> bool:
    return bool(np.any(np.asarray(point, dtype=np.float64) == 0.0))
