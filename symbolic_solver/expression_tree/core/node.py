import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, FrozenSet, Set
from .operators import (
  NodeType, BINARY_OP_MAP, UNARY_OP_MAP,
  evaluate_binary_op, evaluate_unary_op
)
from .variables import VariableTable, as_variable_table


class Node(ABC):
  """Immutable expression tree node.

  Every transformation (differentiate, optimize, simplify) builds and returns
  a new tree. Children are never modified after construction, so subtrees may
  be shared between trees.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_depth_cache', '_deps_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._depth_cache: Optional[int] = None
    self._deps_cache: Optional[FrozenSet[str]] = None

  @abstractmethod
  def evaluate(self, env=None) -> float:
    """Evaluate against a VariableTable or mapping; raises UnboundVariableError."""
    pass

  def try_evaluate(self, env=None) -> Optional[float]:
    """Evaluate, or return None when some dependency is unbound."""
    table = as_variable_table(env)
    for name in self._dependencies():
      if not table.contains(name):
        return None
    return self.evaluate(table)

  @abstractmethod
  def differentiate(self, var_name: str) -> 'Node':
    pass

  @abstractmethod
  def optimize(self, env=None) -> 'Node':
    """Fold fully-constant subtrees. Bindings in `env` are never substituted."""
    pass

  def simplify(self) -> 'Node':
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_expression(self)

  @abstractmethod
  def infix_string(self) -> str:
    pass

  @abstractmethod
  def postfix_string(self) -> str:
    pass

  def to_string(self) -> str:
    return self.infix_string()

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def op_count(self) -> int:
    """Number of operator and function applications in the tree"""
    pass

  def dependencies(self) -> Set[str]:
    return set(self._dependencies())

  def _dependencies(self) -> FrozenSet[str]:
    if self._deps_cache is None:
      self._deps_cache = self._compute_dependencies()
    return self._deps_cache

  @abstractmethod
  def _compute_dependencies(self) -> FrozenSet[str]:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  def depth(self) -> int:
    if self._depth_cache is None:
      self._depth_cache = self._compute_depth()
    return self._depth_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _compute_depth(self) -> int:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __str__(self) -> str:
    return self.infix_string()


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if not name:
      raise ValueError("Variable name cannot be empty")
    self.name = name

  def evaluate(self, env=None) -> float:
    return as_variable_table(env).get(self.name)

  def differentiate(self, var_name: str) -> 'ConstantNode':
    return ConstantNode(1.0) if self.name == var_name else ConstantNode(0.0)

  def optimize(self, env=None) -> 'VariableNode':
    return self

  def infix_string(self) -> str:
    return self.name

  def postfix_string(self) -> str:
    return self.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def op_count(self) -> int:
    return 0

  def _compute_dependencies(self) -> FrozenSet[str]:
    return frozenset((self.name,))

  def _compute_size(self) -> int:
    return 1

  def _compute_depth(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def __eq__(self, other) -> bool:
    return isinstance(other, VariableNode) and self.name == other.name

  __hash__ = Node.__hash__

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def evaluate(self, env=None) -> float:
    return self.value

  def differentiate(self, var_name: str) -> 'ConstantNode':
    return ConstantNode(0.0)

  def optimize(self, env=None) -> 'ConstantNode':
    return self

  def infix_string(self) -> str:
    return repr(self.value)

  def postfix_string(self) -> str:
    return repr(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)

  def op_count(self) -> int:
    return 0

  def _compute_dependencies(self) -> FrozenSet[str]:
    return frozenset()

  def _compute_size(self) -> int:
    return 1

  def _compute_depth(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    # hash(nan) depends on object identity
    key = 'nan' if np.isnan(self.value) else self.value
    return hash((NodeType.CONSTANT, key))

  def __eq__(self, other) -> bool:
    if not isinstance(other, ConstantNode):
      return False
    return bool(self.value == other.value or (np.isnan(self.value) and np.isnan(other.value)))

  __hash__ = Node.__hash__

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator}")
    self.operator = operator
    self.left = left
    self.right = right

  def evaluate(self, env=None) -> float:
    table = as_variable_table(env)
    return evaluate_binary_op(self.left.evaluate(table), self.right.evaluate(table), self.operator)

  def differentiate(self, var_name: str) -> Node:
    left, right = self.left, self.right
    d_left = left.differentiate(var_name)
    d_right = right.differentiate(var_name)

    if self.operator in ('+', '-'):
      return BinaryOpNode(self.operator, d_left, d_right)

    if self.operator == '*':
      # f'g + g'f
      return BinaryOpNode('+', BinaryOpNode('*', d_left, right), BinaryOpNode('*', d_right, left))

    if self.operator == '/':
      # (f'g - g'f) / g^2
      numerator = BinaryOpNode('-', BinaryOpNode('*', d_left, right), BinaryOpNode('*', d_right, left))
      return BinaryOpNode('/', numerator, BinaryOpNode('^', right, ConstantNode(2.0)))

    # '^'
    if isinstance(right, ConstantNode):
      power_part = BinaryOpNode('*', right, BinaryOpNode('^', left, ConstantNode(right.value - 1.0)))
      return BinaryOpNode('*', power_part, d_left)

    # f^g * (g' ln(f) + g f'/f)
    log_part = BinaryOpNode('*', d_right, UnaryOpNode('log', left))
    ratio_part = BinaryOpNode('*', right, BinaryOpNode('/', d_left, left))
    return BinaryOpNode('*', self, BinaryOpNode('+', log_part, ratio_part))

  def optimize(self, env=None) -> Node:
    rebuilt = BinaryOpNode(self.operator, self.left.optimize(env), self.right.optimize(env))
    value = rebuilt.try_evaluate(VariableTable.empty())
    if value is None:
      return rebuilt
    return ConstantNode(value)

  def infix_string(self) -> str:
    return f"({self.left.infix_string()} {self.operator} {self.right.infix_string()})"

  def postfix_string(self) -> str:
    return f"{self.left.postfix_string()} {self.right.postfix_string()} {self.operator}"

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    return sp.Pow(left, right)

  def op_count(self) -> int:
    return 1 + self.left.op_count() + self.right.op_count()

  def _compute_dependencies(self) -> FrozenSet[str]:
    return self.left._dependencies() | self.right._dependencies()

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_depth(self) -> int:
    return 1 + max(self.left.depth(), self.right.depth())

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def __eq__(self, other) -> bool:
    if not isinstance(other, BinaryOpNode):
      return False
    return (self.operator == other.operator and
            self.left == other.left and
            self.right == other.right)

  __hash__ = Node.__hash__

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.operator!r}, {self.left!r}, {self.right!r})"


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown function: {operator}")
    self.operator = operator
    self.operand = operand

  def evaluate(self, env=None) -> float:
    return evaluate_unary_op(self.operand.evaluate(env), self.operator)

  def differentiate(self, var_name: str) -> Node:
    arg = self.operand

    if self.operator == 'abs':
      # Known limitation: sign of the argument is ignored
      return ConstantNode(1.0)

    d_arg = arg.differentiate(var_name)
    if self.operator == 'sqrt':
      half_power = BinaryOpNode('*', ConstantNode(0.5), BinaryOpNode('^', arg, ConstantNode(-0.5)))
      return BinaryOpNode('*', half_power, d_arg)
    elif self.operator == 'exp':
      return BinaryOpNode('*', self, d_arg)
    elif self.operator == 'log':
      return BinaryOpNode('/', d_arg, arg)
    elif self.operator == 'sin':
      return BinaryOpNode('*', UnaryOpNode('cos', arg), d_arg)
    elif self.operator == 'cos':
      neg_sin = BinaryOpNode('*', ConstantNode(-1.0), UnaryOpNode('sin', arg))
      return BinaryOpNode('*', neg_sin, d_arg)
    # tan
    return BinaryOpNode('/', d_arg, BinaryOpNode('^', UnaryOpNode('cos', arg), ConstantNode(2.0)))

  def optimize(self, env=None) -> Node:
    rebuilt = UnaryOpNode(self.operator, self.operand.optimize(env))
    value = rebuilt.try_evaluate(VariableTable.empty())
    if value is None:
      return rebuilt
    return ConstantNode(value)

  def infix_string(self) -> str:
    return f"{self.operator}({self.operand.infix_string()})"

  def postfix_string(self) -> str:
    return f"{self.operand.postfix_string()} {self.operator}()"

  def to_sympy(self) -> sp.Expr:
    operand_sympy = self.operand.to_sympy()

    if self.operator == 'sin':
      return sp.sin(operand_sympy)
    elif self.operator == 'cos':
      return sp.cos(operand_sympy)
    elif self.operator == 'tan':
      return sp.tan(operand_sympy)
    elif self.operator == 'sqrt':
      return sp.sqrt(operand_sympy)
    elif self.operator == 'log':
      return sp.log(operand_sympy)
    elif self.operator == 'exp':
      return sp.exp(operand_sympy)
    return sp.Abs(operand_sympy)

  def op_count(self) -> int:
    return 1 + self.operand.op_count()

  def _compute_dependencies(self) -> FrozenSet[str]:
    return self.operand._dependencies()

  def _compute_size(self) -> int:
    return 1 + self.operand.size()

  def _compute_depth(self) -> int:
    return 1 + self.operand.depth()

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, hash(self.operand)))

  def __eq__(self, other) -> bool:
    if not isinstance(other, UnaryOpNode):
      return False
    return self.operator == other.operator and self.operand == other.operand

  __hash__ = Node.__hash__

  def __repr__(self) -> str:
    return f"UnaryOpNode({self.operator!r}, {self.operand!r})"
