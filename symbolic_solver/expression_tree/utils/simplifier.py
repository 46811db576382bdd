from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import evaluate_binary_op


def _is_constant(node: Node, value: float) -> bool:
  return isinstance(node, ConstantNode) and node.value == value


def _same_variable(left: Node, right: Node) -> bool:
  return isinstance(left, VariableNode) and isinstance(right, VariableNode) and left.name == right.name


class ExpressionSimplifier:
  """Algebraic identity rewriting, applied bottom-up and independent of any environment"""

  @staticmethod
  def simplify_expression(node: Node) -> Node:
    if isinstance(node, BinaryOpNode):
      left = ExpressionSimplifier.simplify_expression(node.left)
      right = ExpressionSimplifier.simplify_expression(node.right)
      simplified = ExpressionSimplifier._apply_binary_rules(node.operator, left, right)
      if simplified is not None:
        return simplified
      return BinaryOpNode(node.operator, left, right)

    elif isinstance(node, UnaryOpNode):
      return UnaryOpNode(node.operator, ExpressionSimplifier.simplify_expression(node.operand))

    return node

  @staticmethod
  def _apply_binary_rules(operator: str, left: Node, right: Node):
    """Return the rewritten node, or None when no identity applies"""
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      return ConstantNode(evaluate_binary_op(left.value, right.value, operator))

    if operator == '+':
      if _is_constant(left, 0.0):
        return right  # 0 + x = x
      if _is_constant(right, 0.0):
        return left  # x + 0 = x

    elif operator == '-':
      if _is_constant(left, 0.0):
        return BinaryOpNode('*', ConstantNode(-1.0), right)  # 0 - x = -1 * x
      if _is_constant(right, 0.0):
        return left  # x - 0 = x
      if _same_variable(left, right):
        return ConstantNode(0.0)  # x - x = 0

    elif operator == '*':
      if isinstance(left, ConstantNode):
        if left.value == 0.0:
          return ConstantNode(0.0)  # 0 * x = 0
        if left.value == 1.0:
          return right  # 1 * x = x
      elif isinstance(right, ConstantNode):
        if right.value == 0.0:
          return ConstantNode(0.0)  # x * 0 = 0
        if right.value == 1.0:
          return left  # x * 1 = x

    elif operator == '/':
      if _is_constant(left, 0.0):
        return ConstantNode(0.0)  # 0 / x = 0
      if _same_variable(left, right):
        return ConstantNode(1.0)  # x / x = 1

    elif operator == '^':
      if _is_constant(right, 1.0):
        return left  # x ^ 1 = x
      if _is_constant(right, 0.0):
        return ConstantNode(1.0)  # x ^ 0 = 1

    return None
