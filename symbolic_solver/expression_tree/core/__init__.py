"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .variables import VariableTable
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, OPERATOR_PRECEDENCE, FUNCTION_NAMES,
    evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode', 'VariableTable',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'OPERATOR_PRECEDENCE', 'FUNCTION_NAMES',
    'evaluate_binary_op', 'evaluate_unary_op'
]
