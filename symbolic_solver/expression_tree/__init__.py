"""Expression Tree Module

Immutable expression trees with parsing, evaluation, symbolic
differentiation, constant folding and algebraic simplification.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.variables import VariableTable
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    OPERATOR_PRECEDENCE,
    evaluate_binary_op,
    evaluate_unary_op
)
from .parsing import Token, TokenType, tokenize, parse
from .utils import ExpressionSimplifier, ExpressionValidator

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "VariableTable",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "OPERATOR_PRECEDENCE",
    "evaluate_binary_op", "evaluate_unary_op",
    "Token", "TokenType", "tokenize", "parse",
    "ExpressionSimplifier", "ExpressionValidator"
]
