"""Symbolic Solver Package

Expression parsing, symbolic differentiation and simplification, and
Gaussian-elimination / Newton's-method equation solving.
"""

from .exceptions import (
  SymbolicSolverError, UnreadableCharacterError, IncompleteExpressionError,
  UnboundVariableError, SolvingError, NoPivotError, NoSolutionError, DidNotConvergeError
)
from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode,
  BinaryOpNode, UnaryOpNode, VariableTable, tokenize, parse
)
from .solving import (
  SolverConfig, linear_solve, linear_solve_general, nonlinear_solve
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "SymbolicSolverError", "UnreadableCharacterError", "IncompleteExpressionError",
  "UnboundVariableError", "SolvingError", "NoPivotError", "NoSolutionError", "DidNotConvergeError",
  "Expression", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "UnaryOpNode", "VariableTable", "tokenize", "parse",
  "SolverConfig", "linear_solve", "linear_solve_general", "nonlinear_solve",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
