"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .sympy_utils import to_sympy, sympy_derivative, sympy_evaluate, latex_representation
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_operator,
    get_constants, get_variables, get_variable_usage_counts
)

__all__ = [
    'ExpressionSimplifier', 'ExpressionValidator',
    'to_sympy', 'sympy_derivative', 'sympy_evaluate', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_operator',
    'get_constants', 'get_variables', 'get_variable_usage_counts'
]
