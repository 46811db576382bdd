import sympy as sp
from typing import Union
from ..core.node import Node


def to_sympy(node: Node) -> sp.Expr:
  return node.to_sympy()


def sympy_derivative(node: Node, var_name: str) -> sp.Expr:
  """Reference derivative computed by SymPy, used to cross-check differentiate()"""
  return sp.diff(node.to_sympy(), sp.Symbol(var_name))


def sympy_evaluate(expr: Union[Node, sp.Expr], bindings: dict) -> float:
  if isinstance(expr, Node):
    expr = expr.to_sympy()
  substitutions = {sp.Symbol(name): value for name, value in bindings.items()}
  return float(expr.evalf(subs=substitutions))


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(node.to_sympy())
