from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import (
  OPERATOR_PRECEDENCE, FUNCTION_NAMES, IMPLICIT_MUL_PRECEDENCE, IMPLICIT_MUL_RHS_PRECEDENCE
)
from .tokenizer import TokenType, TokenCursor, tokenize
from ...exceptions import IncompleteExpressionError

_FUNCTION_CALL_MESSAGE = "function must be followed immediately by argument enclosed in parentheses"


class Parser:
  """Precedence-climbing recursive-descent parser over a token stream.

  Juxtaposed atoms (``3x``, ``2(x+1)``, ``x sin(y)``) are multiplied, and a
  leading ``-`` on an atom becomes multiplication by ``-1``.
  """

  def __init__(self, cursor: TokenCursor):
    self.cursor = cursor

  def parse(self, strict: bool = False) -> Node:
    result = self.parse_expr(1)
    if strict and self.cursor.current is not None:
      raise IncompleteExpressionError(f"unexpected trailing token '{self.cursor.current.value}'")
    return result

  def parse_atom(self) -> Node:
    """Parse one atom, leaving the cursor on its last token"""
    cursor = self.cursor
    token = cursor.current

    if token is None:
      raise IncompleteExpressionError("expression ended unexpectedly")

    if token.type == TokenType.OPERATOR:
      if token.value != '-':
        raise IncompleteExpressionError(
            "expected number, variable, parentheses, or negative sign, not other operator")
      if not cursor.has_next():
        raise IncompleteExpressionError("hanging negative sign")
      cursor.advance()
      return BinaryOpNode('*', ConstantNode(-1.0), self.parse_atom())

    if token.type == TokenType.RIGHT_PAREN:
      raise IncompleteExpressionError("unmatched right parenthesis")

    if token.type == TokenType.LEFT_PAREN:
      if not cursor.has_next():
        raise IncompleteExpressionError("unmatched left parenthesis")
      cursor.advance()
      inner = self.parse_expr(1)
      if cursor.current is None or cursor.current.type != TokenType.RIGHT_PAREN:
        raise IncompleteExpressionError("unmatched left parenthesis")
      return inner

    if token.type == TokenType.FUNCTION:
      if not cursor.has_next():
        raise IncompleteExpressionError(_FUNCTION_CALL_MESSAGE)
      cursor.advance()
      if cursor.current.type != TokenType.LEFT_PAREN or not cursor.has_next():
        raise IncompleteExpressionError(_FUNCTION_CALL_MESSAGE)
      cursor.advance()
      argument = self.parse_expr(1)
      if cursor.current is None or cursor.current.type != TokenType.RIGHT_PAREN:
        raise IncompleteExpressionError("unmatched left parenthesis")
      if token.value not in FUNCTION_NAMES:
        # tokenizer only yields known names
        raise RuntimeError(f"function name '{token.value}' does not correspond to a valid function")
      return UnaryOpNode(token.value, argument)

    if token.type == TokenType.VARIABLE:
      return VariableNode(token.value)

    return ConstantNode(float(token.value))

  def parse_expr(self, min_prec: int) -> Node:
    cursor = self.cursor
    left = self.parse_atom()
    cursor.advance()

    while True:
      token = cursor.current
      if token is None or token.type == TokenType.RIGHT_PAREN:
        break

      if token.type == TokenType.NUMBER:
        raise IncompleteExpressionError(
            "number cannot be placed directly to the right of an atom without a connecting operator")

      if token.type in (TokenType.LEFT_PAREN, TokenType.VARIABLE, TokenType.FUNCTION):
        # implicit multiplication
        if IMPLICIT_MUL_PRECEDENCE < min_prec:
          break
        right = self.parse_expr(IMPLICIT_MUL_RHS_PRECEDENCE)
        left = BinaryOpNode('*', left, right)
        continue

      prec, right_assoc = OPERATOR_PRECEDENCE[token.value]
      if prec < min_prec:
        break
      next_min_prec = prec if right_assoc else prec + 1
      if not cursor.has_next():
        raise IncompleteExpressionError("operation does not have right operand")
      cursor.advance()
      right = self.parse_expr(next_min_prec)
      left = BinaryOpNode(token.value, left, right)

    return left


def parse(text: str, strict: bool = False) -> Node:
  """Parse an expression string into a tree.

  With ``strict=False`` (the default) tokens left over once the grammar is
  satisfied, such as a trailing ``)``, are ignored. ``strict=True`` rejects them.
  """
  return Parser(TokenCursor(tokenize(text))).parse(strict=strict)
