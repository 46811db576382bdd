import re
from enum import IntEnum
from typing import List, Optional

from ..core.operators import BINARY_OP_MAP
from ...exceptions import UnreadableCharacterError


class TokenType(IntEnum):
  NUMBER = 0
  VARIABLE = 1
  OPERATOR = 2
  FUNCTION = 3
  LEFT_PAREN = 4
  RIGHT_PAREN = 5


# Decimal literal: 12, 12., 12.5, .5, with an optional exponent
_NUMBER_RE = re.compile(r'(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_WHITESPACE_RE = re.compile(r'\s+')

_SHORT_FUNCTIONS = ('abs', 'exp', 'log', 'sin', 'cos', 'tan')
_LONG_FUNCTIONS = ('sqrt',)
_SYMBOLS = frozenset('+-*/^().')


class Token:
  __slots__ = ('type', 'value')

  def __init__(self, type: TokenType, value: str):
    self.type = type
    self.value = value

  def __eq__(self, other) -> bool:
    return isinstance(other, Token) and self.type == other.type and self.value == other.value

  def __hash__(self) -> int:
    return hash((self.type, self.value))

  def __repr__(self) -> str:
    return f"Token({self.type.name}, '{self.value}')"


def _check_characters(text: str):
  for position, char in enumerate(text):
    if not ((char.isascii() and char.isalnum()) or char in _SYMBOLS):
      raise UnreadableCharacterError(char, position)


def tokenize(text: str) -> List[Token]:
  """Split an expression string into tokens, ignoring all whitespace.

  Numbers use maximal munch, function names come from a closed set and any
  other letter is a one-character variable name. Raises
  UnreadableCharacterError for characters outside letters, digits and
  ``+ - * / ^ ( ) .``.
  """
  cleaned = _WHITESPACE_RE.sub('', text)
  if not cleaned:
    raise ValueError("Expression string must contain at least one non-whitespace character")
  _check_characters(cleaned)

  tokens: List[Token] = []
  index = 0
  while index < len(cleaned):
    char = cleaned[index]
    number = _NUMBER_RE.match(cleaned, index)
    if number:
      tokens.append(Token(TokenType.NUMBER, number.group(0)))
      index = number.end()
    elif char in BINARY_OP_MAP:
      tokens.append(Token(TokenType.OPERATOR, char))
      index += 1
    elif char == '(':
      tokens.append(Token(TokenType.LEFT_PAREN, char))
      index += 1
    elif char == ')':
      tokens.append(Token(TokenType.RIGHT_PAREN, char))
      index += 1
    elif cleaned.startswith(_SHORT_FUNCTIONS, index):
      tokens.append(Token(TokenType.FUNCTION, cleaned[index:index + 3]))
      index += 3
    elif cleaned.startswith(_LONG_FUNCTIONS, index):
      tokens.append(Token(TokenType.FUNCTION, cleaned[index:index + 4]))
      index += 4
    else:
      tokens.append(Token(TokenType.VARIABLE, char))
      index += 1
  return tokens


class TokenCursor:
  """Walks a token list; `current` is None once the end has been passed."""

  __slots__ = ('_tokens', '_index')

  def __init__(self, tokens: List[Token]):
    if not tokens:
      raise ValueError("TokenCursor requires at least one token")
    self._tokens = tokens
    self._index = 0

  @property
  def current(self) -> Optional[Token]:
    if self._index < len(self._tokens):
      return self._tokens[self._index]
    return None

  def has_next(self) -> bool:
    return self._index + 1 < len(self._tokens)

  def advance(self) -> Optional[Token]:
    if self._index < len(self._tokens):
      self._index += 1
    return self.current
