"""Text to expression tree parsing."""

from .tokenizer import Token, TokenType, TokenCursor, tokenize
from .parser import Parser, parse

__all__ = ['Token', 'TokenType', 'TokenCursor', 'tokenize', 'Parser', 'parse']
