import pytest

from symbolic_solver.exceptions import UnreadableCharacterError
from symbolic_solver.expression_tree.parsing import Token, TokenType, TokenCursor, tokenize


def _types(text):
    return [token.type for token in tokenize(text)]


def _values(text):
    return [token.value for token in tokenize(text)]


def test_mixed_tokens():
    """Numbers, variables, operators, functions and parentheses in one string"""
    assert tokenize("3x+sin(y)") == [
        Token(TokenType.NUMBER, "3"),
        Token(TokenType.VARIABLE, "x"),
        Token(TokenType.OPERATOR, "+"),
        Token(TokenType.FUNCTION, "sin"),
        Token(TokenType.LEFT_PAREN, "("),
        Token(TokenType.VARIABLE, "y"),
        Token(TokenType.RIGHT_PAREN, ")"),
    ]


def test_whitespace_is_removed_before_scanning():
    assert _values(" 4 5") == ["45"]
    assert _values("x *\ty\n") == ["x", "*", "y"]


def test_numbers_use_longest_literal():
    assert _values("40.") == ["40."]
    assert _values("0.3674") == ["0.3674"]
    assert _values("2.5e3*x") == ["2.5e3", "*", "x"]
    assert _values("1e-2") == ["1e-2"]
    assert _values(".5") == [".5"]


def test_incomplete_exponent_is_not_part_of_number():
    assert _values("2e") == ["2", "e"]
    assert _types("2e") == [TokenType.NUMBER, TokenType.VARIABLE]


def test_function_names():
    for name in ("abs", "sqrt", "exp", "log", "sin", "cos", "tan"):
        tokens = tokenize(f"{name}(x)")
        assert tokens[0] == Token(TokenType.FUNCTION, name)


def test_function_prefix_splits_remaining_letters():
    assert _values("cost") == ["cos", "t"]
    assert _types("cost") == [TokenType.FUNCTION, TokenType.VARIABLE]


def test_letters_are_single_character_variables():
    assert _values("xy") == ["x", "y"]
    assert _types("ab") == [TokenType.VARIABLE, TokenType.VARIABLE]


def test_unreadable_character():
    with pytest.raises(UnreadableCharacterError) as excinfo:
        tokenize("x#")
    assert excinfo.value.character == "#"
    assert excinfo.value.position == 1

    with pytest.raises(UnreadableCharacterError):
        tokenize("2 = x")

    with pytest.raises(UnreadableCharacterError) as excinfo:
        tokenize("x\u00b2")
    assert excinfo.value.position == 1

    with pytest.raises(UnreadableCharacterError):
        tokenize("\u00e9 + 1")


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        tokenize("   ")


def test_cursor_walks_tokens():
    cursor = TokenCursor(tokenize("x+1"))
    assert cursor.current.value == "x"
    assert cursor.has_next()
    assert cursor.advance().value == "+"
    assert cursor.advance().value == "1"
    assert not cursor.has_next()
    assert cursor.advance() is None
    assert cursor.current is None
