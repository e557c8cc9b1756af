# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the Zynk lexer/tokenizer.
#
# Test coverage includes:
#   - Keywords, text literals and integer literals
#   - Delimiters
#   - Discarded characters (whitespace and unknown symbols)
#   - Position tracking
#   - Integer overflow
# =============================================================================

import pytest
from zynk.lexer import Lexer, Token, TokenType, LiteralKind, LiteralValue, tokenize
from zynk.errors import IntegerOverflowError, TokenizeError


# =============================================================================
# Helper Function
# =============================================================================

def kinds(source: str) -> list:
    """Tokenize and return (type, literal) pairs for compact assertions."""
    return [(t.type, t.literal) for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace is discarded without producing tokens."""
        assert tokenize("   \n\t  \n ") == []

    def test_print_call(self):
        """print(1,2) produces exactly six tokens."""
        assert tokenize("print(1,2)") == [
            Token(TokenType.PRINT),
            Token(TokenType.LPAREN),
            Token(TokenType.LITERAL, LiteralValue.integer(1)),
            Token(TokenType.COMMA),
            Token(TokenType.LITERAL, LiteralValue.integer(2)),
            Token(TokenType.RPAREN),
        ]

    def test_keywords(self):
        """Keywords get their own token types."""
        assert kinds("print let to") == [
            (TokenType.PRINT, None),
            (TokenType.LET, None),
            (TokenType.TO, None),
        ]

    def test_keywords_are_case_sensitive(self):
        """Only lowercase spellings are keywords."""
        tokens = tokenize("Print LET")
        assert [t.type for t in tokens] == [TokenType.LITERAL, TokenType.LITERAL]
        assert tokens[0].literal == LiteralValue.text("Print")

    def test_identifier_becomes_text_literal(self):
        """Non-keyword words are text literals."""
        assert kinds("hello") == [(TokenType.LITERAL, LiteralValue.text("hello"))]

    def test_keyword_prefix_is_not_keyword(self):
        """A word that merely starts with a keyword is a text literal."""
        assert kinds("printer letter") == [
            (TokenType.LITERAL, LiteralValue.text("printer")),
            (TokenType.LITERAL, LiteralValue.text("letter")),
        ]

    def test_identifier_with_digits(self):
        """Digits may follow the first letter of a word."""
        assert kinds("x1y2") == [(TokenType.LITERAL, LiteralValue.text("x1y2"))]

    def test_digits_then_letters_split(self):
        """A word cannot start with a digit, so 12ab is two tokens."""
        assert kinds("12ab") == [
            (TokenType.LITERAL, LiteralValue.integer(12)),
            (TokenType.LITERAL, LiteralValue.text("ab")),
        ]

    def test_integer_literal(self):
        tokens = tokenize("42")
        assert len(tokens) == 1
        assert tokens[0].literal.kind == LiteralKind.INTEGER
        assert tokens[0].literal.value == 42

    def test_leading_zeros(self):
        """Integers are decimal; leading zeros are allowed."""
        assert kinds("007") == [(TokenType.LITERAL, LiteralValue.integer(7))]

    def test_delimiters(self):
        assert [t.type for t in tokenize("(),")] == [
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.COMMA,
        ]


# =============================================================================
# Discarded Character Tests
# =============================================================================

class TestDiscardedCharacters:
    """Characters that match no rule are dropped silently."""

    def test_unknown_character_splits_word(self):
        """pr!int drops the '!' and yields two words, never crashing."""
        assert kinds("pr!int") == [
            (TokenType.LITERAL, LiteralValue.text("pr")),
            (TokenType.LITERAL, LiteralValue.text("int")),
        ]

    def test_quotes_are_discarded(self):
        """There are no string literals; quotes are just dropped."""
        assert kinds('"hi"') == [(TokenType.LITERAL, LiteralValue.text("hi"))]

    def test_minus_sign_is_discarded(self):
        """Negative numbers are not supported; '-' is dropped."""
        assert kinds("-5") == [(TokenType.LITERAL, LiteralValue.integer(5))]

    def test_discarded_characters_recorded(self):
        """Non-whitespace drops are recorded with their location."""
        lexer = Lexer("a ; b\n  @", "t.zynk")
        lexer.tokenize()
        assert [c for c, _ in lexer.discarded] == [";", "@"]
        location = lexer.discarded[1][1]
        assert (location.line, location.column) == (2, 3)

    def test_whitespace_not_recorded(self):
        lexer = Lexer(" \t\n print ")
        lexer.tokenize()
        assert lexer.discarded == []

    def test_non_decimal_numerics_discarded(self):
        """Superscripts are numeric but not decimal, so they start no token."""
        lexer = Lexer("\u00b2 5")
        assert [(t.type, t.literal) for t in lexer.tokenize()] == [
            (TokenType.LITERAL, LiteralValue.integer(5)),
        ]
        assert [c for c, _ in lexer.discarded] == ["\u00b2"]


# =============================================================================
# Position Tracking Tests
# =============================================================================

class TestPositions:
    """Tokens carry line and column information."""

    def test_columns(self):
        tokens = tokenize("print(hi)")
        assert [(t.line, t.column) for t in tokens] == [
            (1, 1), (1, 6), (1, 7), (1, 9),
        ]

    def test_lines(self):
        tokens = tokenize("let x to 1\nprint(x)", "prog.zynk")
        assert tokens[4].type == TokenType.PRINT
        assert str(tokens[4].location) == "prog.zynk:2:1"

    def test_positions_ignored_in_equality(self):
        """The same tokens laid out differently compare equal."""
        assert tokenize("print ( 1 )") == tokenize("print(1)")


# =============================================================================
# Error Condition Tests
# =============================================================================

class TestErrors:
    """Test integer range handling."""

    def test_int32_max_accepted(self):
        assert kinds("2147483647") == [
            (TokenType.LITERAL, LiteralValue.integer(2147483647)),
        ]

    def test_overflow_raises(self):
        with pytest.raises(IntegerOverflowError) as exc_info:
            tokenize("print(2147483648)", "big.zynk")
        assert exc_info.value.digits == "2147483648"
        assert str(exc_info.value.location) == "big.zynk:1:7"

    def test_overflow_is_tokenize_error(self):
        with pytest.raises(TokenizeError):
            tokenize("99999999999999999999")

    def test_very_long_digit_run_overflows(self):
        """Digit runs far past any integer size still report overflow."""
        with pytest.raises(IntegerOverflowError) as exc_info:
            tokenize("print(" + "9" * 5000 + ")")
        assert len(exc_info.value.digits) == 5000

    def test_long_zero_prefix_does_not_overflow(self):
        assert kinds("0" * 5000 + "7") == [
            (TokenType.LITERAL, LiteralValue.integer(7)),
        ]

    def test_non_ascii_decimal_digits(self):
        assert kinds("\u0664\u0662") == [
            (TokenType.LITERAL, LiteralValue.integer(42)),
        ]


# =============================================================================
# Literal Value Tests
# =============================================================================

class TestLiteralValue:
    """Test the literal value helpers."""

    def test_render_integer(self):
        assert LiteralValue.integer(3).render() == "3"

    def test_render_text_is_verbatim(self):
        assert LiteralValue.text("hi").render() == "hi"

    def test_kind_predicates(self):
        assert LiteralValue.text("a").is_text
        assert not LiteralValue.text("a").is_integer
        assert LiteralValue.integer(1).is_integer

    def test_text_and_integer_differ(self):
        assert LiteralValue.text("1") != LiteralValue.integer(1)
