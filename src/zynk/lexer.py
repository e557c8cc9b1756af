"""
Zynk Lexer (Tokenizer)
======================

This module implements the lexer for the Zynk scripting language.
It converts source text into a list of tokens for the parser.

Token Categories
----------------
- Keywords: print, let, to
- Literals: text (any identifier that is not a keyword) and integers
- Delimiters: (, ), ,

Lexical Rules
-------------
| Starts with  | Continues with | Produces                      |
|--------------|----------------|-------------------------------|
| letter       | letters/digits | keyword or text literal       |
| digit        | digits         | integer literal (32-bit)      |
| ( ) ,        | -              | delimiter                     |
| anything else| -              | nothing (character discarded) |

Identifiers and keywords share one lexical class. Digits may follow the
first character of an identifier but cannot start one. Every character
that matches no rule, whitespace included, is silently discarded.
Integers are runs of Unicode decimal digits (`str.isdecimal`). Other
numeric characters, such as superscripts or vulgar fractions, cannot
start a token and are discarded like any other unknown character; they
only survive inside a word, which continues with `str.isalnum`.

Example Usage
-------------
>>> from zynk.lexer import tokenize
>>> for token in tokenize('print(1, hi)'):
...     print(token)
Token(PRINT, 1:1)
Token(LPAREN, 1:6)
Token(LITERAL, 1, 1:7)
Token(COMMA, 1:8)
Token(LITERAL, 'hi', 1:10)
Token(RPAREN, 1:12)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from zynk.errors import SourceLocation, IntegerOverflowError

logger = logging.getLogger(__name__)

# Largest value representable by a 32-bit signed integer
INT32_MAX = 2**31 - 1


# =============================================================================
# Literal Values
# =============================================================================

class LiteralKind(Enum):
    """Kinds of literal value a token can carry."""
    TEXT = auto()
    INTEGER = auto()


@dataclass(frozen=True)
class LiteralValue:
    """
    An immutable text or integer value.

    Attributes:
        kind: TEXT or INTEGER
        value: The payload (str for TEXT, int for INTEGER)
    """
    kind: LiteralKind
    value: str | int

    @classmethod
    def text(cls, value: str) -> "LiteralValue":
        return cls(LiteralKind.TEXT, value)

    @classmethod
    def integer(cls, value: int) -> "LiteralValue":
        return cls(LiteralKind.INTEGER, value)

    @property
    def is_text(self) -> bool:
        return self.kind == LiteralKind.TEXT

    @property
    def is_integer(self) -> bool:
        return self.kind == LiteralKind.INTEGER

    def render(self) -> str:
        """Return the literal exactly as it is written into generated code."""
        return str(self.value)

    def __repr__(self) -> str:
        if self.is_text:
            return f"Text({self.value!r})"
        return f"Integer({self.value})"


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the Zynk language."""

    # === Literals ===
    LITERAL = auto()        # Text or integer value

    # === Keywords ===
    PRINT = auto()          # print
    LET = auto()            # let
    TO = auto()             # to

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    COMMA = auto()          # ,


KEYWORDS: dict[str, TokenType] = {
    "print": TokenType.PRINT,
    "let": TokenType.LET,
    "to": TokenType.TO,
}

DELIMITERS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from Zynk source code.

    Position fields are excluded from equality so that two token lists
    produced from differently laid out sources compare structurally.

    Attributes:
        type: The TokenType classification
        literal: The carried value for LITERAL tokens, None otherwise
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    literal: Optional[LiteralValue] = None
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.type.name}, {self.literal.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_text_literal(self) -> bool:
        return self.literal is not None and self.literal.is_text


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Zynk source code.

    A single forward cursor walks the input once. Characters that match
    no rule are discarded; the non-whitespace ones are remembered in
    `discarded` so a strict caller can warn about them.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        discarded: (character, location) pairs dropped by the lexer
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.discarded: list[tuple[str, SourceLocation]] = []

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> list[Token]:
        """
        Convert the whole source into tokens.

        Returns:
            Tokens in source order

        Raises:
            IntegerOverflowError: If an integer literal exceeds 32 bits
        """
        tokens = []

        while not self._at_end():
            token = self._scan_token()
            if token is not None:
                tokens.append(token)

        logger.debug(
            f"Tokenized {self.filename}: {len(tokens)} tokens, "
            f"{len(self.discarded)} characters discarded"
        )
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Look at the current character without advancing ("" at end)."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line/column."""
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _make_token(
        self,
        token_type: TokenType,
        literal: Optional[LiteralValue],
        start_line: int,
        start_column: int,
    ) -> Token:
        return Token(
            type=token_type,
            literal=literal,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Optional[Token]:
        """
        Scan the next token from source.

        Returns:
            The next Token, or None if the character was discarded
        """
        start_line = self._line
        start_column = self._column

        char = self._peek()

        if char.isalpha():
            return self._scan_word(start_line, start_column)

        if char.isdecimal():
            return self._scan_integer(start_line, start_column)

        if char in DELIMITERS:
            self._advance()
            return self._make_token(DELIMITERS[char], None, start_line, start_column)

        self._advance()
        if not char.isspace():
            self.discarded.append(
                (char, SourceLocation(self.filename, start_line, start_column))
            )
        return None

    def _scan_word(self, start_line: int, start_column: int) -> Token:
        """
        Scan a keyword or text literal.

        Words start with a letter and continue with letters or digits.
        """
        chars = []
        while self._peek() and self._peek().isalnum():
            chars.append(self._advance())

        word = "".join(chars)

        if word in KEYWORDS:
            return self._make_token(KEYWORDS[word], None, start_line, start_column)

        return self._make_token(
            TokenType.LITERAL, LiteralValue.text(word), start_line, start_column
        )

    def _scan_integer(self, start_line: int, start_column: int) -> Token:
        """Scan a run of decimal digits into a 32-bit integer literal."""
        chars = []
        while self._peek() and self._peek().isdecimal():
            chars.append(self._advance())

        digits = "".join(chars)
        value = 0
        for digit in digits:
            value = value * 10 + int(digit)
            if value > INT32_MAX:
                raise IntegerOverflowError(
                    digits, SourceLocation(self.filename, start_line, start_column)
                )

        return self._make_token(
            TokenType.LITERAL, LiteralValue.integer(value), start_line, start_column
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize Zynk source code.

    Args:
        source: Zynk source text
        filename: Source filename for error messages

    Returns:
        Tokens in source order

    Raises:
        IntegerOverflowError: If an integer literal exceeds 32 bits
    """
    return Lexer(source, filename).tokenize()
