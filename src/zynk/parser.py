"""
Zynk Recursive Descent Parser
=============================

This module implements the parser for the Zynk scripting language. It
takes the token list from the lexer and builds a ProgramNode holding the
statements in source order.

Grammar (Informal EBNF)
-----------------------
program     ::= stmt*
stmt        ::= print_stmt | let_stmt | <any other token, skipped>
print_stmt  ::= 'print' '(' (literal (',' literal)*)? ')'
let_stmt    ::= 'let' TEXT 'to' literal
literal     ::= TEXT | INTEGER

Error Recovery
--------------
A malformed statement produces one ParseError, which is collected rather
than raised. Tokens already consumed by the failed attempt stay consumed:
the next attempt starts at the current position, with no rollback and no
resynchronisation. Tokens that cannot start a statement are skipped one
at a time without an error.

Example Usage
-------------
>>> from zynk.lexer import tokenize
>>> from zynk.parser import Parser
>>> parser = Parser(tokenize('let x to 5 print(x)'))
>>> program = parser.parse()
>>> len(program.statements)
2
>>> program.statements[0].name
'x'
"""

import logging
from typing import Optional

from zynk.errors import SourceLocation, ParseError, ErrorCollector
from zynk.lexer import Token, TokenType, tokenize
from zynk.ast import ProgramNode, Statement, PrintStatement, LetStatement

logger = logging.getLogger(__name__)


# =============================================================================
# Error Messages
# =============================================================================

EXPECTED_PRINT_OPEN = "Expected '(' to start print statement"
EXPECTED_PRINT_CLOSE = "Expected ')' to end print statement"
EXPECTED_LET_NAME = "Expected variable name after 'let'"
EXPECTED_LET_TO = "Expected 'to' after variable name"
EXPECTED_LET_VALUE = "Expected value after 'to'"


class Parser:
    """
    Recursive descent parser for Zynk.

    Attributes:
        tokens: List of tokens to parse
        filename: Source filename for error reporting
        skipped: Tokens skipped because they cannot start a statement
    """

    def __init__(self, tokens: list[Token], filename: str = "<input>"):
        self.tokens = tokens
        self.filename = filename
        self.skipped: list[Token] = []

        # Current position in token stream
        self._pos = 0

        self._errors = ErrorCollector()

    @property
    def errors(self) -> list[ParseError]:
        """Errors collected during parsing, one per failed statement."""
        return list(self._errors.errors)

    def parse(self) -> ProgramNode:
        """
        Parse the whole token list.

        Never raises for malformed statements; see `errors`.

        Returns:
            ProgramNode containing every successfully parsed statement
        """
        statements = []

        while not self._at_end():
            try:
                stmt = self.parse_statement()
            except ParseError as e:
                logger.warning(f"Error while parsing: {e}")
                self._errors.add(e)
                continue

            if stmt is not None:
                statements.append(stmt)

        logger.debug(
            f"Parsed {len(statements)} statements, "
            f"{self._errors.error_count()} errors, {len(self.skipped)} tokens skipped"
        )

        return ProgramNode(
            location=SourceLocation(self.filename, 1, 1),
            statements=statements,
        )

    def parse_statement(self) -> Optional[Statement]:
        """
        Make one statement-start attempt at the current position.

        Returns:
            The parsed statement, or None if the current token was skipped
            or there is no input left

        Raises:
            ParseError: If the statement is malformed
        """
        if self._at_end():
            return None

        token = self._advance()

        if token.type == TokenType.PRINT:
            return self._parse_print(token)

        if token.type == TokenType.LET:
            return self._parse_let(token)

        logger.debug(f"Skipping token {token!r} at statement start")
        self.skipped.append(token)
        return None

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._pos >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Look at the current token, or None at end of input."""
        if self._at_end():
            return None
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def _check(self, token_type: TokenType) -> bool:
        """Check if the current token has the given type."""
        token = self._peek()
        return token is not None and token.type == token_type

    def _match(self, token_type: TokenType) -> Optional[Token]:
        """Consume the current token if it has the given type."""
        if self._check(token_type):
            return self._advance()
        return None

    def _error(self, message: str, hint: Optional[str] = None) -> ParseError:
        """
        Create a ParseError located at the current token.

        At end of input the location of the last token is used instead.
        """
        token = self._peek()
        if token is None and self.tokens:
            token = self.tokens[-1]

        location = token.location if token is not None else SourceLocation(self.filename, 1, 1)
        return ParseError(message, location, hint=hint)

    # =========================================================================
    # Statement Parsing
    # =========================================================================

    def _parse_print(self, keyword: Token) -> PrintStatement:
        """
        Parse the rest of a print statement after the 'print' keyword.

        Values are collected while literals separated by commas keep
        coming; the first non-literal or missing comma ends the list.
        """
        if not self._match(TokenType.LPAREN):
            raise self._error(EXPECTED_PRINT_OPEN, hint="write print(value, ...)")

        values = []
        while self._check(TokenType.LITERAL):
            values.append(self._advance().literal)

            if not self._match(TokenType.COMMA):
                break

        if not self._match(TokenType.RPAREN):
            raise self._error(
                EXPECTED_PRINT_CLOSE,
                hint="print arguments are literals separated by ','",
            )

        return PrintStatement(location=keyword.location, values=values)

    def _parse_let(self, keyword: Token) -> LetStatement:
        """Parse the rest of a let statement after the 'let' keyword."""
        key = self._peek()
        if key is None or not key.is_text_literal():
            raise self._error(EXPECTED_LET_NAME, hint="variable names start with a letter")
        self._advance()

        if not self._match(TokenType.TO):
            raise self._error(EXPECTED_LET_TO, hint="write let <name> to <value>")

        value = self._match(TokenType.LITERAL)
        if value is None:
            raise self._error(EXPECTED_LET_VALUE)

        return LetStatement(location=keyword.location, key=key, value=value)


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: list[Token], filename: str = "<input>") -> list[Statement]:
    """
    Parse tokens into a list of statements.

    Malformed statements are logged and dropped; use Parser directly to
    inspect the collected errors.
    """
    return Parser(tokens, filename).parse().statements


def parse_source(source: str, filename: str = "<input>") -> ProgramNode:
    """
    Tokenize and parse Zynk source code.

    Raises:
        IntegerOverflowError: If an integer literal exceeds 32 bits
    """
    return Parser(tokenize(source, filename), filename).parse()
