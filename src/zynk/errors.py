"""
Zynk Compiler Error Hierarchy
=============================

This module defines the exception hierarchy for the Zynk compiler.
All exceptions inherit from ZynkError, allowing callers to catch all
compiler-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
ZynkError (base)
├── TokenizeError - lexical errors
│   └── IntegerOverflowError - integer literal outside 32-bit range
├── ParseError - malformed statement (collected, not raised, by the parser)
└── LoadError - reading the source file failed
    ├── SourceNotFoundError - file or entry file missing
    └── SourceDecodeError - file is not valid UTF-8

Error Message Format
--------------------
Errors carry source location information when available:

    filename:line:column: error: description
    hint: suggestion for fixing (when available)

Example:
    hello.zynk:3:7: error: Expected 'to' after variable name
    hint: write let <name> to <value>
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class ZynkError(Exception):
    """
    Base exception for all Zynk compiler errors.

    Provides common formatting for error messages including source
    location and an optional hint:

        try:
            compile_zynk(source)
        except ZynkError as e:
            print(f"Error: {e}")

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location prefix and hint."""
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Tokenizer Errors
# =============================================================================

class TokenizeError(ZynkError):
    """
    Error raised while converting source text into tokens.

    Tokenizer errors are fatal: the lexer stops at the first one.
    """
    pass


class IntegerOverflowError(TokenizeError):
    """
    Integer literal does not fit in a 32-bit signed integer.

    Example:
        print(99999999999)
    """

    def __init__(
        self,
        digits: str,
        location: Optional[SourceLocation] = None,
    ):
        self.digits = digits
        super().__init__(
            f"integer literal '{digits}' out of range",
            location=location,
            hint="integer literals must be at most 2147483647",
        )


# =============================================================================
# Parser Errors
# =============================================================================

class ParseError(ZynkError):
    """
    Malformed statement.

    Parser.parse never lets these escape. Each one is collected and
    parsing resumes with the next statement attempt.
    """
    pass


# =============================================================================
# Source Loading Errors
# =============================================================================

class LoadError(ZynkError):
    """
    Error reading a Zynk source file.

    Attributes:
        path: The path that could not be read
    """

    def __init__(self, message: str, path: str, hint: Optional[str] = None):
        self.path = path
        super().__init__(message, hint=hint)


class SourceNotFoundError(LoadError):
    """Source file (or the directory entry file) does not exist."""

    def __init__(self, path: str):
        super().__init__(f"source file not found: {path}", path)


class SourceDecodeError(LoadError):
    """Source file exists but is not valid UTF-8 text."""

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(
            f"cannot decode '{path}': {reason}",
            path,
            hint="Zynk sources must be UTF-8 encoded",
        )


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ErrorCollector:
    """
    Collects multiple errors for batch reporting.

    The parser uses this to keep going after a malformed statement,
    collecting every error before the caller reports them together.

    Example:
        collector = ErrorCollector()
        collector.add(ParseError("Expected value after 'to'"))

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self):
        self.errors: list[ZynkError] = []
        self.warnings: list[str] = []

    def add(self, error: ZynkError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def add_warning(self, message: str, location: Optional[SourceLocation] = None) -> None:
        """Add a warning message."""
        if location:
            self.warnings.append(f"{location}: warning: {message}")
        else:
            self.warnings.append(f"warning: {message}")

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def warning_count(self) -> int:
        """Return the number of collected warnings."""
        return len(self.warnings)

    def report(self) -> str:
        """Format all errors and warnings for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        for warning in self.warnings:
            lines.append(warning)

        error_word = "error" if len(self.errors) == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(
            f"\n{len(self.errors)} {error_word}, {len(self.warnings)} {warning_word}"
        )

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors and warnings."""
        self.errors.clear()
        self.warnings.clear()
