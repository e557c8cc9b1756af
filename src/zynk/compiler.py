"""
Zynk Compiler Main Module
=========================

This module provides the main compiler interface for Zynk. It
orchestrates the complete compilation process:

    Source → Lex → Parse → Generate → C++

Usage
-----
Command line:
    $ zynkc hello.zynk
    $ zynkc project/          # compiles project/init.zynk

Programmatic:
    >>> from zynk import compile_zynk
    >>> cpp = compile_zynk('print(1, 2)')

Error Handling
--------------
Malformed statements do not stop compilation: their errors are collected
in the CompilerResult and code is generated for the statements that did
parse. Integer overflow and unreadable source files are fatal and raise.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from zynk.lexer import Lexer, Token
from zynk.parser import Parser
from zynk.codegen import CodeGenerator
from zynk.ast import ProgramNode
from zynk.errors import (
    ZynkError,
    ErrorCollector,
    SourceNotFoundError,
    SourceDecodeError,
)

logger = logging.getLogger(__name__)

# File compiled when the input path is a directory
DEFAULT_ENTRY = "init.zynk"


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        strict: Report discarded characters and skipped top-level tokens
                as warnings. They are never errors.
        default_entry: File name read when the input path is not a file
    """
    strict: bool = False
    default_entry: str = DEFAULT_ENTRY


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        source: The source text that was compiled
        success: True if every statement parsed
        code: Generated C++ source
        includes: Include targets used by the generated code
        tokens: Tokens produced by the lexer
        ast: The parsed program
        errors: Parse errors, one per malformed statement
        warnings: Strict-mode warnings
    """
    filename: str = ""
    source: str = ""
    success: bool = False
    code: str = ""
    includes: list[str] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[ProgramNode] = None
    errors: list[ZynkError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class ZynkCompiler:
    """
    Zynk to C++ compiler.

    Example:
        compiler = ZynkCompiler()
        result = compiler.compile_file("hello.zynk")
        print(result.code)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()
        self._diagnostics = ErrorCollector()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile Zynk source code to C++.

        Args:
            source: Zynk source code string
            filename: Source filename for error messages

        Returns:
            CompilerResult containing the generated code and diagnostics

        Raises:
            IntegerOverflowError: If an integer literal exceeds 32 bits
        """
        self._diagnostics.clear()
        result = CompilerResult(filename=filename, source=source)

        # Stage 1: Lexical analysis
        lexer = Lexer(source, filename)
        result.tokens = lexer.tokenize()

        # Stage 2: Parsing
        parser = Parser(result.tokens, filename)
        result.ast = parser.parse()
        for error in parser.errors:
            self._diagnostics.add(error)

        if self.options.strict:
            for char, location in lexer.discarded:
                self._diagnostics.add_warning(f"discarded unknown character {char!r}", location)
            for token in parser.skipped:
                self._diagnostics.add_warning(
                    f"skipped token {token.type.name.lower()} that cannot start a statement",
                    token.location,
                )

        # Stage 3: Code generation
        generator = CodeGenerator()
        result.code = generator.generate(result.ast)
        result.includes = generator.includes

        result.errors = list(self._diagnostics.errors)
        result.warnings = list(self._diagnostics.warnings)
        result.success = not self._diagnostics.has_errors()

        logger.debug(
            f"Compiled {filename}: {len(result.ast.statements)} statements, "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    def compile_file(self, filepath: str | Path) -> CompilerResult:
        """
        Compile a Zynk source file (or a directory's entry file) to C++.

        Raises:
            SourceNotFoundError: If the source file does not exist
            SourceDecodeError: If the source file is not UTF-8
            IntegerOverflowError: If an integer literal exceeds 32 bits
        """
        path = resolve_source_path(filepath, self.options.default_entry)
        return self.compile_source(load_source(path), str(path))

    def report(self) -> str:
        """Format the diagnostics of the last compilation."""
        return self._diagnostics.report()


# =============================================================================
# Source Loading
# =============================================================================

def resolve_source_path(path: str | Path, default_entry: str = DEFAULT_ENTRY) -> Path:
    """
    Resolve the file to compile.

    A path naming an existing file is used as-is; anything else (a
    directory, or a path that does not exist) has the default entry file
    name appended.
    """
    path = Path(path)
    if path.is_file():
        return path
    return path / default_entry


def load_source(path: str | Path) -> str:
    """
    Read a source file as UTF-8 text.

    Raises:
        SourceNotFoundError: If the file does not exist
        SourceDecodeError: If the file is not valid UTF-8
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        raise SourceNotFoundError(str(path)) from None
    except UnicodeDecodeError as e:
        raise SourceDecodeError(str(path), e.reason) from e

    logger.debug(f"Loaded {path} ({len(source)} characters)")
    return source


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_zynk(source: str, filename: str = "<input>") -> str:
    """
    Compile Zynk source code to C++.

    Malformed statements are dropped from the output; use ZynkCompiler to
    inspect the collected errors.

    Example:
        >>> print(compile_zynk('print(hi)'))
        #include <iostream>
        <BLANKLINE>
        int main() {
        std::cout<<hi<<std::endl;
        }
    """
    return ZynkCompiler().compile_source(source, filename).code


def compile_file(
    filepath: str | Path,
    output_path: Optional[str | Path] = None,
) -> str:
    """
    Compile a Zynk source file to C++.

    Args:
        filepath: Path to a .zynk file, or a directory holding init.zynk
        output_path: Optional path to write the C++ output

    Returns:
        Generated C++ source code
    """
    result = ZynkCompiler().compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.code, encoding="utf-8")

    return result.code
