"""
Zynk - A Tiny Scripting Language Compiled to C++
================================================

This package implements a source-to-source compiler for Zynk, a minimal
scripting language with variable declarations and printing. Programs are
translated into a single C++ `main()` function.

Main Components
---------------
- **lexer**: Converts Zynk source text into tokens
- **parser**: Builds the statement list, collecting errors per statement
- **codegen**: Emits C++ source and the includes it needs
- **compiler**: Runs the pipeline and loads source files
- **cli**: The `zynkc` command-line tool

Quick Start
-----------
    >>> from zynk import compile_zynk
    >>> print(compile_zynk('let name to 7 print(name)'))
    #include <iostream>
    <BLANKLINE>
    int main() {
    int name=7;
    std::cout<<name<<std::endl;
    }

Or use the command-line tool:
    $ zynkc hello.zynk
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from zynk.errors import (
    ZynkError,
    SourceLocation,
    TokenizeError,
    IntegerOverflowError,
    ParseError,
    LoadError,
    SourceNotFoundError,
    SourceDecodeError,
    ErrorCollector,
)
from zynk.lexer import Lexer, Token, TokenType, LiteralKind, LiteralValue, tokenize
from zynk.ast import ProgramNode, Statement, PrintStatement, LetStatement, ASTPrinter
from zynk.parser import Parser, parse, parse_source
from zynk.codegen import CodeGenerator, generate
from zynk.compiler import (
    ZynkCompiler,
    CompilerOptions,
    CompilerResult,
    compile_zynk,
    compile_file,
    load_source,
    resolve_source_path,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "ZynkError",
    "SourceLocation",
    "TokenizeError",
    "IntegerOverflowError",
    "ParseError",
    "LoadError",
    "SourceNotFoundError",
    "SourceDecodeError",
    "ErrorCollector",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "LiteralKind",
    "LiteralValue",
    "tokenize",
    # Statements
    "ProgramNode",
    "Statement",
    "PrintStatement",
    "LetStatement",
    "ASTPrinter",
    # Parser
    "Parser",
    "parse",
    "parse_source",
    # Code Generator
    "CodeGenerator",
    "generate",
    # Compiler
    "ZynkCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_zynk",
    "compile_file",
    "load_source",
    "resolve_source_path",
]
