"""
zynkc - Zynk Compiler Command-Line Interface
============================================

This module implements the command-line interface for the Zynk compiler.
It reads a Zynk program, reports any parse errors, and prints the
program followed by the generated C++.

Usage Examples
--------------
Compile a file:
    $ zynkc hello.zynk

Compile a project directory (reads project/init.zynk):
    $ zynkc project/

Also write the C++ to a file:
    $ zynkc hello.zynk -o hello.cpp

Verbose mode:
    $ zynkc -v hello.zynk
"""

import logging
from pathlib import Path
from typing import Optional

import click

from zynk import __version__
from zynk.ast import ASTPrinter
from zynk.compiler import ZynkCompiler, CompilerOptions, CompilerResult
from zynk.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


# =============================================================================
# Output Framing
# =============================================================================

SOURCE_HEADING = "          ⇊     User input   ⇊"
RESULT_HEADING = "          ⇊ Compiler results ⇊"
SOURCE_RULE = "----- Zynk ----------------------"
RESULT_RULE = "----- C++ -----------------------"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def echo_section(heading: str, rule: str, body: str) -> None:
    """Print a blank line, a heading, and the body framed by rules."""
    click.echo("")
    click.echo(heading)
    click.echo(rule)
    click.echo(body)
    click.echo(rule)


def echo_result(result: CompilerResult) -> None:
    """Print the source program followed by the generated C++."""
    echo_section(SOURCE_HEADING, SOURCE_RULE, result.source)
    echo_section(RESULT_HEADING, RESULT_RULE, result.code)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "path",
    type=click.Path(path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the generated C++ to this file",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Warn about discarded characters and skipped tokens",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the parsed statements and exit (for debugging)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="zynkc")
def main(
    path: Path,
    output: Optional[Path],
    strict: bool,
    ast: bool,
    verbose: bool,
) -> None:
    """
    Compile a Zynk program to C++.

    PATH is a Zynk source file, or a directory containing init.zynk.

    \b
    Examples:
        zynkc hello.zynk               # Print source and C++
        zynkc project/                 # Compile project/init.zynk
        zynkc hello.zynk -o hello.cpp  # Also write hello.cpp
        zynkc --strict hello.zynk      # Warn about ignored input
    """
    setup_logging(verbose)

    options = CompilerOptions(strict=strict)

    try:
        compiler = ZynkCompiler(options)
        result = compiler.compile_file(path)

        for error in result.errors:
            click.echo(f"!!! -> Error while parsing: {error.message}")

        for warning in result.warnings:
            click.echo(warning, err=True)

        if ast:
            click.echo(ASTPrinter().print(result.ast))
            return

        echo_result(result)

        if output is not None:
            output.write_text(result.code, encoding="utf-8")
            logger.info(f"Wrote {len(result.code)} characters to {output}")

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens")
            click.echo(f"Parsed: {len(result.ast.statements)} statements")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
