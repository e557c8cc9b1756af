"""
CLI Error Handling
==================

Maps compiler exceptions to messages and exit codes for the zynkc tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from zynk.errors import ZynkError, LoadError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Tokenize or compilation error
    INVALID_ARGS = 2     # Invalid arguments or unreadable source
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, LoadError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, ZynkError):
        # Compiler errors already carry the "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, PermissionError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
