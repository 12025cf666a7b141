"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes across CLI commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    TRANSLATION_ERROR = 1  # Invalid token, bad container, checksum mismatch
    INVALID_ARGS = 2       # Invalid arguments, unreadable or unwritable files
    INTERNAL_ERROR = 3     # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Unified exception handler for CLI commands.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Compile")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from tibasic.errors import TIBasicError, TokenizeError

    if isinstance(error, TokenizeError):
        # Tokenizer errors already carry location and "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.TRANSLATION_ERROR)

    elif isinstance(error, TIBasicError):
        prefix = f"{error_type} error: " if error_type else "Error: "
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.TRANSLATION_ERROR)

    elif isinstance(error, (click.BadParameter, ValueError)):
        # Invalid names, comments or arguments
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, OSError):
        # Missing input, permission denied, output is a directory, ...
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
