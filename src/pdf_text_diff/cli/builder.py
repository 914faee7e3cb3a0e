#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/cli/builder.py
"""Argument parser and exit codes for the pdf-text-diff command.

The command takes exactly two positional arguments and no flags. Any other
argument list is a usage error reported with the one-line usage text.
"""

from __future__ import annotations

import argparse
from typing import NoReturn

from pdf_text_diff.constants import PROG_NAME, USAGE
from pdf_text_diff.exceptions import (
    DocumentDecodeError,
    DocumentOpenError,
    PasswordProtectedError,
    UsageError,
    ValidationError,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_PASSWORD_ERROR = 9


class _StrictArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(USAGE)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser accepting ``old`` and ``new`` document paths

    """
    parser = _StrictArgumentParser(prog=PROG_NAME, usage=USAGE, add_help=False)
    parser.add_argument("old", help="Original PDF document")
    parser.add_argument("new", help="Updated PDF document")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    # Password errors are a kind of open error, so check them first
    if isinstance(exception, PasswordProtectedError):
        return EXIT_PASSWORD_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, DocumentOpenError):
        return EXIT_FILE_ERROR

    if isinstance(exception, DocumentDecodeError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR
