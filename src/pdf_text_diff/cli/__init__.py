#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for pdf-text-diff.

Compares the text of two PDF documents and prints a numbered, colour-coded
diff of their lines.

Examples
--------
Compare two revisions::

    $ pdf-text-diff report_v1.pdf report_v2.pdf

Pipe the plain report to a file::

    $ pdf-text-diff old.pdf new.pdf > changes.txt

"""

from __future__ import annotations

import logging
import sys

from pdf_text_diff.api import compare_files
from pdf_text_diff.cli.builder import (
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from pdf_text_diff.diff.renderers.terminal import TerminalDiffRenderer
from pdf_text_diff.exceptions import PdfTextDiffError, UsageError
from pdf_text_diff.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def main(args: list[str] | None = None) -> int:
    """Execute the command-line entry point.

    Parameters
    ----------
    args : list of str, optional
        Arguments without the program name; ``sys.argv[1:]`` by default

    Returns
    -------
    int
        Process exit code

    """
    configure_logging(logging.WARNING)
    argv = sys.argv[1:] if args is None else args

    try:
        parsed = create_parser().parse_args(argv)
    except UsageError as e:
        print(e.message, file=sys.stderr)
        return get_exit_code_for_exception(e)

    try:
        diff_result = compare_files(parsed.old, parsed.new)
        if not diff_result.has_changes:
            logger.info("No differences found.")
        TerminalDiffRenderer().write(diff_result)
    except PdfTextDiffError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error comparing documents: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
