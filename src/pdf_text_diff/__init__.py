#  Copyright (c) 2025 Tom Villani, Ph.D.
"""pdf-text-diff: compare the text of two PDF documents.

PDF pages store positioned glyph runs, not lines of text. This package
rebuilds each document's reading-order text from its content stream,
inferring line breaks from text-matrix moves, and renders a numbered,
colour-coded line diff of the two texts.

Examples
--------
Compare two files and print the report:
    >>> from pdf_text_diff import compare_files, render_report
    >>> result = compare_files("contract_v1.pdf", "contract_v2.pdf")
    >>> print(render_report(result), end="")

Reconstruct the text of a single document:
    >>> from pdf_text_diff import reconstruct_file
    >>> text = reconstruct_file("contract_v1.pdf")

"""

from pdf_text_diff.api import compare_documents, compare_files, render_report
from pdf_text_diff.diff import DiffResult, DifflibSequenceDiffer, SequenceDiffer, compare_texts
from pdf_text_diff.diff.renderers import TerminalDiffRenderer
from pdf_text_diff.exceptions import (
    DocumentDecodeError,
    DocumentOpenError,
    PasswordProtectedError,
    PdfTextDiffError,
    UsageError,
    ValidationError,
)
from pdf_text_diff.options import DiffOptions, ReconstructionOptions
from pdf_text_diff.reconstruct import reconstruct_file, reconstruct_text
from pdf_text_diff.sources import DocumentSource, MemoryDocument, open_document

__version__ = "0.1.0"

__all__ = [
    "DiffOptions",
    "DiffResult",
    "DifflibSequenceDiffer",
    "DocumentDecodeError",
    "DocumentOpenError",
    "DocumentSource",
    "MemoryDocument",
    "PasswordProtectedError",
    "PdfTextDiffError",
    "ReconstructionOptions",
    "SequenceDiffer",
    "TerminalDiffRenderer",
    "UsageError",
    "ValidationError",
    "compare_documents",
    "compare_files",
    "compare_texts",
    "open_document",
    "reconstruct_file",
    "reconstruct_text",
    "render_report",
]
