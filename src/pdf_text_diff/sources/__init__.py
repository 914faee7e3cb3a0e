#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/sources/__init__.py
"""Document sources consumed by the text reconstructor.

- ``DocumentSource`` / ``Page``: the structural interfaces
- ``PdfDocument``: PDF files read with pypdf (see ``open_document``)
- ``MemoryDocument``: synthetic documents built from operation lists
"""

from pdf_text_diff.sources.base import DocumentSource, Page
from pdf_text_diff.sources.memory import MemoryDocument, MemoryPage
from pdf_text_diff.sources.pdf import PdfDocument, PdfPage, open_document, translate_operation

__all__ = [
    "DocumentSource",
    "MemoryDocument",
    "MemoryPage",
    "Page",
    "PdfDocument",
    "PdfPage",
    "open_document",
    "translate_operation",
]
