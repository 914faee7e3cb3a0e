#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/sources/base.py
"""Document source interfaces.

The reconstructor only needs an ordered sequence of pages, each yielding an
ordered sequence of content operations. Any object with this shape can be
reconstructed, which keeps the core independent of the PDF library.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

from pdf_text_diff.content import ContentOperation


@runtime_checkable
class Page(Protocol):
    """A single page exposing its decoded content operations."""

    def operations(self) -> Iterator[ContentOperation]:
        """Yield content operations in stream order.

        Raises
        ------
        DocumentDecodeError
            If the page's content stream cannot be decoded

        """
        ...


@runtime_checkable
class DocumentSource(Protocol):
    """An ordered sequence of pages."""

    def pages(self) -> Iterator[Page]:
        """Yield pages in document order.

        Raises
        ------
        DocumentDecodeError
            If the page list or an individual page cannot be produced

        """
        ...
