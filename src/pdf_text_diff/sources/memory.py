#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/sources/memory.py
"""In-memory document sources built from explicit operation lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from pdf_text_diff.content import ContentOperation
from pdf_text_diff.exceptions import DocumentDecodeError


@dataclass(frozen=True)
class MemoryPage:
    """Page backed by a fixed tuple of operations.

    Parameters
    ----------
    ops : tuple of ContentOperation
        Operations returned by :meth:`operations`
    decode_error : str, optional
        When set, :meth:`operations` raises DocumentDecodeError with this
        message instead of yielding anything

    """

    ops: tuple[ContentOperation, ...] = ()
    decode_error: str | None = None
    page_number: int | None = None

    def operations(self) -> Iterator[ContentOperation]:
        """Yield the stored operations."""
        if self.decode_error is not None:
            raise DocumentDecodeError(self.decode_error, page_number=self.page_number)
        yield from self.ops


@dataclass(frozen=True)
class MemoryDocument:
    """Document backed by a fixed tuple of pages."""

    page_list: tuple[MemoryPage, ...] = field(default_factory=tuple)

    @classmethod
    def from_operations(cls, *pages: Sequence[ContentOperation]) -> "MemoryDocument":
        """Build a document with one page per operation sequence.

        Examples
        --------
            >>> from pdf_text_diff.content import DrawText
            >>> doc = MemoryDocument.from_operations([DrawText(b"Hello")])

        """
        return cls(
            tuple(MemoryPage(tuple(ops), page_number=number) for number, ops in enumerate(pages, start=1))
        )

    @classmethod
    def from_pages(cls, pages: Iterable[MemoryPage]) -> "MemoryDocument":
        """Build a document from prepared pages."""
        return cls(tuple(pages))

    def pages(self) -> Iterator[MemoryPage]:
        """Yield the stored pages."""
        yield from self.page_list
