#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/reconstruct.py
"""Linear text reconstruction from content operations.

PDF content streams do not store lines of text, only positioned glyph runs
and text-matrix changes. This module rebuilds a reading-order string in a
single pass:

- glyph runs are appended with no separator
- ``T*`` style operations force a line break
- a text matrix whose vertical translation differs from the previous one
  starts a new line

The vertical comparison is exact float equality, so sub-unit jitter between
two matrices on the same visual line produces an extra line break.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from pdf_text_diff.constants import LINE_BREAK, REPLACEMENT_CHARACTER
from pdf_text_diff.content import (
    ContentOperation,
    DrawAdjustedText,
    DrawText,
    NewLine,
    SetTextMatrix,
    decode_lossy,
)
from pdf_text_diff.options import ReconstructionOptions
from pdf_text_diff.sources.base import DocumentSource
from pdf_text_diff.sources.pdf import open_document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconstructionState:
    """Accumulator threaded through one reconstruction pass.

    Attributes
    ----------
    fragments : list of str
        Append-only pieces of the output text
    last_y : float or None
        Vertical translation of the last text matrix, None before the first

    """

    fragments: list[str] = field(default_factory=list)
    last_y: float | None = None

    @property
    def text(self) -> str:
        """Return the text accumulated so far."""
        return "".join(self.fragments)


def apply_operation(state: ReconstructionState, operation: ContentOperation) -> ReconstructionState:
    """Apply one content operation to the reconstruction state.

    Parameters
    ----------
    state : ReconstructionState
        Current accumulator
    operation : ContentOperation
        Operation to apply

    Returns
    -------
    ReconstructionState
        The updated accumulator

    """
    if isinstance(operation, DrawText):
        state.fragments.append(decode_lossy(operation.data))
    elif isinstance(operation, DrawAdjustedText):
        state.fragments.append("".join(decode_lossy(run) for run in operation.text_runs()))
    elif isinstance(operation, NewLine):
        state.fragments.append(LINE_BREAK)
    elif isinstance(operation, SetTextMatrix):
        y = operation.matrix.vertical_translation
        if state.last_y is not None and y != state.last_y:
            state.fragments.append(LINE_BREAK)
        state.last_y = y
    return state


def reconstruct_text(document: DocumentSource) -> str:
    """Reconstruct the reading-order text of a document.

    Parameters
    ----------
    document : DocumentSource
        Document whose pages are read in order

    Returns
    -------
    str
        The reconstructed text with inferred line breaks

    Raises
    ------
    DocumentDecodeError
        If the page list or any page's content stream cannot be decoded

    Examples
    --------
        >>> from pdf_text_diff.content import DrawText, NewLine
        >>> from pdf_text_diff.sources import MemoryDocument
        >>> reconstruct_text(MemoryDocument.from_operations([DrawText(b"a"), NewLine(), DrawText(b"b")]))
        'a\\nb'

    """
    state = ReconstructionState()
    page_count = 0
    for page in document.pages():
        page_count += 1
        for operation in page.operations():
            state = apply_operation(state, operation)

    text = state.text
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Reconstructed %d characters on %d lines from %d pages (%d replacement characters)",
            len(text),
            text.count(LINE_BREAK) + 1 if text else 0,
            page_count,
            text.count(REPLACEMENT_CHARACTER),
        )
    return text


def reconstruct_file(path: Union[str, Path], options: ReconstructionOptions | None = None) -> str:
    """Open a PDF file and reconstruct its text.

    Parameters
    ----------
    path : str or Path
        Path to the PDF file
    options : ReconstructionOptions, optional
        Settings used to open the document

    Returns
    -------
    str
        The reconstructed text

    Raises
    ------
    DocumentOpenError
        If the file cannot be opened as a PDF
    DocumentDecodeError
        If any page cannot be decoded

    """
    logger.debug("Reconstructing text from %s", path)
    return reconstruct_text(open_document(path, options))
