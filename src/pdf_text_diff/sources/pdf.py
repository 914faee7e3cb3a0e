#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/sources/pdf.py
"""PDF document source backed by pypdf.

pypdf handles the binary side of the format: cross-reference tables, the
page tree, stream filters and content-stream tokenisation. This module only
translates the resulting ``(operands, operator)`` pairs into the content
operations understood by the reconstructor.

Operator mapping
----------------
- ``Tj`` -> DrawText
- ``TJ`` -> DrawAdjustedText
- ``T*`` -> NewLine
- ``'`` and ``"`` -> NewLine followed by DrawText
- ``Tm`` -> SetTextMatrix
- everything else -> OtherOperation

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Sequence, Union

from pypdf import PasswordType, PdfReader
from pypdf.errors import DependencyError, PyPdfError
from pypdf.generic import TextStringObject

from pdf_text_diff.content import (
    ContentOperation,
    DrawAdjustedText,
    DrawText,
    NewLine,
    OtherOperation,
    SetTextMatrix,
    TextMatrix,
)
from pdf_text_diff.exceptions import DocumentDecodeError, DocumentOpenError, PasswordProtectedError
from pdf_text_diff.options import ReconstructionOptions

logger = logging.getLogger(__name__)

# pypdf surfaces structural damage as its own errors but also as plain
# lookup/type errors from deep inside object resolution
_DECODE_ERRORS = (PyPdfError, KeyError, IndexError, ValueError, TypeError, AttributeError)


def _operand_bytes(operand: Any) -> bytes | None:
    """Return the raw bytes of a string operand, or None if not a string."""
    if isinstance(operand, TextStringObject):
        return operand.original_bytes
    if isinstance(operand, bytes):
        return bytes(operand)
    if isinstance(operand, str):
        return operand.encode("utf-8")
    return None


def _operand_number(operand: Any) -> float | None:
    if isinstance(operand, bool):
        return None
    if isinstance(operand, (int, float)):
        return float(operand)
    return None


def translate_operation(operands: Sequence[Any], operator: bytes) -> list[ContentOperation]:
    """Translate one pypdf content-stream operation.

    Parameters
    ----------
    operands : sequence
        Operands parsed by pypdf
    operator : bytes
        Operator token, e.g. ``b"Tj"``

    Returns
    -------
    list of ContentOperation
        Zero or more operations. Text operators with malformed operands
        become a single OtherOperation.

    """
    name = operator.decode("latin-1")

    if name == "Tj" and operands:
        data = _operand_bytes(operands[0])
        if data is not None:
            return [DrawText(data)]

    elif name == "TJ" and operands and isinstance(operands[0], list):
        items: list[Union[bytes, float]] = []
        for item in operands[0]:
            data = _operand_bytes(item)
            if data is not None:
                items.append(data)
                continue
            number = _operand_number(item)
            if number is not None:
                items.append(number)
        return [DrawAdjustedText(tuple(items))]

    elif name == "T*":
        return [NewLine()]

    elif name == "'" and operands:
        data = _operand_bytes(operands[-1])
        if data is not None:
            return [NewLine(), DrawText(data)]

    elif name == '"' and len(operands) >= 3:
        data = _operand_bytes(operands[2])
        if data is not None:
            return [NewLine(), DrawText(data)]

    elif name == "Tm" and len(operands) >= 6:
        values = [_operand_number(value) for value in operands[:6]]
        if all(value is not None for value in values):
            return [SetTextMatrix(TextMatrix(*values))]  # type: ignore[arg-type]

    return [OtherOperation(name)]


class PdfPage:
    """One page of a :class:`PdfDocument`."""

    def __init__(self, page: Any, page_number: int):
        self._page = page
        self.page_number = page_number

    def operations(self) -> Iterator[ContentOperation]:
        """Yield the page's content operations.

        Raises
        ------
        DocumentDecodeError
            If the content stream cannot be read or tokenised
        DocumentOpenError
            If decrypting the stream needs a missing crypto backend

        """
        try:
            contents = self._page.get_contents()
            raw_operations = contents.operations if contents is not None else []
        except DependencyError as e:
            raise DocumentOpenError(
                f"Cannot decrypt content stream of page {self.page_number}: {e}", original_error=e
            ) from e
        except _DECODE_ERRORS as e:
            raise DocumentDecodeError(
                f"Failed to decode content stream of page {self.page_number}: {e}",
                page_number=self.page_number,
                original_error=e,
            ) from e

        logger.debug("Page %d: %d content operations", self.page_number, len(raw_operations))
        for operands, operator in raw_operations:
            yield from translate_operation(operands, operator)


class PdfDocument:
    """A PDF file opened with pypdf.

    Use :func:`open_document` to create instances.
    """

    def __init__(self, reader: PdfReader, file_path: str | None = None):
        self._reader = reader
        self.file_path = file_path

    def pages(self) -> Iterator[PdfPage]:
        """Yield pages in document order.

        Raises
        ------
        DocumentDecodeError
            If the page tree or a page object cannot be resolved
        DocumentOpenError
            If the page tree needs a missing crypto backend

        """
        try:
            page_count = len(self._reader.pages)
        except DependencyError as e:
            raise DocumentOpenError(f"Cannot decrypt page tree: {e}", file_path=self.file_path, original_error=e) from e
        except _DECODE_ERRORS as e:
            raise DocumentDecodeError(f"Failed to read page tree: {e}", original_error=e) from e

        for index in range(page_count):
            try:
                page = self._reader.pages[index]
            except _DECODE_ERRORS as e:
                raise DocumentDecodeError(
                    f"Failed to read page {index + 1}: {e}", page_number=index + 1, original_error=e
                ) from e
            yield PdfPage(page, index + 1)


def open_document(path: Union[str, Path], options: ReconstructionOptions | None = None) -> PdfDocument:
    """Open a PDF file for reconstruction.

    Parameters
    ----------
    path : str or Path
        Path to the PDF file
    options : ReconstructionOptions, optional
        Password and strictness settings

    Returns
    -------
    PdfDocument
        The opened document

    Raises
    ------
    DocumentOpenError
        If the file does not exist, cannot be read or is not a PDF
    PasswordProtectedError
        If the document is encrypted and the password does not open it

    """
    options = options or ReconstructionOptions()
    file_path = str(path)

    if not Path(path).is_file():
        raise DocumentOpenError(f"File not found: {file_path}", file_path=file_path)

    try:
        reader = PdfReader(file_path, strict=options.strict)
    except (OSError, DependencyError, *_DECODE_ERRORS) as e:
        raise DocumentOpenError(
            f"Failed to open PDF document {file_path}: {e}", file_path=file_path, original_error=e
        ) from e

    if reader.is_encrypted:
        try:
            result = reader.decrypt(options.password)
        except DependencyError as e:
            raise DocumentOpenError(
                f"Cannot decrypt PDF document {file_path}: {e}", file_path=file_path, original_error=e
            ) from e
        except _DECODE_ERRORS as e:
            raise PasswordProtectedError(
                f"Failed to decrypt PDF document {file_path}: {e}", file_path=file_path, original_error=e
            ) from e
        if result == PasswordType.NOT_DECRYPTED:
            raise PasswordProtectedError(file_path=file_path)
        logger.debug("Decrypted %s (%s)", file_path, result.name)

    return PdfDocument(reader, file_path=file_path)
