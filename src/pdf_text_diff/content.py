#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/content.py
"""Content operations consumed by the text reconstructor.

A page's decoded content stream is modelled as a sequence of small frozen
dataclasses. Only the text-showing and text-positioning operations carry
data; every other PDF operator is represented by :class:`OtherOperation`
and ignored during reconstruction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class TextMatrix:
    """Affine text matrix ``[a b c d e f]`` as given to the ``Tm`` operator."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @property
    def vertical_translation(self) -> float:
        """Combined vertical component used to detect line changes."""
        return self.d + self.f


@dataclass(frozen=True, slots=True)
class DrawText:
    """Show a string of glyph bytes (``Tj``)."""

    data: bytes


@dataclass(frozen=True, slots=True)
class DrawAdjustedText:
    """Show glyph runs interleaved with spacing adjustments (``TJ``).

    Items are either ``bytes`` runs or numeric kerning adjustments.
    """

    items: tuple[Union[bytes, float], ...]

    def text_runs(self) -> list[bytes]:
        """Return the byte runs, dropping spacing adjustments."""
        return [item for item in self.items if isinstance(item, bytes)]


@dataclass(frozen=True, slots=True)
class NewLine:
    """Move to the start of the next line (``T*``)."""


@dataclass(frozen=True, slots=True)
class SetTextMatrix:
    """Replace the text matrix (``Tm``)."""

    matrix: TextMatrix


@dataclass(frozen=True, slots=True)
class OtherOperation:
    """Any operator without meaning for text reconstruction."""

    operator: str


ContentOperation = Union[DrawText, DrawAdjustedText, NewLine, SetTextMatrix, OtherOperation]


def decode_lossy(data: bytes) -> str:
    """Decode glyph bytes as UTF-8, replacing invalid sequences.

    Never raises: malformed bytes become U+FFFD REPLACEMENT CHARACTER.

    Parameters
    ----------
    data : bytes
        Raw glyph bytes from a text-showing operator

    Returns
    -------
    str
        Decoded text

    """
    return data.decode("utf-8", errors="replace")
