#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/options.py
"""Configuration options for reconstruction and diff rendering.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy. Every field carries help text in its metadata.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from pdf_text_diff.constants import (
    DEFAULT_COLOR_MODE,
    DEFAULT_CONTEXT_LINES,
    DEFAULT_INLINE_RATIO_THRESHOLD,
    DEFAULT_LINE_NUMBER_WIDTH,
    DEFAULT_PDF_PASSWORD,
    DEFAULT_SEPARATOR_WIDTH,
    DEFAULT_STRICT_PARSING,
    ColorMode,
)
from pdf_text_diff.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ReconstructionOptions(CloneFrozenMixin):
    """Options controlling how PDF documents are opened.

    Parameters
    ----------
    password : str, default ""
        User password tried when the document is encrypted. The empty
        password opens documents that only restrict permissions.
    strict : bool, default False
        Pass strict mode to the PDF reader so recoverable structural
        problems are raised instead of logged.

    """

    password: str = field(
        default=DEFAULT_PDF_PASSWORD,
        metadata={"help": "Password used to decrypt encrypted documents"},
    )
    strict: bool = field(
        default=DEFAULT_STRICT_PARSING,
        metadata={"help": "Fail on recoverable PDF structure problems"},
    )


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Options controlling the line diff and its terminal report.

    Parameters
    ----------
    context_lines : int, default 3
        Unchanged lines shown around each changed region.
    separator_width : int, default 80
        Width of the rule printed between groups.
    line_number_width : int, default 4
        Width of each line-number column.
    inline_ratio_threshold : float, default 0.5
        Minimum word-level similarity for a replaced block to get inline
        emphasis. Below it, the block is shown as plain deletes and inserts.
    color : {"auto", "always", "never"}, default "auto"
        Terminal styling. ``auto`` styles only when stdout is a terminal.

    """

    context_lines: int = field(
        default=DEFAULT_CONTEXT_LINES,
        metadata={"help": "Unchanged context lines around each change", "type": int},
    )
    separator_width: int = field(
        default=DEFAULT_SEPARATOR_WIDTH,
        metadata={"help": "Width of the rule between change groups", "type": int},
    )
    line_number_width: int = field(
        default=DEFAULT_LINE_NUMBER_WIDTH,
        metadata={"help": "Width of each line-number column", "type": int},
    )
    inline_ratio_threshold: float = field(
        default=DEFAULT_INLINE_RATIO_THRESHOLD,
        metadata={"help": "Minimum similarity for inline emphasis", "type": float},
    )
    color: ColorMode = field(
        default=DEFAULT_COLOR_MODE,
        metadata={"help": "Colorize output: auto, always or never", "choices": ["auto", "always", "never"]},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and the color mode."""
        if self.context_lines < 0:
            raise ValidationError(
                f"context_lines must be non-negative, got {self.context_lines}",
                parameter_name="context_lines",
                parameter_value=self.context_lines,
            )
        if self.separator_width < 1:
            raise ValidationError(
                f"separator_width must be positive, got {self.separator_width}",
                parameter_name="separator_width",
                parameter_value=self.separator_width,
            )
        if self.line_number_width < 1:
            raise ValidationError(
                f"line_number_width must be positive, got {self.line_number_width}",
                parameter_name="line_number_width",
                parameter_value=self.line_number_width,
            )
        if not 0.0 <= self.inline_ratio_threshold <= 1.0:
            raise ValidationError(
                f"inline_ratio_threshold must be between 0 and 1, got {self.inline_ratio_threshold}",
                parameter_name="inline_ratio_threshold",
                parameter_value=self.inline_ratio_threshold,
            )
        if self.color not in ("auto", "always", "never"):
            raise ValidationError(
                f"color must be one of auto, always, never; got {self.color!r}",
                parameter_name="color",
                parameter_value=self.color,
            )
