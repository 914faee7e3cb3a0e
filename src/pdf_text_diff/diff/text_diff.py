#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/diff/text_diff.py
"""Line diff with inline change emphasis.

Two reconstructed texts are split into lines and compared with difflib.
Changed regions are grouped with a fixed number of context lines, and each
replaced block is matched again at word level so the differing part of an
otherwise similar line can be emphasised.
"""

from __future__ import annotations

import difflib
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Literal, Protocol, Sequence

from pdf_text_diff.constants import DEFAULT_CONTEXT_LINES, DEFAULT_INLINE_RATIO_THRESHOLD

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")
_WORD_TOKEN_RE = re.compile(r"\r\n|\r|\n|\w+|[^\S\r\n]+|[^\w\s]")
_LINE_TERMINATORS = ("\r\n", "\r", "\n")


class ChangeTag(str, Enum):
    """Kind of a rendered line change."""

    DELETE = "delete"
    INSERT = "insert"
    EQUAL = "equal"

    @property
    def sign(self) -> str:
        """Single-character marker shown in the report."""
        return {"delete": "-", "insert": "+", "equal": " "}[self.value]


@dataclass(slots=True)
class DiffOp:
    """Structured diff operation between two sequences."""

    tag: Literal["replace", "delete", "insert", "equal"]
    old_slice: Sequence[str]
    new_slice: Sequence[str]
    old_range: tuple[int, int]
    new_range: tuple[int, int]


@dataclass(frozen=True, slots=True)
class InlineChange:
    """One line of a diff with its emphasis spans.

    Attributes
    ----------
    tag : ChangeTag
        Whether the line was deleted, inserted or left unchanged
    old_index, new_index : int or None
        0-based line index on each side, None where the line has no
        counterpart
    spans : tuple of (bool, str)
        ``(emphasized, text)`` pieces that concatenate to the full line,
        including its line terminator when it has one

    """

    tag: ChangeTag
    old_index: int | None
    new_index: int | None
    spans: tuple[tuple[bool, str], ...]

    @property
    def value(self) -> str:
        """Full text of the line."""
        return "".join(text for _, text in self.spans)

    @property
    def missing_newline(self) -> bool:
        """True when the source line had no trailing line break."""
        return not self.value.endswith(_LINE_TERMINATORS)


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's terminator.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line. The last line keeps no
    terminator when the text does not end with one.
    """
    return _LINE_RE.findall(text)


def _tokenize_words(text: str) -> list[str]:
    return _WORD_TOKEN_RE.findall(text)


def _split_marked_tokens(tokens: list[tuple[bool, str]]) -> list[tuple[tuple[bool, str], ...]]:
    """Regroup emphasis-marked tokens into lines of merged spans."""
    lines: list[tuple[tuple[bool, str], ...]] = []
    current: list[tuple[bool, str]] = []
    for emphasized, token in tokens:
        if current and current[-1][0] == emphasized:
            current[-1] = (emphasized, current[-1][1] + token)
        else:
            current.append((emphasized, token))
        if token in _LINE_TERMINATORS:
            lines.append(tuple(current))
            current = []
    if current:
        lines.append(tuple(current))
    return lines


class SequenceDiffer(Protocol):
    """Diff engine used by :class:`DiffResult`."""

    def grouped_operations(
        self, old_lines: Sequence[str], new_lines: Sequence[str], context_lines: int
    ) -> list[list[DiffOp]]:
        """Return diff operations grouped with ``context_lines`` of context."""
        ...

    def inline_changes(self, op: DiffOp) -> list[InlineChange]:
        """Expand one operation into per-line changes with emphasis spans."""
        ...


class DifflibSequenceDiffer:
    """SequenceDiffer built on :class:`difflib.SequenceMatcher`.

    Parameters
    ----------
    inline_ratio_threshold : float, default 0.5
        Replaced blocks whose word-level similarity ratio is below this value
        are returned as plain deletes and inserts without emphasis

    """

    def __init__(self, inline_ratio_threshold: float = DEFAULT_INLINE_RATIO_THRESHOLD):
        """Initialize the differ."""
        self.inline_ratio_threshold = inline_ratio_threshold

    def grouped_operations(
        self, old_lines: Sequence[str], new_lines: Sequence[str], context_lines: int
    ) -> list[list[DiffOp]]:
        """Group SequenceMatcher opcodes into hunks.

        Parameters
        ----------
        old_lines, new_lines : sequence of str
            Lines to compare
        context_lines : int
            Unchanged lines kept around each change

        Returns
        -------
        list of list of DiffOp
            One list per group; empty when both inputs are empty

        """
        if not old_lines and not new_lines:
            return []

        matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
        return [
            [
                DiffOp(tag, old_lines[i1:i2], new_lines[j1:j2], (i1, i2), (j1, j2))
                for tag, i1, i2, j1, j2 in group
            ]
            for group in matcher.get_grouped_opcodes(context_lines)
        ]

    def inline_changes(self, op: DiffOp) -> list[InlineChange]:
        """Expand an operation into per-line changes.

        ``replace`` blocks yield every deleted line before every inserted
        line. Other operations carry a single non-emphasised span per line.
        """
        if op.tag == "replace":
            return self._replace_changes(op)
        if op.tag == "delete":
            return self._plain(ChangeTag.DELETE, op.old_slice, op.old_range[0], None)
        if op.tag == "insert":
            return self._plain(ChangeTag.INSERT, op.new_slice, None, op.new_range[0])
        return [
            InlineChange(ChangeTag.EQUAL, op.old_range[0] + offset, op.new_range[0] + offset, ((False, line),))
            for offset, line in enumerate(op.old_slice)
        ]

    @staticmethod
    def _plain(
        tag: ChangeTag, lines: Sequence[str], old_start: int | None, new_start: int | None
    ) -> list[InlineChange]:
        return [
            InlineChange(
                tag,
                None if old_start is None else old_start + offset,
                None if new_start is None else new_start + offset,
                ((False, line),),
            )
            for offset, line in enumerate(lines)
        ]

    def _replace_changes(self, op: DiffOp) -> list[InlineChange]:
        old_tokens = _tokenize_words("".join(op.old_slice))
        new_tokens = _tokenize_words("".join(op.new_slice))
        matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

        if matcher.ratio() < self.inline_ratio_threshold:
            return self._plain(ChangeTag.DELETE, op.old_slice, op.old_range[0], None) + self._plain(
                ChangeTag.INSERT, op.new_slice, None, op.new_range[0]
            )

        old_marked: list[tuple[bool, str]] = []
        new_marked: list[tuple[bool, str]] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            emphasized = tag != "equal"
            old_marked.extend((emphasized, token) for token in old_tokens[i1:i2])
            new_marked.extend((emphasized, token) for token in new_tokens[j1:j2])

        deleted = [
            InlineChange(ChangeTag.DELETE, op.old_range[0] + offset, None, spans)
            for offset, spans in enumerate(_split_marked_tokens(old_marked))
        ]
        inserted = [
            InlineChange(ChangeTag.INSERT, None, op.new_range[0] + offset, spans)
            for offset, spans in enumerate(_split_marked_tokens(new_marked))
        ]
        return deleted + inserted


class DiffResult:
    """Grouped line diff between two texts.

    Groups are computed lazily on first access and cached.
    """

    def __init__(
        self,
        old_text: str,
        new_text: str,
        *,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        differ: SequenceDiffer | None = None,
    ) -> None:
        """Split both texts and store the diff settings.

        Parameters
        ----------
        old_text : str
            Text of the original document
        new_text : str
            Text of the updated document
        context_lines : int, default 3
            Unchanged lines kept around each change
        differ : SequenceDiffer, optional
            Diff engine; defaults to :class:`DifflibSequenceDiffer`

        """
        self.old_text = old_text
        self.new_text = new_text
        self.old_lines = split_lines(old_text)
        self.new_lines = split_lines(new_text)
        self.context_lines = context_lines
        self.differ: SequenceDiffer = differ or DifflibSequenceDiffer()
        self._groups: list[list[DiffOp]] | None = None

    def iter_groups(self) -> Iterator[list[DiffOp]]:
        """Yield the grouped diff operations."""
        if self._groups is None:
            self._groups = self.differ.grouped_operations(self.old_lines, self.new_lines, self.context_lines)
            logger.debug(
                "Diffed %d old and %d new lines into %d groups",
                len(self.old_lines),
                len(self.new_lines),
                len(self._groups),
            )
        yield from self._groups

    def iter_changes(self) -> Iterator[list[InlineChange]]:
        """Yield the inline changes of each group."""
        for group in self.iter_groups():
            yield [change for op in group for change in self.differ.inline_changes(op)]

    @property
    def has_changes(self) -> bool:
        """True if any line was inserted or deleted."""
        return any(op.tag != "equal" for group in self.iter_groups() for op in group)

    def count_changes(self) -> dict[str, int]:
        """Count deleted and inserted lines across all groups."""
        counts = {"deleted": 0, "inserted": 0}
        for group in self.iter_groups():
            for op in group:
                if op.tag in ("delete", "replace"):
                    counts["deleted"] += op.old_range[1] - op.old_range[0]
                if op.tag in ("insert", "replace"):
                    counts["inserted"] += op.new_range[1] - op.new_range[0]
        return counts


def compare_texts(
    old_text: str,
    new_text: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    differ: SequenceDiffer | None = None,
) -> DiffResult:
    """Compare two reconstructed texts line by line.

    Parameters
    ----------
    old_text : str
        Original text
    new_text : str
        Updated text
    context_lines : int, default 3
        Unchanged lines shown around each change
    differ : SequenceDiffer, optional
        Diff engine to use

    Returns
    -------
    DiffResult
        The grouped diff

    Examples
    --------
        >>> result = compare_texts("a\\n", "b\\n")
        >>> [change.tag.sign for group in result.iter_changes() for change in group]
        ['-', '+']

    """
    return DiffResult(old_text, new_text, context_lines=context_lines, differ=differ)
