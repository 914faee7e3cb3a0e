#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/diff/__init__.py
"""Line diff of reconstructed document text.

Key Features
------------
- Line-level comparison using Python's difflib
- Changes grouped with a fixed number of context lines
- Word-level emphasis of the differing part of replaced lines
- Pluggable diff engine through the ``SequenceDiffer`` protocol

Examples
--------
Compare two texts and inspect the changes:
    >>> from pdf_text_diff.diff import compare_texts
    >>> result = compare_texts("alpha\\nbeta\\n", "alpha\\ngamma\\n")
    >>> result.has_changes
    True

"""

from pdf_text_diff.diff.text_diff import (
    ChangeTag,
    DiffOp,
    DifflibSequenceDiffer,
    DiffResult,
    InlineChange,
    SequenceDiffer,
    compare_texts,
    split_lines,
)

__all__ = [
    "ChangeTag",
    "DiffOp",
    "DiffResult",
    "DifflibSequenceDiffer",
    "InlineChange",
    "SequenceDiffer",
    "compare_texts",
    "split_lines",
]
