#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/diff/renderers/__init__.py
"""Diff renderers.

Available Renderers
-------------------
- TerminalDiffRenderer: numbered two-column rows with rich styling

Examples
--------
Render a diff as plain text:
    >>> from pdf_text_diff.diff import compare_texts
    >>> from pdf_text_diff.diff.renderers import TerminalDiffRenderer
    >>> report = TerminalDiffRenderer().render_plain(compare_texts("a\\n", "b\\n"))

"""

from pdf_text_diff.diff.renderers.terminal import TerminalDiffRenderer, create_console

__all__ = [
    "TerminalDiffRenderer",
    "create_console",
]
