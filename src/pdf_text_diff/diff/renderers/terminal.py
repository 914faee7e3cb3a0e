#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/diff/renderers/terminal.py
"""Side-by-side numbered diff renderer for the terminal.

Each change becomes one row::

    <old line no><new line no> |<sign><line text>

Line numbers are 1-based and left-aligned in fixed-width columns, blank on
the side where the line does not exist. Deleted lines are red, inserted
lines green and context lines dim; the differing words inside a replaced
line are additionally underlined. A rule separates consecutive groups.

Rows keep the line terminator of their source line, so a line without one
(typically the last line of a document) is rendered without a newline.
Tabs are expanded to 8-column stops measured from the start of the row.
"""

from __future__ import annotations

import sys
from typing import IO, Iterator, Union

from rich.console import Console
from rich.style import Style
from rich.text import Text

from pdf_text_diff.constants import (
    DELETE_STYLE,
    EQUAL_STYLE,
    INSERT_STYLE,
    LINE_NUMBER_STYLE,
    LINE_BREAK,
    SEPARATOR_CHAR,
    TAB_SIZE,
)
from pdf_text_diff.diff.text_diff import ChangeTag, DiffResult, InlineChange
from pdf_text_diff.options import DiffOptions

_TAG_STYLES = {
    ChangeTag.DELETE: DELETE_STYLE,
    ChangeTag.INSERT: INSERT_STYLE,
    ChangeTag.EQUAL: EQUAL_STYLE,
}


def create_console(color: str = "auto", file: IO[str] | None = None) -> Console:
    """Create a rich console honouring a color mode.

    Parameters
    ----------
    color : {"auto", "always", "never"}
        ``auto`` styles output only when the target is a terminal
    file : file-like, optional
        Output stream, stdout by default

    Returns
    -------
    Console
        Console configured for the diff report

    """
    file = file or sys.stdout
    if color == "always":
        return Console(file=file, force_terminal=True, highlight=False)
    if color == "never":
        return Console(file=file, color_system=None, highlight=False)
    return Console(file=file, highlight=False)


class TerminalDiffRenderer:
    """Render a :class:`DiffResult` as numbered, colour-coded rows.

    Parameters
    ----------
    options : DiffOptions, optional
        Column widths, separator width and color mode

    Examples
    --------
    Print a diff to the terminal:
        >>> from pdf_text_diff.diff import compare_texts
        >>> renderer = TerminalDiffRenderer()
        >>> renderer.write(compare_texts("a\\n", "b\\n"))

    """

    def __init__(self, options: DiffOptions | None = None):
        """Initialize the renderer."""
        self.options = options or DiffOptions()

    def _line_number(self, index: int | None) -> str:
        width = self.options.line_number_width
        if index is None:
            return " " * width
        return f"{index + 1:<{width}}"

    def render_change(self, change: InlineChange) -> Text:
        """Render a single change row.

        Parameters
        ----------
        change : InlineChange
            The line to render

        Returns
        -------
        Text
            Styled row, ending with the line's own terminator if it has one

        """
        color = _TAG_STYLES[change.tag]
        row = Text()
        row.append(self._line_number(change.old_index), style=LINE_NUMBER_STYLE)
        row.append(self._line_number(change.new_index), style=LINE_NUMBER_STYLE)
        row.append(" |")
        row.append(change.tag.sign, style=Style.parse(color) + Style(bold=True))
        last = len(change.spans) - 1
        for position, (emphasized, value) in enumerate(change.spans):
            # terminators are normalised to a single line break below
            if position == last:
                value = value.rstrip("\r\n")
            if not value:
                continue
            if emphasized:
                row.append(value, style=Style.parse(color) + Style(underline=True))
            else:
                row.append(value, style=color)
        if not change.missing_newline:
            row.append(LINE_BREAK)
        # rich expands tabs on output; expanding here keeps render_plain() identical
        row.expand_tabs(TAB_SIZE)
        return row

    def render_separator(self) -> Text:
        """Render the rule printed between groups."""
        return Text(SEPARATOR_CHAR * self.options.separator_width + LINE_BREAK)

    def render(self, diff_result: DiffResult) -> Iterator[Text]:
        """Render all rows of a diff.

        Parameters
        ----------
        diff_result : DiffResult
            The diff to render

        Yields
        ------
        Text
            Separator rules and change rows in output order

        """
        for index, group in enumerate(diff_result.iter_changes()):
            if index > 0:
                yield self.render_separator()
            for change in group:
                yield self.render_change(change)

    def render_plain(self, diff_result: DiffResult) -> str:
        """Render the diff as unstyled text."""
        return "".join(row.plain for row in self.render(diff_result))

    def write(self, diff_result: DiffResult, console: Union[Console, None] = None) -> None:
        """Write the diff to a console row by row.

        Parameters
        ----------
        diff_result : DiffResult
            The diff to write
        console : Console, optional
            Target console; one honouring ``options.color`` on stdout is
            created when omitted

        """
        console = console or create_console(self.options.color)
        for row in self.render(diff_result):
            console.print(row, end="", soft_wrap=True)
