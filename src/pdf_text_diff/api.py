#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pdf_text_diff/api.py
"""High-level API for comparing PDF documents.

The two documents are reconstructed independently, optionally on two
worker threads, and the resulting texts are diffed line by line.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Union

from pdf_text_diff.diff.renderers.terminal import TerminalDiffRenderer
from pdf_text_diff.diff.text_diff import DifflibSequenceDiffer, DiffResult, SequenceDiffer, compare_texts
from pdf_text_diff.options import DiffOptions, ReconstructionOptions
from pdf_text_diff.reconstruct import reconstruct_file, reconstruct_text
from pdf_text_diff.sources.base import DocumentSource

logger = logging.getLogger(__name__)


def _default_differ(options: DiffOptions) -> SequenceDiffer:
    return DifflibSequenceDiffer(inline_ratio_threshold=options.inline_ratio_threshold)


def compare_documents(
    old_doc: DocumentSource,
    new_doc: DocumentSource,
    options: DiffOptions | None = None,
    differ: SequenceDiffer | None = None,
) -> DiffResult:
    """Reconstruct and compare two document sources.

    Parameters
    ----------
    old_doc : DocumentSource
        Original document
    new_doc : DocumentSource
        Updated document
    options : DiffOptions, optional
        Diff settings
    differ : SequenceDiffer, optional
        Diff engine; a difflib engine configured from ``options`` by default

    Returns
    -------
    DiffResult
        The grouped diff

    Raises
    ------
    DocumentDecodeError
        If either document cannot be decoded

    """
    options = options or DiffOptions()
    return compare_texts(
        reconstruct_text(old_doc),
        reconstruct_text(new_doc),
        context_lines=options.context_lines,
        differ=differ or _default_differ(options),
    )


def compare_files(
    old_path: Union[str, Path],
    new_path: Union[str, Path],
    options: DiffOptions | None = None,
    reconstruction_options: ReconstructionOptions | None = None,
    parallel: bool = True,
) -> DiffResult:
    """Compare the text of two PDF files.

    Parameters
    ----------
    old_path : str or Path
        Path to the original PDF
    new_path : str or Path
        Path to the updated PDF
    options : DiffOptions, optional
        Diff settings
    reconstruction_options : ReconstructionOptions, optional
        Settings used to open both documents
    parallel : bool, default True
        Reconstruct both documents on separate threads. The result is the
        same either way.

    Returns
    -------
    DiffResult
        The grouped diff

    Raises
    ------
    DocumentOpenError
        If either file cannot be opened; the original document is checked
        first
    DocumentDecodeError
        If either document cannot be decoded

    """
    options = options or DiffOptions()

    if parallel:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="reconstruct") as executor:
            old_future = executor.submit(reconstruct_file, old_path, reconstruction_options)
            new_future = executor.submit(reconstruct_file, new_path, reconstruction_options)
            old_text = old_future.result()
            new_text = new_future.result()
    else:
        old_text = reconstruct_file(old_path, reconstruction_options)
        new_text = reconstruct_file(new_path, reconstruction_options)

    logger.info("Comparing %s (%d chars) with %s (%d chars)", old_path, len(old_text), new_path, len(new_text))
    return compare_texts(old_text, new_text, context_lines=options.context_lines, differ=_default_differ(options))


def render_report(diff_result: DiffResult, options: DiffOptions | None = None) -> str:
    """Render a diff as the plain-text report.

    Parameters
    ----------
    diff_result : DiffResult
        The diff to render
    options : DiffOptions, optional
        Layout settings

    Returns
    -------
    str
        The report without terminal styling

    """
    return TerminalDiffRenderer(options).render_plain(diff_result)
