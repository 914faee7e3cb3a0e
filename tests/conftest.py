"""Pytest configuration and shared fixtures for the pdf-text-diff test suite."""

import logging
from pathlib import Path
from typing import Callable, Generator, Optional, Sequence

import pytest
from utils import text_lines_stream, write_pdf


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory writing minimal PDFs into ``tmp_path``.

    The factory takes a file name and either ``lines`` (one text line per
    entry, placed with successive text matrices on a single page) or raw
    ``pages`` content streams.
    """

    def _make(
        name: str,
        lines: Optional[Sequence[str]] = None,
        pages: Optional[Sequence[Optional[bytes]]] = None,
    ) -> Path:
        if pages is None:
            pages = [text_lines_stream(lines or [])]
        return write_pdf(tmp_path / name, pages)

    return _make


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Remove handlers installed by configure_logging() after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
