#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for pdf-text-diff.

This module centralizes the hardcoded values used across the package:
diff layout defaults, report styling and command-line identifiers.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Text Reconstruction
# =============================================================================

# Character appended whenever a line break is inferred or forced
LINE_BREAK = "\n"

# Substituted for byte sequences that are not valid UTF-8
REPLACEMENT_CHARACTER = "�"

DEFAULT_PDF_PASSWORD = ""
DEFAULT_STRICT_PARSING = False

# =============================================================================
# Diff Rendering
# =============================================================================

DEFAULT_CONTEXT_LINES = 3
DEFAULT_SEPARATOR_WIDTH = 80
DEFAULT_LINE_NUMBER_WIDTH = 4
DEFAULT_COLOR_MODE: ColorMode = "auto"

# Replace blocks whose word-level similarity falls below this ratio are shown
# as plain delete/insert rows without emphasis
DEFAULT_INLINE_RATIO_THRESHOLD = 0.5

SEPARATOR_CHAR = "-"

# Tab stop width used when rendering report rows
TAB_SIZE = 8

# rich style names per change tag
DELETE_STYLE = "red"
INSERT_STYLE = "green"
EQUAL_STYLE = "dim"
LINE_NUMBER_STYLE = "dim"

# =============================================================================
# Command Line
# =============================================================================

PROG_NAME = "pdf-text-diff"
USAGE = f"usage: {PROG_NAME} [old.pdf] [new.pdf]"
