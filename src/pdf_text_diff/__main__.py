#!/usr/bin/env python3
"""Entry point for running pdf-text-diff as a module.

This allows the package to be executed as:
    python -m pdf_text_diff old.pdf new.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
