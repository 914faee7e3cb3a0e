"""Test utilities for the pdf-text-diff test suite.

PDF fixtures are assembled by hand from raw content streams so tests control
every operator the reconstructor sees.
"""

import io
from pathlib import Path
from typing import Optional, Sequence

from pypdf import PdfWriter


def build_pdf(page_streams: Sequence[Optional[bytes]]) -> bytes:
    """Assemble a minimal PDF with one page per content stream.

    Parameters
    ----------
    page_streams : sequence of bytes or None
        Uncompressed content stream for each page; None creates a page
        without a /Contents entry

    Returns
    -------
    bytes
        Complete PDF file with a valid cross-reference table

    """
    page_count = len(page_streams)
    font_number = 3 + 2 * page_count
    kids = " ".join(f"{3 + 2 * index} 0 R" for index in range(page_count))

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode("ascii"),
    ]
    for index, stream in enumerate(page_streams):
        content_number = 4 + 2 * index
        contents = f" /Contents {content_number} 0 R" if stream is not None else ""
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]"
                f"{contents} /Resources << /Font << /F1 {font_number} 0 R >> >> >>"
            ).encode("ascii")
        )
        data = stream if stream is not None else b""
        objects.append(b"<< /Length %d >>\nstream\n" % len(data) + data + b"\nendstream")
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


def text_lines_stream(lines: Sequence[str], start_y: int = 700, leading: int = 14) -> bytes:
    """Build a content stream placing each line with its own text matrix."""
    parts = [b"BT", b"/F1 12 Tf"]
    for index, line in enumerate(lines):
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        parts.append(b"1 0 0 1 72 %d Tm" % (start_y - index * leading))
        parts.append(b"(" + escaped.encode("utf-8") + b") Tj")
    parts.append(b"ET")
    return b"\n".join(parts)


def write_pdf(path: Path, page_streams: Sequence[Optional[bytes]]) -> Path:
    """Write a minimal PDF to ``path`` and return it."""
    path.write_bytes(build_pdf(page_streams))
    return path


def write_encrypted_pdf(
    path: Path,
    page_streams: Sequence[Optional[bytes]],
    user_password: str,
    owner_password: Optional[str] = None,
    algorithm: str = "RC4-128",
) -> Path:
    """Write an encrypted copy of a minimal PDF to ``path`` and return it."""
    writer = PdfWriter(clone_from=io.BytesIO(build_pdf(page_streams)))
    writer.encrypt(user_password=user_password, owner_password=owner_password, algorithm=algorithm)
    with path.open("wb") as f:
        writer.write(f)
    return path
