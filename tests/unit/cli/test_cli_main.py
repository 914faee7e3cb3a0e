#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the pdf-text-diff command-line entry point."""

import pytest

from pdf_text_diff import cli
from pdf_text_diff.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_PASSWORD_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from pdf_text_diff.constants import USAGE
from pdf_text_diff.exceptions import (
    DocumentDecodeError,
    DocumentOpenError,
    PasswordProtectedError,
    PdfTextDiffError,
    UsageError,
    ValidationError,
)


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    """Keep colour detection deterministic."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Tests for create_parser()."""

    def test_two_positionals(self):
        """Exactly two paths are accepted."""
        parsed = create_parser().parse_args(["a.pdf", "b.pdf"])
        assert (parsed.old, parsed.new) == ("a.pdf", "b.pdf")

    @pytest.mark.parametrize("argv", [[], ["a.pdf"], ["a.pdf", "b.pdf", "c.pdf"], ["--help"], ["-x", "a", "b"]])
    def test_wrong_arguments_raise_usage_error(self, argv):
        """Any other argument list is a usage error carrying the usage line."""
        with pytest.raises(UsageError) as exc_info:
            create_parser().parse_args(argv)
        assert exc_info.value.message == USAGE


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodeMapping:
    """Tests for get_exit_code_for_exception()."""

    @pytest.mark.parametrize(
        "exception, code",
        [
            (PasswordProtectedError(file_path="x.pdf"), EXIT_PASSWORD_ERROR),
            (DocumentOpenError("missing"), EXIT_FILE_ERROR),
            (DocumentDecodeError("bad page", page_number=2), EXIT_PARSING_ERROR),
            (ValidationError("bad option"), EXIT_VALIDATION_ERROR),
            (UsageError(USAGE), EXIT_VALIDATION_ERROR),
            (PdfTextDiffError("generic"), EXIT_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, code):
        """Each error class maps to its documented exit code."""
        assert get_exit_code_for_exception(exception) == code

    def test_password_message_names_file(self):
        """The default password message includes the path."""
        assert PasswordProtectedError(file_path="x.pdf").message == "Document is password-protected: x.pdf"


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for cli.main()."""

    @pytest.mark.parametrize("argv", [[], ["only.pdf"], ["a.pdf", "b.pdf", "c.pdf"]])
    def test_wrong_argument_count(self, argv, capsys):
        """Usage errors print the usage line to stderr and nothing to stdout."""
        assert cli.main(argv) == EXIT_VALIDATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == USAGE + "\n"

    def test_missing_file(self, tmp_path, make_pdf, capsys):
        """A nonexistent input is a file error."""
        new = make_pdf("new.pdf", lines=["a"])
        assert cli.main([str(tmp_path / "nope.pdf"), str(new)]) == EXIT_FILE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: File not found")

    def test_not_a_pdf(self, tmp_path, make_pdf, capsys):
        """A file that is not a PDF is a file error and prints no report."""
        old = tmp_path / "old.txt"
        old.write_text("plain text\n")
        new = make_pdf("new.pdf", lines=["a"])
        assert cli.main([str(old), str(new)]) == EXIT_FILE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_identical_documents(self, make_pdf, capsys):
        """Identical documents succeed with an empty report."""
        old = make_pdf("old.pdf", lines=["same", "text"])
        new = make_pdf("new.pdf", lines=["same", "text"])
        assert cli.main([str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_changed_documents(self, make_pdf, capsys):
        """A changed last line is reported as a delete row and an insert row."""
        old = make_pdf("old.pdf", lines=["Hello", "World"])
        new = make_pdf("new.pdf", lines=["Hello", "Earth"])
        assert cli.main([str(old), str(new)]) == EXIT_SUCCESS
        # the last line has no terminator, so its rows are not newline-terminated
        expected = "1   1    | Hello\n" + "2        |-World" + "    2    |+Earth"
        assert capsys.readouterr().out == expected

    def test_decode_error(self, monkeypatch, capsys):
        """Undecodable content maps to the parsing exit code."""

        def fail(*args, **kwargs):
            raise DocumentDecodeError("Failed to decode page 2", page_number=2)

        monkeypatch.setattr(cli, "compare_files", fail)
        assert cli.main(["a.pdf", "b.pdf"]) == EXIT_PARSING_ERROR
        assert capsys.readouterr().err == "Error: Failed to decode page 2\n"

    def test_unexpected_error(self, monkeypatch, capsys):
        """Errors outside the hierarchy exit with the general error code."""

        def fail(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli, "compare_files", fail)
        assert cli.main(["a.pdf", "b.pdf"]) == EXIT_ERROR
        assert "Error comparing documents: boom" in capsys.readouterr().err
