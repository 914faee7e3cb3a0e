#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the pdf-text-diff library.

This module defines the exception classes raised while opening documents,
decoding their page content and validating options. They carry more
specific information than the generic built-ins so the command line can map
each failure to a distinct exit status.

Exception Hierarchy
-------------------
- PdfTextDiffError (base exception)

  - ValidationError (parameter/option validation)
    - UsageError (wrong command-line arguments)

  - DocumentOpenError (missing, unreadable or non-PDF input)
    - PasswordProtectedError (encrypted document that cannot be opened)

  - DocumentDecodeError (page tree or content stream cannot be decoded)

Notes
-----
Glyph bytes that are not valid text are never an error: they are decoded
lossily with a replacement character.

"""

from typing import Any


class PdfTextDiffError(Exception):
    """Base exception class for all pdf-text-diff errors.

    Catching this will catch every library-specific error.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(PdfTextDiffError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class UsageError(ValidationError):
    """Exception raised when the command line is invoked incorrectly.

    Parameters
    ----------
    message : str
        Usage text shown to the user
    arguments : list of str, optional
        The arguments that were received

    """

    def __init__(self, message: str, arguments: list[str] | None = None):
        """Initialize the usage error."""
        super().__init__(message, parameter_name="args", parameter_value=arguments)
        self.arguments = arguments


class DocumentOpenError(PdfTextDiffError):
    """Exception raised when a document cannot be opened.

    This covers paths that do not exist, files that cannot be read and
    files that are not decodable PDF documents. Documents are static files,
    so the operation is never retried.

    Parameters
    ----------
    message : str
        Description of the failure
    file_path : str, optional
        Path of the document that failed to open
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the open error with file path information."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class PasswordProtectedError(DocumentOpenError):
    """Exception raised when an encrypted document cannot be decrypted.

    Parameters
    ----------
    message : str, optional
        Custom error message
    file_path : str, optional
        Path of the protected document
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the password error."""
        if message is None:
            message = "Document is password-protected"
            if file_path:
                message += f": {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class DocumentDecodeError(PdfTextDiffError):
    """Exception raised when a page or its content stream cannot be decoded.

    A single undecodable page aborts the whole reconstruction; a partially
    reconstructed text would produce a misleading diff.

    Parameters
    ----------
    message : str
        Description of the decoding failure
    page_number : int, optional
        1-based number of the page that failed, None when the page list
        itself could not be produced
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, page_number: int | None = None, original_error: Exception | None = None):
        """Initialize the decode error with page information."""
        super().__init__(message, original_error=original_error)
        self.page_number = page_number
