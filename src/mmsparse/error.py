"""
Error handling for mmsparse.

Every failure raised while decoding a MatrixMarket file carries an integer
error code and a message. Codes are grouped by range so callers can map
them onto exit statuses without string matching.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
MMS_OK = 0

# General errors (1-9)
MMS_ERROR_UNKNOWN = 1
MMS_ERROR_INTERNAL = 2

# Type errors (20-29)
MMS_ERROR_TYPE_ERROR = 20

# I/O errors (30-39)
MMS_ERROR_IO_ERROR = 30
MMS_ERROR_FILE_NOT_FOUND = 31
MMS_ERROR_PERMISSION_DENIED = 32
MMS_ERROR_READ_ERROR = 33

# Numerical errors (50-59)
MMS_ERROR_MALFORMED_NUMBER = 50
MMS_ERROR_OVERFLOW = 52

# Format errors (60-69)
MMS_ERROR_FORMAT_ERROR = 60
MMS_ERROR_BAD_BANNER = 61
MMS_ERROR_UNSUPPORTED_OBJECT = 62
MMS_ERROR_UNSUPPORTED_FORMAT = 63
MMS_ERROR_UNKNOWN_VALUE_FORMAT = 64
MMS_ERROR_UNKNOWN_SYMMETRY = 65
MMS_ERROR_ILL_SHAPED_LINE = 66
MMS_ERROR_OUT_OF_BOUNDS = 67
MMS_ERROR_UNEXPECTED_EOF = 68
MMS_ERROR_INVALID_DIMENSION = 69


# Error code to message mapping
_ERROR_MESSAGES = {
    MMS_OK: "Success",
    MMS_ERROR_UNKNOWN: "Unknown error",
    MMS_ERROR_INTERNAL: "Internal error",
    MMS_ERROR_TYPE_ERROR: "Type error",
    MMS_ERROR_IO_ERROR: "I/O error",
    MMS_ERROR_FILE_NOT_FOUND: "File not found",
    MMS_ERROR_PERMISSION_DENIED: "Permission denied",
    MMS_ERROR_READ_ERROR: "Read error",
    MMS_ERROR_MALFORMED_NUMBER: "Malformed number",
    MMS_ERROR_OVERFLOW: "Overflow",
    MMS_ERROR_FORMAT_ERROR: "Format error",
    MMS_ERROR_BAD_BANNER: "Missing %%MatrixMarket banner",
    MMS_ERROR_UNSUPPORTED_OBJECT: "Unsupported object: only matrix is supported",
    MMS_ERROR_UNSUPPORTED_FORMAT: "Unsupported format: only coordinate matrices are supported",
    MMS_ERROR_UNKNOWN_VALUE_FORMAT: "Unknown value format",
    MMS_ERROR_UNKNOWN_SYMMETRY: "Unknown symmetry",
    MMS_ERROR_ILL_SHAPED_LINE: "Ill-shaped line",
    MMS_ERROR_OUT_OF_BOUNDS: "Coordinate out of bounds",
    MMS_ERROR_UNEXPECTED_EOF: "Unexpected end of file",
    MMS_ERROR_INVALID_DIMENSION: "Invalid matrix dimension",
}


def error_message(code: int) -> str:
    """Default message for an error code."""
    return _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")


# =============================================================================
# Exception Classes
# =============================================================================

class MMSparseError(Exception):
    """
    Base exception for all mmsparse errors.

    Attributes:
        code: Error code (one of the MMS_* constants)
        message: Human readable description
    """

    # Re-export error codes as class attributes for convenience
    OK = MMS_OK
    ERROR_UNKNOWN = MMS_ERROR_UNKNOWN
    ERROR_INTERNAL = MMS_ERROR_INTERNAL
    ERROR_TYPE_ERROR = MMS_ERROR_TYPE_ERROR
    ERROR_IO_ERROR = MMS_ERROR_IO_ERROR
    ERROR_FILE_NOT_FOUND = MMS_ERROR_FILE_NOT_FOUND
    ERROR_PERMISSION_DENIED = MMS_ERROR_PERMISSION_DENIED
    ERROR_READ_ERROR = MMS_ERROR_READ_ERROR
    ERROR_MALFORMED_NUMBER = MMS_ERROR_MALFORMED_NUMBER
    ERROR_OVERFLOW = MMS_ERROR_OVERFLOW
    ERROR_FORMAT_ERROR = MMS_ERROR_FORMAT_ERROR
    ERROR_BAD_BANNER = MMS_ERROR_BAD_BANNER
    ERROR_UNSUPPORTED_OBJECT = MMS_ERROR_UNSUPPORTED_OBJECT
    ERROR_UNSUPPORTED_FORMAT = MMS_ERROR_UNSUPPORTED_FORMAT
    ERROR_UNKNOWN_VALUE_FORMAT = MMS_ERROR_UNKNOWN_VALUE_FORMAT
    ERROR_UNKNOWN_SYMMETRY = MMS_ERROR_UNKNOWN_SYMMETRY
    ERROR_ILL_SHAPED_LINE = MMS_ERROR_ILL_SHAPED_LINE
    ERROR_OUT_OF_BOUNDS = MMS_ERROR_OUT_OF_BOUNDS
    ERROR_UNEXPECTED_EOF = MMS_ERROR_UNEXPECTED_EOF
    ERROR_INVALID_DIMENSION = MMS_ERROR_INVALID_DIMENSION

    default_code = MMS_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        """
        Create mmsparse exception.

        Args:
            message: Optional detailed message (default message for the code if omitted)
            code: Error code; falls back to the class default
        """
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = error_message(code)
        self.message = message
        super().__init__(f"[{code}] {message}")

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MMSparseError":
        """Create exception from error code with optional context."""
        base_msg = error_message(code)
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(msg, code=code)


class MatrixMarketIOError(MMSparseError, OSError):
    """The input file could not be opened or read.

    Catchable as ``OSError``; ``errno`` and ``filename`` mirror the
    underlying error, which is chained as ``__cause__``.
    """

    default_code = MMS_ERROR_IO_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[int] = None,
        filename: Optional[str] = None,
        errno: Optional[int] = None,
    ):
        super().__init__(message, code)
        # Set after OSError.__init__, which only parses (errno, strerror, ...) args
        self.errno = errno
        self.strerror = self.message
        self.filename = filename

    @classmethod
    def from_os_error(cls, exc: OSError, filename: str) -> "MatrixMarketIOError":
        """Classify an ``OSError`` raised while opening ``filename``."""
        if isinstance(exc, FileNotFoundError):
            code = MMS_ERROR_FILE_NOT_FOUND
        elif isinstance(exc, PermissionError):
            code = MMS_ERROR_PERMISSION_DENIED
        else:
            code = MMS_ERROR_IO_ERROR
        reason = exc.strerror or str(exc)
        return cls(
            f"Could not open {filename!r} for reading: {reason}",
            code=code,
            filename=filename,
            errno=exc.errno,
        )


class FormatError(MMSparseError):
    """Structural violation of the MatrixMarket coordinate format."""

    default_code = MMS_ERROR_FORMAT_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[int] = None,
        line_number: Optional[int] = None,
    ):
        self.line_number = line_number
        if message is not None and line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, code)


class MalformedNumberError(FormatError):
    """A token expected to be numeric failed to parse or does not fit its dtype."""

    default_code = MMS_ERROR_MALFORMED_NUMBER

    def __init__(
        self,
        token: str,
        message: Optional[str] = None,
        code: Optional[int] = None,
        line_number: Optional[int] = None,
    ):
        self.token = token
        if message is None:
            message = f"malformed number {token!r}"
        super().__init__(message, code, line_number)


class IndexOverflowError(MMSparseError, OverflowError):
    """The decoded entry count cannot be represented by the coordinate dtype."""

    default_code = MMS_ERROR_OVERFLOW


__all__ = [
    # Codes
    "MMS_OK",
    "MMS_ERROR_UNKNOWN",
    "MMS_ERROR_INTERNAL",
    "MMS_ERROR_TYPE_ERROR",
    "MMS_ERROR_IO_ERROR",
    "MMS_ERROR_FILE_NOT_FOUND",
    "MMS_ERROR_PERMISSION_DENIED",
    "MMS_ERROR_READ_ERROR",
    "MMS_ERROR_MALFORMED_NUMBER",
    "MMS_ERROR_OVERFLOW",
    "MMS_ERROR_FORMAT_ERROR",
    "MMS_ERROR_BAD_BANNER",
    "MMS_ERROR_UNSUPPORTED_OBJECT",
    "MMS_ERROR_UNSUPPORTED_FORMAT",
    "MMS_ERROR_UNKNOWN_VALUE_FORMAT",
    "MMS_ERROR_UNKNOWN_SYMMETRY",
    "MMS_ERROR_ILL_SHAPED_LINE",
    "MMS_ERROR_OUT_OF_BOUNDS",
    "MMS_ERROR_UNEXPECTED_EOF",
    "MMS_ERROR_INVALID_DIMENSION",
    # Helpers
    "error_message",
    # Exceptions
    "MMSparseError",
    "MatrixMarketIOError",
    "FormatError",
    "MalformedNumberError",
    "IndexOverflowError",
]
