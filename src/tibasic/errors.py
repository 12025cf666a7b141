"""
TI-BASIC Tools Error Hierarchy
==============================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from TIBasicError, allowing callers to catch all
translation errors with a single except clause if desired.

Exception Hierarchy
-------------------
TIBasicError (base)
├── TokenizeError (compile path)
│   └── InvalidTokenError - no mnemonic matches the remaining source text
└── ContainerError (.8xp file handling)
    ├── ContainerFormatError - file too short or structurally invalid
    ├── PayloadTooLargeError - token stream does not fit 16-bit fields
    └── ChecksumError - stored checksum differs from the computed one

File access problems are not wrapped: they propagate as the built-in
OSError subclasses (FileNotFoundError, PermissionError, ...).

Error messages for source errors follow this format:
    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TIBasicError(Exception):
    """
    Base exception for all TI-BASIC tools errors.

        try:
            translator.compile_file("prog.txt", "PROG.8xp")
        except TIBasicError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Tokenizer Exceptions
# =============================================================================

class TokenizeError(TIBasicError):
    """
    Base exception for compile-time tokenization errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The cleaned source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.txt:3:6: error: invalid token '$'
                Disp $
                     ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidTokenError(TokenizeError):
    """
    No prefix of the remaining line matches a mnemonic.

    Raised when the greedy matcher finds no table entry at the current
    position and the first character is not a letter that could fall
    back to a variable token. The whole compile is abandoned.
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text

        hint = None
        if text[:1] == "\t":
            hint = "tabs are not stripped; indent with spaces"
        elif text[:1] == "\r":
            hint = "carriage returns are not stripped; save the file with LF line endings"

        super().__init__(
            f"invalid token {text[:1]!r}",
            location=location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# Container Exceptions
# =============================================================================

class ContainerError(TIBasicError):
    """Base exception for .8xp container errors."""
    pass


class ContainerFormatError(ContainerError):
    """
    Invalid program file.

    Raised when reading a file that is too short to hold the program
    header, the variable entry and the payload length prefix.
    """
    pass


class PayloadTooLargeError(ContainerError):
    """
    Token stream is too long for the container.

    The payload length, both variable entry length fields and the
    header data length are 16-bit quantities.
    """

    def __init__(self, length: int, maximum: int):
        self.length = length
        self.maximum = maximum
        super().__init__(
            f"program payload is {length} bytes, maximum is {maximum} bytes"
        )


class ChecksumError(ContainerError):
    """
    Checksum verification failed.

    Raised only when strict verification is requested; otherwise a
    mismatch is logged and decompilation continues.
    """

    def __init__(self, expected: int, actual: int, message: str = ""):
        self.expected = expected
        self.actual = actual
        if not message:
            message = f"checksum mismatch: stored {expected:04X}, computed {actual:04X}"
        super().__init__(message)
