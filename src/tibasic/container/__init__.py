"""
TI-83 Plus Program File Handling
================================

Reading and writing the .8xp container that wraps a tokenized TI-BASIC
program: a 55-byte program header, a 17-byte variable entry, a
length-prefixed token payload and a trailing 16-bit checksum.

This module provides:
- **ProgramBuilder**: Create .8xp files from a token payload
- **ProgramParser**: Split an existing .8xp file into its parts
- **Record types**: ProgramHeader and VariableEntry
- **Checksum utilities**: Calculate and verify file checksums

Quick Start
-----------
    >>> from tibasic.container import ProgramBuilder, ProgramParser
    >>> builder = ProgramBuilder(name="HELLO")
    >>> builder.set_payload(bytes([0xDE, 0x29, 0x41, 0x3F]))
    >>> parser = ProgramParser.from_bytes(builder.build())
    >>> parser.entry.name
    'HELLO'
"""

from tibasic.container.records import (
    CHECKSUM_SIZE,
    COMMENT_SIZE,
    DEFAULT_COMMENT,
    ENTRY_SIZE,
    EXTENSION_MARKER,
    HEADER_SIZE,
    LENGTH_SIZE,
    MAX_PAYLOAD_LENGTH,
    NAME_SIZE,
    SIGNATURE,
    ProgramHeader,
    VariableEntry,
    VariableType,
    derive_variable_name,
)
from tibasic.container.checksum import (
    calculate_checksum,
    calculate_file_checksum,
    verify_checksum,
)
from tibasic.container.builder import (
    ProgramBuilder,
    validate_comment,
    validate_variable_name,
)
from tibasic.container.parser import PAYLOAD_OFFSET, ProgramParser

__all__ = [
    # Layout
    "CHECKSUM_SIZE",
    "COMMENT_SIZE",
    "DEFAULT_COMMENT",
    "ENTRY_SIZE",
    "EXTENSION_MARKER",
    "HEADER_SIZE",
    "LENGTH_SIZE",
    "MAX_PAYLOAD_LENGTH",
    "NAME_SIZE",
    "PAYLOAD_OFFSET",
    "SIGNATURE",
    # Records
    "ProgramHeader",
    "VariableEntry",
    "VariableType",
    "derive_variable_name",
    # Checksum
    "calculate_checksum",
    "calculate_file_checksum",
    "verify_checksum",
    # Builder and parser
    "ProgramBuilder",
    "ProgramParser",
    "validate_comment",
    "validate_variable_name",
]
