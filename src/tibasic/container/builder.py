"""
Program File Builder
====================

Assembles a complete .8xp file from a token payload.

Output order is fixed: program header, variable entry, payload length,
payload, checksum. The file is built entirely in memory, so a failed
build never leaves a partial file behind.

Example
-------
>>> from tibasic.container import ProgramBuilder
>>> builder = ProgramBuilder(name="HELLO")
>>> builder.set_payload(bytes([0xDE, 0x29, 0x41, 0x3F]))
>>> data = builder.build()
>>> len(data)
80
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union
import logging
import struct

from tibasic.container.checksum import calculate_checksum
from tibasic.container.records import (
    COMMENT_SIZE,
    DEFAULT_COMMENT,
    ENTRY_SIZE,
    LENGTH_FORMAT,
    LENGTH_SIZE,
    MAX_PAYLOAD_LENGTH,
    NAME_SIZE,
    ProgramHeader,
    VariableEntry,
    derive_variable_name,
)
from tibasic.errors import PayloadTooLargeError

logger = logging.getLogger(__name__)


def validate_comment(comment: str) -> str:
    """
    Check that a header comment can be stored.

    Returns the comment truncated to the 42-byte field.

    Raises:
        ValueError: If the comment is not ASCII
    """
    if not comment.isascii():
        raise ValueError(f"Comment must be ASCII: {comment!r}")
    return comment[:COMMENT_SIZE]


def validate_variable_name(name: str) -> str:
    """
    Normalize a program name for the variable entry.

    Raises:
        ValueError: If the name is empty or not ASCII
    """
    if not name:
        raise ValueError("Program name must not be empty")
    if not name.isascii():
        raise ValueError(f"Program name must be ASCII: {name!r}")
    return name[:NAME_SIZE].upper()


@dataclass
class ProgramBuilder:
    """
    Builds .8xp program files.

    Attributes:
        name: On-calculator program name (up to 8 characters)
        comment: Header comment (up to 42 ASCII characters)
        archived: Mark the variable as archived
    """
    name: str
    comment: str = DEFAULT_COMMENT
    archived: bool = False
    payload: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        self.name = validate_variable_name(self.name)
        self.comment = validate_comment(self.comment)

    @classmethod
    def for_output(cls, path: Union[str, Path], **kwargs) -> "ProgramBuilder":
        """Create a builder whose program name is derived from ``path``."""
        return cls(name=derive_variable_name(str(path)), **kwargs)

    def set_payload(self, payload: bytes) -> None:
        """
        Set the token bytes to embed.

        Raises:
            PayloadTooLargeError: If the payload does not fit 16-bit lengths
        """
        if len(payload) > MAX_PAYLOAD_LENGTH:
            raise PayloadTooLargeError(len(payload), MAX_PAYLOAD_LENGTH)
        self.payload = bytes(payload)

    def build_entry(self) -> VariableEntry:
        return VariableEntry.for_payload(self.name, len(self.payload), self.archived)

    def build_header(self) -> ProgramHeader:
        data_length = ENTRY_SIZE + LENGTH_SIZE + len(self.payload)
        return ProgramHeader(data_length=data_length, comment=self.comment)

    def build(self) -> bytes:
        """
        Build the complete program file.

        Returns:
            Complete .8xp file as bytes
        """
        body = (
            self.build_entry().to_bytes()
            + struct.pack(LENGTH_FORMAT, len(self.payload))
            + self.payload
        )
        checksum = calculate_checksum(body)

        logger.debug(
            f"Built {self.name}: payload {len(self.payload)} bytes, checksum 0x{checksum:04X}"
        )
        return self.build_header().to_bytes() + body + struct.pack("<H", checksum)

    def build_to_file(self, filepath: Union[str, Path]) -> int:
        """
        Build and write the program file to disk.

        Returns:
            Number of bytes written
        """
        filepath = Path(filepath)
        data = self.build()
        filepath.write_bytes(data)
        return len(data)
