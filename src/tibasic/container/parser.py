"""
Program File Parser
===================

Reads a .8xp file and splits it into its parts: program header,
variable entry, payload and stored checksum.

The parser is lenient in the same places the calculator link software
is: the header signature is not validated, and a payload cut short by
the end of the file is returned as far as it goes (with a warning).
Only a file too short to contain the header, the variable entry and
the payload length is rejected.

Example
-------
>>> parser = ProgramParser.from_file("HELLO.8xp")
>>> print(parser.entry.name, len(parser.payload))
>>> if not parser.checksum_valid:
...     print("checksum mismatch")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
import logging
import struct

from tibasic.container.checksum import calculate_checksum
from tibasic.container.records import (
    CHECKSUM_SIZE,
    ENTRY_SIZE,
    HEADER_SIZE,
    LENGTH_FORMAT,
    LENGTH_SIZE,
    ProgramHeader,
    VariableEntry,
)
from tibasic.errors import ChecksumError, ContainerFormatError

logger = logging.getLogger(__name__)

PAYLOAD_OFFSET = HEADER_SIZE + ENTRY_SIZE + LENGTH_SIZE


@dataclass
class ProgramParser:
    """
    Parser for .8xp program files.

    Attributes:
        data: The raw file bytes
        header: Parsed program header
        entry: Parsed variable entry
        payload_length: Payload length as declared in the file
        payload: Payload bytes actually present (may be short if truncated)
        stored_checksum: Checksum read from the file, None if missing
    """
    data: bytes = field(repr=False)
    header: Optional[ProgramHeader] = field(default=None, init=False)
    entry: Optional[VariableEntry] = field(default=None, init=False)
    payload_length: int = field(default=0, init=False)
    payload: bytes = field(default=b"", init=False, repr=False)
    stored_checksum: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self._parse()

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "ProgramParser":
        """
        Create a ProgramParser from a file path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ContainerFormatError: If the file is too short
        """
        filepath = Path(filepath)
        return cls(data=filepath.read_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProgramParser":
        return cls(data=data)

    def _parse(self) -> None:
        if len(self.data) < PAYLOAD_OFFSET:
            raise ContainerFormatError(
                f"Program file too small: {len(self.data)} bytes, "
                f"need at least {PAYLOAD_OFFSET}"
            )

        self.header = ProgramHeader.from_bytes(self.data)
        if not self.header.has_valid_signature:
            logger.debug(f"Unexpected signature {self.header.signature!r}, continuing")

        self.entry = VariableEntry.from_bytes(self.data[HEADER_SIZE:])
        (self.payload_length,) = struct.unpack_from(
            LENGTH_FORMAT, self.data, HEADER_SIZE + ENTRY_SIZE
        )

        payload_end = PAYLOAD_OFFSET + self.payload_length
        self.payload = self.data[PAYLOAD_OFFSET:payload_end]
        if len(self.payload) < self.payload_length:
            logger.warning(
                f"Payload truncated: declared {self.payload_length} bytes, "
                f"found {len(self.payload)}"
            )

        checksum_bytes = self.data[payload_end:payload_end + CHECKSUM_SIZE]
        if len(checksum_bytes) == CHECKSUM_SIZE:
            self.stored_checksum = int.from_bytes(checksum_bytes, "little")

        if self.entry.length1 != self.entry.length2:
            logger.warning(
                f"Variable entry lengths differ: {self.entry.length1} != {self.entry.length2}"
            )

        logger.debug(
            f"Parsed program '{self.entry.name}' ({self.payload_length} byte payload)"
        )

    @property
    def computed_checksum(self) -> int:
        """Checksum over the variable entry, length prefix and payload."""
        return calculate_checksum(self.data[HEADER_SIZE:PAYLOAD_OFFSET + len(self.payload)])

    @property
    def checksum_valid(self) -> bool:
        return self.stored_checksum == self.computed_checksum

    def verify_checksum(self) -> None:
        """
        Raise if the stored checksum is missing or wrong.

        Raises:
            ChecksumError: On mismatch
        """
        if not self.checksum_valid:
            raise ChecksumError(
                expected=self.stored_checksum if self.stored_checksum is not None else 0,
                actual=self.computed_checksum,
                message="" if self.stored_checksum is not None else "checksum missing",
            )
