"""
Program File Record Definitions
===============================

Data structures for the TI-83 Plus family program file (.8xp).

File Structure
--------------
    Offset      Size  Description
    ------      ----  -----------
    0           8     Signature "**TI83F*"
    8           3     Extension marker 1A 0A 00
    11          42    Comment (null-padded ASCII)
    53          2     Data length = 17 + L + 2
    55          17    Variable entry
    72          2     Payload length L
    74          L     Payload (token bytes)
    74 + L      2     Checksum: low 16 bits of the byte sum of [55, 74 + L)

Variable Entry
--------------
    Offset  Size  Description
    ------  ----  -----------
    0       2     Entry header length (0x000D)
    2       2     Variable length (L + 2)
    4       1     Type (0x05 = program)
    5       8     Name (uppercase ASCII, null-padded)
    13      1     Version
    14      1     Flags (0x80 = archived)
    15      2     Variable length, repeated (L + 2)

All multi-byte integers are little-endian.
"""

from dataclasses import dataclass
from enum import IntEnum
import struct

SIGNATURE = b"**TI83F*"
EXTENSION_MARKER = b"\x1a\x0a\x00"
DEFAULT_COMMENT = "Generated by the TI-BASIC Compiler."

COMMENT_SIZE = 42
NAME_SIZE = 8
ENTRY_START = 0x0D
ARCHIVED_FLAG = 0x80

HEADER_FORMAT = "<8s3s42sH"
ENTRY_FORMAT = "<HHB8sBBH"
LENGTH_FORMAT = "<H"

HEADER_SIZE = struct.calcsize(HEADER_FORMAT)    # 55
ENTRY_SIZE = struct.calcsize(ENTRY_FORMAT)      # 17
LENGTH_SIZE = struct.calcsize(LENGTH_FORMAT)    # 2
CHECKSUM_SIZE = 2

# Every length field (payload, entry lengths, data length) is 16 bits wide
MAX_PAYLOAD_LENGTH = 0xFFFF - ENTRY_SIZE - LENGTH_SIZE


class VariableType(IntEnum):
    """Calculator variable type codes used by program files."""
    PROGRAM = 0x05
    PROTECTED_PROGRAM = 0x06


def _pad(text: str, size: int) -> bytes:
    raw = text.encode("ascii")[:size]
    return raw.ljust(size, b"\x00")


def _unpad(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("ascii", errors="replace").rstrip(" ")


def derive_variable_name(path: str) -> str:
    """
    Derive the on-calculator program name from an output path.

    The directory part (``/`` or ``\\`` separated) is dropped, then up to
    eight characters are taken, uppercased, stopping at the first ``.``.

    Example:
        >>> derive_variable_name("path/to/Hello.world.txt")
        'HELLO'
        >>> derive_variable_name("C:\\\\progs\\\\averylongname.8xp")
        'AVERYLON'
    """
    basename = str(path).replace("\\", "/").rsplit("/", 1)[-1]
    return basename.split(".", 1)[0][:NAME_SIZE].upper()


# =============================================================================
# Program Header
# =============================================================================

@dataclass
class ProgramHeader:
    """
    The fixed 55-byte file prelude.

    The signature is written on build but not validated on parse.
    """
    data_length: int = 0
    comment: str = DEFAULT_COMMENT
    signature: bytes = SIGNATURE
    extension: bytes = EXTENSION_MARKER

    def to_bytes(self) -> bytes:
        """Serialize the header to 55 bytes."""
        return struct.pack(
            HEADER_FORMAT,
            self.signature,
            self.extension,
            _pad(self.comment, COMMENT_SIZE),
            self.data_length,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProgramHeader":
        """Deserialize a header from the first 55 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ValueError(f"Header too short: need {HEADER_SIZE} bytes, got {len(data)}")

        signature, extension, comment, data_length = struct.unpack_from(HEADER_FORMAT, data)
        return cls(
            data_length=data_length,
            comment=_unpad(comment),
            signature=signature,
            extension=extension,
        )

    @property
    def has_valid_signature(self) -> bool:
        return self.signature == SIGNATURE and self.extension == EXTENSION_MARKER


# =============================================================================
# Variable Entry
# =============================================================================

@dataclass
class VariableEntry:
    """
    The 17-byte record describing the embedded program.

    ``length1`` and ``length2`` both hold the payload length plus the
    two bytes of the payload length prefix.
    """
    name: str
    length1: int = 2
    length2: int = 2
    var_type: int = VariableType.PROGRAM
    start: int = ENTRY_START
    version: int = 0
    flags: int = 0

    @classmethod
    def for_payload(
        cls,
        name: str,
        payload_length: int,
        archived: bool = False,
    ) -> "VariableEntry":
        """Create an entry sized for a payload of ``payload_length`` bytes."""
        length = payload_length + LENGTH_SIZE
        return cls(
            name=name.upper(),
            length1=length,
            length2=length,
            flags=ARCHIVED_FLAG if archived else 0,
        )

    def to_bytes(self) -> bytes:
        """Serialize the entry to 17 bytes."""
        name = self.name.encode("ascii", errors="replace")[:NAME_SIZE]
        return struct.pack(
            ENTRY_FORMAT,
            self.start,
            self.length1,
            self.var_type,
            name.ljust(NAME_SIZE, b"\x00"),
            self.version,
            self.flags,
            self.length2,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "VariableEntry":
        """Deserialize an entry from the first 17 bytes of ``data``."""
        if len(data) < ENTRY_SIZE:
            raise ValueError(f"Variable entry too short: need {ENTRY_SIZE} bytes, got {len(data)}")

        start, length1, var_type, name, version, flags, length2 = struct.unpack_from(
            ENTRY_FORMAT, data
        )
        return cls(
            name=_unpad(name),
            length1=length1,
            length2=length2,
            var_type=var_type,
            start=start,
            version=version,
            flags=flags,
        )

    @property
    def is_archived(self) -> bool:
        return bool(self.flags & ARCHIVED_FLAG)

    def get_type_name(self) -> str:
        try:
            return VariableType(self.var_type).name.replace("_", " ").title()
        except ValueError:
            return f"Unknown (0x{self.var_type:02X})"
