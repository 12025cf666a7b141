"""
Token Table
===========

Bidirectional mapping between TI-BASIC mnemonics and their 1- or 2-byte
opcodes. The compile path looks entries up by mnemonic; the decompile
path looks them up by opcode value.

Opcode Values
-------------
Opcodes are stored as the little-endian value of their on-disk bytes.
A two-byte token written as ``BB 6C`` (AsmPrgm) has opcode 0x6CBB, so
peeking two payload bytes little-endian yields a value that can be
looked up directly.

Reverse Lookups
---------------
The reverse index is not single-valued at the byte level, so two paths
are kept:

- ``lookup_by_opcode_16(v)`` matches the full 16-bit value
- ``lookup_by_opcode_8(v)`` matches the low byte only

``lookup_by_opcode_8`` can return a two-byte entry whose suffix byte is
zero (e.g. ``Str1`` = 0x00AA). The detokenizer still advances by that
entry's width.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from tibasic.tokens import data


@dataclass(frozen=True)
class TokenEntry:
    """
    A single mnemonic <-> opcode mapping.

    This dataclass is immutable (frozen) so the table cannot be modified
    at runtime.

    Attributes:
        mnemonic: Textual token name (e.g. "Disp", "→", "\\n")
        opcode: Little-endian opcode value (0x0000-0xFFFF)
        width: Encoded size in bytes (1 or 2)
    """
    mnemonic: str
    opcode: int
    width: int

    def __post_init__(self) -> None:
        if not self.mnemonic:
            raise ValueError("Token mnemonic must not be empty")
        if self.width not in (1, 2):
            raise ValueError(f"Token width must be 1 or 2, got {self.width}")
        limit = 0xFF if self.width == 1 else 0xFFFF
        if not 0 <= self.opcode <= limit:
            raise ValueError(
                f"Opcode 0x{self.opcode:X} does not fit in {self.width} byte(s) "
                f"for {self.mnemonic!r}"
            )

    def to_bytes(self) -> bytes:
        """Encode the opcode as it appears in a program payload."""
        return self.opcode.to_bytes(self.width, "little")

    def __repr__(self) -> str:
        digits = 2 * self.width
        return f"TokenEntry({self.mnemonic!r}, opcode=0x{self.opcode:0{digits}X}, width={self.width})"


@dataclass
class TokenTable:
    """
    Read-only token table with mnemonic and opcode indices.

    Example:
        >>> table = TokenTable.from_entries([
        ...     TokenEntry("Disp", 0xDE, 1),
        ...     TokenEntry("Str1", 0x00AA, 2),
        ... ])
        >>> table.lookup_by_mnemonic("Disp").opcode
        222
        >>> table.lookup_by_opcode_16(0x00AA).mnemonic
        'Str1'
    """
    entries: tuple[TokenEntry, ...]
    _by_mnemonic: dict[str, TokenEntry] = field(init=False, repr=False)
    _by_opcode: dict[int, TokenEntry] = field(init=False, repr=False)
    _longest: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_mnemonic = {}
        self._by_opcode = {}

        for entry in self.entries:
            if entry.mnemonic in self._by_mnemonic:
                raise ValueError(f"Duplicate mnemonic {entry.mnemonic!r}")
            self._by_mnemonic[entry.mnemonic] = entry
            # First entry registered for an opcode is the canonical one
            self._by_opcode.setdefault(entry.opcode, entry)

        self._longest = max((len(e.mnemonic) for e in self.entries), default=0)

    @classmethod
    def from_entries(cls, entries: Iterable[TokenEntry]) -> "TokenTable":
        return cls(entries=tuple(entries))

    @classmethod
    def from_data(
        cls,
        one_byte: dict[int, str],
        two_byte: dict[int, dict[int, str]],
    ) -> "TokenTable":
        """
        Build a table from the declarative token dictionaries.

        Args:
            one_byte: opcode byte -> mnemonic
            two_byte: prefix byte -> {suffix byte -> mnemonic}
        """
        entries = [
            TokenEntry(mnemonic, opcode, 1)
            for opcode, mnemonic in one_byte.items()
        ]
        for prefix, suffixes in two_byte.items():
            entries.extend(
                TokenEntry(mnemonic, prefix | (suffix << 8), 2)
                for suffix, mnemonic in suffixes.items()
            )
        return cls.from_entries(entries)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def lookup_by_mnemonic(self, mnemonic: str) -> Optional[TokenEntry]:
        """Exact, case-sensitive mnemonic match."""
        return self._by_mnemonic.get(mnemonic)

    def lookup_by_opcode_16(self, value: int) -> Optional[TokenEntry]:
        """Match against the full 16-bit opcode value."""
        return self._by_opcode.get(value & 0xFFFF)

    def lookup_by_opcode_8(self, value: int) -> Optional[TokenEntry]:
        """Match against the low byte of ``value`` only."""
        return self._by_opcode.get(value & 0xFF)

    def longest_mnemonic(self) -> int:
        """Length of the longest mnemonic, bounding greedy matching."""
        return self._longest

    @property
    def newline_entry(self) -> Optional[TokenEntry]:
        """The entry emitted after each source line, if the table has one."""
        return self._by_mnemonic.get(data.NEWLINE)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TokenEntry]:
        return iter(self.entries)

    def __contains__(self, mnemonic: object) -> bool:
        return mnemonic in self._by_mnemonic


@lru_cache(maxsize=1)
def get_default_table() -> TokenTable:
    """Return the shared TI-83 Plus / TI-84 Plus token table."""
    return TokenTable.from_data(data.ONE_BYTE_TOKENS, data.TWO_BYTE_TOKENS)
