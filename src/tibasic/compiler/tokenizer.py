"""
TI-BASIC Tokenizer
==================

Converts cleaned source lines into an opcode stream using greedy
longest-match against the token table.

Matching
--------
At each position the tokenizer tries the longest candidate first:

1. ``width = min(longest_mnemonic, remaining)``
2. Look up ``line[pos:pos + width]``; on a miss shrink ``width`` by one
   and retry down to a single character
3. If nothing matched and the character is an ASCII letter, emit the
   uppercase letter as a one-byte variable token
4. Otherwise the compile fails with InvalidTokenError

Multi-character mnemonics are matched case-sensitively; only the
single-letter fallback is uppercased. The table's newline entry is
appended after every line.

Example
-------
>>> from tibasic.compiler.tokenizer import Tokenizer
>>> stream = Tokenizer().tokenize_source("Disp A")
>>> stream.to_bytes().hex()
'de29413f'
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional
import logging
import string

from tibasic.compiler.scanner import SourceLine, scan_source
from tibasic.errors import InvalidTokenError, SourceLocation
from tibasic.tokens import TokenEntry, TokenTable, get_default_table

logger = logging.getLogger(__name__)

LETTERS = frozenset(string.ascii_letters)


# =============================================================================
# Opcode Stream
# =============================================================================

@dataclass
class OpcodeStream:
    """
    Ordered sequence of tokens produced by the tokenizer.

    The serialized length is the sum of the token widths.
    """
    tokens: list[TokenEntry] = field(default_factory=list)

    def append(self, entry: TokenEntry) -> None:
        self.tokens.append(entry)

    def extend(self, entries: Iterable[TokenEntry]) -> None:
        self.tokens.extend(entries)

    @property
    def byte_length(self) -> int:
        return sum(entry.width for entry in self.tokens)

    def to_bytes(self) -> bytes:
        """Serialize each opcode in its width, little-endian."""
        return b"".join(entry.to_bytes() for entry in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[TokenEntry]:
        return iter(self.tokens)


# =============================================================================
# Tokenizer
# =============================================================================

class Tokenizer:
    """
    Greedy longest-match tokenizer.

    Usage:
        tokenizer = Tokenizer()
        stream = tokenizer.tokenize_source(text, filename="prog.txt")
        payload = stream.to_bytes()
    """

    def __init__(self, table: Optional[TokenTable] = None):
        self.table = table or get_default_table()

    def match(self, text: str) -> Optional[TokenEntry]:
        """
        Find the longest table entry that prefixes ``text``.

        Falls back to an uppercase letter token when ``text`` starts
        with an ASCII letter that begins no mnemonic.
        """
        width = min(self.table.longest_mnemonic(), len(text))
        while width > 0:
            entry = self.table.lookup_by_mnemonic(text[:width])
            if entry is not None:
                return entry
            width -= 1

        if text[:1] in LETTERS:
            letter = text[0].upper()
            return TokenEntry(letter, ord(letter), 1)

        return None

    def tokenize_line(
        self,
        line: SourceLine,
        filename: str = "<input>",
    ) -> list[TokenEntry]:
        """
        Tokenize one cleaned line, without the trailing newline token.

        Raises:
            InvalidTokenError: If no token matches at some position
        """
        tokens: list[TokenEntry] = []
        pos = 0
        text = line.text

        while pos < len(text):
            entry = self.match(text[pos:])
            if entry is None:
                location = SourceLocation(filename, line.number, line.column + pos)
                logger.error(f"{location}: invalid token {text[pos]!r}")
                # Restore the indent so the caret lines up with location.column
                source_line = " " * (line.column - 1) + text
                raise InvalidTokenError(text[pos:], location=location, source_line=source_line)

            logger.debug(f"Token: {entry.mnemonic!r} -> {entry!r}")
            tokens.append(entry)
            # The letter fallback consumes one character like its mnemonic
            pos += len(entry.mnemonic)

        return tokens

    def tokenize(
        self,
        lines: Iterable[SourceLine],
        filename: str = "<input>",
    ) -> OpcodeStream:
        """Tokenize scanned lines into an opcode stream."""
        stream = OpcodeStream()
        newline = self.table.newline_entry

        for line in lines:
            stream.extend(self.tokenize_line(line, filename))
            if newline is not None:
                stream.append(newline)

        return stream

    def tokenize_source(self, source: str, filename: str = "<input>") -> OpcodeStream:
        """Scan and tokenize complete source text."""
        return self.tokenize(scan_source(source), filename)
