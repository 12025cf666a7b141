"""
Source Line Scanner
===================

Turns TI-BASIC source text into cleaned logical lines for the tokenizer.

Rules, applied in order to each input line:
1. Truncate at the first ``#`` (line comment)
2. Trim leading and trailing space characters (0x20 only)
3. Drop the line if nothing is left

Only the space character is trimmed. Tabs and carriage returns are kept
and will be rejected by the tokenizer as invalid tokens.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional
import logging

logger = logging.getLogger(__name__)

COMMENT_CHAR = "#"


@dataclass(frozen=True)
class SourceLine:
    """
    A cleaned, non-empty source line.

    Attributes:
        number: Line number in the input (1-indexed)
        text: Line text with comment and surrounding spaces removed
        column: Column of ``text[0]`` in the input line (1-indexed)
    """
    number: int
    text: str
    column: int = 1


def clean_line(raw: str) -> Optional[str]:
    """
    Apply the comment and trim rules to a single line.

    Returns:
        The cleaned text, or None if the line should be dropped

    Example:
        >>> clean_line("  Disp A  # show A")
        'Disp A'
        >>> clean_line("# only a comment") is None
        True
    """
    text = raw.split(COMMENT_CHAR, 1)[0].strip(" ")
    return text or None


def scan_lines(lines: Iterable[str]) -> Iterator[SourceLine]:
    """
    Lazily yield cleaned lines from an iterable of raw lines.

    Raw lines may carry a trailing ``\\n``; it is removed before cleaning.
    """
    for number, raw in enumerate(lines, start=1):
        raw = raw[:-1] if raw.endswith("\n") else raw
        text = clean_line(raw)
        if text is None:
            logger.debug(f"Line {number}: blank or comment only, skipped")
            continue
        column = len(raw) - len(raw.lstrip(" ")) + 1
        yield SourceLine(number=number, text=text, column=column)


def scan_source(source: str) -> Iterator[SourceLine]:
    """Split source text on ``\\n`` and scan the resulting lines."""
    return scan_lines(source.split("\n"))
