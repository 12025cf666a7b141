"""
TI-BASIC Detokenizer
====================

Decodes a program payload back into source text.

Decoding works on two-byte windows peeked little-endian. In NORMAL
state each window is resolved as:

1. 16-bit lookup of the full window value
2. 8-bit lookup of the low byte
3. Neither: the low byte is emitted as a literal character

and the position advances by the matched entry's width (one byte for a
literal). An entry found by the 8-bit lookup still advances by its own
width, so a two-byte entry matched on its prefix alone consumes the
following byte as well.

Emitting ``AsmPrgm`` toggles ASM state. In ASM state every byte is
copied verbatim as a character, except that the AsmPrgm byte pair is
emitted as its mnemonic and returns to NORMAL. A 0x3F byte (the newline
opcode) is preceded by a newline so machine code listings stay one line
per instruction.

Example
-------
>>> Detokenizer().detokenize(bytes([0xDE, 0x29, 0x41, 0x3F]))
'Disp A\\n'
"""

from enum import Enum, auto
from typing import Optional
import logging

from tibasic.tokens import ASM_PROGRAM, NEWLINE, TokenTable, get_default_table

logger = logging.getLogger(__name__)

ASM_NEWLINE_BYTE = 0x3F


class DetokenizerState(Enum):
    """Decoding state; toggled by the AsmPrgm token."""
    NORMAL = auto()
    ASM = auto()


class Detokenizer:
    """
    Payload-to-text decoder.

    Usage:
        detok = Detokenizer()
        text = detok.detokenize(payload)
    """

    def __init__(self, table: Optional[TokenTable] = None):
        self.table = table or get_default_table()

    def detokenize(self, payload: bytes) -> str:
        """
        Decode a complete payload.

        Args:
            payload: The opcode bytes between the length prefix and checksum

        Returns:
            Decoded program text
        """
        output: list[str] = []
        state = DetokenizerState.NORMAL
        pos = 0
        asm = self.table.lookup_by_mnemonic(ASM_PROGRAM)
        asm_bytes = asm.to_bytes() if asm is not None else None

        while pos < len(payload):
            low = payload[pos]

            if state is DetokenizerState.ASM:
                if payload[pos:pos + 2] == asm_bytes:
                    output.append(ASM_PROGRAM)
                    pos += len(asm_bytes)
                    state = DetokenizerState.NORMAL
                    logger.debug(f"Offset {pos}: {ASM_PROGRAM} switches to {state.name}")
                    continue
                if low == ASM_NEWLINE_BYTE:
                    output.append(NEWLINE)
                output.append(chr(low))
                pos += 1
                continue

            high = payload[pos + 1] if pos + 1 < len(payload) else 0
            value = low | (high << 8)

            entry = self.table.lookup_by_opcode_16(value)
            if entry is None:
                entry = self.table.lookup_by_opcode_8(value)

            if entry is None:
                logger.debug(f"Offset {pos}: unknown opcode 0x{low:02X}, emitted as literal")
                output.append(chr(low))
                pos += 1
                continue

            output.append(entry.mnemonic)
            pos += entry.width

            if entry.mnemonic == ASM_PROGRAM:
                state = DetokenizerState.ASM
                logger.debug(f"Offset {pos}: {ASM_PROGRAM} switches to {state.name}")

        return "".join(output)
