"""
TI-BASIC Token Table
====================

The token table is the single source of truth shared by the compile and
decompile paths. Its contents live in ``data.py`` as plain dictionaries;
``table.py`` builds the mnemonic and opcode indices from them.

Usage:
    from tibasic.tokens import get_default_table

    table = get_default_table()
    entry = table.lookup_by_mnemonic("Disp")
    print(f"{entry.mnemonic} = 0x{entry.opcode:02X}")
"""

from tibasic.tokens.data import ASM_PROGRAM, NEWLINE
from tibasic.tokens.table import TokenEntry, TokenTable, get_default_table

__all__ = [
    "ASM_PROGRAM",
    "NEWLINE",
    "TokenEntry",
    "TokenTable",
    "get_default_table",
]
