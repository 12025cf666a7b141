"""
TI-BASIC Tools - Compiler and Decompiler for TI-83 Plus Family Programs
=======================================================================

This package translates between human-readable TI-BASIC source text and
the tokenized .8xp program files used by the TI-83 Plus and TI-84 Plus
calculators.

Main Components
---------------
- **tokens**: The mnemonic <-> opcode token table
- **compiler**: Line scanner, greedy tokenizer and detokenizer
- **container**: .8xp file builder, parser and checksum
- **translator**: High-level compile/decompile of files
- **cli**: The ``tibasic`` command-line tool

Quick Start
-----------
Compile a program:
    >>> from tibasic import Translator
    >>> Translator().compile_file("hello.txt", "HELLO.8xp")

Decompile a program:
    >>> Translator().decompile_file("HELLO.8xp", "hello.txt")

Or use the command-line tool:
    $ tibasic compile hello.txt -o HELLO.8xp
    $ tibasic decompile HELLO.8xp -o hello.txt
    $ tibasic info HELLO.8xp

Version History
---------------
1.0.0 - Initial release with compiler, decompiler and file inspection
"""

__version__ = "1.0.0"
__author__ = "TI-BASIC Tools Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from tibasic.errors import (
    TIBasicError,
    SourceLocation,
    TokenizeError,
    InvalidTokenError,
    ContainerError,
    ContainerFormatError,
    PayloadTooLargeError,
    ChecksumError,
)

from tibasic.tokens import TokenEntry, TokenTable, get_default_table

from tibasic.compiler import (
    Detokenizer,
    DetokenizerState,
    OpcodeStream,
    SourceLine,
    Tokenizer,
    scan_lines,
    scan_source,
)

from tibasic.container import (
    ProgramBuilder,
    ProgramHeader,
    ProgramParser,
    VariableEntry,
    calculate_checksum,
    derive_variable_name,
    verify_checksum,
)

from tibasic.config import TranslatorConfig
from tibasic.translator import Translator

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Exception hierarchy
    "TIBasicError",
    "SourceLocation",
    "TokenizeError",
    "InvalidTokenError",
    "ContainerError",
    "ContainerFormatError",
    "PayloadTooLargeError",
    "ChecksumError",
    # Token table
    "TokenEntry",
    "TokenTable",
    "get_default_table",
    # Compiler core
    "Detokenizer",
    "DetokenizerState",
    "OpcodeStream",
    "SourceLine",
    "Tokenizer",
    "scan_lines",
    "scan_source",
    # Container
    "ProgramBuilder",
    "ProgramHeader",
    "ProgramParser",
    "VariableEntry",
    "calculate_checksum",
    "derive_variable_name",
    "verify_checksum",
    # High-level API
    "TranslatorConfig",
    "Translator",
]
