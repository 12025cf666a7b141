"""
TI-BASIC Compiler and Decompiler Core
=====================================

- **scanner**: strips comments and spaces, yields non-empty source lines
- **tokenizer**: greedy longest-match tokenization into an opcode stream
- **detokenizer**: decodes a payload back to text, with AsmPrgm escape

Usage:
    from tibasic.compiler import Tokenizer, Detokenizer

    payload = Tokenizer().tokenize_source("Disp 42").to_bytes()
    text = Detokenizer().detokenize(payload)
"""

from tibasic.compiler.scanner import SourceLine, clean_line, scan_lines, scan_source
from tibasic.compiler.tokenizer import OpcodeStream, Tokenizer
from tibasic.compiler.detokenizer import Detokenizer, DetokenizerState

__all__ = [
    "SourceLine",
    "clean_line",
    "scan_lines",
    "scan_source",
    "OpcodeStream",
    "Tokenizer",
    "Detokenizer",
    "DetokenizerState",
]
