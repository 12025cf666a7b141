"""
TI-BASIC Tools Command-Line Interface
=====================================

- **tibasic compile**: TI-BASIC source to .8xp
- **tibasic decompile**: .8xp to TI-BASIC source
- **tibasic info**: show the fields of a .8xp file

Implemented as a Click group with unified error reporting.
"""

__all__ = ["tibasic"]
