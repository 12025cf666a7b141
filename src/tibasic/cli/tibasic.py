"""
tibasic - TI-BASIC Compiler/Decompiler Command-Line Interface
=============================================================

Commands
--------
- **compile**: Tokenize a TI-BASIC source file into a .8xp program
- **decompile**: Turn a .8xp program back into source text
- **info**: Show the header and variable entry of a .8xp program

Usage Examples
--------------
Compile a program (writes hello.8xp, program name HELLO):
    $ tibasic compile hello.txt

Compile with explicit output and name:
    $ tibasic compile hello.txt -o build/GREET.8xp --name GREET

Show each matched token:
    $ tibasic compile -v hello.txt

Decompile, failing on a bad checksum:
    $ tibasic decompile GREET.8xp -o greet.txt --verify

Inspect a program file:
    $ tibasic info GREET.8xp
"""

from pathlib import Path
from typing import Optional
import logging

import click

from tibasic import __version__
from tibasic.cli.errors import handle_cli_exception
from tibasic.config import TranslatorConfig
from tibasic.container import ProgramParser
from tibasic.translator import Translator


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="tibasic")
def main() -> None:
    """
    TI-BASIC compiler and decompiler for TI-83 Plus family calculators.

    \b
    Commands:
      compile    Source text to .8xp program
      decompile  .8xp program to source text
      info       Show program file details

    \b
    Examples:
      tibasic compile hello.txt -o HELLO.8xp
      tibasic decompile HELLO.8xp -o hello.txt
      tibasic info HELLO.8xp
    """
    pass


# =============================================================================
# Compile Command
# =============================================================================

@main.command("compile")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .8xp file (default: input.8xp)",
)
@click.option(
    "-n", "--name",
    help="Program name on the calculator (default: from output file name)",
)
@click.option(
    "-c", "--comment",
    help="Header comment, up to 42 ASCII characters",
)
@click.option(
    "--archived",
    is_flag=True,
    help="Mark the program as archived",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show each matched token",
)
def cmd_compile(
    input_file: Path,
    output: Optional[Path],
    name: Optional[str],
    comment: Optional[str],
    archived: bool,
    verbose: bool,
) -> None:
    """
    Compile a TI-BASIC source file into a .8xp program.

    INPUT_FILE is UTF-8 text. '#' starts a comment; blank lines and
    surrounding spaces are ignored.

    \b
    Examples:
      tibasic compile hello.txt
      tibasic compile hello.txt -o GREET.8xp --comment "Hello demo"
    """
    setup_logging(verbose)
    output = output or input_file.with_suffix(".8xp")

    try:
        config = TranslatorConfig.from_env()
        if name is not None:
            config.name = name
        if comment is not None:
            config.comment = comment
        if archived:
            config.archived = True

        bytes_written = Translator(config).compile_file(input_file, output)
        click.echo(f"Compiled {input_file} -> {output} ({bytes_written} bytes)")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Compile")


# =============================================================================
# Decompile Command
# =============================================================================

@main.command("decompile")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output text file (default: input.txt)",
)
@click.option(
    "--verify/--no-verify",
    default=None,
    help="Fail on checksum mismatch instead of warning",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
def cmd_decompile(
    input_file: Path,
    output: Optional[Path],
    verify: Optional[bool],
    verbose: bool,
) -> None:
    """
    Decompile a .8xp program into TI-BASIC source text.

    \b
    Examples:
      tibasic decompile HELLO.8xp
      tibasic decompile HELLO.8xp -o hello.txt --verify
    """
    setup_logging(verbose)
    output = output or input_file.with_suffix(".txt")

    try:
        config = TranslatorConfig.from_env()
        if verify is not None:
            config.verify_checksum = verify

        chars_written = Translator(config).decompile_file(input_file, output)
        click.echo(f"Decompiled {input_file} -> {output} ({chars_written} characters)")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Decompile")


# =============================================================================
# Info Command
# =============================================================================

@main.command("info")
@click.argument(
    "program_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def cmd_info(program_file: Path) -> None:
    """
    Show detailed information about a .8xp program file.

    \b
    Example:
      tibasic info HELLO.8xp
    """
    try:
        parser = ProgramParser.from_file(program_file)
        header = parser.header
        entry = parser.entry

        click.echo(f"Program File: {program_file}")
        click.echo("=" * 40)
        click.echo(f"Signature:      {header.signature.decode('ascii', errors='replace')}"
                   + ("" if header.has_valid_signature else " (unexpected)"))
        click.echo(f"Comment:        {header.comment}")
        click.echo(f"Data length:    {header.data_length} bytes")
        click.echo()
        click.echo(f"Name:           {entry.name}")
        click.echo(f"Type:           {entry.get_type_name()} (0x{entry.var_type:02X})")
        click.echo(f"Archived:       {'yes' if entry.is_archived else 'no'}")
        click.echo(f"Entry lengths:  {entry.length1} / {entry.length2}")
        click.echo(f"Payload:        {parser.payload_length} bytes")
        click.echo()

        stored = (
            "missing" if parser.stored_checksum is None
            else f"0x{parser.stored_checksum:04X}"
        )
        click.echo(f"Checksum:       {stored}")
        click.echo(f"Computed:       0x{parser.computed_checksum:04X}")
        click.echo(f"Status:         {'valid' if parser.checksum_valid else 'MISMATCH'}")

    except Exception as e:
        handle_cli_exception(e)
