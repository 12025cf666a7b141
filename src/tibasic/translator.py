"""
TI-BASIC Translator
===================

High-level compile and decompile operations tying together the scanner,
tokenizer, detokenizer and the .8xp container.

Compile:   source text -> scanner -> tokenizer -> builder -> .8xp bytes
Decompile: .8xp bytes -> parser -> detokenizer -> source text

Example
-------
>>> from tibasic import Translator
>>> translator = Translator()
>>> translator.compile_file("hello.txt", "HELLO.8xp")
>>> translator.decompile_file("HELLO.8xp", "hello_again.txt")
"""

from pathlib import Path
from typing import Optional, Union
import logging

from tibasic.compiler import Detokenizer, Tokenizer
from tibasic.config import TranslatorConfig
from tibasic.container import ProgramBuilder, ProgramParser, derive_variable_name
from tibasic.tokens import TokenTable, get_default_table

logger = logging.getLogger(__name__)

SOURCE_ENCODING = "utf-8"

# Program name when neither config.name nor an output name is given
DEFAULT_PROGRAM_NAME = "PROGRAM"


class Translator:
    """
    Compiles TI-BASIC source to .8xp files and back.

    Attributes:
        config: Translation settings
        table: Token table shared by both directions
    """

    def __init__(
        self,
        config: Optional[TranslatorConfig] = None,
        table: Optional[TokenTable] = None,
    ):
        self.config = config or TranslatorConfig()
        self.table = table or get_default_table()
        self.tokenizer = Tokenizer(self.table)
        self.detokenizer = Detokenizer(self.table)

    # -------------------------------------------------------------------------
    # Compile
    # -------------------------------------------------------------------------

    def compile_source(
        self,
        source: str,
        output_name: str = "",
        filename: str = "<input>",
    ) -> bytes:
        """
        Compile source text into a complete .8xp file image.

        Args:
            source: TI-BASIC source text
            output_name: Output path or file name the program name is
                derived from (ignored when config.name is set; empty
                means DEFAULT_PROGRAM_NAME)
            filename: Source name used in error messages

        Raises:
            InvalidTokenError: If the source contains an unknown token
            PayloadTooLargeError: If the program does not fit the container
            ValueError: If the program name or comment cannot be stored
        """
        stream = self.tokenizer.tokenize_source(source, filename)

        if self.config.name:
            name = self.config.name
        elif output_name:
            name = derive_variable_name(output_name)
        else:
            name = DEFAULT_PROGRAM_NAME

        builder = ProgramBuilder(
            name=name,
            comment=self.config.comment,
            archived=self.config.archived,
        )
        builder.set_payload(stream.to_bytes())

        logger.info(
            f"Compiled {filename}: {len(stream)} tokens, {stream.byte_length} bytes "
            f"as program {builder.name}"
        )
        return builder.build()

    def compile_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> int:
        """
        Compile a source file to a .8xp file.

        The output is only created once compilation has succeeded.

        Returns:
            Number of bytes written
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        # newline="" keeps \r so line splitting happens on \n only
        with open(input_path, encoding=SOURCE_ENCODING, newline="") as f:
            source = f.read()

        data = self.compile_source(source, str(output_path), filename=str(input_path))
        output_path.write_bytes(data)
        return len(data)

    # -------------------------------------------------------------------------
    # Decompile
    # -------------------------------------------------------------------------

    def decompile_bytes(self, data: bytes) -> str:
        """
        Decompile a .8xp file image into source text.

        Raises:
            ContainerFormatError: If the file is too short
            ChecksumError: On checksum mismatch with verify_checksum set
        """
        parser = ProgramParser.from_bytes(data)

        if not parser.checksum_valid:
            if self.config.verify_checksum:
                parser.verify_checksum()
            stored = (
                "missing" if parser.stored_checksum is None
                else f"0x{parser.stored_checksum:04X}"
            )
            logger.warning(
                f"Checksum mismatch in program {parser.entry.name}: "
                f"stored {stored}, computed 0x{parser.computed_checksum:04X}"
            )

        text = self.detokenizer.detokenize(parser.payload)
        logger.info(
            f"Decompiled program {parser.entry.name}: {len(parser.payload)} bytes"
        )
        return text

    def decompile_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> int:
        """
        Decompile a .8xp file into a source file.

        Returns:
            Number of characters written
        """
        text = self.decompile_bytes(Path(input_path).read_bytes())

        with open(output_path, "w", encoding=SOURCE_ENCODING, newline="") as f:
            return f.write(text)
