"""
Translator Integration Tests
============================

End-to-end compile and decompile through the Translator, plus the
environment-driven configuration.
"""

import logging

import pytest

from tibasic.config import TranslatorConfig
from tibasic.container import (
    HEADER_SIZE,
    PAYLOAD_OFFSET,
    ProgramBuilder,
    ProgramParser,
)
from tibasic.errors import (
    ChecksumError,
    ContainerFormatError,
    InvalidTokenError,
    PayloadTooLargeError,
)
from tibasic.translator import DEFAULT_PROGRAM_NAME, Translator


HELLO_SOURCE = 'Disp "HELLO"\nIf A=1\nThen\nEnd\n'


@pytest.fixture
def translator() -> Translator:
    return Translator()


@pytest.fixture
def hello_program(translator: Translator) -> bytes:
    return translator.compile_source(HELLO_SOURCE, "HELLO.8xp")


# =============================================================================
# Source Translation
# =============================================================================

class TestCompileSource:
    """Tests for Translator.compile_source()."""

    def test_single_letter_program(self, translator: Translator):
        data = translator.compile_source("A\n", "PROG.8xp")
        assert data[PAYLOAD_OFFSET:PAYLOAD_OFFSET + 2] == b"\x41\x3F"
        assert data[-2:] == (468).to_bytes(2, "little")

    def test_comment_only_source(self, translator: Translator):
        data = translator.compile_source("# nothing to see\n", "PROG.8xp")
        parser = ProgramParser.from_bytes(data)
        assert parser.payload_length == 0
        assert parser.checksum_valid

    def test_name_from_output_path(self, translator: Translator):
        data = translator.compile_source("A", "path/to/Hello.world.txt")
        assert ProgramParser.from_bytes(data).entry.name == "HELLO"

    def test_config_name_overrides_output(self):
        translator = Translator(TranslatorConfig(name="greet"))
        data = translator.compile_source("A", "HELLO.8xp")
        assert ProgramParser.from_bytes(data).entry.name == "GREET"

    def test_config_comment_and_archived(self):
        config = TranslatorConfig(comment="Demo", archived=True)
        parser = ProgramParser.from_bytes(Translator(config).compile_source("A", "X.8xp"))
        assert parser.header.comment == "Demo"
        assert parser.entry.is_archived

    def test_invalid_token_aborts(self, translator: Translator):
        with pytest.raises(InvalidTokenError):
            translator.compile_source("Disp $", "PROG.8xp")

    def test_payload_too_large(self, translator: Translator):
        with pytest.raises(PayloadTooLargeError):
            translator.compile_source("1" * 70000, "BIG.8xp")

    def test_default_program_name(self, translator: Translator):
        data = translator.compile_source("Disp A")
        assert ProgramParser.from_bytes(data).entry.name == DEFAULT_PROGRAM_NAME == "PROGRAM"

    def test_empty_name_rejected(self, translator: Translator):
        with pytest.raises(ValueError):
            translator.compile_source("A", ".8xp")


class TestDecompileBytes:
    """Tests for Translator.decompile_bytes()."""

    def test_roundtrip(self, translator: Translator, hello_program: bytes):
        assert translator.decompile_bytes(hello_program) == HELLO_SOURCE

    def test_recompile_is_identical(self, translator: Translator, hello_program: bytes):
        text = translator.decompile_bytes(hello_program)
        assert translator.compile_source(text, "HELLO.8xp") == hello_program

    def test_lowercase_source_becomes_letters(self, translator: Translator):
        data = translator.compile_source("disp a", "PROG.8xp")
        assert translator.decompile_bytes(data) == "DISP A\n"

    def test_asm_program(self, translator: Translator):
        builder = ProgramBuilder(name="ASM")
        builder.set_payload(bytes([0xBB, 0x6C, 0x3F, 0x43, 0x39]))
        assert translator.decompile_bytes(builder.build()) == "AsmPrgm\n?C9"

    def test_too_short(self, translator: Translator):
        with pytest.raises(ContainerFormatError):
            translator.decompile_bytes(b"**TI83F*")

    def test_checksum_mismatch_warns(self, translator: Translator, hello_program: bytes, caplog):
        corrupted = hello_program[:-2] + b"\x00\x00"
        with caplog.at_level(logging.WARNING):
            text = translator.decompile_bytes(corrupted)
        assert text == HELLO_SOURCE
        assert "Checksum mismatch" in caplog.text

    def test_checksum_mismatch_strict(self, hello_program: bytes):
        translator = Translator(TranslatorConfig(verify_checksum=True))
        with pytest.raises(ChecksumError):
            translator.decompile_bytes(hello_program[:-2] + b"\x00\x00")

    def test_strict_accepts_valid_file(self, hello_program: bytes):
        translator = Translator(TranslatorConfig(verify_checksum=True))
        assert translator.decompile_bytes(hello_program) == HELLO_SOURCE

    def test_header_changes_do_not_affect_checksum(self, hello_program: bytes):
        translator = Translator(TranslatorConfig(verify_checksum=True))
        changed = b"X" * HEADER_SIZE + hello_program[HEADER_SIZE:]
        assert translator.decompile_bytes(changed) == HELLO_SOURCE


# =============================================================================
# File Translation
# =============================================================================

class TestFiles:
    """Tests for compile_file() and decompile_file()."""

    def test_compile_file(self, translator: Translator, tmp_path):
        source = tmp_path / "hello.txt"
        source.write_text('Disp "HI"\n', encoding="utf-8")
        output = tmp_path / "HELLO.8xp"

        written = translator.compile_file(source, output)

        data = output.read_bytes()
        assert written == len(data) == PAYLOAD_OFFSET + 7 + 2
        assert ProgramParser.from_bytes(data).entry.name == "HELLO"

    def test_no_output_on_failure(self, translator: Translator, tmp_path):
        source = tmp_path / "bad.txt"
        source.write_text("Disp A\nDisp $\n", encoding="utf-8")
        output = tmp_path / "BAD.8xp"

        with pytest.raises(InvalidTokenError) as excinfo:
            translator.compile_file(source, output)

        assert not output.exists()
        assert excinfo.value.location.filename == str(source)

    def test_crlf_source_rejected(self, translator: Translator, tmp_path):
        source = tmp_path / "dos.txt"
        source.write_bytes(b"Disp A\r\n")
        with pytest.raises(InvalidTokenError, match="carriage returns"):
            translator.compile_file(source, tmp_path / "DOS.8xp")

    def test_utf8_source(self, translator: Translator, tmp_path):
        source = tmp_path / "store.txt"
        source.write_text("10→X\n", encoding="utf-8")
        output = tmp_path / "STORE.8xp"
        translator.compile_file(source, output)
        payload = ProgramParser.from_file(output).payload
        assert payload == bytes([0x31, 0x30, 0x04, 0x58, 0x3F])

    def test_missing_input(self, translator: Translator, tmp_path):
        with pytest.raises(FileNotFoundError):
            translator.compile_file(tmp_path / "missing.txt", tmp_path / "OUT.8xp")

    def test_decompile_file(self, translator: Translator, tmp_path, hello_program: bytes):
        program = tmp_path / "HELLO.8xp"
        program.write_bytes(hello_program)
        output = tmp_path / "hello.txt"

        written = translator.decompile_file(program, output)

        assert written == len(HELLO_SOURCE)
        assert output.read_text(encoding="utf-8") == HELLO_SOURCE

    def test_asm_high_bytes_written_as_utf8(self, translator: Translator, tmp_path):
        builder = ProgramBuilder(name="ASM")
        builder.set_payload(bytes([0xBB, 0x6C, 0xC9]))
        program = tmp_path / "ASM.8xp"
        program.write_bytes(builder.build())

        translator.decompile_file(program, tmp_path / "asm.txt")

        assert (tmp_path / "asm.txt").read_bytes() == b"AsmPrgm" + "\xc9".encode("utf-8")

    def test_file_roundtrip(self, translator: Translator, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("ClrHome\nOutput(1,1,\"HI\")\nPause\n", encoding="utf-8")
        translator.compile_file(source, tmp_path / "PROG.8xp")
        translator.decompile_file(tmp_path / "PROG.8xp", tmp_path / "again.txt")
        assert (tmp_path / "again.txt").read_text(encoding="utf-8") == source.read_text(encoding="utf-8")


# =============================================================================
# Configuration
# =============================================================================

class TestTranslatorConfig:
    """Tests for TranslatorConfig.from_env()."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for var in ("TIBASIC_COMMENT", "TIBASIC_NAME", "TIBASIC_ARCHIVED", "TIBASIC_VERIFY_CHECKSUM"):
            monkeypatch.delenv(var, raising=False)

    def test_defaults(self):
        config = TranslatorConfig.from_env()
        assert config == TranslatorConfig()
        assert config.name is None
        assert not config.archived
        assert not config.verify_checksum

    def test_values_from_env(self, monkeypatch):
        monkeypatch.setenv("TIBASIC_COMMENT", "From env")
        monkeypatch.setenv("TIBASIC_NAME", "greet")
        monkeypatch.setenv("TIBASIC_ARCHIVED", "yes")
        monkeypatch.setenv("TIBASIC_VERIFY_CHECKSUM", "1")

        config = TranslatorConfig.from_env()

        assert config.comment == "From env"
        assert config.name == "greet"
        assert config.archived
        assert config.verify_checksum

    def test_empty_comment_allowed(self, monkeypatch):
        monkeypatch.setenv("TIBASIC_COMMENT", "")
        assert TranslatorConfig.from_env().comment == ""

    def test_invalid_bool_ignored(self, monkeypatch):
        monkeypatch.setenv("TIBASIC_ARCHIVED", "maybe")
        assert not TranslatorConfig.from_env().archived

    def test_false_values(self, monkeypatch):
        monkeypatch.setenv("TIBASIC_VERIFY_CHECKSUM", "off")
        assert not TranslatorConfig.from_env().verify_checksum
