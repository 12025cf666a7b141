"""
Tests for the tibasic command-line tool
=======================================

These tests drive the click commands through CliRunner inside an
isolated filesystem and check output files and exit codes.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tibasic import __version__
from tibasic.cli.errors import ExitCode
from tibasic.cli.tibasic import main
from tibasic.container import ProgramParser


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("TIBASIC_COMMENT", "TIBASIC_NAME", "TIBASIC_ARCHIVED", "TIBASIC_VERIFY_CHECKSUM"):
        monkeypatch.delenv(var, raising=False)


def write_source(name: str = "hello.txt", text: str = 'Disp "HELLO"\n') -> Path:
    path = Path(name)
    path.write_text(text, encoding="utf-8")
    return path


# =============================================================================
# Main Group
# =============================================================================

class TestMain:
    """Tests for the command group."""

    def test_help(self, runner: CliRunner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "compile" in result.output
        assert "decompile" in result.output
        assert "info" in result.output

    def test_version(self, runner: CliRunner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Compile Command
# =============================================================================

class TestCompileCommand:
    """Tests for tibasic compile."""

    def test_default_output(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            result = runner.invoke(main, ["compile", "hello.txt"])

            assert result.exit_code == 0, f"Compile failed: {result.output}"
            assert "Compiled hello.txt -> hello.8xp" in result.output
            assert ProgramParser.from_file("hello.8xp").entry.name == "HELLO"

    def test_explicit_output(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            result = runner.invoke(main, ["compile", "hello.txt", "-o", "GREET.8xp"])

            assert result.exit_code == 0
            assert ProgramParser.from_file("GREET.8xp").entry.name == "GREET"

    def test_name_and_comment_options(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            result = runner.invoke(main, [
                "compile", "hello.txt", "-o", "out.8xp",
                "--name", "demo", "--comment", "Hello demo", "--archived",
            ])

            assert result.exit_code == 0
            parser = ProgramParser.from_file("out.8xp")
            assert parser.entry.name == "DEMO"
            assert parser.header.comment == "Hello demo"
            assert parser.entry.is_archived

    def test_env_name(self, runner: CliRunner, monkeypatch):
        monkeypatch.setenv("TIBASIC_NAME", "envname")
        with runner.isolated_filesystem():
            write_source()
            result = runner.invoke(main, ["compile", "hello.txt"])

            assert result.exit_code == 0
            assert ProgramParser.from_file("hello.8xp").entry.name == "ENVNAME"

    def test_invalid_token(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source("bad.txt", "Disp $\n")
            result = runner.invoke(main, ["compile", "bad.txt", "-o", "BAD.8xp"])

            assert result.exit_code == ExitCode.TRANSLATION_ERROR
            assert "bad.txt:1:6: error: invalid token '$'" in result.output
            assert not Path("BAD.8xp").exists()

    def test_non_ascii_comment(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            result = runner.invoke(main, ["compile", "hello.txt", "--comment", "café"])

            assert result.exit_code == ExitCode.INVALID_ARGS
            assert not Path("hello.8xp").exists()

    def test_missing_input(self, runner: CliRunner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["compile", "missing.txt"])
            assert result.exit_code == 2

    def test_verbose_lists_tokens(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            result = runner.invoke(main, ["compile", "-v", "hello.txt"])
            assert result.exit_code == 0


# =============================================================================
# Decompile Command
# =============================================================================

class TestDecompileCommand:
    """Tests for tibasic decompile."""

    def compile_hello(self, runner: CliRunner) -> None:
        write_source()
        result = runner.invoke(main, ["compile", "hello.txt", "-o", "HELLO.8xp"])
        assert result.exit_code == 0

    def test_decompile(self, runner: CliRunner):
        with runner.isolated_filesystem():
            self.compile_hello(runner)
            result = runner.invoke(main, ["decompile", "HELLO.8xp", "-o", "out.txt"])

            assert result.exit_code == 0, f"Decompile failed: {result.output}"
            assert Path("out.txt").read_text(encoding="utf-8") == 'Disp "HELLO"\n'

    def test_default_output(self, runner: CliRunner):
        with runner.isolated_filesystem():
            self.compile_hello(runner)
            result = runner.invoke(main, ["decompile", "HELLO.8xp"])

            assert result.exit_code == 0
            assert Path("HELLO.txt").exists()

    def test_verify_mismatch(self, runner: CliRunner):
        with runner.isolated_filesystem():
            self.compile_hello(runner)
            data = Path("HELLO.8xp").read_bytes()
            Path("HELLO.8xp").write_bytes(data[:-2] + b"\x00\x00")

            result = runner.invoke(main, ["decompile", "HELLO.8xp", "-o", "out.txt", "--verify"])

            assert result.exit_code == ExitCode.TRANSLATION_ERROR
            assert "checksum mismatch" in result.output
            assert not Path("out.txt").exists()

    def test_mismatch_without_verify(self, runner: CliRunner):
        with runner.isolated_filesystem():
            self.compile_hello(runner)
            data = Path("HELLO.8xp").read_bytes()
            Path("HELLO.8xp").write_bytes(data[:-2] + b"\x00\x00")

            result = runner.invoke(main, ["decompile", "HELLO.8xp", "-o", "out.txt"])

            assert result.exit_code == 0
            assert Path("out.txt").read_text(encoding="utf-8") == 'Disp "HELLO"\n'

    def test_too_short(self, runner: CliRunner):
        with runner.isolated_filesystem():
            Path("short.8xp").write_bytes(b"**TI83F*")
            result = runner.invoke(main, ["decompile", "short.8xp"])

            assert result.exit_code == ExitCode.TRANSLATION_ERROR
            assert "too small" in result.output


# =============================================================================
# Info Command
# =============================================================================

class TestInfoCommand:
    """Tests for tibasic info."""

    def test_info(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            runner.invoke(main, ["compile", "hello.txt", "-o", "HELLO.8xp"])
            result = runner.invoke(main, ["info", "HELLO.8xp"])

            assert result.exit_code == 0
            assert "Name:           HELLO" in result.output
            assert "Type:           Program (0x05)" in result.output
            assert "Status:         valid" in result.output

    def test_info_mismatch(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_source()
            runner.invoke(main, ["compile", "hello.txt", "-o", "HELLO.8xp"])
            data = Path("HELLO.8xp").read_bytes()
            Path("HELLO.8xp").write_bytes(data[:-2])

            result = runner.invoke(main, ["info", "HELLO.8xp"])

            assert result.exit_code == 0
            assert "missing" in result.output
            assert "MISMATCH" in result.output
