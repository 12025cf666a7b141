"""
Translator Configuration
========================

Settings shared by the compile and decompile paths. Configuration can
come from:
- Default values (defined here)
- Environment variables (``TranslatorConfig.from_env``)
- Command-line options, which override both
"""

from dataclasses import dataclass
from typing import Optional
import os

from tibasic.container import DEFAULT_COMMENT

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> Optional[bool]:
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


@dataclass
class TranslatorConfig:
    """
    Configuration for compile and decompile runs.

    Attributes:
        comment: Header comment written on compile (up to 42 ASCII chars)
        name: Program name override; None derives it from the output path
        archived: Set the archived flag in the variable entry on compile
        verify_checksum: Fail decompilation on checksum mismatch instead
            of logging a warning
    """
    comment: str = DEFAULT_COMMENT
    name: Optional[str] = None
    archived: bool = False
    verify_checksum: bool = False

    @classmethod
    def from_env(cls) -> "TranslatorConfig":
        """
        Create TranslatorConfig from environment variables.

        Environment variables (all optional):
            TIBASIC_COMMENT: Header comment
            TIBASIC_NAME: Program name override
            TIBASIC_ARCHIVED: 1/true/yes/on to mark programs archived
            TIBASIC_VERIFY_CHECKSUM: 1/true/yes/on for strict checksums

        Unrecognized boolean values are ignored.
        """
        config = cls()

        if (comment := os.environ.get("TIBASIC_COMMENT")) is not None:
            config.comment = comment

        if name := os.environ.get("TIBASIC_NAME"):
            config.name = name

        if archived := os.environ.get("TIBASIC_ARCHIVED"):
            parsed = _parse_bool(archived)
            if parsed is not None:
                config.archived = parsed

        if verify := os.environ.get("TIBASIC_VERIFY_CHECKSUM"):
            parsed = _parse_bool(verify)
            if parsed is not None:
                config.verify_checksum = parsed

        return config
