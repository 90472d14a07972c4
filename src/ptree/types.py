"""Shared type definitions for ptree.

Enums and small types used across the configuration, loader and renderers.
"""

from __future__ import annotations

from enum import Enum


class StyleWhen(Enum):
    """When escape sequences should be written."""

    Never = "never"
    Always = "always"
    Tty = "tty"  # only when the sink is an interactive terminal

    @classmethod
    def default(cls) -> StyleWhen:
        return cls.Tty


class CharSetName(Enum):
    """Built-in glyph sets, keyed by the name used in config files."""

    Ascii = "ascii"
    AsciiTick = "ascii-tick"
    AsciiPlus = "ascii-plus"
    Utf = "utf"
    UtfBold = "utf-bold"
    UtfDashed = "utf-dashed"
    UtfDouble = "utf-double"

    @classmethod
    def default(cls) -> CharSetName:
        return cls.Ascii


# Environment variable namespace
ENV_PREFIX = "PTREE_"
ENV_CONFIG_PATH = "PTREE_CONFIG"
