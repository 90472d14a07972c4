"""Glyph sets and indentation prefixes for tree drawing."""

from __future__ import annotations

from dataclasses import dataclass

from ptree.types import CharSetName


@dataclass(frozen=True)
class IndentChars:
    down_and_right: str
    down: str
    turn_right: str
    right: str
    empty: str = " "
    ellipsis: str = "..."

    @classmethod
    def ascii(cls) -> IndentChars:
        return cls(
            down_and_right="|",
            down="|",
            turn_right="`",
            right="-",
        )

    @classmethod
    def ascii_plus(cls) -> IndentChars:
        return cls(
            down_and_right="+",
            down="|",
            turn_right="+",
            right="-",
        )

    @classmethod
    def utf(cls) -> IndentChars:
        return cls(
            down_and_right="├",
            down="│",
            turn_right="└",
            right="─",
            ellipsis="…",
        )

    @classmethod
    def utf_bold(cls) -> IndentChars:
        return cls(
            down_and_right="┣",
            down="┃",
            turn_right="┗",
            right="━",
            ellipsis="…",
        )

    @classmethod
    def utf_dashed(cls) -> IndentChars:
        return cls(
            down_and_right="├",
            down="┆",
            turn_right="└",
            right="╌",
            ellipsis="…",
        )

    @classmethod
    def utf_double(cls) -> IndentChars:
        return cls(
            down_and_right="╠",
            down="║",
            turn_right="╚",
            right="═",
            ellipsis="…",
        )

    @classmethod
    def for_charset(cls, cs: CharSetName) -> IndentChars:
        match cs:
            case CharSetName.Ascii | CharSetName.AsciiTick:
                return cls.ascii()
            case CharSetName.AsciiPlus:
                return cls.ascii_plus()
            case CharSetName.Utf:
                return cls.utf()
            case CharSetName.UtfBold:
                return cls.utf_bold()
            case CharSetName.UtfDashed:
                return cls.utf_dashed()
            case CharSetName.UtfDouble:
                return cls.utf_double()
        raise ValueError(f"Unknown character set: {cs}")

    @classmethod
    def from_name(cls, name: str) -> IndentChars:
        """Look up a built-in set by its config name ('utf', 'ascii-plus', ...).

        Raises:
            ValueError: If no set has that name.
        """
        try:
            cs = CharSetName(name.strip().lower())
        except ValueError:
            choices = ", ".join(repr(c.value) for c in CharSetName)
            raise ValueError(f"Unknown character set '{name}'; use one of {choices}") from None
        return cls.for_charset(cs)


@dataclass(frozen=True)
class Indent:
    """The four prefixes drawn for one level of nesting.

    ``regular`` / ``last_regular`` sit directly before a child's label;
    ``child`` / ``last_child`` continue the column below a non-last / last
    child for that child's own descendants.
    """

    regular: str
    child: str
    last_regular: str
    last_child: str

    @classmethod
    def from_characters(cls, indent_size: int, chars: IndentChars) -> Indent:
        n = max(indent_size - 2, 0)
        right_pad = chars.right * n
        empty_pad = chars.empty * n
        return cls(
            regular=f"{chars.down_and_right}{right_pad} ",
            child=f"{chars.down}{empty_pad} ",
            last_regular=f"{chars.turn_right}{right_pad} ",
            last_child=f"{chars.empty}{empty_pad} ",
        )

    def branch(self, is_last: bool) -> str:
        return self.last_regular if is_last else self.regular

    def continuation(self, is_last: bool) -> str:
        return self.last_child if is_last else self.child
