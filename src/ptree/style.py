"""Text styles and styled fragments.

A ``Style`` is plain data: colors plus decoration flags. Turning it into
terminal escape sequences is delegated to ``rich``.

Color names resolve in this order: the eight basic terminal colors, then
CSS color names (``"steelblue"``, ``"MediumSeaGreen"``), then rich's own
names (``"bright_red"``, ``"grey50"``).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Union

import webcolors
from rich.color import Color as RichColor
from rich.color import ColorParseError
from rich.style import Style as RichStyle

Color = Union[str, int, tuple[int, int, int]]

# "purple" is magenta in terminal palettes; rich maps the name to color 129
_ANSI_NAMES = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "purple": "magenta",
    "cyan": "cyan",
    "white": "white",
}


def _parse_color_name(value: str) -> RichColor:
    name = value.strip().lower()
    if name in _ANSI_NAMES:
        return RichColor.parse(_ANSI_NAMES[name])
    if not name.startswith("#"):
        try:
            r, g, b = webcolors.name_to_rgb(name.replace("-", "").replace("_", "").replace(" ", ""))
        except ValueError:
            pass
        else:
            return RichColor.from_rgb(r, g, b)
    try:
        return RichColor.parse(name.replace("-", "_").replace(" ", "_"))
    except ColorParseError as e:
        raise ValueError(f"unknown color {value!r}") from e


def parse_color(value: Color) -> RichColor:
    """Convert a user supplied color into a rich ``Color``.

    Args:
        value: A color name (``"red"``, ``"steelblue"``, ``"bright_red"``), a hex string
            (``"#4682b4"``), a palette index 0-255, or an ``(r, g, b)`` triple.

    Returns:
        The equivalent rich color.

    Raises:
        ValueError: If the value does not describe a color.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid color {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"palette color out of range: {value}")
        return RichColor.from_ansi(value)
    if isinstance(value, (tuple, list)):
        if len(value) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            raise ValueError(f"invalid RGB color {value!r}")
        r, g, b = value
        return RichColor.from_rgb(r, g, b)
    if isinstance(value, str):
        return _parse_color_name(value)
    raise ValueError(f"invalid color {value!r}")


@dataclass(frozen=True)
class Style:
    """How a span of text is emphasized."""

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    def __post_init__(self) -> None:
        for name in ("foreground", "background"):
            value = getattr(self, name)
            if value is None:
                continue
            parse_color(value)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))

    @property
    def is_plain(self) -> bool:
        return self == PLAIN

    def to_rich(self) -> RichStyle:
        return RichStyle(
            color=None if self.foreground is None else parse_color(self.foreground),
            bgcolor=None if self.background is None else parse_color(self.background),
            bold=self.bold or None,
            dim=self.dimmed or None,
            italic=self.italic or None,
            underline=self.underline or None,
            strike=self.strikethrough or None,
        )

    def apply(self, text: str) -> StyledText:
        return StyledText(text, self)

    def paint(self, text: str) -> str:
        """Return ``text`` wrapped in the escape sequences for this style."""
        if self.is_plain:
            return text
        return self.to_rich().render(text)

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


PLAIN = Style()


@dataclass(frozen=True)
class StyledText:
    """A span of text plus the style it should be painted with.

    ``style`` of ``None`` means the renderer picks the style for the node's
    role (root, leaf, label at depth N).
    """

    text: str
    style: Style | None = None

    def resolve(self, fallback: Style) -> StyledText:
        if self.style is not None:
            return self
        return StyledText(self.text, fallback)

    def paint(self) -> str:
        if self.style is None:
            return self.text
        return self.style.paint(self.text)
