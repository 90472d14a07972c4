"""Resolved print configuration.

``PrintConfig`` is the only configuration the renderer reads. It is built
from ``PrintConfig.default()``, through the ``with_*`` builder methods, or
by ``ptree.loader.load_config`` which layers a config file and environment
overrides on top of the default.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import IO, Any, Sequence

from ptree.renderers.charset import Indent, IndentChars
from ptree.style import PLAIN, Style
from ptree.types import StyleWhen


def _check_limit(name: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class PrintConfig:
    """Options controlling how a tree is drawn.

    Attributes:
        indent: Width of one nesting level, glyph included.
        characters: Glyphs used for branches and continuation columns.
        branch: Style of the prefix glyphs and elision markers.
        leaf: Style of node labels.
        root: Style of the root label; falls back to the label style at depth 0.
        depth_styles: Label style per depth; entry N wins over ``leaf`` at depth N.
        max_depth: Deepest level whose children are printed; ``None`` is unbounded.
        max_siblings: Children printed per node before eliding; ``None`` is unbounded.
        styled: When to emit escape sequences.
        trailing_newline: Terminate the last line with a newline.
    """

    indent: int = 4
    characters: IndentChars = field(default_factory=IndentChars.ascii)
    branch: Style = Style(dimmed=True)
    leaf: Style = PLAIN
    root: Style | None = None
    depth_styles: tuple[Style, ...] = ()
    max_depth: int | None = None
    max_siblings: int | None = None
    styled: StyleWhen = StyleWhen.Tty
    trailing_newline: bool = True

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        _check_limit("max_depth", self.max_depth)
        _check_limit("max_siblings", self.max_siblings)
        if not isinstance(self.depth_styles, tuple):
            object.__setattr__(self, "depth_styles", tuple(self.depth_styles))

    @classmethod
    def default(cls) -> PrintConfig:
        return cls()

    # ─── Builder ─────────────────────────────────────────────────────────────

    def with_indent(self, indent: int) -> PrintConfig:
        return replace(self, indent=indent)

    def with_characters(self, characters: IndentChars | str) -> PrintConfig:
        if isinstance(characters, str):
            characters = IndentChars.from_name(characters)
        return replace(self, characters=characters)

    def with_branch(self, style: Style) -> PrintConfig:
        return replace(self, branch=style)

    def with_leaf(self, style: Style) -> PrintConfig:
        return replace(self, leaf=style)

    def with_root(self, style: Style | None) -> PrintConfig:
        return replace(self, root=style)

    def with_depth_styles(self, styles: Sequence[Style]) -> PrintConfig:
        return replace(self, depth_styles=tuple(styles))

    def with_max_depth(self, max_depth: int | None) -> PrintConfig:
        return replace(self, max_depth=max_depth)

    def with_max_siblings(self, max_siblings: int | None) -> PrintConfig:
        return replace(self, max_siblings=max_siblings)

    def with_styled(self, styled: StyleWhen | str) -> PrintConfig:
        return replace(self, styled=StyleWhen(styled))

    def with_trailing_newline(self, trailing_newline: bool) -> PrintConfig:
        return replace(self, trailing_newline=trailing_newline)

    def with_plain_styles(self) -> PrintConfig:
        """Drop every configured style, keeping glyphs and limits."""
        return replace(self, branch=PLAIN, leaf=PLAIN, root=None, depth_styles=())

    # ─── Queries ─────────────────────────────────────────────────────────────

    def should_style_output(self, sink: IO[Any] | Any) -> bool:
        """Decide once per render whether escape sequences go to ``sink``."""
        match self.styled:
            case StyleWhen.Always:
                return True
            case StyleWhen.Never:
                return False
        isatty = getattr(sink, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except (OSError, ValueError):
            # closed or detached streams
            return False

    def create_indent(self) -> Indent:
        return Indent.from_characters(self.indent, self.characters)

    def label_style(self, depth: int) -> Style:
        if depth == 0 and self.root is not None:
            return self.root
        if depth < len(self.depth_styles):
            return self.depth_styles[depth]
        return self.leaf

    def depth_exceeded(self, depth: int) -> bool:
        return self.max_depth is not None and depth >= self.max_depth
