"""Indented text renderer ("tree command" style)."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import IO, Iterator

from ptree.config import PrintConfig
from ptree.item import TreeItem, label_fragments
from ptree.renderers.charset import Indent
from ptree.style import StyledText

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElisionMarker:
    """Synthetic line standing in for children that were not printed."""

    text: str


Entry = tuple["TreeItem | ElisionMarker", bool]


@dataclass
class _Frame:
    entries: Iterator[Entry]
    prefix: str
    depth: int


# ─── Traversal ───────────────────────────────────────────────────────────────


class TextRenderer:
    """Walks a tree depth-first and produces one line per node."""

    def __init__(self, config: PrintConfig | None = None) -> None:
        self.config = config if config is not None else PrintConfig.default()
        self.indent: Indent = self.config.create_indent()

    def _entries(self, node: TreeItem, depth: int) -> list[Entry]:
        """Children of ``node`` (at ``depth``) to print, each with its is-last flag."""
        cfg = self.config
        ellipsis = cfg.characters.ellipsis
        children = list(node.children())
        if not children:
            return []
        if cfg.depth_exceeded(depth):
            return [(ElisionMarker(f"{ellipsis} {len(children)} hidden"), True)]

        limit = cfg.max_siblings
        if limit is not None and len(children) > limit:
            entries: list[Entry] = [(c, False) for c in children[:limit]]
            entries.append((ElisionMarker(f"{ellipsis} {len(children) - limit} more"), True))
            return entries
        last = len(children) - 1
        return [(c, i == last) for i, c in enumerate(children)]

    def _label(self, node: TreeItem, depth: int) -> list[StyledText]:
        fallback = self.config.label_style(depth)
        return [f.resolve(fallback) for f in label_fragments(node.label())]

    def iter_lines(self, tree: TreeItem) -> Iterator[list[StyledText]]:
        """Yield each output line as styled fragments, without line terminators.

        Only the path from the root to the current node is held in memory.
        """
        branch_style = self.config.branch
        yield self._label(tree, 0)

        stack = [_Frame(iter(self._entries(tree, 0)), "", 1)]
        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                continue

            node, is_last = entry
            glyphs = branch_style.apply(frame.prefix + self.indent.branch(is_last))
            if isinstance(node, ElisionMarker):
                yield [glyphs, branch_style.apply(node.text)]
                continue

            yield [glyphs, *self._label(node, frame.depth)]
            child_entries = self._entries(node, frame.depth)
            if child_entries:
                stack.append(
                    _Frame(
                        iter(child_entries),
                        frame.prefix + self.indent.continuation(is_last),
                        frame.depth + 1,
                    )
                )

    def render(self, tree: TreeItem, sink: IO[str], styled: bool = False) -> None:
        """Write ``tree`` to ``sink``, one ``write`` call per fragment.

        Raises:
            OSError: If the sink fails; nothing further is written.
        """
        logger.debug("rendering %s (styled=%s)", type(tree).__name__, styled)
        first = True
        for line in self.iter_lines(tree):
            if not first:
                sink.write("\n")
            first = False
            for frag in line:
                if not frag.text:
                    continue
                sink.write(frag.paint() if styled else frag.text)
        if self.config.trailing_newline:
            sink.write("\n")


def render(tree: TreeItem, sink: IO[str], config: PrintConfig, styled: bool | None = None) -> None:
    """Render ``tree`` into ``sink`` using an already resolved ``config``.

    Args:
        tree: Any object implementing the ``TreeItem`` protocol.
        sink: Text stream receiving the output.
        config: Print configuration; never mutated.
        styled: Force styling on or off; ``None`` asks ``config`` about ``sink``.

    Raises:
        OSError: If writing to ``sink`` fails.
    """
    if styled is None:
        styled = config.should_style_output(sink)
    TextRenderer(config).render(tree, sink, styled)


def render_to_string(tree: TreeItem, config: PrintConfig | None = None, styled: bool = False) -> str:
    """Render ``tree`` and return the text instead of writing it."""
    buf = io.StringIO()
    TextRenderer(config).render(tree, buf, styled)
    return buf.getvalue()
