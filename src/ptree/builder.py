"""Incremental construction of a plain-text tree.

``TreeBuilder`` keeps a stack of open nodes. ``begin_child`` pushes a node,
``end_child`` pops it and seals it into its parent, and ``build`` seals the
root once every child has been closed::

    tree = (
        TreeBuilder("root")
        .begin_child("branch")
        .add_empty_child("leaf")
        .end_child()
        .build()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ptree.errors import StructureError


@dataclass(frozen=True)
class StringItem:
    """An immutable tree node with a text label and owned children."""

    text: str
    items: tuple[StringItem, ...] = ()

    def label(self) -> str:
        return self.text

    def children(self) -> tuple[StringItem, ...]:
        return self.items


@dataclass
class _OpenNode:
    text: str
    items: list[StringItem] = field(default_factory=list)

    def seal(self) -> StringItem:
        return StringItem(self.text, tuple(self.items))


class TreeBuilder:
    """Builds a ``StringItem`` tree one node at a time."""

    def __init__(self, text: str) -> None:
        self._stack: list[_OpenNode] = [_OpenNode(text)]
        self._built = False

    @property
    def depth(self) -> int:
        """Number of children currently open below the root."""
        return len(self._stack) - 1

    def _check_open(self) -> None:
        if self._built:
            raise StructureError("builder already consumed by build()")

    def begin_child(self, text: str) -> TreeBuilder:
        """Open a new node as the last child of the current node."""
        self._check_open()
        self._stack.append(_OpenNode(text))
        return self

    def end_child(self) -> TreeBuilder:
        """Close the current node and attach it to its parent.

        Raises:
            StructureError: If only the root is open.
        """
        self._check_open()
        if len(self._stack) <= 1:
            raise StructureError("no open child to close")
        node = self._stack.pop()
        self._stack[-1].items.append(node.seal())
        return self

    def add_empty_child(self, text: str) -> TreeBuilder:
        return self.begin_child(text).end_child()

    def build(self) -> StringItem:
        """Seal the root and return the finished tree.

        Raises:
            StructureError: If children are still open or the builder was
                already built.
        """
        self._check_open()
        if len(self._stack) > 1:
            open_labels = ", ".join(repr(n.text) for n in self._stack[1:])
            raise StructureError(f"cannot build with {self.depth} open child(ren): {open_labels}")
        self._built = True
        return self._stack.pop().seal()
