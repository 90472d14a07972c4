"""The capability every printable tree node provides."""

from __future__ import annotations

from typing import Protocol, Sequence, Union, runtime_checkable

from ptree.style import StyledText

Label = Union[str, StyledText, Sequence[StyledText]]


@runtime_checkable
class TreeItem(Protocol):
    """Protocol that all printable tree nodes must implement.

    ``children()`` must return a finite, ordered sequence; it is called at
    most once per node per render.
    """

    def label(self) -> Label:
        """Text for this node: plain, one styled fragment, or several."""
        ...

    def children(self) -> Sequence[TreeItem]:
        """Direct children, in display order."""
        ...


def label_fragments(label: Label) -> list[StyledText]:
    """Normalize any ``Label`` into a list of fragments."""
    if isinstance(label, str):
        return [StyledText(label)]
    if isinstance(label, StyledText):
        return [label]
    return list(label)
