"""Tree view over nested Python data, e.g. a parsed JSON or YAML document.

Mappings and sequences become branches. A scalar stored in a mapping is
shown inline as ``key = value``; scalars in a sequence are shown bare::

    >>> from ptree.renderers.text import render_to_string
    >>> print(render_to_string(ValueItem({"a": 1, "b": [2, 3]}, key="doc")), end="")
    doc
    |-- a = 1
    `-- b
        |-- 2
        `-- 3
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


def _is_branch(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, (Sequence, set, frozenset)) and not isinstance(value, (str, bytes, bytearray))


def scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


@dataclass(frozen=True, eq=False)
class ValueItem:
    value: Any
    key: str | None = None

    def label(self) -> str:
        if self.key is not None:
            return self.key
        if _is_branch(self.value):
            return ""
        return scalar_text(self.value)

    def children(self) -> list[ValueItem]:
        value = self.value
        if isinstance(value, Mapping):
            items = []
            for k, v in value.items():
                if _is_branch(v):
                    items.append(ValueItem(v, key=scalar_text(k)))
                else:
                    items.append(ValueItem(f"{scalar_text(k)} = {scalar_text(v)}"))
            return items
        if _is_branch(value):
            return [ValueItem(v) for v in value]
        return []
