"""Tree view over a directory, like the ``tree`` command."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_dir(p: Path) -> bool:
    try:
        return p.is_dir()
    except OSError:
        return False


@dataclass(frozen=True)
class PathItem:
    """A file or directory.

    Children are listed directories first, then files, each group sorted
    case-insensitively. Directories that cannot be read have no children.
    Symlinked directories below the root are shown but not descended unless
    ``follow_symlinks`` is set.
    """

    path: Path
    follow_symlinks: bool = False
    is_root: bool = True

    def label(self) -> str:
        if self.is_root:
            return str(self.path)
        return self.path.name

    def children(self) -> list[PathItem]:
        if not _is_dir(self.path):
            return []
        if not self.is_root and not self.follow_symlinks and self.path.is_symlink():
            return []
        try:
            entries = list(self.path.iterdir())
        except OSError as e:
            logger.debug("cannot list %s: %s", self.path, e)
            return []
        entries.sort(key=lambda p: (not _is_dir(p), p.name.casefold()))
        return [PathItem(p, self.follow_symlinks, is_root=False) for p in entries]
