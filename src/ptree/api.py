"""Public print/write entry points."""

from __future__ import annotations

import sys
from typing import IO

from ptree.config import PrintConfig
from ptree.item import TreeItem
from ptree.loader import load_config
from ptree.renderers.text import render


def print_tree(tree: TreeItem) -> None:
    """Print ``tree`` to standard output using the user's configuration.

    The configuration comes from ``load_config()``: defaults, then the config
    file, then ``PTREE_*`` environment variables.

    Raises:
        OSError: If writing to standard output fails.
    """
    print_tree_with(tree, load_config())


def print_tree_with(tree: TreeItem, config: PrintConfig) -> None:
    """Print ``tree`` to standard output using ``config``.

    Raises:
        OSError: If writing to standard output fails.
    """
    render(tree, sys.stdout, config)
    sys.stdout.flush()


def write_tree(tree: TreeItem, sink: IO[str]) -> None:
    """Write ``tree`` to ``sink`` with the default configuration.

    Raises:
        OSError: If writing to ``sink`` fails.
    """
    write_tree_with(tree, sink, PrintConfig.default())


def write_tree_with(tree: TreeItem, sink: IO[str], config: PrintConfig) -> None:
    """Write ``tree`` to ``sink`` using ``config``.

    Styling follows ``config.styled``; with the default ``tty`` setting it is
    only enabled when ``sink.isatty()`` is true.

    Raises:
        OSError: If writing to ``sink`` fails.
    """
    render(tree, sink, config)
