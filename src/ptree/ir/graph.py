"""Tree view over a networkx graph.

A ``GraphItem`` is a thin, stateless projection: each node's children are
the targets of its outgoing edges, fetched from the graph on demand in
edge-insertion order. Parallel edges in a multigraph give one child each.
Nothing is copied and nothing is deduplicated, so a node reachable along
several paths is printed once per path.

Cycles are not detected. Rendering a cyclic graph without
``PrintConfig.max_depth`` never terminates; bounding the depth is the
caller's responsibility.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Hashable

import networkx as nx

from ptree.config import PrintConfig
from ptree.loader import load_config
from ptree.renderers.text import render


@dataclass(frozen=True, eq=False)
class GraphItem:
    """One graph node viewed as a tree node."""

    graph: nx.Graph
    node: Hashable
    label_attr: str = "label"

    def label(self) -> str:
        attrs = self.graph.nodes[self.node]
        value = attrs.get(self.label_attr)
        if value is None:
            return str(self.node)
        return str(value)

    def children(self) -> list[GraphItem]:
        if self.graph.is_directed():
            edges = self.graph.out_edges(self.node)
        else:
            edges = self.graph.edges(self.node)
        return [GraphItem(self.graph, v, self.label_attr) for _, v in edges]


def from_graph(graph: nx.Graph, root: Hashable, label_attr: str = "label") -> GraphItem:
    """Wrap ``graph`` as a tree rooted at ``root``.

    Raises:
        ValueError: If ``root`` is not a node of ``graph``.
    """
    if root not in graph:
        raise ValueError(f"Node {root!r} is not in the graph")
    return GraphItem(graph, root, label_attr)


def print_graph(graph: nx.Graph, root: Hashable, config: PrintConfig | None = None) -> None:
    """Print the tree reachable from ``root`` to standard output."""
    write_graph_with(graph, root, sys.stdout, config if config is not None else load_config())


def write_graph_with(graph: nx.Graph, root: Hashable, sink: IO[str], config: PrintConfig) -> None:
    """Write the tree reachable from ``root`` to ``sink``."""
    render(from_graph(graph, root), sink, config)
