"""Tree views over existing data: graphs, nested values and directories."""

from ptree.ir.graph import GraphItem, from_graph, print_graph, write_graph_with
from ptree.ir.path import PathItem
from ptree.ir.value import ValueItem

__all__ = [
    "GraphItem",
    "PathItem",
    "ValueItem",
    "from_graph",
    "print_graph",
    "write_graph_with",
]
