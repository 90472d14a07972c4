"""ptree: pretty-print tree-like structures."""

from ptree.api import print_tree, print_tree_with, write_tree, write_tree_with
from ptree.builder import StringItem, TreeBuilder
from ptree.config import PrintConfig
from ptree.errors import ConfigError, PtreeError, StructureError
from ptree.ir import GraphItem, PathItem, ValueItem, from_graph, print_graph, write_graph_with
from ptree.item import TreeItem
from ptree.loader import load_config
from ptree.renderers.charset import IndentChars
from ptree.renderers.text import render_to_string
from ptree.style import Style, StyledText
from ptree.types import StyleWhen

__version__ = "0.3.2"

__all__ = [
    "ConfigError",
    "GraphItem",
    "IndentChars",
    "PathItem",
    "PrintConfig",
    "PtreeError",
    "StringItem",
    "StructureError",
    "Style",
    "StyleWhen",
    "StyledText",
    "TreeBuilder",
    "TreeItem",
    "ValueItem",
    "from_graph",
    "load_config",
    "print_graph",
    "print_tree",
    "print_tree_with",
    "render_to_string",
    "write_graph_with",
    "write_tree",
    "write_tree_with",
]
