"""CLI entry point for ptree."""

import sys
from pathlib import Path

import click

from ptree.config import PrintConfig
from ptree.errors import ConfigError
from ptree.ir.path import PathItem
from ptree.ir.value import ValueItem
from ptree.item import TreeItem
from ptree.loader import load_config, load_document
from ptree.renderers.text import render
from ptree.types import CharSetName, StyleWhen

_COLOR_MAP: dict[str, StyleWhen] = {
    "auto": StyleWhen.Tty,
    "always": StyleWhen.Always,
    "never": StyleWhen.Never,
}


def _apply_options(
    config: PrintConfig,
    characters: str | None,
    indent: int | None,
    max_depth: int | None,
    max_siblings: int | None,
    color: str | None,
) -> PrintConfig:
    if characters is not None:
        config = config.with_characters(characters)
    if indent is not None:
        config = config.with_indent(indent)
    if max_depth is not None:
        config = config.with_max_depth(max_depth)
    if max_siblings is not None:
        config = config.with_max_siblings(max_siblings)
    if color is not None:
        config = config.with_styled(_COLOR_MAP[color])
    return config


@click.command()
@click.argument("path", required=False, type=click.Path(exists=True, path_type=Path))
@click.option("--data", "-D", "data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help="Show a JSON, YAML or TOML document instead of a directory")
@click.option("--characters", "-c", type=click.Choice([c.value for c in CharSetName]), default=None, help="Glyph set for branches")
@click.option("--indent", "-i", type=click.IntRange(min=0), default=None, help="Width of one nesting level")
@click.option("--depth", "-d", "max_depth", type=click.IntRange(min=0), default=None, help="Deepest level to expand")
@click.option("--max-siblings", "-s", type=click.IntRange(min=0), default=None, help="Children shown per node before eliding the rest")
@click.option("--color", type=click.Choice(list(_COLOR_MAP)), default=None, help="When to style output")
@click.option("--follow-symlinks", is_flag=True, help="Descend into symlinked directories")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
def main(
    path: Path | None,
    data_file: Path | None,
    characters: str | None,
    indent: int | None,
    max_depth: int | None,
    max_siblings: int | None,
    color: str | None,
    follow_symlinks: bool,
    output: str | None,
) -> None:
    """Print a directory or a data document as a tree."""
    config = _apply_options(load_config(), characters, indent, max_depth, max_siblings, color)

    tree: TreeItem
    if data_file is not None:
        try:
            data = load_document(data_file)
        except ConfigError as e:
            click.echo(f"error: {e}", err=True)
            sys.exit(1)
        tree = ValueItem(data, key=data_file.name)
    else:
        tree = PathItem(path if path is not None else Path("."), follow_symlinks=follow_symlinks)

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                render(tree, f, config)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        out = click.get_text_stream("stdout")
        try:
            render(tree, out, config)
            out.flush()
        except OSError as e:
            click.echo(f"error: {e}", err=True)
            sys.exit(1)


if __name__ == "__main__":
    main()
