"""Load a ``PrintConfig`` from the user's config file and environment.

Layers, lowest priority first:

1. ``PrintConfig.default()``
2. the config file: ``$PTREE_CONFIG`` if set, else the first of
   ``ptree.toml``, ``ptree.yaml``, ``ptree.yml``, ``ptree.json`` found in
   ``$XDG_CONFIG_HOME`` (default ``~/.config``)
3. ``PTREE_*`` environment variables, e.g. ``PTREE_DEPTH=4`` or
   ``PTREE_LEAF_FOREGROUND=green``

Each layer only replaces the fields it sets. A layer that cannot be read or
validated is skipped with a warning; ``load_config`` never raises because of
bad user input.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ptree.config import PrintConfig
from ptree.errors import ConfigError
from ptree.renderers.charset import IndentChars
from ptree.style import PLAIN, Style, parse_color
from ptree.types import ENV_CONFIG_PATH, ENV_PREFIX, StyleWhen

logger = logging.getLogger(__name__)

CONFIG_NAME = "ptree"
CONFIG_EXTENSIONS = (".toml", ".yaml", ".yml", ".json")
STYLE_SECTIONS = ("branch", "leaf", "root")


# ─── Document models ─────────────────────────────────────────────────────────


class StyleDocument(BaseModel):
    """A style table as written in a config file."""

    model_config = ConfigDict(extra="ignore")

    foreground: int | tuple[int, int, int] | str | None = None
    background: int | tuple[int, int, int] | str | None = None
    bold: bool | None = None
    dimmed: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None

    @field_validator("foreground", "background", mode="before")
    @classmethod
    def _coerce_color(cls, v: Any) -> Any:
        # environment values arrive as strings: "10" or "10,20,30"
        if isinstance(v, str):
            text = v.strip()
            if text.isdigit():
                return int(text)
            if text.count(",") == 2:
                try:
                    return tuple(int(p) for p in text.split(","))
                except ValueError:
                    return v
        return v

    @field_validator("foreground", "background")
    @classmethod
    def _check_color(cls, v: Any) -> Any:
        if v is not None:
            parse_color(v)
        return v


class CharactersDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    down_and_right: str
    down: str
    turn_right: str
    right: str
    empty: str = " "
    ellipsis: str = "..."


class ConfigDocument(BaseModel):
    """The config file schema. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    indent: int | None = Field(default=None, ge=0)
    max_depth: int | None = Field(default=None, ge=0, validation_alias=AliasChoices("max_depth", "depth"))
    max_siblings: int | None = Field(default=None, ge=0)
    characters: str | CharactersDocument | None = None
    styled: StyleWhen | None = None
    trailing_newline: bool | None = None
    branch: StyleDocument | None = None
    leaf: StyleDocument | None = None
    root: StyleDocument | None = None
    depth_styles: list[StyleDocument] | None = None

    @field_validator("characters")
    @classmethod
    def _check_characters(cls, v: Any) -> Any:
        if isinstance(v, str):
            IndentChars.from_name(v)
        return v

    @field_validator("styled", mode="before")
    @classmethod
    def _lower_styled(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


def parse_document(data: Mapping[str, Any], source: str) -> dict[str, Any]:
    """Validate a raw document and return only the fields it sets.

    A key set to null counts as not set.

    Raises:
        ConfigError: If the document fails validation.
    """
    try:
        doc = ConfigDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(e), source=source) from e
    return doc.model_dump(exclude_unset=True, exclude_none=True)


def apply_overrides(config: PrintConfig, overrides: Mapping[str, Any]) -> PrintConfig:
    """Return ``config`` with every field named in ``overrides`` replaced.

    Style sections merge per key, so overriding ``leaf.bold`` keeps
    ``leaf.foreground``.
    """
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        match key:
            case "branch" | "leaf" | "root":
                base = getattr(config, key) or PLAIN
                changes[key] = replace(base, **value)
            case "depth_styles":
                changes[key] = tuple(Style(**s) for s in value)
            case "characters":
                if isinstance(value, str):
                    changes[key] = IndentChars.from_name(value)
                else:
                    changes[key] = IndentChars(**value)
            case "styled":
                changes[key] = StyleWhen(value)
            case _:
                changes[key] = value
    return replace(config, **changes)


# ─── Config file ─────────────────────────────────────────────────────────────


def user_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def find_config_file(environ: Mapping[str, str] | None = None) -> Path | None:
    """Locate the config file, or ``None`` when there is none."""
    env = os.environ if environ is None else environ
    explicit = env.get(ENV_CONFIG_PATH)
    if explicit:
        return Path(explicit)
    base = user_config_dir(env)
    for ext in CONFIG_EXTENSIONS:
        candidate = base / f"{CONFIG_NAME}{ext}"
        if candidate.is_file():
            return candidate
    logger.debug("no config file in %s", base)
    return None


def load_document(path: Path) -> Any:
    """Read a TOML, JSON or YAML file, picking the format from the suffix.

    Anything that is not ``.toml`` or ``.json`` is read as YAML.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    source = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read file: {e}", source=source) from e

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot parse file: {e}", source=source) from e


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse a config file into override fields.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    source = str(path)
    data = load_document(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("top level of config file must be a mapping", source=source)
    return parse_document(data, source)


# ─── Environment ─────────────────────────────────────────────────────────────


def iter_env_overrides(environ: Mapping[str, str]) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(variable name, raw document)`` for every ``PTREE_*`` variable."""
    for name in sorted(environ):
        if not name.startswith(ENV_PREFIX) or name == ENV_CONFIG_PATH:
            continue
        key = name[len(ENV_PREFIX) :].lower()
        value = environ[name]
        for section in STYLE_SECTIONS:
            if key.startswith(section + "_"):
                yield name, {section: {key[len(section) + 1 :]: value}}
                break
        else:
            yield name, {key: value}


# ─── Public entry point ──────────────────────────────────────────────────────


def load_config(
    environ: Mapping[str, str] | None = None,
    path: Path | None = None,
    base: PrintConfig | None = None,
) -> PrintConfig:
    """Resolve the effective configuration.

    Args:
        environ: Environment to read; defaults to ``os.environ``.
        path: Config file to use instead of the lookup.
        base: Lowest layer; defaults to ``PrintConfig.default()``.

    Returns:
        The merged configuration. Invalid layers are skipped with a warning.
    """
    env = os.environ if environ is None else environ
    config = base if base is not None else PrintConfig.default()

    config_path = path if path is not None else find_config_file(env)
    if config_path is not None:
        try:
            config = apply_overrides(config, read_config_file(config_path))
            logger.debug("loaded config file %s", config_path)
        except (ConfigError, TypeError, ValueError) as e:
            logger.warning("ignoring config file: %s", e)

    for name, raw in iter_env_overrides(env):
        try:
            overrides = parse_document(raw, source=name)
            if not overrides:
                logger.debug("ignoring unknown variable %s", name)
                continue
            config = apply_overrides(config, overrides)
        except (ConfigError, TypeError, ValueError) as e:
            logger.warning("ignoring invalid environment variable %s: %s", name, e)

    return config
