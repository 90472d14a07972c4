"""Exception types raised by ptree."""

from __future__ import annotations


class PtreeError(Exception):
    """Base class for all ptree errors."""


class StructureError(PtreeError, ValueError):
    """A TreeBuilder was used out of order (unbalanced begin/end, reuse after build)."""


class ConfigError(PtreeError, ValueError):
    """An external configuration source could not be parsed or validated.

    The loader catches this, logs a warning and falls back to the lower
    priority layers; it is only visible to callers that use the parsing
    helpers directly.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message if source is None else f"{source}: {message}")
        self.source = source
