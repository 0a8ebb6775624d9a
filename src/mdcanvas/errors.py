"""Errors raised while rendering a syntax tree."""

from __future__ import annotations


class RenderError(ValueError):
    """Base class for render pass failures."""


class UnsupportedNodeKind(RenderError):
    """A node kind outside the supported set was met under the report policy."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"unsupported node kind '{kind}'.")


class NestingTooDeep(RenderError):
    """The tree nests deeper than the configured ceiling."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"tree depth {depth} exceeds the nesting limit of {limit}.")
