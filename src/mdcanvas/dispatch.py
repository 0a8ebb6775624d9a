"""Node kind to handler registry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .errors import UnsupportedNodeKind
from .nodes import Node
from .style import StyleContext

logger = logging.getLogger(__name__)

Handler = Callable[[Any, StyleContext], None]


@dataclass
class Dispatcher:
    """Route nodes to handlers by kind.

    Kinds without a handler are skipped, or raise ``UnsupportedNodeKind``
    when ``report_unsupported`` is set.
    """

    report_unsupported: bool = False
    _handlers: dict[str, Handler] = field(default_factory=dict)

    def register(self, kind: str, handler: Handler) -> None:
        key = kind.strip()
        if not key:
            msg = "node kind cannot be empty."
            raise ValueError(msg)
        if key in self._handlers:
            msg = f"node kind '{key}' already has a handler."
            raise ValueError(msg)
        self._handlers[key] = handler

    def register_many(self, handlers: dict[str, Handler]) -> None:
        for kind, handler in handlers.items():
            self.register(kind, handler)

    def handles(self, kind: str) -> bool:
        return kind in self._handlers

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, node: Node, context: StyleContext) -> None:
        handler = self._handlers.get(node.kind)
        if handler is None:
            if self.report_unsupported:
                raise UnsupportedNodeKind(node.kind)
            logger.debug("skipping unsupported node kind '%s'", node.kind)
            return
        handler(node, context)
