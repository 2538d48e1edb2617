"""Dispatcher: routes each intent to the one handler registered for it.

The registry is fixed when the dispatcher is built (see
``catalog.infrastructure.bootstrap``) and read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping
from types import MappingProxyType
from typing import Any, Protocol

import structlog

from catalog.domain.exceptions import DispatchError

logger = structlog.get_logger(__name__)


class Handler(Protocol):
    def handle(self, intent: Any) -> Awaitable[Any]: ...


class Dispatcher:

    def __init__(self, handlers: Mapping[type, Handler]) -> None:
        self._handlers: Mapping[type, Handler] = MappingProxyType(dict(handlers))

    @property
    def registered_intents(self) -> frozenset[type]:
        return frozenset(self._handlers)

    async def execute(self, intent: object) -> Any:
        """Run the handler for ``intent`` and return its result.

        Handler failures propagate unchanged. An intent type without a
        handler raises DispatchError.
        """
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise DispatchError(f"No handler registered for {type(intent).__name__}")

        logger.debug("intent.dispatched", intent=type(intent).__name__)
        return await handler.handle(intent)

    def require(self, *intent_types: type) -> None:
        """Fail fast when any of ``intent_types`` has no handler."""
        missing = [t.__name__ for t in intent_types if t not in self._handlers]
        if missing:
            raise DispatchError("No handler registered for " + ", ".join(missing))
