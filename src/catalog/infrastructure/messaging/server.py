"""Line-delimited JSON message server.

Each input line is one request::

    {"id": "42", "pattern": "find_one_product", "data": {"id": "..."}}

and produces one output line, either ``{"id": "42", "response": ...}``
or ``{"id": "42", "err": {"status": ..., "message": ..., "timestamp": ...}}``.
Every request runs in its own task, so responses may come back out of
order; the ``id`` ties them to their request.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import IO, Any, TextIO

import structlog

from catalog.infrastructure.messaging.controller import ProductsController
from catalog.infrastructure.messaging.errors import MessagePatternError, error_response

logger = structlog.get_logger(__name__)


class MessageServer:

    def __init__(self, controller: ProductsController, output: TextIO | None = None) -> None:
        self._controller = controller
        self._output = output or sys.stdout

    async def serve(self, source: IO | None = None) -> None:
        """Read requests until EOF, then wait for in-flight ones.

        Text streams that wrap a byte buffer (``sys.stdin`` included) are
        read through that buffer, so a line that is not valid UTF-8 gets
        an error reply instead of ending the loop.
        """
        source = source or sys.stdin
        reader = getattr(source, "buffer", source)
        pending: set[asyncio.Task] = set()
        logger.info("server.started", patterns=self._controller.patterns)

        while True:
            line = await asyncio.to_thread(reader.readline)
            if not line:
                break
            if not line.strip():
                continue
            task = asyncio.create_task(self._respond(line))
            pending.add(task)
            task.add_done_callback(pending.discard)

        if pending:
            await asyncio.gather(*pending)
        logger.info("server.stopped")

    async def process(self, line: str | bytes) -> dict[str, Any]:
        """Turn one raw request line into its response message."""
        correlation_id = None
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            message = json.loads(line)
            if isinstance(message, dict):
                correlation_id = message.get("id")
            if not isinstance(message, dict) or not isinstance(message.get("pattern"), str):
                raise MessagePatternError("Message must be an object with a 'pattern' string")
            structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
            result = await self._controller.handle(message["pattern"], message.get("data"))
        except UnicodeDecodeError as exc:
            malformed = MessagePatternError(f"Malformed message: {exc.reason}")
            return {"id": None, "err": error_response(malformed)}
        except json.JSONDecodeError as exc:
            malformed = MessagePatternError(f"Malformed message: {exc.msg}")
            return {"id": None, "err": error_response(malformed)}
        except Exception as exc:
            return {"id": correlation_id, "err": error_response(exc)}
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id")
        return {"id": correlation_id, "response": result}

    async def _respond(self, line: str | bytes) -> None:
        reply = await self.process(line)
        self._output.write(json.dumps(reply) + "\n")
        self._output.flush()
