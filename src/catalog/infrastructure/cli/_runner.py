"""Bridge between synchronous click commands and the async core."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from catalog.domain.exceptions import DomainException

T = TypeVar("T")


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` to completion, reporting domain failures click-style."""
    try:
        return asyncio.run(coro)
    except DomainException as exc:
        raise click.ClickException(str(exc))
