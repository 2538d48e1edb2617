"""Exception boundary for the messaging transport.

Every failure leaving the service is turned into the same wire shape:
``{"status": int, "message": str, "timestamp": str}``. Domain failures
keep their message; anything unexpected gets a generic one, with the
details going to the log only.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pydantic
import structlog

from catalog.domain.exceptions import DispatchError, DomainException

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class MessagePatternError(ValueError):
    """The message named a pattern this service does not serve."""


def error_response(exc: BaseException) -> dict[str, Any]:
    status, message = _classify(exc)
    if status >= 500:
        logger.error(
            "message.failed",
            status=status,
            error_type=type(exc).__name__,
            error=str(exc),
            exc_info=exc,
        )
    else:
        logger.warning("message.rejected", status=status, error=message)
    return {
        "status": status,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def _classify(exc: BaseException) -> tuple[int, str]:
    if isinstance(exc, DomainException):
        return exc.status_code, str(exc)
    if isinstance(exc, pydantic.ValidationError):
        return 400, _describe_validation_error(exc)
    if isinstance(exc, MessagePatternError):
        return 400, str(exc)
    if isinstance(exc, DispatchError):
        logger.critical("dispatcher.unwired_intent", error=str(exc))
    return 500, INTERNAL_ERROR_MESSAGE


def _describe_validation_error(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err["loc"])
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)
