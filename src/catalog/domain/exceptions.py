"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the messaging boundary and the CLI can catch them uniformly and turn them
into a status code or a user-friendly message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 400


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    def __init__(self, message: str, missing_ids: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing_ids = list(missing_ids or [])


class NotFoundError(DomainException):
    """A requested product does not exist or is no longer available."""

    status_code = 404


class StorageError(DomainException):
    """The storage collaborator failed to complete an operation."""

    status_code = 500


class DispatchError(RuntimeError):
    """No handler is registered for an intent type.

    This is a wiring defect, not a per-request condition, which is why it
    sits outside the DomainException hierarchy.
    """
