"""Read-side intents."""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.pagination import DEFAULT_LIMIT, DEFAULT_PAGE


@dataclass(frozen=True)
class FindOneProduct:
    product_id: str


@dataclass(frozen=True)
class FindAllProducts:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass(frozen=True)
class ValidateProducts:
    product_ids: tuple[str, ...] = ()
