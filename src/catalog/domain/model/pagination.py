"""Pagination values: the page request and the page of results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    last_page: int


@dataclass(frozen=True)
class PaginatedResult:
    """One page of available products plus the counts it was cut from."""

    data: list[Product] = field(default_factory=list)
    meta: PageMeta = field(default_factory=lambda: PageMeta(0, DEFAULT_PAGE, 0))

    @staticmethod
    def build(products: list[Product], total: int, page: int, limit: int) -> PaginatedResult:
        return PaginatedResult(
            data=list(products),
            meta=PageMeta(total=total, page=page, last_page=last_page_for(total, limit)),
        )


def last_page_for(total: int, limit: int) -> int:
    """``ceil(total / limit)``; zero when there is nothing to page."""
    return math.ceil(total / limit)


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit


def check_page_bounds(page: int, limit: int) -> None:
    if page < 1:
        raise ValidationError(f"Page must be at least 1, got {page}")
    if limit < 1:
        raise ValidationError(f"Limit must be at least 1, got {limit}")
