"""Application service: Find All Products use case (query)."""

from __future__ import annotations

import structlog

from catalog.application.queries import FindAllProducts
from catalog.domain.model.pagination import PaginatedResult, check_page_bounds
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class FindAllProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, query: FindAllProducts) -> PaginatedResult:
        """Return one page of available products, unchanged from storage."""
        check_page_bounds(query.page, query.limit)
        logger.debug("product.list_requested", page=query.page, limit=query.limit)
        return await self._product_repo.find_all_available_paginated(query.page, query.limit)
