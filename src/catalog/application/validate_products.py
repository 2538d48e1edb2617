"""Application service: Validate Products use case (query).

Used by other services before they reference products, e.g. when an
order is placed. Validation is all-or-nothing: one missing or
unavailable product fails the whole batch.
"""

from __future__ import annotations

import structlog

from catalog.application.queries import ValidateProducts
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ValidateProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, query: ValidateProducts) -> list[Product]:
        unique_ids = list(dict.fromkeys(query.product_ids))
        if not unique_ids:
            return []

        logger.info("product.validation_requested", product_ids=unique_ids)
        products = await self._product_repo.find_available_by_ids(unique_ids)

        if len(products) != len(unique_ids):
            found = {p.id for p in products}
            missing = [pid for pid in unique_ids if pid not in found]
            logger.warning("product.validation_failed", missing_ids=missing)
            raise ValidationError(
                "Some products were not found or are unavailable: " + ", ".join(missing),
                missing_ids=missing,
            )

        return products
