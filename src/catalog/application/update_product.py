"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from catalog.application.commands import UpdateProduct
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: UpdateProduct) -> Product:
        """Change a product's name and/or price.

        A delete landing between the lookup and the write still surfaces
        as NotFoundError, this time from the repository.
        """
        log = logger.bind(product_id=command.product_id)

        existing = await self._product_repo.find_by_id(command.product_id)
        if existing is None:
            log.warning("product.update_missing")
            raise NotFoundError(
                f"Product with id #{command.product_id} not found or not available"
            )

        # Reject invariant violations before anything is written.
        existing.update_details(name=command.changes.name, price=command.changes.price)

        product = await self._product_repo.update(command.product_id, command.changes)
        log.info("product.updated")
        return product
