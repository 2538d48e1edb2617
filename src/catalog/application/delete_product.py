"""Application service: Delete Product use case (soft delete)."""

from __future__ import annotations

import structlog

from catalog.application.commands import DeleteProduct
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: DeleteProduct) -> Product:
        """Mark a product unavailable.

        Deleting an already deleted product is a NotFoundError, never a
        silent success.
        """
        existing = await self._product_repo.find_by_id(command.product_id)
        if existing is None:
            raise NotFoundError(
                f"Product with id #{command.product_id} not found or already unavailable"
            )

        product = await self._product_repo.soft_delete(command.product_id)
        logger.info("product.soft_deleted", product_id=command.product_id)
        return product
