"""Application service: Find One Product use case (query)."""

from __future__ import annotations

from catalog.application.queries import FindOneProduct
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class FindOneProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, query: FindOneProduct) -> Product:
        product = await self._product_repo.find_by_id(query.product_id)
        if product is None:
            raise NotFoundError(
                f"Product with id #{query.product_id} not found or unavailable"
            )
        return product
