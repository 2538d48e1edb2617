"""Application service: Create Product use case."""

from __future__ import annotations

import uuid

import structlog

from catalog.application.commands import CreateProduct
from catalog.domain.exceptions import DomainException, StorageError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: CreateProduct) -> Product:
        """Add a new, available product to the catalog.

        The ID is generated here, not by storage. The draft entity is
        built first so a blank name or a bad price never reaches the
        repository.
        """
        product_id = str(uuid.uuid4())
        draft = Product(id=product_id, name=command.name, price=command.price)
        log = logger.bind(product_id=product_id)

        try:
            product = await self._product_repo.create(product_id, draft.name, draft.price)
        except DomainException:
            raise
        except Exception as exc:
            log.error("product.create_failed", error=str(exc))
            raise StorageError("Database error creating product") from exc

        log.info("product.created", name=product.name)
        return product
