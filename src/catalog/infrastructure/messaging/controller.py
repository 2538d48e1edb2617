"""Message controller for product requests.

Maps each message pattern to an intent, runs it through the dispatcher
and encodes the result into plain JSON-ready data. Failures are left
to propagate; ``catalog.infrastructure.messaging.errors`` turns them
into the wire error shape.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from catalog.application.commands import CreateProduct, DeleteProduct, UpdateProduct
from catalog.application.dispatcher import Dispatcher
from catalog.application.queries import FindAllProducts, FindOneProduct, ValidateProducts
from catalog.domain.model.pagination import DEFAULT_LIMIT, PaginatedResult
from catalog.domain.model.product import Product, ProductChanges
from catalog.infrastructure.messaging.errors import MessagePatternError
from catalog.infrastructure.messaging.payloads import (
    CreateProductPayload,
    PaginationPayload,
    ProductIdPayload,
    ProductIdsPayload,
    UpdateProductPayload,
    product_id_list,
)

logger = structlog.get_logger(__name__)


class ProductsController:

    def __init__(self, dispatcher: Dispatcher, default_limit: int = DEFAULT_LIMIT) -> None:
        self._dispatcher = dispatcher
        self._default_limit = default_limit
        self._routes: dict[str, Callable[[Any], Awaitable[Any]]] = {
            "create_product": self.create,
            "find_all_products": self.find_all,
            "find_one_product": self.find_one,
            "update_product": self.update,
            "delete_product": self.remove,
            "validate_products": self.validate,
        }

    @property
    def patterns(self) -> list[str]:
        return sorted(self._routes)

    async def handle(self, pattern: str, data: Any) -> Any:
        route = self._routes.get(pattern)
        if route is None:
            raise MessagePatternError(f"Unknown message pattern: {pattern!r}")
        logger.info("message.received", pattern=pattern)
        return await route(data)

    # --- Routes ---------------------------------------------------------------

    async def create(self, data: Any) -> dict:
        payload = CreateProductPayload.model_validate(data)
        product = await self._dispatcher.execute(
            CreateProduct(name=payload.name, price=payload.price)
        )
        return encode_product(product)

    async def find_all(self, data: Any) -> dict:
        payload = PaginationPayload.model_validate(data or {})
        result = await self._dispatcher.execute(
            FindAllProducts(page=payload.page, limit=payload.limit or self._default_limit)
        )
        return encode_page(result)

    async def find_one(self, data: Any) -> dict:
        payload = ProductIdPayload.model_validate(data)
        product = await self._dispatcher.execute(FindOneProduct(str(payload.id)))
        return encode_product(product)

    async def update(self, data: Any) -> dict:
        payload = UpdateProductPayload.model_validate(data)
        changes = ProductChanges(name=payload.name, price=payload.price)
        product = await self._dispatcher.execute(UpdateProduct(str(payload.id), changes))
        return encode_product(product)

    async def remove(self, data: Any) -> dict:
        payload = ProductIdPayload.model_validate(data)
        product = await self._dispatcher.execute(DeleteProduct(str(payload.id)))
        return encode_product(product)

    async def validate(self, data: Any) -> list[dict]:
        if isinstance(data, dict):
            ids = ProductIdsPayload.model_validate(data).ids
        else:
            ids = product_id_list.validate_python(data)
        products = await self._dispatcher.execute(
            ValidateProducts(tuple(str(i) for i in ids))
        )
        return [encode_product(p) for p in products]


# --- Encoding -----------------------------------------------------------------


def encode_product(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": float(product.price),
        "available": product.available,
    }


def encode_page(result: PaginatedResult) -> dict:
    return {
        "data": [encode_product(p) for p in result.data],
        "meta": {
            "total": result.meta.total,
            "page": result.meta.page,
            "lastPage": result.meta.last_page,
        },
    }
