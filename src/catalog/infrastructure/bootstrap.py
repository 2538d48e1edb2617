"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.commands import CreateProduct, DeleteProduct, UpdateProduct
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dispatcher import Dispatcher
from catalog.application.find_all_products import FindAllProductsHandler
from catalog.application.find_one_product import FindOneProductHandler
from catalog.application.queries import FindAllProducts, FindOneProduct, ValidateProducts
from catalog.application.update_product import UpdateProductHandler
from catalog.application.validate_products import ValidateProductsHandler
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.messaging.controller import ProductsController
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

INTENTS = (
    CreateProduct,
    UpdateProduct,
    DeleteProduct,
    FindOneProduct,
    FindAllProducts,
    ValidateProducts,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.data_file)


def dispatcher(product_repo: ProductRepository) -> Dispatcher:
    """Register one handler per intent, all sharing ``product_repo``."""
    bus = Dispatcher({
        CreateProduct: CreateProductHandler(product_repo),
        UpdateProduct: UpdateProductHandler(product_repo),
        DeleteProduct: DeleteProductHandler(product_repo),
        FindOneProduct: FindOneProductHandler(product_repo),
        FindAllProducts: FindAllProductsHandler(product_repo),
        ValidateProducts: ValidateProductsHandler(product_repo),
    })
    bus.require(*INTENTS)
    return bus


def products_controller(settings: Settings | None = None) -> ProductsController:
    settings = settings or get_settings()
    return ProductsController(
        dispatcher(product_repository(settings)),
        default_limit=settings.default_page_limit,
    )
