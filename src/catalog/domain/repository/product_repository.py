"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the test suite.

Every method is a coroutine: handlers only ever suspend here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from catalog.domain.model.pagination import PaginatedResult
from catalog.domain.model.product import Product, ProductChanges
from catalog.domain.model.value_objects import Price


class ProductRepository(ABC):

    @abstractmethod
    async def create(self, product_id: str, name: str, price: Price) -> Product:
        """Persist a new available product under the given ID.

        Raises StorageError on any persistence failure, including an ID
        that is already taken. Never overwrites an existing record.
        """

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Product | None:
        """Return the product if it exists and is available, else None."""

    @abstractmethod
    async def find_all_available_paginated(self, page: int, limit: int) -> PaginatedResult:
        """Return one page of available products.

        The total and the page rows must be read from the same snapshot.
        Rows come back in a stable order so pages do not shift between
        calls when nothing changed.
        """

    @abstractmethod
    async def update(self, product_id: str, changes: ProductChanges) -> Product:
        """Apply the supplied fields and return the stored state.

        Empty changes return the current state without writing.
        Raises NotFoundError if the record does not exist.
        """

    @abstractmethod
    async def soft_delete(self, product_id: str) -> Product:
        """Mark the product unavailable and return it.

        Raises NotFoundError if the record does not exist.
        """

    @abstractmethod
    async def find_available_by_ids(self, product_ids: Iterable[str]) -> list[Product]:
        """Return the available products among ``product_ids``.

        Duplicates are ignored and unknown or unavailable IDs are simply
        left out. An empty input returns an empty list without touching
        storage.
        """
