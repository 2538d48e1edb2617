"""JSON-file-backed implementation of ProductRepository.

The whole catalog lives in one JSON array, in insertion order. Writers
are serialized with an asyncio lock and each write replaces the file
atomically, so every read sees one consistent snapshot. That is what
makes the count and the page of ``find_all_available_paginated`` agree.
"""

from __future__ import annotations

import asyncio
import json
import os
import tempfile
from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

import structlog

from catalog.domain.exceptions import DomainException, NotFoundError, StorageError
from catalog.domain.model.pagination import PaginatedResult, offset_for
from catalog.domain.model.product import Product, ProductChanges
from catalog.domain.model.value_objects import Price
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

_REQUIRED_KEYS = {"id", "name", "price", "available"}


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._write_lock = asyncio.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    async def create(self, product_id: str, name: str, price: Price) -> Product:
        async with self._write_lock:
            records = await self._read()
            if any(r["id"] == product_id for r in records):
                raise StorageError(f"Product with ID {product_id} already exists")

            now = _now()
            product = Product(id=product_id, name=name, price=price)
            records.append(self._to_raw(product, created_at=now, updated_at=now))
            await self._write(records)
        return product

    async def find_by_id(self, product_id: str) -> Product | None:
        for raw in await self._read():
            if raw["id"] == product_id and raw["available"]:
                return self._to_domain(raw)
        return None

    async def find_all_available_paginated(self, page: int, limit: int) -> PaginatedResult:
        available = [r for r in await self._read() if r["available"]]
        skip = offset_for(page, limit)
        rows = available[skip:skip + limit]
        return PaginatedResult.build(
            [self._to_domain(r) for r in rows], total=len(available), page=page, limit=limit
        )

    async def update(self, product_id: str, changes: ProductChanges) -> Product:
        if changes.is_empty:
            product = await self.find_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product with ID {product_id} not found for update")
            return product

        async with self._write_lock:
            records = await self._read()
            index = self._index_of(records, product_id)
            if index is None:
                raise NotFoundError(f"Product with ID {product_id} not found for update")

            product = self._to_domain(records[index])
            product.update_details(name=changes.name, price=changes.price)
            records[index] = self._to_raw(
                product, created_at=records[index].get("createdAt"), updated_at=_now()
            )
            await self._write(records)
        return product

    async def soft_delete(self, product_id: str) -> Product:
        async with self._write_lock:
            records = await self._read()
            index = self._index_of(records, product_id)
            if index is None:
                raise NotFoundError(f"Product with ID {product_id} not found for deletion")

            product = self._to_domain(records[index])
            product.mark_unavailable()
            records[index] = self._to_raw(
                product, created_at=records[index].get("createdAt"), updated_at=_now()
            )
            await self._write(records)
        return product

    async def find_available_by_ids(self, product_ids: Iterable[str]) -> list[Product]:
        wanted = set(product_ids)
        if not wanted:
            return []
        return [
            self._to_domain(r)
            for r in await self._read()
            if r["id"] in wanted and r["available"]
        ]

    # --- File access ----------------------------------------------------------

    async def _read(self) -> list[dict]:
        return await asyncio.to_thread(self._load_raw)

    async def _write(self, records: list[dict]) -> None:
        await asyncio.to_thread(self._persist_raw, records)

    def _load_raw(self) -> list[dict]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("storage.read_failed", path=str(self._file_path), error=str(exc))
            raise StorageError("Database error reading products") from exc
        if not isinstance(raw, list) or not all(
            isinstance(r, dict) and _REQUIRED_KEYS <= r.keys() for r in raw
        ):
            raise StorageError(f"Corrupt product store: {self._file_path}")
        return raw

    def _persist_raw(self, records: list[dict]) -> None:
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".products-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("storage.write_failed", path=str(self._file_path), error=str(exc))
            raise StorageError("Database error writing products") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _index_of(records: list[dict], product_id: str) -> int | None:
        for i, raw in enumerate(records):
            if raw["id"] == product_id:
                return i
        return None

    @staticmethod
    def _to_raw(product: Product, created_at: str | None, updated_at: str) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "available": product.available,
            "createdAt": created_at or updated_at,
            "updatedAt": updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            return Product(
                id=raw["id"],
                name=raw["name"],
                price=Price(Decimal(str(raw["price"]))),
                available=bool(raw["available"]),
            )
        except (KeyError, TypeError, InvalidOperation, DomainException) as exc:
            raise StorageError(f"Corrupt product record: {raw['id']}") from exc


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
