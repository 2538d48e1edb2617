"""Inbound message payloads.

Shape checks happen here, before an intent is built: unknown fields,
wrong types, malformed IDs and out-of-range numbers are rejected by
pydantic and never reach a handler.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from catalog.domain.model.pagination import DEFAULT_PAGE
from catalog.domain.model.value_objects import MAX_PRICE_DECIMAL_PLACES


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class CreateProductPayload(_Payload):
    name: str
    price: Decimal = Field(ge=0, decimal_places=MAX_PRICE_DECIMAL_PLACES, allow_inf_nan=False)


class UpdateProductPayload(_Payload):
    id: UUID
    name: str | None = None
    price: Decimal | None = Field(
        default=None, ge=0, decimal_places=MAX_PRICE_DECIMAL_PLACES, allow_inf_nan=False
    )


class PaginationPayload(_Payload):
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int | None = Field(default=None, ge=1)


class ProductIdPayload(_Payload):
    id: UUID


class ProductIdsPayload(_Payload):
    ids: list[UUID]


product_id_list = TypeAdapter(list[UUID])
