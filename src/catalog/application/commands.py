"""Write-side intents.

Commands are plain immutable values; the transport builds them after
the payload has passed shape validation, and the dispatcher routes each
one to its handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.model.product import ProductChanges


@dataclass(frozen=True)
class CreateProduct:
    name: str
    price: Decimal | float | int | str


@dataclass(frozen=True)
class UpdateProduct:
    product_id: str
    changes: ProductChanges = field(default_factory=ProductChanges)


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str
