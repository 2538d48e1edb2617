"""Product entity.

The only entity in the catalog. Products are never physically removed:
a delete flips ``available`` to False, and that flag never flips back.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Price


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name cannot be empty")
    return name.strip()


@dataclass
class Product:
    """A sellable item in the catalog.

    Kept as a mutable dataclass because name/price updates and the
    soft delete are legitimate mutations. Instances handed out by a
    repository are detached copies; mutating one never touches storage.
    """

    id: str
    name: str
    price: Price
    available: bool = True

    def __post_init__(self) -> None:
        self.name = _clean_name(self.name)
        if not isinstance(self.price, Price):
            self.price = Price.of(self.price)

    def update_details(
        self,
        name: str | None = None,
        price: Price | Decimal | str | float | int | None = None,
    ) -> None:
        """Change name and/or price.

        Every supplied value is validated before anything is assigned, so
        a rejected update leaves the product exactly as it was.
        """
        new_name = _clean_name(name) if name is not None else self.name
        new_price = Price.of(price) if price is not None else self.price
        self.name = new_name
        self.price = new_price

    def mark_unavailable(self) -> None:
        """Soft delete. Idempotent at this level; handlers reject repeats."""
        self.available = False


@dataclass(frozen=True)
class ProductChanges:
    """Partial update for a product: only the supplied fields change."""

    name: str | None = None
    price: Price | None = None

    def __post_init__(self) -> None:
        if self.price is not None and not isinstance(self.price, Price):
            object.__setattr__(self, "price", Price.of(self.price))

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.price is None
