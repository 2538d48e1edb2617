"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

MAX_PRICE_DECIMAL_PLACES = 4


@dataclass(frozen=True)
class Price:
    """Non-negative catalog price.

    Uses Decimal so that the four-decimal-place limit can be checked
    exactly instead of through float rounding.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Product price cannot be negative, got {self.amount}")
        if _decimal_places(self.amount) > MAX_PRICE_DECIMAL_PLACES:
            raise ValidationError(
                f"Product price allows at most {MAX_PRICE_DECIMAL_PLACES} "
                f"decimal places, got {self.amount}"
            )

    def __float__(self) -> float:
        return float(self.amount)

    def __str__(self) -> str:
        exponent = self.amount.as_tuple().exponent
        if exponent > 0:
            return f"{self.amount:f}.00"
        if exponent >= -2:
            return f"{self.amount:.2f}"
        return str(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Price:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid price: {amount!r}")
        if isinstance(amount, Price):
            return amount
        try:
            return Price(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc


def _decimal_places(value: Decimal) -> int:
    """Significant decimal places, ignoring trailing zeros.

    Works on the digit tuple so very large amounts are not rounded to
    the context precision on the way.
    """
    _, digits, exponent = value.as_tuple()
    significant = "".join(map(str, digits)).rstrip("0")
    if not significant:
        return 0
    return max(0, -(exponent + len(digits) - len(significant)))
