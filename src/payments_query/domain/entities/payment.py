"""Payment and PaymentItem entities.

Both are immutable. They are created and owned by a PaymentSource; the
query layer only reads them and re-packages references into results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from payments_query.domain.exceptions import InvalidPaymentDateError, InvalidPriceError
from payments_query.domain.value_objects import PaymentId

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from payments_query.domain.entities.user import User

ZERO = Decimal("0")


def _validate_price(label: str, price: Decimal) -> None:
    if not isinstance(price, Decimal):
        raise InvalidPriceError(f"{label} must be a Decimal, got {type(price).__name__}")
    if not price.is_finite():
        raise InvalidPriceError(f"{label} must be finite, got {price}")
    if price < ZERO:
        raise InvalidPriceError(f"{label} cannot be negative, got {price}")


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """One line of a payment.

    ``final_price`` is normally at most ``regular_price`` but this is not
    enforced; ``discount`` is simply the difference and may be negative.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    def __post_init__(self) -> None:
        _validate_price("regular_price", self.regular_price)
        _validate_price("final_price", self.final_price)

    @property
    def discount(self) -> Decimal:
        return self.regular_price - self.final_price


@dataclass(frozen=True, slots=True)
class Payment:
    """A single purchase: when it happened, who paid, and what was bought.

    Equality and hashing use ``id`` only. Two payments with identical
    content but different ids stay distinct inside a set, and a payment
    never collides with another just because their totals match.

    ``payment_date`` must be timezone-aware. Month membership is judged
    in that datetime's own zone.
    """

    id: PaymentId
    payment_date: datetime = field(compare=False)
    user: User = field(compare=False)
    payment_items: tuple[PaymentItem, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.payment_date.tzinfo is None or self.payment_date.utcoffset() is None:
            raise InvalidPaymentDateError(
                f"payment_date must be timezone-aware, got naive {self.payment_date.isoformat()}"
            )
        if not isinstance(self.payment_items, tuple):
            object.__setattr__(self, "payment_items", tuple(self.payment_items))

    @classmethod
    def create(
        cls,
        payment_date: datetime,
        user: User,
        payment_items: Iterable[PaymentItem] = (),
    ) -> Payment:
        """Factory method that assigns a freshly generated PaymentId."""
        return cls(
            id=PaymentId.generate(),
            payment_date=payment_date,
            user=user,
            payment_items=tuple(payment_items),
        )

    @property
    def item_count(self) -> int:
        return len(self.payment_items)

    def total_final_price(self) -> Decimal:
        """Sum of final prices; zero when the payment has no items."""
        return sum((item.final_price for item in self.payment_items), ZERO)

    def total_regular_price(self) -> Decimal:
        return sum((item.regular_price for item in self.payment_items), ZERO)

    def total_discount(self) -> Decimal:
        return sum((item.discount for item in self.payment_items), ZERO)
