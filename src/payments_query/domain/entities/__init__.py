"""Domain entities - Payment records as handed over by a PaymentSource."""

from payments_query.domain.entities.payment import Payment, PaymentItem
from payments_query.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
