"""Value objects - Immutable objects defined by their attributes."""

from payments_query.domain.value_objects.payment_id import PaymentId
from payments_query.domain.value_objects.year_month import YearMonth

__all__ = [
    "PaymentId",
    "YearMonth",
]
