"""Application services - stateless query engines over injected ports."""

from payments_query.application.services.payment_query_service import PaymentQueryService

__all__ = ["PaymentQueryService"]
