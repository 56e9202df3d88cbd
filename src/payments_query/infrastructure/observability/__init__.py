"""Observability - structured logging for the query service."""

from payments_query.infrastructure.observability.logging import setup_logging

__all__ = ["setup_logging"]
