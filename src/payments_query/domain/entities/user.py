from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Owner of a payment.

    ``email`` is the lookup key for per-user queries and is matched
    exactly (case-sensitive, no normalization).
    """

    email: str
    first_name: str | None = None
    last_name: str | None = None
