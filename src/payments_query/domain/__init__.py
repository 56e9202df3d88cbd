"""Domain layer - Payment records and the rules that keep them valid.

This layer contains:
- Entities: Payment, PaymentItem and User
- Value Objects: Immutable objects defined by their attributes (PaymentId, YearMonth)
- Domain Exceptions: Validation failures

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
