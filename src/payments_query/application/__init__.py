"""Application layer - Query service and port definitions.

This layer contains:
- Services: The read-only payment query engine
- Ports: Abstract interfaces for the payment source and the clock
- DTOs: Data transfer objects for aggregated results

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
