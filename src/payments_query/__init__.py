"""payments-query - read-only query and aggregation over payment records."""
