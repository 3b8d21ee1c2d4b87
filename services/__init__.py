"""Application services: sales aggregation and the SalesBook interface."""
