"""Observability – structured logging."""
