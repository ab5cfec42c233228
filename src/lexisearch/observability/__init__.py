"""Observability helpers: structured logging and query correlation."""

from lexisearch.observability.context import get_query_context, query_context
from lexisearch.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_query_context",
    "query_context",
]
