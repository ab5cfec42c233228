"""Query correlation context shared by log records of one evaluation."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from uuid import uuid4


query_context_var: ContextVar[dict | None] = ContextVar("query_context", default=None)


def generate_query_id() -> str:
    """Generate a 16-char hex query ID."""
    return uuid4().hex[:16]


def get_query_context() -> dict:
    """Get current query context, creating a query_id when none is set."""
    ctx = query_context_var.get()
    if ctx is None or not ctx.get("query_id"):
        ctx = {"query_id": generate_query_id()}
        query_context_var.set(ctx)
    return ctx


@contextmanager
def query_context(**extra: object) -> Iterator[dict]:
    """Run a block under a fresh query id, restoring the previous context afterwards."""
    ctx = {"query_id": generate_query_id(), **extra}
    token = query_context_var.set(ctx)
    try:
        yield ctx
    finally:
        query_context_var.reset(token)
