"""Dependency providers used by FastAPI endpoints.

The counter store lives on `app.state`, set up by the application factory,
so each app instance (and each test) owns its own counter.
"""

from fastapi import Request

from counter_service.services.counter import CounterStore


def get_counter_store(request: Request) -> CounterStore:
    """Return the counter store attached to the running application."""
    return request.app.state.counter_store
