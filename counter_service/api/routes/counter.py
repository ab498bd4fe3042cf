"""HTTP route handlers for reading and incrementing the counter."""

from fastapi import APIRouter, Depends

from counter_service.api import deps
from counter_service.schemas.common import Message
from counter_service.schemas.counter import IncrementRequest
from counter_service.services.counter import CounterStore

router = APIRouter(prefix="/counter", tags=["counter"])


# Plain `def` handlers run on the worker thread pool, so concurrent requests
# really do contend for the store lock.
@router.get("", response_model=Message)
def get_counter(store: CounterStore = Depends(deps.get_counter_store)) -> Message:
    """Report the current counter value."""

    return Message(message=f"Current counter value: {store.read()}")


@router.post("/increment", response_model=Message)
def increment_counter(
    payload: IncrementRequest,
    store: CounterStore = Depends(deps.get_counter_store),
) -> Message:
    """Add the submitted amount to the counter."""

    store.increment(payload.value)
    return Message(message=f"Counter incremented by {payload.value}")
