from counter_service.schemas.common import Message
from counter_service.schemas.counter import IncrementRequest

__all__ = [
    "IncrementRequest",
    "Message",
]
