"""Exception types raised by the counter service."""


class CounterServiceError(RuntimeError):
    """Base class for failures the service reports itself."""


class CounterPoisonedError(CounterServiceError):
    """A critical section failed earlier, so the counter value can't be trusted."""


class BindError(CounterServiceError):
    """The HTTP listener could not bind its configured address."""

    def __init__(self, host: str, port: int, reason: str):
        super().__init__(f"Cannot bind {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason
