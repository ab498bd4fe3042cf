"""Application entrypoint for the counter service.

This module wires together the FastAPI application, the shared counter store,
and the error handlers that turn failures into HTTP responses. The server
module and the test-suite both build their app through `create_application`.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from counter_service.api.routes import counter_router
from counter_service.core.config import Settings, get_settings
from counter_service.core.errors import CounterPoisonedError
from counter_service.services.counter import CounterStore

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Rust Actix Web Backend!"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request instead of 422.

    Non-JSON bodies show up as raw bytes in each error's `input`, and they
    need not be valid UTF-8.
    """
    detail = jsonable_encoder(exc.errors(), custom_encoder={bytes: lambda raw: raw.decode("utf-8", "replace")})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def poisoned_counter_handler(request: Request, exc: CounterPoisonedError) -> JSONResponse:
    """Fail only the current request; the process keeps serving."""
    logger.error("Refusing %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Counter state is unavailable."},
    )


def create_application(settings: Settings | None = None, store: CounterStore | None = None) -> FastAPI:
    """Assemble and configure the FastAPI application instance.

    - Attaches a counter store to `app.state`; a fresh one starting at
      `settings.INITIAL_COUNT` unless the caller supplies its own.
    - Maps validation failures to 400 and a poisoned counter to 500.
    - Registers the welcome route and the counter router.
    """

    settings = settings or get_settings()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )
    application.state.counter_store = store if store is not None else CounterStore(initial=settings.INITIAL_COUNT)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(CounterPoisonedError, poisoned_counter_handler)

    @application.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        """Fixed welcome text; never touches the counter."""
        return WELCOME_MESSAGE

    application.include_router(counter_router)

    return application
