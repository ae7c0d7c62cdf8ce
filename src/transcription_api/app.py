"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transcription_api.config import AppConfig, load_config
from transcription_api.dependencies import ServiceContainer, build_container
from transcription_api.logging import setup_logging
from transcription_api.routes import speech_router, transcribe_router, transcriptions_router

logger = setup_logging()


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error", extra={"path": request.url.path, "method": request.method}
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    config: AppConfig | None = None, container: ServiceContainer | None = None
) -> FastAPI:
    """
    Creates the FastAPI application.

    Args:
        config: Configuration used to build the container; loaded from the
            environment when omitted.
        container: Prebuilt collaborators. When given, the application does
            not build or close its own.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        owned = container is None
        app.state.container = container or build_container(config or load_config())
        logger.info("Transcription API started")
        try:
            yield
        finally:
            if owned:
                app.state.container.close()
            logger.info("Transcription API stopped")

    app = FastAPI(title="Transcription API", lifespan=lifespan)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(transcribe_router)
    app.include_router(speech_router)
    app.include_router(transcriptions_router)
    return app
