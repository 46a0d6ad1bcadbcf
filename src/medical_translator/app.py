"""Application factory for the FastAPI service."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Callable

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .errors import RelayError, ValidationError
from .logging_config import configure_logging
from .relays import Relays, build_relays
from .routers.audio import router as audio_router
from .routers.health import router as health_router
from .routers.translate import router as translate_router

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Request body could not be parsed"


def create_app(
    settings: Settings | None = None,
    *,
    relay_factory: Callable[[Settings], Relays] = build_relays,
) -> FastAPI:
    load_dotenv()
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        relays = relay_factory(settings)
        if settings.verify_connections:
            try:
                await relays.verify()
            except Exception:
                logger.exception(
                    "Server startup failed; check API credentials and network connection"
                )
                await relays.aclose()
                raise
        app.state.relays = relays
        logger.info("Medical Translator started in %s mode", relays.mode.value)
        try:
            yield
        finally:
            try:
                await relays.aclose()
            except Exception as exc:
                logger.warning("Error closing upstream clients: %s", exc)

    app = FastAPI(
        title="Medical Translator",
        version="0.1.0",
        description="Doctor-patient translation and speech relay for Mandarin and Cantonese.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Any]):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(RelayError)
    async def relay_error_handler(_: Request, exc: RelayError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = ValidationError("Invalid request", _describe_validation_error(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_payload())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "details": "Unable to process request",
                "code": "internal_error",
            },
        )

    app.include_router(health_router)
    app.include_router(translate_router)
    app.include_router(audio_router)

    return app


__all__ = ["create_app"]
