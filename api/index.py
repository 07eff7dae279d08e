"""ASGI entrypoint for the innovation API (also picked up by Vercel's Python runtime).

Run locally with::

    uvicorn api.index:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import router
from core.config import Settings
from core.pipeline import GenerationService

logger = logging.getLogger(__name__)


def _error_message(status_code: int, detail) -> str:
    # Framework-raised errors carry the bare status phrase ("Method Not Allowed")
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = ""
    if detail == phrase:
        return phrase.capitalize()
    return str(detail)


async def http_exception_handler(request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": _error_message(exc.status_code, exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_exception_handler(request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": f"Invalid field(s): {fields}"},
    )


def create_app(
    settings: Settings | None = None,
    service: GenerationService | None = None,
) -> FastAPI:
    """Build the API. The generation service is created at startup unless one is passed in."""
    if settings is None:
        settings = service.settings if service is not None else Settings.from_env()

    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        svc = service or GenerationService.from_settings(settings)
        app.state.service = svc
        logger.info(
            "Innovation API starting (provider=%s, image_generation=%s, configured=%s)",
            settings.image_provider, settings.enable_image_generation, svc.configured,
        )
        try:
            yield
        finally:
            svc.close()
            logger.info("Innovation API stopped")

    app = FastAPI(
        title="Innovation Inspiration API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(router)
    return app


app = create_app()
