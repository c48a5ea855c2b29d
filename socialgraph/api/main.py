"""
FastAPI transport over the social graph service.

Run with: `python -m socialgraph.api` or `uvicorn socialgraph.api.main:app --reload`
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.config import get_settings
from ..core.errors import ConflictError, InvalidInputError, NotFoundError, SocialGraphError
from ..core.seed import seed
from . import dependencies
from .routes import router

logger = logging.getLogger("socialgraph")
settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

ERROR_STATUS = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "invalid request")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=settings.VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SocialGraphError)
    async def handle_domain_error(request: Request, exc: SocialGraphError) -> JSONResponse:
        code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return JSONResponse(status_code=code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_bad_payload(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": _describe(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )

    @app.on_event("startup")
    async def load_demo_data() -> None:
        if settings.SEED_ON_STARTUP:
            provider = app.dependency_overrides.get(dependencies.get_service, dependencies.get_service)
            seed(provider().store)

    app.include_router(router)
    return app


app = create_app()
