from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from vlogsite.api.api_v1 import api_router
from vlogsite.core.config import settings
from vlogsite.core.logging import configure_logging
from vlogsite.db.session import StorageUnavailableError, close_client

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.PROJECT_NAME)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        origin = request.headers.get("origin")
        if "*" in settings.CORS_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin or "*"
        elif origin and origin in settings.CORS_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"

        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        request_headers = request.headers.get("Access-Control-Request-Headers")
        if request_headers:
            response.headers["Access-Control-Allow-Headers"] = request_headers
        else:
            response.headers["Access-Control-Allow-Headers"] = "*"

        response.headers["Access-Control-Allow-Credentials"] = "false"
        return response

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
        logger.error("storage unavailable while serving %s %s", request.method, request.url.path)
        return JSONResponse(status_code=503, content={"detail": "Storage is unavailable."})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        close_client()

    app.include_router(api_router, prefix=settings.API_V1_STR)

    return app


app = create_app()
