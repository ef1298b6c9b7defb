# app/main.py

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.db.init_db import init_db

logger = logging.getLogger("bookmarks.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    logger.info("%s shutting down", settings.PROJECT_NAME)


def create_application() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.backend_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- REQUEST LOGGING ----------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            logger.info(
                "%s %s %d %.1fms",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - start) * 1000,
            )

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
