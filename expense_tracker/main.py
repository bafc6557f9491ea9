# expense_tracker/main.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from expense_tracker.core.config import settings
from expense_tracker.core.logging_config import setup_logging
from expense_tracker.api.v1.api import api_router
from expense_tracker.db.init_db import init_db
from expense_tracker.services.user_service import DuplicateUserError

logger = logging.getLogger(__name__)


def create_application(*, initialize_db: bool = True) -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
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

    # ---------- ERRORS ----------
    @app.exception_handler(DuplicateUserError)
    async def duplicate_user_handler(request: Request, exc: DuplicateUserError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "field": exc.field, "value": exc.value},
        )

    # ---------- HEALTH ----------
    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    # ---------- STARTUP ----------
    if initialize_db:
        @app.on_event("startup")
        def startup_event() -> None:
            init_db()

    logger.debug("Application created: %s %s", settings.PROJECT_NAME, settings.VERSION)
    return app


app = create_application()
