# -*- coding: utf-8 -*-
"""
Swasthya health tracker API

Account signup/login, daily logging of steps, water, meals, exercise, sleep
and vitals, and per-day progress against goals.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .app_db import init_app_db
from .auth.api import router as auth_router
from .config import settings
from .health.api import router as health_router
from .users.api import router as users_router

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Swasthya Health Dashboard",
    description="Daily health logging with goal tracking",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors: List[Dict[str, Any]] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        # Drop the leading "body"/"query"/"path" segment.
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        errors.append({"field": field, "message": err.get("msg", "Invalid value")})
    return errors


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation failed", "errors": _field_errors(exc)},
    )


@app.exception_handler(Exception)
async def _server_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: Dict[str, Any] = {"success": False, "message": "Server error"}
    if settings.is_development:
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(health_router)


@app.get("/api/health-check")
def health_check():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }


@app.get("/", include_in_schema=False)
def root():
    return {"message": "Swasthya API", "docs": "/api/docs"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("swasthya.api:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
