# -*- coding: utf-8 -*-
"""
Shathi diabetes log API

Glucose readings, medicines + intake records, food entries and per-user
settings, served from one in-memory record store owned by the app.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .auth.api import router as auth_router
from .auth.storage import ensure_demo_user
from .config import Settings, settings
from .food.api import catalog_router as food_catalog_router
from .food.api import router as food_router
from .glucose.api import router as glucose_router
from .medicines.api import catalog_router as medicine_catalog_router
from .medicines.api import records_router as medicine_records_router
from .medicines.api import router as medicines_router
from .preferences.api import router as preferences_router
from .store import RecordStore, StoreError

logger = logging.getLogger(__name__)


def _format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    parts: List[str] = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        msg = str(err.get("msg") or "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def create_app(store: Optional[RecordStore] = None, config: Optional[Settings] = None) -> FastAPI:
    """Build the app around ``store`` (a fresh one when omitted)."""
    cfg = config or settings

    app = FastAPI(
        title="Shathi diabetes log",
        description="Glucose, medicine and food logging for a single demo user.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store if store is not None else RecordStore()
    demo = ensure_demo_user(app.state.store, handle=cfg.demo_handle, secret=cfg.demo_secret)
    app.state.demo_user_id = demo.id

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.debug(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000.0,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": _format_validation_errors(exc.errors())})

    @app.exception_handler(StoreError)
    async def _store_error(request: Request, exc: StoreError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.include_router(auth_router)
    app.include_router(glucose_router)
    app.include_router(medicines_router)
    app.include_router(medicine_records_router)
    app.include_router(medicine_catalog_router)
    app.include_router(food_router)
    app.include_router(food_catalog_router)
    app.include_router(preferences_router)

    @app.get("/api/health")
    def health() -> dict:
        return {"ok": True}

    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.info("Starting Shathi API on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
