"""
main.py — Eventmi application entry point

The FastAPI application instance lives here. All middleware, routers,
exception handlers and startup/shutdown events are registered in this file.

Usage
-----
Development (auto-reloads on file save):
    cd backend
    uvicorn api.main:app --reload --port 8000

Production (multiple worker processes):
    cd backend
    gunicorn api.main:app -c gunicorn.conf.py

Pages (once running):
    http://localhost:8000/events  — event list
    http://localhost:8000/docs    — Swagger UI
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers.events import router as events_router
from api.routers.health import router as health_router
from api.templating import templates
from core.config import settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, AccessLogMiddleware
from db.database import init_db
from services.exceptions import EventIdMismatchError, EventNotFoundError, MissingEventIdError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — startup and shutdown hooks
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ────────────────────────────────────────────────────────────────
    configure_logging(settings.log_level, settings.log_dir)
    logger.info(
        "Eventmi starting",
        extra={
            "environment": settings.environment,
            "version": settings.version,
            "log_level": settings.log_level,
        },
    )
    init_db()
    yield
    # ── Shutdown ───────────────────────────────────────────────────────────────
    logger.info("Eventmi shutting down")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title=settings.app_name,
    description="Event management: list, add, view, edit and delete events.",
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    # /events/details/ must 404 rather than redirect to a neighbouring route
    redirect_slashes=False,
)


# ---------------------------------------------------------------------------
# Middleware  (add_middleware order matters: last added = outermost = first to
# handle incoming requests)
#
#   Execution order for a request:
#     CORS → RequestID → AccessLog → route handler
# ---------------------------------------------------------------------------

app.add_middleware(AccessLogMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def _error_response(request: Request, status_code: int, message: str) -> Response:
    """Error page for browsers, structured JSON for everything else."""
    request_id = getattr(request.state, "request_id", None)
    if _wants_html(request):
        return templates.TemplateResponse(
            request,
            "error.html",
            {"status_code": status_code, "message": message, "request_id": request_id},
            status_code=status_code,
        )
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "status_code": status_code,
            "request_id": request_id,
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Covers router 404/405s as well as HTTPExceptions raised in handlers."""
    return _error_response(request, exc.status_code, str(exc.detail))


@app.exception_handler(EventNotFoundError)
@app.exception_handler(EventIdMismatchError)
async def event_not_found_handler(request: Request, exc: Exception) -> Response:
    logger.info(
        "event not found",
        extra={"path": request.url.path, "error": str(exc)},
    )
    return _error_response(request, 404, str(exc))


@app.exception_handler(MissingEventIdError)
async def missing_event_id_handler(request: Request, exc: MissingEventIdError) -> Response:
    logger.error(
        "event id missing",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "operation": exc.operation,
        },
    )
    return _error_response(request, 500, "Internal server error")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Catch-all for unhandled exceptions: log the traceback, return a clean 500."""
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        "unhandled exception",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    return _error_response(request, 500, "Internal server error")


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health_router)   # /health, /health/db
app.include_router(events_router)   # /events/...


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse("/events", status_code=303)
