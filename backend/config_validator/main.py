"""Config Validator — setup-form validation service for monitoring agent configuration.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config_validator.config import Settings, get_settings
from config_validator.api.router import api_router
from config_validator.api.validation import get_validation_engine


def configure_logging(settings: Settings) -> None:
    """Configure structured logging: console output in debug, JSON otherwise."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        ),
    )


configure_logging(get_settings())

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    engine = get_validation_engine()
    logger.info(
        "rules_loaded",
        fields=engine.registry.field_ids,
        cross_field_rules=len(engine.cross_field_rules),
        report_all_warnings=engine.report_all_warnings,
    )

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="Config Validator",
    description=(
        "Validates monitoring agent setup forms: controller connection, "
        "account credentials and naming fields, with a deployment-readiness verdict."
    ),
    version=get_settings().APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "Config Validator",
        "version": get_settings().APP_VERSION,
        "description": "Setup-form validation for monitoring agent configuration",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
