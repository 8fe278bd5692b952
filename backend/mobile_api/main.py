"""
Mobile API Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn mobile_api.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌──────────────┐              │
    │  │ Req ID   │→│ Logging  │→│  Rate Limit  │→ GZip → CORS │
    │  └──────────┘ └──────────┘ └──────────────┘              │
    │                                                          │
    │  Routes:                                                 │
    │  /SignUpScreen  /LoginUpScreen  /ForgotScreen            │
    │  /api/EditProfileScreen  /api/ProfileScreen  /Feedback   │
    │  /Notifications  /contact-info  /health                  │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation/Conflict/Credentials→400 │ NotFound→404      │
    │  RateLimit→429 │ Database→500 │ anything else→500        │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (missing DATABASE_URL / JWT_SECRET aborts)
    3. Probe the database (tenacity backoff; aborts after the last attempt)
    4. Optionally create tables (AUTO_CREATE_TABLES)
    5. Build the password hasher and token issuer on app.state

    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from mobile_api import __version__
from mobile_api.config import settings
from mobile_api.database import create_tables, dispose_engine, verify_connection
from mobile_api.exceptions import (
    AuthenticationError,
    ConflictError,
    DatabaseError,
    MobileApiError,
    NotFoundError,
    RateLimitExceededError,
    ValidationError,
)
from mobile_api.middleware.logging import RequestLoggingMiddleware
from mobile_api.middleware.rate_limit import RateLimitMiddleware
from mobile_api.middleware.request_id import RequestIDMiddleware, request_id_var
from mobile_api.routes import auth, contact, feedback, health, notifications, profile
from mobile_api.services.password_hasher import PasswordHasher
from mobile_api.services.token_service import TokenIssuer

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2026-01-01T12:00:00 [INFO] mobile_api.access: POST /LoginUpScreen 200 ...

    Called once during startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Third-party libraries log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before yield runs on startup, code after yield on shutdown.
    Any exception raised before yield stops the server from accepting
    traffic.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Mobile API Backend %s starting up...", __version__)

    try:
        settings.validate_required()
    except ValueError as e:
        logger.critical("Configuration error: %s", str(e))
        logger.critical("Fix the configuration and restart the server.")
        raise

    await verify_connection()

    if settings.auto_create_tables:
        await create_tables()

    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_issuer = TokenIssuer(
        secret=settings.jwt_secret,
        ttl_seconds=settings.token_ttl_seconds,
        algorithm=settings.jwt_algorithm,
    )

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Mobile API Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    content = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed JSON, wrong types)
        ConflictError           → 400 Bad Request (email already registered)
        AuthenticationError     → 400 Bad Request (password mismatch)
        NotFoundError           → 404 Not Found
        RateLimitExceededError  → 429 Too Many Requests
        DatabaseError           → 500 Internal Server Error
        MobileApiError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Response bodies never contain stack traces, SQL, hashes or tokens;
    details are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body could not be parsed into the request model."""
        fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
        logger.warning("[%s] Malformed request body: %s", request_id_var.get(""), fields)
        return _error_response(
            400,
            "validation_error",
            "Request body is malformed.",
            {"fields": fields},
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return _error_response(400, "conflict", exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(400, "invalid_credentials", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(RateLimitExceededError)
    async def handle_rate_limit(request: Request, exc: RateLimitExceededError):
        return _error_response(
            429,
            "rate_limit_exceeded",
            exc.message,
            exc.context,
            headers={"Retry-After": str(exc.retry_after)},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        # Full context stays in the server log
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(MobileApiError)
    async def handle_application_error(request: Request, exc: MobileApiError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "server_error", "Server error")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "internal_server_error", "Server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Mobile API",
        description=(
            "Account registration, login and password reset for the mobile app, "
            "plus its profile, feedback, notification and contact screens."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → RateLimit → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(profile.router)
    app.include_router(feedback.router)
    app.include_router(notifications.router)
    app.include_router(contact.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `mobile_api.main:app` to be importable
app = create_app()
