"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Build the FastAPI app (metadata, middleware, routers, handlers)
  - Open the DB pool on startup and close it on shutdown
  - Expose /healthz and /metrics

Collaborators:
  - crosscutting.config.get_settings
  - crosscutting.middleware.RequestContextMiddleware
  - infrastructure.db.pool: init_pool / close_pool
  - interfaces.api.http.router: /api routes

Notes:
  - Middleware order matters: RequestContext -> CORS -> routes
  - app_env=test skips the pool (in-memory repositories)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ..container import get_employee_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and initializes the pool."""
    settings = get_settings()

    if not settings.is_testing:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        )

    try:
        logger.info(
            "Paydesk API starting up",
            extra={
                "app_env": settings.app_env,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        yield
    finally:
        close_pool()
        logger.info("Paydesk API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Paydesk API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "auth", "description": "Registration and login (JWT)"},
            {"name": "directory", "description": "Employees, attendance, stats"},
            {"name": "payroll", "description": "Monthly payroll runs"},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
    )
    # R: Added last so it runs first (outermost)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(router, prefix="/api")
    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz(request: Request):
        """R: Liveness plus a DB probe."""
        db_status = "disconnected"
        try:
            if get_employee_repository().ping():
                db_status = "connected"
        except Exception as exc:
            logger.warning(
                "Health check: DB unavailable", extra={"error": type(exc).__name__}
            )

        return {
            "ok": db_status == "connected",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    @app.get("/metrics")
    def metrics():
        body, content_type = get_metrics_response()
        return Response(content=body, media_type=content_type)

    return app


app = create_app()
