"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- auth, users, organizations, projects, tasks, documents, comments,
  notifications, audit-logs, forms, workflows, categories, products,
  inventory, orders, metrics
"""

import time
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from workhub.application.commands.users import CreateUserCommand, CreateUserHandler
from workhub.config.logging_config import correlation_id_var, setup_logging
from workhub.config.settings import Config
from workhub.domain.entities.user import Role
from workhub.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidCredentialsError,
    InvalidStateError,
    ProductOutOfStockError,
)
from workhub.observability.metrics import (
    MetricsErrorType,
    decrement_in_flight_requests,
    increment_error,
    increment_in_flight_requests,
    observe_request_latency,
)
from workhub.presentation.api import (
    audit_logs_router,
    auth_router,
    categories_router,
    comments_router,
    documents_router,
    forms_router,
    inventory_router,
    limiter,
    metrics_router,
    notifications_router,
    orders_router,
    organizations_router,
    products_router,
    projects_router,
    tasks_router,
    users_router,
    workflows_router,
)
from workhub.setup.ioc.container import create_container

logger = getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        # Get correlation ID from header or use default
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records in-flight requests and latency per route template."""

    async def dispatch(self, request: Request, call_next):
        increment_in_flight_requests()
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            decrement_in_flight_requests()
            # Route template keeps label cardinality bounded (/api/v1/tasks/{task_id})
            route = request.scope.get("route")
            observe_request_latency(
                method=request.method,
                route=getattr(route, "path", "unmatched"),
                status_code=status_code,
                duration=time.perf_counter() - start,
            )


def _error_response(status_code: int, message: str, data=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": jsonable_encoder(data)},
    )


async def bootstrap_admin(container: AsyncContainer) -> None:
    """Create the ADMIN user from BOOTSTRAP_ADMIN_* when all three are set."""
    if not (
        Config.BOOTSTRAP_ADMIN_USERNAME
        and Config.BOOTSTRAP_ADMIN_EMAIL
        and Config.BOOTSTRAP_ADMIN_PASSWORD
    ):
        return

    async with container() as request_container:
        handler = await request_container.get(CreateUserHandler)
        try:
            user = await handler.execute(
                CreateUserCommand(
                    username=Config.BOOTSTRAP_ADMIN_USERNAME,
                    email=Config.BOOTSTRAP_ADMIN_EMAIL,
                    password=Config.BOOTSTRAP_ADMIN_PASSWORD,
                    roles=(Role.ADMIN.value,),
                )
            )
            logger.info("Bootstrap admin created: %s", user.username)
        except EntityAlreadyExistsError:
            logger.info(
                "Bootstrap admin %s already exists, skipping",
                Config.BOOTSTRAP_ADMIN_USERNAME,
            )


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Dishka container to use; defaults to the production
            container (MongoDB-backed). Tests pass a container whose
            repositories are in-memory fakes.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    # Create container before app starts: Dishka adds middleware, which must happen before startup
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Startup: seed the bootstrap admin (if configured).
        Shutdown: close DI container (disconnects MongoDB).
        """
        await bootstrap_admin(container)
        logger.info("WorkHub API started. DI container initialized.")
        yield
        await container.close()
        logger.info("WorkHub API shutdown. DI container closed.")

    app = FastAPI(
        title="WorkHub API",
        description="Collaborative work management and commerce backend",
        version="1.0.0",
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    # Rate limiter (decorators live on the routers)
    app.state.limiter = limiter

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==================== EXCEPTION HANDLERS ====================

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        increment_error(MetricsErrorType.NOT_FOUND)
        return _error_response(404, str(exc))

    @app.exception_handler(EntityAlreadyExistsError)
    async def already_exists_handler(request: Request, exc: EntityAlreadyExistsError):
        increment_error(MetricsErrorType.ALREADY_EXISTS)
        return _error_response(409, str(exc))

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        increment_error(MetricsErrorType.VALIDATION)
        return _error_response(400, str(exc))

    @app.exception_handler(ProductOutOfStockError)
    async def out_of_stock_handler(request: Request, exc: ProductOutOfStockError):
        increment_error(MetricsErrorType.OUT_OF_STOCK)
        return _error_response(409, str(exc))

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        increment_error(MetricsErrorType.INVALID_STATE)
        return _error_response(409, str(exc))

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
        increment_error(MetricsErrorType.UNAUTHORIZED)
        return _error_response(401, str(exc))

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        increment_error(MetricsErrorType.FORBIDDEN)
        return _error_response(403, str(exc))

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        increment_error(MetricsErrorType.RATE_LIMITED)
        return _error_response(429, "Too many requests. Please try again later.")

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        increment_error(MetricsErrorType.VALIDATION)
        errors = exc.errors()
        logger.info("Request validation failed on %s: %s", request.url.path, errors)
        return _error_response(400, "Validation error", errors)

    # HTTP exception handler - routing errors (404 unknown path, 405) and HTTPException
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        increment_error(MetricsErrorType.UNEXPECTED)
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, "Internal server error")

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "WorkHub API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(organizations_router)
    app.include_router(projects_router)
    app.include_router(tasks_router)
    app.include_router(documents_router)
    app.include_router(comments_router)
    app.include_router(notifications_router)
    app.include_router(audit_logs_router)
    app.include_router(forms_router)
    app.include_router(workflows_router)
    app.include_router(categories_router)
    app.include_router(products_router)
    app.include_router(inventory_router)
    app.include_router(orders_router)
    app.include_router(metrics_router)

    return app


# Create the app instance
app = create_fastapi_app()
