import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from people_api.api.main import api_router
from people_api.core.config import settings
from people_api.core.db import init_db
from people_api.core.observability import (
    get_logger,
    set_correlation_id,
    setup_structured_logging,
)
from people_api.domain.shared.exceptions import (
    ConstraintViolationError,
    DatabaseError,
    ReadOnlySessionError,
)

logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging with correlation IDs."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))

        start_time = time.time()
        method = request.method
        path = request.url.path

        logger.info(
            "Request started",
            method=method,
            path=path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=method,
                path=path,
                duration_seconds=time.time() - start_time,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        response.headers["X-Correlation-ID"] = correlation_id
        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=time.time() - start_time,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_structured_logging()
    logger.info("Starting application initialization")

    try:
        init_db()
        logger.info(
            "Application started successfully",
            project_name=settings.PROJECT_NAME,
            environment=settings.ENVIRONMENT,
            seed_demo_data=settings.SEED_DEMO_DATA,
        )
        yield
    except Exception as e:
        logger.error("Application startup failed", error=str(e), exc_info=True)
        raise
    finally:
        logger.info("Shutting down application")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Lists people together with the addresses they own.",
    version="1.0.0",
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)


@app.exception_handler(ConstraintViolationError)
async def constraint_violation_handler(
    request: Request, exc: ConstraintViolationError
) -> JSONResponse:
    return JSONResponse(status_code=409, content=exc.to_dict())


@app.exception_handler(ReadOnlySessionError)
async def read_only_session_handler(
    request: Request, exc: ReadOnlySessionError
) -> JSONResponse:
    logger.error("Write attempted in a read-only request", path=request.url.path)
    return JSONResponse(status_code=500, content=exc.to_dict())


@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.error("Database error", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=500, content=exc.to_dict())


app.add_middleware(ObservabilityMiddleware)

if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(api_router)
