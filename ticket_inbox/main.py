"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ticket_inbox.api.deps import container
from ticket_inbox.api.routes import health, inbox
from ticket_inbox.core.config import settings
from ticket_inbox.core.constants import API_PREFIX
from ticket_inbox.core.exceptions import OriginNotAllowed, TicketInboxError
from ticket_inbox.core.logging import LogContext, get_logger, setup_logging
from ticket_inbox.core.security import check_origin, generate_request_id

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(
        "Starting Ticket Inbox API",
        app_name=settings.app_name,
        env=settings.app_env,
        port=settings.port,
    )

    missing = settings.missing_inbox_settings()
    if missing:
        logger.warning("Inbox configuration incomplete", missing=missing)

    try:
        await container.startup()
        logger.info("Summary cache initialized")
    except Exception as e:
        logger.warning(
            "Summary cache initialization failed (summaries will fall back)",
            error=str(e),
        )

    yield

    logger.info("Shutting down Ticket Inbox API")
    await container.shutdown()


# Create FastAPI application
app = FastAPI(
    title="Ticket Inbox API",
    description="Assigned Jira tickets with AI-generated quick and full summaries",
    version="1.0.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.security.origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Reject disallowed origins and tag every log line with a request ID."""
    with LogContext(request_id=generate_request_id()):
        try:
            check_origin(request.headers.get("origin"), settings.security.origin_list)
        except OriginNotAllowed as exc:
            logger.warning("Rejected cross-origin request", origin=exc.details["origin"])
            return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

        return await call_next(request)


# Exception handlers
@app.exception_handler(TicketInboxError)
async def ticket_inbox_error_handler(
    request: Request,
    exc: TicketInboxError,
) -> JSONResponse:
    """Handle custom application errors."""
    logger.error(
        "Application error",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Render routing errors in the same shape as application errors."""
    message = exc.detail
    if exc.status_code == 404:
        message = f"Cannot {request.method} {request.url.path}"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "message": message},
    )


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected errors."""
    logger.exception(
        "Unexpected error",
        error=str(exc),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": str(exc) if settings.is_development else "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(inbox.router, prefix=API_PREFIX, tags=["Inbox"])


# Root endpoint
@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint."""
    return {
        "name": settings.service_name,
        "version": "1.0.0",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "endpoints": {
            "health": "/health",
            "inbox": f"{API_PREFIX}/inbox",
            "summary": f"{API_PREFIX}/summary/{{ticket_id}}",
        },
    }


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "ticket_inbox.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
