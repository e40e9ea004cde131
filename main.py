"""
Main FastAPI application entry point.
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
import logging
import asyncio
import httpx
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import PriceTrackerError
from app.routers import api_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.log_format,
)
logger = logging.getLogger(__name__)

# Suppress uvicorn warnings for invalid HTTP requests
logging.getLogger("uvicorn.error").setLevel(logging.ERROR)


# Background task to keep a sleeping host awake
async def send_keep_alive(url: str, interval: int):
    """Ping url every interval seconds"""
    while True:
        try:
            await asyncio.sleep(interval)

            async with httpx.AsyncClient(timeout=30.0) as client:
                response = await client.get(url)
                if response.status_code == 200:
                    logger.info(f"Keep-alive ping successful: {url}")
                else:
                    logger.warning(f"Keep-alive ping returned {response.status_code}: {url}")
        except httpx.HTTPError as e:
            logger.error(f"Keep-alive ping failed: {str(e)}")


# Lifespan context manager for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create missing tables, start the keep-alive ping if configured
    init_db()
    logger.info(f"Database ready ({settings.DATABASE_URL.split('://')[0]})")

    task = None
    if settings.KEEP_ALIVE_URL:
        task = asyncio.create_task(
            send_keep_alive(settings.KEEP_ALIVE_URL, settings.KEEP_ALIVE_INTERVAL_SECONDS)
        )
        logger.info("Keep-alive task started")

    yield

    # Shutdown: Cancel the background task
    if task is not None:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("Keep-alive task stopped")


# Create FastAPI app with lifespan
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)


# Log and wrap anything the routes did not handle
@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        # Log the full error for debugging
        logger.error(f"Request failed: {request.method} {request.url.path}: {str(e)}", exc_info=True)

        # Return detailed error in development, generic in production
        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": str(e),
                    "error_type": type(e).__name__
                }
            )
        else:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"}
            )


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Add exception handler for validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors with detailed messages"""
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = " -> ".join(str(x) for x in error["loc"])
        message = error["msg"]
        error_type = error["type"]
        error_messages.append(f"{field}: {message} (type: {error_type})")

    logger.error(f"Validation error: {error_messages}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation Error",
            "errors": error_messages,
            "raw_errors": jsonable_encoder(errors) if settings.debug else None
        }
    )


@app.exception_handler(PriceTrackerError)
async def domain_exception_handler(request: Request, exc: PriceTrackerError):
    """Map not-found, validation and dependency errors to JSON responses"""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Include API router
app.include_router(api_router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint for health check."""
    return {
        "status": "ok",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.ENVIRONMENT
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
