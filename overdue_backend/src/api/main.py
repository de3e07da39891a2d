import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .settings import get_settings
from .routers import overdue as overdue_router

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "overdue",
        "description": "Overdue evaluation for task items based on due date and completion status.",
    },
]

_LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


# PUBLIC_INTERFACE
def configure_logging(level: str) -> logging.Logger:
    """
    Attach a single stream handler to the service's package logger and set its level.
    Calling it again only updates the level.
    """
    logger = logging.getLogger("src.api")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)
    return logger


_settings = get_settings()
configure_logging(_settings.log_level)

app = FastAPI(
    title="Overdue Backend",
    description="Backend API service that decides whether task items are overdue.",
    version="0.1.0",
    openapi_tags=openapi_tags,
)

# Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
allow_all = (_settings.cors_allow_origins == ["*"]) or (len(_settings.cors_allow_origins) == 0)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else _settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global exception handlers for consistent JSON on validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )

# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check():
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the timezone used for "today".
    """
    return {"message": "Healthy", "timezone": _settings.timezone_name or "local"}


# Include routers
app.include_router(overdue_router.router)
