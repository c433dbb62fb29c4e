import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import MarketplaceError
from app.core.logging_config import setup_logging
from app.schemas.common import ErrorResponse
from app.api.endpoints import auth, skills, jobs, applicant, applications, employer, health

setup_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up WorkBridge API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down WorkBridge API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job marketplace connecting workers and employers",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str, errors=None, headers=None) -> JSONResponse:
    content = {"success": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(MarketplaceError)
async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    """Render business-rule failures in the response envelope."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return error_response(exc.status_code, exc.message, exc.errors, headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Schema failures are 400 with one entry per offending field."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({"field": ".".join(loc) or "body", "message": error.get("msg", "Invalid value")})
    return error_response(400, "Validation failed", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything unexpected: log the traceback, leak nothing."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


# Include routers
# Error envelope shown in the OpenAPI docs
error_responses = {code: {"model": ErrorResponse} for code in (400, 401, 403, 404)}

app.include_router(health.router)
app.include_router(auth.router, prefix=settings.API_PREFIX, responses=error_responses)
app.include_router(skills.router, prefix=settings.API_PREFIX, responses=error_responses)
app.include_router(jobs.router, prefix=settings.API_PREFIX, responses=error_responses)
app.include_router(applicant.router, prefix=settings.API_PREFIX, responses=error_responses)
app.include_router(applications.router, prefix=settings.API_PREFIX, responses=error_responses)
app.include_router(employer.router, prefix=settings.API_PREFIX, responses=error_responses)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": "WorkBridge API",
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
