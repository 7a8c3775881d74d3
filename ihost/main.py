"""
iHost API - Main Application
"""
import logging
import sys
import traceback
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import uvicorn

from ihost.core.config import settings
from ihost.core.exceptions import IHostError
from ihost.api import api_router
from ihost.schemas.common import ErrorResponse
from ihost.services.cloudinary_service import configure_cloudinary
from ihost.services.firebase_service import firebase_service
from ihost.services.payment_service import configure_stripe

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    print("=" * 70)
    print("[STARTUP] Starting iHost API...")
    print("=" * 70)

    try:
        if settings.FIREBASE_INIT_ON_STARTUP:
            print(f"[FIREBASE] Project: {settings.FIREBASE_PROJECT_ID}")
            firebase_service.initialize()
            print("[OK] Firebase Admin SDK initialized")
        else:
            print("[SKIP] Firebase initialization deferred to first use")

        configure_cloudinary()
        print(f"[OK] Cloudinary configured (cloud: {settings.CLOUDINARY_CLOUD_NAME or 'not set'})")

        configure_stripe()
        print(f"[OK] Stripe configured (currency: {settings.STRIPE_CURRENCY})")

        print(f"[DEBUG] Debug mode: {settings.DEBUG}")
        print(f"[RATE LIMIT] {settings.RATE_LIMIT_DEFAULT if settings.RATE_LIMIT_ENABLED else 'disabled'}")
        print("=" * 70)
        print(f"[API] Running at: http://{settings.API_HOST}:{settings.API_PORT}")
        print(f"[DOCS] API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")
        print("=" * 70)

    except Exception as e:
        logger.error(f"Failed to initialize backend: {e}")
        print(f"[ERROR] Failed to initialize backend: {e}")
        raise

    yield  # Application runs here

    # Shutdown
    print("[SHUTDOWN] Shutting down iHost API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="iHost event planning backend with Firestore, Firebase Auth, Cloudinary and Stripe",
    version="1.0.0",
    docs_url="/docs" if settings.show_debug_info else None,
    redoc_url="/redoc" if settings.show_debug_info else None,
    lifespan=lifespan,
    redirect_slashes=False
)

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    enabled=settings.RATE_LIMIT_ENABLED,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IHostError)
async def ihost_error_handler(request: Request, exc: IHostError):
    """Map typed service errors to {error, message} responses."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.error_code, message=exc.message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with field: message pairs."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    errors = ", ".join(messages)
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="VALIDATION_ERROR", message=errors).model_dump(),
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unexpected errors."""
    # Generate a unique error ID for tracking
    error_id = str(uuid.uuid4())[:8]

    # Always log the full error on the server
    logger.error(
        f"[ERROR_ID: {error_id}] Unhandled exception on {request.method} {request.url.path}",
        exc_info=True
    )

    content = {
        "error": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "errorId": error_id,
    }
    if settings.show_debug_info:
        content.update({
            "message": str(exc),
            "type": type(exc).__name__,
            "path": str(request.url.path),
            "traceback": traceback.format_exc(),
        })
    return JSONResponse(status_code=500, content=content)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": settings.PROJECT_NAME,
        "version": "1.0.0",
        "status": "running",
        "environment": settings.ENVIRONMENT,
        "docs_url": "/docs" if settings.show_debug_info else "disabled",
        "features": [
            "Firebase Auth",
            "Firestore database",
            "Events & share codes",
            "Invitations",
            "Friendships",
            "Image uploads (Cloudinary)",
            "Payments (Stripe)"
        ]
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "UP"}


app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    # Run the application
    uvicorn.run(
        "ihost.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
