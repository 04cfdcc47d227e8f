# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Dict
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import device_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_mongo_connection, ensure_device_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Creates the MongoDB indexes on startup and closes the client on
    shutdown. Neither step runs for the in-memory backend.
    """
    settings = get_settings()
    use_mongo = settings.storage_backend == "mongo"
    
    if use_mongo:
        try:
            await ensure_device_indexes()
        except Exception as e:
            # Don't fail app startup if MongoDB is not reachable yet
            logger.error(f"Failed to ensure device indexes: {e}", exc_info=True)
    
    logger.info(f"Device service started with {settings.storage_backend} storage")
    
    yield
    
    if use_mongo:
        close_mongo_connection()
    
    logger.info("Application shutdown complete")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and path values as 400 Bad Request."""
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Request validation errors mapped to 400
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    # Create FastAPI app
    application = FastAPI(
        title=settings.api_title,
        version="1.0.0",
        description="Device management REST API",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register API routers
    application.include_router(device_router, prefix="/api/v1/devices")
    
    @application.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
