# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api import auth_router, post_router, register_exception_handlers
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories.post_repository import PostRepository
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_mongo_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures collection indexes on startup and closes the MongoDB client on
    shutdown. An unreachable database does not prevent startup; requests
    touching it fail with 500 until it comes back.
    """
    container = get_container()
    for repository_type in (UserRepository, PostRepository):
        try:
            await container.get(repository_type).ensure_indexes()
        except Exception as e:
            logger.error(f"Failed to ensure indexes for {repository_type.__name__}: {e}", exc_info=True)
    logger.info("Application startup complete")

    yield

    close_mongo_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Error handlers rendering {"error": ...} bodies
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()

    application = FastAPI(
        title="Blog API",
        version="1.0.0",
        description="Blog posts REST service with author-based authorization",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Total-Count"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(post_router, prefix="/api/posts")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
