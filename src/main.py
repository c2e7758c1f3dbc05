import contextlib
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from src.config.settings import settings, verify_required_settings
from src.dependencies.providers import init_user_store
from src.utils.logging import setup_logging
from src.utils.middleware import register_middleware

# Import API routers
from src.api import users_router, health_router

setup_logging()
logger = logging.getLogger(__name__)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup actions
    logger.info(f"Starting up {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    verify_required_settings()
    init_user_store()

    logger.info(f"Swagger UI available at: http://localhost:{settings.PORT}/docs")
    logger.info("Initialization complete")

    yield

    logger.info("Shutting down application...")

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="CRUD service for users keyed by email",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.API.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_middleware(app)

# Register routes
app.include_router(users_router, prefix="/users", tags=["users"])
app.include_router(health_router, prefix="/health", tags=["health"])

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with version info"""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "message": "Welcome to the User CRUD API"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG
    )
