from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging
from datetime import datetime
import datetime as dt

from src.config.settings import settings
from src.db.base import UserStore
from src.dependencies.providers import get_user_store

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(dt.timezone.utc).timestamp()
    }

@router.get("/readiness")
def readiness_check(store: UserStore = Depends(get_user_store)):
    """
    Readiness probe for container orchestrators.
    Verifies the user store is reachable.
    """
    health_status = {"status": "ready", "services": {}}

    try:
        store.ping()
        health_status["services"]["user_store"] = "healthy"
    except Exception as e:
        logger.warning(f"User store check failed: {str(e)}")
        health_status["status"] = "not_ready"
        health_status["services"]["user_store"] = f"unhealthy: {str(e)}"

    status_code = 200 if health_status["status"] == "ready" else 503
    return JSONResponse(status_code=status_code, content=health_status)

@router.get("/liveness")
async def liveness_check():
    """
    Liveness probe for container orchestrators.
    Simple check to verify the application is running.
    """
    return {
        "status": "alive",
        "timestamp": datetime.now(dt.timezone.utc).timestamp()
    }
