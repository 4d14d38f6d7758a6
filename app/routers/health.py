"""Health check endpoints."""

from fastapi import APIRouter

from app.config import settings
from app.database import Database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "transplantify-directory",
        "environment": settings.ENVIRONMENT,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check: the store has been loaded."""
    return {"status": "ready" if Database.store is not None else "starting"}
