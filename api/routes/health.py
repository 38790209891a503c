"""Health check and utility routes"""

from fastapi import APIRouter
import logging

from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("reglement.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "sources": [source.value for source in settings.enabled_sources],
    }
