from fastapi import APIRouter
from datetime import datetime, timezone

from bhashabazaar import __version__
from bhashabazaar.core.config import settings
from bhashabazaar.nlp.voice_patterns import SUPPORTED_LANGUAGES

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Liveness check. The voice core has no external dependencies, so the
    service is healthy whenever it can answer.
    """
    return {
        "status": "healthy",
        "service": f"{settings.PROJECT_NAME} API",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "supported_languages": list(SUPPORTED_LANGUAGES),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
