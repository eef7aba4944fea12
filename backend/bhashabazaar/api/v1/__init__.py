"""
API v1 Router Initialization
Exports all routers for the BhashaBazaar API v1
"""

from fastapi import APIRouter
from bhashabazaar.core.config import settings
from .health import router as health_router
from .voice import router as voice_router

# Create main v1 router
api_v1_router = APIRouter(prefix=settings.API_V1_STR)

# Include all routers
api_v1_router.include_router(health_router)
api_v1_router.include_router(voice_router)

# Export the main router
__all__ = ["api_v1_router"]
