"""
API Routes Package
"""
from fastapi import APIRouter

from brandstorm_domains.api.routes.domain_routes import router as domain_router
from brandstorm_domains.api.routes.health_routes import router as health_router

# Create main API router
api_router = APIRouter()

api_router.include_router(
    domain_router,
    prefix="/domains",
    tags=["domains"]
)

api_router.include_router(
    health_router,
    prefix="/health",
    tags=["health"]
)

__all__ = [
    "api_router",
    "domain_router",
    "health_router"
]
