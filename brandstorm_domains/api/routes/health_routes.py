"""
Health Check Routes
"""
from datetime import datetime
from typing import Any, Dict
import logging
import time

from fastapi import APIRouter, Depends

from brandstorm_domains.api.dependencies import get_tools
from brandstorm_domains.api.schemas.response_schemas import HealthCheckResponse
from brandstorm_domains.api.tools import DomainTools
from brandstorm_domains.config.settings import settings

logger = logging.getLogger(__name__)
router = APIRouter()

# Track startup time
START_TIME = time.time()


@router.get("/", response_model=HealthCheckResponse)
async def health_check(tools: DomainTools = Depends(get_tools)) -> HealthCheckResponse:
    """Basic health check"""
    service = tools.service
    overall_status = "healthy"

    try:
        provider_info = service.get_provider_info()
    except Exception as e:
        logger.error(f"Provider info unavailable: {e}")
        provider_info = {"error": str(e)}
        overall_status = "degraded"

    get_stats = getattr(service.ai, "get_stats", None)
    text_generation = get_stats() if callable(get_stats) else {}

    return HealthCheckResponse(
        status=overall_status,
        version=settings.app_version,
        environment=settings.app_env,
        provider=provider_info,
        text_generation=text_generation,
        tld_count=len(service.catalog),
        uptime_seconds=time.time() - START_TIME
    )


@router.get("/live")
async def liveness_probe() -> Dict[str, Any]:
    """
    Liveness probe
    Returns 200 if service is alive
    """
    return {
        "status": "alive",
        "timestamp": datetime.now().isoformat()
    }


@router.get("/provider")
async def provider_probe(tools: DomainTools = Depends(get_tools)) -> Dict[str, Any]:
    """Test connectivity to the availability provider"""
    connected = await tools.service.test_provider()
    return {
        "provider": tools.service.provider_name,
        "connected": connected,
        "timestamp": datetime.now().isoformat()
    }
