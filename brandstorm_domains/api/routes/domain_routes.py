"""
Domain Tool Routes
"""
from typing import Any, Dict
import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from brandstorm_domains.api.dependencies import get_tools
from brandstorm_domains.api.schemas.response_schemas import ToolResponse
from brandstorm_domains.api.tools import DomainTools

logger = logging.getLogger(__name__)
router = APIRouter()


def to_http(response: ToolResponse) -> JSONResponse:
    """Validation errors are 400, any other tool failure is 502"""
    if not response.is_error:
        code = status.HTTP_200_OK
    elif (response.data or {}).get("error") == "validation_error":
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_502_BAD_GATEWAY

    return JSONResponse(status_code=code, content=response.model_dump(mode="json"))


def _arguments(payload: Dict[str, Any], *names: str) -> Dict[str, Any]:
    return {name: payload.get(name) for name in names}


@router.post("/suggest")
async def suggest_domains(
    payload: Dict[str, Any] = Body(...),
    tools: DomainTools = Depends(get_tools)
) -> JSONResponse:
    """Suggest domains for a business description"""
    response = await tools.suggest(
        **_arguments(payload, "description", "mode", "max_suggestions")
    )
    return to_http(response)


@router.post("/quick-suggest")
async def quick_suggest(
    payload: Dict[str, Any] = Body(...),
    tools: DomainTools = Depends(get_tools)
) -> JSONResponse:
    """Quick standard-mode suggestions"""
    response = await tools.quick_suggest(**_arguments(payload, "description"))
    return to_http(response)


@router.post("/check")
async def check_domains(
    payload: Dict[str, Any] = Body(...),
    tools: DomainTools = Depends(get_tools)
) -> JSONResponse:
    """Check one domain or a list of domains"""
    response = await tools.check_availability(**_arguments(payload, "domain", "domains"))
    return to_http(response)


@router.post("/explore")
async def explore_deep(
    payload: Dict[str, Any] = Body(...),
    tools: DomainTools = Depends(get_tools)
) -> JSONResponse:
    """Deep TLD exploration"""
    response = await tools.explore_deep(
        **_arguments(
            payload,
            "description",
            "keywords",
            "batch_size",
            "max_batches",
            "creativity_level",
            "check_availability"
        )
    )
    return to_http(response)


@router.get("/tools")
async def list_tools(tools: DomainTools = Depends(get_tools)) -> JSONResponse:
    """List available tools and their input schemas"""
    return to_http(tools.list_tools())
