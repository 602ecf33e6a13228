"""
FastAPI Dependencies
"""
from fastapi import HTTPException, Request, status

from brandstorm_domains.api.tools import DomainTools


async def get_tools(request: Request) -> DomainTools:
    """
    Get the tool surface created during application startup

    Returns:
        DomainTools bound to the running domain service
    """
    tools = getattr(request.app.state, "tools", None)
    if tools is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Domain service not initialized"
        )
    return tools
