"""
API Schemas Package
"""

# Request schemas
from brandstorm_domains.api.schemas.request_schemas import (
    CheckAvailabilityRequest,
    ExploreDeepRequest,
    QuickSuggestRequest,
    SuggestDomainsRequest,
)

# Response schemas
from brandstorm_domains.api.schemas.response_schemas import (
    HealthCheckResponse,
    ToolInfo,
    ToolResponse,
)

__all__ = [
    # Requests
    "SuggestDomainsRequest",
    "QuickSuggestRequest",
    "CheckAvailabilityRequest",
    "ExploreDeepRequest",

    # Responses
    "ToolResponse",
    "ToolInfo",
    "HealthCheckResponse",
]
