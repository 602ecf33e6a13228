"""
Tool surface shared by the HTTP and MCP transports
"""
from typing import Any, Dict, List, Optional, Type
import logging

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from brandstorm_domains.api.schemas.request_schemas import (
    CheckAvailabilityRequest,
    ExploreDeepRequest,
    QuickSuggestRequest,
    SuggestDomainsRequest,
)
from brandstorm_domains.api.schemas.response_schemas import ToolInfo, ToolResponse
from brandstorm_domains.config.constants import QUICK_SUGGESTIONS, SearchMode
from brandstorm_domains.core.exceptions import (
    AvailabilityProviderError,
    DomainSuggestException,
    ValidationError,
)
from brandstorm_domains.services.domain_service import DomainService
from brandstorm_domains.utils.formatters import (
    format_batch_results,
    format_deep_result,
    format_domain_status,
    format_quick_result,
    format_search_result,
)

logger = logging.getLogger(__name__)

TOOL_DEFINITIONS = [
    (
        "suggest-domains",
        "AI-powered domain suggestions with multi-strategy generation, scoring and categorized results",
        SuggestDomainsRequest
    ),
    (
        "quick-suggest",
        "Fast domain suggestions with basic availability checking",
        QuickSuggestRequest
    ),
    (
        "check-domain",
        "Check if a domain (or a list of up to 20 domains) is available for registration",
        CheckAvailabilityRequest
    ),
    (
        "deep-tld-explore",
        "Explore the full TLD catalog in batches and surface the highest-scoring combinations",
        ExploreDeepRequest
    ),
]


def _error_message(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "Invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{location}: {message}" if location else message


def parse_request(schema: Type[BaseModel], arguments: Dict[str, Any]) -> BaseModel:
    """
    Validate tool arguments against a request schema

    Raises:
        ValidationError: With a descriptive message built from every violation
    """
    try:
        return schema(**arguments)
    except PydanticValidationError as e:
        errors = e.errors()
        message = "; ".join(_error_message(error) for error in errors)
        raise ValidationError(
            message=message,
            errors=[_error_message(error) for error in errors]
        ) from e


def _provided(**kwargs) -> Dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


def error_response(prefix: str, error: Exception) -> ToolResponse:
    """Plain text failure with the error flag set"""
    if isinstance(error, DomainSuggestException):
        message = error.message
        data = error.to_dict()
    else:
        message = str(error) or error.__class__.__name__
        data = {"error": "internal_error", "message": message, "details": {}}

    return ToolResponse(text=f"{prefix}: {message}", is_error=True, data=data)


class DomainTools:
    """
    Validates tool arguments, runs the domain service and formats results
    """

    def __init__(self, service: DomainService):
        self.service = service

    async def suggest(
        self,
        description: Optional[str] = None,
        mode: Optional[str] = None,
        max_suggestions: Optional[int] = None
    ) -> ToolResponse:
        """Suggest domains for a business description"""
        try:
            request = parse_request(
                SuggestDomainsRequest,
                _provided(description=description, mode=mode, max_suggestions=max_suggestions)
            )
            result = await self.service.suggest(
                request.description,
                mode=request.mode.value,
                max_suggestions=request.max_suggestions
            )
            return ToolResponse(
                text=format_search_result(result),
                data=result.model_dump()
            )
        except Exception as e:
            logger.error(f"❌ suggest failed: {e}")
            return error_response("Error generating domain suggestions", e)

    async def quick_suggest(self, description: Optional[str] = None) -> ToolResponse:
        """Standard-mode suggestions with a fixed result size"""
        try:
            request = parse_request(QuickSuggestRequest, _provided(description=description))
            result = await self.service.suggest(
                request.description,
                mode=SearchMode.STANDARD.value,
                max_suggestions=QUICK_SUGGESTIONS
            )
            return ToolResponse(
                text=format_quick_result(result),
                data=result.model_dump()
            )
        except Exception as e:
            logger.error(f"❌ quick_suggest failed: {e}")
            return error_response("Error generating quick suggestions", e)

    async def check_availability(
        self,
        domain: Optional[str] = None,
        domains: Optional[List[str]] = None
    ) -> ToolResponse:
        """
        Check one domain directly or a list through the batched checker

        A single lookup reports provider failures; a list never drops a
        domain.
        """
        try:
            request = parse_request(
                CheckAvailabilityRequest,
                _provided(domain=domain, domains=domains)
            )

            if request.domain is not None:
                statuses = await self.service.check_domain(request.domain)
                status = next(
                    (s for s in statuses if s.domain == request.domain),
                    statuses[0] if statuses else None
                )
                if status is None:
                    raise AvailabilityProviderError(
                        self.service.provider_name,
                        f"No result returned for {request.domain}"
                    )
                return ToolResponse(
                    text=format_domain_status(request.domain, status.available, status.is_premium),
                    data={"results": [status.model_dump()]}
                )

            results = await self.service.check_multiple(request.domains)
            return ToolResponse(
                text=format_batch_results(results),
                data={"results": [r.model_dump() for r in results]}
            )
        except Exception as e:
            logger.error(f"❌ check_availability failed: {e}")
            return error_response("Error checking domain", e)

    async def explore_deep(
        self,
        description: Optional[str] = None,
        keywords: Optional[List[str]] = None,
        batch_size: Optional[int] = None,
        max_batches: Optional[int] = None,
        creativity_level: Optional[str] = None,
        check_availability: Optional[bool] = None
    ) -> ToolResponse:
        """Deep exploration across the whole TLD catalog"""
        try:
            request = parse_request(
                ExploreDeepRequest,
                _provided(
                    description=description,
                    keywords=keywords,
                    batch_size=batch_size,
                    max_batches=max_batches,
                    creativity_level=creativity_level,
                    check_availability=check_availability
                )
            )
            result = await self.service.explore_deep(
                request.description,
                keywords=request.keywords,
                batch_size=request.batch_size,
                max_batches=request.max_batches,
                creativity_level=request.creativity_level.value,
                check_availability=request.check_availability
            )
            return ToolResponse(
                text=format_deep_result(result),
                data=result.model_dump()
            )
        except Exception as e:
            logger.error(f"❌ explore_deep failed: {e}")
            return error_response("Error exploring TLDs", e)

    def list_tools(self) -> ToolResponse:
        """Describe every tool and its JSON input schema"""
        tools = [
            ToolInfo(name=name, description=description, input_schema=schema.model_json_schema())
            for name, description, schema in TOOL_DEFINITIONS
        ]
        text = "AVAILABLE TOOLS\n" + "".join(f"• {t.name}: {t.description}\n" for t in tools)
        return ToolResponse(text=text, data={"tools": [t.model_dump() for t in tools]})
