"""
Domainr availability provider (RapidAPI)
"""
from typing import Any, Dict, List, Union
import asyncio
import logging

import aiohttp

from brandstorm_domains.config.constants import PROVIDER_BATCH_SIZES
from brandstorm_domains.config.settings import Settings
from brandstorm_domains.core.exceptions import AvailabilityProviderError, MissingAPIKeyError
from brandstorm_domains.core.models import DomainStatus
from brandstorm_domains.providers.base import AvailabilityProvider

logger = logging.getLogger(__name__)

DOMAINR_BASE_URL = "https://domainr.p.rapidapi.com/v2"


def parse_domainr_status(entry: Dict[str, Any]) -> DomainStatus:
    """
    Normalize one Domainr status entry

    ``summary == "inactive"`` means available; any status containing
    ``premium`` marks a premium name.
    """
    status = str(entry.get("status") or "")
    return DomainStatus(
        domain=str(entry.get("domain", "")).lower(),
        available=entry.get("summary") == "inactive",
        is_premium="premium" in status,
        premium_price=None
    )


def parse_domainr_response(payload: Dict[str, Any]) -> List[DomainStatus]:
    """Normalize a ``/v2/status`` payload"""
    if not isinstance(payload, dict):
        raise AvailabilityProviderError("Domainr", "Unexpected response payload")

    if payload.get("errors"):
        error = payload["errors"][0]
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise AvailabilityProviderError("Domainr", message or "Unknown error")

    return [parse_domainr_status(entry) for entry in payload.get("status") or []]


class DomainrProvider(AvailabilityProvider):
    """Broad coverage lookup API, availability inferred from status summary"""

    name = "domainr"
    batch_size = PROVIDER_BATCH_SIZES["domainr"]

    def __init__(self, config: Settings):
        super().__init__(config)

        if not config.domainr_rapidapi_key:
            raise MissingAPIKeyError("Domainr", missing=["DOMAINR_RAPIDAPI_KEY"])

        self.api_key = config.domainr_rapidapi_key
        self.api_host = config.domainr_rapidapi_host or "domainr.p.rapidapi.com"

    async def check_status(self, domains: Union[str, List[str]]) -> List[DomainStatus]:
        domain_list = self._domain_list(domains)
        headers = {
            "x-rapidapi-host": self.api_host,
            "x-rapidapi-key": self.api_key
        }

        session = await self._get_session()
        try:
            async with session.get(
                f"{DOMAINR_BASE_URL}/status",
                params={"domain": ",".join(domain_list)},
                headers=headers
            ) as response:
                if response.status != 200:
                    text = await response.text()
                    raise AvailabilityProviderError(
                        "Domainr", f"HTTP {response.status}: {text[:200]}"
                    )
                payload = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.error(f"❌ Domainr request failed: {e}")
            raise AvailabilityProviderError("Domainr", str(e)) from e
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Domainr request timed out after {self.config.provider_timeout_seconds}s")
            raise AvailabilityProviderError("Domainr", "Request timed out") from e
        except ValueError as e:
            raise AvailabilityProviderError("Domainr", f"Invalid JSON: {e}") from e

        return parse_domainr_response(payload)

    def get_provider_info(self):
        info = super().get_provider_info()
        info["features"] = [
            "Domain availability checking",
            "Premium status detection",
            "Broad TLD coverage"
        ]
        return info
