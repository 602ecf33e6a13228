"""
Namecheap availability provider (XML API)
"""
from typing import List, Optional, Union
import asyncio
import logging
import xml.etree.ElementTree as ET

import aiohttp

from brandstorm_domains.config.constants import PROVIDER_BATCH_SIZES
from brandstorm_domains.config.settings import Settings
from brandstorm_domains.core.exceptions import AvailabilityProviderError, MissingAPIKeyError
from brandstorm_domains.core.models import DomainStatus
from brandstorm_domains.providers.base import AvailabilityProvider

logger = logging.getLogger(__name__)

NAMECHEAP_URL = "https://api.namecheap.com/xml.response"
NAMECHEAP_SANDBOX_URL = "https://api.sandbox.namecheap.com/xml.response"
NC_XML_NS = "{http://api.namecheap.com/xml.response}"


def _to_float(value: Optional[str]) -> Optional[float]:
    if value in (None, ""):
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _find_all(root: ET.Element, tag: str) -> List[ET.Element]:
    """Find elements with or without the Namecheap namespace"""
    found = root.findall(f".//{NC_XML_NS}{tag}")
    return found or root.findall(f".//{tag}")


def parse_namecheap_response(xml_text: str) -> List[DomainStatus]:
    """
    Parse a namecheap.domains.check XML response

    Args:
        xml_text: Raw XML body

    Returns:
        Normalized statuses, one per DomainCheckResult element

    Raises:
        AvailabilityProviderError: API reported an error or the body is not XML
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise AvailabilityProviderError("Namecheap", f"Failed to parse response: {e}")

    if root.attrib.get("Status", "").upper() != "OK":
        messages = [
            (error.text or "").strip()
            for error in _find_all(root, "Error")
        ]
        message = next((m for m in messages if m), "Unknown error")
        raise AvailabilityProviderError("Namecheap", message)

    results = []
    for elem in _find_all(root, "DomainCheckResult"):
        premium_flag = elem.attrib.get("IsPremiumName", elem.attrib.get("IsPremium", "false"))
        results.append(DomainStatus(
            domain=elem.attrib.get("Domain", "").lower(),
            available=elem.attrib.get("Available", "false").lower() == "true",
            is_premium=premium_flag.lower() == "true",
            premium_price=_to_float(elem.attrib.get("PremiumRegistrationPrice"))
        ))

    if not results:
        logger.warning(f"⚠️ No DomainCheckResult in Namecheap response: {xml_text[:300]}")

    return results


class NamecheapProvider(AvailabilityProvider):
    """Registrar batch API with explicit availability and premium flags"""

    name = "namecheap"
    batch_size = PROVIDER_BATCH_SIZES["namecheap"]

    def __init__(self, config: Settings):
        super().__init__(config)

        missing = [
            env_name for env_name, value in (
                ("NAMECHEAP_API_USER", config.namecheap_api_user),
                ("NAMECHEAP_API_KEY", config.namecheap_api_key),
                ("NAMECHEAP_CLIENT_IP", config.namecheap_client_ip),
            )
            if not value
        ]
        if missing:
            raise MissingAPIKeyError("Namecheap API", missing=missing)

        self.api_user = config.namecheap_api_user
        self.api_key = config.namecheap_api_key
        self.client_ip = config.namecheap_client_ip
        self.base_url = NAMECHEAP_SANDBOX_URL if config.namecheap_sandbox else NAMECHEAP_URL

    async def check_status(self, domains: Union[str, List[str]]) -> List[DomainStatus]:
        domain_list = self._domain_list(domains)
        params = {
            "ApiUser": self.api_user,
            "ApiKey": self.api_key,
            "UserName": self.api_user,
            "Command": "namecheap.domains.check",
            "ClientIp": self.client_ip,
            "DomainList": ",".join(domain_list)
        }

        session = await self._get_session()
        try:
            async with session.get(
                self.base_url,
                params=params,
                headers={"User-Agent": "BrandstormAI/1.0"}
            ) as response:
                body = await response.text()
                if response.status != 200:
                    raise AvailabilityProviderError(
                        "Namecheap", f"HTTP {response.status}"
                    )
        except aiohttp.ClientError as e:
            logger.error(f"❌ Namecheap request failed: {e}")
            raise AvailabilityProviderError("Namecheap", str(e)) from e
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Namecheap request timed out after {self.config.provider_timeout_seconds}s")
            raise AvailabilityProviderError("Namecheap", "Request timed out") from e

        results = parse_namecheap_response(body)
        logger.debug(f"Namecheap checked {len(domain_list)} domains")
        return results

    def get_provider_info(self):
        info = super().get_provider_info()
        info.update({
            "features": [
                "Domain availability checking",
                "Premium domain detection",
                "Premium pricing information",
                f"Batch processing (up to {self.batch_size} domains)"
            ],
            "sandbox": self.config.namecheap_sandbox
        })
        return info
