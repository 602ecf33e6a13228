"""
Base Availability Provider
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
import logging

import aiohttp

from brandstorm_domains.config.settings import Settings
from brandstorm_domains.core.models import DomainStatus

logger = logging.getLogger(__name__)

# Domain that should never be registered, used for connectivity checks
CONNECTIVITY_TEST_DOMAIN = "test-domain-that-definitely-does-not-exist-12345.com"


class AvailabilityProvider(ABC):
    """
    Abstract domain availability provider

    Subclasses normalize their API response into DomainStatus records
    """

    name: str = "provider"
    batch_size: int = 5

    def __init__(self, config: Settings):
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Create the HTTP session lazily"""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.provider_timeout_seconds)
            )
        return self.session

    @staticmethod
    def _domain_list(domains: Union[str, List[str]]) -> List[str]:
        if isinstance(domains, str):
            return [domains]
        return list(domains)

    @abstractmethod
    async def check_status(self, domains: Union[str, List[str]]) -> List[DomainStatus]:
        """
        Check availability of one or more domains

        Args:
            domains: Single domain or list of domains

        Returns:
            One normalized status per domain reported by the API
        """
        pass

    async def test_connection(self) -> bool:
        """Check the provider answers a trivial lookup"""
        try:
            results = await self.check_status(CONNECTIVITY_TEST_DOMAIN)
            return len(results) > 0
        except Exception as e:
            logger.warning(f"⚠️ {self.name} connectivity test failed: {e}")
            return False

    def get_provider_info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "batch_size": self.batch_size,
            "is_configured": True
        }

    async def close(self):
        """Close the HTTP session"""
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
