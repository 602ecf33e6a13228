"""
Base Service Class
"""
from typing import Any, Dict, Optional
import logging
import random
from abc import ABC, abstractmethod

from brandstorm_domains.config.settings import Settings, settings as default_settings
from brandstorm_domains.core.ai_manager import AIManager
from brandstorm_domains.core.tld_catalog import TldCatalog
from brandstorm_domains.providers import create_availability_provider

logger = logging.getLogger(__name__)


class BaseService(ABC):
    """
    Abstract base class for suggestion services
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        ai_manager=None,
        provider=None,
        catalog: Optional[TldCatalog] = None,
        rng: Optional[random.Random] = None,
        delay: Optional[float] = None
    ):
        """Initialize base service with optional dependency injection for testing"""
        self.config = config or default_settings
        self.ai = ai_manager if ai_manager is not None else AIManager.initialize(self.config)
        self.provider = provider if provider is not None else create_availability_provider(self.config)
        self.catalog = catalog if catalog is not None else TldCatalog.from_file(self.config.tlds_path)
        self.rng = rng or random.Random()
        self.delay = self.config.batch_delay_seconds if delay is None else delay
        self.service_name = self.__class__.__name__

    @abstractmethod
    async def generate(self, description: str, **kwargs) -> Any:
        """
        Abstract generate method that all services must implement

        Args:
            description: Business description
            **kwargs: Service-specific parameters

        Returns:
            Generation results
        """
        pass

    @property
    def provider_name(self) -> str:
        return getattr(self.provider, "name", "unknown")

    def get_provider_info(self) -> Dict[str, Any]:
        """Current availability provider information"""
        return self.provider.get_provider_info()

    async def test_provider(self) -> bool:
        """Check provider connectivity"""
        try:
            return await self.provider.test_connection()
        except Exception as e:
            logger.error(f"{self.service_name} provider test failed: {e}")
            return False

    async def close(self):
        """Release provider resources"""
        await self.provider.close()
