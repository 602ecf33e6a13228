"""
Domain availability providers
"""
from typing import Optional
import logging

from brandstorm_domains.config.settings import Settings, settings as default_settings
from brandstorm_domains.providers.base import AvailabilityProvider
from brandstorm_domains.providers.domainr import DomainrProvider
from brandstorm_domains.providers.namecheap import NamecheapProvider

logger = logging.getLogger(__name__)


def create_availability_provider(config: Optional[Settings] = None) -> AvailabilityProvider:
    """
    Build the provider named by DOMAIN_PROVIDER

    Raises:
        MissingAPIKeyError: Credentials for the selected provider are missing
    """
    config = config or default_settings
    name = config.get_domain_provider()

    if name == "namecheap":
        provider = NamecheapProvider(config)
    else:
        provider = DomainrProvider(config)

    logger.info(f"✅ Using {provider.name} for availability checks")
    return provider


__all__ = [
    "AvailabilityProvider",
    "DomainrProvider",
    "NamecheapProvider",
    "create_availability_provider",
]
