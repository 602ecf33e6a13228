"""
Pytest configuration and shared fixtures

Fixtures available to all tests:
  • test_settings  - Settings isolated from .env files
  • fake_ai        - scripted text generator
  • fake_provider  - in-memory availability provider
  • catalog        - small TLD catalog with every category populated
  • domain_service - DomainService wired with the fakes above
"""
import random
from typing import Dict, List, Optional, Union

import pytest

from brandstorm_domains.config.settings import Settings
from brandstorm_domains.core.exceptions import AvailabilityProviderError, TextGenerationError
from brandstorm_domains.core.models import DomainStatus
from brandstorm_domains.core.tld_catalog import TldCatalog
from brandstorm_domains.providers.base import AvailabilityProvider
from brandstorm_domains.services.domain_service import DomainService

TEST_TLDS = [
    ".com", ".net", ".org", ".io", ".ai", ".app", ".dev", ".tech", ".co",
    ".xyz", ".site", ".online", ".space", ".world", ".digital",
    ".fun", ".club", ".pizza", ".coffee",
    ".us", ".uk", ".de", ".fr",
    ".amazon",
]


class FakeAI:
    """Text generator returning scripted responses"""

    def __init__(self, responses: Union[str, List[str]] = "", fail: bool = False):
        self.responses = [responses] if isinstance(responses, str) else list(responses)
        self.fail = fail
        self.calls: List[Dict] = []

    async def complete(self, prompt: str, temperature: float = 0.8, max_tokens: int = 800) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature, "max_tokens": max_tokens})
        if self.fail:
            raise TextGenerationError("connection refused", model="fake")
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0] if self.responses else ""


class FakeProvider(AvailabilityProvider):
    """Availability provider backed by a dict

    ``statuses`` maps a domain to a DomainStatus or an exception to raise.
    Unknown domains are reported taken.
    """

    name = "fake"

    def __init__(
        self,
        statuses: Optional[Dict[str, Union[DomainStatus, Exception]]] = None,
        batch_size: int = 5
    ):
        super().__init__(Settings(_env_file=None))
        self.statuses = statuses or {}
        self.batch_size = batch_size
        self.calls: List[List[str]] = []

    async def check_status(self, domains):
        domain_list = self._domain_list(domains)
        self.calls.append(domain_list)

        results = []
        for domain in domain_list:
            status = self.statuses.get(domain)
            if isinstance(status, Exception):
                raise status
            results.append(status or DomainStatus(domain=domain))
        return results


def available(domain: str, premium: bool = False, price: Optional[float] = None) -> DomainStatus:
    return DomainStatus(domain=domain, available=True, is_premium=premium, premium_price=price)


def provider_error(message: str = "timeout") -> AvailabilityProviderError:
    return AvailabilityProviderError("Fake", message)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, batch_delay_seconds=0)


@pytest.fixture
def fake_ai():
    return FakeAI()


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def catalog():
    return TldCatalog(TEST_TLDS)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def domain_service(test_settings, fake_ai, fake_provider, catalog, rng):
    return DomainService(
        test_settings,
        ai_manager=fake_ai,
        provider=fake_provider,
        catalog=catalog,
        rng=rng,
        delay=0
    )
