"""
Domain service orchestration
"""
from unittest.mock import AsyncMock

import pytest

from brandstorm_domains.core.exceptions import AvailabilityProviderError
from brandstorm_domains.core.models import Candidate, DomainResult
from brandstorm_domains.services.domain_service import DomainService
from tests.conftest import FakeAI, FakeProvider, available, provider_error

DESCRIPTION = "artisanal pickle factory"


def _result(domain, strategy="direct-keyword", available=False, premium=False, score=5):
    return DomainResult(
        domain=domain,
        strategy=strategy,
        available=available,
        is_premium=premium,
        tld=domain.rsplit('.', 1)[-1],
        score=score
    )


class TestSuggest:

    @pytest.mark.asyncio
    async def test_categorizes_and_limits(self, domain_service, fake_provider):
        fake_provider.statuses.update({
            "pickle.io": available("pickle.io"),
            "pickle.ai": available("pickle.ai", premium=True, price=2500.0),
        })

        result = await domain_service.suggest(DESCRIPTION, mode="competitive", max_suggestions=15)

        returned = result.available + result.taken + result.premium
        assert len({r.domain for r in returned}) <= 15
        assert result.search_mode == "competitive"
        assert result.provider == "fake"
        assert 0 < result.total_generated <= 45
        assert all(r.available for r in result.available)
        assert all(not r.available and not r.is_premium for r in result.taken)
        assert all(r.is_premium for r in result.premium)
        assert result.insights[0] == "Using Fake API for domain checking"

    @pytest.mark.asyncio
    async def test_available_premium_listed_twice(self, domain_service, fake_provider):
        fake_provider.statuses["pickle.ai"] = available("pickle.ai", premium=True, price=2500.0)
        domain_service.generator.generate = AsyncMock(return_value=[
            Candidate(domain="pickle.ai", strategy="direct-keyword"),
            Candidate(domain="pickle.com", strategy="direct-keyword"),
        ])

        result = await domain_service.suggest(DESCRIPTION, max_suggestions=5)

        assert [r.domain for r in result.available] == ["pickle.ai"]
        assert [r.domain for r in result.premium] == ["pickle.ai"]
        assert [r.domain for r in result.taken] == ["pickle.com"]
        assert result.premium[0].premium_price == 2500.0

    @pytest.mark.asyncio
    async def test_checks_at_most_twice_the_limit(self, domain_service, fake_provider):
        await domain_service.suggest(DESCRIPTION, mode="standard", max_suggestions=5)

        checked = [domain for call in fake_provider.calls for domain in call]
        assert len(checked) <= 10

    @pytest.mark.asyncio
    async def test_results_sorted_by_score(self, domain_service, fake_provider):
        result = await domain_service.suggest(DESCRIPTION, max_suggestions=10)

        scores = [r.score for r in result.taken]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.asyncio
    async def test_nothing_available_reports_competition(self, domain_service):
        result = await domain_service.suggest(DESCRIPTION, max_suggestions=8)

        assert result.available == []
        assert (
            "High competition detected - consider more abstract or invented brand names"
            in result.insights
        )

    @pytest.mark.asyncio
    async def test_survives_provider_and_text_generation_failures(
        self, test_settings, catalog, rng
    ):
        provider = FakeProvider({"pickle.com": provider_error()})
        service = DomainService(
            test_settings,
            ai_manager=FakeAI(fail=True),
            provider=provider,
            catalog=catalog,
            rng=rng,
            delay=0
        )

        result = await service.suggest(DESCRIPTION, mode="standard", max_suggestions=10)

        assert result.taken
        assert result.total_generated > 0

    @pytest.mark.asyncio
    async def test_generate_defaults_to_standard(self, domain_service):
        result = await domain_service.generate(DESCRIPTION)

        assert result.search_mode == "standard"


class TestChecks:

    @pytest.mark.asyncio
    async def test_check_multiple_keeps_order(self, domain_service, fake_provider):
        fake_provider.statuses.update({
            "brine.io": available("brine.io"),
            "jar.ai": provider_error(),
        })

        results = await domain_service.check_multiple(["pickle.com", "brine.io", "jar.ai"])

        assert [r.domain for r in results] == ["pickle.com", "brine.io", "jar.ai"]
        assert [r.available for r in results] == [False, True, False]
        assert {r.strategy for r in results} == {"batch-check"}

    @pytest.mark.asyncio
    async def test_check_domain_propagates_errors(self, domain_service, fake_provider):
        fake_provider.statuses["pickle.com"] = provider_error()

        with pytest.raises(AvailabilityProviderError):
            await domain_service.check_domain("pickle.com")

    @pytest.mark.asyncio
    async def test_provider_probe(self, domain_service):
        assert await domain_service.test_provider() is True
        assert domain_service.get_provider_info()["name"] == "fake"


class TestInsights:

    def test_great_availability_and_strategies(self, domain_service):
        available_results = [
            _result(f"name{i}.io", strategy="word-slicing", available=True) for i in range(5)
        ]
        taken = [_result("pictory.com", strategy="portmanteau")]

        insights = domain_service.generate_insights(available_results, taken, [], [".io", ".com", ".ai"], 8.5)

        assert insights == [
            "Using Fake API for domain checking",
            "Great availability in this space - multiple strong options found",
            "Word slicing strategy found creative TLD integrations",
            "Portmanteau combinations created unique brandable names",
            "Explored 2 different TLDs from 3 candidates",
            "High creativity score - generated diverse and innovative options",
            "Analyzed 6 domains across 2 creative strategies",
        ]

    def test_premium_and_conservative(self, domain_service):
        premium = [_result("brine.ai", premium=True)]
        taken = [_result("pickle.com")]

        insights = domain_service.generate_insights([], taken, premium, [".com"], 3.0)

        assert "Found 1 premium domains - potential investment opportunities" in insights
        assert "Try combining words creatively or using less common TLDs" in insights
        assert insights[-2] == "Conservative approach - focused on tried-and-true naming patterns"
        assert insights[-1] == "Analyzed 2 domains across 1 creative strategies"

    def test_good_creativity_band(self, domain_service):
        insights = domain_service.generate_insights(
            [_result("pickle.io", available=True)], [], [], [".io"], 6.0
        )

        assert "Good creativity balance - mix of safe and innovative options" in insights
