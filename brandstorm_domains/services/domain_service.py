"""
Domain Suggestion Service
"""
from typing import List, Optional, Sequence
import logging

from brandstorm_domains.config.constants import (
    CANDIDATE_MULTIPLIER,
    CHECK_MULTIPLIER,
    DEFAULT_BATCH_SIZE,
    DEFAULT_MAX_BATCHES,
    DEFAULT_SUGGESTIONS,
    CreativityLevel,
    SearchMode,
    Strategy,
)
from brandstorm_domains.core.models import (
    Candidate,
    DeepTldResult,
    DomainResult,
    DomainStatus,
    SearchResult,
)
from brandstorm_domains.services.availability_service import AvailabilityChecker
from brandstorm_domains.services.base_service import BaseService
from brandstorm_domains.services.exploration_service import ExplorationService
from brandstorm_domains.services.generator import CandidateGenerator
from brandstorm_domains.services.scorer import calculate_creativity_score
from brandstorm_domains.utils.text_parsers import extract_keywords

logger = logging.getLogger(__name__)


class DomainService(BaseService):
    """Suggest, check and explore domain names"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.generator = CandidateGenerator(self.ai, rng=self.rng)
        self.checker = AvailabilityChecker(self.provider, delay=self.delay)
        self.explorer = ExplorationService(
            self.generator,
            self.checker,
            self.catalog,
            rng=self.rng,
            delay=self.delay
        )

    async def generate(self, description: str, **kwargs) -> SearchResult:
        return await self.suggest(description, **kwargs)

    async def suggest(
        self,
        description: str,
        mode: Optional[str] = SearchMode.STANDARD.value,
        max_suggestions: int = DEFAULT_SUGGESTIONS
    ) -> SearchResult:
        """
        Suggest domains for a business description

        Args:
            description: Business description
            mode: standard, competitive, premium, budget or international
            max_suggestions: Maximum results to return

        Returns:
            Categorized, scored results with insights
        """
        mode = mode or SearchMode.STANDARD.value
        keywords = extract_keywords(description)
        selected_tlds = self.catalog.select_for_mode(mode, keywords)

        logger.info(
            f"🔍 Suggesting domains ({mode}): {len(keywords)} keywords, "
            f"{len(selected_tlds)} TLDs"
        )

        candidates = await self.generator.generate(
            description,
            keywords,
            selected_tlds,
            mode,
            max_suggestions * CANDIDATE_MULTIPLIER
        )

        results = await self.checker.check(
            candidates[:max_suggestions * CHECK_MULTIPLIER],
            keywords
        )
        results.sort(key=lambda r: r.score, reverse=True)
        limited = results[:max_suggestions]

        available = [r for r in limited if r.available]
        taken = [r for r in limited if not r.available and not r.is_premium]
        premium = [r for r in limited if r.is_premium]

        creativity_score = calculate_creativity_score(limited)
        insights = self.generate_insights(
            available, taken, premium, selected_tlds, creativity_score
        )

        logger.info(
            f"🎉 Suggestions ready: {len(available)} available, {len(taken)} taken, "
            f"{len(premium)} premium"
        )
        return SearchResult(
            available=available,
            taken=taken,
            premium=premium,
            insights=insights,
            search_mode=mode,
            total_generated=len(candidates),
            creativity_score=creativity_score,
            provider=self.provider_name
        )

    async def check_domain(self, domain: str) -> List[DomainStatus]:
        """Direct single lookup; provider errors propagate"""
        return await self.provider.check_status(domain)

    async def check_multiple(self, domains: Sequence[str]) -> List[DomainResult]:
        """Batched lookup that never drops a domain"""
        candidates = [
            Candidate(domain=domain, strategy=Strategy.BATCH_CHECK.value)
            for domain in domains
        ]
        return await self.checker.check(candidates, [])

    async def explore_deep(
        self,
        description: str,
        keywords: Optional[Sequence[str]] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_batches: int = DEFAULT_MAX_BATCHES,
        creativity_level: str = CreativityLevel.MODERATE.value,
        check_availability: bool = False
    ) -> DeepTldResult:
        return await self.explorer.explore(
            description,
            keywords=keywords,
            batch_size=batch_size,
            max_batches=max_batches,
            creativity_level=creativity_level,
            check_availability=check_availability
        )

    def generate_insights(
        self,
        available: List[DomainResult],
        taken: List[DomainResult],
        premium: List[DomainResult],
        selected_tlds: Sequence[str],
        creativity_score: float
    ) -> List[str]:
        """Human-readable observations about a suggestion run"""
        insights = [f"Using {self.provider_name.capitalize()} API for domain checking"]

        if not available:
            insights.append("High competition detected - consider more abstract or invented brand names")
            insights.append("Try combining words creatively or using less common TLDs")
        elif len(available) >= 5:
            insights.append("Great availability in this space - multiple strong options found")

        checked = available + taken
        strategies = list(dict.fromkeys(r.strategy for r in checked))
        if Strategy.WORD_SLICING.value in strategies:
            insights.append("Word slicing strategy found creative TLD integrations")
        if Strategy.PORTMANTEAU.value in strategies:
            insights.append("Portmanteau combinations created unique brandable names")

        used_tlds = {r.tld for r in checked}
        insights.append(
            f"Explored {len(used_tlds)} different TLDs from {len(selected_tlds)} candidates"
        )

        if premium:
            insights.append(
                f"Found {len(premium)} premium domains - potential investment opportunities"
            )

        if creativity_score >= 8:
            insights.append("High creativity score - generated diverse and innovative options")
        elif creativity_score >= 6:
            insights.append("Good creativity balance - mix of safe and innovative options")
        else:
            insights.append("Conservative approach - focused on tried-and-true naming patterns")

        total = len(available) + len(taken) + len(premium)
        insights.append(f"Analyzed {total} domains across {len(strategies)} creative strategies")

        return insights
