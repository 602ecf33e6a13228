"""
Batched Availability Checking
"""
from typing import List, Optional, Sequence
import asyncio
import logging

from brandstorm_domains.core.models import Candidate, DomainResult, DomainStatus
from brandstorm_domains.providers.base import AvailabilityProvider
from brandstorm_domains.services.scorer import score_domain

logger = logging.getLogger(__name__)


def build_result(
    candidate: Candidate,
    keywords: Sequence[str],
    status: Optional[DomainStatus] = None
) -> DomainResult:
    """Score a candidate and attach its status (unavailable when missing)"""
    return DomainResult(
        domain=candidate.domain,
        strategy=candidate.strategy,
        available=status.available if status else False,
        is_premium=status.is_premium if status else False,
        premium_price=status.premium_price if status else None,
        tld=candidate.domain.rsplit('.', 1)[-1],
        score=score_domain(candidate.domain, candidate.strategy, keywords)
    )


class AvailabilityChecker:
    """
    Resolves availability for candidates in provider-sized batches

    Lookups inside a batch run concurrently; a fixed delay separates
    batches. Failures never drop a candidate.
    """

    def __init__(self, provider: AvailabilityProvider, delay: float = 1.0):
        self.provider = provider
        self.delay = delay

    @property
    def batch_size(self) -> int:
        return max(1, self.provider.batch_size)

    async def _check_one(self, candidate: Candidate, keywords: Sequence[str]) -> DomainResult:
        statuses = await self.provider.check_status(candidate.domain)
        status = next(
            (s for s in statuses if s.domain == candidate.domain.lower()),
            statuses[0] if statuses else None
        )
        return build_result(candidate, keywords, status)

    async def _check_batch(
        self,
        batch: Sequence[Candidate],
        keywords: Sequence[str]
    ) -> List[DomainResult]:
        outcomes = await asyncio.gather(
            *(self._check_one(candidate, keywords) for candidate in batch),
            return_exceptions=True
        )

        results = []
        for candidate, outcome in zip(batch, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(f"⚠️ Availability check failed for {candidate.domain}: {outcome}")
                results.append(build_result(candidate, keywords))
            else:
                results.append(outcome)
        return results

    async def check(
        self,
        candidates: Sequence[Candidate],
        keywords: Sequence[str]
    ) -> List[DomainResult]:
        """
        Check and score every candidate

        Args:
            candidates: Candidates to resolve
            keywords: Keywords used for scoring

        Returns:
            One scored result per candidate, in batch order
        """
        candidates = list(candidates)
        results: List[DomainResult] = []
        size = self.batch_size

        for start in range(0, len(candidates), size):
            batch = candidates[start:start + size]

            try:
                results.extend(await self._check_batch(batch, keywords))
            except Exception as e:
                logger.error(f"❌ Availability batch {start // size + 1} failed: {e}")
                results.extend(build_result(candidate, keywords) for candidate in batch)

            if start + size < len(candidates) and self.delay > 0:
                await asyncio.sleep(self.delay)

        logger.info(
            f"✅ Checked {len(results)} domains via {self.provider.name} "
            f"({sum(1 for r in results if r.available)} available)"
        )
        return results
