"""
Deep TLD Exploration
"""
from typing import List, Optional, Sequence, Tuple
import asyncio
import logging
import math
import random

from brandstorm_domains.config.constants import (
    MAX_STANDOUTS,
    MAX_SUGGESTIONS_PER_BATCH,
    STANDOUT_MIN_SCORE,
    STANDOUTS_PER_BATCH,
    CreativityLevel,
    Strategy,
)
from brandstorm_domains.core.models import (
    Candidate,
    DeepTldResult,
    ExplorationStats,
    Standout,
)
from brandstorm_domains.core.tld_catalog import TldCatalog
from brandstorm_domains.services.availability_service import AvailabilityChecker
from brandstorm_domains.services.generator import CandidateGenerator
from brandstorm_domains.services.scorer import generate_standout_reason, score_domain
from brandstorm_domains.utils.text_parsers import extract_keywords

logger = logging.getLogger(__name__)


def plan_batches(total: int, batch_size: int, max_batches: int) -> Tuple[int, int]:
    """
    Effective batch size and batch count covering ``total`` TLDs

    The caller's hints are advisory: the returned plan always covers
    every TLD exactly once.

    Returns:
        (actual_batch_size, actual_batch_count)
    """
    if total <= 0:
        return max(1, batch_size), 0

    actual_batch_size = max(1, min(batch_size, math.ceil(total / max(1, max_batches))))
    return actual_batch_size, math.ceil(total / actual_batch_size)


def partition(items: Sequence[str], batch_size: int) -> List[List[str]]:
    """Contiguous slices of ``batch_size`` (last one may be shorter)"""
    return [list(items[i:i + batch_size]) for i in range(0, len(items), batch_size)]


class ExplorationService:
    """Walks the full TLD catalog in shuffled batches collecting standouts"""

    def __init__(
        self,
        generator: CandidateGenerator,
        checker: AvailabilityChecker,
        catalog: TldCatalog,
        rng: Optional[random.Random] = None,
        delay: float = 1.0
    ):
        self.generator = generator
        self.checker = checker
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.delay = delay

    async def explore(
        self,
        description: str,
        keywords: Optional[Sequence[str]] = None,
        batch_size: int = 200,
        max_batches: int = 10,
        creativity_level: str = CreativityLevel.MODERATE.value,
        check_availability: bool = False
    ) -> DeepTldResult:
        """
        Explore every catalog TLD with brainstormed names

        Args:
            description: Business description
            keywords: Keywords to use (extracted from the description if empty)
            batch_size: Requested TLDs per batch
            max_batches: Requested number of batches
            creativity_level: conservative, moderate or wild
            check_availability: Check availability of the final standouts

        Returns:
            Standouts, available standouts and statistics
        """
        creativity = CreativityLevel(creativity_level)
        keywords = list(keywords) if keywords else extract_keywords(description)

        tlds = list(self.catalog.all_tlds)
        self.rng.shuffle(tlds)
        total_tlds = len(tlds)

        actual_batch_size, actual_batches = plan_batches(total_tlds, batch_size, max_batches)
        slices = [s for s in partition(tlds, actual_batch_size) if s][:actual_batches]

        logger.info(
            f"🔍 Deep exploration: {total_tlds} TLDs in {len(slices)} batches "
            f"of {actual_batch_size} ({creativity.value})"
        )

        standouts: List[Standout] = []
        stats: List[str] = []
        total_combinations = 0
        explored = 0

        for index, batch_tlds in enumerate(slices):
            combinations = await self.generator.brainstorm(
                description,
                keywords,
                batch_tlds,
                creativity,
                min(actual_batch_size * 2, MAX_SUGGESTIONS_PER_BATCH)
            )

            scored = [
                Standout(
                    domain=combo.domain,
                    score=score_domain(combo.domain, combo.strategy, keywords),
                    reason=generate_standout_reason(combo.domain, combo.strategy)
                )
                for combo in combinations
            ]
            best = sorted(
                (s for s in scored if s.score >= STANDOUT_MIN_SCORE),
                key=lambda s: s.score,
                reverse=True
            )[:STANDOUTS_PER_BATCH]
            standouts.extend(best)

            total_combinations += len(combinations)
            explored += len(batch_tlds)
            stats.append(
                f"Batch {index + 1}: LLM brainstormed {len(combinations)} combinations "
                f"from {len(batch_tlds)} TLDs"
            )
            logger.debug(f"Batch {index + 1}/{len(slices)}: {len(best)} standouts")

            if index < len(slices) - 1 and self.delay > 0:
                await asyncio.sleep(self.delay)

        standouts.sort(key=lambda s: s.score, reverse=True)
        unique = {}
        for standout in standouts:
            unique.setdefault(standout.domain, standout)
        top_standouts = list(unique.values())[:MAX_STANDOUTS]

        available = []
        if check_availability and top_standouts:
            stats.append(f"Checking availability for top {len(top_standouts)} standouts...")
            checked = await self.checker.check(
                [
                    Candidate(domain=s.domain, strategy=Strategy.LLM_BRAINSTORM.value)
                    for s in top_standouts
                ],
                keywords
            )
            available = [r for r in checked if r.available]
            premium_count = sum(1 for r in checked if r.is_premium)
            stats.append(
                f"Available standouts found: {len(available)} ({premium_count} premium)"
            )

        coverage = 100.0 if total_tlds == 0 else round(explored / total_tlds * 100, 1)
        stats.extend([
            f"LLM exploration completed: {total_combinations} combinations generated",
            f"High-scoring standouts found: {len(top_standouts)}",
            f"Explored TLDs: {explored} out of {total_tlds} total TLDs ({coverage:g}% coverage!)",
            f"Creativity level: {creativity.value}",
            f"LLM batches processed: {len(slices)}",
            f"Batch size: {actual_batch_size} TLDs per batch",
        ])
        if check_availability:
            stats.append("Availability checking: ENABLED")
        else:
            stats.append(
                "Availability checking: DISABLED (use check-domain tool for specific domains)"
            )

        summary = ExplorationStats(
            total_combinations=total_combinations,
            batches_processed=len(slices),
            standout_count=len(top_standouts),
            tlds_explored=explored,
            total_tlds=total_tlds,
            coverage_percent=coverage,
            creativity_level=creativity.value,
            batch_size=actual_batch_size,
            availability_checking=check_availability
        )

        logger.info(
            f"🎉 Deep exploration complete: {total_combinations} combinations, "
            f"{len(top_standouts)} standouts"
        )
        return DeepTldResult(
            standouts=top_standouts,
            available=available,
            stats=stats,
            summary=summary
        )
