"""
Candidate Domain Generator
"""
from operator import attrgetter
from typing import Callable, Hashable, Iterable, List, Optional, Sequence, Tuple
import logging
import math
import random

from brandstorm_domains.config.constants import (
    CREATIVE_WORDS,
    CREATIVITY_TEMPERATURES,
    LLM_MAX_TOKENS,
    LLM_SHARE,
    MODE_CREATIVITY,
    NUMBER_SUBSTITUTIONS,
    WILD_WORDS,
    CreativityLevel,
    SearchMode,
    Strategy,
)
from brandstorm_domains.core.models import Candidate
from brandstorm_domains.utils.text_parsers import parse_llm_domains
from brandstorm_domains.utils.validators import validate_domain

logger = logging.getLogger(__name__)

VOWELS = "aeiou"

CREATIVITY_INSTRUCTIONS = {
    CreativityLevel.WILD: "Be extremely creative and unconventional. Think outside the box!",
    CreativityLevel.MODERATE: "Balance creativity with professionalism. Mix safe and innovative options.",
    CreativityLevel.CONSERVATIVE: "Focus on professional, established naming patterns.",
}

BRAINSTORM_PROMPT = """You are a creative domain name expert. Do freeform brainstorming to find the best domain names for this business using any of these TLDs:

Business: {description}
Keywords: {keywords}
Available TLDs: {tlds}

Brainstorm creatively! Look for:
1. TLDs that complete words (e.g. "genera.tor", "innova.tion", "crea.tive")
2. TLDs related to the business (e.g. ".ai" for AI company, ".tech" for tech, ".coffee" for coffee shop)
3. Fun wordplay and puns with TLDs
4. Short, memorable combinations
5. TLDs that represent the company's values or industry
6. Creative mismatches that are surprisingly memorable

{instructions}

Be creative! Think outside the box. Try different approaches:
- What if the brand name flows into the TLD?
- What TLDs relate thematically to this business?
- What unexpected TLD combinations might be brilliant?

Return domain names in any format, one per line. Focus on the most creative and memorable combinations you can think of."""

ADVANCED_PROMPT = """Create ultra-creative domain names for: {description}

Keywords to work with: {keywords}
Available TLDs: {tlds}

Creative techniques to use:
- Word slicing (e.g., "examp.le" using .le)
- Portmanteau words (blending 2 words)
- Creative spelling variations
- Industry-specific combinations
- Abstract brandable names
- Unexpected TLD usage

Mode: {mode} - {mode_hint}

Generate 15 highly creative domain names. Be innovative with TLD usage.
Respond with ONLY domain names, one per line."""


def creativity_for_mode(mode: Optional[str]) -> CreativityLevel:
    """competitive is wild, premium is conservative, anything else moderate"""
    try:
        return MODE_CREATIVITY.get(SearchMode(mode), CreativityLevel.MODERATE)
    except ValueError:
        return CreativityLevel.MODERATE


def temperature_for(level) -> float:
    """Sampling temperature for a creativity level (moderate when unknown)"""
    try:
        return CREATIVITY_TEMPERATURES[CreativityLevel(level)]
    except ValueError:
        return CREATIVITY_TEMPERATURES[CreativityLevel.MODERATE]


def _suffix(domain: str) -> str:
    return '.' + domain.partition('.')[2]


# Deterministic strategies

def direct_keyword_candidates(
    keywords: Sequence[str],
    tlds: Sequence[str],
    room: int
) -> List[Candidate]:
    """``keyword + tld`` for the first 2 keywords and first 5 TLDs, up to ``room``"""
    candidates = []
    for keyword in keywords[:2]:
        for tld in tlds[:5]:
            if len(candidates) < room:
                candidates.append(Candidate(
                    domain=f"{keyword}{tld}",
                    strategy=Strategy.DIRECT_KEYWORD.value
                ))
    return candidates


def word_slicing_candidates(keywords: Sequence[str], tlds: Sequence[str]) -> List[Candidate]:
    """Let the TLD complete the word, e.g. ``genera`` + ``.tor``"""
    candidates = []
    for keyword in keywords[:2]:
        for tld in tlds:
            letters = tld[1:]
            if letters and keyword.endswith(letters):
                prefix = keyword[:-len(letters)]
                if len(prefix) >= 3:
                    candidates.append(Candidate(
                        domain=f"{prefix}{tld}",
                        strategy=Strategy.WORD_SLICING.value
                    ))
    return candidates


def portmanteau_candidates(keywords: Sequence[str], tlds: Sequence[str]) -> List[Candidate]:
    """Blend the first half of one keyword with the second half of a later one"""
    candidates = []
    for i in range(len(keywords) - 1):
        for j in range(i + 1, len(keywords)):
            first, second = keywords[i], keywords[j]
            blend = first[:math.ceil(len(first) / 2)] + second[len(second) // 2:]
            for tld in tlds[:5]:
                candidates.append(Candidate(
                    domain=f"{blend}{tld}",
                    strategy=Strategy.PORTMANTEAU.value
                ))
    return candidates


def creative_affix_candidates(keywords: Sequence[str], tlds: Sequence[str]) -> List[Candidate]:
    """Keyword with a creative word appended and prepended"""
    candidates = []
    for keyword in keywords[:2]:
        for word in CREATIVE_WORDS[:10]:
            for tld in tlds[:8]:
                candidates.append(Candidate(
                    domain=f"{keyword}{word}{tld}",
                    strategy=Strategy.CREATIVE_COMBINATION.value
                ))
                candidates.append(Candidate(
                    domain=f"{word}{keyword}{tld}",
                    strategy=Strategy.CREATIVE_PREFIX.value
                ))
    return candidates


def vowel_removal_candidates(keywords: Sequence[str], tlds: Sequence[str]) -> List[Candidate]:
    candidates = []
    for keyword in keywords:
        shortened = ''.join(char for char in keyword if char not in VOWELS)
        if 3 <= len(shortened) <= 6:
            for tld in tlds[:10]:
                candidates.append(Candidate(
                    domain=f"{shortened}{tld}",
                    strategy=Strategy.VOWEL_REMOVAL.value
                ))
    return candidates


def substitute_numbers(word: str) -> str:
    """Apply to->2, for->4, ate->8 in that order"""
    for text, digit in NUMBER_SUBSTITUTIONS:
        word = word.replace(text, digit)
    return word


def number_substitution_candidates(keywords: Sequence[str], tlds: Sequence[str]) -> List[Candidate]:
    candidates = []
    for keyword in keywords[:2]:
        substituted = substitute_numbers(keyword)
        if substituted != keyword:
            for tld in tlds[:5]:
                candidates.append(Candidate(
                    domain=f"{substituted}{tld}",
                    strategy=Strategy.NUMBER_SUBSTITUTION.value
                ))
    return candidates


def leader_key(candidate: Candidate) -> Tuple[str, str]:
    """Direct keyword candidates lead once per keyword, other strategies once"""
    if candidate.strategy == Strategy.DIRECT_KEYWORD.value:
        return candidate.strategy, candidate.domain.partition('.')[0]
    return candidate.strategy, ''


def spread_strategies(
    candidates: Sequence[Candidate],
    count: int,
    key: Callable[[Candidate], Hashable] = attrgetter('strategy')
) -> List[Candidate]:
    """Truncate to ``count`` keeping the first candidate of every ``key`` up front"""
    leaders = {}
    for index, candidate in enumerate(candidates):
        leaders.setdefault(key(candidate), index)

    lead_indexes = set(leaders.values())
    ordered = [candidates[i] for i in sorted(lead_indexes)]
    ordered.extend(c for i, c in enumerate(candidates) if i not in lead_indexes)
    return ordered[:max(0, count)]


def dedupe_valid(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Drop invalid domains, keep the first candidate for each domain"""
    seen = set()
    unique = []
    for candidate in candidates:
        if candidate.domain in seen or not validate_domain(candidate.domain):
            continue
        seen.add(candidate.domain)
        unique.append(candidate)
    return unique


class CandidateGenerator:
    """
    Multi-strategy domain candidate generator

    Text generation is requested through ``ai_manager.complete`` and any
    failure there degrades to deterministic candidates.
    """

    def __init__(self, ai_manager, rng: Optional[random.Random] = None):
        self.ai = ai_manager
        self.rng = rng or random.Random()

    async def generate(
        self,
        description: str,
        keywords: Sequence[str],
        tlds: Sequence[str],
        mode: Optional[str],
        count: int
    ) -> List[Candidate]:
        """
        Generate a shuffled, deduplicated candidate pool

        Args:
            description: Business description
            keywords: Extracted keywords
            tlds: Selected TLDs for the search
            mode: Search mode
            count: Maximum number of candidates to return

        Returns:
            Up to ``count`` valid candidates with unique domains
        """
        keywords = list(keywords)
        tlds = list(tlds)

        pool: List[Candidate] = await self.brainstorm(
            description,
            keywords,
            tlds,
            creativity_for_mode(mode),
            math.floor(count * LLM_SHARE)
        )

        pool.extend(direct_keyword_candidates(keywords, tlds, count - len(pool)))
        pool.extend(word_slicing_candidates(keywords, tlds))
        pool.extend(portmanteau_candidates(keywords, tlds))
        pool.extend(creative_affix_candidates(keywords, tlds))
        pool.extend(vowel_removal_candidates(keywords, tlds))
        pool.extend(number_substitution_candidates(keywords, tlds))

        if mode == SearchMode.COMPETITIVE.value:
            pool.extend(await self._creative_suggestions(description, keywords, tlds[:20], mode))

        candidates = dedupe_valid(pool)
        self.rng.shuffle(candidates)

        logger.info(
            f"✅ Generated {len(candidates)} unique candidates "
            f"(returning {min(count, len(candidates))})"
        )
        return spread_strategies(candidates, count, key=leader_key)

    async def brainstorm(
        self,
        description: str,
        keywords: Sequence[str],
        tlds: Sequence[str],
        creativity: CreativityLevel,
        count: int
    ) -> List[Candidate]:
        """
        Ask the text generator for domains using the offered TLDs

        Suggestions whose suffix is not one of ``tlds`` are rejected and the
        rest are validated and deduplicated. On a text generation failure,
        keyword (or creative word) combinations are returned instead.
        """
        if count <= 0 or not tlds:
            return []

        creativity = CreativityLevel(creativity)
        prompt = BRAINSTORM_PROMPT.format(
            description=description,
            keywords=', '.join(keywords),
            tlds=', '.join(tlds),
            instructions=CREATIVITY_INSTRUCTIONS[creativity]
        )

        try:
            content = await self.ai.complete(
                prompt,
                temperature=temperature_for(creativity),
                max_tokens=LLM_MAX_TOKENS
            )
        except Exception as e:
            logger.warning(f"⚠️ Brainstorming failed, using fallback combinations: {e}")
            fallback = self.fallback_candidates(keywords, tlds, creativity, count)
            return dedupe_valid(fallback)[:count]

        offered = set(tlds)
        candidates = dedupe_valid(
            Candidate(domain=domain, strategy=Strategy.LLM_INTELLIGENT_TLD.value)
            for domain in parse_llm_domains(content)
            if _suffix(domain) in offered
        )[:count]

        logger.debug(f"Brainstormed {len(candidates)} candidates from {len(tlds)} TLDs")
        return candidates

    def fallback_candidates(
        self,
        keywords: Sequence[str],
        tlds: Sequence[str],
        creativity: CreativityLevel,
        count: int
    ) -> List[Candidate]:
        """Deterministic combinations used when brainstorming is unavailable"""
        candidates: List[Candidate] = []

        if keywords:
            for keyword in keywords[:3]:
                for tld in tlds[:max(1, count // 3)]:
                    if len(candidates) < count:
                        candidates.append(Candidate(
                            domain=f"{keyword}{tld}",
                            strategy=Strategy.FALLBACK_KEYWORD.value
                        ))
            return candidates

        words = list(CREATIVE_WORDS)
        if creativity == CreativityLevel.WILD:
            words.extend(WILD_WORDS)
        self.rng.shuffle(words)

        for word in words[:5]:
            for tld in tlds[:max(1, count // 5)]:
                if len(candidates) < count:
                    candidates.append(Candidate(
                        domain=f"{word}{tld}",
                        strategy=Strategy.CREATIVE_WORD.value
                    ))
        return candidates

    async def _creative_suggestions(
        self,
        description: str,
        keywords: Sequence[str],
        tlds: Sequence[str],
        mode: str
    ) -> List[Candidate]:
        """Open-ended suggestions for competitive searches (none on failure)"""
        prompt = ADVANCED_PROMPT.format(
            description=description,
            keywords=', '.join(keywords),
            tlds=', '.join(tlds),
            mode=mode,
            mode_hint="Maximum creativity and uniqueness"
        )

        try:
            content = await self.ai.complete(
                prompt,
                temperature=temperature_for(CreativityLevel.MODERATE),
                max_tokens=LLM_MAX_TOKENS
            )
        except Exception as e:
            logger.warning(f"⚠️ Creative suggestions unavailable: {e}")
            return []

        offered = set(tlds)
        return [
            Candidate(domain=domain, strategy=Strategy.LLM_CREATIVE.value)
            for domain in parse_llm_domains(content)
            if _suffix(domain) in offered
        ]
