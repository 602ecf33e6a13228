"""
Domain Scoring Heuristics
"""
import math
import re
from typing import Sequence

from brandstorm_domains.config.constants import (
    BASE_SCORE,
    BONUS_TLDS,
    STRATEGY_SCORES,
    TLD_SCORES,
    Strategy,
)
from brandstorm_domains.core.models import DomainResult

VOWEL_PATTERN = re.compile(r'[aeiou]', re.IGNORECASE)
DIGIT_PATTERN = re.compile(r'[0-9]')
REPEAT_PATTERN = re.compile(r'(.)\1{3,}')
DIGIT_OR_HYPHEN_PATTERN = re.compile(r'[0-9-]')

FUN_REASON_TLDS = frozenset(["fun", "party", "club", "bar", "pub", "love", "sexy", "hot", "cool"])
DRINK_REASON_TLDS = frozenset(["pizza", "coffee", "beer", "wine", "vodka"])


def _round_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up"""
    return math.floor(value * 2 + 0.5) / 2


def is_pronounceable(word: str) -> bool:
    """Vowel ratio between 0.2 and 0.6 with at least one consonant"""
    if not word:
        return False

    vowels = len(VOWEL_PATTERN.findall(word))
    consonants = len(word) - vowels
    ratio = vowels / len(word)

    return 0.2 <= ratio <= 0.6 and consonants > 0


def score_domain(domain: str, strategy: str, keywords: Sequence[str]) -> float:
    """
    Score a candidate domain

    Sums every adjustment first, then clamps to [1, 10] and rounds to
    the nearest 0.5.

    Args:
        domain: Candidate domain (``base.suffix``)
        strategy: Strategy that produced the candidate
        keywords: Keywords extracted from the business description

    Returns:
        Score in [1, 10]
    """
    base, _, suffix = domain.lower().partition('.')
    tld = f'.{suffix}'
    length = len(base)
    score = BASE_SCORE

    if 4 <= length <= 8:
        score += 2
    elif 3 <= length <= 12:
        score += 1
    else:
        score -= 1

    strategy_key = strategy.value if isinstance(strategy, Strategy) else strategy
    score += STRATEGY_SCORES.get(strategy_key, 0)
    score += TLD_SCORES.get(tld, 0)

    lowered = [keyword.lower() for keyword in keywords]
    exact_match = any(base == keyword for keyword in lowered)
    partial_match = any(keyword in base and base != keyword for keyword in lowered)

    if exact_match:
        score += 1.5
    elif partial_match:
        score += 0.5
    else:
        score -= 0.5

    pronounceable = is_pronounceable(base)
    score += 1 if pronounceable else -1

    # Penalties
    if DIGIT_PATTERN.search(base):
        score -= 1.5
    if '-' in base:
        score -= 2
    if length <= 2:
        score -= 2
    if length >= 15:
        score -= 1
    if REPEAT_PATTERN.search(base):
        score -= 1
    if not VOWEL_PATTERN.search(base):
        score -= 1.5

    if (
        4 <= length <= 7
        and pronounceable
        and (exact_match or partial_match)
        and tld in BONUS_TLDS
        and not DIGIT_OR_HYPHEN_PATTERN.search(base)
    ):
        score += 1

    return _round_half(max(1.0, min(10.0, score)))


def calculate_creativity_score(results: Sequence[DomainResult]) -> float:
    """
    Diversity score of a result set

    Two points per distinct strategy, half the mean score and a third of
    the distinct TLD count, capped at 10. An empty set scores 0.
    """
    if not results:
        return 0.0

    strategies = {r.strategy for r in results}
    tlds = {r.tld for r in results}
    mean_score = sum(r.score for r in results) / len(results)

    return min(10.0, len(strategies) * 2 + mean_score / 2 + len(tlds) / 3)


def generate_standout_reason(domain: str, strategy: str) -> str:
    """Templated explanation for a deep exploration standout"""
    parts = domain.split('.')
    base = parts[0]
    tld = parts[1] if len(parts) > 1 else ''
    strategy_key = strategy.value if isinstance(strategy, Strategy) else strategy

    if strategy_key == Strategy.DIRECT_KEYWORD.value:
        return f'Direct keyword "{base}" with {tld} TLD - clear and memorable'
    if strategy_key == Strategy.CREATIVE_WORD.value:
        return f'Creative word "{base}" with {tld} TLD - brandable and unique'
    if strategy_key == Strategy.LLM_INTELLIGENT_TLD.value:
        return f'AI-brainstormed combination with {tld} TLD - intelligent TLD selection'
    if strategy_key == Strategy.FALLBACK_KEYWORD.value:
        return f'Keyword "{base}" with {tld} TLD - simple fallback combination'
    if tld == 'ai':
        return 'Perfect AI TLD match for tech business'
    if tld == 'io':
        return 'Popular tech TLD for startups'
    if tld == 'app':
        return 'App-focused TLD for digital products'
    if tld == 'dev':
        return 'Developer-friendly TLD'
    if tld == 'tech':
        return 'Technology-focused TLD'
    if tld in FUN_REASON_TLDS:
        return f'Fun and memorable {tld} TLD - great for branding'
    if tld in DRINK_REASON_TLDS:
        return f'Unique {tld} TLD - stands out from competition'
    return f'Creative combination with {tld} TLD'
