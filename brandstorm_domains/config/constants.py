"""
Application constants and enums
"""
from enum import Enum
from typing import Dict, List, Tuple


class SearchMode(str, Enum):
    """TLD selection strategy for a suggestion search"""
    STANDARD = "standard"
    COMPETITIVE = "competitive"
    PREMIUM = "premium"
    BUDGET = "budget"
    INTERNATIONAL = "international"


class CreativityLevel(str, Enum):
    """How adventurous the text generation should be"""
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    WILD = "wild"


class Strategy(str, Enum):
    """Generation rule that produced a candidate domain"""
    DIRECT_KEYWORD = "direct-keyword"
    WORD_SLICING = "word-slicing"
    PORTMANTEAU = "portmanteau"
    CREATIVE_COMBINATION = "creative-combination"
    CREATIVE_PREFIX = "creative-prefix"
    VOWEL_REMOVAL = "vowel-removal"
    NUMBER_SUBSTITUTION = "number-substitution"
    LLM_CREATIVE = "llm-creative"
    LLM_INTELLIGENT_TLD = "llm-intelligent-tld"
    FALLBACK_KEYWORD = "fallback-keyword"
    CREATIVE_WORD = "creative-word"
    LLM_BRAINSTORM = "llm-brainstorm"
    BATCH_CHECK = "batch-check"


# Tool limits
MIN_SUGGESTIONS = 1
MAX_SUGGESTIONS = 50
DEFAULT_SUGGESTIONS = 15
QUICK_SUGGESTIONS = 8
MAX_DOMAINS_TO_CHECK = 20
MIN_BATCH_SIZE = 10
MAX_BATCH_SIZE = 500
DEFAULT_BATCH_SIZE = 200
MIN_BATCHES = 1
MAX_BATCHES = 20
DEFAULT_MAX_BATCHES = 10

# Generation tuning
MAX_SELECTED_TLDS = 50
LLM_SHARE = 0.6
LLM_MAX_TOKENS = 800
CANDIDATE_MULTIPLIER = 3
CHECK_MULTIPLIER = 2

# Deep exploration
MAX_SUGGESTIONS_PER_BATCH = 300
STANDOUT_MIN_SCORE = 6
STANDOUTS_PER_BATCH = 10
MAX_STANDOUTS = 30

# Availability providers
PROVIDER_BATCH_SIZES: Dict[str, int] = {
    "namecheap": 20,
    "domainr": 5,
}

CREATIVITY_TEMPERATURES: Dict[CreativityLevel, float] = {
    CreativityLevel.CONSERVATIVE: 0.6,
    CreativityLevel.MODERATE: 0.8,
    CreativityLevel.WILD: 1.0,
}

MODE_CREATIVITY: Dict[SearchMode, CreativityLevel] = {
    SearchMode.COMPETITIVE: CreativityLevel.WILD,
    SearchMode.PREMIUM: CreativityLevel.CONSERVATIVE,
}

STOP_WORDS = frozenset([
    "the", "and", "for", "are", "but", "not", "you", "all", "can",
    "her", "was", "one", "our", "had", "have", "what", "were",
])

CREATIVE_WORDS: List[str] = [
    "spark", "flow", "sync", "pulse", "wave", "shift", "leap", "rise", "beam", "dash",
    "zoom", "glow", "buzz", "snap", "flux", "vibe", "edge", "peak", "core", "nova",
    "zen", "ace", "pro", "max", "ultra", "meta", "next", "smart", "swift", "bold",
]

# Extra vocabulary mixed in for wild exploration
WILD_WORDS: List[str] = [
    "epic", "rad", "swag", "yolo", "lol", "omg", "tldr", "ama", "til",
    "irl", "afk", "brb", "ttyl", "rofl",
]

FALLBACK_TLDS: List[str] = [".com", ".net", ".org", ".io", ".ai", ".app", ".co", ".dev"]

# TLD categories
TECH_TLDS: List[str] = [
    ".ai", ".tech", ".io", ".app", ".dev", ".software", ".digital", ".cloud",
    ".data", ".computer", ".network", ".systems", ".science",
]

FUN_TLDS: List[str] = [
    ".fun", ".party", ".club", ".bar", ".pub", ".love", ".sexy", ".hot", ".cool",
    ".lol", ".wtf", ".porn", ".xxx", ".adult", ".gay", ".dating", ".pizza",
    ".coffee", ".beer", ".wine", ".vodka", ".tattoo", ".hair", ".yoga",
]

BRAND_TLDS: List[str] = [
    ".amazon", ".google", ".apple", ".microsoft", ".nike", ".bmw", ".samsung",
    ".sony", ".canon",
]

GENERIC_TWO_LETTER_EXCLUDES: List[str] = [".com", ".net", ".org", ".edu", ".gov", ".mil"]

# Mode base lists (tech/fun/country categories are resolved against the catalog)
COMPETITIVE_EXTRA_TLDS: List[str] = [
    ".co", ".xyz", ".space", ".site", ".online", ".world", ".today", ".life",
    ".works", ".studio", ".agency", ".solutions", ".digital", ".ninja",
]

PREMIUM_TLDS: List[str] = [
    ".com", ".net", ".org", ".io", ".ai", ".app", ".co", ".biz",
    ".info", ".pro", ".name", ".me", ".tv", ".cc",
]

BUDGET_TLDS: List[str] = [
    ".xyz", ".site", ".online", ".website", ".space", ".fun", ".live",
    ".store", ".shop", ".blog", ".news", ".click", ".link", ".email",
]

INTERNATIONAL_TLDS: List[str] = [
    ".com", ".net", ".org", ".global", ".world", ".international",
]
INTERNATIONAL_COUNTRY_SAMPLE = 20

STANDARD_TLDS: List[str] = [
    ".com", ".net", ".org", ".io", ".co", ".app", ".dev", ".tech",
    ".ai", ".digital", ".online", ".site", ".space", ".world",
]

# (keyword terms, TLDs added when any keyword contains one of the terms)
INDUSTRY_TLDS: List[Tuple[List[str], List[str]]] = [
    (["tech", "software", "ai", "data", "digital"],
     [".tech", ".ai", ".software", ".digital", ".data", ".systems"]),
    (["finance", "bank", "money", "invest"],
     [".finance", ".bank", ".money", ".fund", ".capital"]),
    (["health", "medical", "doctor", "care"],
     [".health", ".care", ".medical", ".doctor", ".clinic"]),
    (["food", "restaurant", "cafe", "kitchen"],
     [".food", ".restaurant", ".cafe", ".kitchen", ".recipes"]),
    (["travel", "vacation", "hotel"],
     [".travel", ".vacation", ".hotel", ".flights", ".tours"]),
    (["education", "school", "learn", "course"],
     [".education", ".school", ".university", ".academy"]),
]

# Scoring
BASE_SCORE = 3.0

STRATEGY_SCORES: Dict[str, float] = {
    Strategy.WORD_SLICING.value: 1.5,
    Strategy.PORTMANTEAU.value: 1.0,
    Strategy.LLM_CREATIVE.value: 1.0,
    Strategy.CREATIVE_COMBINATION.value: 0.5,
    Strategy.VOWEL_REMOVAL.value: 0.0,
    Strategy.DIRECT_KEYWORD.value: 0.5,
    Strategy.CREATIVE_PREFIX.value: 0.5,
    Strategy.NUMBER_SUBSTITUTION.value: -1.0,
}

TLD_SCORES: Dict[str, float] = {
    ".com": 2.0,
    ".io": 1.5,
    ".ai": 1.5,
    ".app": 1.0,
    ".dev": 1.0,
    ".co": 1.0,
    ".net": 0.5,
    ".org": 0.5,
}

BONUS_TLDS = frozenset([".com", ".io", ".ai"])

NUMBER_SUBSTITUTIONS: List[Tuple[str, str]] = [
    ("to", "2"),
    ("for", "4"),
    ("ate", "8"),
]

# Error messages
ERROR_MESSAGES = {
    "no_domain": "Either 'domain' or 'domains' must be provided",
    "both_domains": "Provide either 'domain' or 'domains', not both",
    "too_many_domains": f"At most {MAX_DOMAINS_TO_CHECK} domains can be checked at once",
    "empty_description": "Business description is required",
    "invalid_keyword": "Keywords may only contain letters and digits",
}
