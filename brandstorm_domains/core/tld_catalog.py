"""
TLD Catalog - loads the full TLD list once and exposes read-only categories
"""
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from brandstorm_domains.config.constants import (
    BRAND_TLDS,
    BUDGET_TLDS,
    COMPETITIVE_EXTRA_TLDS,
    FALLBACK_TLDS,
    FUN_TLDS,
    GENERIC_TWO_LETTER_EXCLUDES,
    INDUSTRY_TLDS,
    INTERNATIONAL_COUNTRY_SAMPLE,
    INTERNATIONAL_TLDS,
    MAX_SELECTED_TLDS,
    PREMIUM_TLDS,
    STANDARD_TLDS,
    TECH_TLDS,
    SearchMode,
)
from brandstorm_domains.utils.validators import normalize_tld

logger = logging.getLogger(__name__)


def _unique(items: Iterable[str]) -> List[str]:
    """Deduplicate keeping first occurrence"""
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def load_tlds(path: Path) -> List[str]:
    """Load TLDs from a flat text file

    Args:
        path: File with one TLD per line (``#`` starts a comment line)

    Returns:
        Ordered, deduplicated TLDs with a leading dot, or the fallback list
        when the file cannot be read
    """
    try:
        content = Path(path).read_text(encoding='utf-8')
    except OSError as e:
        logger.warning(f"⚠️ Could not read TLD file {path}: {e}. Using fallback TLDs")
        return list(FALLBACK_TLDS)

    tlds = [
        normalize_tld(line)
        for line in (raw.strip() for raw in content.split('\n'))
        if line and not line.startswith('#')
    ]
    return _unique(tlds)


class TldCatalog:
    """
    Immutable TLD catalog with tech/fun/country/brand categories
    computed once at construction
    """

    def __init__(self, tlds: Sequence[str]):
        self.all_tlds: Tuple[str, ...] = tuple(_unique(normalize_tld(t) for t in tlds))

        tech = set(TECH_TLDS)
        fun = set(FUN_TLDS)
        brand = set(BRAND_TLDS)
        excluded = set(GENERIC_TWO_LETTER_EXCLUDES)

        self.tech_tlds: Tuple[str, ...] = tuple(t for t in self.all_tlds if t in tech)
        self.fun_tlds: Tuple[str, ...] = tuple(t for t in self.all_tlds if t in fun)
        self.country_tlds: Tuple[str, ...] = tuple(
            t for t in self.all_tlds
            if len(t) == 3 and t not in self.tech_tlds and t not in excluded
        )
        self.brand_tlds: Tuple[str, ...] = tuple(t for t in self.all_tlds if t in brand)

        logger.info(
            f"✅ TLD catalog loaded: {len(self.all_tlds)} TLDs "
            f"({len(self.tech_tlds)} tech, {len(self.fun_tlds)} fun, "
            f"{len(self.country_tlds)} country, {len(self.brand_tlds)} brand)"
        )

    @classmethod
    def from_file(cls, path: Path) -> "TldCatalog":
        return cls(load_tlds(path))

    def __len__(self) -> int:
        return len(self.all_tlds)

    def base_tlds_for_mode(self, mode: Optional[str]) -> List[str]:
        """Mode-specific base TLD list (unknown modes use standard)"""
        try:
            search_mode = SearchMode(mode) if mode else SearchMode.STANDARD
        except ValueError:
            logger.debug(f"Unknown search mode '{mode}', using standard")
            search_mode = SearchMode.STANDARD

        if search_mode == SearchMode.COMPETITIVE:
            return [*self.tech_tlds, *self.fun_tlds, *COMPETITIVE_EXTRA_TLDS]
        if search_mode == SearchMode.PREMIUM:
            return list(PREMIUM_TLDS)
        if search_mode == SearchMode.BUDGET:
            return list(BUDGET_TLDS)
        if search_mode == SearchMode.INTERNATIONAL:
            return [
                *INTERNATIONAL_TLDS,
                *self.country_tlds[:INTERNATIONAL_COUNTRY_SAMPLE]
            ]
        return list(STANDARD_TLDS)

    def select_for_mode(self, mode: Optional[str], keywords: Sequence[str]) -> List[str]:
        """
        Select TLDs for a search

        Args:
            mode: standard, competitive, premium, budget or international
            keywords: Extracted keywords used to infer industry TLDs

        Returns:
            Up to 50 unique TLDs, base list first then industry additions
        """
        selected = self.base_tlds_for_mode(mode) + industry_tlds(keywords)
        return _unique(selected)[:MAX_SELECTED_TLDS]


def industry_tlds(keywords: Sequence[str]) -> List[str]:
    """TLDs inferred from keywords matching the industry tables"""
    additions: List[str] = []

    for keyword in keywords:
        for terms, tlds in INDUSTRY_TLDS:
            if any(term in keyword for term in terms):
                additions.extend(tlds)

    return _unique(additions)
