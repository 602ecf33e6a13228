"""
Text Parsing Utilities
"""
import re
from typing import List
import logging

from brandstorm_domains.config.constants import STOP_WORDS
from brandstorm_domains.utils.validators import validate_domain

logger = logging.getLogger(__name__)

NON_ALPHA_PATTERN = re.compile(r'[^a-z\s]')
ENUMERATION_PATTERN = re.compile(r'^\d+\.\s*')
BULLET_PATTERN = re.compile(r'^[-•*]\s*')


def extract_keywords(description: str) -> List[str]:
    """Tokenize a business description into keywords

    Lowercases, drops everything but letters and whitespace, keeps tokens
    longer than two characters that are not stop words. Duplicates are kept;
    candidate-level dedup removes them later.

    Args:
        description: Free-text business description

    Returns:
        Ordered list of keywords (possibly empty)
    """
    if not description:
        return []

    words = NON_ALPHA_PATTERN.sub('', description.lower()).split()
    return [word for word in words if len(word) > 2 and word not in STOP_WORDS]


def parse_llm_domains(content: str) -> List[str]:
    """Parse free text from a text generation provider into domains

    Lines containing a colon or starting with a dash are discarded before
    enumeration markers and bullets are stripped. Only syntactically valid
    domains survive.

    Args:
        content: Raw generated text

    Returns:
        Domains in the order they appeared
    """
    domains = []

    for line in (content or '').split('\n'):
        line = line.strip()
        if not line or ':' in line or line.startswith('-'):
            continue

        line = ENUMERATION_PATTERN.sub('', line)
        line = BULLET_PATTERN.sub('', line).strip().lower()

        if validate_domain(line):
            domains.append(line)

    logger.debug(f"Parsed {len(domains)} domains from generated text")
    return domains
