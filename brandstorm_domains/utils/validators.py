"""
Input Validation Utilities
"""
import re

BASE_LABEL_PATTERN = re.compile(r'^[a-z0-9][a-z0-9-]{0,61}[a-z0-9]$')
SUFFIX_LABEL_PATTERN = re.compile(r'^[a-z0-9]+$')


def validate_domain(domain: str) -> bool:
    """Validate domain format

    The base label must be 2-63 characters of letters, digits and internal
    hyphens. One or more suffix labels follow; the final one is at least
    two characters long.

    Args:
        domain: Domain name

    Returns:
        True if valid format
    """
    if not domain or not isinstance(domain, str):
        return False

    domain = domain.lower()
    if '--' in domain or domain.startswith('-') or domain.endswith('-'):
        return False

    parts = domain.split('.')
    if len(parts) < 2:
        return False

    base, suffix = parts[0], parts[1:]
    if not BASE_LABEL_PATTERN.match(base):
        return False

    if not all(SUFFIX_LABEL_PATTERN.match(label) for label in suffix):
        return False

    return len(suffix[-1]) >= 2


def normalize_domain(domain: str) -> str:
    """Normalize a user supplied domain

    Lowercases, strips protocol, ``www.`` and any path.
    """
    domain = domain.lower().strip()
    domain = re.sub(r'^https?://', '', domain)

    if domain.startswith('www.'):
        domain = domain[4:]

    if '/' in domain:
        domain = domain.split('/')[0]

    return domain


def normalize_tld(tld: str) -> str:
    """Lowercase a TLD and make sure it starts with a dot"""
    tld = tld.strip().lower()
    return tld if tld.startswith('.') else f'.{tld}'


def sanitize_input(text: str, max_length: int = 2000) -> str:
    """Sanitize user input

    Args:
        text: Input text
        max_length: Maximum allowed length

    Returns:
        Sanitized text
    """
    # Remove control characters
    text = ''.join(char for char in text if ord(char) >= 32 or char == '\n')

    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text
