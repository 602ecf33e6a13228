"""
Request Schemas
"""
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator, validator

from brandstorm_domains.config.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_MAX_BATCHES,
    DEFAULT_SUGGESTIONS,
    ERROR_MESSAGES,
    MAX_BATCH_SIZE,
    MAX_BATCHES,
    MAX_DOMAINS_TO_CHECK,
    MAX_SUGGESTIONS,
    MIN_BATCH_SIZE,
    MIN_BATCHES,
    MIN_SUGGESTIONS,
    CreativityLevel,
    SearchMode,
)
from brandstorm_domains.utils.validators import normalize_domain, sanitize_input, validate_domain


def _clean_description(v: str) -> str:
    cleaned = sanitize_input(v or "")
    if not cleaned:
        raise ValueError(ERROR_MESSAGES["empty_description"])
    return cleaned


def _clean_domain(v: str) -> str:
    domain = normalize_domain(v)
    if not validate_domain(domain):
        raise ValueError(f"Invalid domain name: '{v}'")
    return domain


class DescriptionRequest(BaseModel):
    """Base for requests built around a business description"""
    description: str = Field(..., min_length=1, max_length=2000)

    @validator('description')
    def validate_description(cls, v):
        return _clean_description(v)


# Suggestions
class SuggestDomainsRequest(DescriptionRequest):
    """Request for domain suggestions"""
    mode: SearchMode = Field(
        default=SearchMode.STANDARD,
        description="standard, competitive, premium, budget or international"
    )
    max_suggestions: int = Field(
        default=DEFAULT_SUGGESTIONS, ge=MIN_SUGGESTIONS, le=MAX_SUGGESTIONS
    )


class QuickSuggestRequest(DescriptionRequest):
    """Request for quick suggestions (standard mode, fixed size)"""


# Availability
class CheckAvailabilityRequest(BaseModel):
    """Request for checking one domain or a list of domains"""
    domain: Optional[str] = Field(None, description="Single domain to check")
    domains: Optional[List[str]] = Field(
        None, description=f"Up to {MAX_DOMAINS_TO_CHECK} domains to check"
    )

    @validator('domain')
    def validate_single_domain(cls, v):
        if v is None:
            return v
        return _clean_domain(v)

    @validator('domains')
    def validate_domains(cls, v):
        if v is None:
            return v
        if not v:
            raise ValueError("At least one domain is required")
        if len(v) > MAX_DOMAINS_TO_CHECK:
            raise ValueError(ERROR_MESSAGES["too_many_domains"])
        return [_clean_domain(domain) for domain in v]

    @model_validator(mode='after')
    def validate_exactly_one(self):
        if self.domain is not None and self.domains is not None:
            raise ValueError(ERROR_MESSAGES["both_domains"])
        if self.domain is None and self.domains is None:
            raise ValueError(ERROR_MESSAGES["no_domain"])
        return self


# Deep exploration
class ExploreDeepRequest(DescriptionRequest):
    """Request for deep TLD exploration"""
    keywords: List[str] = Field(default_factory=list, max_length=50)
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=MIN_BATCH_SIZE, le=MAX_BATCH_SIZE)
    max_batches: int = Field(default=DEFAULT_MAX_BATCHES, ge=MIN_BATCHES, le=MAX_BATCHES)
    creativity_level: CreativityLevel = CreativityLevel.MODERATE
    check_availability: bool = False

    @validator('keywords')
    def validate_keywords(cls, v):
        keywords = [k.strip().lower()[:50] for k in v or [] if k.strip()]
        for keyword in keywords:
            if not keyword.isascii() or not keyword.isalnum():
                raise ValueError(f"{ERROR_MESSAGES['invalid_keyword']}: '{keyword}'")
        return keywords
