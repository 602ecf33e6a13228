"""
Domain models shared by services and the tool surface
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class Candidate(BaseModel):
    """A generated domain and the strategy that produced it"""
    domain: str
    strategy: str


class DomainStatus(BaseModel):
    """Normalized availability answer from any provider"""
    domain: str
    available: bool = False
    is_premium: bool = False
    premium_price: Optional[float] = None


class DomainResult(BaseModel):
    """Scored availability result for one candidate"""
    domain: str
    strategy: str
    available: bool = False
    is_premium: bool = False
    premium_price: Optional[float] = None
    tld: str
    score: float = Field(ge=1, le=10)


class Standout(BaseModel):
    """High-scoring candidate from deep exploration"""
    domain: str
    score: float
    reason: str


class SearchResult(BaseModel):
    """Categorized suggestion results"""
    available: List[DomainResult] = Field(default_factory=list)
    taken: List[DomainResult] = Field(default_factory=list)
    premium: List[DomainResult] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    search_mode: str
    total_generated: int = 0
    creativity_score: float = 0.0
    provider: str


class ExplorationStats(BaseModel):
    """Running statistics of a deep exploration"""
    total_combinations: int = 0
    batches_processed: int = 0
    standout_count: int = 0
    tlds_explored: int = 0
    total_tlds: int = 0
    coverage_percent: float = 0.0
    creativity_level: str
    batch_size: int = 0
    availability_checking: bool = False


class DeepTldResult(BaseModel):
    """Deep exploration outcome"""
    standouts: List[Standout] = Field(default_factory=list)
    available: List[DomainResult] = Field(default_factory=list)
    stats: List[str] = Field(default_factory=list)
    summary: ExplorationStats
