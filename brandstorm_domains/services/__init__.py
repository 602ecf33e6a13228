"""Services Package"""
from brandstorm_domains.services.availability_service import AvailabilityChecker
from brandstorm_domains.services.domain_service import DomainService
from brandstorm_domains.services.exploration_service import ExplorationService
from brandstorm_domains.services.generator import CandidateGenerator

__all__ = [
    "AvailabilityChecker",
    "CandidateGenerator",
    "DomainService",
    "ExplorationService"
]
