"""API Package"""
from brandstorm_domains.api.tools import DomainTools

__all__ = [
    "DomainTools"
]
