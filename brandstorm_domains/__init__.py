"""
brandstorm-domains: domain name suggestion, scoring and availability checking
"""

__version__ = "1.0.0"
