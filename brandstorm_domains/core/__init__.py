"""Core Package"""
from brandstorm_domains.core.ai_manager import AIManager
from brandstorm_domains.core.tld_catalog import TldCatalog
from brandstorm_domains.core.exceptions import *

__all__ = [
    "AIManager",
    "TldCatalog"
]
