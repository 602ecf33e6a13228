"""
Configuration Package
"""
from brandstorm_domains.config.settings import settings, get_settings, Settings
from brandstorm_domains.config.logging_config import LoggingConfig, setup_logging

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "LoggingConfig",
    "setup_logging"
]
