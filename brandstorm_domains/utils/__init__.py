"""Utilities Package"""
from brandstorm_domains.utils.validators import *
from brandstorm_domains.utils.formatters import *
