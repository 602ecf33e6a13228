"""
Test suite for brandstorm-domains
"""
