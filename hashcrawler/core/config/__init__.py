"""Configuration management for HashCrawler

Provides centralized configuration loading and management.
"""

from .loader import Config, config

__all__ = ['Config', 'config']
