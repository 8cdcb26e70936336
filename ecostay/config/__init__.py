"""
Configuration package for the Eco-Stay Connect client.

Environment settings and logging setup.
"""

from ecostay.config.settings import Settings, get_settings, settings
from ecostay.config.logging import setup_logging

__all__ = ['Settings', 'get_settings', 'settings', 'setup_logging']
