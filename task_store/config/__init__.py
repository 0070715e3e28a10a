"""
Configuration module - Settings and configuration management
"""

from .config_properties import ConfigProperties, SETTINGS

__all__ = [
    'ConfigProperties',
    'SETTINGS',
]
