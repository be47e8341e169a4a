"""Configuration module for the Hot Wheels market value service."""

from .settings import (
    EbayConfig,
    MockConfig,
    Settings,
    get_settings,
)

__all__ = [
    'EbayConfig',
    'MockConfig',
    'Settings',
    'get_settings',
]
