"""
Error handling module for the Hot Wheels market value service.

Provides the exception hierarchy and the FastAPI handlers that render it.
"""

from .errors import (
    HotWheelsValueError,
    SearchValidationError,
    ConfigError,
    EbayConfigError,
    EbayAPIError,
    EbayResponseError,
    ListingsSearchError,
    format_validation_errors,
)
from .handlers import register_exception_handlers

__all__ = [
    'HotWheelsValueError',
    'SearchValidationError',
    'ConfigError',
    'EbayConfigError',
    'EbayAPIError',
    'EbayResponseError',
    'ListingsSearchError',
    'format_validation_errors',
    'register_exception_handlers',
]
