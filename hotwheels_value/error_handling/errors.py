"""
Exception types raised while serving a market value search.
"""

from typing import Any, Dict, Iterable, Optional


class HotWheelsValueError(Exception):
    """Base class for all service errors."""


class SearchValidationError(HotWheelsValueError):
    """Inbound search parameters failed validation.

    Attributes:
        details: Human-readable description of every failed field
    """

    def __init__(self, details: str):
        super().__init__("Invalid search parameters")
        self.details = details


class ConfigError(HotWheelsValueError):
    """An environment setting could not be read."""


class EbayConfigError(HotWheelsValueError):
    """The real eBay search path was used without an API key."""


class EbayAPIError(HotWheelsValueError):
    """eBay answered with a non-success HTTP status."""

    def __init__(self, status: int, reason: Optional[str] = None):
        super().__init__(f"eBay API error: {status} {reason or ''}".rstrip())
        self.status = status
        self.reason = reason


class EbayResponseError(HotWheelsValueError):
    """eBay returned a body whose envelope could not be read."""


class ListingsSearchError(HotWheelsValueError):
    """Any other failure raised while serving a search."""


def format_validation_errors(errors: Iterable[Dict[str, Any]], strip_source: bool = False) -> str:
    """Flatten pydantic error dicts into one readable sentence.

    FastAPI prefixes request errors with the parameter source ("query",
    "path", ...); pass ``strip_source=True`` to drop it.

    Example:
        'Validation error: String should have at least 1 character at "query"'
    """
    issues = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if strip_source and len(loc) > 1:
            loc = loc[1:]
        location = ".".join(str(part) for part in loc)
        message = error.get("msg", "Invalid value")
        issues.append(f'{message} at "{location}"' if location else message)
    return "Validation error: " + "; ".join(issues)
