"""Service configuration settings, read from the environment."""

from dataclasses import dataclass, field
from typing import List, Optional
import logging
import os

from ..error_handling.errors import ConfigError


logger = logging.getLogger(__name__)


FINDING_API_URL = "https://svcs.ebay.com/services/search/FindingService/v1"

# eBay category for Hot Wheels diecast
HOT_WHEELS_CATEGORY_ID = "222"


@dataclass
class EbayConfig:
    """eBay Finding API configuration."""
    api_key: str = ""
    finding_url: str = FINDING_API_URL
    category_id: str = HOT_WHEELS_CATEGORY_ID
    entries_per_page: int = 12


@dataclass
class MockConfig:
    """Mock data generator configuration."""
    total_listings: int = 47
    page_size: int = 12
    seed: Optional[int] = None


@dataclass
class Settings:
    """Main service settings."""
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    ebay: EbayConfig = None
    mock: MockConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided."""
        if self.ebay is None:
            self.ebay = EbayConfig()
        if self.mock is None:
            self.mock = MockConfig()

    @property
    def use_mock_data(self) -> bool:
        """True when no eBay credential is configured."""
        return not self.ebay.api_key


def _int_env(name: str, default: Optional[int] = None) -> Optional[int]:
    """Integer value of environment variable ``name``; blank means ``default``."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.error(f"Invalid {name} setting: {value!r}")
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def get_settings() -> Settings:
    """Build settings from the current environment.

    Read on every call so a credential added or removed at runtime changes
    which search path the next request takes.

    Raises:
        ConfigError: if a numeric setting is not an integer
    """
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        ebay=EbayConfig(
            api_key=os.getenv("EBAY_API_KEY", ""),
            finding_url=os.getenv("EBAY_FINDING_URL", FINDING_API_URL),
            category_id=os.getenv("EBAY_CATEGORY_ID", HOT_WHEELS_CATEGORY_ID),
            entries_per_page=_int_env("EBAY_ENTRIES_PER_PAGE", 12),
        ),
        mock=MockConfig(
            total_listings=_int_env("MOCK_TOTAL_LISTINGS", 47),
            page_size=_int_env("MOCK_PAGE_SIZE", 12),
            seed=_int_env("MOCK_SEED"),
        ),
    )
