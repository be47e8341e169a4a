"""Search and valuation services"""

from .market_value import calculate_market_value

__all__ = ["calculate_market_value"]
