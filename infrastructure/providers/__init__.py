from .base import ClickTracker, ComparisonDataProvider
from .market_data import MarketDataProvider

__all__ = ['ClickTracker', 'ComparisonDataProvider', 'MarketDataProvider']
