from .base import RateProvider
from .coingecko import CoinGeckoProvider

__all__ = ['RateProvider', 'CoinGeckoProvider']
