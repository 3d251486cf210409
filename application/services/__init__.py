from .conversion_service import ConversionService
from .rate_lookup import RateLookupService
from .rate_refresher import RateRefresher

__all__ = ['ConversionService', 'RateLookupService', 'RateRefresher']
