from .requests import ExchangeRequest
from .responses import (
	ConversionResultResponse,
	CurrencyRatesResponse,
	ErrorResponse,
	ExchangeResponse,
	HealthResponse,
)

__all__ = [
	'ConversionResultResponse',
	'CurrencyRatesResponse',
	'ErrorResponse',
	'ExchangeRequest',
	'ExchangeResponse',
	'HealthResponse',
]
