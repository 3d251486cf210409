from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CurrencyRatesResponse(BaseModel):
	model_config = ConfigDict(
		json_schema_extra={
			'example': {'source': 'BTC', 'rates': {'USD': '0.00005000', 'ETH': '0.07500000'}}
		}
	)

	source: str = Field(..., description='Base currency code, uppercased')
	rates: dict[str, Decimal] = Field(..., description='Cross rates keyed by currency code')


class ConversionResultResponse(BaseModel):
	rate: Decimal = Field(..., description='Cross rate used for the conversion')
	amount: Decimal = Field(..., description='Amount requested')
	result: Decimal = Field(..., description='Converted amount after the fee')
	fee: Decimal = Field(..., description='Fee charged on the converted amount')


class ExchangeResponse(BaseModel):
	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'from': 'BTC',
				'conversions': {
					'USD': {
						'rate': '0.00005000',
						'amount': '2',
						'result': '0.0000990000',
						'fee': '0.0000010000',
					}
				},
			}
		},
	)

	from_currency: str = Field(..., alias='from', description='Source currency as requested')
	conversions: dict[str, ConversionResultResponse] = Field(
		..., description='Conversion per target currency code'
	)


class ErrorResponse(BaseModel):
	timestamp: datetime
	status: int
	error: str
	message: str


class HealthResponse(BaseModel):
	status: str = 'ok'
