from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExchangeRequest(BaseModel):
	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={'example': {'from': 'BTC', 'to': ['USD', 'ETH'], 'amount': 2}},
	)

	from_currency: str = Field(..., alias='from', min_length=1)
	to: list[str] = Field(..., min_length=1)
	# Positivity is enforced by the conversion service so it maps to 400
	amount: Decimal

	@field_validator('from_currency')
	@classmethod
	def from_not_blank(cls, v: str):
		if not v.strip():
			raise ValueError('from must not be blank')
		return v
