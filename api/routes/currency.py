import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_conversion_service, get_rate_lookup_service
from api.schemas import (
	ConversionResultResponse,
	CurrencyRatesResponse,
	ErrorResponse,
	ExchangeRequest,
	ExchangeResponse,
)
from application.services import ConversionService, RateLookupService

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/currencies', tags=['currencies'])

ERROR_RESPONSES = {
	status.HTTP_404_NOT_FOUND: {'model': ErrorResponse, 'description': 'Unknown currency'},
	status.HTTP_400_BAD_REQUEST: {'model': ErrorResponse, 'description': 'Calculation error'},
	status.HTTP_503_SERVICE_UNAVAILABLE: {
		'model': ErrorResponse,
		'description': 'Rate provider or cache unavailable',
	},
}


def parse_filter(raw: str | None) -> set[str]:
	if not raw:
		return set()
	return {code.strip() for code in raw.split(',') if code.strip()}


@router.get(
	'/{currency}',
	response_model=CurrencyRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get cryptocurrency rates',
	responses=ERROR_RESPONSES,
)
async def get_currency_rates(
	currency: Annotated[
		str,
		Path(description='Currency code (e.g. btc, eth)', examples=['BTC']),
	],
	service: Annotated[RateLookupService, Depends(get_rate_lookup_service)],
	filter_codes: Annotated[
		str | None,
		Query(
			alias='filter',
			description='Comma-separated list of currencies to filter',
			examples=['USD,ETH'],
		),
	] = None,
) -> CurrencyRatesResponse:
	logger.info(f'Fetching rates for currency: {currency}')
	view = await service.lookup(currency, parse_filter(filter_codes))
	return CurrencyRatesResponse(source=view.source, rates=view.rates)


@router.post(
	'/exchange',
	response_model=ExchangeResponse,
	status_code=status.HTTP_200_OK,
	summary='Exchange cryptocurrency',
	responses=ERROR_RESPONSES,
)
async def exchange(
	exchange_request: ExchangeRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ExchangeResponse:
	logger.info(f'Processing exchange request: {exchange_request!r}')
	result = await service.convert(
		exchange_request.from_currency, exchange_request.to, exchange_request.amount
	)
	return ExchangeResponse(
		from_currency=result.from_currency,
		conversions={
			code: ConversionResultResponse(
				rate=conversion.rate,
				amount=conversion.amount,
				result=conversion.result,
				fee=conversion.fee,
			)
			for code, conversion in result.conversions.items()
		},
	)
