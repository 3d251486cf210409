import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	CacheError,
	CalculationError,
	CurrencyNotFoundError,
	UpstreamError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
	return JSONResponse(
		status_code=status_code,
		content={
			'timestamp': datetime.now().isoformat(),
			'status': status_code,
			'error': error,
			'message': message,
		},
	)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(CurrencyNotFoundError)
	async def currency_not_found_handler(request: Request, exc: CurrencyNotFoundError):
		return error_response(status.HTTP_404_NOT_FOUND, 'Currency Not Found', str(exc))

	@app.exception_handler(CalculationError)
	async def calculation_error_handler(request: Request, exc: CalculationError):
		return error_response(status.HTTP_400_BAD_REQUEST, 'Exchange Calculation Error', str(exc))

	@app.exception_handler(UpstreamError)
	async def upstream_error_handler(request: Request, exc: UpstreamError):
		logger.error(f'Upstream error: {exc}')
		return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, 'External API Error', str(exc))

	@app.exception_handler(CacheError)
	async def cache_error_handler(request: Request, exc: CacheError):
		logger.error(f'Cache error: {exc}')
		return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, 'Rate Cache Error', str(exc))

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return error_response(
			status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal Server Error', str(exc)
		)
