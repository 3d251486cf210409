import logging
from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.currency import UpstreamError
from domain.models.currency import RateEntry

logger = logging.getLogger(__name__)


class CoinGeckoProvider:
	BASE_URL = 'https://api.coingecko.com/api/v3/exchange_rates'

	def __init__(
		self, base_url: str | None = None, client: httpx.AsyncClient | None = None, timeout: int = 10
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'coingecko'

	async def _request(self) -> dict:
		try:
			response = await self._client.get(self.base_url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise UpstreamError(
				f'CoinGecko HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise UpstreamError(f'CoinGecko request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise UpstreamError(f'CoinGecko response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise UpstreamError('CoinGecko response parsing error: expected a JSON object')
		return data

	async def fetch_rates(self) -> dict[str, RateEntry]:
		"""Fetch the full rate table. A missing or null ``rates`` member yields an empty dict."""
		data = await self._request()
		rates = data.get('rates') or {}

		try:
			return {
				code: RateEntry(
					name=entry['name'],
					unit=entry['unit'],
					value=Decimal(str(entry['value'])),
					kind=entry['type'],
				)
				for code, entry in rates.items()
			}
		except (KeyError, TypeError, AttributeError, InvalidOperation) as e:
			raise UpstreamError(f'Malformed rate entry in CoinGecko response: {e!r}') from e

	async def close(self) -> None:
		await self._client.aclose()
