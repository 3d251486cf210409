import logging
from collections.abc import Iterable

from application.services.rate_refresher import RateRefresher
from domain.exceptions.currency import CalculationError, CurrencyNotFoundError
from domain.models.currency import CurrencyRateView, RateSnapshot
from domain.normalization import cross_rate, find_missing_codes, normalize_code
from infrastructure.cache.redis_cache import RedisCacheService

logger = logging.getLogger(__name__)


class RateLookupService:
	def __init__(self, cache: RedisCacheService, refresher: RateRefresher, scale: int = 8):
		self.cache = cache
		self.refresher = refresher
		self.scale = scale

	async def get_snapshot(self) -> RateSnapshot:
		snapshot = await self.cache.get_snapshot()
		if snapshot is not None:
			logger.info('Returning cached crypto rates')
			return snapshot

		logger.info('Cache expired or not found. Fetching new rates...')
		return await self.refresher.refresh()

	async def lookup(
		self, base_currency: str, filter: Iterable[str] | None = None
	) -> CurrencyRateView:
		"""Cross rates of every (or every filtered) currency against ``base_currency``.

		Both the base and the filter entries match case-insensitively. The base
		currency never appears in the result, even when it is named in the filter.
		"""
		snapshot = await self.get_snapshot()

		base_key = normalize_code(base_currency)
		if base_key not in snapshot:
			raise CurrencyNotFoundError(base_currency)

		base_value = snapshot[base_key].value
		if base_value == 0:
			raise CalculationError('Base currency value is zero, cannot convert.')

		wanted = set(filter or ())
		if wanted:
			missing = find_missing_codes(wanted, snapshot)
			if missing:
				raise CurrencyNotFoundError(missing)
			keys = {normalize_code(code) for code in wanted}
		else:
			keys = snapshot.keys()

		# Output follows snapshot order whatever order the filter came in
		rates = {
			key.upper(): cross_rate(entry.value, base_value, self.scale)
			for key, entry in snapshot.items()
			if key in keys and key != base_key
		}
		return CurrencyRateView(source=base_currency.upper(), rates=rates)
