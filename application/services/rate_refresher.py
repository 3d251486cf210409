import logging

from domain.exceptions.currency import UpstreamError
from domain.models.currency import RateSnapshot
from domain.normalization import normalize_snapshot
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers.base import RateProvider

logger = logging.getLogger(__name__)


class RateRefresher:
	def __init__(self, provider: RateProvider, cache: RedisCacheService):
		self.provider = provider
		self.cache = cache

	async def refresh(self) -> RateSnapshot:
		"""Fetch, normalize and cache a fresh snapshot, returning it to the caller.

		The cache is only written once the snapshot has been validated, so a failed
		refresh never replaces good cached rates.
		"""
		try:
			rates = await self.provider.fetch_rates()
		except UpstreamError as e:
			logger.error(f'Error fetching crypto rates from {self.provider.name}: {e}')
			raise

		if not rates:
			logger.error(f'{self.provider.name} returned an empty rate set')
			raise UpstreamError('Received empty or null response from external API.')

		snapshot = normalize_snapshot(rates)
		await self.cache.set_snapshot(snapshot)

		logger.info(f'Refreshed {len(snapshot)} crypto rates from {self.provider.name}')
		return snapshot
