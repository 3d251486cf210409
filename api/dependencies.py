import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import ConversionService, RateLookupService, RateRefresher
from application.workers.rate_refresh_worker import RateRefreshWorker
from config.settings import get_settings
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers import CoinGeckoProvider, RateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	redis_cache: RedisCacheService | None = None
	provider: RateProvider | None = None
	refresher: RateRefresher | None = None
	worker: RateRefreshWorker | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.redis_client = Redis(
		host=settings.REDIS_HOST,
		port=settings.REDIS_PORT,
		socket_timeout=settings.REDIS_TIMEOUT,
		socket_connect_timeout=settings.REDIS_TIMEOUT,
		decode_responses=True,
	)
	deps.redis_cache = RedisCacheService(
		deps.redis_client,
		key=settings.RATES_CACHE_KEY,
		ttl=timedelta(seconds=settings.RATES_CACHE_TTL_SECONDS),
	)
	deps.provider = CoinGeckoProvider(settings.CRYPTO_API_URL, timeout=settings.PROVIDER_TIMEOUT)
	deps.refresher = RateRefresher(provider=deps.provider, cache=deps.redis_cache)
	deps.worker = RateRefreshWorker(
		deps.refresher, interval=settings.RATES_REFRESH_INTERVAL_SECONDS
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.worker:
		await deps.worker.stop()
	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.provider:
		await deps.provider.close()

	logger.info('Cleanup complete')


def get_redis_cache() -> RedisCacheService:
	if deps.redis_cache is None:
		raise RuntimeError('Redis cache not initialized')
	return deps.redis_cache


def get_rate_refresher() -> RateRefresher:
	if deps.refresher is None:
		raise RuntimeError('Rate refresher not initialized')
	return deps.refresher


def get_rate_lookup_service(
	cache: Annotated[RedisCacheService, Depends(get_redis_cache)],
	refresher: Annotated[RateRefresher, Depends(get_rate_refresher)],
) -> RateLookupService:
	return RateLookupService(cache=cache, refresher=refresher, scale=get_settings().EXCHANGE_SCALE)


def get_conversion_service(
	rate_lookup: Annotated[RateLookupService, Depends(get_rate_lookup_service)],
) -> ConversionService:
	return ConversionService(rate_lookup=rate_lookup, fee_rate=get_settings().EXCHANGE_FEE_RATE)
