import json
import logging
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models.currency import RateEntry, RateSnapshot

logger = logging.getLogger(__name__)


class RedisCacheService:
    def __init__(
        self,
        redis_client: redis.Redis,
        key: str = "cryptoRates",
        ttl: timedelta = timedelta(minutes=5),
    ):
        self.redis = redis_client
        self.key = key
        self.rate_ttl = ttl

    async def get_snapshot(self) -> RateSnapshot | None:
        try:
            data = await self.redis.get(self.key)
        except RedisError as e:
            raise CacheError(f"Failed to read {self.key} from cache: {e}") from e

        if not data:
            return None

        try:
            raw = json.loads(data)
            return {
                code: RateEntry(
                    name=entry["name"],
                    unit=entry["unit"],
                    value=Decimal(entry["value"]),
                    kind=entry["type"],
                )
                for code, entry in raw.items()
            }
        except (ValueError, KeyError, TypeError, AttributeError, InvalidOperation) as e:
            raise CacheError(f"Invalid json data under {self.key}: {e}") from e

    async def set_snapshot(self, snapshot: RateSnapshot) -> None:
        payload = {
            code: {
                "name": entry.name,
                "unit": entry.unit,
                "value": str(entry.value),
                "type": entry.kind,
            }
            for code, entry in snapshot.items()
        }

        try:
            await self.redis.setex(self.key, self.rate_ttl, json.dumps(payload))
        except RedisError as e:
            raise CacheError(f"Failed to write {self.key} to cache: {e}") from e

        logger.debug(f"Cached {len(snapshot)} rates under {self.key} for {self.rate_ttl}")

    async def delete_snapshot(self) -> None:
        try:
            await self.redis.delete(self.key)
        except RedisError as e:
            raise CacheError(f"Failed to delete {self.key} from cache: {e}") from e
