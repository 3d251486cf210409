from typing import Protocol

from domain.models.currency import RateEntry


class RateProvider(Protocol):
	"""Upstream source of a complete rate table."""

	@property
	def name(self) -> str: ...

	async def fetch_rates(self) -> dict[str, RateEntry]: ...

	async def close(self) -> None: ...
