import asyncio
import logging
import time

from application.services.rate_refresher import RateRefresher

logger = logging.getLogger(__name__)


class RateRefreshWorker:
	"""
	Background task that keeps the rates cache warm.

	Refreshes once on start and then at a fixed rate of one tick per ``interval``
	seconds, measured from the start of each tick, so a slow refresh does not push
	later ticks back. Requests only hit upstream themselves when the cache has
	expired between ticks. A failed tick is logged and left for the next one.
	"""

	def __init__(self, refresher: RateRefresher, interval: int = 300):
		self.refresher = refresher
		self.interval = interval
		self.is_running = False
		self._task: asyncio.Task | None = None

	async def run_once(self) -> bool:
		started = time.monotonic()
		try:
			snapshot = await self.refresher.refresh()
		except Exception as e:
			logger.error(f'Scheduled rates refresh failed: {e}')
			return False

		duration = time.monotonic() - started
		logger.info(f'Scheduled refresh stored {len(snapshot)} rates in {duration:.2f}s')
		return True

	def seconds_until_next_tick(self, tick_started: float) -> float:
		elapsed = time.monotonic() - tick_started
		return max(0.0, self.interval - elapsed)

	async def run(self) -> None:
		self.is_running = True
		logger.info(f'Rate refresh worker started, interval {self.interval}s')
		try:
			while self.is_running:
				tick_started = time.monotonic()
				await self.run_once()
				await asyncio.sleep(self.seconds_until_next_tick(tick_started))
		finally:
			self.is_running = False
			logger.info('Rate refresh worker stopped')

	def start(self) -> asyncio.Task:
		if self._task is None or self._task.done():
			self._task = asyncio.create_task(self.run())
		return self._task

	async def stop(self) -> None:
		self.is_running = False
		if self._task is None:
			return

		self._task.cancel()
		try:
			await self._task
		except asyncio.CancelledError:
			pass
		self._task = None
