import asyncio
import contextlib
import logging
import time
import weakref
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from application.services.rate_service import RateService

logger = logging.getLogger(__name__)


class ServiceReleased(Exception):
	"""The rate service behind a refresher has been garbage-collected."""


class RateRefresher:
	"""
	Background task that keeps the rate table fresh.

	Fetches once on start, then every ``interval`` seconds counted from the
	start of the previous fetch, so slow fetches do not make the period drift.
	A tick that arrives earlier than ``interval - tolerance`` after the
	previous fetch is skipped, so late or coalesced wake-ups never produce two
	fetches inside that window.

	Only a weak reference to the rate service is held; the loop ends on its
	own if the service goes away, and ``stop()`` tears it down explicitly.
	"""

	def __init__(
		self,
		rate_service: 'RateService',
		interval: float = 3600,
		tolerance: float = 60,
		clock: Callable[[], float] = time.monotonic,
	):
		if interval <= tolerance:
			raise ValueError('Refresh interval must be longer than its tolerance')
		self._service_ref = weakref.ref(rate_service)
		self.interval = interval
		self.tolerance = tolerance
		self._clock = clock
		self._last_fetch: float | None = None
		self._task: asyncio.Task | None = None

	@property
	def is_running(self) -> bool:
		return self._task is not None and not self._task.done()

	@property
	def min_spacing(self) -> float:
		return self.interval - self.tolerance

	def is_due(self) -> bool:
		if self._last_fetch is None:
			return True
		return self._clock() - self._last_fetch >= self.min_spacing

	def next_delay(self) -> float:
		"""Seconds until the next tick, measured from the start of the previous fetch."""
		if self._last_fetch is None:
			return 0.0
		return max(0.0, self._last_fetch + self.interval - self._clock())

	async def tick(self) -> bool:
		"""Run one scheduled fetch if due. Returns True if the rates were applied."""
		service = self._service_ref()
		if service is None:
			raise ServiceReleased('Rate service no longer exists')

		if not self.is_due():
			logger.debug('Skipping rate refresh, previous fetch is too recent')
			return False

		self._last_fetch = self._clock()
		return await service.fetch_once()

	async def _run(self) -> None:
		logger.info(f'Rate refresher started, interval {self.interval}s (tolerance {self.tolerance}s)')
		while True:
			try:
				await self.tick()
			except ServiceReleased:
				logger.info('Rate service released, rate refresher exiting')
				break
			except Exception as e:
				logger.error(f'Rate refresh cycle failed: {e}', exc_info=True)
			await asyncio.sleep(self.next_delay())

	def start(self) -> None:
		if self.is_running:
			return
		self._task = asyncio.create_task(self._run(), name='rate-refresher')

	async def stop(self) -> None:
		if self._task is None:
			return
		task, self._task = self._task, None
		task.cancel()
		with contextlib.suppress(asyncio.CancelledError):
			await task
		logger.info('Rate refresher stopped')
