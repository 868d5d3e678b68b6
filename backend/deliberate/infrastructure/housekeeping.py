"""Housekeeping — periodic background sweep of expired cache entries.

Invariants:
    - At most one sweep task per Housekeeper; start() is a no-op when already running
    - stop() cancels and awaits the task (no orphaned tasks after lifespan shutdown)
    - A failing sweep is logged and the loop continues

Design Decisions:
    - Plain asyncio task on the app's loop; not part of any request's correctness
    - Rate-limit windows expire inside the `limits` storage, so only the cache needs sweeping
"""

import asyncio
import logging

from deliberate.infrastructure.cache import TTLCache

logger = logging.getLogger(__name__)


class Housekeeper:
    def __init__(self, cache: TTLCache | None, interval_seconds: float = 60.0):
        self._cache = cache
        self._interval = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        if self._cache is None:
            return 0
        return self._cache.sweep()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                removed = self.sweep_once()
            except Exception:
                logger.error("Housekeeping sweep failed", exc_info=True)
                continue
            if removed:
                logger.info(f"Housekeeping removed {removed} expired cache entries")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="deliberate-housekeeping")
        logger.info(f"Housekeeping started (interval={self._interval}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Housekeeping stopped")
