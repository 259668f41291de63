import asyncio
from typing import Optional

import structlog

from .news_refresh_service import NewsRefreshService, RefreshResult

logger = structlog.get_logger(__name__)


class NewsRefreshScheduler:
    """Runs the news refresh at process start and then every ``interval_hours``."""

    def __init__(self, refresh_service: NewsRefreshService, interval_hours: float = 3, run_on_startup: bool = True):
        self.refresh_service = refresh_service
        self.interval_seconds = interval_hours * 3600
        self.run_on_startup = run_on_startup
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> Optional[RefreshResult]:
        try:
            return await self.refresh_service.refresh()
        except Exception as e:
            logger.error("Scheduled news refresh failed", error=str(e), exc_info=True)
            return None

    async def _run_forever(self) -> None:
        if self.run_on_startup:
            await self.run_once()

        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.run_once()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run_forever())
        logger.info("news_refresh_scheduled", interval_hours=self.interval_seconds / 3600)

    async def stop(self) -> None:
        if not self._task:
            return

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("news_refresh_stopped")
