from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, List, Optional

import httpx

from bryggio.client_app.config import ClientSettings, get_settings
from bryggio.client_app.jobs import TaskTracker
from bryggio.client_app.logging import create_logger
from bryggio.client_app.models import MeasureResult


class MeasurementTrigger:
    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.logger = logger or create_logger("bryggio", self.settings)
        self._client = client
        self._owns_client = client is None
        self._tasks = TaskTracker()

    def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.request_timeout)
        return self._client

    @property
    def pending(self) -> List[asyncio.Task]:
        return [task for task in self._tasks.tasks if not task.done()]

    def trigger_measurement(self, status: Any) -> asyncio.Task:
        """
        Log ``"Updating <name>"`` and fire one ``GET /start_measure``.

        ``status`` is a ``BrewStatus`` or ``BrewViewModel``; only its ``name``
        is read. The request runs as a task on the running event loop and is
        not awaited here; its ``MeasureResult`` is available from the returned
        task.

        Raises:
            RuntimeError: If no event loop is running.
        """
        asyncio.get_running_loop()  # raises before anything is logged
        name = status.name
        self.logger.info(f"Updating {name}", extra={"details": {"name": name}})
        return self._tasks.start(self._start_measure(), name=f"start_measure:{name}")

    async def _start_measure(self) -> MeasureResult:
        client = self._client_instance()
        url = self.settings.measure_url
        started = time.monotonic()
        try:
            resp = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            result = MeasureResult(success=False, error=str(exc) or type(exc).__name__, elapsed=time.monotonic() - started)
        else:
            result = MeasureResult(
                success=resp.is_success,
                status_code=resp.status_code,
                error=None if resp.is_success else f"HTTP {resp.status_code}",
                elapsed=time.monotonic() - started,
            )
        if not result.success:
            self.logger.warning("start_measure failed", extra={"details": {"url": url, **result.model_dump()}})
        return result

    async def drain(self) -> List[MeasureResult]:
        return await self._tasks.drain()

    async def aclose(self) -> None:
        try:
            await self.drain()
        finally:
            if self._client and self._owns_client:
                await self._client.aclose()
                self._client = None
