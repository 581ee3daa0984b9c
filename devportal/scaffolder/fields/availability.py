"""Shared, deduplicated workspace name availability lookups.

The live-typing field and the submit-time validator both go through one
AvailabilityMemo, so a name checked while typing is free to re-check on
submit, and concurrent callers for the same name share one request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from devportal.domain.exceptions import AvailabilityCheckError
from devportal.shared.utils.clock import Clock, monotonic_clock

logger = logging.getLogger(__name__)

DEFAULT_MEMO_TTL_SECONDS = 5.0


@dataclass
class _MemoEntry:
    timestamp: float
    task: asyncio.Task[bool]


def _consume_result(task: asyncio.Task[bool]) -> None:
    """Mark a finished lookup's exception as retrieved when every waiter has gone."""
    if not task.cancelled():
        task.exception()


class AvailabilityMemo:
    """Map from final name to the timestamped task that answers it.

    The first caller inside the TTL window starts the lookup; later callers
    await the same task. Waiters are shielded, so a cancelled caller never
    cancels the lookup other callers are waiting on. Failed lookups are
    shared for the rest of the window like successful ones.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_MEMO_TTL_SECONDS,
        clock: Clock = monotonic_clock,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _MemoEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _is_reusable(self, entry: _MemoEntry | None, now: float) -> bool:
        if entry is None or now - entry.timestamp >= self.ttl_seconds:
            return False
        # Tasks are bound to the loop that created them.
        return entry.task.get_loop() is asyncio.get_running_loop()

    def _prune(self, now: float) -> None:
        """Drop finished entries whose window has passed."""
        stale = [
            key
            for key, entry in self._entries.items()
            if entry.task.done() and now - entry.timestamp >= self.ttl_seconds
        ]
        for key in stale:
            del self._entries[key]

    async def get_or_fetch(
        self, key: str, fetch: Callable[[], Awaitable[bool]]
    ) -> bool:
        now = self._clock()
        entry = self._entries.get(key)
        if not self._is_reusable(entry, now):
            self._prune(now)
            task = asyncio.ensure_future(fetch())
            task.add_done_callback(_consume_result)
            entry = _MemoEntry(timestamp=now, task=task)
            self._entries[key] = entry
        else:
            logger.debug("Availability memo hit: %s", key)
        return await asyncio.shield(entry.task)


default_memo = AvailabilityMemo()


class WorkspaceAvailabilityChecker:
    """Asks the databricks backend whether a final workspace name is free."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient,
        memo: AvailabilityMemo | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http_client
        self.memo = memo if memo is not None else default_memo

    async def is_available(self, final_name: str) -> bool:
        """Return True when available, False when taken.

        Raises:
            AvailabilityCheckError: Backend answered with any other status.
        """
        return await self.memo.get_or_fetch(
            final_name, lambda: self._fetch_availability(final_name)
        )

    async def _fetch_availability(self, final_name: str) -> bool:
        response = await self._http.get(
            f"{self.base_url}/ws-validate/{quote(final_name, safe='')}"
        )
        # 200 means available, 400 means taken (or rejected by the backend).
        if response.status_code == 200:
            body = _json_or_none(response)
            return isinstance(body, dict) and body.get("available") is True
        if response.status_code == 400:
            return False
        body = _json_or_none(response)
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, str) and error:
            raise AvailabilityCheckError(error)
        raise AvailabilityCheckError()


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
