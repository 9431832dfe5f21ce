from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable

from clockedin.domain.schemas.meeting import StatsSummary

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class CacheEntry:
    principal_id: str
    summary: StatsSummary
    stored_at: float


class StatsCache:
    """Last computed stats per principal, served only while fresher than the TTL.

    Entries for different principals are independent. A miss followed by an
    upstream fetch and a ``put`` is not atomic, so two concurrent first
    requests may both fetch; the second ``put`` simply overwrites the first.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        time_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._time_fn = time_fn
        self._entries: dict[str, CacheEntry] = {}

    def get(self, principal_id: str) -> StatsSummary | None:
        entry = self._entries.get(principal_id)
        if entry is None:
            logger.debug("Stats cache miss principal=%s", principal_id)
            return None
        age = self._time_fn() - entry.stored_at
        if age >= self.ttl_seconds:
            # stale entries stay until the next put overwrites them
            logger.debug("Stats cache stale principal=%s age=%.1fs", principal_id, age)
            return None
        logger.debug("Stats cache hit principal=%s age=%.1fs", principal_id, age)
        return entry.summary

    def put(self, principal_id: str, summary: StatsSummary) -> None:
        self._entries[principal_id] = CacheEntry(
            principal_id=principal_id,
            summary=summary,
            stored_at=self._time_fn(),
        )

    def invalidate(self, principal_id: str) -> None:
        if self._entries.pop(principal_id, None) is not None:
            logger.debug("Stats cache invalidated principal=%s", principal_id)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, principal_id: object) -> bool:
        return principal_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
