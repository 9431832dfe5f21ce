from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging
from typing import Callable

from clockedin.core.errors import NotAuthenticated
from clockedin.domain.schemas.meeting import StatsSummary
from clockedin.services.auth.token_store import TokenStore
from clockedin.services.calendar.base import EventSource
from clockedin.services.calendar.google_calendar_service import build_time_window
from clockedin.services.meetings.aggregator import aggregate
from clockedin.services.meetings.classifier import classify
from clockedin.services.meetings.stats_cache import StatsCache
from clockedin.utils.timing import Timer, format_duration

logger = logging.getLogger(__name__)


class MeetingStatsService:
    def __init__(
        self,
        token_store: TokenStore,
        cache: StatsCache,
        event_source: EventSource,
        year: int,
        now_fn: Callable[[], datetime] = lambda: datetime.now(tz=timezone.utc),
    ) -> None:
        self.token_store = token_store
        self.cache = cache
        self.event_source = event_source
        self.year = year
        self._now_fn = now_fn

    async def get_stats(self, principal_id: str) -> StatsSummary:
        record = self.token_store.get(principal_id)
        if record is None:
            logger.info("No credentials stored for principal=%s", principal_id)
            raise NotAuthenticated(principal_id=principal_id)

        cached = self.cache.get(principal_id)
        if cached is not None:
            return cached

        time_min, time_max = build_time_window(self.year, self._now_fn())
        events = []
        timer = Timer("calendar")
        if time_max > time_min:
            with timer:
                events = await asyncio.to_thread(
                    self.event_source.list_events,
                    record.credentials,
                    time_min,
                    time_max,
                )

        results = [classify(event) for event in events]
        summary = aggregate(results)

        if logger.isEnabledFor(logging.DEBUG):
            for index, result in enumerate(r for r in results if r.included):
                logger.debug(
                    "[%d] %s start=%s score=%d attendees=%d",
                    index + 1,
                    result.event.title,
                    result.event.start,
                    result.score,
                    result.event.attendee_count,
                )

        logger.info(
            "Found %d meetings in %d events for principal=%s total=%dh%dm %s=%s",
            summary.count,
            len(events),
            principal_id,
            summary.hours,
            summary.remainder_minutes,
            timer.name,
            format_duration(timer.elapsed),
        )
        self.cache.put(principal_id, summary)
        return summary
