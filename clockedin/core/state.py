from __future__ import annotations

import logging
from typing import Callable

from clockedin.config import Settings, settings as default_settings
from clockedin.services.auth.google_oauth import GoogleOAuthClient
from clockedin.services.auth.token_store import TokenStore
from clockedin.services.calendar.base import EventSource
from clockedin.services.calendar.google_calendar_service import GoogleCalendarClient
from clockedin.services.meetings.stats_cache import StatsCache
from clockedin.services.meetings.stats_service import MeetingStatsService
from clockedin.utils.sweeper import start_periodic

logger = logging.getLogger(__name__)


class AppState:
    """Process-wide in-memory state: credentials, cached stats and the expiry sweeper."""

    def __init__(
        self,
        config: Settings | None = None,
        event_source: EventSource | None = None,
        oauth_client: GoogleOAuthClient | None = None,
    ) -> None:
        self.settings = config or default_settings
        self.cache = StatsCache(ttl_seconds=self.settings.STATS_CACHE_TTL_SECONDS)
        self.token_store = TokenStore(self.cache)
        self.oauth_client = oauth_client or GoogleOAuthClient()
        self.stats_service = MeetingStatsService(
            token_store=self.token_store,
            cache=self.cache,
            event_source=event_source or GoogleCalendarClient(calendar_id=self.settings.GOOGLE_CALENDAR_ID),
            year=self.settings.STATS_YEAR,
        )
        self._stop_sweeper: Callable[[], None] | None = None

    def start(self) -> None:
        if self._stop_sweeper is None:
            self._stop_sweeper = start_periodic(
                self.token_store.sweep,
                interval_s=self.settings.TOKEN_SWEEP_INTERVAL_SECONDS,
                label="token-sweep",
                logger=logger,
            )

    def shutdown(self) -> None:
        if self._stop_sweeper is not None:
            self._stop_sweeper()
            self._stop_sweeper = None
        self.token_store.clear()
        self.cache.clear()
