import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
import httplib2

from clockedin.config import settings
from clockedin.core.errors import UpstreamFetchFailed
from clockedin.domain.schemas.calendar import CalendarEvent
from clockedin.services.calendar.base import EventSource
from clockedin.services.calendar.mapper import google_item_to_calendar_event

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]
PAGE_SIZE = 2500


def _build_service(credentials: Credentials):
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


class GoogleCalendarClient(EventSource):
    def __init__(
        self,
        calendar_id: str | None = None,
        service_factory: Callable[[Credentials], Any] | None = None,
        allow_in_tests: bool = False,
    ) -> None:
        self.calendar_id = calendar_id or settings.GOOGLE_CALENDAR_ID
        self._disabled = (
            bool(os.getenv("PYTEST_CURRENT_TEST")) and service_factory is None and not allow_in_tests
        )
        self._service_factory = service_factory or _build_service

    def list_events(
        self,
        credentials: Credentials,
        time_min: datetime,
        time_max: datetime,
    ) -> list[CalendarEvent]:
        """Single, expanded events in ascending start order across every result page."""
        if self._disabled:
            raise NotImplementedError("Google Calendar calls are disabled in tests.")

        items: list[dict[str, Any]] = []
        page_token: str | None = None
        try:
            service = self._service_factory(credentials)
            while True:
                response = (
                    service.events()
                    .list(
                        calendarId=self.calendar_id,
                        timeMin=time_min.isoformat(),
                        timeMax=time_max.isoformat(),
                        singleEvents=True,
                        orderBy="startTime",
                        maxResults=PAGE_SIZE,
                        pageToken=page_token,
                    )
                    .execute()
                )
                if not isinstance(response, dict):
                    break
                items.extend(response.get("items", []))
                page_token = response.get("nextPageToken")
                if not page_token:
                    break
        except HttpError as exc:
            status = getattr(exc.resp, "status", None)
            logger.error(
                "Google Calendar list failed status=%s: %s",
                status,
                exc,
                exc_info=logger.isEnabledFor(logging.DEBUG),
            )
            raise UpstreamFetchFailed(upstream_status=status, details={"reason": str(exc)}) from exc
        except GoogleAuthError as exc:
            logger.error("Google credentials rejected during list: %s", exc)
            raise UpstreamFetchFailed(details={"reason": str(exc)}) from exc
        except (OSError, httplib2.HttpLib2Error) as exc:
            logger.error("Google Calendar list failed in transport: %s", exc)
            raise UpstreamFetchFailed(details={"reason": str(exc)}) from exc

        return [google_item_to_calendar_event(item) for item in items]


def build_time_window(year: int, now: datetime | None = None) -> tuple[datetime, datetime]:
    """The stats window: Jan 1 of ``year`` up to the earlier of now and the last second of the year."""
    now = now or datetime.now(tz=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    start = datetime(year, 1, 1, tzinfo=timezone.utc)
    year_end = datetime(year, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
    return start, min(now, year_end)
