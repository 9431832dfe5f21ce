from __future__ import annotations

from datetime import date, datetime, timezone
import logging
from typing import Any

from clockedin.domain.schemas.calendar import CalendarEvent

logger = logging.getLogger(__name__)

ACCEPTED_RESPONSES = {"accepted", "tentative"}


def _parse_datetime(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    cleaned = value.strip()
    if cleaned.endswith("Z"):
        cleaned = f"{cleaned[:-1]}+00:00"
    try:
        return datetime.fromisoformat(cleaned)
    except ValueError:
        return None


def _parse_date(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        day = date.fromisoformat(value.strip())
    except ValueError:
        return None
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def parse_event_time(node: Any) -> tuple[datetime | None, bool]:
    """Return the instant of a Google ``start``/``end`` node and whether it is a whole-day value."""
    if not isinstance(node, dict):
        return None, False
    if node.get("dateTime"):
        return _parse_datetime(node["dateTime"]), False
    if node.get("date"):
        return _parse_date(node["date"]), True
    return None, False


def google_item_to_calendar_event(item: dict[str, Any]) -> CalendarEvent:
    start, start_is_date = parse_event_time(item.get("start"))
    end, _ = parse_event_time(item.get("end"))
    attendees = item.get("attendees") or []
    organizer = item.get("organizer") or {}

    if item.get("start") and start is None:
        logger.debug("Unparseable start for event id=%s", item.get("id"))

    return CalendarEvent(
        title=item.get("summary"),
        description=item.get("description"),
        start=start,
        end=end,
        all_day=start_is_date,
        attendee_count=len(attendees),
        has_accepted_attendee=any(
            (attendee or {}).get("responseStatus") in ACCEPTED_RESPONSES for attendee in attendees
        ),
        has_conference_data=bool(item.get("conferenceData") or item.get("hangoutLink")),
        recurrence_id=item.get("recurringEventId"),
        organizer_is_self=bool(organizer.get("self")),
        location=item.get("location"),
    )
