from __future__ import annotations

import math
from typing import Iterable

from clockedin.domain.schemas.calendar import CalendarEvent
from clockedin.domain.schemas.meeting import (
    UNTITLED_MEETING,
    ClassificationResult,
    MeetingEntry,
    StatsSummary,
)


def meeting_minutes(event: CalendarEvent) -> float:
    # all-day entries, missing timestamps and inverted ranges add nothing to the total
    if event.all_day:
        return 0.0
    duration = event.duration_minutes()
    if duration is None or duration < 0:
        return 0.0
    return duration


def to_entry(event: CalendarEvent) -> MeetingEntry:
    return MeetingEntry(
        title=event.title or UNTITLED_MEETING,
        start=event.start,
        end=event.end,
        all_day=event.all_day,
        attendee_count=event.attendee_count,
    )


def split_minutes(total_minutes: float) -> tuple[int, int]:
    """Whole hours and the leftover minutes, rounded half up once at the end."""
    return math.floor(total_minutes / 60), math.floor(total_minutes % 60 + 0.5)


def aggregate(results: Iterable[ClassificationResult]) -> StatsSummary:
    included = [result.event for result in results if result.included]
    hours, remainder = split_minutes(sum(meeting_minutes(event) for event in included))

    return StatsSummary(
        count=len(included),
        hours=hours,
        remainder_minutes=remainder,
        meetings=[to_entry(event) for event in included],
    )
