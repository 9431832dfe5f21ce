from __future__ import annotations

from clockedin.domain.schemas.calendar import CalendarEvent
from clockedin.domain.schemas.meeting import ClassificationResult
from clockedin.services.meetings import vocabulary as vocab


def is_hard_excluded(event: CalendarEvent) -> bool:
    title = (event.title or "").lower()
    description = (event.description or "").lower()
    return bool(vocab.EXCLUSION_REGEX.search(title) or vocab.EXCLUSION_REGEX.search(description))


def has_conference_link(event: CalendarEvent) -> bool:
    if event.has_conference_data:
        return True
    description = (event.description or "").lower()
    return any(domain in description for domain in vocab.CONFERENCE_DOMAINS)


def _in_work_hours(event: CalendarEvent) -> bool:
    if event.start is None or event.all_day:
        return False
    start_hour, end_hour = vocab.WORK_HOURS
    return event.start.weekday() in vocab.WORK_DAYS and start_hour <= event.start.hour < end_hour


def signals(event: CalendarEvent) -> dict[str, bool]:
    """Which positive signals and penalties fire for an event, keyed like the weight tables."""
    title = (event.title or "").lower()
    location = (event.location or "").lower()
    low, high = vocab.ATTENDEE_RANGE
    # whole-day spans are not meeting lengths
    duration = None if event.all_day else event.duration_minutes()

    return {
        "conference": has_conference_link(event),
        "meeting_title": bool(vocab.MEETING_TITLE_REGEX.search(title)),
        "attendees": low < event.attendee_count < high,
        "recurring": event.is_recurring,
        "accepted": event.has_accepted_attendee,
        "meeting_location": bool(vocab.LOCATION_REGEX.search(location)),
        "organizer_self": event.organizer_is_self,
        "work_hours": _in_work_hours(event),
        "all_day": event.all_day,
        "long_duration": duration is not None and duration >= vocab.LONG_DURATION_MINUTES,
        "large_audience": event.attendee_count > vocab.LARGE_AUDIENCE,
    }


def score_event(event: CalendarEvent) -> int:
    weights = {**vocab.SIGNAL_WEIGHTS, **vocab.PENALTY_WEIGHTS}
    return sum(weights[name] for name, fired in signals(event).items() if fired)


def classify(event: CalendarEvent) -> ClassificationResult:
    if is_hard_excluded(event):
        return ClassificationResult(event=event, included=False, score=0)

    score = score_event(event)
    return ClassificationResult(
        event=event,
        included=score >= vocab.INCLUSION_THRESHOLD,
        score=score,
    )
