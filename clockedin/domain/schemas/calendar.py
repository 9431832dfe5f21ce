from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CalendarEvent(BaseModel):
    """One calendar entry as returned by the provider, before classification."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    all_day: bool = False
    attendee_count: int = 0
    has_accepted_attendee: bool = False
    has_conference_data: bool = False
    recurrence_id: str | None = None
    organizer_is_self: bool = False
    location: str | None = None

    @property
    def is_recurring(self) -> bool:
        return bool(self.recurrence_id)

    def duration_minutes(self) -> float | None:
        if self.start is None or self.end is None:
            return None
        try:
            return (self.end - self.start).total_seconds() / 60
        except TypeError:
            # naive vs aware timestamps
            return None
