from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from clockedin.domain.schemas.calendar import CalendarEvent

UNTITLED_MEETING = "Untitled Meeting"


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    event: CalendarEvent
    included: bool
    score: int


class MeetingEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default=UNTITLED_MEETING, serialization_alias="summary")
    start: datetime | None = None
    end: datetime | None = None
    all_day: bool = Field(default=False, serialization_alias="allDay")
    attendee_count: int = Field(default=0, serialization_alias="attendees")

    @field_serializer("start", "end")
    def _as_event_time(self, value: datetime | None) -> dict[str, str] | None:
        # same node shape the calendar API returns: {"date"} for all-day, {"dateTime"} otherwise
        if value is None:
            return None
        if self.all_day:
            return {"date": value.date().isoformat()}
        return {"dateTime": value.isoformat()}


class StatsSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(default=0, serialization_alias="totalMeetings")
    hours: int = Field(default=0, serialization_alias="totalHours")
    remainder_minutes: int = Field(default=0, serialization_alias="totalMinutes")
    meetings: list[MeetingEntry] = Field(default_factory=list)
