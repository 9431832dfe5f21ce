from datetime import datetime
from typing import Protocol

from google.oauth2.credentials import Credentials

from clockedin.domain.schemas.calendar import CalendarEvent


class EventSource(Protocol):
    def list_events(
        self,
        credentials: Credentials,
        time_min: datetime,
        time_max: datetime,
    ) -> list[CalendarEvent]:
        ...
