from fastapi import Request

from clockedin.core.state import AppState
from clockedin.services.meetings.stats_service import MeetingStatsService


def get_app_state(request: Request) -> AppState:
    return request.app.state.clockedin


def get_stats_service(request: Request) -> MeetingStatsService:
    return get_app_state(request).stats_service
