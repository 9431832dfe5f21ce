import base64
import binascii
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from clockedin.api.deps import get_app_state, get_stats_service
from clockedin.core.auth import get_current_principal
from clockedin.core.errors import InvalidInput
from clockedin.core.state import AppState
from clockedin.domain.schemas.meeting import StatsSummary
from clockedin.services.meetings.stats_service import MeetingStatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

PNG_DATA_URL_PREFIX = "data:image/png;base64,"


class SharedStats(BaseModel):
    totalMeetings: int = Field(ge=0)
    totalHours: int = Field(ge=0)
    totalMinutes: int = Field(ge=0, lt=60)


class StatsImageRequest(BaseModel):
    imageData: str
    stats: SharedStats


@router.get("/meetings", response_model=StatsSummary)
async def meeting_stats(
    principal_id: str = Depends(get_current_principal),
    service: MeetingStatsService = Depends(get_stats_service),
) -> StatsSummary:
    return await service.get_stats(principal_id)


@router.post("/meeting-stats-image")
def meeting_stats_image(
    payload: StatsImageRequest,
    principal_id: str = Depends(get_current_principal),
    app_state: AppState = Depends(get_app_state),
) -> dict[str, str]:
    # images are not hosted; the share link points back at the dashboard
    if not payload.imageData.startswith(PNG_DATA_URL_PREFIX):
        raise InvalidInput("imageData must be a base64 PNG data URL")
    try:
        image = base64.b64decode(payload.imageData[len(PNG_DATA_URL_PREFIX):], validate=True)
    except binascii.Error as exc:
        raise InvalidInput("imageData is not valid base64") from exc
    if not image:
        raise InvalidInput("imageData is empty")

    logger.info("Received stats image principal=%s bytes=%d", principal_id, len(image))
    return {"imageUrl": app_state.settings.FRONTEND_URL}
