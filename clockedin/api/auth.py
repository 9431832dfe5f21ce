import asyncio
import logging
import uuid
from urllib.parse import urlencode

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from clockedin.api.deps import get_app_state
from clockedin.core.auth import get_current_principal
from clockedin.core.errors import OAuthExchangeFailed
from clockedin.core.jwt import create_access_token
from clockedin.core.state import AppState

logger = logging.getLogger(__name__)

router = APIRouter()


def _frontend_redirect(app_state: AppState, path: str = "", **params: str) -> RedirectResponse:
    base = app_state.settings.FRONTEND_URL.rstrip("/")
    query = f"?{urlencode(params)}" if params else ""
    return RedirectResponse(f"{base}{path}{query}")


@router.get("/auth/google")
def google_login(app_state: AppState = Depends(get_app_state)) -> RedirectResponse:
    return RedirectResponse(app_state.oauth_client.authorization_url())


@router.get("/auth/google/callback")
async def google_callback(
    code: str | None = None,
    app_state: AppState = Depends(get_app_state),
) -> RedirectResponse:
    if not code:
        logger.error("No authorization code received from Google")
        return _frontend_redirect(app_state, error="no_code")

    try:
        credentials = await asyncio.to_thread(app_state.oauth_client.exchange_code, code)
    except OAuthExchangeFailed as exc:
        return _frontend_redirect(app_state, error="auth_failed", reason=exc.message)

    principal_id = uuid.uuid4().hex
    app_state.token_store.put(principal_id, credentials)
    logger.info("Stored credentials for new principal=%s", principal_id)

    token = create_access_token(principal_id)
    return _frontend_redirect(app_state, "/auth/google/callback", token=token)


@router.get("/api/auth/check")
def auth_check(principal_id: str = Depends(get_current_principal)) -> dict[str, bool]:
    return {"authenticated": True}
