from __future__ import annotations

import logging
from typing import Any

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from clockedin.config import settings
from clockedin.core.errors import OAuthExchangeFailed
from clockedin.services.calendar.google_calendar_service import SCOPES

logger = logging.getLogger(__name__)


class GoogleOAuthClient:
    """Builds the consent URL and swaps authorization codes for credentials."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
    ) -> None:
        self.client_id = client_id or settings.GOOGLE_CLIENT_ID
        self.client_secret = client_secret or settings.GOOGLE_CLIENT_SECRET
        self.redirect_uri = redirect_uri or settings.GOOGLE_REDIRECT_URI

    def _client_config(self) -> dict[str, Any]:
        return {
            "web": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                "token_uri": "https://oauth2.googleapis.com/token",
                "redirect_uris": [self.redirect_uri],
            }
        }

    def _flow(self) -> Flow:
        return Flow.from_client_config(
            self._client_config(),
            scopes=SCOPES,
            redirect_uri=self.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def authorization_url(self) -> str:
        auth_url, _state = self._flow().authorization_url(
            access_type="offline",
            prompt="consent",
        )
        return auth_url

    def exchange_code(self, code: str) -> Credentials:
        flow = self._flow()
        try:
            flow.fetch_token(code=code)
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to exchange authorization code: %s", exc, exc_info=True)
            raise OAuthExchangeFailed("Failed to exchange authorization code") from exc
        return flow.credentials
