from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from clockedin.core.errors import TokenInvalid
from clockedin.core.jwt import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    if credentials is None or not credentials.credentials:
        raise TokenInvalid("No token provided")
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise TokenInvalid("Invalid token")
    user_id = payload.get("userId")
    if not user_id:
        raise TokenInvalid("Invalid token")
    return user_id
