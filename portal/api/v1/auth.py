"""Bearer-token dependency: decode the JWT issued at login into a CurrentAccount."""

from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from portal.core.security import decode_access_token
from portal.schemas.auth import CurrentAccount

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentAccount:
    """Dependency: require a valid Bearer JWT and return its claims. Raises 401 if missing or invalid."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    try:
        return CurrentAccount(email=payload.get("email") or payload["sub"], role=payload.get("role"))
    except (KeyError, ValidationError):
        raise _unauthorized("Invalid token payload")
