from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status

from jwtkit.core.config import Settings, get_settings
from jwtkit.services import AuthUser, TokenService


@lru_cache(maxsize=1)
def _cached_token_service(settings: Settings) -> TokenService:
    return TokenService(settings=settings)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return _cached_token_service(settings)


def _rejection_kind(exc: PermissionError) -> str:
    # TokenService chains the TokenError that caused the rejection.
    cause = exc.__cause__
    return type(cause).__name__ if cause is not None else "PermissionError"


def require_api_user(
    request: Request,
    token_service: TokenService = Depends(get_token_service),
) -> AuthUser:
    if not token_service.auth_enabled:
        user = AuthUser(username="anonymous")
        request.state.auth_subject = user.username
        return user

    try:
        user = token_service.validate_request(request)
    except PermissionError as exc:
        request.state.auth_rejection = _rejection_kind(exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    request.state.auth_subject = user.username
    return user
