from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from jwtkit.api.dependencies import get_token_service, require_api_user
from jwtkit.models import AuthTokenRequest, AuthTokenResponse, TokenIntrospectionResponse
from jwtkit.services import AuthUser, TokenService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["Authentication"])

UNAUTHORIZED_RESPONSE = {401: {"description": "Missing, invalid or expired bearer token."}}


def _token_response(token: str, token_service: TokenService) -> AuthTokenResponse:
    return AuthTokenResponse(
        accessToken=token,
        tokenType="bearer",
        expiresInSeconds=token_service.token_ttl_seconds,
    )


@router.post(
    "/token",
    response_model=AuthTokenResponse,
    summary="Issue access token",
    description="Exchanges API user credentials for a signed bearer token.",
    responses={401: {"description": "Invalid credentials."}},
)
def issue_access_token(
    payload: AuthTokenRequest,
    request: Request,
    token_service: TokenService = Depends(get_token_service),
) -> AuthTokenResponse:
    try:
        token = token_service.issue_access_token(payload.username, payload.password)
    except PermissionError as exc:
        request.state.auth_rejection = "InvalidCredentials"
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        ) from exc

    request.state.auth_subject = payload.username
    return _token_response(token, token_service)


@router.post(
    "/refresh",
    response_model=AuthTokenResponse,
    summary="Refresh access token",
    description="Re-signs the caller's subject with a fresh expiry.",
    responses=UNAUTHORIZED_RESPONSE,
)
def refresh_access_token(
    auth_user: AuthUser = Depends(require_api_user),
    token_service: TokenService = Depends(get_token_service),
) -> AuthTokenResponse:
    if not token_service.auth_enabled:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token authentication is disabled.",
        )
    token = token_service.issue_access_token_for_subject(auth_user.username)
    logger.info(
        "token.refreshed subject=%s previous_exp=%s",
        auth_user.username,
        auth_user.claims.get("exp"),
    )
    return _token_response(token, token_service)


@router.get(
    "/introspect",
    response_model=TokenIntrospectionResponse,
    summary="Inspect bearer token",
    description="Returns the verified header and claims of the presented bearer token.",
    responses=UNAUTHORIZED_RESPONSE,
)
def introspect_access_token(auth_user: AuthUser = Depends(require_api_user)) -> TokenIntrospectionResponse:
    return TokenIntrospectionResponse(
        subject=auth_user.username,
        algorithm=str(auth_user.header.get("alg", "")),
        header=auth_user.header,
        claims=auth_user.claims,
    )
