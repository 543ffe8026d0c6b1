from __future__ import annotations

import hmac
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from jwtkit.core.config import Settings
from jwtkit.core.exceptions import ClaimTypeError, KeyResolutionError, TokenError
from jwtkit.core.parser import parse
from jwtkit.core.token import Token, new_token
from jwtkit.core.transport import parse_from_request
from jwtkit.signing import HMACSigningMethod, SigningMethodRegistry, default_registry

logger = logging.getLogger(__name__)


def _same_text(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode("utf-8", "surrogatepass"), expected.encode("utf-8", "surrogatepass"))


@dataclass(frozen=True)
class AuthUser:
    username: str
    header: dict[str, Any] = field(default_factory=dict)
    claims: dict[str, Any] = field(default_factory=dict)


def validate_standard_claims(token: Token, issuer: str) -> str:
    """Check ``sub`` and ``iss`` on a verified token and return the subject."""
    try:
        subject = token.claims.get_string("sub")
        token_issuer = token.claims.get_string("iss")
    except ClaimTypeError as exc:
        raise PermissionError(str(exc)) from exc
    if not subject:
        raise PermissionError("Token is missing subject.")
    if token_issuer != issuer:
        raise PermissionError("Token issuer mismatch.")
    return subject


class TokenService:
    """Issues and validates access tokens signed with the shared secret."""

    def __init__(self, settings: Settings, registry: SigningMethodRegistry | None = None) -> None:
        self._settings = settings
        self._registry = default_registry if registry is None else registry
        method = self._registry.lookup(settings.jwt_signing_method)
        if not isinstance(method, HMACSigningMethod):
            raise ValueError(
                f"JWT_SIGNING_METHOD must be an HMAC method, got {settings.jwt_signing_method}"
            )
        self._method = method
        self._key = settings.jwt_secret_key.encode("utf-8")

    @property
    def auth_enabled(self) -> bool:
        return self._settings.api_auth_enabled

    @property
    def token_ttl_seconds(self) -> int:
        return self._settings.jwt_access_token_ttl_seconds

    def issue_access_token(self, username: str, password: str) -> str:
        expected_username = self._settings.api_auth_username
        expected_password = self._settings.api_auth_password
        valid_username = _same_text(username, expected_username)
        valid_password = _same_text(password, expected_password)
        if not (valid_username and valid_password):
            raise PermissionError("Invalid username or password.")
        return self.issue_access_token_for_subject(expected_username)

    def issue_access_token_for_subject(self, subject: str, now: int | None = None) -> str:
        expected_username = self._settings.api_auth_username
        if not _same_text(subject, expected_username):
            raise PermissionError("Invalid token subject.")
        issued_at = int(time.time()) if now is None else int(now)
        token = new_token(self._method)
        token.claims.update(
            {
                "sub": expected_username,
                "iat": issued_at,
                "exp": issued_at + self.token_ttl_seconds,
                "iss": self._settings.jwt_issuer,
            }
        )
        return token.signed_string(self._key)

    def _resolve_key(self, token: Token) -> bytes:
        # Only the configured method may use the shared secret.
        if token.method is not self._method:
            raise KeyResolutionError(
                f"Token is signed with {token.header.get('alg')}, expected {self._method.algorithm_id}.",
                token=token,
            )
        return self._key

    def _to_user(self, token: Token) -> AuthUser:
        subject = validate_standard_claims(token, issuer=self._settings.jwt_issuer)
        return AuthUser(username=subject, header=dict(token.header), claims=dict(token.claims))

    def validate_access_token(self, raw_token: str) -> AuthUser:
        try:
            token = parse(raw_token, self._resolve_key, registry=self._registry)
        except TokenError as exc:
            logger.info("Rejected access token: %s", exc)
            raise PermissionError(str(exc)) from exc
        return self._to_user(token)

    def validate_request(self, request: Any) -> AuthUser:
        try:
            token = parse_from_request(request, self._resolve_key, registry=self._registry)
        except TokenError as exc:
            logger.info("Rejected access token: %s", exc)
            raise PermissionError(str(exc)) from exc
        return self._to_user(token)
