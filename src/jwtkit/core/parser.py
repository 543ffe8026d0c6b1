from __future__ import annotations

import json
import logging
import math
import time
from typing import Callable

from jwtkit.core.exceptions import (
    ClaimTypeError,
    ExpiredTokenError,
    MalformedTokenError,
    SegmentDecodingError,
    SignatureInvalidError,
    TokenError,
    UnspecifiedAlgorithmError,
    ValidationFlag,
)
from jwtkit.core.segments import decode_segment
from jwtkit.core.token import Token
from jwtkit.core.values import TokenMap
from jwtkit.signing import SigningMethodRegistry, default_registry

logger = logging.getLogger(__name__)

KeyResolver = Callable[[Token], bytes]


def split_token(token_text: str) -> tuple[str, str, str]:
    parts = token_text.split(".")
    if len(parts) != 3 or not all(parts):
        raise MalformedTokenError("Token contains an invalid number of segments.")
    return parts[0], parts[1], parts[2]


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def _decode_object(segment: str, label: str) -> TokenMap:
    try:
        decoded = json.loads(decode_segment(segment), parse_constant=_reject_constant)
    except ValueError as exc:
        raise SegmentDecodingError(f"Malformed {label}: {exc}") from exc
    if not isinstance(decoded, dict):
        raise SegmentDecodingError(f"Malformed {label}: expected a JSON object.")
    return TokenMap(decoded)


def _is_expired(claims: TokenMap, now: float) -> bool:
    try:
        expires_at = claims.get_number("exp")
    except ClaimTypeError:
        return False
    if expires_at is None:
        return False
    if not math.isfinite(expires_at):
        return expires_at < 0
    return int(now) > int(expires_at)


def parse(
    token_text: str,
    key_resolver: KeyResolver,
    *,
    registry: SigningMethodRegistry | None = None,
    now: float | None = None,
) -> Token:
    """Parse and validate a token, returning it only when fully valid.

    Checks run in order: segment count, header, claims, ``alg`` lookup,
    expiry, key resolution, signature. An expired token is still verified so
    that a bad signature is reported; in that case ``SignatureInvalidError``
    is raised with ``ValidationFlag.EXPIRED`` set in its ``flags``. Errors
    raised by ``key_resolver`` propagate unchanged.
    """
    registry = default_registry if registry is None else registry
    current_time = time.time() if now is None else now

    try:
        header_segment, claims_segment, signature = split_token(token_text)
        header = _decode_object(header_segment, "header")
        claims = _decode_object(claims_segment, "claims")
    except TokenError as exc:
        logger.debug("token.rejected reason=%s", exc)
        raise

    token = Token(header=header, claims=claims, signature=signature)

    try:
        alg = header.get_string("alg")
    except ClaimTypeError:
        alg = None
    if alg is None:
        logger.debug("token.rejected reason=unspecified_alg")
        raise UnspecifiedAlgorithmError("Signing method (alg) is unspecified.", token=token)

    try:
        token.method = registry.lookup(alg)
    except TokenError as exc:
        exc.token = token
        logger.debug("token.rejected reason=unrecognized_alg alg=%s", alg)
        raise

    expired = _is_expired(claims, current_time)

    key = key_resolver(token)

    try:
        token.method.verify(f"{header_segment}.{claims_segment}", signature, key)
    except Exception as exc:
        # Any failure from a method is a rejection.
        flags = ValidationFlag.SIGNATURE_INVALID
        message = str(exc)
        if expired:
            flags |= ValidationFlag.EXPIRED
            message += " (token is also expired)"
        logger.debug("token.rejected reason=signature_invalid alg=%s expired=%s", alg, expired)
        raise SignatureInvalidError(message, token=token, flags=flags) from exc

    if expired:
        logger.debug("token.rejected reason=expired alg=%s", alg)
        raise ExpiredTokenError("Token is expired.", token=token)

    token._mark_verified()
    return token
