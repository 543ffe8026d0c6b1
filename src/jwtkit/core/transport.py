from __future__ import annotations

from typing import Any, Mapping

from jwtkit.core.exceptions import TokenNotPresentError
from jwtkit.core.parser import KeyResolver, parse
from jwtkit.core.token import Token

BEARER_PREFIX = "bearer "


def _authorization_header(headers: Mapping[str, str]) -> str | None:
    # Starlette and httpx headers are case-insensitive; plain dicts are not.
    value = headers.get("Authorization")
    if value is not None:
        return value
    for name, candidate in headers.items():
        if name.lower() == "authorization":
            return candidate
    return None


def bearer_token(carrier: Any) -> str:
    """Return the bearer token carried by a request or a header mapping."""
    headers = getattr(carrier, "headers", carrier)
    value = _authorization_header(headers) or ""
    if len(value) > len(BEARER_PREFIX) and value[: len(BEARER_PREFIX)].lower() == BEARER_PREFIX:
        return value[len(BEARER_PREFIX) :]
    raise TokenNotPresentError("No token present in request.")


def parse_from_request(carrier: Any, key_resolver: KeyResolver, **parse_kwargs: Any) -> Token:
    return parse(bearer_token(carrier), key_resolver, **parse_kwargs)
