from __future__ import annotations

from typing import Mapping

from jwtkit.core.exceptions import ClaimTypeError, KeyResolutionError
from jwtkit.core.parser import KeyResolver
from jwtkit.core.token import Token


def static_key(key: bytes) -> KeyResolver:
    def resolve(_token: Token) -> bytes:
        return key

    return resolve


def key_id_resolver(keys: Mapping[str, bytes]) -> KeyResolver:
    """Resolve the verification key from the header ``kid``."""

    def resolve(token: Token) -> bytes:
        try:
            key_id = token.header.get_string("kid")
        except ClaimTypeError as exc:
            raise KeyResolutionError(str(exc), token=token) from exc
        if key_id is None:
            raise KeyResolutionError("Token header has no key id (kid).", token=token)
        try:
            return keys[key_id]
        except KeyError as exc:
            raise KeyResolutionError(f"Unknown key id: {key_id}", token=token) from exc

    return resolve
