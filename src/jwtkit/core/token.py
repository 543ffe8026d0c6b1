from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from jwtkit.core.exceptions import SerializationError, SigningError
from jwtkit.core.segments import encode_segment
from jwtkit.core.values import TokenMap
from jwtkit.signing.base import SigningMethod

TOKEN_TYPE = "JWT"


def _json_compact(data: dict[str, Any]) -> bytes:
    return json.dumps(data, separators=(",", ":"), sort_keys=True, allow_nan=False).encode("utf-8")


@dataclass
class Token:
    """A compact signed token.

    ``signature`` is only populated by ``parse``. ``valid`` becomes true only
    when the parser's verification step succeeds; it has no setter.
    """

    header: TokenMap = field(default_factory=TokenMap)
    claims: TokenMap = field(default_factory=TokenMap)
    method: SigningMethod | None = None
    signature: str = ""
    _valid: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.header, TokenMap):
            self.header = TokenMap(self.header)
        if not isinstance(self.claims, TokenMap):
            self.claims = TokenMap(self.claims)

    @property
    def valid(self) -> bool:
        return self._valid

    def _mark_verified(self) -> None:
        self._valid = True

    def signing_string(self) -> str:
        parts = []
        for label, source in (("header", self.header), ("claims", self.claims)):
            try:
                parts.append(encode_segment(_json_compact(source)))
            except (TypeError, ValueError) as exc:
                raise SerializationError(f"Token {label} is not JSON serializable: {exc}") from exc
        return ".".join(parts)

    def signed_string(self, key: bytes) -> str:
        if self.method is None:
            raise SigningError("Token has no signing method.")
        signing_string = self.signing_string()
        signature = self.method.sign(signing_string, key)
        return f"{signing_string}.{signature}"


def new_token(method: SigningMethod) -> Token:
    return Token(
        header=TokenMap(typ=TOKEN_TYPE, alg=method.algorithm_id),
        claims=TokenMap(),
        method=method,
    )
