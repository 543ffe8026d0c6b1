from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Any, Callable

from jwtkit.core.exceptions import SignatureInvalidError, SigningError
from jwtkit.core.segments import encode_segment
from jwtkit.signing.registry import register_signing_method


@dataclass(frozen=True)
class HMACSigningMethod:
    name: str
    digest: Callable[..., Any]

    @property
    def algorithm_id(self) -> str:
        return self.name

    def _mac(self, signing_string: str, key: bytes) -> str:
        raw = hmac.new(bytes(key), signing_string.encode("utf-8"), self.digest).digest()
        return encode_segment(raw)

    def sign(self, signing_string: str, key: bytes) -> str:
        if not isinstance(key, (bytes, bytearray)):
            raise SigningError(f"{self.name} key must be bytes, got {type(key).__name__}")
        if not key:
            raise SigningError(f"{self.name} key must not be empty")
        return self._mac(signing_string, key)

    def verify(self, signing_string: str, signature: str, key: bytes) -> None:
        if not isinstance(key, (bytes, bytearray)) or not key:
            raise SignatureInvalidError(f"{self.name} verification key is unusable")
        expected = self._mac(signing_string, key)
        # Comparing the encoded text also rejects non-canonical encodings of the same MAC.
        if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8", "surrogatepass")):
            raise SignatureInvalidError("Signature is invalid")


HS256 = HMACSigningMethod("HS256", hashlib.sha256)
HS384 = HMACSigningMethod("HS384", hashlib.sha384)
HS512 = HMACSigningMethod("HS512", hashlib.sha512)

for _method in (HS256, HS384, HS512):
    register_signing_method(_method.algorithm_id, _method)
