from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from jwtkit.core.exceptions import SegmentDecodingError, SignatureInvalidError, SigningError
from jwtkit.core.segments import decode_segment, encode_segment
from jwtkit.signing.pem import load_private_key, load_public_key
from jwtkit.signing.registry import register_signing_method


@dataclass(frozen=True)
class RSASigningMethod:
    """RSASSA-PKCS1-v1_5. Sign with a PEM private key, verify with a PEM public key."""

    name: str
    hash_type: type[hashes.HashAlgorithm]

    @property
    def algorithm_id(self) -> str:
        return self.name

    def _hash(self) -> Any:
        return self.hash_type()

    def sign(self, signing_string: str, key: bytes) -> str:
        try:
            private_key = load_private_key(key)
        except ValueError as exc:
            raise SigningError(f"{self.name} signing key is unusable: {exc}") from exc
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise SigningError(f"{self.name} requires an RSA private key")
        signature = private_key.sign(signing_string.encode("utf-8"), padding.PKCS1v15(), self._hash())
        return encode_segment(signature)

    def verify(self, signing_string: str, signature: str, key: bytes) -> None:
        try:
            public_key = load_public_key(key)
        except ValueError as exc:
            raise SignatureInvalidError(f"{self.name} verification key is unusable: {exc}") from exc
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise SignatureInvalidError(f"{self.name} requires an RSA public key")
        try:
            raw = decode_segment(signature)
            public_key.verify(raw, signing_string.encode("utf-8"), padding.PKCS1v15(), self._hash())
        except (SegmentDecodingError, InvalidSignature) as exc:
            raise SignatureInvalidError("Signature is invalid") from exc


RS256 = RSASigningMethod("RS256", hashes.SHA256)
RS384 = RSASigningMethod("RS384", hashes.SHA384)
RS512 = RSASigningMethod("RS512", hashes.SHA512)

for _method in (RS256, RS384, RS512):
    register_signing_method(_method.algorithm_id, _method)
