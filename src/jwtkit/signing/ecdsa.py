from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature

from jwtkit.core.exceptions import SegmentDecodingError, SignatureInvalidError, SigningError
from jwtkit.core.segments import decode_segment, encode_segment
from jwtkit.signing.pem import load_private_key, load_public_key
from jwtkit.signing.registry import register_signing_method


@dataclass(frozen=True)
class ECDSASigningMethod:
    """ECDSA with the fixed-width ``r || s`` signature encoding.

    The key's curve must match the algorithm (P-256 for ES256 and so on).
    """

    name: str
    hash_type: type[hashes.HashAlgorithm]
    curve_name: str
    size: int

    @property
    def algorithm_id(self) -> str:
        return self.name

    def sign(self, signing_string: str, key: bytes) -> str:
        try:
            private_key = load_private_key(key)
        except ValueError as exc:
            raise SigningError(f"{self.name} signing key is unusable: {exc}") from exc
        if not isinstance(private_key, ec.EllipticCurvePrivateKey) or private_key.curve.name != self.curve_name:
            raise SigningError(f"{self.name} requires a {self.curve_name} private key")
        der = private_key.sign(signing_string.encode("utf-8"), ec.ECDSA(self.hash_type()))
        r, s = decode_dss_signature(der)
        return encode_segment(r.to_bytes(self.size, "big") + s.to_bytes(self.size, "big"))

    def verify(self, signing_string: str, signature: str, key: bytes) -> None:
        try:
            public_key = load_public_key(key)
        except ValueError as exc:
            raise SignatureInvalidError(f"{self.name} verification key is unusable: {exc}") from exc
        if not isinstance(public_key, ec.EllipticCurvePublicKey) or public_key.curve.name != self.curve_name:
            raise SignatureInvalidError(f"{self.name} requires a {self.curve_name} public key")
        try:
            raw = decode_segment(signature)
        except SegmentDecodingError as exc:
            raise SignatureInvalidError("Signature is invalid") from exc
        if len(raw) != 2 * self.size:
            raise SignatureInvalidError("Signature is invalid")
        r = int.from_bytes(raw[: self.size], "big")
        s = int.from_bytes(raw[self.size :], "big")
        try:
            public_key.verify(encode_dss_signature(r, s), signing_string.encode("utf-8"), ec.ECDSA(self.hash_type()))
        except InvalidSignature as exc:
            raise SignatureInvalidError("Signature is invalid") from exc


ES256 = ECDSASigningMethod("ES256", hashes.SHA256, "secp256r1", 32)
ES384 = ECDSASigningMethod("ES384", hashes.SHA384, "secp384r1", 48)
ES512 = ECDSASigningMethod("ES512", hashes.SHA512, "secp521r1", 66)

for _method in (ES256, ES384, ES512):
    register_signing_method(_method.algorithm_id, _method)
