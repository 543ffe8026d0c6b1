from jwtkit.signing.base import SigningMethod
from jwtkit.signing.ecdsa import ES256, ES384, ES512, ECDSASigningMethod
from jwtkit.signing.hmac_sha import HS256, HS384, HS512, HMACSigningMethod
from jwtkit.signing.registry import (
    SigningMethodRegistry,
    available_signing_methods,
    default_registry,
    lookup_signing_method,
    register_signing_method,
)
from jwtkit.signing.rsa_pkcs1 import RS256, RS384, RS512, RSASigningMethod

__all__ = [
    "SigningMethod",
    "SigningMethodRegistry",
    "HMACSigningMethod",
    "RSASigningMethod",
    "ECDSASigningMethod",
    "HS256",
    "HS384",
    "HS512",
    "RS256",
    "RS384",
    "RS512",
    "ES256",
    "ES384",
    "ES512",
    "available_signing_methods",
    "default_registry",
    "lookup_signing_method",
    "register_signing_method",
]
