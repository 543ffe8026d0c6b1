"""Compact signed tokens: build, sign, parse and validate."""

from jwtkit.core.exceptions import (
    ClaimTypeError,
    ExpiredTokenError,
    KeyResolutionError,
    MalformedTokenError,
    SegmentDecodingError,
    SerializationError,
    SignatureInvalidError,
    SigningError,
    TokenError,
    TokenNotPresentError,
    TokenValidationError,
    UnrecognizedAlgorithmError,
    UnspecifiedAlgorithmError,
    ValidationFlag,
)
from jwtkit.core.keys import key_id_resolver, static_key
from jwtkit.core.parser import KeyResolver, parse
from jwtkit.core.segments import decode_segment, encode_segment
from jwtkit.core.token import Token, new_token
from jwtkit.core.transport import bearer_token, parse_from_request
from jwtkit.core.values import TokenMap
from jwtkit.signing import (
    SigningMethod,
    SigningMethodRegistry,
    available_signing_methods,
    lookup_signing_method,
    register_signing_method,
)

__all__ = [
    "ClaimTypeError",
    "ExpiredTokenError",
    "KeyResolutionError",
    "KeyResolver",
    "MalformedTokenError",
    "SegmentDecodingError",
    "SerializationError",
    "SignatureInvalidError",
    "SigningError",
    "SigningMethod",
    "SigningMethodRegistry",
    "Token",
    "TokenError",
    "TokenMap",
    "TokenNotPresentError",
    "TokenValidationError",
    "UnrecognizedAlgorithmError",
    "UnspecifiedAlgorithmError",
    "ValidationFlag",
    "available_signing_methods",
    "bearer_token",
    "decode_segment",
    "encode_segment",
    "key_id_resolver",
    "lookup_signing_method",
    "new_token",
    "parse",
    "parse_from_request",
    "register_signing_method",
    "static_key",
]
