from __future__ import annotations

from enum import IntFlag
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jwtkit.core.token import Token


class TokenError(ValueError):
    """Base class for every failure raised while building or parsing a token.

    ``token`` holds the partially parsed token when the failure happened after
    the header was decoded, otherwise ``None``.
    """

    def __init__(self, message: str, *, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


class MalformedTokenError(TokenError):
    """Raised when the token text does not have exactly three segments."""


class SegmentDecodingError(TokenError):
    """Raised when a segment is not valid base64url or not a JSON object."""


class UnspecifiedAlgorithmError(TokenError):
    """Raised when the header has no string ``alg`` entry."""


class UnrecognizedAlgorithmError(TokenError):
    """Raised when ``alg`` names a method missing from the registry."""


class KeyResolutionError(TokenError):
    """Raised by key resolvers that cannot supply a key for a token."""


class ValidationFlag(IntFlag):
    NONE = 0
    EXPIRED = 1
    SIGNATURE_INVALID = 2


class TokenValidationError(TokenError):
    """Raised when a well-formed token fails expiry or signature checks."""

    default_flags = ValidationFlag.NONE

    def __init__(
        self,
        message: str,
        *,
        token: Token | None = None,
        flags: ValidationFlag | None = None,
    ) -> None:
        super().__init__(message, token=token)
        self.flags = self.default_flags if flags is None else flags

    @property
    def expired(self) -> bool:
        return bool(self.flags & ValidationFlag.EXPIRED)

    @property
    def signature_invalid(self) -> bool:
        return bool(self.flags & ValidationFlag.SIGNATURE_INVALID)


class ExpiredTokenError(TokenValidationError):
    default_flags = ValidationFlag.EXPIRED


class SignatureInvalidError(TokenValidationError):
    default_flags = ValidationFlag.SIGNATURE_INVALID


class SerializationError(TokenError):
    """Raised when header or claims cannot be serialized to JSON."""


class SigningError(TokenError):
    """Raised by signing methods that cannot produce a signature."""


class ClaimTypeError(TokenError):
    """Raised by typed accessors when a value has an unexpected type."""

    def __init__(self, name: str, expected: str, value: Any) -> None:
        super().__init__(f"{name} must be {expected}, got {type(value).__name__}")
        self.name = name
        self.expected = expected


class TokenNotPresentError(TokenError):
    """Raised when a request carries no bearer token."""
