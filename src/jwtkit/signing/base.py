from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SigningMethod(Protocol):
    """Capability every algorithm exposes to the token pipeline.

    ``sign`` raises ``SigningError`` for unusable keys. ``verify`` returns
    ``None`` on success and raises ``SignatureInvalidError`` for any mismatch,
    unusable key or undecodable signature, comparing in constant time. The
    parser treats any other exception from ``verify`` as a failed signature too.
    """

    @property
    def algorithm_id(self) -> str: ...

    def sign(self, signing_string: str, key: bytes) -> str: ...

    def verify(self, signing_string: str, signature: str, key: bytes) -> None: ...
