from __future__ import annotations

from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization


def load_private_key(key: bytes) -> Any:
    """Load an unencrypted PEM private key; raises ``ValueError`` when unusable."""
    if not isinstance(key, (bytes, bytearray)):
        raise ValueError(f"PEM key must be bytes, got {type(key).__name__}")
    try:
        return serialization.load_pem_private_key(bytes(key), password=None)
    except (TypeError, UnsupportedAlgorithm) as exc:
        raise ValueError(str(exc)) from exc


def load_public_key(key: bytes) -> Any:
    """Load a PEM public key, deriving it from a PEM private key if needed."""
    if not isinstance(key, (bytes, bytearray)):
        raise ValueError(f"PEM key must be bytes, got {type(key).__name__}")
    if b"PRIVATE KEY" in key:
        return load_private_key(key).public_key()
    try:
        return serialization.load_pem_public_key(bytes(key))
    except UnsupportedAlgorithm as exc:
        raise ValueError(str(exc)) from exc
