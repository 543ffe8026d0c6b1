from __future__ import annotations

import logging
import threading

from jwtkit.core.exceptions import UnrecognizedAlgorithmError
from jwtkit.signing.base import SigningMethod

logger = logging.getLogger(__name__)


class SigningMethodRegistry:
    """Allow-list mapping ``alg`` names to signing methods.

    Writes are serialized; reads go straight to the dict, which is safe once
    registration is done at import time.
    """

    def __init__(self) -> None:
        self._methods: dict[str, SigningMethod] = {}
        self._lock = threading.Lock()

    def register(self, name: str, method: SigningMethod) -> None:
        with self._lock:
            replaced = name in self._methods
            self._methods[name] = method
        logger.debug("signing_method.registered name=%s replaced=%s", name, replaced)

    def lookup(self, name: str) -> SigningMethod:
        method = self._methods.get(name)
        if method is None:
            raise UnrecognizedAlgorithmError(f"Unrecognized signing method: {name}")
        return method

    def names(self) -> list[str]:
        return sorted(self._methods)

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __len__(self) -> int:
        return len(self._methods)


default_registry = SigningMethodRegistry()


def register_signing_method(name: str, method: SigningMethod) -> None:
    default_registry.register(name, method)


def lookup_signing_method(name: str) -> SigningMethod:
    return default_registry.lookup(name)


def available_signing_methods() -> list[str]:
    return default_registry.names()
