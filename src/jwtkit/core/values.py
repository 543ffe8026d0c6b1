from __future__ import annotations

from typing import Any

from jwtkit.core.exceptions import ClaimTypeError


class TokenMap(dict):
    """JSON object holding header or claim values.

    The ``get_*`` accessors return ``None`` for absent keys and raise
    ``ClaimTypeError`` instead of coercing a value of the wrong type.
    """

    def get_string(self, name: str) -> str | None:
        value = self.get(name)
        if value is None or isinstance(value, str):
            return value
        raise ClaimTypeError(name, "a string", value)

    def get_number(self, name: str) -> int | float | None:
        value = self.get(name)
        if value is None:
            return None
        # bool is an int subclass but never a JSON number.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ClaimTypeError(name, "a number", value)
        return value

    def get_bool(self, name: str) -> bool | None:
        value = self.get(name)
        if value is None or isinstance(value, bool):
            return value
        raise ClaimTypeError(name, "a boolean", value)

    def get_mapping(self, name: str) -> dict[str, Any] | None:
        value = self.get(name)
        if value is None or isinstance(value, dict):
            return value
        raise ClaimTypeError(name, "an object", value)

    def get_list(self, name: str) -> list[Any] | None:
        value = self.get(name)
        if value is None or isinstance(value, list):
            return value
        raise ClaimTypeError(name, "an array", value)
