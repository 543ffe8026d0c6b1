from jwtkit.core.config import Settings, get_settings
from jwtkit.core.exceptions import TokenError
from jwtkit.core.logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "TokenError",
    "configure_logging",
]
