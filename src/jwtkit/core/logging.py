import logging
import os

_CONFIGURED = False
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_level(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip().upper()
    return getattr(logging, raw) if raw in _LEVELS else getattr(logging, default)


def configure_logging() -> None:
    """Configure the ``jwtkit`` loggers from ``LOG_LEVEL``.

    Token rejections are logged at DEBUG by the parser and registry;
    ``TOKEN_LOG_LEVEL=DEBUG`` surfaces them without making the rest of the
    service verbose.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level = _env_level("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    token_level = _env_level("TOKEN_LOG_LEVEL", logging.getLevelName(level))
    logging.getLogger("jwtkit").setLevel(level)
    logging.getLogger("jwtkit.core.parser").setLevel(token_level)
    logging.getLogger("jwtkit.signing.registry").setLevel(token_level)
    _CONFIGURED = True
