import logging
import os
from dataclasses import dataclass

DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    prompt: str = DEFAULT_PROMPT
    log_level: int = DEFAULT_LOG_LEVEL

    @classmethod
    def from_environ(cls, environ=None):
        """Read TINYSH_PROMPT and TINYSH_LOG_LEVEL; unknown levels mean WARNING."""
        if environ is None:
            environ = os.environ
        level = logging.getLevelName(environ.get("TINYSH_LOG_LEVEL", "").upper())
        if not isinstance(level, int):
            level = DEFAULT_LOG_LEVEL
        return cls(
            prompt=environ.get("TINYSH_PROMPT", DEFAULT_PROMPT),
            log_level=level,
        )


def setup_logging(settings):
    logger = logging.getLogger("tinysh")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger
