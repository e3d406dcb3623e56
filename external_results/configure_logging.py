"""Logic for configuring logging from the loaded configuration."""

import logging
from typing import Any


def configure_logging(config: dict[str, Any]) -> int:
    """Configure the root logger and return the effective level."""
    settings = config.get("logging") or {}
    name = str(settings.get("level", "INFO")).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        msg = f"Unknown logging level: {name}"
        raise ValueError(msg)
    logging.basicConfig(level=level, format=settings.get("format"), force=True)
    return level
