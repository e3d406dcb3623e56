"""Logic for loading the YAML configuration of a parse run."""

from pathlib import Path
from typing import Any

import yaml

from external_results.load_results_document import XSD_FILE

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "schema": {
        "name": XSD_FILE,
        "validate": True,
    },
    "parser": {
        # Use the recovering XML parser for files that are not well-formed
        "recover": False,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
    "report": {
        "indent": 2,
    },
}


def merge_sections(
    defaults: dict[str, dict[str, Any]],
    user_config: dict[str, Any],
) -> dict[str, dict[str, Any]]:
    """Overlay user settings on the defaults, one section at a time.

    A section left empty in the YAML file (it loads as None) keeps its
    defaults. Unknown sections and sections that are not mappings are
    rejected.
    """
    config = {name: dict(settings) for name, settings in defaults.items()}
    for name, settings in user_config.items():
        if name not in config:
            msg = f"Unknown configuration section: {name}"
            raise ValueError(msg)
        if settings is None:
            continue
        if not isinstance(settings, dict):
            msg = f"Configuration section {name} must be a mapping"
            raise ValueError(msg)
        config[name].update(settings)
    return config


def load_config(path: str | None = None) -> dict[str, dict[str, Any]]:
    """Load configuration from a YAML file and merge it with defaults."""
    user_config: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return merge_sections(DEFAULT_CONFIG, user_config)
