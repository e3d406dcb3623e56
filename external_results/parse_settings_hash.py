"""Logic for fingerprinting the settings that shape a parse."""

import hashlib
import json
from typing import Any

# Sections that change which findings and problems a parse produces
PARSE_SECTIONS = ("schema", "parser")


def parse_settings_hash(config: dict[str, Any]) -> str:
    """Return a SHA-256 of the schema and parser settings.

    Logging and report settings are left out, so two runs with the same
    hash read the same file the same way.
    """
    settings = {name: config.get(name) or {} for name in PARSE_SECTIONS}
    canonical = json.dumps(settings, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
