"""Environment-variable-based configuration for the command-line front-end."""

from __future__ import annotations

import os

DEFAULT_MODE: str = os.environ.get("LACTATE_PROTOCOL_MODE", "hr")
LOG_LEVEL: str = os.environ.get("LACTATE_LOG_LEVEL", "INFO").upper()
JSON_INDENT: int = int(os.environ.get("LACTATE_JSON_INDENT", "2"))
CURVE_SAMPLES: int = int(os.environ.get("LACTATE_CURVE_SAMPLES", "101"))
