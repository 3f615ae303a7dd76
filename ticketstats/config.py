"""Configuration utilities.

Central place to load environment driven settings (input file, route filter, median mode).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(slots=True)
class Settings:
    tickets_file: Path = Path(os.getenv("TICKETS_FILE", "tickets.json"))
    route_origin: str = os.getenv("ROUTE_ORIGIN", "VVO")
    route_destination: str = os.getenv("ROUTE_DESTINATION", "TLV")
    legacy_integer_median: bool = _env_flag("LEGACY_INTEGER_MEDIAN")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
