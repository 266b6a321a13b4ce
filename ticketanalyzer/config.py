"""Configuration utilities.

Route codes, input/output paths and the log level can be set through the
environment (or a ``.env`` file); command line flags override them.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


@dataclass(slots=True)
class Settings:
    origin: str = os.getenv("ROUTE_ORIGIN", "VVO")
    destination: str = os.getenv("ROUTE_DESTINATION", "TLV")
    tickets_file: Path | None = _optional_path(os.getenv("TICKETS_FILE"))
    output_html: Path | None = _optional_path(os.getenv("OUTPUT_HTML"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
