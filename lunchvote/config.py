from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv

from .venues.config import DEFAULT_VENUES, parse_venues

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    database_path: str = ":memory:"
    venues: List[Tuple[str, str]] = field(default_factory=lambda: list(DEFAULT_VENUES))
    log_level: str = "INFO"


def load_config() -> AppConfig:
    """Build the application config from environment variables."""
    raw_venues = os.getenv("LUNCHVOTE_VENUES", "").strip()
    return AppConfig(
        database_path=os.getenv("LUNCHVOTE_DB_PATH", ":memory:"),
        venues=parse_venues(raw_venues) if raw_venues else list(DEFAULT_VENUES),
        log_level=os.getenv("LUNCHVOTE_LOG_LEVEL", "INFO").upper(),
    )
