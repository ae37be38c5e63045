from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_DISHES_CSV = Path(__file__).resolve().parent / "data" / "dishes.csv"


@dataclass(frozen=True)
class AppConfig:
    session_secret: str = os.getenv("SESSION_SECRET", "palate-secret-change-in-production")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    dishes_csv: Path = Path(os.getenv("DISHES_CSV", str(_DEFAULT_DISHES_CSV)))
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    staff_password: str = os.getenv("STAFF_PASSWORD", "staff123")


DEFAULT_CONFIG = AppConfig()
