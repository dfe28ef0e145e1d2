"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str
    db_timeout: int
    log_level: str

    @property
    def cache_dir(self) -> Path:
        return self.data_dir / "cache"


def load_settings() -> Settings:
    """Build settings from ``INTAKE_*`` variables, falling back to defaults."""
    load_dotenv()

    data_dir = Path(os.getenv("INTAKE_DATA_DIR") or _DEFAULT_DATA_DIR)
    database_url = os.getenv("INTAKE_DATABASE_URL") or f"sqlite:///{data_dir / 'intake.db'}"
    return Settings(
        data_dir=data_dir,
        database_url=database_url,
        db_timeout=int(os.getenv("INTAKE_DB_TIMEOUT", "10")),
        log_level=os.getenv("INTAKE_LOG_LEVEL", "WARNING").upper(),
    )
