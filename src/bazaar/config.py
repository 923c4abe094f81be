"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_IMGBB_URL = "https://api.imgbb.com/1/upload"
DEFAULT_UPLOAD_TIMEOUT = 15.0


def default_database_path() -> str:
    """Return ~/.bazaar/bazaar.db, creating the directory if needed."""
    db_dir = Path.home() / ".bazaar"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "bazaar.db")


@dataclass(frozen=True)
class Settings:
    """Settings for the store and the image host.

    Values come from BAZAAR_* environment variables; anything unset keeps
    its default.
    """

    database_path: Optional[str] = None
    user_id: Optional[str] = None
    city: Optional[str] = None
    imgbb_key: Optional[str] = None
    imgbb_url: str = DEFAULT_IMGBB_URL
    upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        timeout = DEFAULT_UPLOAD_TIMEOUT
        raw_timeout = env.get("BAZAAR_UPLOAD_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"BAZAAR_UPLOAD_TIMEOUT must be a number, got '{raw_timeout}'")

        return cls(
            database_path=env.get("BAZAAR_DB_PATH") or None,
            user_id=env.get("BAZAAR_USER") or None,
            city=env.get("BAZAAR_CITY") or None,
            imgbb_key=env.get("BAZAAR_IMGBB_KEY") or None,
            imgbb_url=env.get("BAZAAR_IMGBB_URL") or DEFAULT_IMGBB_URL,
            upload_timeout=timeout,
        )
