from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the Swasthya health backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("SWASTHYA_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("SWASTHYA_DB_PATH") or (self.data_root / "swasthya.db")
        ).expanduser()
        # In production you MUST set SWASTHYA_JWT_SECRET. We fall back to a dev secret to keep local
        # demos easy, but this is not safe for public deployments.
        self.jwt_secret: str = os.environ.get("SWASTHYA_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("SWASTHYA_TOKEN_TTL_DAYS") or "7")

        # "development" exposes exception text in 500 responses.
        self.env: str = (os.environ.get("SWASTHYA_ENV") or "production").strip().lower()
        self.log_level: str = (os.environ.get("SWASTHYA_LOG_LEVEL") or "INFO").strip().upper()

        self.host: str = os.environ.get("SWASTHYA_HOST") or os.environ.get("HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("SWASTHYA_PORT") or os.environ.get("PORT") or "3001")

        cors = os.environ.get("SWASTHYA_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]

    @property
    def is_development(self) -> bool:
        return self.env == "development"


settings = Settings()
