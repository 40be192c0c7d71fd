from __future__ import annotations

import os
from typing import List


class Settings:
    """Centralized configuration for the diabetes log backend."""

    def __init__(self) -> None:
        self.host: str = os.environ.get("SHATHI_HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("SHATHI_PORT") or "8000")
        self.log_level: str = os.environ.get("SHATHI_LOG_LEVEL") or "info"

        # Single demo identity injected as the owner of every record.
        self.demo_handle: str = os.environ.get("SHATHI_DEMO_HANDLE") or "demo"
        self.demo_secret: str = os.environ.get("SHATHI_DEMO_SECRET") or "demo"

        cors = os.environ.get("SHATHI_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
