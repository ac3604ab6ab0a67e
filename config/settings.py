from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from relay.core.prompt import SYSTEM_INSTRUCTION


load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    def __init__(self) -> None:
        self.app_env: str = os.getenv("APP_ENV", "development")
        self.google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY") or None
        self.gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.9"))
        self.system_instruction: str = os.getenv("SYSTEM_INSTRUCTION", SYSTEM_INSTRUCTION)
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))
        self.static_dir: str = os.getenv("STATIC_DIR", "public")
        self.relay_url: str = os.getenv("RELAY_URL", "http://localhost:3000")
        self.request_timeout: Optional[float] = _optional_float("REQUEST_TIMEOUT")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
