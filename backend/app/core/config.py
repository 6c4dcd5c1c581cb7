"""
Settings loader

Goals
- Runs on Python 3.9+ (no `str | None` style annotations here)
- Built once at startup and never mutated afterwards (frozen)
- A messy .env must not break startup (extra ignore)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env + ignore unknown keys, immutable once built
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # --- Public links ---
    # Prefix used to build the retrieval URI returned to uploaders
    BASE_URI: str = "http://localhost/"

    # --- Listener ---
    HOST: str = "0.0.0.0"
    PORT: int = 80

    # TLS is switched on only when both are set
    CERT_FILE: Optional[str] = Field(default=None)
    KEY_FILE: Optional[str] = Field(default=None)

    # --- Storage ---
    STORAGE_DIR: str = "./storage/"

    # Browser tools may post uploads from another origin
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    @field_validator("BASE_URI")
    @classmethod
    def _trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @property
    def tls_enabled(self) -> bool:
        return bool(self.CERT_FILE and self.KEY_FILE)


settings = Settings()
