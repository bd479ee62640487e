from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App config
    app_name: str = "Social Gateway"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"  # json | console
    logging_config_path: Optional[str] = None

    # Downstream read/write service
    downstream_base_url: str
    downstream_timeout: float = 10.0
    forward_authorization: bool = False

    # JWT
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_issuer: Optional[str] = None
    jwt_audience: Optional[str] = None

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @field_validator("downstream_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are appended with a leading slash"""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("DOWNSTREAM_BASE_URL must be an http(s) URL")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return v


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process"""
    return Settings()
