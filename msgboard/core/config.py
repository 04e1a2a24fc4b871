"""Application configuration helpers."""

from functools import lru_cache
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


def _resolve_env_file() -> str:
    """Pick the appropriate .env file based on ENV variable."""
    env: Literal["dev", "prod", "test"] = os.getenv("ENV", "dev").lower()  # type: ignore[assignment]
    candidate = f".env.{env}"
    if os.path.exists(candidate):
        return candidate
    return ".env"


ENV_FILE = _resolve_env_file()
load_dotenv(ENV_FILE)


class Settings(BaseSettings):
    """Centralised configuration for the message board service."""

    HOST: str = Field("0.0.0.0", description="Address uvicorn listens on")
    PORT: int = Field(1066, description="Port uvicorn listens on")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")
    RELOAD: bool = Field(False, description="Enable uvicorn auto-reload")

    model_config = {
        "env_file": ENV_FILE,
        "case_sensitive": True,
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
