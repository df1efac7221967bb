import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env", override=False)

_TRUTHY = {"1", "true", "yes", "y", "on"}


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    DEBUG: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings from the environment (and an optional project-root .env)."""
    values = {}
    if "LOG_LEVEL" in os.environ:
        values["LOG_LEVEL"] = os.environ["LOG_LEVEL"]
    if "DEBUG" in os.environ:
        values["DEBUG"] = os.environ["DEBUG"].strip().lower() in _TRUTHY
    return Settings(**values)
