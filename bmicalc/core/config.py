# bmicalc/core/config.py
from typing import Optional
from dotenv import load_dotenv

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

load_dotenv()

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    PORT: int = Field(8000)
    LOG_LEVEL: str = Field("INFO")
    SERVICE_NAME: str = Field("bmi-calculator")
    SERVICE_VERSION: str = Field("1.0.0")
    # False keeps the lenient guards that let unparseable numbers through as NaN
    STRICT_NUMBER_PARSING: bool = Field(True)

    model_config = {
        "env_file": None,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("LOG_LEVEL")
    def known_level(cls, v):
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
