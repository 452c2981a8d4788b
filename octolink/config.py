from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class OctolinkSettings(BaseSettings):
    log_level: LogLevel = Field("WARNING", validation_alias="OCTOLINK_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="OCTOLINK_LOG_RING_SIZE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> OctolinkSettings:
    return OctolinkSettings()
