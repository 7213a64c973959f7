# src/soundcloud_client/core/config.py

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# The static host address for the API.
API_HOST = "api.soundcloud.com"


class Settings(BaseSettings):
    client_id: Optional[str] = Field(None, description="Registered application client id")
    api_host: str = Field(API_HOST)
    timeout: float = Field(20.0, gt=0)
    redirect_timeout: float = Field(10.0, gt=0)
    chunk_size: int = Field(64 * 1024, gt=0)
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_prefix="SOUNDCLOUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
