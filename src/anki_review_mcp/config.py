"""Configuration management using Pydantic settings."""

from functools import lru_cache
from typing import Literal
from urllib.parse import urlsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # AnkiConnect API
    anki_connect_host: str = Field(
        default="http://127.0.0.1", description="AnkiConnect host, including the scheme"
    )
    anki_connect_port: int = Field(default=8765, description="AnkiConnect port")
    anki_connect_version: int = Field(default=6, description="AnkiConnect API version")
    anki_connect_timeout: float = Field(
        default=30.0, gt=0, description="Timeout for a single AnkiConnect request in seconds"
    )

    # Note creation
    default_deck: str = Field(default="Default", description="Deck for cards created by add_card")
    default_model: str = Field(default="Basic", description="Note type for cards created by add_card")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )
    log_json: bool = Field(default=True, description="Render log lines as JSON")

    @property
    def anki_connect_url(self) -> str:
        """AnkiConnect endpoint built from host and port.

        A host that already names a port (``http://anki:9000``) is used as is.
        """
        host = self.anki_connect_host.rstrip("/")
        if "://" not in host:
            host = f"http://{host}"
        if urlsplit(host).port is not None:
            return host
        return f"{host}:{self.anki_connect_port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
