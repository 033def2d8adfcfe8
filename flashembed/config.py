"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application and flash cookie settings."""

    app_name: str = Field(default="Flash Messages Demo")
    env: str = Field(default="dev")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    cookie_prefix: str = Field(default="flash")
    cookie_max_age: int = Field(default=60 * 60)
    cookie_path: str = Field(default="/")

    placement_tag: str = Field(default="<flashmessages>")
    fallback_tag: str = Field(default="</body>")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FLASH_",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def cookie_namespace(self) -> str:
        """Name prefix shared by every flash cookie, separator included."""
        return f"{self.cookie_prefix}_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
