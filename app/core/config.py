from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Jupiter Content Feed API"
    env: str = "dev"
    log_level: str = "INFO"

    jupiter_api_base_url: str = "https://api.jup.ag"
    jupiter_api_key: str | None = None
    jupiter_http_timeout_seconds: int = 20

    observability_enabled: bool = True

    @model_validator(mode="after")
    def validate_upstream(self) -> "Settings":
        if not self.jupiter_api_base_url.startswith(("http://", "https://")):
            raise ValueError("jupiter_api_base_url must be an http(s) URL")
        if self.env == "prod" and not self.jupiter_api_key:
            raise ValueError("jupiter_api_key is required when env=prod")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
