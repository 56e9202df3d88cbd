"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from PAYMENTS_QUERY_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTS_QUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "payments-query"
    log_level: str = "INFO"

    # IANA zone used by SystemClock for now() and "current month"
    timezone: str = "UTC"


settings = Settings()
