"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Facility source
    facility_fetch_delay_seconds: float = 1.0  # simulated upstream latency

    # Result sizing
    default_result_limit: int = 10
    max_result_limit: int = 50

    # Rate limiting
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
