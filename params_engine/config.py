import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central config loaded from environment variables and optionally .env (local).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -------------------------
    # Display precision used when a caller passes no override
    # -------------------------
    digits: int = Field(2, alias="PARAMS_DIGITS", ge=0)
    ci_digits: int = Field(2, alias="PARAMS_CI_DIGITS", ge=0)
    p_digits: int = Field(3, alias="PARAMS_P_DIGITS", ge=0)

    # -------------------------
    # Extraction defaults
    # -------------------------
    ci: float = Field(0.95, alias="PARAMS_CI", gt=0, lt=1)
    iterations: int = Field(1000, alias="PARAMS_ITERATIONS", gt=0)

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = Field("WARNING", alias="PARAMS_LOG_LEVEL")


settings = Settings()


def configure_logging(level: str = None) -> logging.Logger:
    """Apply a level to the package logger. Handlers are left to the application."""
    logger = logging.getLogger("params_engine")
    logger.setLevel((level or settings.log_level).upper())
    return logger
