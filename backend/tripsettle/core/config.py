"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union
from decimal import Decimal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Unko Trip Settlement"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    # Money
    DEFAULT_CURRENCY: str = "CLP"
    BALANCE_TOLERANCE: Decimal = Decimal("0.005")  # Half a minor unit
    SPLIT_TOLERANCE: Decimal = Decimal("0.01")  # Allowed drift between custom shares and total
    AMOUNT_DECIMALS: int = 2  # Minor-unit precision used for presentation

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
