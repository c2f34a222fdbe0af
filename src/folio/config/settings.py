"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


COINGECKO_PUBLIC_URL = "https://api.coingecko.com/api/v3"
COINGECKO_PRO_URL = "https://pro-api.coingecko.com/api/v3"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Folio Tracker"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Holdings store
    database_url: str = "sqlite:///./folio.db"

    # Quote settlement currency; CURRENCY is accepted for older deployments
    settlement_currency: str = Field(
        default="USD",
        validation_alias=AliasChoices("settlement_currency", "currency"),
    )

    # "live" talks to Yahoo Finance / CoinGecko / Alpha Vantage, "stub" stays offline
    quote_provider: Literal["live", "stub"] = "live"

    # Quote cache lifetimes per asset class
    equity_quote_ttl_seconds: int = 900
    crypto_quote_ttl_seconds: int = 60

    http_timeout_seconds: float = 10.0

    coingecko_base_url: str = COINGECKO_PUBLIC_URL
    coingecko_api_key: Optional[str] = None

    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    alpha_vantage_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("alpha_vantage_api_key", "alpha_vantage_key"),
    )

    # Session tokens
    jwt_secret: str = "change-me-in-prod"
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7

    cors_origins: list[str] = ["*"]

    def get_settlement_currency(self) -> str:
        """Settlement currency as an uppercase ISO-4217 code."""
        return (self.settlement_currency or "USD").strip().upper()


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
