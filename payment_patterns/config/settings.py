"""Application settings using Pydantic for environment-based configuration."""
from functools import lru_cache
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``PAYMENT_*`` environment variables."""

    # Application Configuration
    app_name: str = Field(default="payment-patterns", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON (False = console)")

    # Strategy Processing Delays
    simulate_latency: bool = Field(
        default=True, description="Busy-wait for the processing delay of each strategy"
    )
    credit_card_delay_ms: int = Field(default=100, ge=0, description="Credit card delay (ms)")
    paypal_delay_ms: int = Field(default=200, ge=0, description="PayPal delay (ms)")
    bank_transfer_delay_ms: int = Field(default=500, ge=0, description="Bank transfer delay (ms)")

    # Order Pipeline Payment Simulator
    order_payment_seed: Optional[int] = Field(
        default=None, description="Seed for the order payment simulator (None = unseeded)"
    )
    credit_card_success_rate: float = Field(default=0.95, ge=0.0, le=1.0)
    debit_card_success_rate: float = Field(default=0.90, ge=0.0, le=1.0)
    paypal_success_rate: float = Field(default=0.98, ge=0.0, le=1.0)
    bank_transfer_success_rate: float = Field(default=0.85, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    def get_success_rates(self) -> Dict[str, float]:
        """Success rates of the order payment simulator keyed by payment type."""
        return {
            "CREDIT_CARD": self.credit_card_success_rate,
            "DEBIT_CARD": self.debit_card_success_rate,
            "PAYPAL": self.paypal_success_rate,
            "BANK_TRANSFER": self.bank_transfer_success_rate,
        }

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
