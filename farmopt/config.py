"""
Application configuration using Pydantic settings.
"""
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Land Optimization Parameters
    average_crop_price: float = Field(
        default=1000.0,
        description="Average crop price per ton used for profit estimates"
    )
    cost_per_hectare: float = Field(
        default=500.0,
        description="Cultivation cost per hectare used for profit estimates"
    )
    marginal_product_step: float = Field(
        default=0.01,
        description="Finite difference step (hectares) for the marginal product of land"
    )

    # Yield Prediction
    prediction_random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the yield predictor's random factor (unset = fresh entropy)"
    )

    # Reference Data
    crop_catalog_path: Optional[str] = Field(
        default=None,
        description="Optional JSON file with crop profiles replacing the built-in catalog"
    )

    # Harvest History
    history_default_months: int = Field(
        default=12,
        description="Default number of months of generated harvest history"
    )
    history_max_months: int = Field(
        default=60,
        description="Maximum number of months of generated harvest history"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    rate_limit_requests: int = Field(
        default=100,
        description="Maximum requests per minute per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Farm Land Optimization API",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
