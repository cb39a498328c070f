"""Configuration management using Pydantic Settings"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "emi-calculator"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias="PORT")

    # Page
    static_dir: Path = Path(__file__).resolve().parent / "static"

    # Presentation
    currency_symbol: str = "₹"
    digit_grouping: Literal["indian", "international"] = "indian"

    # Input policy (enforced at the capture boundary, not by the engine)
    max_principal: float = 9_999_999
    max_rate_percent: float = 100
    max_tenure_months: int = 360
    require_positive_rate: bool = False


settings = Settings()
