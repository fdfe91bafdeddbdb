"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class LOSConfig(BaseSettings):
    """Loan-origination system endpoint and submission constants."""

    model_config = {"env_prefix": "LENDING_LOS_"}

    base_url: str = "http://localhost:8000"
    submit_path: str = "/apply"
    timeout_seconds: float = 30.0

    # Applications are created as zero-amount shells that staff complete later.
    loan_amount: str = "0.00"
    loan_rate: str = "0.00"
    contract_date: str = "2025-01-01"
    first_payment_date: str = "2025-01-01"
    loan_class: str = "loan.class.consumer"
    loan_type: str = "loan.type.installment"


class ContentConfig(BaseSettings):
    """Page content configuration."""

    model_config = {"env_prefix": "LENDING_CONTENT_"}

    # None uses config/content.yml at the repository root.
    content_path: str | None = None


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "LENDING_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    los: LOSConfig = Field(default_factory=LOSConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
