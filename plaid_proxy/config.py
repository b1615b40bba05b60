"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Plaid API
    plaid_base_url: str = "https://sandbox.plaid.com"
    plaid_client_id: str = ""
    plaid_secret: str = ""

    # Link token constants
    plaid_client_name: str = "Plaid Demo App"
    plaid_client_user_id: str = "user-123"

    # Transactions
    transactions_window_days: int = 30

    # Service
    service_name: str = "plaid-proxy"
    log_level: str = "INFO"
    cors_allow_origins: List[str] = ["*"]

    # HTTP Client
    http_timeout_seconds: float = 10.0


settings = Settings()
