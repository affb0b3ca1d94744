"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Mail transport selection
    mail_transport: Literal["smtp", "console"] = "smtp"

    # SMTP configuration (Gmail defaults)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_ssl: bool = True  # False -> plain connection upgraded via STARTTLS

    # Sender identity and credential
    sender_email: str = ""
    sender_password: SecretStr = SecretStr("")  # Gmail app password
    sender_name: str = "CutLine App"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def sender_address(self) -> str:
        """From header value, e.g. 'CutLine App <app@example.com>'."""
        return f"{self.sender_name} <{self.sender_email}>"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
