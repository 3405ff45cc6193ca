"""
Configuration settings for OilSync.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "OilSync"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./oilsync.db"
    database_echo: bool = False

    # Security
    secret_key: str = "fallback_secret_for_development"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    bcrypt_rounds: int = 12
    max_login_attempts: int = 5
    lockout_minutes: int = 30

    # OTP
    otp_expire_minutes: int = 5
    otp_max_attempts: int = 3

    # Email (SMTP)
    mail_server: Optional[str] = None
    mail_port: int = 587
    mail_username: Optional[str] = None
    mail_password: Optional[str] = None
    mail_from: str = "noreply@oilsync.com"
    mail_from_name: str = "OilSync Support"
    mail_starttls: bool = True
    mail_ssl_tls: bool = False

    # SMS (Twilio)
    twilio_account_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None
    twilio_phone_number: Optional[str] = None
    twilio_api_url: str = "https://api.twilio.com/2010-04-01"

    # Seed accounts
    admin_email: str = "admin@oilsync.com"
    admin_password: str = "admin123"
    technician_password: str = "tech123"
    seed_on_startup: bool = False

    # CORS
    cors_origins: list[str] = ["http://localhost:8080", "http://localhost:5173"]

    # API
    api_prefix: str = "/api"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def email_configured(self) -> bool:
        return bool(self.mail_server and self.mail_username and self.mail_password)

    @property
    def sms_configured(self) -> bool:
        return bool(self.twilio_account_sid and self.twilio_auth_token and self.twilio_phone_number)

    @property
    def database_backend(self) -> str:
        if self.database_url.startswith("postgresql"):
            return "postgresql"
        return "sqlite"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
