"""Application configuration."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOGIN_PASSWORD = "password123"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    debug: bool = False

    # Expected credential pair for the form login
    login_username: str = "admin"
    login_password: str = DEFAULT_LOGIN_PASSWORD

    # CORS
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Logging
    log_level: str = "INFO"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.environment == "production" and self.login_password == DEFAULT_LOGIN_PASSWORD:
            raise ValueError(
                "LOGIN_PASSWORD must be set in production environment"
            )

    @property
    def login_configured(self) -> bool:
        """True when both halves of the expected credential pair are set."""
        return bool(self.login_username) and bool(self.login_password)


settings = Settings()
