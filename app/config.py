"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Transplantify Directory"
    API_V1_PREFIX: str = "/api/v1"
    PORT: int = 8000

    # CORS - the single-page frontend
    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000", "http://localhost:5173"]'

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_QUIET_LIBRARIES: str = "PIL,multipart"  # held at WARNING

    # Simulated network latency (milliseconds)
    LATENCY_SCALE: float = 1.0  # 0 disables every delay
    LATENCY_BOOTSTRAP_MS: int = 1000
    LATENCY_READ_MS: int = 200
    LATENCY_AUTH_MS: int = 500
    LATENCY_LOGOUT_MS: int = 200
    LATENCY_SUBMIT_MS: int = 400
    LATENCY_MODERATION_MS: int = 300
    LATENCY_CLAIM_APPROVAL_MS: int = 500
    LATENCY_SAVE_MS: int = 500
    LATENCY_DELETE_MS: int = 300
    LATENCY_UPLOAD_MS: int = 800
    LATENCY_FAVORITE_MS: int = 200
    LATENCY_NEWSLETTER_MS: int = 300
    LATENCY_PAYMENT_MS: int = 1500

    # Media
    MEDIA_BASE_URL: str = "https://storage.transplantify.example.com/uploads"
    MAX_UPLOAD_SIZE_MB: int = 5
    PREMIUM_GALLERY_LIMIT: int = 5

    # Seed session: role of the user logged in at boot ("" for nobody)
    SEED_SESSION_ROLE: str = "admin"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from JSON string."""
        try:
            return json.loads(self.BACKEND_CORS_ORIGINS)
        except json.JSONDecodeError:
            return ["http://localhost:3000"]


settings = Settings()
