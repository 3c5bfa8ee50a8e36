"""Web service configuration from environment variables."""

import os

from dotenv import load_dotenv

# Populate os.environ from .env before any setting is read
load_dotenv()

DEFAULT_JWT_SECRET = "brown-eli-demo-secret-key-2024"


class WebConfig:
    """Configuration for web service."""

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Security
    JWT_SECRET: str = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = int(os.getenv("JWT_EXPIRE_HOURS", "24"))

    # Cookie settings
    COOKIE_NAME: str = os.getenv("COOKIE_NAME", "app_session_id")
    LEGACY_COOKIE_NAME: str = "demo_token"

    # Demo credentials (the only accepted login)
    DEMO_USERNAME: str = "admin"
    DEMO_PASSWORD: str = "admin"
    DEMO_DISPLAY_NAME: str = "Demo Administrator"
    DEMO_EMAIL: str = "admin@brown.edu"

    # CORS
    CORS_ORIGINS: list = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else []

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Storage
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Features
    LIVE_EVENTS_ENABLED: bool = os.getenv("LIVE_EVENTS_ENABLED", "true").lower() == "true"

    # Owner notifications
    NOTIFY_API_URL: str = os.getenv("NOTIFY_API_URL", "")
    NOTIFY_API_KEY: str = os.getenv("NOTIFY_API_KEY", "")

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def validate(cls) -> list[str]:
        """Validate configuration and return list of warnings."""
        warnings = []

        if cls.JWT_SECRET == DEFAULT_JWT_SECRET:
            if cls.is_production():
                raise ValueError("JWT_SECRET must be set in production!")
            warnings.append("Using default JWT_SECRET - not safe for production")

        if not cls.DATABASE_URL:
            warnings.append("DATABASE_URL not set - reads return empty data, writes fail")

        if not cls.NOTIFY_API_URL or not cls.NOTIFY_API_KEY:
            warnings.append("Notification service not configured - notify-owner will fail")

        return warnings


config = WebConfig()
