"""
Configuration module for the invoice dashboard backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings:
    """Application settings loaded from environment variables."""

    # Supabase project; every query runs through its PostgREST API
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_PUBLISHABLE_KEY: str = os.getenv("SUPABASE_PUBLISHABLE_KEY", "")

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Local dashboard outside production; production lists its origins explicitly
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000"))
    CORS_ALLOWED_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ALLOWED_ORIGINS", ""))

    @property
    def SUPABASE_JWKS_URL(self) -> str:
        """Public keys for verifying the dashboard's access tokens."""
        if not self.SUPABASE_URL:
            return ""
        return f"{self.SUPABASE_URL.rstrip('/')}/auth/v1/.well-known/jwks.json"

    @classmethod
    def validate(cls) -> None:
        """
        Raises:
            ValueError: If the Supabase project is not configured.
        """
        missing = [
            key
            for key, value in (
                ("SUPABASE_URL", cls.SUPABASE_URL),
                ("SUPABASE_PUBLISHABLE_KEY", cls.SUPABASE_PUBLISHABLE_KEY),
            )
            if not value
        ]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "development"

    @classmethod
    def cors_origins(cls) -> List[str]:
        """Origins allowed to call the API from a browser."""
        return cls.CORS_ALLOWED_ORIGINS if cls.is_production() else cls.CORS_ORIGINS


settings = Settings()

# Tests set VALIDATE_CONFIG=false before importing the app
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        if not settings.is_development():
            raise
        print(f"Warning: {e}")
        print("   Queries will fail until SUPABASE_URL and SUPABASE_PUBLISHABLE_KEY are set.")
