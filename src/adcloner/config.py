"""
Configuration management for AdCloner.
"""
import os
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()


class Config:
    """Application configuration."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent.parent
    TEMPLATES_DIR = PROJECT_ROOT / "templates"
    STATIC_DIR = PROJECT_ROOT / "static"

    # API Keys
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")

    # Model settings
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    OPENAI_TEMPERATURE: float = float(os.getenv("OPENAI_TEMPERATURE", "0.2"))
    OPENAI_TIMEOUT_S: float = float(os.getenv("OPENAI_TIMEOUT_S", "120"))
    OPENAI_BASE_URL: Optional[str] = os.getenv("OPENAI_BASE_URL") or None

    # Flask settings
    FLASK_ENV: str = os.getenv("FLASK_ENV", "development")
    FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "True").lower() == "true"
    FLASK_HOST: str = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("FLASK_PORT", "5000"))
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not cls.OPENAI_API_KEY:
            errors.append("OPENAI_API_KEY not set in environment")

        if cls.OPENAI_TIMEOUT_S <= 0:
            errors.append(f"Invalid OPENAI_TIMEOUT_S: {cls.OPENAI_TIMEOUT_S}. Must be positive")

        if not 0.0 <= cls.OPENAI_TEMPERATURE <= 2.0:
            errors.append(f"Invalid OPENAI_TEMPERATURE: {cls.OPENAI_TEMPERATURE}. Must be between 0 and 2")

        if not cls.TEMPLATES_DIR.exists():
            errors.append(f"Templates directory not found: {cls.TEMPLATES_DIR}")

        return errors

    @classmethod
    def is_valid(cls) -> bool:
        """Check if configuration is valid."""
        return len(cls.validate()) == 0

    @classmethod
    def require_api_key(cls) -> str:
        """
        Return the OpenAI credential or fail hard.

        Raises:
            ConfigurationError: If OPENAI_API_KEY is missing or blank
        """
        api_key = (cls.OPENAI_API_KEY or "").strip()
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY environment variable not set")
        return api_key

    @classmethod
    def get_cors_origins(cls) -> list[str]:
        """Parse CORS_ORIGINS into a list ("*" means any origin)."""
        origins = [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary (safe for logging)."""
        return {
            "flask_env": cls.FLASK_ENV,
            "flask_debug": cls.FLASK_DEBUG,
            "openai_model": cls.OPENAI_MODEL,
            "openai_timeout_s": cls.OPENAI_TIMEOUT_S,
            "openai_api_configured": cls.OPENAI_API_KEY is not None,
            "cors_origins": cls.get_cors_origins(),
            "log_level": cls.LOG_LEVEL,
        }
