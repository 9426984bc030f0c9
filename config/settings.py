"""
Configuration Management for the Urban Travel Health API
Loads environment variables and provides centralized settings
"""

import os
from typing import Dict, List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings and configuration"""

    # API Configuration
    API_TITLE = "Urban Travel Health API"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = "Travel health scores from real-time air quality and traffic congestion"
    API_HOST = "0.0.0.0"
    API_PORT = 8000

    # External API URLs
    NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
    WAQI_BASE_URL = "https://api.waqi.info"
    TOMTOM_BASE_URL = "https://api.tomtom.com"

    # Nominatim usage policy requires an identifying User-Agent
    GEOCODER_USER_AGENT = "HealthyTripAdvisor/1.0"

    # Logging
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS Settings (for frontend)
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8080",
    ]

    def __init__(self, **overrides):
        """
        Read credentials and tunables from the environment.

        Args:
            **overrides: Attribute values that replace whatever the
                environment provides (used by tests and scripts)
        """
        # External API Keys
        self.AQICN_TOKEN = os.getenv("AQICN_TOKEN", "")
        self.TOMTOM_API_KEY = os.getenv("TOMTOM_API_KEY", "")
        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

        # Chat completion
        self.OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

        # Outbound request limits (seconds)
        self.REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
        self.OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))

        # Location picker
        self.PLACE_SUGGESTION_LIMIT = int(os.getenv("PLACE_SUGGESTION_LIMIT", "6"))

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)

    @property
    def credentials(self) -> Dict[str, str]:
        """Provider credentials keyed by their environment variable name"""
        return {
            "AQICN_TOKEN": self.AQICN_TOKEN,
            "TOMTOM_API_KEY": self.TOMTOM_API_KEY,
            "OPENAI_API_KEY": self.OPENAI_API_KEY,
        }

    def missing_credentials(self) -> List[str]:
        """Names of provider credentials that are not set"""
        return [name for name, value in self.credentials.items() if not value]

    def validate_config(self) -> List[str]:
        """Validate configuration and warn about missing keys"""
        warnings = [
            f"{name} not set - health score requests will fail"
            for name in self.missing_credentials()
        ]

        if self.REQUEST_TIMEOUT <= 0:
            warnings.append("REQUEST_TIMEOUT must be positive")

        return warnings


# Create singleton instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings"""
    return settings
