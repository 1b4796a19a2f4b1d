"""
Centralized configuration management for the geocoding clients.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from geocoding.core.config import settings

    # Access configuration
    print(settings.OPENCAGE_API_KEY)
    print(settings.REQUEST_TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # API Keys
    # ==========================================================================
    OPENCAGE_API_KEY: str = field(
        default_factory=lambda: os.getenv("OPENCAGE_API_KEY", "")
    )

    # ==========================================================================
    # Provider Endpoints
    # ==========================================================================
    GEOADMIN_ENDPOINT: str = field(
        default_factory=lambda: os.getenv(
            "GEOADMIN_ENDPOINT",
            "https://api3.geo.admin.ch/rest/services/api/"
        )
    )
    OPENCAGE_ENDPOINT: str = field(
        default_factory=lambda: os.getenv(
            "OPENCAGE_ENDPOINT",
            "https://api.opencagedata.com/geocode/v1/json"
        )
    )
    NOMINATIM_ENDPOINT: str = field(
        default_factory=lambda: os.getenv(
            "NOMINATIM_ENDPOINT",
            "https://nominatim.openstreetmap.org/"
        )
    )

    # ==========================================================================
    # GeoAdmin spatial reference (2056, 21781, 4326 or 3857)
    # ==========================================================================
    GEOADMIN_SR: str = field(
        default_factory=lambda: os.getenv("GEOADMIN_SR", "2056")
    )

    # ==========================================================================
    # HTTP
    # ==========================================================================
    USER_AGENT: str = field(
        default_factory=lambda: os.getenv("GEOCODING_USER_AGENT", "Python-Geocoding")
    )
    REQUEST_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "10"))
    )

    def validate_opencage(self) -> bool:
        """Check if the OpenCage API key is configured."""
        return bool(self.OPENCAGE_API_KEY)


# Singleton settings instance
settings = Settings()
