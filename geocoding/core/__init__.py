"""
Core module providing shared configuration and utilities.

- Configuration management (settings, environment variables)
- Utility functions (coordinate reference systems, distances)

Usage:
    from geocoding.core import settings
    from geocoding.core.utils import wgs84_to_lv03, haversine_distance
"""

from geocoding.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
