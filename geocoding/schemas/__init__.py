"""
Pydantic models for provider responses.
"""

from geocoding.schemas.geoadmin import (
    GeoAdminForwardResponse,
    GeoAdminReverseResponse,
    LegacyGeoAdminForwardResponse,
    LegacyGeoAdminReverseResponse,
)
from geocoding.schemas.opencage import OpencageResponse
from geocoding.schemas.openstreetmap import OpenstreetmapResponse

__all__ = [
    "GeoAdminForwardResponse",
    "GeoAdminReverseResponse",
    "LegacyGeoAdminForwardResponse",
    "LegacyGeoAdminReverseResponse",
    "OpencageResponse",
    "OpenstreetmapResponse",
]
