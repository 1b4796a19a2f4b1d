"""
Geocoding provider implementations.
"""

from geocoding.providers.geoadmin import GeoAdmin, GeoAdminParams
from geocoding.providers.opencage import Opencage, OpencageParams
from geocoding.providers.openstreetmap import Openstreetmap, OpenstreetmapParams

__all__ = [
    "GeoAdmin",
    "GeoAdminParams",
    "Opencage",
    "OpencageParams",
    "Openstreetmap",
    "OpenstreetmapParams",
]
