"""
Forward and reverse geocoding against several providers.

Provides a unified interface for multiple geocoding providers:
- GeoAdmin: Swiss federal geoportal (free, Switzerland only, Swiss grids)
- OpenCage: OpenCage Geocoding API (API key, daily quota)
- Openstreetmap: OpenStreetMap Nominatim (free, 1 req/sec limit)

Coordinates are always Points in (longitude/easting, latitude/northing)
order, whatever order a provider uses on the wire.

Usage:
    from geocoding import GeoAdmin, Openstreetmap, Point

    # Using specific provider
    GeoAdmin().forward("Seftigenstrasse 264, 3084 Wabern")
    Openstreetmap().reverse(Point(2.12870, 41.40139))

    # Using convenience function
    forward_geocode("Schwabing, München", provider="openstreetmap")
"""

from geocoding.base import (
    Point,
    InputBounds,
    Forward,
    Reverse,
    BaseGeocoder,
    GeocodingError,
    RequestError,
    DecodeError,
    HeaderConversionError,
    ForwardError,
    ReverseError,
)
from geocoding.core.utils.geo import SpatialReference
from geocoding.providers.geoadmin import GeoAdmin, GeoAdminParams
from geocoding.providers.opencage import Opencage, OpencageParams
from geocoding.providers.openstreetmap import Openstreetmap, OpenstreetmapParams
from geocoding.facade import get_geocoder, forward_geocode, reverse_geocode, compare_providers

__all__ = [
    # Geometry
    "Point",
    "InputBounds",
    "SpatialReference",
    # Contracts
    "Forward",
    "Reverse",
    "BaseGeocoder",
    # Errors
    "GeocodingError",
    "RequestError",
    "DecodeError",
    "HeaderConversionError",
    "ForwardError",
    "ReverseError",
    # Providers
    "GeoAdmin",
    "GeoAdminParams",
    "Opencage",
    "OpencageParams",
    "Openstreetmap",
    "OpenstreetmapParams",
    # Convenience functions
    "get_geocoder",
    "forward_geocode",
    "reverse_geocode",
    "compare_providers",
]
