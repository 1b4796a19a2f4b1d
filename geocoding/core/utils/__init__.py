"""
Shared utility functions for the geocoding clients.

Modules:
- geo: Coordinate reconciliation (spatial references, LV03 approximation,
  CRS transforms, haversine distance)

Usage:
    from geocoding.core.utils import wgs84_to_lv03, haversine_distance
"""

from geocoding.core.utils.geo import (
    SpatialReference,
    as_spatial_reference,
    canonical_point,
    needs_lv03_bbox,
    wgs84_to_lv03,
    wgs84_bounds_to_lv03,
    haversine_distance,
    get_crs_transformer,
    transform_coordinates,
)

__all__ = [
    "SpatialReference",
    "as_spatial_reference",
    "canonical_point",
    "needs_lv03_bbox",
    "wgs84_to_lv03",
    "wgs84_bounds_to_lv03",
    "haversine_distance",
    "get_crs_transformer",
    "transform_coordinates",
]
