"""
Geographic utility functions for coordinate calculations and transformations.

This module holds the coordinate-system reconciliation used by the providers:
- Spatial reference selection and axis-order canonicalization
- Approximate WGS84 to Swiss LV03 transformation (swisstopo polynomials)
- Exact Coordinate Reference System (CRS) transformations via pyproj
- Haversine distance calculation (meters, feet, kilometers, miles)

Usage:
    from geocoding.core.utils.geo import wgs84_to_lv03, haversine_distance

    # Approximate LV03 easting/northing for a WGS84 point
    lv03 = wgs84_to_lv03(Point(7.43863, 46.95108))

    # Calculate distance in meters
    distance_m = haversine_distance(46.95, 7.44, 46.93, 7.45)

    # Exact transform WGS84 -> LV95
    e, n = transform_coordinates(7.43863, 46.95108, "EPSG:4326", "EPSG:2056")
"""

import math
from enum import Enum
from functools import lru_cache
from typing import Literal, Tuple, Union

from geocoding.base import InputBounds, Point

# Earth radius constants
EARTH_RADIUS_METERS = 6_371_000
EARTH_RADIUS_FEET = 20_902_231
EARTH_RADIUS_KM = 6_371
EARTH_RADIUS_MILES = 3_958.8

# Unit type for type hints
DistanceUnit = Literal['meters', 'feet', 'kilometers', 'miles']

# Bern observatory in sexagesimal seconds, origin of the LV03 polynomials
LV03_LON_OFFSET_ARCSEC = 26782.5
LV03_LAT_OFFSET_ARCSEC = 169028.66

# The polynomials yield LV95-sized values; LV03 drops the leading 2 / 1
LV95_EASTING_OFFSET = 2_000_000.0
LV95_NORTHING_OFFSET = 1_000_000.0


class SpatialReference(str, Enum):
    """Spatial references accepted by the GeoAdmin API (`sr` parameter)."""
    LV95 = "2056"
    LV03 = "21781"
    WGS84 = "4326"
    WEB_MERCATOR = "3857"

    @property
    def is_projected_swiss(self) -> bool:
        """LV95 and LV03 report easting in `y` and northing in `x`."""
        return self in (SpatialReference.LV95, SpatialReference.LV03)


def as_spatial_reference(sr: Union[str, int, SpatialReference]) -> SpatialReference:
    """
    Coerce a user supplied `sr` value.

    Raises:
        ValueError: If the reference system is not one GeoAdmin supports
    """
    try:
        return SpatialReference(str(getattr(sr, "value", sr)))
    except ValueError:
        supported = [s.value for s in SpatialReference]
        raise ValueError(f"Unsupported spatial reference: {sr}. Choose from: {supported}")


def canonical_point(sr: SpatialReference, x: float, y: float) -> Point:
    """
    Build a canonical Point from GeoAdmin's `x` / `y` attributes.

    In the Swiss projections `y` is west-east and `x` is south-north, so the
    fields are swapped. WGS84 and Web Mercator already report x = lon-like.
    """
    if sr.is_projected_swiss:
        return Point(y, x)
    return Point(x, y)


def needs_lv03_bbox(sr: SpatialReference) -> bool:
    """Search bounding boxes must be in Swiss coordinates for WGS84 / Web Mercator callers."""
    return sr in (SpatialReference.WGS84, SpatialReference.WEB_MERCATOR)


def wgs84_to_lv03(point: Point) -> Point:
    """
    Approximately transform a WGS84 point to LV03 (EPSG:21781).

    Uses the swisstopo approximate formulas ("Approximate solution for the
    transformation CH1903 <=> WGS84"), accurate to about a meter inside
    Switzerland. Pure function of (lon, lat).

    Args:
        point: WGS84 Point (x = longitude, y = latitude) in decimal degrees

    Returns:
        Point(easting, northing) in LV03 meters
    """
    lam = (point.x * 3600.0 - LV03_LON_OFFSET_ARCSEC) / 10000.0
    phi = (point.y * 3600.0 - LV03_LAT_OFFSET_ARCSEC) / 10000.0

    easting = (
        2600072.37
        + 211455.93 * lam
        - 10938.51 * lam * phi
        - 0.36 * lam * phi ** 2
        - 44.54 * lam ** 3
    )
    northing = (
        1200147.07
        + 308807.95 * phi
        + 3745.25 * lam ** 2
        + 76.63 * phi ** 2
        - 194.56 * lam ** 2 * phi
        + 119.79 * phi ** 3
    )
    return Point(easting - LV95_EASTING_OFFSET, northing - LV95_NORTHING_OFFSET)


def wgs84_bounds_to_lv03(bounds: InputBounds) -> InputBounds:
    """
    Transform both corners of a WGS84 bounding box to LV03.

    Corners are transformed independently and kept in their given roles;
    they are not re-sorted afterwards.
    """
    return InputBounds(
        wgs84_to_lv03(bounds.minimum_lonlat),
        wgs84_to_lv03(bounds.maximum_lonlat),
    )


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit = 'meters'
) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula which gives accurate results for most distances.

    Args:
        lat1: Latitude of first point in decimal degrees
        lon1: Longitude of first point in decimal degrees
        lat2: Latitude of second point in decimal degrees
        lon2: Longitude of second point in decimal degrees
        unit: Unit for the result ('meters', 'feet', 'kilometers', 'miles')

    Returns:
        Distance between the two points in the specified unit
    """
    # Select earth radius based on unit
    earth_radius = {
        'meters': EARTH_RADIUS_METERS,
        'feet': EARTH_RADIUS_FEET,
        'kilometers': EARTH_RADIUS_KM,
        'miles': EARTH_RADIUS_MILES,
    }.get(unit, EARTH_RADIUS_METERS)

    # Convert to radians
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return earth_radius * c


@lru_cache(maxsize=4)
def get_crs_transformer(
    from_crs: str = "EPSG:4326",
    to_crs: str = "EPSG:2056"
) -> "Transformer":
    """
    Get a cached CRS transformer for coordinate transformations.

    Common CRS codes:
    - EPSG:2056: CH1903+ / LV95 - GeoAdmin default
    - EPSG:21781: CH1903 / LV03 - legacy Swiss grid
    - EPSG:4326: WGS84 (lat/lng) - standard GPS coordinates
    - EPSG:3857: Web Mercator - used by web maps

    Args:
        from_crs: Source coordinate reference system
        to_crs: Target coordinate reference system

    Returns:
        pyproj Transformer instance (cached)

    Raises:
        ImportError: If pyproj is not installed
    """
    try:
        from pyproj import Transformer
    except ImportError:
        raise ImportError(
            "pyproj package required for CRS transformations. "
            "Install with: pip install pyproj"
        )

    return Transformer.from_crs(from_crs, to_crs, always_xy=True)


def transform_coordinates(
    x: float,
    y: float,
    from_crs: str = "EPSG:4326",
    to_crs: str = "EPSG:2056"
) -> Tuple[float, float]:
    """
    Transform coordinates between coordinate reference systems.

    Unlike `wgs84_to_lv03` this is a full geodetic transformation.

    Args:
        x: X coordinate (easting/longitude)
        y: Y coordinate (northing/latitude)
        from_crs: Source CRS (default: WGS84)
        to_crs: Target CRS (default: LV95)

    Returns:
        Tuple of (x, y) in the target CRS, easting/longitude first

    Example:
        >>> e, n = transform_coordinates(7.451352119445801, 46.92793655395508)
        >>> round(e), round(n)
        (2600969, 1197427)
    """
    transformer = get_crs_transformer(from_crs, to_crs)
    return transformer.transform(x, y)
