"""
Geocoding facade providing a simple interface to all providers.

The caller always names the provider; nothing here picks one automatically.
"""

import logging
from typing import Dict, List, Literal, Optional

from geocoding.base import BaseGeocoder, Point
from geocoding.core.utils.geo import SpatialReference, haversine_distance
from geocoding.providers.geoadmin import GeoAdmin
from geocoding.providers.opencage import Opencage
from geocoding.providers.openstreetmap import Openstreetmap

logger = logging.getLogger(__name__)

ProviderType = Literal["geoadmin", "opencage", "openstreetmap"]

PROVIDERS = {
    "geoadmin": GeoAdmin,
    "opencage": Opencage,
    "openstreetmap": Openstreetmap,
}


def get_geocoder(provider: ProviderType = "openstreetmap", **kwargs) -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name ("geoadmin", "opencage", "openstreetmap")
        **kwargs: Constructor arguments (endpoint, sr, api_key, ...)

    Returns:
        Geocoder instance
    """
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown provider: {provider}. Choose from: {list(PROVIDERS.keys())}")

    return PROVIDERS[provider](**kwargs)


def forward_geocode(address: str, provider: ProviderType = "openstreetmap", **kwargs) -> List[Point]:
    """
    Forward-geocode an address with the named provider.

    Example:
        points = forward_geocode("Seftigenstrasse 264, 3084 Wabern", provider="geoadmin")
    """
    return get_geocoder(provider, **kwargs).forward(address)


def reverse_geocode(point: Point, provider: ProviderType = "openstreetmap", **kwargs) -> Optional[str]:
    """
    Reverse-geocode a (lon/easting, lat/northing) point with the named provider.

    Example:
        address = reverse_geocode(Point(2.12870, 41.40139), provider="openstreetmap")
    """
    return get_geocoder(provider, **kwargs).reverse(point)


def compare_providers(
    address: str,
    providers: Optional[List[str]] = None,
) -> Dict[str, List[Point]]:
    """
    Compare forward-geocoding results from multiple providers.

    GeoAdmin is queried in WGS84 so that all results are lon/lat and
    comparable. Useful for validating accuracy or finding discrepancies.

    Args:
        address: Address to geocode
        providers: Providers to compare (default: geoadmin, openstreetmap,
                   plus opencage when an API key is configured)

    Returns:
        Dict mapping provider name to its points
    """
    from geocoding.core import settings

    if providers is None:
        providers = ["geoadmin", "openstreetmap"]
        if settings.validate_opencage():
            providers.append("opencage")

    results = {}
    for provider in providers:
        kwargs = {"sr": SpatialReference.WGS84} if provider == "geoadmin" else {}
        results[provider] = get_geocoder(provider, **kwargs).forward(address)

    # Calculate distances between first results
    firsts = {k: v[0] for k, v in results.items() if v}
    names = list(firsts.keys())
    for i, p1 in enumerate(names):
        for p2 in names[i+1:]:
            a, b = firsts[p1], firsts[p2]
            dist = haversine_distance(a.y, a.x, b.y, b.x)
            logger.info(f"Distance {p1} vs {p2}: {dist:.1f}m")

    return results
