"""
OpenStreetMap Nominatim provider.

Free geocoding using OpenStreetMap data.
https://nominatim.org/release-docs/develop/api/Overview/

See the usage policy (https://operations.osmfoundation.org/policies/nominatim/):
at most 1 request per second and an identifying User-Agent.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from geocoding.base import BaseGeocoder, InputBounds, Point, format_coordinate
from geocoding.core import settings
from geocoding.schemas.openstreetmap import OpenstreetmapResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenstreetmapParams:
    """
    Search options for `Openstreetmap.forward_full`.

    Usage:
        params = (
            OpenstreetmapParams("UCL CASA")
            .with_addressdetails(True)
            .with_viewbox(InputBounds((-0.13806939, 51.51989264), (-0.13427138, 51.52319711)))
            .build()
        )
    """

    query: str
    addressdetails: bool = False
    viewbox: Optional[InputBounds] = None

    def with_addressdetails(self, addressdetails: bool) -> "OpenstreetmapParams":
        return replace(self, addressdetails=addressdetails)

    def with_viewbox(self, viewbox: InputBounds) -> "OpenstreetmapParams":
        return replace(self, viewbox=viewbox)

    def build(self) -> "OpenstreetmapParams":
        return self


class Openstreetmap(BaseGeocoder):
    """
    Nominatim (OpenStreetMap) geocoder.

    Pros:
    - Free, no API key
    - Good global coverage
    - Open data

    Cons:
    - Strict usage policy (1 request/second)
    - Variable accuracy

    Usage:
        osm = Openstreetmap()
        osm.forward("Schwabing, München")
        # [Point(x=11.5761796, y=48.1599218)]
    """

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize Nominatim geocoder.

        Args:
            endpoint: Base URL, including the trailing slash
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        super().__init__(endpoint or settings.NOMINATIM_ENDPOINT, timeout=timeout)

    @property
    def provider_name(self) -> str:
        return "openstreetmap"

    def forward(self, address: str) -> List[Point]:
        """
        Forward-geocode an address.

        Returns:
            Points as (lon, lat), in Nominatim's ranking order
        """
        query = [("q", address), ("format", "geojson")]
        response = self._get(f"{self.endpoint}search", query, address=address)
        result = self._decode(response, OpenstreetmapResponse, address=address)

        if not result.features:
            logger.debug(f"Nominatim: No results for {address}")
        return result.to_points()

    def forward_full(self, params: OpenstreetmapParams) -> OpenstreetmapResponse:
        """Forward-geocode with search options, returning the full GeoJSON response."""
        query: List[Tuple[str, str]] = [
            ("q", params.query),
            ("format", "geojson"),
            ("addressdetails", "1" if params.addressdetails else "0"),
        ]
        if params.viewbox is not None:
            query.append(("viewbox", str(params.viewbox)))

        response = self._get(f"{self.endpoint}search", query, address=params.query)
        return self._decode(response, OpenstreetmapResponse, address=params.query)

    def reverse_full(self, point: Point) -> OpenstreetmapResponse:
        """Reverse-geocode a (lon, lat) point, returning the full GeoJSON response."""
        query = [
            ("lon", format_coordinate(point.x)),
            ("lat", format_coordinate(point.y)),
            ("format", "geojson"),
        ]
        response = self._get(f"{self.endpoint}reverse", query)
        return self._decode(response, OpenstreetmapResponse)

    def reverse(self, point: Point) -> Optional[str]:
        """
        Reverse-geocode a (lon, lat) point.

        Returns:
            The display name of the match, None if Nominatim found nothing
        """
        result = self.reverse_full(point)
        if result.error:
            logger.debug(f"Nominatim: {result.error} at {point.x}, {point.y}")
        return result.first_display_name()
