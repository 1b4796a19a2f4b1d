"""
GeoAdmin provider, for geocoding in Switzerland exclusively.

Based on the Search API and the Identify Features API:
https://api3.geo.admin.ch/services/sdiservices.html

Defaults to the Swiss reference system LV95 (EPSG:2056) for input and
output coordinates. Be aware of the switched axis names: in LV95/LV03 the
API's `y` is the easting and `x` the northing.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from geocoding.base import BaseGeocoder, InputBounds, Point, format_coordinate
from geocoding.core import settings
from geocoding.core.utils.geo import (
    SpatialReference,
    as_spatial_reference,
    needs_lv03_bbox,
    wgs84_bounds_to_lv03,
)
from geocoding.schemas.geoadmin import GeoAdminForwardResponse, GeoAdminReverseResponse

logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = "zipcode,gg25,district,kantone,gazetteer,address,parcel"
DEFAULT_LIMIT = 50

# Register of Buildings and Dwellings
REVERSE_LAYER = "all:ch.bfs.gebaeude_wohnungs_register"


@dataclass(frozen=True)
class GeoAdminParams:
    """
    Search options for `GeoAdmin.forward_full`.

    Usage:
        bbox = InputBounds((2600967.75, 1197426.0), (2600969.75, 1197428.0))
        params = (
            GeoAdminParams("Seftigenstrasse Bern")
            .with_origins("address")
            .with_bbox(bbox)
            .build()
        )
    """

    searchtext: str
    origins: str = DEFAULT_ORIGINS
    bbox: Optional[InputBounds] = None
    limit: Optional[int] = DEFAULT_LIMIT

    def with_origins(self, origins: str) -> "GeoAdminParams":
        return replace(self, origins=origins)

    def with_bbox(self, bbox: InputBounds) -> "GeoAdminParams":
        return replace(self, bbox=bbox)

    def with_limit(self, limit: int) -> "GeoAdminParams":
        return replace(self, limit=limit)

    def build(self) -> "GeoAdminParams":
        return self


class GeoAdmin(BaseGeocoder):
    """
    GeoAdmin geocoder (api3.geo.admin.ch).

    Pros:
    - Free, no API key
    - Official Swiss address and building registers

    Cons:
    - Switzerland only
    - Native coordinates are Swiss projections

    Usage:
        geoadmin = GeoAdmin()
        geoadmin.forward("Seftigenstrasse 264, 3084 Wabern")
        # [Point(x=2600968.75, y=1197427.0)]

        GeoAdmin(sr="4326").forward("Seftigenstrasse 264, 3084 Wabern")
        # [Point(x=7.451352119445801, y=46.92793655395508)]
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        sr: Optional[Union[str, int, SpatialReference]] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize GeoAdmin geocoder.

        Args:
            endpoint: Base URL, including the trailing slash
            sr: Spatial reference for inputs and outputs (2056, 21781, 4326, 3857)
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        super().__init__(endpoint or settings.GEOADMIN_ENDPOINT, timeout=timeout)
        self.sr = as_spatial_reference(sr if sr is not None else settings.GEOADMIN_SR)

    def with_sr(self, sr: Union[str, int, SpatialReference]) -> "GeoAdmin":
        """Return a geocoder for the same endpoint using another spatial reference."""
        return GeoAdmin(endpoint=self.endpoint, sr=sr, timeout=self.timeout)

    @property
    def provider_name(self) -> str:
        return "geoadmin"

    @property
    def search_url(self) -> str:
        return f"{self.endpoint}SearchServer"

    @property
    def identify_url(self) -> str:
        return f"{self.endpoint}MapServer/identify"

    def forward(self, address: str) -> List[Point]:
        """
        Forward-geocode an address, returning at most one address match.

        Args:
            address: Address to search for

        Returns:
            Points in canonical order for the configured sr
        """
        query = [
            ("searchText", address),
            ("type", "locations"),
            ("origins", "address"),
            ("limit", "1"),
            ("sr", self.sr.value),
            ("geometryFormat", "geojson"),
        ]
        response = self._get(self.search_url, query, address=address)
        result = self._decode(response, GeoAdminForwardResponse, address=address)

        if not result.features:
            logger.debug(f"GeoAdmin: No results for {address}")
        return result.to_points(self.sr)

    def forward_full(self, params: GeoAdminParams) -> GeoAdminForwardResponse:
        """
        Forward-geocode with search options, returning the full response.

        A bounding box given in WGS84 or Web Mercator mode is converted to
        LV03 first, since the API filters in Swiss coordinates.
        """
        query: List[Tuple[str, str]] = [
            ("searchText", params.searchtext),
            ("type", "locations"),
            ("origins", params.origins),
            ("sr", self.sr.value),
            ("geometryFormat", "geojson"),
        ]

        if params.bbox is not None:
            bbox = params.bbox
            if needs_lv03_bbox(self.sr):
                bbox = wgs84_bounds_to_lv03(bbox)
            query.append(("bbox", str(bbox)))

        if params.limit is not None:
            query.append(("limit", str(params.limit)))

        response = self._get(self.search_url, query, address=params.searchtext)
        return self._decode(response, GeoAdminForwardResponse, address=params.searchtext)

    def _reverse_query(self, point: Point) -> List[Tuple[str, str]]:
        return [
            ("geometry", f"{format_coordinate(point.x)},{format_coordinate(point.y)}"),
            ("geometryType", "esriGeometryPoint"),
            ("layers", REVERSE_LAYER),
            ("mapExtent", "0,0,100,100"),
            ("imageDisplay", "100,100,100"),
            ("tolerance", "50"),
            ("geometryFormat", "geojson"),
            ("sr", self.sr.value),
            ("lang", "en"),
        ]

    def reverse_full(self, point: Point) -> GeoAdminReverseResponse:
        """Identify buildings near a point, returning the full response."""
        response = self._get(self.identify_url, self._reverse_query(point))
        return self._decode(response, GeoAdminReverseResponse)

    def reverse(self, point: Point) -> Optional[str]:
        """
        Reverse-geocode a point to "{street} {number}, {zip} {locality}".

        Returns:
            The address of the first building found, None if there is none
        """
        address = self.reverse_full(point).first_address()
        if address is None:
            logger.debug(f"GeoAdmin: No building found at {point.x}, {point.y}")
        return address
