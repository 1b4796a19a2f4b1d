"""
Response schemas for the GeoAdmin API.

Search: https://api3.geo.admin.ch/services/sdiservices.html#search
Identify: https://api3.geo.admin.ch/services/sdiservices.html#identify-features

The GeoJSON shapes (``geometryFormat=geojson``) are the ones the provider
decodes. The flat ``results[].attrs`` / ``results[].attributes`` shapes are
the older format and are kept only as deprecated models.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from geocoding.base import Point
from geocoding.core.utils.geo import SpatialReference, canonical_point


class Geometry(BaseModel):
    """GeoJSON geometry."""

    type: str = Field(..., description="Geometry type, e.g. 'Point'")
    coordinates: Any = Field(..., description="Coordinates in the requested sr")


class ForwardLocationProperties(BaseModel):
    """Search result attributes."""

    model_config = ConfigDict(populate_by_name=True)

    origin: str
    geom_quadindex: str
    weight: Optional[int] = None
    rank: int
    detail: str
    lat: float
    lon: float
    num: Optional[int] = None
    x: float = Field(..., description="North-south in LV95/LV03, longitude in WGS84")
    y: float = Field(..., description="West-east in LV95/LV03, latitude in WGS84")
    label: str
    zoomlevel: int
    layer_bod_id: Optional[str] = Field(None, alias="layerBodId")
    feature_id: Optional[str] = Field(None, alias="featureId")
    geodist: Optional[float] = Field(None, alias="@geodist")
    geom_st_box2d: Optional[str] = None


class GeoAdminForwardLocation(BaseModel):
    """A single search result feature."""

    type: str = "Feature"
    id: Optional[int] = None
    bbox: Optional[List[float]] = None
    geometry: Optional[Geometry] = None
    properties: ForwardLocationProperties


class GeoAdminForwardResponse(BaseModel):
    """
    The GeoJSON response returned by a SearchServer request.

    ```json
    {
      "type": "FeatureCollection",
      "features": [
        {
          "type": "Feature",
          "id": 1420809,
          "bbox": [2600968.75, 1197427.0, 2600968.75, 1197427.0],
          "geometry": {"type": "Point", "coordinates": [2600968.75, 1197427.0]},
          "properties": {
            "origin": "address",
            "geom_quadindex": "021300220302203002031",
            "weight": 1512,
            "zoomlevel": 10,
            "lon": 7.451352119445801,
            "detail": "seftigenstrasse 264 3084 wabern 355 koeniz ch be",
            "rank": 7,
            "lat": 46.92793655395508,
            "num": 264,
            "y": 2600968.75,
            "x": 1197427.0,
            "label": "Seftigenstrasse 264 <b>3084 Wabern</b>"
          }
        }
      ]
    }
    ```
    """

    type: str = "FeatureCollection"
    bbox: Optional[List[float]] = None
    features: List[GeoAdminForwardLocation] = Field(default_factory=list)

    def to_points(self, sr: SpatialReference) -> List[Point]:
        """Canonical points for every feature, given the sr the request used."""
        return [canonical_point(sr, f.properties.x, f.properties.y) for f in self.features]


class ReverseLocationAttributes(BaseModel):
    """Register of Buildings and Dwellings attributes."""

    gdenr: int
    gdename: str
    strname1: str
    strname_de: Optional[str] = None
    strname_fr: Optional[str] = None
    strname_rm: Optional[str] = None
    strname_it: Optional[str] = None
    gdekt: str
    label: str
    gstat: int
    egid: int
    dstrid: int
    plz6: int
    bgdi_created: str
    plz4: int
    plzname: str
    deinr: str

    def format_address(self) -> str:
        return f"{self.strname1} {self.deinr}, {self.plz4} {self.plzname}"


class GeoAdminReverseLocation(BaseModel):
    """A single identify result feature."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str = "Feature"
    feature_id: str = Field(..., alias="featureId")
    layer_bod_id: str = Field(..., alias="layerBodId")
    layer_name: str = Field(..., alias="layerName")
    bbox: Optional[List[float]] = None
    geometry: Optional[Geometry] = None
    properties: ReverseLocationAttributes


class GeoAdminReverseResponse(BaseModel):
    """
    The GeoJSON response returned by a MapServer/identify request.

    ```json
    {
      "results": [
        {
          "type": "Feature",
          "id": "1272199_0",
          "featureId": "1272199_0",
          "layerBodId": "ch.bfs.gebaeude_wohnungs_register",
          "layerName": "Register of Buildings and Dwellings",
          "properties": {
            "gdename": "K\\u00f6niz",
            "strname1": "Seftigenstrasse",
            "plz4": 3084,
            "plzname": "Wabern",
            "deinr": "264",
            ...
          }
        }
      ]
    }
    ```
    """

    results: List[GeoAdminReverseLocation] = Field(default_factory=list)

    def first_address(self) -> Optional[str]:
        if not self.results:
            return None
        return self.results[0].properties.format_address()


# ==========================================================================
# Deprecated flat JSON shapes (requests without geometryFormat=geojson)
# ==========================================================================

class LegacyGeoAdminForwardLocation(BaseModel):
    """Deprecated: a search result in the flat ``results[].attrs`` shape."""

    id: int
    weight: Optional[int] = None
    attrs: ForwardLocationProperties

    model_config = ConfigDict(populate_by_name=True)


class LegacyGeoAdminForwardResponse(BaseModel):
    """
    Deprecated: the flat SearchServer response.

    Identical attributes to the GeoJSON shape, but nested under
    ``results[].attrs`` and with ``weight`` beside rather than inside them.
    """

    results: List[LegacyGeoAdminForwardLocation] = Field(default_factory=list)

    def to_points(self, sr: SpatialReference) -> List[Point]:
        return [canonical_point(sr, r.attrs.x, r.attrs.y) for r in self.results]


class LegacyGeoAdminReverseLocation(BaseModel):
    """Deprecated: an identify result in the flat ``results[].attributes`` shape."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    feature_id: str = Field(..., alias="featureId")
    layer_bod_id: str = Field(..., alias="layerBodId")
    layer_name: str = Field(..., alias="layerName")
    attributes: ReverseLocationAttributes


class LegacyGeoAdminReverseResponse(BaseModel):
    """Deprecated: the flat identify response."""

    results: List[LegacyGeoAdminReverseLocation] = Field(default_factory=list)

    def first_address(self) -> Optional[str]:
        if not self.results:
            return None
        return self.results[0].attributes.format_address()
