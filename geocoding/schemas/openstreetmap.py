"""
Response schemas for the OpenStreetMap Nominatim API (``format=geojson``).

See https://nominatim.org/release-docs/develop/api/Search/#geojson
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from geocoding.base import Point


class AddressDetails(BaseModel):
    """Address breakdown, present when ``addressdetails=1``."""

    model_config = ConfigDict(extra="allow")

    house_number: Optional[str] = None
    road: Optional[str] = None
    neighbourhood: Optional[str] = None
    suburb: Optional[str] = None
    city_district: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    continent: Optional[str] = None
    construction: Optional[str] = None
    public_building: Optional[str] = None


class ResultProperties(BaseModel):
    """Geocoding result properties."""

    place_id: int
    osm_type: str
    osm_id: int
    display_name: str
    place_rank: int
    category: str
    type: str
    importance: Optional[float] = None
    address: Optional[AddressDetails] = None


class ResultGeometry(BaseModel):
    """A result geometry; coordinates are already (lon, lat)."""

    type: str
    coordinates: Tuple[float, float]


class OpenstreetmapResult(BaseModel):
    """A geocoding result."""

    type: str
    properties: ResultProperties
    bbox: Tuple[float, float, float, float]
    geometry: ResultGeometry

    def to_point(self) -> Point:
        return Point(*self.geometry.coordinates)


class OpenstreetmapResponse(BaseModel):
    """
    The top-level GeoJSON response returned by search and reverse requests.

    ```json
    {
      "type": "FeatureCollection",
      "licence": "Data (c) OpenStreetMap contributors, ODbL 1.0. https://osm.org/copyright",
      "features": [
        {
          "type": "Feature",
          "properties": {
            "place_id": 263681481,
            "osm_type": "way",
            "osm_id": 355421084,
            "display_name": "68, Carrer de Calatrava, les Tres Torres, ...",
            "place_rank": 30,
            "category": "building",
            "type": "apartments",
            "importance": 0.741
          },
          "bbox": [2.1284918, 41.401227, 2.128952, 41.4015815],
          "geometry": {"type": "Point", "coordinates": [2.12872241167437, 41.40140675]}
        }
      ]
    }
    ```

    A reverse lookup that matches nothing answers ``{"error": "Unable to geocode"}``,
    which decodes to an empty feature list with `error` set.
    """

    type: str = "FeatureCollection"
    licence: Optional[str] = None
    features: List[OpenstreetmapResult] = Field(default_factory=list)
    error: Optional[str] = None

    def to_points(self) -> List[Point]:
        return [feature.to_point() for feature in self.features]

    def first_display_name(self) -> Optional[str]:
        if not self.features:
            return None
        return self.features[0].properties.display_name
