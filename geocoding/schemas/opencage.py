"""
Response schemas for the OpenCage Geocoding API.

See https://opencagedata.com/api#response for the documented shape.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from geocoding.base import Point


class Currency(BaseModel):
    """Currency metadata."""

    alternate_symbols: List[str] = Field(default_factory=list)
    decimal_mark: str
    html_entity: str
    iso_code: str
    iso_numeric: Union[str, int]
    name: str
    smallest_denomination: int
    subunit: str
    subunit_to_unit: int
    symbol: str
    symbol_first: int
    thousands_separator: str


class Sun(BaseModel):
    """Sunrise and sunset metadata, as unix timestamps."""

    rise: Dict[str, int]
    set: Dict[str, int]


class Timezone(BaseModel):
    """Timezone metadata."""

    name: str
    now_in_dst: int
    offset_sec: int
    offset_string: Union[str, int]
    short_name: str


class Annotations(BaseModel):
    """Annotations pertaining to the geocoding result."""

    model_config = ConfigDict(populate_by_name=True)

    dms: Optional[Dict[str, str]] = Field(None, alias="DMS")
    mgrs: Optional[str] = Field(None, alias="MGRS")
    maidenhead: Optional[str] = Field(None, alias="Maidenhead")
    mercator: Optional[Dict[str, float]] = Field(None, alias="Mercator")
    osm: Optional[Dict[str, str]] = Field(None, alias="OSM")
    callingcode: Optional[int] = None
    currency: Optional[Currency] = None
    flag: Optional[str] = None
    geohash: Optional[str] = None
    qibla: Optional[float] = None
    sun: Optional[Sun] = None
    timezone: Optional[Timezone] = None
    what3words: Optional[Dict[str, str]] = None


class Bounds(BaseModel):
    """Bounding-box metadata."""

    northeast: Dict[str, float]
    southwest: Dict[str, float]


class Results(BaseModel):
    """A geocoding result."""

    annotations: Optional[Annotations] = None
    bounds: Optional[Bounds] = None
    components: Dict[str, Any] = Field(default_factory=dict)
    confidence: int
    formatted: str
    geometry: Dict[str, float]

    def to_point(self) -> Point:
        # OpenCage reports lat/lng; canonical order is lng, lat
        return Point(self.geometry["lng"], self.geometry["lat"])


class Status(BaseModel):
    """HTTP status metadata."""

    message: str
    code: int


class Timestamp(BaseModel):
    """Timestamp metadata."""

    created_http: str
    created_unix: int


class OpencageResponse(BaseModel):
    """
    The top-level JSON response returned by forward and reverse requests.

    ```json
    {
      "documentation": "https://opencagedata.com/api",
      "licenses": [{"name": "see attribution guide", "url": "https://opencagedata.com/credits"}],
      "rate": {"limit": 2500, "remaining": 2499, "reset": 1523318400},
      "results": [
        {
          "components": {"road": "Carrer de Calatrava", "city": "Barcelona", ...},
          "confidence": 10,
          "formatted": "Carrer de Calatrava, 68, 08017 Barcelona, Spain",
          "geometry": {"lat": 41.4014067, "lng": 2.1287224}
        }
      ],
      "status": {"code": 200, "message": "OK"},
      "stay_informed": {"blog": "https://blog.opencagedata.com"},
      "thanks": "For using an OpenCage API",
      "timestamp": {"created_http": "Mon, 09 Apr 2018 12:33:01 GMT", "created_unix": 1523277181},
      "total_results": 1
    }
    ```

    `rate` is only present for free-tier keys.
    """

    documentation: str
    licenses: List[Dict[str, str]] = Field(default_factory=list)
    rate: Optional[Dict[str, int]] = None
    results: List[Results] = Field(default_factory=list)
    status: Status
    stay_informed: Dict[str, str] = Field(default_factory=dict)
    thanks: str
    timestamp: Timestamp
    total_results: int

    def to_points(self) -> List[Point]:
        return [result.to_point() for result in self.results]

    def first_formatted(self) -> Optional[str]:
        if not self.results:
            return None
        return self.results[0].formatted
