"""
Base classes and interfaces for geocoding providers.

Coordinates are always exchanged as `Point(x, y)` in longitude/easting,
latitude/northing order. Providers that speak another order on the wire
convert at their own boundary.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from geocoding.core import settings

logger = logging.getLogger(__name__)

UA_STRING = "Python-Geocoding"

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_coordinate(value: float) -> str:
    """
    Render a coordinate for a query string.

    Whole numbers drop the fraction (`1197426`, not `1197426.0`). Other values
    use the shortest round-trip digits in fixed-point form, never exponent
    notation (`0.00005`, not `5e-05`).
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class Point:
    """A coordinate pair in canonical order: x = longitude/easting, y = latitude/northing."""

    x: float
    y: float

    @classmethod
    def from_tuple(cls, value: Union["Point", Sequence[float]]) -> "Point":
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class InputBounds:
    """
    A bounding box to search within when forward-geocoding.

    - `minimum_lonlat` is the bottom-left (south-west) corner
    - `maximum_lonlat` is the top-right (north-east) corner

    Corners are taken as given: they are neither validated nor re-ordered.
    """

    minimum_lonlat: Point
    maximum_lonlat: Point

    def __post_init__(self):
        object.__setattr__(self, "minimum_lonlat", Point.from_tuple(self.minimum_lonlat))
        object.__setattr__(self, "maximum_lonlat", Point.from_tuple(self.maximum_lonlat))

    def __str__(self) -> str:
        # lon, lat order
        return ",".join(
            format_coordinate(v)
            for v in (
                self.minimum_lonlat.x,
                self.minimum_lonlat.y,
                self.maximum_lonlat.x,
                self.maximum_lonlat.y,
            )
        )


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, provider: str = "", address: str = ""):
        self.message = message
        self.provider = provider
        self.address = address
        super().__init__(f"[{provider}] {message}" if provider else message)


class RequestError(GeocodingError):
    """HTTP request failed: network error or non-2xx status."""


class DecodeError(GeocodingError):
    """Response body is not JSON or does not match the provider's schema."""


class HeaderConversionError(GeocodingError):
    """A response header could not be converted (non UTF-8 or not an integer)."""


class ForwardError(GeocodingError):
    """Forward geocoding failed. Not raised for empty results."""


class ReverseError(GeocodingError):
    """Reverse geocoding failed. Not raised for empty results."""


class Forward(ABC):
    """
    Forward-geocode an address.

    The most simple and minimal implementation available from a provider:
    a list of zero or more Points.
    """

    @abstractmethod
    def forward(self, address: str) -> List[Point]:
        """
        Look up coordinates for a free-text address.

        Args:
            address: Address or place to search for

        Returns:
            Matching points in (longitude/easting, latitude/northing) order,
            whatever order the provider returns. Empty when nothing matches.
        """
        pass


class Reverse(ABC):
    """
    Reverse-geocode a coordinate.

    The lowest common denominator result is an optional formatted address.
    """

    @abstractmethod
    def reverse(self, point: Point) -> Optional[str]:
        """
        Look up the best address for a point.

        Args:
            point: Coordinates in (longitude/easting, latitude/northing) order

        Returns:
            Formatted address, or None if nothing was found
        """
        pass


class BaseGeocoder(Forward, Reverse):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - forward(): Forward-geocode an address
    - reverse(): Reverse-geocode a point
    - provider_name: Name of the provider

    Holds the HTTP session shared by all calls on one instance. The session
    carries a fixed User-Agent; timeouts come from settings.
    """

    def __init__(self, endpoint: str, timeout: Optional[float] = None):
        self.endpoint = endpoint
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": settings.USER_AGENT or UA_STRING})

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    def _get(self, url: str, params: List[Tuple[str, str]], address: str = "") -> requests.Response:
        """
        Issue a GET request and fail on any non-2xx status.

        Raises:
            RequestError: on network failure or error status
        """
        logger.debug(f"{self.provider_name}: GET {url} {[p for p in params if p[0] != 'key']}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"{self.provider_name}: request failed for {url}: {e}")
            raise RequestError(str(e), provider=self.provider_name, address=address) from e

        # raise_for_status lets 1xx/3xx through
        if not 200 <= response.status_code < 300:
            message = f"Unexpected status {response.status_code} for url: {response.url}"
            logger.warning(f"{self.provider_name}: {message}")
            raise RequestError(message, provider=self.provider_name, address=address)
        return response

    def _decode(self, response: requests.Response, model: Type[ModelT], address: str = "") -> ModelT:
        """
        Decode a JSON response body into a pydantic model.

        Raises:
            DecodeError: if the body is not JSON or does not fit the model
        """
        try:
            payload: Any = response.json()
            return model.model_validate(payload)
        except (ValueError, ValidationError) as e:
            logger.warning(f"{self.provider_name}: could not decode {model.__name__}: {e}")
            raise DecodeError(
                f"Invalid {model.__name__} response: {e}",
                provider=self.provider_name,
                address=address,
            ) from e
