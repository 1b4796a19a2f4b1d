"""
OpenCage Geocoding API provider.

https://opencagedata.com/api

Free-tier keys are rate limited (1 request/second) and have a daily quota.
The remaining quota is reported in the `X-RateLimit-Remaining` header and
exposed via `Opencage.remaining_calls()`. Paid keys do not send the header,
so the value stays None.

OpenCage documents coordinates in lat, lng order. Points passed in and
returned are still (lng, lat).
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

import requests

from geocoding.base import (
    BaseGeocoder,
    HeaderConversionError,
    InputBounds,
    Point,
    format_coordinate,
)
from geocoding.core import settings
from geocoding.schemas.opencage import OpencageResponse

logger = logging.getLogger(__name__)

RATELIMIT_HEADER = "X-RateLimit-Remaining"


@dataclass(frozen=True)
class OpencageParams:
    """
    Optional query parameters sent with every OpenCage request.

    Usage:
        params = OpencageParams().with_language("fr").with_countrycode("ch").with_limit(2)
        oc = Opencage("my-key", params=params)
    """

    language: Optional[str] = None
    countrycode: Optional[str] = None
    limit: Optional[int] = None

    def with_language(self, language: str) -> "OpencageParams":
        return replace(self, language=language)

    def with_countrycode(self, countrycode: str) -> "OpencageParams":
        return replace(self, countrycode=countrycode)

    def with_limit(self, limit: int) -> "OpencageParams":
        return replace(self, limit=limit)

    def build(self) -> "OpencageParams":
        return self

    def as_query(self) -> List[Tuple[str, str]]:
        query = []
        if self.language is not None:
            query.append(("language", self.language))
        if self.countrycode is not None:
            query.append(("countrycode", self.countrycode))
        if self.limit is not None:
            query.append(("limit", str(self.limit)))
        return query


class Opencage(BaseGeocoder):
    """
    OpenCage geocoder.

    Pros:
    - Global coverage, aggregated open data
    - Rich annotations (timezone, currency, sun times...)

    Cons:
    - Requires API key
    - Daily quota on the free tier

    Usage:
        oc = Opencage("my-key")
        oc.reverse(Point(2.12870, 41.40139))
        # "Carrer de Calatrava, 68, 08017 Barcelona, Spain"
        oc.remaining_calls()
        # 2499
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        params: Optional[OpencageParams] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize OpenCage geocoder.

        Args:
            api_key: OpenCage API key (uses settings if not provided)
            endpoint: JSON endpoint URL (uses settings if not provided)
            params: Optional language / countrycode / limit parameters
            timeout: Request timeout in seconds (uses settings if not provided)

        Raises:
            ValueError: If no API key is given or configured
        """
        super().__init__(endpoint or settings.OPENCAGE_ENDPOINT, timeout=timeout)
        self.api_key = api_key or settings.OPENCAGE_API_KEY
        if not self.api_key:
            raise ValueError("OPENCAGE_API_KEY not configured")
        self.params = params or OpencageParams()
        self._remaining: Optional[int] = None
        self._remaining_lock = threading.Lock()

    def with_params(self, params: OpencageParams) -> "Opencage":
        """Return a geocoder for the same key and endpoint with other parameters."""
        return Opencage(
            api_key=self.api_key,
            endpoint=self.endpoint,
            params=params,
            timeout=self.timeout,
        )

    @property
    def provider_name(self) -> str:
        return "opencage"

    def remaining_calls(self) -> Optional[int]:
        """
        Remaining API calls in the daily quota.

        None until a free-tier request has reported it.
        """
        with self._remaining_lock:
            return self._remaining

    def _update_remaining(self, response: requests.Response) -> None:
        """
        Store the quota reported by a response.

        Raises:
            HeaderConversionError: If the header is not UTF-8 or not an integer
        """
        raw = response.headers.get(RATELIMIT_HEADER)
        if raw is None:
            return

        try:
            # requests decodes header bytes as latin-1
            value = int(raw.encode("latin-1").decode("utf-8"))
        except (UnicodeError, ValueError) as e:
            raise HeaderConversionError(
                f"Invalid {RATELIMIT_HEADER} header {raw!r}: {e}",
                provider=self.provider_name,
            ) from e

        # Skip the update rather than wait if another call is writing
        if self._remaining_lock.acquire(blocking=False):
            try:
                self._remaining = value
            finally:
                self._remaining_lock.release()
            logger.info(f"OpenCage: {value} calls remaining")

    def _request(self, q: str, annotations: bool, bounds: Optional[InputBounds] = None) -> OpencageResponse:
        query = [
            ("q", q),
            ("key", self.api_key),
            ("no_annotations", "0" if annotations else "1"),
            ("no_record", "1"),
        ]
        if bounds is not None:
            query.append(("bounds", str(bounds)))
        query.extend(self.params.as_query())

        response = self._get(self.endpoint, query, address=q)
        result = self._decode(response, OpencageResponse, address=q)
        self._update_remaining(response)
        return result

    @staticmethod
    def _reverse_q(point: Point) -> str:
        # OpenCage expects lat, lng
        return f"{format_coordinate(point.y)}, {format_coordinate(point.x)}"

    def forward(self, address: str) -> List[Point]:
        """
        Forward-geocode an address.

        Returns:
            Points as (lng, lat)
        """
        result = self._request(address, annotations=False)
        if not result.results:
            logger.debug(f"OpenCage: No results for {address}")
        return result.to_points()

    def reverse(self, point: Point) -> Optional[str]:
        """
        Reverse-geocode a (lng, lat) point.

        Returns:
            The formatted address of the first result, None if there is none
        """
        return self._request(self._reverse_q(point), annotations=False).first_formatted()

    def forward_full(self, address: str, bounds: Optional[InputBounds] = None) -> OpencageResponse:
        """
        Forward-geocode an address, returning the annotated response.

        Args:
            address: Address to search for
            bounds: Optional bounding box restricting the search space

        Usage:
            bbox = InputBounds((-0.13806939, 51.51989264), (-0.13427138, 51.52319711))
            res = oc.forward_full("UCL CASA", bbox)
            res.results[0].formatted
            # "UCL, 188 Tottenham Court Road, London WC1E 6BT, United Kingdom"
        """
        return self._request(address, annotations=True, bounds=bounds)

    def reverse_full(self, point: Point) -> OpencageResponse:
        """Reverse-geocode a (lng, lat) point, returning the annotated response."""
        return self._request(self._reverse_q(point), annotations=True)
