"""Tests for the Nominatim provider."""

import pytest

from conftest import make_response, mock_get, sent_params, sent_url
from geocoding import (
    DecodeError,
    InputBounds,
    Openstreetmap,
    OpenstreetmapParams,
    Point,
    RequestError,
)

ENDPOINT = "https://nominatim.openstreetmap.org/"


@pytest.fixture
def osm():
    return Openstreetmap(endpoint=ENDPOINT)


class TestConfiguration:
    """Test suite for Openstreetmap construction."""

    def test_defaults(self, osm):
        assert osm.provider_name == "openstreetmap"
        assert osm.endpoint == ENDPOINT

    def test_custom_endpoint(self, fixture_response):
        osm = Openstreetmap(endpoint="https://nominatim.example.test/")
        get = mock_get(osm, fixture_response("osm_forward.json"))

        osm.forward("Schwabing, München")

        assert sent_url(get) == "https://nominatim.example.test/search"

    def test_params_builder(self):
        bbox = InputBounds((-0.138, 51.520), (-0.134, 51.523))
        params = OpenstreetmapParams("UCL CASA").with_addressdetails(True).with_viewbox(bbox).build()
        assert params.query == "UCL CASA"
        assert params.addressdetails is True
        assert params.viewbox is bbox
        assert OpenstreetmapParams("UCL CASA").addressdetails is False


class TestForward:
    """Test suite for Openstreetmap.forward."""

    def test_returns_lon_lat(self, osm, fixture_response):
        get = mock_get(osm, fixture_response("osm_forward.json"))

        res = osm.forward("Schwabing, München")

        assert res == [Point(11.5761796, 48.1599218)]
        assert sent_url(get) == ENDPOINT + "search"
        assert sent_params(get) == {"q": "Schwabing, München", "format": "geojson"}

    def test_no_results(self, osm):
        mock_get(osm, make_response({"type": "FeatureCollection", "features": []}))
        assert osm.forward("xyzzy") == []

    def test_not_found(self, osm):
        mock_get(osm, make_response({"error": "not found"}, status_code=404))

        with pytest.raises(RequestError) as exc_info:
            osm.forward("Schwabing, München")
        assert exc_info.value.provider == "openstreetmap"

    def test_redirect_is_an_error(self, osm):
        mock_get(osm, make_response({"type": "FeatureCollection", "features": []}, status_code=302))

        with pytest.raises(RequestError, match="302"):
            osm.forward("Schwabing, München")

    def test_truncated_body(self, osm):
        mock_get(osm, make_response(body=b'{"type": "FeatureCollection", "feat'))

        with pytest.raises(DecodeError):
            osm.forward("Schwabing, München")


class TestForwardFull:
    """Test suite for Openstreetmap.forward_full."""

    def test_viewbox_and_address_details(self, osm, fixture_response):
        get = mock_get(osm, fixture_response("osm_forward_full_ucl.json"))
        bbox = InputBounds(
            Point(-0.13806939125061035, 51.51989264641164),
            Point(-0.13427138328552246, 51.52319711775629),
        )
        params = OpenstreetmapParams("UCL CASA").with_addressdetails(True).with_viewbox(bbox)

        res = osm.forward_full(params)

        feature = res.features[0]
        assert feature.properties.display_name.startswith("UCL, 188, Tottenham Court Road")
        assert feature.properties.address.city == "London"
        assert feature.properties.address.road == "Tottenham Court Road"
        assert sent_params(get) == {
            "q": "UCL CASA",
            "format": "geojson",
            "addressdetails": "1",
            "viewbox": (
                "-0.13806939125061035,51.51989264641164,"
                "-0.13427138328552246,51.52319711775629"
            ),
        }

    def test_without_viewbox(self, osm, fixture_response):
        get = mock_get(osm, fixture_response("osm_forward.json"))

        res = osm.forward_full(OpenstreetmapParams("Schwabing, München"))

        assert res.to_points() == [Point(11.5761796, 48.1599218)]
        assert res.features[0].properties.address is None
        assert sent_params(get)["addressdetails"] == "0"
        assert "viewbox" not in sent_params(get)


class TestReverse:
    """Test suite for Openstreetmap.reverse."""

    def test_display_name(self, osm, fixture_response):
        get = mock_get(osm, fixture_response("osm_reverse.json"))

        res = osm.reverse(Point(2.12870, 41.40139))

        assert res == (
            "68, Carrer de Calatrava, les Tres Torres, Sarrià - Sant Gervasi, "
            "Barcelona, BCN, CAT, 08017, España"
        )
        assert sent_url(get) == ENDPOINT + "reverse"
        assert sent_params(get) == {"lon": "2.1287", "lat": "41.40139", "format": "geojson"}

    def test_point_near_equator(self, osm, fixture_response):
        get = mock_get(osm, fixture_response("osm_reverse.json"))

        osm.reverse(Point(32.58, 0.00001))

        assert sent_params(get)["lat"] == "0.00001"
        assert sent_params(get)["lon"] == "32.58"

    def test_unable_to_geocode(self, osm, fixture_response):
        mock_get(osm, fixture_response("osm_reverse_error.json"))
        assert osm.reverse(Point(0.0, -89.0)) is None

    def test_reverse_full(self, osm, fixture_response):
        mock_get(osm, fixture_response("osm_reverse.json"))

        res = osm.reverse_full(Point(2.12870, 41.40139))

        feature = res.features[0]
        assert feature.properties.osm_id == 355421084
        assert feature.bbox == (2.1284918, 41.401227, 2.128952, 41.4015815)
        assert feature.to_point() == Point(2.12872241167437, 41.40140675)
        assert res.error is None
