"""Tests for the provider facade."""

import logging
from unittest.mock import MagicMock

import pytest

from geocoding import (
    GeoAdmin,
    Opencage,
    Openstreetmap,
    Point,
    SpatialReference,
    compare_providers,
    forward_geocode,
    get_geocoder,
    reverse_geocode,
)
from geocoding import facade
from geocoding.core import settings


@pytest.fixture
def fake_providers(monkeypatch):
    """Replace every provider class with a MagicMock factory."""
    fakes = {}
    for name in facade.PROVIDERS:
        factory = MagicMock(name=name)
        factory.return_value.forward.return_value = []
        factory.return_value.reverse.return_value = None
        monkeypatch.setitem(facade.PROVIDERS, name, factory)
        fakes[name] = factory
    return fakes


class TestGetGeocoder:
    """Test suite for get_geocoder."""

    def test_default_is_openstreetmap(self):
        assert isinstance(get_geocoder(), Openstreetmap)

    def test_by_name(self):
        assert isinstance(get_geocoder("geoadmin", sr="4326"), GeoAdmin)
        assert isinstance(get_geocoder("opencage", api_key="k"), Opencage)

    def test_kwargs_forwarded(self):
        geoadmin = get_geocoder("geoadmin", sr="21781", endpoint="https://mirror.test/api/")
        assert geoadmin.sr is SpatialReference.LV03
        assert geoadmin.endpoint == "https://mirror.test/api/"

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            get_geocoder("google")


class TestConvenienceFunctions:
    """Test suite for forward_geocode / reverse_geocode."""

    def test_forward_geocode(self, fake_providers):
        fake_providers["geoadmin"].return_value.forward.return_value = [Point(2_600_968.75, 1_197_427.0)]

        res = forward_geocode("Seftigenstrasse 264, 3084 Wabern", provider="geoadmin", sr="2056")

        assert res == [Point(2_600_968.75, 1_197_427.0)]
        fake_providers["geoadmin"].assert_called_once_with(sr="2056")
        fake_providers["geoadmin"].return_value.forward.assert_called_once_with(
            "Seftigenstrasse 264, 3084 Wabern"
        )

    def test_reverse_geocode(self, fake_providers):
        fake_providers["openstreetmap"].return_value.reverse.return_value = "68, Carrer de Calatrava"

        res = reverse_geocode(Point(2.12870, 41.40139))

        assert res == "68, Carrer de Calatrava"
        fake_providers["openstreetmap"].return_value.reverse.assert_called_once_with(Point(2.12870, 41.40139))


class TestCompareProviders:
    """Test suite for compare_providers."""

    def test_default_providers_without_key(self, fake_providers, monkeypatch):
        monkeypatch.setattr(settings, "OPENCAGE_API_KEY", "")

        res = compare_providers("Bundesplatz 3, 3005 Bern")

        assert set(res) == {"geoadmin", "openstreetmap"}
        fake_providers["opencage"].assert_not_called()

    def test_default_providers_with_key(self, fake_providers, monkeypatch):
        monkeypatch.setattr(settings, "OPENCAGE_API_KEY", "k")

        res = compare_providers("Bundesplatz 3, 3005 Bern")

        assert set(res) == {"geoadmin", "openstreetmap", "opencage"}

    def test_geoadmin_queried_in_wgs84(self, fake_providers):
        compare_providers("Bundesplatz 3, 3005 Bern", providers=["geoadmin", "openstreetmap"])

        fake_providers["geoadmin"].assert_called_once_with(sr=SpatialReference.WGS84)
        fake_providers["openstreetmap"].assert_called_once_with()

    def test_logs_distances(self, fake_providers, caplog):
        fake_providers["geoadmin"].return_value.forward.return_value = [Point(7.4440, 46.9466)]
        fake_providers["openstreetmap"].return_value.forward.return_value = [Point(7.4440, 46.9476)]

        with caplog.at_level(logging.INFO, logger="geocoding.facade"):
            res = compare_providers("Bundesplatz 3, 3005 Bern", providers=["geoadmin", "openstreetmap"])

        assert res["geoadmin"] == [Point(7.4440, 46.9466)]
        assert "Distance geoadmin vs openstreetmap: 111.2m" in caplog.text

    def test_empty_results_skipped(self, fake_providers, caplog):
        fake_providers["geoadmin"].return_value.forward.return_value = [Point(7.4440, 46.9466)]

        with caplog.at_level(logging.INFO, logger="geocoding.facade"):
            res = compare_providers("Bundesplatz 3, 3005 Bern", providers=["geoadmin", "openstreetmap"])

        assert res["openstreetmap"] == []
        assert "Distance" not in caplog.text
