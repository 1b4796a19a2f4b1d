"""Tests for response models that no provider decodes directly."""

import pytest
from pydantic import ValidationError

from conftest import load_fixture
from geocoding import Point, SpatialReference
from geocoding.schemas import GeoAdminForwardResponse, OpencageResponse
from geocoding.schemas.geoadmin import (
    LegacyGeoAdminForwardResponse,
    LegacyGeoAdminReverseResponse,
)


class TestLegacyGeoAdmin:
    """Test suite for the deprecated flat GeoAdmin shapes."""

    def test_forward(self):
        res = LegacyGeoAdminForwardResponse.model_validate(load_fixture("geoadmin_forward_legacy.json"))

        location = res.results[0]
        assert location.weight == 1512
        assert location.attrs.weight is None
        assert location.attrs.geodist == pytest.approx(8.9576, abs=1e-3)
        assert location.attrs.feature_id == "1272199_0"
        assert res.to_points(SpatialReference.LV95) == [Point(2_600_968.75, 1_197_427.0)]

    def test_reverse(self):
        res = LegacyGeoAdminReverseResponse.model_validate(load_fixture("geoadmin_reverse_legacy.json"))

        assert res.first_address() == "Seftigenstrasse 264, 3084 Wabern"
        assert res.results[0].attributes.gdename == "Köniz"

    def test_reverse_empty(self):
        assert LegacyGeoAdminReverseResponse.model_validate({"results": []}).first_address() is None

    def test_legacy_shape_is_not_geojson(self):
        """The flat shape has no features, so it must not pass as a GeoJSON search result."""
        res = GeoAdminForwardResponse.model_validate(load_fixture("geoadmin_forward_legacy.json"))
        assert res.features == []


class TestOpencageResponse:
    """Test suite for OpencageResponse."""

    def test_paid_key_has_no_rate(self):
        payload = load_fixture("opencage_forward.json")
        del payload["rate"]

        res = OpencageResponse.model_validate(payload)

        assert res.rate is None
        assert res.first_formatted() == res.results[0].formatted

    def test_missing_status_rejected(self):
        payload = load_fixture("opencage_empty.json")
        del payload["status"]

        with pytest.raises(ValidationError):
            OpencageResponse.model_validate(payload)
