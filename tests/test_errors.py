"""Tests for roost.errors — exception hierarchy and error messages."""

import pytest

from roost.errors import ConfigurationError, RoostError, SiteDataError


class TestHierarchy:
    def test_configuration_error_is_roost_error(self) -> None:
        assert issubclass(ConfigurationError, RoostError)

    def test_site_data_error_is_roost_error(self) -> None:
        assert issubclass(SiteDataError, RoostError)


class TestSiteDataError:
    def test_location_and_detail(self) -> None:
        err = SiteDataError("sites[0].name", "expected a non-empty string")
        assert err.location == "sites[0].name"
        assert err.detail == "expected a non-empty string"

    def test_str(self) -> None:
        err = SiteDataError("sites[0].name", "expected a non-empty string")
        assert str(err) == "sites[0].name: expected a non-empty string"

    def test_frozen(self) -> None:
        err = SiteDataError("site", "bad")
        with pytest.raises(AttributeError):
            err.location = "other"  # type: ignore[misc]

    def test_raisable(self) -> None:
        with pytest.raises(RoostError, match="site: bad"):
            raise SiteDataError("site", "bad")
