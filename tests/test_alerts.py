"""Tests for the alert catalogue."""

from appetizers.domain.alerts import alert_for
from appetizers.domain.errors import CatalogError, ErrorKind


def test_every_error_kind_has_an_alert() -> None:
    for kind in ErrorKind:
        alert = alert_for(kind)
        assert alert.title
        assert alert.message
        assert alert.dismiss_label == "OK"


def test_error_carries_kind_and_detail() -> None:
    error = CatalogError(ErrorKind.INVALID_RESPONSE, "status=500")

    assert error.kind is ErrorKind.INVALID_RESPONSE
    assert str(error) == "invalid_response: status=500"
