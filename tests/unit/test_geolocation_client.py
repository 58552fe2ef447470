"""Unit tests for tradescout.clients.geolocation_client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from tradescout.clients.geolocation_client import GeolocationClient


def _client_returning(response=None, error=None):
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return GeolocationClient(url="https://geo.example/json", timeout=5.0, session=session), session


class TestLocate:
    def test_latitude_longitude_keys(self, http_response_factory):
        client, session = _client_returning(
            http_response_factory(json_data={"latitude": 25.2, "longitude": 55.3})
        )
        assert client.locate() == (25.2, 55.3)
        session.get.assert_called_once_with("https://geo.example/json", timeout=5.0)

    @pytest.mark.parametrize(
        "payload",
        [{"lat": "19.07", "lon": "72.87"}, {"lat": 19.07, "lng": 72.87}],
    )
    def test_alternate_keys(self, http_response_factory, payload):
        client, _ = _client_returning(http_response_factory(json_data=payload))
        assert client.locate() == (19.07, 72.87)

    def test_timeout_returns_none(self):
        client, _ = _client_returning(error=requests.Timeout("slow"))
        assert client.locate() is None

    def test_http_error_returns_none(self, http_response_factory):
        client, _ = _client_returning(http_response_factory(status_code=429))
        assert client.locate() is None

    def test_invalid_json_returns_none(self, http_response_factory):
        client, _ = _client_returning(http_response_factory(json_error=ValueError("bad json")))
        assert client.locate() is None

    def test_missing_coordinates_returns_none(self, http_response_factory):
        client, _ = _client_returning(http_response_factory(json_data={"city": "Dubai"}))
        assert client.locate() is None

    def test_non_object_payload_returns_none(self, http_response_factory):
        client, _ = _client_returning(http_response_factory(json_data=[1, 2]))
        assert client.locate() is None
