"""Tests for SDK route functions."""

from unittest.mock import Mock

import pytest

from strava_mcp.sdk import routes


@pytest.fixture
def client():
    return Mock()


class TestGetRoutes:
    def test_default_paging(self, client):
        client.make_request.return_value = [{"id": 7, "name": "Loop"}]

        result = routes.get_routes(client, 134815)

        assert result[0]["name"] == "Loop"
        client.make_request.assert_called_once_with(
            "GET", "/athletes/134815/routes", params={"page": "1", "per_page": "30"},
        )

    def test_custom_paging(self, client):
        routes.get_routes(client, 134815, page=2, per_page=5)
        client.make_request.assert_called_once_with(
            "GET", "/athletes/134815/routes", params={"page": "2", "per_page": "5"},
        )


def test_get_route(client):
    client.make_request.return_value = {"id": 77, "distance": 21000.0}
    assert routes.get_route(client, 77)["distance"] == 21000.0
    client.make_request.assert_called_once_with("GET", "/routes/77")
