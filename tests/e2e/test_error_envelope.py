"""End-to-end tests for errors raised outside the route handlers."""

from tests.harness import create_client_fixture

client = create_client_fixture()


class TestFrameworkErrors:
    def test_unknown_route(self, client):
        response = client.http.get("/api/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"
        assert body["error"]["message"] == "Not Found"
        assert "timestamp" in body

    def test_wrong_method(self, client):
        response = client.http.delete("/api/tags")

        assert response.status_code == 405
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "METHOD_NOT_ALLOWED"
        assert "GET" in response.headers["allow"]
