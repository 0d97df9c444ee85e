"""End-to-end tests for cache administration and health endpoints."""

from tests.di.cache import UNREACHABLE_HOST
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestCacheMetrics:
    """GET/DELETE /api/cache/metrics"""

    def test_counts_hits_and_misses(self, client):
        first = client.http.get("/api/tags")
        client.http.get("/api/tags", headers={"If-None-Match": first.headers["etag"]})

        response = client.http.get("/api/cache/metrics")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["overall"]["totalHits"] == 1
        assert data["overall"]["totalMisses"] == 1
        assert data["overall"]["hitRate"] == "50.00%"
        [stats] = data["byEndpoint"].values()
        assert stats["total"] == 2

    def test_clear_with_default_window(self, client):
        client.http.get("/api/tags")

        response = client.http.delete("/api/cache/metrics")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["message"] == "Cleared metrics older than 24 hours"
        assert data["removed"] == 0

    def test_clear_rejects_bad_hours(self, client):
        for hours in ("0", "abc", "-3"):
            response = client.http.delete(f"/api/cache/metrics?hours={hours}")

            assert response.status_code == 400
            assert response.json()["error"]["message"] == (
                "Invalid hours parameter. Must be a positive integer."
            )


class TestCacheWarming:
    """GET/POST /api/cache/warm"""

    def test_status(self, client):
        response = client.http.get("/api/cache/warm")

        data = response.json()["data"]
        assert "/api/categories" in data["popularUrls"]
        assert data["queuedUrls"] == []

    def test_warm_popular_content(self, client):
        response = client.http.post("/api/cache/warm")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["message"] == "Cache warming completed"
        assert all(url.startswith("http://testserver/api/") for url in data["warmedUrls"])
        assert len(data["warmedUrls"]) == 3

    def test_unreachable_urls_are_skipped(self, client):
        bad = f"http://{UNREACHABLE_HOST}/api/tags"

        response = client.http.post("/api/cache/warm", json={"urls": [bad]})

        data = response.json()["data"]
        assert bad in data["requestedUrls"]
        assert bad not in data["warmedUrls"]


class TestHealth:
    def test_health(self, client):
        response = client.http.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
