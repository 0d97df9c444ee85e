"""End-to-end tests for the tag and category endpoints."""

from tests.conftest import create_category, create_journal, create_tag
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestTags:
    """GET /api/tags"""

    def test_data_is_the_tag_array(self, client):
        client.run(create_tag, "Solo")

        body = client.http.get("/api/tags").json()

        assert body["success"] is True
        assert isinstance(body["data"], list)
        assert body["data"][0]["slug"] == "solo"

    def test_published_counts_and_hide_empty(self, client):
        used = client.run(create_tag, "Used")
        client.run(create_tag, "Unused")
        client.run(create_journal, "Public", tags=[used.id], status="published")

        everything = client.http.get("/api/tags").json()["data"]
        non_empty = client.http.get("/api/tags?hideEmpty=true").json()["data"]

        assert [(t["name"], t["journalCount"]) for t in everything] == [
            ("Unused", 0),
            ("Used", 1),
        ]
        assert [t["name"] for t in non_empty] == ["Used"]

    def test_long_cache(self, client):
        response = client.http.get("/api/tags")

        assert response.headers["cache-control"] == (
            "public, max-age=86400, stale-while-revalidate=3600"
        )

    def test_sort_by_journal_count(self, client):
        a = client.run(create_tag, "Alpha")
        b = client.run(create_tag, "Beta")
        client.run(create_journal, "One", tags=[b.id], status="published")

        response = client.http.get("/api/tags?sortBy=journalCount&sortOrder=desc")

        assert [t["id"] for t in response.json()["data"]] == [b.id, a.id]


class TestCategories:
    """GET /api/categories"""

    def test_lists_with_counts(self, client):
        design = client.run(create_category, "Design", color="#FF0000")
        client.run(create_journal, "Layout", category_id=design.id, status="published")

        response = client.http.get("/api/categories")

        assert response.status_code == 200
        [category] = response.json()["data"]
        assert category["slug"] == "design"
        assert category["color"] == "#FF0000"
        assert category["journalCount"] == 1

    def test_conditional_request(self, client):
        client.run(create_category, "Life")
        first = client.http.get("/api/categories")

        second = client.http.get(
            "/api/categories", headers={"If-None-Match": first.headers["etag"]}
        )

        assert second.status_code == 304
