"""End-to-end tests for the journal read endpoints."""

from tests.conftest import create_category, create_journal, create_tag
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestListJournals:
    """GET /api/journals"""

    def test_envelope_and_camel_case(self, client):
        client.run(create_journal, "Hello World", status="published")

        response = client.http.get("/api/journals")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "timestamp" in body
        data = body["data"]
        assert data["totalDocs"] == 1
        assert data["hasNextPage"] is False
        assert data["docs"][0]["slug"] == "hello-world"
        assert data["docs"][0]["publishedAt"] is not None

    def test_cache_headers(self, client):
        client.run(create_journal, "Cached")

        response = client.http.get("/api/journals")

        assert response.headers["cache-control"] == (
            "public, max-age=1800, stale-while-revalidate=300"
        )
        assert response.headers["etag"].startswith('"')
        assert "last-modified" in response.headers
        assert "x-cache-generated" in response.headers

    def test_search_uses_short_cache(self, client):
        response = client.http.get("/api/journals", params={"search": "anything"})

        assert response.headers["cache-control"] == (
            "public, max-age=300, stale-while-revalidate=120"
        )

    def test_if_none_match_returns_304(self, client):
        client.run(create_journal, "Conditional")
        first = client.http.get("/api/journals")

        second = client.http.get(
            "/api/journals", headers={"If-None-Match": first.headers["etag"]}
        )

        assert second.status_code == 304
        assert second.content == b""
        assert second.headers["cache-control"] == "public, max-age=0, must-revalidate"
        assert second.headers["etag"] == first.headers["etag"]

    def test_etag_changes_with_content(self, client):
        client.run(create_journal, "First")
        before = client.http.get("/api/journals").headers["etag"]
        client.run(create_journal, "Second")

        after = client.http.get("/api/journals", headers={"If-None-Match": before})

        assert after.status_code == 200
        assert after.headers["etag"] != before

    def test_filters_by_tags_array_and_category(self, client):
        tag = client.run(create_tag, "Python")
        category = client.run(create_category, "Technology")
        client.run(create_journal, "Typed", tags=[tag.id], category_id=category.id)
        client.run(create_journal, "Other")

        by_tag = client.http.get("/api/journals?tags[]=python")
        by_csv = client.http.get("/api/journals?tags=python,missing")
        by_category = client.http.get("/api/journals?category=technology")

        for response in (by_tag, by_csv, by_category):
            assert [d["title"] for d in response.json()["data"]["docs"]] == ["Typed"]

    def test_sorting_params(self, client):
        for title in ("Beta", "Alpha"):
            client.run(create_journal, title)

        response = client.http.get("/api/journals?sortBy=title&sortOrder=asc")

        titles = [d["title"] for d in response.json()["data"]["docs"]]
        assert titles == ["Alpha", "Beta"]

    def test_unknown_sort_falls_back(self, client):
        response = client.http.get("/api/journals?sortBy=views&sortOrder=sideways")

        assert response.status_code == 200

    def test_invalid_page(self, client):
        response = client.http.get("/api/journals?page=0")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["message"] == "Page must be a positive integer"

    def test_invalid_limit(self, client):
        response = client.http.get("/api/journals?limit=500")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Limit must be between 1 and 100"

    def test_status_filter(self, client):
        client.run(create_journal, "Live", status="published")
        client.run(create_journal, "Pending", status="draft")

        response = client.http.get("/api/journals?status=draft")

        assert [d["title"] for d in response.json()["data"]["docs"]] == ["Pending"]


class TestGetJournal:
    """GET /api/journals/{slug}"""

    def test_published_entry(self, client):
        client.run(create_journal, "Long Read", status="published")

        response = client.http.get("/api/journals/long-read")

        assert response.status_code == 200
        journal = response.json()["data"]["journal"]
        assert journal["title"] == "Long Read"
        assert response.headers["cache-control"] == (
            "public, max-age=3600, stale-while-revalidate=1800"
        )

    def test_draft_entry_short_cache(self, client):
        client.run(create_journal, "Rough Notes")

        response = client.http.get("/api/journals/rough-notes")

        assert response.status_code == 200
        assert response.headers["cache-control"] == (
            "public, max-age=300, stale-while-revalidate=60"
        )

    def test_if_modified_since(self, client):
        client.run(create_journal, "Dated")
        first = client.http.get("/api/journals/dated")

        second = client.http.get(
            "/api/journals/dated",
            headers={"If-Modified-Since": first.headers["last-modified"]},
        )

        assert second.status_code == 304

    def test_missing_entry(self, client):
        response = client.http.get("/api/journals/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"
        assert "nope" in body["error"]["message"]
