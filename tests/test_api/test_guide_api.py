"""
Tests for the guide and regulation search endpoints.
"""


class TestHealth:
    """Tests for /health endpoint."""

    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["advisor"] == "gemini"
        assert data["advisor_configured"] is True

    def test_health_reports_missing_key(self, client, mock_advisor):
        mock_advisor.is_configured = False
        assert client.get("/health").json()["advisor_configured"] is False


class TestGuide:
    """Tests for GET /guide."""

    def test_returns_all_chapters(self, client):
        data = client.get("/guide").json()
        assert [c["number"] for c in data["chapters"]] == [1, 2, 3, 4, 5, 6, 7]
        assert "251/2016" in data["legal_basis"]
        assert data["emergency_numbers"]["Ambulance"] == "155"

    def test_fees_chapter(self, client):
        chapters = client.get("/guide").json()["chapters"]
        fees = next(c for c in chapters if c["number"] == 6)
        assert fees["entries"][0]["highlight"] == "50 CZK / day"


class TestRegulations:
    """Tests for GET /regulations."""

    def test_no_query_returns_everything(self, client):
        data = client.get("/regulations").json()
        assert data["query"] == ""
        assert [s["id"] for s in data["sections"]] == ["2.1", "2.2"]
        assert data["total_items"] == 5
        assert data["no_results"] is False

    def test_filter_by_reference(self, client):
        data = client.get("/regulations", params={"q": "251/2016"}).json()
        assert [s["id"] for s in data["sections"]] == ["2.1"]
        assert data["total_items"] == 2

    def test_item_fields(self, client):
        data = client.get("/regulations", params={"q": "night quiet"}).json()
        item = data["sections"][0]["items"][0]
        assert item["kind"] == "fine"
        assert item["fine_amount"] == "10,000 CZK"
        assert item["legal_reference"] == "Law No. 251/2016 Sb."
        assert "<strong>" in item["body"]

    def test_no_results(self, client):
        data = client.get("/regulations", params={"q": "skateboard"}).json()
        assert data["sections"] == []
        assert data["no_results"] is True
        assert data["reset_query"] == ""
        assert data["query"] == "skateboard"
