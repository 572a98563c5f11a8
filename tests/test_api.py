"""
API Tests

Exercises the FastAPI routes end to end through TestClient, including the
error envelope for 400, 401, 422 and 500 responses.
"""

import pytest
from fastapi.testclient import TestClient

from src.utils.config import Settings, get_settings


# =============================================================================
# SERVICE ENDPOINTS
# =============================================================================

class TestServiceEndpoints:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "Content Quality Analyzer"}

    def test_health(self, client):
        data = client.get("/api/health").json()

        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert data["auth_required"] is False
        assert "hallucination_detection" in data["capabilities"]


# =============================================================================
# CONTENT ENDPOINTS
# =============================================================================

class TestPhraseEndpoints:

    def test_detect_phrases(self, client, weak_content):
        response = client.post("/api/content/phrases", json={"content": weak_content})
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["quality"]["overall_score"] == 0
        assert len(body["data"]["detected"]) == 11
        assert body["metadata"]["content_length"] == len(weak_content)
        assert "processing_time_ms" in body["metadata"]

    def test_eliminate_phrases(self, client):
        response = client.post("/api/content/phrases/eliminate", json={"content": "Results are really good."})
        data = response.json()["data"]

        assert response.status_code == 200
        assert data == {
            "content": "Results are good.",
            "score_before": 90,
            "score_after": 100,
            "phrases_replaced": 1,
        }

    def test_blank_content_rejected(self, client):
        response = client.post("/api/content/phrases", json={"content": "   "})
        body = response.json()

        assert response.status_code == 400
        assert body["success"] is False
        assert body["error"] == "Validation failed"
        assert body["details"]

    def test_length_limits_follow_settings(self, app, clean_content):
        app.dependency_overrides[get_settings] = lambda: Settings(MAX_CONTENT_LENGTH=20)
        client = TestClient(app)

        response = client.post("/api/content/phrases", json={"content": clean_content})
        body = response.json()

        assert response.status_code == 400
        assert body["error"] == "Validation failed"
        assert body["details"][0]["msg"] == "Content must be at most 20 characters"
        assert client.post("/api/content/phrases", json={"content": "Short text."}).status_code == 200

    def test_min_length_follows_settings(self, app):
        app.dependency_overrides[get_settings] = lambda: Settings(MIN_CONTENT_LENGTH=50)
        client = TestClient(app)

        response = client.post("/api/content/eeat", json={
            "content": "Too short.",
            "industry": "finance",
            "keyword": "index funds",
        })

        assert response.status_code == 400
        assert response.json()["details"][0]["msg"] == "Content must be at least 50 characters"

    def test_missing_content_rejected(self, client):
        response = client.post("/api/content/phrases", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"


class TestHallucinationEndpoint:

    def test_clean_content(self, client, clean_content):
        data = client.post("/api/content/hallucinations", json={"content": clean_content}).json()["data"]

        assert data["hallucination_score"] == 0
        assert data["risk_level"] == "low"

    def test_with_facts(self, client):
        response = client.post("/api/content/hallucinations", json={
            "content": "The plugin was released in 2019. It supports twelve languages.",
            "facts": [{"fact": "released in 2019", "is_verified": False, "confidence_score": 10}],
        })
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["hallucination_score"] == 100
        assert data["risk_level"] == "critical"
        assert data["flagged_sentences"][0]["severity"] == "critical"
        assert data["detection_methods"][0] == "cross_reference_validation"

    def test_strict_mode_override(self, client):
        data = client.post("/api/content/hallucinations", json={
            "content": "The plugin was released in 2019.",
            "facts": [{"fact": "won three awards", "is_verified": False, "confidence_score": 10}],
            "strict_mode": True,
        }).json()["data"]

        assert data["flagged_sentences"][0]["sentence"] == "won three awards"

    def test_fact_confidence_out_of_range(self, client):
        response = client.post("/api/content/hallucinations", json={
            "content": "Some content here.",
            "facts": [{"fact": "x", "is_verified": True, "confidence_score": 150}],
        })

        assert response.status_code == 400


class TestEeatEndpoint:

    def test_optimize(self, client, clean_content):
        response = client.post("/api/content/eeat", json={
            "content": clean_content,
            "industry": "finance",
            "keyword": "index funds",
        })
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["eeat_score"] == 42
        assert data["confidence"] == 70

    def test_author_credentials(self, client, clean_content):
        data = client.post("/api/content/eeat", json={
            "content": clean_content,
            "industry": "finance",
            "keyword": "index funds",
            "author_credentials": "Licensed financial advisor",
        }).json()["data"]

        assert data["expertise_score"] == 55

    def test_missing_keyword_rejected(self, client, clean_content):
        response = client.post("/api/content/eeat", json={"content": clean_content, "industry": "finance"})

        assert response.status_code == 400

    def test_invalid_content_type_rejected(self, client, clean_content):
        response = client.post("/api/content/eeat", json={
            "content": clean_content,
            "industry": "finance",
            "keyword": "index funds",
            "content_type": "poem",
        })

        assert response.status_code == 400


class TestValidateEndpoint:

    def test_clean_content_approved(self, client, clean_content):
        response = client.post("/api/content/validate", json={
            "content": clean_content,
            "industry": "finance",
            "keyword": "index funds",
        })
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["approved"] is True
        assert data["quality_gates"]["summary"]["warnings"] == 1
        assert data["phrases"]["overall_score"] == 100

    def test_weak_content_rejected(self, client, weak_content):
        response = client.post("/api/content/validate", json={"content": weak_content})
        body = response.json()

        assert response.status_code == 422
        assert body["success"] is False
        assert body["error"] == "Content failed quality gates"
        assert body["details"]["approved"] is False
        assert "phrase_quality" in body["details"]["quality_gates"]["required_gates_failed"]


class TestLocalSearchEndpoint:

    def test_local_search(self, client):
        response = client.post("/api/seo/local-search", json={"region": "Dubai", "keyword": "SEO services"})
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["region"] == "UAE"
        assert data["recommendations"][-1] == 'Localize content targeting "seo services" for UAE searchers.'

    def test_empty_request_uses_default(self, client):
        data = client.post("/api/seo/local-search", json={}).json()["data"]

        assert data["region"] == "Default"


# =============================================================================
# AUTH
# =============================================================================

class TestApiKeyAuth:

    def test_missing_key(self, auth_client, clean_content):
        response = auth_client.post("/api/content/phrases", json={"content": clean_content})
        body = response.json()

        assert response.status_code == 401
        assert body["error"] == "Unauthorized"
        assert body["details"] == "Missing API key. Include X-API-Key header."

    def test_invalid_key(self, auth_client, clean_content):
        response = auth_client.post(
            "/api/content/phrases",
            json={"content": clean_content},
            headers={"X-API-Key": "wrong"},
        )

        assert response.status_code == 401
        assert response.json()["details"] == "Invalid API key."

    def test_header_key(self, auth_client, clean_content):
        response = auth_client.post(
            "/api/content/phrases",
            json={"content": clean_content},
            headers={"X-API-Key": "second-key"},
        )

        assert response.status_code == 200

    def test_bearer_key(self, auth_client):
        response = auth_client.post(
            "/api/seo/local-search",
            json={"region": "UK"},
            headers={"Authorization": "Bearer test-key"},
        )

        assert response.status_code == 200

    def test_health_is_public(self, auth_client):
        assert auth_client.get("/api/health").status_code == 200


# =============================================================================
# UNEXPECTED ERRORS
# =============================================================================

class TestUnhandledErrors:

    def test_internal_error_envelope(self, app, monkeypatch, clean_content):
        from api import content

        def boom(text):
            raise RuntimeError("detector exploded")

        monkeypatch.setattr(content.phrase_detector, "detect", boom)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/api/content/phrases", json={"content": clean_content})
        body = response.json()

        assert response.status_code == 500
        assert body == {"success": False, "error": "Internal server error", "details": None}
