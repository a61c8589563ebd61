import logging

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from exceptions import ConfigurationException, LLMException
from models import EvidenceBundle
from services.analysis import AnalysisService
from services.normalizer import VerdictNormalizer
from services.synthesis import EvidenceSynthesizer, parse_evidence_response


@pytest.fixture
def synthesizer():
    synth = MagicMock(spec=EvidenceSynthesizer)
    synth.synthesize = AsyncMock(return_value=parse_evidence_response(""))
    return synth


@pytest.fixture
def service(llm_config, mock_llm_client, synthesizer, override_service):
    normalizer = VerdictNormalizer(llm_config, client=mock_llm_client)
    return override_service(
        AnalysisService(llm_config, normalizer=normalizer, synthesizer=synthesizer)
    )


class TestHealthCheckEndpoint:
    """Tests for the health check endpoints."""

    def test_root(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "News Triage API" in data["message"]

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data

    def test_request_id_echoed(self, test_client):
        response = test_client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.headers["X-Response-Time"].endswith("s")


class TestAnalyzeEndpoint:
    """Tests for the /analyze endpoint."""

    def test_analyze_text(self, test_client, service, mock_llm_client):
        mock_llm_client.generate = AsyncMock(
            return_value="This is shocking breaking news, you won't believe it! Clear misinformation."
        )

        response = test_client.post("/analyze", json={"text": "Some article", "title": "Headline"})

        assert response.status_code == 200
        data = response.json()
        assert data["verdict"] == "Likely Fake"
        assert data["verdictClass"] == "fake"
        assert data["confidenceScore"] == 65
        assert data["overallConfidence"] == "medium"
        assert data["suspiciousTerms"] == ["shocking", "breaking", "you won't believe"]
        assert data["metadata"] == {"domain": "unknown", "title": "Headline", "ingestedFrom": "text"}
        assert [s["name"] for s in data["keySignals"]] == [
            "Source Credibility", "Language Analysis", "Fact Checking",
        ]
        assert len(data["evidence"]) == 2
        assert len(data["factChecks"]) == 2
        assert len(data["socialDiscussions"]) == 1

    def test_analyze_url(self, test_client, service):
        response = test_client.post("/analyze", json={"url": "https://example.com/a"})

        assert response.status_code == 200
        data = response.json()
        assert data["metadata"]["domain"] == "example.com"
        assert data["metadata"]["ingestedFrom"] == "url"
        assert data["metadata"]["title"] == "Untitled"

    def test_analyze_image(self, test_client, service):
        response = test_client.post("/analyze", json={"imageUrl": "https://img.example.com/x.png"})

        assert response.status_code == 200
        assert response.json()["metadata"]["ingestedFrom"] == "image"

    def test_empty_body(self, test_client, service, mock_llm_client):
        response = test_client.post("/analyze", json={})

        assert response.status_code == 400
        assert "provide text, url, or imageUrl" in response.json()["error"]
        mock_llm_client.generate.assert_not_called()

    def test_malformed_url(self, test_client, service, mock_llm_client):
        response = test_client.post("/analyze", json={"url": "not a url"})

        assert response.status_code == 400
        assert "error" in response.json()
        mock_llm_client.generate.assert_not_called()

    def test_wrong_field_type(self, test_client, service):
        response = test_client.post("/analyze", json={"text": 123})

        assert response.status_code == 422
        assert "text" in response.json()["error"]

    def test_upstream_failure(self, test_client, service, mock_llm_client):
        mock_llm_client.generate = AsyncMock(side_effect=LLMException("HTTP 500"))

        response = test_client.post("/analyze", json={"text": "Some article"})

        assert response.status_code == 502
        assert response.json() == {"error": "LLM service error: HTTP 500"}

    def test_missing_configuration(self, test_client, service, mock_llm_client):
        mock_llm_client.generate = AsyncMock(side_effect=ConfigurationException("LLM_API_KEY"))

        response = test_client.post("/analyze", json={"text": "Some article"})

        assert response.status_code == 500
        assert response.json() == {"error": "LLM_API_KEY not configured"}

    def test_evidence_failure_still_succeeds(self, test_client, service, synthesizer):
        synthesizer.synthesize = AsyncMock(return_value=EvidenceBundle.empty())

        response = test_client.post("/analyze", json={"text": "Some article"})

        assert response.status_code == 200
        data = response.json()
        assert data["verdictClass"] == "real"
        assert data["evidence"] == []
        assert data["factChecks"] == []
        assert data["socialDiscussions"] == []

    def test_unexpected_error(self, service, mock_llm_client):
        import main

        mock_llm_client.generate = AsyncMock(side_effect=RuntimeError("boom"))
        client = TestClient(main.app, raise_server_exceptions=False)

        response = client.post("/analyze", json={"text": "Some article"})

        assert response.status_code == 500
        assert response.json() == {"error": "boom"}

    def test_unexpected_error_logged_with_request_id(self, service, mock_llm_client, caplog):
        import main

        mock_llm_client.generate = AsyncMock(side_effect=RuntimeError("boom"))
        client = TestClient(main.app, raise_server_exceptions=False)

        with caplog.at_level(logging.ERROR, logger="news_triage"):
            client.post("/analyze", json={"text": "Some article"}, headers={"X-Request-ID": "req-42"})

        failures = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(failures) == 1
        assert "request_id=req-42" in failures[0].getMessage()
        assert failures[0].exc_info is not None


class TestBatchEndpoint:

    def test_batch(self, test_client, service):
        response = test_client.post("/analyze/batch", json={"articles": [
            {"text": "one"},
            {"url": "https://example.com/two"},
        ]})

        assert response.status_code == 200
        results = response.json()["results"]
        assert [r["id"] for r in results] == ["article-1", "article-2"]
        assert all(r["success"] for r in results)
        assert "error" not in results[0]
        assert results[1]["metadata"]["domain"] == "example.com"
        assert "evidence" not in results[0]

    def test_batch_item_failure(self, test_client, service):
        response = test_client.post("/analyze/batch", json={"articles": [
            {"text": "one"},
            {"title": "no content"},
        ]})

        assert response.status_code == 200
        results = response.json()["results"]
        assert results[0]["success"] is True
        assert results[1] == {
            "id": "article-2",
            "success": False,
            "error": "Validation failed for article: provide text, url, or imageUrl",
        }

    def test_batch_too_large(self, test_client, service, mock_llm_client):
        response = test_client.post("/analyze/batch", json={
            "articles": [{"text": str(i)} for i in range(6)]
        })

        assert response.status_code == 400
        assert "between 1 and 5" in response.json()["error"]
        mock_llm_client.generate.assert_not_called()


class TestHighlightsEndpoint:

    def test_highlights(self, test_client, service):
        response = test_client.post("/analyze/highlights", json={"text": "URGENT: a shocking hoax"})

        assert response.status_code == 200
        highlights = response.json()["highlights"]
        assert [h["text"] for h in highlights] == ["URGENT", "shocking", "hoax"]
        assert [h["type"] for h in highlights] == ["urgency", "sensational", "conspiracy"]

    def test_highlights_text_too_long(self, test_client, service):
        response = test_client.post("/analyze/highlights", json={"text": "a" * 20001})

        assert response.status_code == 400
        assert response.json() == {"error": "Validation failed for text: cannot exceed 20000 characters"}

    def test_highlights_positions_keep_leading_whitespace(self, test_client, service):
        response = test_client.post("/analyze/highlights", json={"text": "\n  a shocking\x00 claim"})

        assert response.status_code == 200
        highlights = response.json()["highlights"]
        assert [(h["text"], h["position"]) for h in highlights] == [("shocking", 5)]


class TestSearchEvidenceEndpoint:

    def test_search_evidence(self, test_client, service, synthesizer):
        response = test_client.post("/search-evidence", json={"query": "q", "title": "t"})

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"evidence", "factChecks", "socialDiscussions"}
        synthesizer.synthesize.assert_awaited_once_with("q", "t")
