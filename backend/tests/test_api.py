import json

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_analyzer
import api.router as router_module
from api.router import limiter
from config import Settings
from main import app
from services.cv_analyzer import CVAnalyzer
from services.errors import ConfigurationMissingError, TransportError
from conftest import SAMPLE_ANALYSIS, SAMPLE_CV, StubTransport

client = TestClient(app)

PREFERENCES = {
    "targetPosition": "Backend Engineer",
    "age": 29,
    "highestDegree": "Bachelor's Degree",
    "hasOngoingDegree": False,
    "experienceYears": 4,
    "industry": "Technology",
}


@pytest.fixture(autouse=True)
def _reset_state():
    limiter.reset()
    yield
    app.dependency_overrides.clear()


def _use_transport(transport: StubTransport) -> StubTransport:
    settings = Settings(_env_file=None, gemini_api_key="test-key")
    app.dependency_overrides[get_analyzer] = lambda: CVAnalyzer(settings, transport=transport)
    return transport


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


def test_analyze_text():
    transport = _use_transport(StubTransport("Here you go:\n" + json.dumps(SAMPLE_ANALYSIS)))

    response = client.post("/analyze/text", json={"cvContent": SAMPLE_CV, "preferences": PREFERENCES})

    assert response.status_code == 200
    assert response.json() == SAMPLE_ANALYSIS
    assert len(transport.calls) == 1


def test_analyze_text_fallback_on_unparseable_reply():
    _use_transport(StubTransport("no structured output today"))

    response = client.post("/analyze/text", json={"cvContent": SAMPLE_CV, "preferences": PREFERENCES})

    assert response.status_code == 200
    data = response.json()
    assert data["improvementAreas"][0]["priority"] == "high"
    assert data["overallScore"] == 70


@pytest.mark.parametrize(
    "error",
    [TransportError("boom"), ConfigurationMissingError("GEMINI_API_KEY is not configured")],
)
def test_analyze_text_transport_failure(error):
    _use_transport(StubTransport(error=error))

    response = client.post("/analyze/text", json={"cvContent": SAMPLE_CV, "preferences": PREFERENCES})

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to analyze CV. Please try again."


def test_analyze_text_missing_preferences():
    _use_transport(StubTransport("{}"))
    response = client.post("/analyze/text", json={"cvContent": SAMPLE_CV})
    assert response.status_code == 422


def test_analyze_text_blank_cv():
    transport = _use_transport(StubTransport("{}"))
    response = client.post("/analyze/text", json={"cvContent": "   ", "preferences": PREFERENCES})
    assert response.status_code == 400
    assert transport.calls == []


def test_analyze_upload_txt():
    transport = _use_transport(StubTransport(json.dumps(SAMPLE_ANALYSIS)))

    response = client.post(
        "/analyze",
        files={"cv_file": ("cv.txt", SAMPLE_CV.encode(), "text/plain")},
        data={"preferences": json.dumps(PREFERENCES)},
    )

    assert response.status_code == 200
    assert response.json()["overallScore"] == 75
    assert SAMPLE_CV in transport.calls[0][1]


def test_analyze_rejects_unsupported_file():
    _use_transport(StubTransport("{}"))
    response = client.post(
        "/analyze",
        files={"cv_file": ("cv.doc", b"legacy word", "application/msword")},
        data={"preferences": json.dumps(PREFERENCES)},
    )
    assert response.status_code == 400


def test_analyze_rejects_empty_document():
    _use_transport(StubTransport("{}"))
    response = client.post(
        "/analyze",
        files={"cv_file": ("cv.txt", b"   \n", "text/plain")},
        data={"preferences": json.dumps(PREFERENCES)},
    )
    assert response.status_code == 400


def test_analyze_rejects_invalid_preferences():
    _use_transport(StubTransport("{}"))
    response = client.post(
        "/analyze",
        files={"cv_file": ("cv.txt", SAMPLE_CV.encode(), "text/plain")},
        data={"preferences": json.dumps({"age": 30})},
    )
    assert response.status_code == 422


def test_analyze_rejects_oversized_file(monkeypatch):
    transport = _use_transport(StubTransport("{}"))
    monkeypatch.setattr(router_module.settings, "max_upload_size_mb", 0)

    response = client.post(
        "/analyze",
        files={"cv_file": ("cv.txt", SAMPLE_CV.encode(), "text/plain")},
        data={"preferences": json.dumps(PREFERENCES)},
    )

    assert response.status_code == 400
    assert "File too large" in response.json()["detail"]
    assert transport.calls == []


def test_analyze_rejects_corrupt_docx():
    transport = _use_transport(StubTransport("{}"))

    response = client.post(
        "/analyze",
        files={"cv_file": ("cv.docx", b"this is not a zip archive", "application/octet-stream")},
        data={"preferences": json.dumps(PREFERENCES)},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Could not read CV file"
    assert transport.calls == []


def test_analyze_text_respects_max_cv_chars(monkeypatch):
    transport = _use_transport(StubTransport(json.dumps(SAMPLE_ANALYSIS)))
    monkeypatch.setattr(router_module.settings, "max_cv_chars", 20)

    response = client.post("/analyze/text", json={"cvContent": "x" * 21, "preferences": PREFERENCES})

    assert response.status_code == 400
    assert "too long" in response.json()["detail"]
    assert transport.calls == []
