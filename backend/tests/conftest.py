"""Shared test configuration, fixtures and a stub completion transport."""

import copy

import pytest

from config import Settings
from models.requests import PreferenceProfile

SAMPLE_CV = "Experienced backend engineer skilled in Go and PostgreSQL"

SAMPLE_ANALYSIS = {
    "atsCompatibility": {"score": 80, "issues": [], "recommendations": []},
    "skillMatch": {
        "score": 75,
        "matchedSkills": ["Go"],
        "missingSkills": ["Kubernetes"],
        "recommendations": ["Add cloud experience"],
    },
    "experienceMatch": {
        "score": 70,
        "strengths": ["4 years experience"],
        "gaps": [],
        "recommendations": [],
    },
    "overallScore": 75,
    "improvementAreas": [
        {
            "priority": "medium",
            "area": "Cloud skills",
            "description": "Add container orchestration experience",
            "actionItems": ["Learn Kubernetes"],
        }
    ],
}


class StubTransport:
    """Deterministic completion transport that records every call."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_instruction: str, user_instruction: str) -> str:
        self.calls.append((system_instruction, user_instruction))
        if self.error is not None:
            raise self.error
        return self.reply


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: talks to the real completion service (needs GEMINI_API_KEY)"
    )


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key="test-key", request_timeout_s=5.0)


@pytest.fixture()
def preferences() -> PreferenceProfile:
    return PreferenceProfile(
        target_position="Backend Engineer",
        age=29,
        highest_degree="Bachelor's Degree",
        has_ongoing_degree=False,
        experience_years=4,
        industry="Technology",
    )


@pytest.fixture()
def sample_analysis() -> dict:
    return copy.deepcopy(SAMPLE_ANALYSIS)
