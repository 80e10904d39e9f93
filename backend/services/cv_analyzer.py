"""CV analysis client: prompt -> completion service -> structured critique.

Flow:
1. Build the system/user instruction pair from the CV text and preferences
2. One call to the completion service (transport errors propagate)
3. Pull the largest brace-delimited span out of the reply and parse it
4. Validate it as an AnalysisResult
5. Anything unparseable or off-schema is replaced by the fallback result
"""

import logging

from pydantic import ValidationError

from config import Settings
from models.requests import PreferenceProfile
from models.responses import AnalysisResult
from services import prompt_builder
from services.fallback import REASON_SCHEMA_MISMATCH, REASON_UNPARSEABLE, fallback_analysis
from services.gemini_client import CompletionTransport, GeminiTransport
from services.json_extractor import extract_json_object

logger = logging.getLogger(__name__)


def parse_analysis(raw_text: str) -> AnalysisResult:
    """Turn raw model output into an AnalysisResult, falling back on any defect."""
    payload = extract_json_object(raw_text)
    if payload is None:
        logger.warning("Failed to parse JSON response, using fallback")
        return fallback_analysis(REASON_UNPARSEABLE)

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "Response JSON does not match analysis schema (%d errors), using fallback",
            e.error_count(),
        )
        return fallback_analysis(REASON_SCHEMA_MISMATCH)


class CVAnalyzer:
    """Stateless apart from its configuration; safe to share between requests."""

    def __init__(self, settings: Settings, transport: CompletionTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport or GeminiTransport(settings)

    async def analyze(self, cv_content: str, preferences: PreferenceProfile) -> AnalysisResult:
        """Analyze a CV against the candidate's preferences.

        Raises:
            TransportError: the completion service produced no reply.
        """
        system_prompt, user_prompt = prompt_builder.build_analysis_prompt(cv_content, preferences)

        logger.info(
            "Requesting CV analysis for %r (%d chars) from %s",
            preferences.target_position,
            len(cv_content),
            self._settings.analysis_model,
        )
        raw_text = await self._transport.complete(system_prompt, user_prompt)

        return parse_analysis(raw_text)
