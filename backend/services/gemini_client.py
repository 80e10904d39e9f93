"""Google Gemini completion transport with error handling."""

import asyncio
import logging
from typing import Protocol

import httpx
from google import genai
from google.genai import errors, types

from config import Settings
from services.errors import ConfigurationMissingError, TransportError

logger = logging.getLogger(__name__)


class CompletionTransport(Protocol):
    async def complete(self, system_instruction: str, user_instruction: str) -> str: ...


class GeminiTransport:
    """Sends one system + user instruction pair to Gemini and returns the reply text."""

    def __init__(self, settings: Settings, client: genai.Client | None = None) -> None:
        self._settings = settings
        self._client = client

    def get_client(self) -> genai.Client:
        if self._client is not None:
            return self._client
        if not self._settings.gemini_api_key:
            logger.error("No GEMINI_API_KEY set - completion service is not configured")
            raise ConfigurationMissingError("GEMINI_API_KEY is not configured")
        self._client = genai.Client(
            api_key=self._settings.gemini_api_key,
            http_options=types.HttpOptions(
                timeout=int(self._settings.request_timeout_s * 1000),
            ),
        )
        return self._client

    async def complete(self, system_instruction: str, user_instruction: str) -> str:
        client = self.get_client()
        timeout_s = self._settings.request_timeout_s

        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self._settings.analysis_model,
                    contents=user_instruction,
                    config=types.GenerateContentConfig(
                        system_instruction=system_instruction,
                        temperature=self._settings.temperature,
                        max_output_tokens=self._settings.max_output_tokens,
                    ),
                ),
                timeout=timeout_s,
            )
        except asyncio.TimeoutError as e:
            logger.error("Gemini request timed out after %.0fs", timeout_s)
            raise TransportError(f"Completion service timed out after {timeout_s:.0f}s") from e
        except errors.APIError as e:
            logger.error("Gemini API error: %s", e)
            raise TransportError(f"Completion service error: {e}") from e
        except httpx.HTTPError as e:
            logger.error("Gemini network error: %s", e)
            raise TransportError(f"Could not reach completion service: {e}") from e

        text = response.text
        if not text or not text.strip():
            logger.error("Gemini returned no content")
            raise TransportError("No analysis content received from completion service")
        return text
