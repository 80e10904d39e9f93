"""Best-effort recovery of a JSON object from free-form model output."""

import json
import logging

logger = logging.getLogger(__name__)


def find_brace_span(text: str) -> str | None:
    """Return the span from the first '{' to the last '}', or None.

    Greedy on purpose: prose or code fences around a single object are
    skipped, but two separate objects in one reply produce an invalid span.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start:end + 1]


def extract_json_object(text: str | None) -> dict | None:
    """Parse the largest brace-delimited span of ``text`` as a JSON object.

    Returns None instead of raising when nothing usable is found.
    """
    if not text:
        return None

    span = find_brace_span(text)
    if span is None:
        logger.debug("No JSON object found in response")
        return None

    try:
        payload = json.loads(span)
    except (ValueError, RecursionError) as e:
        logger.debug("Brace span is not valid JSON: %s", e)
        return None

    return payload if isinstance(payload, dict) else None
