"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.cv_analyzer import CVAnalyzer


@lru_cache
def get_analyzer() -> CVAnalyzer:
    return CVAnalyzer(settings)
