import math
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _clamp_score(value):
    """Round numeric scores and clamp them into 0-100.

    Non-numeric values are passed through so the int validator rejects them.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return value
    if isinstance(value, float) and not math.isfinite(value):
        return value
    if isinstance(value, (int, float)):
        return min(100, max(0, round(value)))
    return value


Score = Annotated[int, BeforeValidator(_clamp_score)]
Priority = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    """Frozen model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ATSCompatibility(CamelModel):
    score: Score
    issues: list[str]
    recommendations: list[str]


class SkillMatch(CamelModel):
    score: Score
    matched_skills: list[str]
    missing_skills: list[str]
    recommendations: list[str]


class ExperienceMatch(CamelModel):
    score: Score
    strengths: list[str]
    gaps: list[str]
    recommendations: list[str]


class ImprovementArea(CamelModel):
    priority: Priority
    area: str
    description: str
    action_items: list[str]


class AnalysisResult(CamelModel):
    """Structured CV critique returned by the completion service."""

    ats_compatibility: ATSCompatibility
    skill_match: SkillMatch
    experience_match: ExperienceMatch
    overall_score: Score
    improvement_areas: list[ImprovementArea]
