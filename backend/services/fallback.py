"""Placeholder analysis used when the model reply cannot be parsed."""

from models.responses import (
    AnalysisResult,
    ATSCompatibility,
    ExperienceMatch,
    ImprovementArea,
    SkillMatch,
)

REASON_UNPARSEABLE = "could not parse response"
REASON_SCHEMA_MISMATCH = "response did not match the expected format"


def fallback_analysis(reason: str = REASON_UNPARSEABLE) -> AnalysisResult:
    """Build a schema-valid "analysis unavailable" result naming ``reason``."""
    return AnalysisResult(
        ats_compatibility=ATSCompatibility(
            score=75,
            issues=["Unable to fully parse ATS compatibility from response"],
            recommendations=["Please run the analysis again"],
        ),
        skill_match=SkillMatch(
            score=70,
            matched_skills=["General skills detected"],
            missing_skills=["Analysis incomplete"],
            recommendations=["Rerun the analysis for a detailed skill comparison"],
        ),
        experience_match=ExperienceMatch(
            score=65,
            strengths=["Basic experience evaluation"],
            gaps=["Analysis incomplete"],
            recommendations=["Rerun the analysis for a detailed experience review"],
        ),
        overall_score=70,
        improvement_areas=[
            ImprovementArea(
                priority="high",
                area="Analysis Unavailable",
                description=f"Detailed analysis unavailable: {reason}",
                action_items=["Retry the analysis in a few moments"],
            )
        ],
    )
