from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from models.responses import CamelModel

DEGREE_OPTIONS = (
    "High School",
    "Associate Degree",
    "Bachelor's Degree",
    "Master's Degree",
    "Doctoral Degree (PhD)",
    "Professional Degree (MD, JD, etc.)",
)

INDUSTRY_OPTIONS = (
    "Technology",
    "Finance",
    "Healthcare",
    "Education",
    "Marketing",
    "Sales",
    "Manufacturing",
    "Retail",
    "Consulting",
    "Non-profit",
    "Government",
    "Other",
)

Degree = Literal[DEGREE_OPTIONS]
Industry = Literal[INDUSTRY_OPTIONS]


class PreferenceProfile(CamelModel):
    """Answers from the preferences questionnaire."""

    target_position: str = Field(..., min_length=1, max_length=200)
    age: int | None = Field(None, ge=18, le=70)
    highest_degree: Degree | None = None
    has_ongoing_degree: bool = False
    ongoing_degree: str | None = Field(None, max_length=200)  # only used if has_ongoing_degree
    experience_years: int = Field(0, ge=0, le=70)
    industry: Industry | None = None


class CVDocument(BaseModel):
    """Plain text extracted from an uploaded CV."""

    file_name: str
    content: str
    upload_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TextAnalyzeRequest(CamelModel):
    cv_content: str = Field(..., min_length=1, description="Plain text CV content")
    preferences: PreferenceProfile
