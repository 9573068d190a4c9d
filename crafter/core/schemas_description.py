"""Pydantic schemas for the project summary and FAQs."""

from pydantic import Field

from crafter.core.schemas_base import CamelModel

MIN_SUMMARY_CHARS = 120
MAX_SUMMARY_CHARS = 1200
MAX_FAQS = 5


class SuggestedFAQ(CamelModel):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    rationale: str = ""


class DescriptionSuggestion(CamelModel):
    project_summary: str = Field(..., min_length=1)
    summary_rationale: str = ""
    faqs: list[SuggestedFAQ] = Field(default_factory=list, max_length=MAX_FAQS)


class FAQ(CamelModel):
    question: str = ""
    answer: str = ""
    rationale: str | None = None


class DescriptionData(CamelModel):
    """Summary and FAQs as edited by the user; bounds are checked on acceptance."""

    project_summary: str = ""
    faqs: list[FAQ] = Field(default_factory=list)
