"""Pydantic schemas for client requirements and delivery process steps."""

from pydantic import Field

from crafter.core.schemas_base import CamelModel

MIN_REQUIREMENT_CHARS = 10
MIN_STEP_TITLE_CHARS = 3


class SuggestedRequirement(CamelModel):
    text: str = Field(..., min_length=1)
    is_required: bool = True
    rationale: str = ""


class SuggestedStep(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    estimated_duration: str | None = None
    rationale: str = ""


class ProcessSuggestion(CamelModel):
    requirements: list[SuggestedRequirement] = Field(..., min_length=1)
    steps: list[SuggestedStep] = Field(..., min_length=1)
    process_strategy: str = ""


class Requirement(CamelModel):
    text: str = ""
    is_required: bool = False

    def qualifies(self) -> bool:
        return len(self.text.strip()) >= MIN_REQUIREMENT_CHARS


class ProcessStep(CamelModel):
    title: str = ""
    description: str = ""

    def qualifies(self) -> bool:
        return len(self.title.strip()) >= MIN_STEP_TITLE_CHARS


class ProcessSelections(CamelModel):
    """Requirements and steps as edited by the user."""

    requirements: list[Requirement] = Field(default_factory=list)
    steps: list[ProcessStep] = Field(default_factory=list)
