"""Tagged artifact union and per-stage status models."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from crafter.core.schemas_base import CamelModel
from crafter.core.schemas_description import DescriptionSuggestion
from crafter.core.schemas_gallery import GallerySuggestion
from crafter.core.schemas_pricing import PricingSuggestion
from crafter.core.schemas_process import ProcessSuggestion
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSuggestion

StageName = Literal[
    "profile_analysis",
    "project_suggestions",
    "pricing_suggestions",
    "gallery_suggestions",
    "process_suggestions",
    "description_suggestions",
]


class StageState(str, Enum):
    EMPTY = "empty"
    GENERATING = "generating"
    READY = "ready"
    REGENERATING = "regenerating"
    FAILED = "failed"


class ProfileAnalysisArtifact(BaseModel):
    kind: Literal["profile_analysis"] = "profile_analysis"
    payload: ProfileAnalysis


class ProjectSuggestionsArtifact(BaseModel):
    kind: Literal["project_suggestions"] = "project_suggestions"
    payload: ProjectSuggestion


class PricingSuggestionsArtifact(BaseModel):
    kind: Literal["pricing_suggestions"] = "pricing_suggestions"
    payload: PricingSuggestion


class GallerySuggestionsArtifact(BaseModel):
    kind: Literal["gallery_suggestions"] = "gallery_suggestions"
    payload: GallerySuggestion


class ProcessSuggestionsArtifact(BaseModel):
    kind: Literal["process_suggestions"] = "process_suggestions"
    payload: ProcessSuggestion


class DescriptionSuggestionsArtifact(BaseModel):
    kind: Literal["description_suggestions"] = "description_suggestions"
    payload: DescriptionSuggestion


Artifact = Annotated[
    Union[
        ProfileAnalysisArtifact,
        ProjectSuggestionsArtifact,
        PricingSuggestionsArtifact,
        GallerySuggestionsArtifact,
        ProcessSuggestionsArtifact,
        DescriptionSuggestionsArtifact,
    ],
    Field(discriminator="kind"),
]

ARTIFACT_TYPES: dict[str, type[BaseModel]] = {
    "profile_analysis": ProfileAnalysisArtifact,
    "project_suggestions": ProjectSuggestionsArtifact,
    "pricing_suggestions": PricingSuggestionsArtifact,
    "gallery_suggestions": GallerySuggestionsArtifact,
    "process_suggestions": ProcessSuggestionsArtifact,
    "description_suggestions": DescriptionSuggestionsArtifact,
}


def wrap_artifact(stage: str, payload: BaseModel) -> BaseModel:
    """Wrap a stage payload in its tagged artifact variant."""
    return ARTIFACT_TYPES[stage](payload=payload)


# =======================
# API request/response models
# =======================


class GenerateStageRequest(CamelModel):
    regenerate: bool = Field(default=False, description="Discard the cached artifact and edits")


class StageStatusItem(CamelModel):
    stage: StageName
    state: StageState
    has_edits: bool = False


class SessionStatusResponse(CamelModel):
    session_id: str
    stages: list[StageStatusItem]
