"""Pydantic schemas for the export bundle and its rendered forms."""

from typing import Literal

from pydantic import Field

from crafter.core.schemas_base import CamelModel
from crafter.core.schemas_description import DescriptionData
from crafter.core.schemas_gallery import GallerySuggestion
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_profile import ProfileAnalysis

BlockKind = Literal[
    "heading",
    "paragraph",
    "bulleted_list_item",
    "numbered_list_item",
    "code",
    "toggle",
]


class OutlineBlock(CamelModel):
    """Document-API-neutral block. Only toggles carry children."""

    kind: BlockKind
    text: str
    level: int | None = Field(default=None, ge=1, le=3)
    language: str | None = None
    children: list["OutlineBlock"] = Field(default_factory=list)


class ExportBundle(CamelModel):
    """Read-only aggregation of everything the wizard produced."""

    project_title: str = "Untitled Project"
    project_category: str = "General"
    project_idea: str = ""
    search_tags: list[str] = Field(default_factory=list)
    pricing: PricingSelections | None = None
    gallery: GallerySuggestion | None = None
    process: ProcessSelections | None = None
    description: DescriptionData | None = None
    analysis: ProfileAnalysis | None = None
    profile_context: str | None = None


class ExportResult(CamelModel):
    plain_text: str
    outline: list[OutlineBlock]


class NotionExportRequest(CamelModel):
    database_id: str = Field(..., min_length=1)
    project_data: ExportBundle


class NotionExportResponse(CamelModel):
    success: bool = True
    page_id: str
    url: str
