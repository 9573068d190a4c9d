"""Pydantic schemas for gallery asset suggestions."""

from pydantic import Field

from crafter.core.schemas_base import CamelModel


class ThumbnailPrompt(CamelModel):
    """Image-generation prompt for the listing thumbnail."""

    prompt: str = Field(..., min_length=1)
    style_notes: str = ""
    color_palette: list[str] = Field(default_factory=list)
    composition_tips: str = ""
    visual_style: str | None = None


class ScriptPoint(CamelModel):
    point: str = Field(..., min_length=1)
    duration: str = ""
    visual_suggestion: str | None = None


class VideoScript(CamelModel):
    """Short intro video script, broken into parts plus the full read-through."""

    hook: str = ""
    introduction: str = ""
    main_points: list[ScriptPoint] = Field(default_factory=list)
    call_to_action: str = ""
    total_duration: str = ""
    full_script: str = Field(..., min_length=1)


class SampleDocument(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    content_outline: list[str] = Field(default_factory=list)
    purpose: str = ""
    file_type: str | None = None
    data_evidence: str | None = None


class GallerySuggestion(CamelModel):
    thumbnail_prompt: ThumbnailPrompt
    video_script: VideoScript
    sample_documents: list[SampleDocument] = Field(default_factory=list)
    gallery_strategy: str = ""
