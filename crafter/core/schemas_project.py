"""Pydantic schemas for project idea, title/category suggestions and selection."""

from pydantic import Field, field_validator

from crafter.core.schemas_base import CamelModel


class TitleSuggestion(CamelModel):
    text: str = Field(..., min_length=1)
    rationale: str = ""
    confidence: float = Field(..., ge=0, le=100)


class CategorySuggestion(CamelModel):
    level1: str = Field(..., min_length=1)
    level2: str = Field(..., min_length=1)
    level3: str | None = None
    rationale: str = ""
    confidence: float = Field(..., ge=0, le=100)


class AttributeSuggestion(CamelModel):
    recommended: list[str] = Field(default_factory=list)
    rationale: str = ""


class SearchTagSuggestion(CamelModel):
    tag: str = Field(..., min_length=1)
    rationale: str = ""


class ProjectSuggestion(CamelModel):
    """Ranked titles, categories, attributes and tags for the listing."""

    titles: list[TitleSuggestion] = Field(..., min_length=1)
    categories: list[CategorySuggestion] = Field(..., min_length=1)
    attributes: dict[str, AttributeSuggestion] = Field(default_factory=dict)
    search_tags: list[SearchTagSuggestion] = Field(default_factory=list)
    market_insights: str = ""


class ProjectIdea(CamelModel):
    """The user's free-text description of the service to list."""

    project_idea: str = Field(..., min_length=10, max_length=2000)

    @field_validator("project_idea")
    @classmethod
    def _strip(cls, value: str) -> str:
        stripped = value.strip()
        if len(stripped) < 10:
            raise ValueError("Project idea must be at least 10 characters")
        return stripped


class ProjectSelection(CamelModel):
    """Title, category, tags and attributes the user settled on."""

    title: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1)
    search_tags: list[str] = Field(default_factory=list, max_length=5)
    attributes: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("title", "category")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()
