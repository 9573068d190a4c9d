"""Read-only Upwork knowledge endpoints."""

from fastapi import APIRouter, Query

from crafter.core.category_taxonomy import CATEGORY_TAXONOMY, get_project_attributes
from crafter.core.upwork_knowledge import (
    DESCRIPTION_BEST_PRACTICES,
    PROJECT_ATTRIBUTES,
    TITLE_BEST_PRACTICES,
    UPWORK_CATEGORIES,
)

router = APIRouter()


@router.get("/categories")
async def get_categories() -> list[dict]:
    return UPWORK_CATEGORIES


@router.get("/attributes")
async def get_attributes() -> dict:
    return PROJECT_ATTRIBUTES


@router.get("/title-best-practices")
async def get_title_best_practices() -> dict:
    return TITLE_BEST_PRACTICES


@router.get("/description-best-practices")
async def get_description_best_practices() -> dict:
    return DESCRIPTION_BEST_PRACTICES


@router.get("/taxonomy")
async def get_taxonomy() -> dict:
    """Three-level Project Catalog category taxonomy."""
    return CATEGORY_TAXONOMY


@router.get("/taxonomy/attributes")
async def get_taxonomy_attributes(
    level1: str = Query(..., min_length=1),
    level2: str = Query(..., min_length=1),
    level3: str | None = Query(default=None),
) -> list[dict]:
    """Attribute definitions for a category path; empty when none are defined."""
    return get_project_attributes(level1, level2, level3)
