"""API router for v1 endpoints."""

from fastapi import APIRouter

from crafter.api import export, knowledge, profiles, selections, stages

router = APIRouter()

# Profile upload and analysis routes
router.include_router(profiles.router, tags=["profiles"])

# Project idea, stage generation and status routes
router.include_router(stages.router, tags=["stages"])

# Accepted selection routes
router.include_router(selections.router, tags=["selections"])

# Listing export and Notion export routes
router.include_router(export.router, tags=["export"])

# Static Upwork knowledge routes
router.include_router(knowledge.router, prefix="/upwork-knowledge", tags=["knowledge"])
