"""Pydantic schemas for profile upload and profile analysis."""

from datetime import datetime

from pydantic import Field

from crafter.core.schemas_base import CamelModel


class ProjectHighlight(CamelModel):
    """A project pulled from the resume."""

    name: str = Field(..., min_length=1, description="Project name from resume/experience")
    type: str = Field(..., description="Project category (Enterprise, SaaS, Startup, ...)")


class ProfileAnalysis(CamelModel):
    """Strategic profile report produced by the first wizard stage."""

    archetype: str = Field(..., min_length=1, description="Short professional archetype")
    proficiency: int = Field(..., ge=0, le=100, description="Overall proficiency 0-100")
    skills: list[str] = Field(..., min_length=4, max_length=8, description="4-8 core skills")
    projects: list[ProjectHighlight] = Field(default_factory=list)
    gap_title: str = Field(..., description="Title of the main strategic gap")
    gap_description: str = Field(..., description="1-2 sentence positioning gap")
    suggested_pivot: str = Field(..., description="Actionable repositioning suggestion")
    missing_skill_cluster: str = Field(..., description="Label of the missing skill category")
    missing_skill: str = Field(..., description="In-demand skill to add")
    missing_skill_desc: str = Field(..., description="Why the skill is valuable")
    client_gap_type: str = Field(..., description="Label for client type category")
    client_gap: str = Field(..., description="Client vertical to target")
    client_gap_desc: str = Field(..., description="Why the background fits this client type")
    recommended_keywords: list[str] = Field(
        ..., min_length=5, max_length=7, description="5-7 high-value profile keywords"
    )
    signature_mechanism: str | None = Field(
        default=None, description="Optional named method the freelancer is known for"
    )


class UserProfile(CamelModel):
    """Uploaded profile data. The profile id doubles as the wizard session id."""

    id: str
    resume_text: str
    upwork_url: str
    linkedin_url: str
    created_at: datetime


# =======================
# API request/response models
# =======================


class UploadProfileResponse(CamelModel):
    """Response body for the profile upload endpoint."""

    profile_id: str = Field(..., description="Wizard session id")
    analysis: ProfileAnalysis
