"""API endpoints for profile upload and profile analysis."""

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, Form, UploadFile

from crafter.core.config import Settings, get_settings
from crafter.core.errors import NotFoundError, StageTransitionError, ValidationError
from crafter.core.file_text import extract_resume_text
from crafter.core.llm import GenerationClient, get_route_generation_client
from crafter.core.logging import get_logger
from crafter.core.schemas_artifacts import StageState, wrap_artifact
from crafter.core.schemas_profile import ProfileAnalysis, UploadProfileResponse, UserProfile
from crafter.core.wizard_flow import status_key
from crafter.db.wizard_state import WizardStore, get_wizard_store, read_artifact
from crafter.graphs.stage_graph import get_stage_state, run_stage

logger = get_logger(__name__)

router = APIRouter()

STAGE = "profile_analysis"


@router.post("/upload-profile", response_model=UploadProfileResponse, response_model_by_alias=True)
async def upload_profile(
    resume: UploadFile | None = File(default=None),
    upwork_url: str = Form(default="", alias="upworkUrl"),
    linkedin_url: str = Form(default="", alias="linkedinUrl"),
    settings: Settings = Depends(get_settings),
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> UploadProfileResponse:
    """
    Upload a resume and profile links, then run the profile analysis.

    Creates the wizard session; the returned profileId is the session id.

    Raises:
        ValidationError: Missing file or URLs, unsupported or unreadable resume
        ServiceError / FormatError: Analysis failed
    """
    if resume is None:
        raise ValidationError("No resume file", user_message="Resume file is required")

    if not upwork_url.strip() or not linkedin_url.strip():
        raise ValidationError(
            "Missing profile URLs", user_message="Upwork and LinkedIn URLs are required"
        )

    raw_bytes = await resume.read()
    resume_text = extract_resume_text(
        resume.filename or "",
        resume.content_type,
        raw_bytes,
        max_bytes=settings.MAX_UPLOAD_BYTES,
        min_chars=settings.MIN_RESUME_CHARS,
    )

    profile = UserProfile(
        id=str(uuid.uuid4()),
        resume_text=resume_text.text,
        upwork_url=upwork_url.strip(),
        linkedin_url=linkedin_url.strip(),
        created_at=datetime.now(timezone.utc),
    )
    store.create_session(profile)

    logger.info(
        f"Profile uploaded ({resume_text.source_format}, {len(resume_text.text)} chars)",
        extra={"session_id": profile.id},
    )

    artifact = run_stage(profile.id, STAGE, store=store, client=client)
    return UploadProfileResponse(profile_id=profile.id, analysis=artifact.payload)


@router.get("/analysis/{profile_id}")
async def get_analysis(
    profile_id: str,
    store: WizardStore = Depends(get_wizard_store),
) -> dict:
    """Get the stored profile analysis."""
    artifact = read_artifact(store, profile_id, STAGE)
    if artifact is None:
        raise NotFoundError(f"No analysis for {profile_id}", user_message="Analysis not found")
    return artifact.payload.to_store()


@router.put("/analysis/{profile_id}")
async def update_analysis(
    profile_id: str,
    analysis: ProfileAnalysis,
    store: WizardStore = Depends(get_wizard_store),
) -> dict:
    """
    Replace the profile analysis with a user-edited copy.

    Last write wins; the edit goes through the same validation as generated output.
    """
    if read_artifact(store, profile_id, STAGE) is None:
        raise NotFoundError(f"No analysis for {profile_id}", user_message="Analysis not found")
    if get_stage_state(store, profile_id, STAGE) != StageState.READY:
        raise StageTransitionError(
            "Analysis is being regenerated",
            user_message="The analysis is still generating. Please wait for it to finish.",
        )

    store.put(profile_id, STAGE, wrap_artifact(STAGE, analysis).model_dump(mode="json", by_alias=True))
    store.put(profile_id, status_key(STAGE), StageState.READY.value)

    logger.info("Analysis edited", extra={"session_id": profile_id, "stage": STAGE})
    return analysis.to_store()
