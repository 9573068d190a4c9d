"""API endpoints for the project idea, stage generation and stage status."""

from fastapi import APIRouter, Depends

from crafter.core.errors import NotFoundError
from crafter.core.llm import GenerationClient, get_route_generation_client
from crafter.core.logging import get_logger
from crafter.core.schemas_artifacts import (
    GenerateStageRequest,
    SessionStatusResponse,
    StageStatusItem,
)
from crafter.core.schemas_project import ProjectIdea
from crafter.core.wizard_flow import PROJECT_IDEA_KEY, STAGE_EDIT_KEYS, STAGES
from crafter.db.wizard_state import WizardStore, get_wizard_store
from crafter.graphs.stage_graph import get_stage_state, run_stage

logger = get_logger(__name__)

router = APIRouter()


def _require_session(store: WizardStore, session_id: str) -> None:
    if store.get_profile(session_id) is None:
        raise NotFoundError(f"Session {session_id} not found", user_message="Profile not found")


@router.put("/sessions/{session_id}/project-idea")
async def put_project_idea(
    session_id: str,
    body: ProjectIdea,
    store: WizardStore = Depends(get_wizard_store),
) -> dict:
    """Store the user's free-text project idea."""
    _require_session(store, session_id)
    store.put(session_id, PROJECT_IDEA_KEY, body.project_idea)
    logger.info("Project idea saved", extra={"session_id": session_id})
    return body.to_store()


async def _generate(
    session_id: str,
    stage: str,
    body: GenerateStageRequest | None,
    store: WizardStore,
    client: GenerationClient | None,
) -> dict:
    regenerate = body.regenerate if body is not None else False
    artifact = run_stage(session_id, stage, regenerate, store=store, client=client)
    return artifact.model_dump(mode="json", by_alias=True)


@router.post("/sessions/{session_id}/profile-analysis")
async def profile_analysis(
    session_id: str,
    body: GenerateStageRequest | None = None,
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> dict:
    """Get or regenerate the profile analysis."""
    return await _generate(session_id, "profile_analysis", body, store, client)


@router.post("/sessions/{session_id}/project-suggestions")
async def project_suggestions(
    session_id: str,
    body: GenerateStageRequest | None = None,
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> dict:
    """Get or regenerate title, category, attribute and tag suggestions."""
    return await _generate(session_id, "project_suggestions", body, store, client)


@router.post("/sessions/{session_id}/pricing-suggestions")
async def pricing_suggestions(
    session_id: str,
    body: GenerateStageRequest | None = None,
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> dict:
    """Get or regenerate three-tier pricing suggestions."""
    return await _generate(session_id, "pricing_suggestions", body, store, client)


@router.post("/sessions/{session_id}/gallery-suggestions")
async def gallery_suggestions(
    session_id: str,
    body: GenerateStageRequest | None = None,
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> dict:
    """Get or regenerate thumbnail, video script and sample document suggestions."""
    return await _generate(session_id, "gallery_suggestions", body, store, client)


@router.post("/sessions/{session_id}/process-suggestions")
async def process_suggestions(
    session_id: str,
    body: GenerateStageRequest | None = None,
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> dict:
    """Get or regenerate requirement and step suggestions."""
    return await _generate(session_id, "process_suggestions", body, store, client)


@router.post("/sessions/{session_id}/description-suggestions")
async def description_suggestions(
    session_id: str,
    body: GenerateStageRequest | None = None,
    store: WizardStore = Depends(get_wizard_store),
    client: GenerationClient | None = Depends(get_route_generation_client),
) -> dict:
    """Get or regenerate the project summary and FAQs."""
    return await _generate(session_id, "description_suggestions", body, store, client)


@router.get("/sessions/{session_id}/status", response_model=SessionStatusResponse)
async def get_status(
    session_id: str,
    store: WizardStore = Depends(get_wizard_store),
) -> SessionStatusResponse:
    """Per-stage state for a session, in wizard order."""
    _require_session(store, session_id)
    stored_keys = set(store.keys(session_id))
    return SessionStatusResponse(
        session_id=session_id,
        stages=[
            StageStatusItem(
                stage=stage,
                state=get_stage_state(store, session_id, stage),
                has_edits=any(key in stored_keys for key in STAGE_EDIT_KEYS[stage]),
            )
            for stage in STAGES
        ],
    )
