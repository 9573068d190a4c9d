"""API endpoints for accepting user-edited stage selections."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from crafter.core.config import Settings, get_settings
from crafter.core.errors import NotFoundError, StageTransitionError
from crafter.core.logging import get_logger
from crafter.core.schemas_artifacts import StageState
from crafter.core.schemas_description import DescriptionData
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_project import ProjectSelection
from crafter.core.wizard_flow import (
    DESCRIPTION_DATA_KEY,
    PRICING_SELECTIONS_KEY,
    PROCESS_SELECTIONS_KEY,
    PROJECT_SELECTION_KEY,
    SELECTION_INVALIDATES,
    SELECTION_SOURCE_STAGE,
    accept_description_data,
    accept_pricing_selections,
    accept_process_selections,
    accept_project_selection,
    status_key,
)
from crafter.db.wizard_state import WizardStore, get_wizard_store, write_model
from crafter.graphs.stage_graph import get_stage_state

logger = get_logger(__name__)

router = APIRouter()


def _check_source_ready(store: WizardStore, session_id: str, key: str) -> None:
    if store.get_profile(session_id) is None:
        raise NotFoundError(f"Session {session_id} not found", user_message="Profile not found")

    stage = SELECTION_SOURCE_STAGE[key]
    state = get_stage_state(store, session_id, stage)
    if state != StageState.READY:
        raise StageTransitionError(
            f"Cannot accept {key} while {stage} is {state.value}",
            user_message=f"Generate {stage.replace('_', ' ')} before saving this step.",
        )


def _save_selection(store: WizardStore, session_id: str, key: str, value: BaseModel) -> dict:
    write_model(store, session_id, key, value)

    for stage in SELECTION_INVALIDATES.get(key, ()):
        if get_stage_state(store, session_id, stage) == StageState.READY:
            store.delete(session_id, stage)
            store.put(session_id, status_key(stage), StageState.EMPTY.value)
            logger.info(
                f"Invalidated {stage} after {key} changed",
                extra={"session_id": session_id, "stage": stage},
            )

    logger.info(f"Saved {key}", extra={"session_id": session_id})
    return value.model_dump(mode="json", by_alias=True)


@router.put("/sessions/{session_id}/selections/project")
async def put_project_selection(
    session_id: str,
    body: ProjectSelection,
    store: WizardStore = Depends(get_wizard_store),
) -> dict:
    """Accept the chosen title, category, tags and attributes."""
    _check_source_ready(store, session_id, PROJECT_SELECTION_KEY)
    return _save_selection(store, session_id, PROJECT_SELECTION_KEY, accept_project_selection(body))


@router.put("/sessions/{session_id}/selections/pricing")
async def put_pricing_selections(
    session_id: str,
    body: PricingSelections,
    store: WizardStore = Depends(get_wizard_store),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Accept pricing tiers. Cached gallery suggestions are dropped."""
    _check_source_ready(store, session_id, PRICING_SELECTIONS_KEY)
    pricing = accept_pricing_selections(body, settings.DEFAULT_TARGET_HOURLY_RATE)
    return _save_selection(store, session_id, PRICING_SELECTIONS_KEY, pricing)


@router.put("/sessions/{session_id}/selections/process")
async def put_process_selections(
    session_id: str,
    body: ProcessSelections,
    store: WizardStore = Depends(get_wizard_store),
) -> dict:
    """Accept requirements and steps; only qualifying entries are kept."""
    _check_source_ready(store, session_id, PROCESS_SELECTIONS_KEY)
    return _save_selection(store, session_id, PROCESS_SELECTIONS_KEY, accept_process_selections(body))


@router.put("/sessions/{session_id}/selections/description")
async def put_description_data(
    session_id: str,
    body: DescriptionData,
    store: WizardStore = Depends(get_wizard_store),
) -> dict:
    """Accept the summary and FAQs."""
    _check_source_ready(store, session_id, DESCRIPTION_DATA_KEY)
    return _save_selection(store, session_id, DESCRIPTION_DATA_KEY, accept_description_data(body))
