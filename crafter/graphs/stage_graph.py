"""LangGraph pipeline that runs one wizard stage for a session.

load_inputs -> start -> generate -> persist. Missing required inputs fail in
load_inputs before anything is written. A failure after ``start`` records
``failed`` and then ``empty`` for the stage; no artifact is left behind.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from langgraph.graph import END, StateGraph
from pydantic import BaseModel

from crafter.chains.analyze_profile import analyze_profile
from crafter.chains.suggest_description import suggest_description
from crafter.chains.suggest_gallery import suggest_gallery
from crafter.chains.suggest_pricing import suggest_pricing
from crafter.chains.suggest_process import suggest_process
from crafter.chains.suggest_project import suggest_project
from crafter.core.config import get_settings
from crafter.core.errors import (
    MissingInputError,
    NotFoundError,
    StageTransitionError,
    ValidationError,
)
from crafter.core.llm import GenerationClient, get_generation_client
from crafter.core.logging import get_logger, log_with_context
from crafter.core.schemas_artifacts import StageState, wrap_artifact
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_project import ProjectSelection
from crafter.core.wizard_flow import (
    PRICING_SELECTIONS_KEY,
    PROCESS_SELECTIONS_KEY,
    PROFILE_KEY,
    PROJECT_IDEA_KEY,
    PROJECT_SELECTION_KEY,
    STAGE_EDIT_KEYS,
    STAGE_REQUIREMENTS,
    STAGES,
    advance_state,
    prompt_version_key,
    started_key,
    status_key,
)
from crafter.db.wizard_state import WizardStore, get_wizard_store, read_artifact, read_model

logger = get_logger(__name__)

MAX_STEPS = 6

SELECTION_MODELS: dict[str, type[BaseModel]] = {
    PROJECT_SELECTION_KEY: ProjectSelection,
    PRICING_SELECTIONS_KEY: PricingSelections,
    PROCESS_SELECTIONS_KEY: ProcessSelections,
}


@dataclass
class StageRunState:
    """State for the stage graph."""

    # Input fields
    session_id: str
    stage: str
    regenerate: bool
    store: Any
    client: Any

    # Processing state
    step_count: int = 0
    inputs: dict[str, Any] = field(default_factory=dict)
    payload: BaseModel | None = None

    # Output
    artifact: BaseModel | None = None


def _check_max_steps(state: StageRunState) -> StageRunState:
    """Check and increment step count, raise if exceeded."""
    state.step_count += 1
    if state.step_count > MAX_STEPS:
        raise RuntimeError(f"Graph exceeded max steps ({MAX_STEPS})")
    return state


def get_stage_state(store: WizardStore, session_id: str, stage: str) -> StageState:
    """
    Current state of a stage.

    With no recorded status the state is inferred from the artifact: ready
    when a readable artifact exists, empty otherwise.
    """
    raw = store.get(session_id, status_key(stage))
    if raw is not None:
        try:
            state = StageState(raw)
        except ValueError:
            logger.warning(
                f"Ignoring unknown stage status {raw!r}",
                extra={"session_id": session_id, "stage": stage},
            )
        else:
            if state != StageState.READY or read_artifact(store, session_id, stage) is not None:
                return state
    return StageState.READY if read_artifact(store, session_id, stage) else StageState.EMPTY


def _set_stage_state(
    store: WizardStore, session_id: str, stage: str, target: StageState
) -> StageState:
    current = get_stage_state(store, session_id, stage)
    advance_state(current, target)
    store.put(session_id, status_key(stage), target.value)
    if target in (StageState.GENERATING, StageState.REGENERATING):
        store.put(session_id, started_key(stage), datetime.now(timezone.utc).isoformat())
    logger.debug(
        f"Stage {current.value} -> {target.value}",
        extra={"session_id": session_id, "stage": stage},
    )
    return target


def load_inputs(state: StageRunState) -> dict[str, Any]:
    """Load and check the stage's upstream inputs."""
    state = _check_max_steps(state)
    store, session_id = state.store, state.session_id
    required, optional = STAGE_REQUIREMENTS[state.stage]

    inputs: dict[str, Any] = {}
    for key in (*required, *optional):
        if key == PROFILE_KEY:
            inputs[key] = store.get_profile(session_id)
        elif key == PROJECT_IDEA_KEY:
            idea = store.get(session_id, key)
            inputs[key] = idea if isinstance(idea, str) and idea.strip() else None
        elif key in SELECTION_MODELS:
            inputs[key] = read_model(store, session_id, key, SELECTION_MODELS[key])
        else:
            artifact = read_artifact(store, session_id, key)
            inputs[key] = artifact.payload if artifact is not None else None

    missing = [key for key in required if inputs[key] is None]
    if missing:
        logger.warning(
            f"Missing required input: {', '.join(missing)}",
            extra={"session_id": session_id, "stage": state.stage},
        )
        raise MissingInputError(state.stage, missing)

    return {"inputs": inputs, "step_count": state.step_count}


def start(state: StageRunState) -> dict[str, Any]:
    """Mark the stage in flight; on regenerate drop the artifact and edits built on it."""
    state = _check_max_steps(state)
    store, session_id = state.store, state.session_id

    if state.regenerate and get_stage_state(store, session_id, state.stage) == StageState.READY:
        _set_stage_state(store, session_id, state.stage, StageState.REGENERATING)
        store.delete(session_id, state.stage)
    else:
        _set_stage_state(store, session_id, state.stage, StageState.GENERATING)

    # Edits go even when the cached artifact was unreadable
    if state.regenerate:
        for key in STAGE_EDIT_KEYS[state.stage]:
            store.delete(session_id, key)
        logger.info(
            "Discarded cached artifact and edits for regeneration",
            extra={"session_id": session_id, "stage": state.stage},
        )

    return {"step_count": state.step_count}


def generate(state: StageRunState) -> dict[str, Any]:
    """Call the stage's chain."""
    state = _check_max_steps(state)
    inputs = state.inputs

    logger.info(
        "Calling LLM for stage",
        extra={"session_id": state.session_id, "stage": state.stage},
    )

    try:
        # First point that needs LLM credentials
        client = state.client or get_generation_client()
        if state.stage == "profile_analysis":
            payload = analyze_profile(inputs[PROFILE_KEY], client)
        else:
            analysis = inputs["profile_analysis"]
            idea = inputs[PROJECT_IDEA_KEY]
            project = inputs.get(PROJECT_SELECTION_KEY)
            pricing = inputs.get(PRICING_SELECTIONS_KEY)
            if state.stage == "project_suggestions":
                payload = suggest_project(analysis, idea, client)
            elif state.stage == "pricing_suggestions":
                payload = suggest_pricing(analysis, idea, project, client)
            elif state.stage == "gallery_suggestions":
                payload = suggest_gallery(analysis, idea, project, pricing, client)
            elif state.stage == "process_suggestions":
                payload = suggest_process(analysis, idea, project, pricing, client)
            else:
                process = inputs.get(PROCESS_SELECTIONS_KEY)
                payload = suggest_description(analysis, idea, project, pricing, process, client)
    except Exception as e:
        logger.error(
            f"Stage generation failed: {e}",
            extra={"session_id": state.session_id, "stage": state.stage},
        )
        raise

    return {"payload": payload, "step_count": state.step_count}


def persist(state: StageRunState) -> dict[str, Any]:
    """Store the tagged artifact and mark the stage ready."""
    state = _check_max_steps(state)

    if state.payload is None:
        raise ValueError("Stage payload not available")

    artifact = wrap_artifact(state.stage, state.payload)
    state.store.put(
        state.session_id, state.stage, artifact.model_dump(mode="json", by_alias=True)
    )
    prompt_version = get_settings().PROMPT_VERSION
    state.store.put(state.session_id, prompt_version_key(state.stage), prompt_version)
    _set_stage_state(state.store, state.session_id, state.stage, StageState.READY)

    logger.info(
        f"Persisted stage artifact (prompt_version={prompt_version})",
        extra={"session_id": state.session_id, "stage": state.stage},
    )
    return {"artifact": artifact, "step_count": state.step_count}


def _build_graph() -> StateGraph:
    """Build the stage graph."""
    graph = StateGraph(StageRunState)

    graph.add_node("load_inputs", load_inputs)
    graph.add_node("start", start)
    graph.add_node("generate", generate)
    graph.add_node("persist", persist)

    # Linear flow (no cycles)
    graph.set_entry_point("load_inputs")
    graph.add_edge("load_inputs", "start")
    graph.add_edge("start", "generate")
    graph.add_edge("generate", "persist")
    graph.add_edge("persist", END)

    return graph


# Compile the graph once at module load
_compiled_graph = _build_graph().compile()


def _record_failure(store: WizardStore, session_id: str, stage: str) -> None:
    """Move an in-flight stage through failed back to empty."""
    current = get_stage_state(store, session_id, stage)
    if current not in (StageState.GENERATING, StageState.REGENERATING):
        return
    store.delete(session_id, stage)
    store.put(session_id, status_key(stage), StageState.FAILED.value)
    logger.warning("Stage failed", extra={"session_id": session_id, "stage": stage})
    _set_stage_state(store, session_id, stage, StageState.EMPTY)


def _is_abandoned(store: WizardStore, session_id: str, stage: str) -> bool:
    """True when an in-flight stage started longer ago than STAGE_TIMEOUT_SECONDS."""
    raw = store.get(session_id, started_key(stage))
    try:
        started = datetime.fromisoformat(raw) if isinstance(raw, str) else None
    except ValueError:
        started = None
    if started is None:
        return True
    if started.tzinfo is None:
        started = started.replace(tzinfo=timezone.utc)

    timeout = timedelta(seconds=get_settings().STAGE_TIMEOUT_SECONDS)
    return datetime.now(timezone.utc) - started > timeout


def run_stage(
    session_id: str,
    stage: str,
    regenerate: bool = False,
    *,
    store: WizardStore | None = None,
    client: GenerationClient | None = None,
) -> BaseModel:
    """
    Get or generate the artifact for a stage.

    Args:
        session_id: Wizard session (profile) id
        stage: One of STAGES
        regenerate: Discard the cached artifact and its edits and generate again
        store: Wizard store (defaults to the configured one)
        client: Generation client (the configured backend is built only when generating)

    Returns:
        The stage's tagged artifact

    Raises:
        ValidationError: Unknown stage
        NotFoundError: Unknown session
        MissingInputError: Required upstream input absent
        StageTransitionError: Stage in flight and not past STAGE_TIMEOUT_SECONDS
        ServiceError: LLM unreachable or unauthorized
        FormatError: Output invalid after one retry
    """
    if stage not in STAGES:
        raise ValidationError(f"Unknown stage: {stage}", user_message=f"Unknown step: {stage}")

    store = store or get_wizard_store()
    if store.get_profile(session_id) is None:
        raise NotFoundError(
            f"Session {session_id} not found", user_message="Profile not found"
        )

    if not regenerate:
        cached = read_artifact(store, session_id, stage)
        if cached is not None:
            logger.info(
                "Returning cached artifact",
                extra={"session_id": session_id, "stage": stage},
            )
            return cached

    current = get_stage_state(store, session_id, stage)
    if current in (StageState.GENERATING, StageState.REGENERATING):
        if not _is_abandoned(store, session_id, stage):
            raise StageTransitionError(
                f"Stage {stage} is already {current.value}",
                user_message="This step is still generating. Please wait for it to finish.",
            )
        logger.warning(
            f"Resetting stage left {current.value} past the timeout",
            extra={"session_id": session_id, "stage": stage},
        )
        _record_failure(store, session_id, stage)

    initial_state = StageRunState(
        session_id=session_id,
        stage=stage,
        regenerate=regenerate,
        store=store,
        client=client,
    )

    logger.info(
        f"Starting stage graph (regenerate={regenerate})",
        extra={"session_id": session_id, "stage": stage},
    )

    started = time.monotonic()
    try:
        final_state = _compiled_graph.invoke(initial_state)
    except Exception:
        _record_failure(store, session_id, stage)
        raise

    log_with_context(
        logger,
        logging.INFO,
        "Stage graph completed",
        session_id=session_id,
        stage=stage,
        regenerate=regenerate,
        prompt_version=get_settings().PROMPT_VERSION,
        duration_ms=int((time.monotonic() - started) * 1000),
    )
    return final_state["artifact"]
