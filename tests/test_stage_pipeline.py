"""Tests for the stage graph with an in-memory store and a scripted backend."""

from datetime import datetime, timedelta, timezone

import pytest

from crafter.core.config import get_settings
from crafter.core.errors import (
    FormatError,
    MissingInputError,
    NotFoundError,
    ServiceError,
    StageTransitionError,
    ValidationError,
)
from crafter.core.schemas_artifacts import (
    ProfileAnalysisArtifact,
    ProjectSuggestionsArtifact,
    StageState,
)
from crafter.core.wizard_flow import (
    PROJECT_IDEA_KEY,
    PROJECT_SELECTION_KEY,
    prompt_version_key,
    started_key,
    status_key,
)
from crafter.db.wizard_state import read_artifact
from crafter.graphs.stage_graph import get_stage_state, run_stage
from tests.fixtures_wizard import (
    PRICING_SUGGESTION,
    PROFILE_ANALYSIS,
    PROJECT_SELECTION,
    PROJECT_SUGGESTION,
    as_json,
    seed_artifact,
)

IDEA = "dbt and Snowflake pipelines for early-stage fintech analytics teams"


@pytest.fixture
def ready_session(store, session_id) -> str:
    """Session with a ready profile analysis and a project idea."""
    seed_artifact(store, session_id, "profile_analysis")
    store.put(session_id, PROJECT_IDEA_KEY, IDEA)
    return session_id


def test_profile_analysis_generates_and_persists(store, session_id, backend, generation_client):
    backend.queue(as_json(PROFILE_ANALYSIS))

    artifact = run_stage(session_id, "profile_analysis", store=store, client=generation_client)

    assert isinstance(artifact, ProfileAnalysisArtifact)
    assert artifact.payload.archetype == "Data Platform Engineer"
    assert store.get(session_id, status_key("profile_analysis")) == "ready"
    assert get_stage_state(store, session_id, "profile_analysis") == StageState.READY
    assert "Jordan Avery" in backend.calls[0]["messages"][0]["content"]


def test_cached_artifact_is_returned_without_a_call(store, ready_session, backend, generation_client):
    backend.queue(as_json(PROJECT_SUGGESTION))

    first = run_stage(ready_session, "project_suggestions", store=store, client=generation_client)
    second = run_stage(ready_session, "project_suggestions", store=store, client=generation_client)

    assert first.model_dump() == second.model_dump()
    assert len(backend.calls) == 1


def test_regenerate_replaces_artifact_and_drops_edits(store, ready_session, backend, generation_client):
    seed_artifact(store, ready_session, "project_suggestions")
    store.put(ready_session, PROJECT_SELECTION_KEY, PROJECT_SELECTION)
    regenerated = {**PROJECT_SUGGESTION, "marketInsights": "Fresh insight"}
    backend.queue(as_json(regenerated))

    artifact = run_stage(
        ready_session, "project_suggestions", True, store=store, client=generation_client
    )

    assert isinstance(artifact, ProjectSuggestionsArtifact)
    assert artifact.payload.market_insights == "Fresh insight"
    assert store.get(ready_session, PROJECT_SELECTION_KEY) is None
    stored = read_artifact(store, ready_session, "project_suggestions")
    assert stored.payload.market_insights == "Fresh insight"
    assert get_stage_state(store, ready_session, "project_suggestions") == StageState.READY


def test_invalid_output_leaves_nothing_behind(store, ready_session, backend, generation_client):
    backend.queue("Sorry, I cannot help with that.", "Still no JSON here.")

    with pytest.raises(FormatError):
        run_stage(ready_session, "project_suggestions", store=store, client=generation_client)

    assert store.get(ready_session, "project_suggestions") is None
    assert store.get(ready_session, status_key("project_suggestions")) == "empty"
    assert get_stage_state(store, ready_session, "project_suggestions") == StageState.EMPTY


def test_failed_regenerate_clears_the_old_artifact(store, ready_session, backend, generation_client):
    seed_artifact(store, ready_session, "project_suggestions")
    backend.queue(ServiceError("upstream down", service="openai"))

    with pytest.raises(ServiceError):
        run_stage(ready_session, "project_suggestions", True, store=store, client=generation_client)

    assert read_artifact(store, ready_session, "project_suggestions") is None
    assert get_stage_state(store, ready_session, "project_suggestions") == StageState.EMPTY


def test_stage_can_run_again_after_failure(store, ready_session, backend, generation_client):
    backend.queue(ServiceError("upstream down"), as_json(PROJECT_SUGGESTION))

    with pytest.raises(ServiceError):
        run_stage(ready_session, "project_suggestions", store=store, client=generation_client)
    artifact = run_stage(ready_session, "project_suggestions", store=store, client=generation_client)

    assert artifact.payload.titles[0].confidence == 92


def test_missing_inputs_fail_before_any_write(store, session_id, backend, generation_client):
    with pytest.raises(MissingInputError) as exc_info:
        run_stage(session_id, "project_suggestions", store=store, client=generation_client)

    assert exc_info.value.missing == ["profile_analysis", PROJECT_IDEA_KEY]
    assert exc_info.value.status_code == 409
    assert store.keys(session_id) == []
    assert backend.calls == []


def test_blank_project_idea_counts_as_missing(store, session_id, generation_client):
    seed_artifact(store, session_id, "profile_analysis")
    store.put(session_id, PROJECT_IDEA_KEY, "   ")

    with pytest.raises(MissingInputError) as exc_info:
        run_stage(session_id, "pricing_suggestions", store=store, client=generation_client)

    assert exc_info.value.missing == [PROJECT_IDEA_KEY]


def test_optional_selection_reaches_the_prompt(store, ready_session, backend, generation_client):
    store.put(ready_session, PROJECT_SELECTION_KEY, PROJECT_SELECTION)
    backend.queue(as_json(PRICING_SUGGESTION))

    run_stage(ready_session, "pricing_suggestions", store=store, client=generation_client)

    prompt = backend.calls[0]["messages"][0]["content"]
    assert PROJECT_SELECTION["title"] in prompt
    assert "Proficiency: 82/100" in prompt


def test_stale_artifact_is_treated_as_absent(store, ready_session, backend, generation_client):
    store.put(
        ready_session,
        "project_suggestions",
        {"kind": "project_suggestions", "payload": {"titles": "not a list"}},
    )
    store.put(ready_session, status_key("project_suggestions"), "ready")

    assert read_artifact(store, ready_session, "project_suggestions") is None
    assert get_stage_state(store, ready_session, "project_suggestions") == StageState.EMPTY

    backend.queue(as_json(PROJECT_SUGGESTION))
    artifact = run_stage(ready_session, "project_suggestions", store=store, client=generation_client)
    assert artifact.payload.titles


def test_in_flight_stage_is_rejected(store, ready_session, backend, generation_client):
    store.put(ready_session, status_key("project_suggestions"), "generating")
    store.put(
        ready_session,
        started_key("project_suggestions"),
        datetime.now(timezone.utc).isoformat(),
    )

    with pytest.raises(StageTransitionError):
        run_stage(ready_session, "project_suggestions", store=store, client=generation_client)

    assert backend.calls == []


def test_unknown_session(store, generation_client):
    with pytest.raises(NotFoundError):
        run_stage("missing", "profile_analysis", store=store, client=generation_client)


def test_unknown_stage(store, session_id, generation_client):
    with pytest.raises(ValidationError):
        run_stage(session_id, "pitch_deck", store=store, client=generation_client)


def test_abandoned_in_flight_stage_is_reset(store, ready_session, backend, generation_client):
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    store.put(ready_session, status_key("project_suggestions"), "generating")
    store.put(ready_session, started_key("project_suggestions"), two_hours_ago.isoformat())
    backend.queue(as_json(PROJECT_SUGGESTION))

    artifact = run_stage(ready_session, "project_suggestions", store=store, client=generation_client)

    assert isinstance(artifact, ProjectSuggestionsArtifact)
    assert get_stage_state(store, ready_session, "project_suggestions") == StageState.READY


def test_in_flight_stage_without_start_time_is_reset(
    store, ready_session, backend, generation_client
):
    store.put(ready_session, status_key("pricing_suggestions"), "regenerating")
    backend.queue(as_json(PRICING_SUGGESTION))

    run_stage(
        ready_session, "pricing_suggestions", regenerate=True, store=store, client=generation_client
    )

    assert get_stage_state(store, ready_session, "pricing_suggestions") == StageState.READY


def test_regenerate_over_unreadable_artifact_drops_edits(
    store, ready_session, backend, generation_client
):
    store.put(
        ready_session,
        "project_suggestions",
        {"kind": "project_suggestions", "payload": {"titles": "not a list"}},
    )
    store.put(ready_session, PROJECT_SELECTION_KEY, PROJECT_SELECTION)
    backend.queue(as_json(PROJECT_SUGGESTION))

    run_stage(
        ready_session, "project_suggestions", regenerate=True, store=store, client=generation_client
    )

    assert store.get(ready_session, PROJECT_SELECTION_KEY) is None


def test_artifact_records_prompt_version(store, session_id, backend, generation_client):
    backend.queue(as_json(PROFILE_ANALYSIS))

    run_stage(session_id, "profile_analysis", store=store, client=generation_client)

    assert store.get(session_id, prompt_version_key("profile_analysis")) == (
        get_settings().PROMPT_VERSION
    )
