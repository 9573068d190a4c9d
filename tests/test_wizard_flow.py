"""Tests for wizard stage rules, state transitions and selection gating."""

import pytest

from crafter.core.errors import StageTransitionError, ValidationError
from crafter.core.schemas_artifacts import StageState
from crafter.core.schemas_description import DescriptionData
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_project import ProjectSelection
from crafter.core.wizard_flow import (
    PROJECT_IDEA_KEY,
    STAGE_REQUIREMENTS,
    STAGES,
    accept_description_data,
    accept_pricing_selections,
    accept_process_selections,
    accept_project_selection,
    advance_state,
    can_advance,
)
from tests.fixtures_wizard import PRICING_SELECTIONS, PROCESS_SELECTIONS, PROJECT_SELECTION


@pytest.mark.parametrize(
    "current,target",
    [
        (StageState.EMPTY, StageState.GENERATING),
        (StageState.GENERATING, StageState.READY),
        (StageState.GENERATING, StageState.FAILED),
        (StageState.READY, StageState.REGENERATING),
        (StageState.READY, StageState.EMPTY),
        (StageState.REGENERATING, StageState.READY),
        (StageState.FAILED, StageState.EMPTY),
    ],
)
def test_allowed_transitions(current, target):
    assert advance_state(current, target) == target


@pytest.mark.parametrize(
    "current,target",
    [
        (StageState.EMPTY, StageState.READY),
        (StageState.READY, StageState.GENERATING),
        (StageState.FAILED, StageState.READY),
        (StageState.GENERATING, StageState.GENERATING),
    ],
)
def test_rejected_transitions(current, target):
    with pytest.raises(StageTransitionError):
        advance_state(current, target)


def test_only_ready_stage_can_advance():
    assert can_advance(StageState.READY)
    assert not any(can_advance(s) for s in StageState if s != StageState.READY)


def test_every_stage_after_profile_needs_analysis_and_idea():
    assert STAGE_REQUIREMENTS["profile_analysis"][0] == ("profile",)
    for stage in STAGES[1:]:
        required, _ = STAGE_REQUIREMENTS[stage]
        assert "profile_analysis" in required
        assert PROJECT_IDEA_KEY in required


def test_project_selection_drops_blank_tags_and_values():
    accepted = accept_project_selection(ProjectSelection.model_validate(PROJECT_SELECTION))

    assert accepted.search_tags == ["dbt", "ETL"]
    assert accepted.attributes == {"Tools": ["dbt", "Snowflake"]}


def test_pricing_selection_fills_default_target_rate():
    data = {k: v for k, v in PRICING_SELECTIONS.items() if k != "targetHourlyRate"}

    accepted = accept_pricing_selections(PricingSelections.model_validate(data), 90)
    kept = accept_pricing_selections(PricingSelections.model_validate(PRICING_SELECTIONS), 90)

    assert accepted.target_hourly_rate == 90
    assert kept.target_hourly_rate == 100


def test_process_selection_keeps_only_qualifying_entries():
    accepted = accept_process_selections(ProcessSelections.model_validate(PROCESS_SELECTIONS))

    assert [r.text for r in accepted.requirements] == ["Read-only credentials for each data source"]
    assert [s.title for s in accepted.steps] == ["Discovery"]


def test_process_selection_requires_a_ten_character_requirement():
    process = ProcessSelections.model_validate(
        {"requirements": [{"text": " 123456789 "}], "steps": [{"title": "Build"}]}
    )

    with pytest.raises(ValidationError) as exc_info:
        accept_process_selections(process)

    assert exc_info.value.user_message == "Please add at least one requirement (minimum 10 characters)"


def test_process_selection_requires_a_three_character_step():
    process = ProcessSelections.model_validate(
        {"requirements": [{"text": "0123456789"}], "steps": [{"title": " ab "}]}
    )

    with pytest.raises(ValidationError) as exc_info:
        accept_process_selections(process)

    assert exc_info.value.user_message == "Please add at least one step (minimum 3 characters for title)"

    ok = ProcessSelections.model_validate(
        {"requirements": [{"text": "0123456789"}], "steps": [{"title": " abc "}]}
    )
    assert len(accept_process_selections(ok).steps) == 1


@pytest.mark.parametrize("length", [120, 1200])
def test_description_summary_bounds_are_inclusive(length):
    accepted = accept_description_data(DescriptionData(project_summary="x" * length))

    assert len(accepted.project_summary) == length


def test_description_summary_too_short():
    with pytest.raises(ValidationError) as exc_info:
        accept_description_data(DescriptionData(project_summary="x" * 119))

    assert exc_info.value.user_message == "Project summary must be at least 120 characters."


def test_description_summary_too_long():
    with pytest.raises(ValidationError) as exc_info:
        accept_description_data(DescriptionData(project_summary="x" * 1201))

    assert exc_info.value.user_message == "Project summary must be 1200 characters or less."


def test_description_drops_incomplete_faqs_before_counting():
    faqs = [{"question": f"Q{i}?", "answer": f"A{i}"} for i in range(5)]
    faqs.append({"question": "Unanswered?", "answer": "  "})

    accepted = accept_description_data(
        DescriptionData.model_validate({"projectSummary": "x" * 150, "faqs": faqs})
    )

    assert len(accepted.faqs) == 5


def test_description_rejects_more_than_five_faqs():
    faqs = [{"question": f"Q{i}?", "answer": f"A{i}"} for i in range(6)]

    with pytest.raises(ValidationError) as exc_info:
        accept_description_data(
            DescriptionData.model_validate({"projectSummary": "x" * 150, "faqs": faqs})
        )

    assert exc_info.value.user_message == "You can add up to 5 FAQs."
