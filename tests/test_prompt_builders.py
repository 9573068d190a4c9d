"""Tests for stage prompt builders and upstream input formatting."""

from crafter.chains.analyze_profile import MAX_RESUME_CHARS, analyze_profile, build_profile_prompt
from crafter.chains.suggest_description import build_description_prompt
from crafter.chains.suggest_gallery import build_gallery_prompt
from crafter.chains.suggest_pricing import SYSTEM_PROMPT as PRICING_SYSTEM_PROMPT
from crafter.chains.suggest_pricing import build_pricing_prompt
from crafter.chains.suggest_process import build_process_prompt
from crafter.chains.suggest_project import build_project_prompt, suggest_project
from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSelection
from crafter.core.stage_inputs import (
    NOT_PROVIDED,
    format_analysis_summary,
    format_pricing_selections,
    format_process_selections,
)
from tests.fakes.fake_backend import ScriptedBackend
from tests.fixtures_wizard import (
    PRICING_SELECTIONS,
    PROCESS_SELECTIONS,
    PROFILE_ANALYSIS,
    PROJECT_SELECTION,
    PROJECT_SUGGESTION,
    as_json,
    make_profile,
)

IDEA = "dbt and Snowflake pipelines for early-stage fintech analytics teams"


def _analysis() -> ProfileAnalysis:
    return ProfileAnalysis.model_validate(PROFILE_ANALYSIS)


def test_prompts_are_deterministic():
    analysis = _analysis()
    selection = ProjectSelection.model_validate(PROJECT_SELECTION)

    first = build_pricing_prompt(analysis, IDEA, selection, 100)
    second = build_pricing_prompt(analysis, IDEA, selection, 100)

    assert first == second
    assert first.stage == "pricing_suggestions"


def test_absent_optional_inputs_are_marked_not_provided():
    spec = build_description_prompt(_analysis(), IDEA, None, None, None)

    assert spec.user_prompt.count(NOT_PROVIDED) == 3
    assert IDEA in spec.user_prompt


def test_present_inputs_replace_the_marker():
    selection = ProjectSelection.model_validate(PROJECT_SELECTION)
    pricing = PricingSelections.model_validate(PRICING_SELECTIONS)

    spec = build_gallery_prompt(_analysis(), IDEA, selection, pricing)

    assert NOT_PROVIDED not in spec.user_prompt
    assert selection.title in spec.user_prompt
    assert "Standard: Standard | $600 | 5 days" in spec.user_prompt


def test_process_prompt_includes_pricing_marker_when_not_chosen():
    selection = ProjectSelection.model_validate(PROJECT_SELECTION)

    spec = build_process_prompt(_analysis(), IDEA, selection, None)

    assert spec.user_prompt.count(NOT_PROVIDED) == 1


def test_pricing_prompt_demands_three_tiers_and_names_target_rate():
    spec = build_pricing_prompt(_analysis(), IDEA, None, 85)

    assert "exactly 3 tiers" in PRICING_SYSTEM_PROMPT
    assert "$85/hr" in spec.user_prompt


def test_project_prompt_lists_taxonomy():
    spec = build_project_prompt(_analysis(), IDEA)

    assert "Development & IT" in spec.system_prompt + spec.user_prompt


def test_profile_prompt_truncates_resume():
    profile = make_profile().model_copy(update={"resume_text": "x" * (MAX_RESUME_CHARS + 500)})

    spec = build_profile_prompt(profile)

    assert "x" * MAX_RESUME_CHARS in spec.user_prompt
    assert "x" * (MAX_RESUME_CHARS + 1) not in spec.user_prompt
    assert profile.upwork_url in spec.user_prompt


def test_analysis_summary_shows_proficiency_out_of_100():
    summary = format_analysis_summary(_analysis())

    assert "Proficiency: 82/100" in summary
    assert "Archetype: Data Platform Engineer" in summary


def test_single_tier_pricing_summary():
    pricing = PricingSelections.model_validate(
        {"tiers": {"standard": PRICING_SELECTIONS["tiers"]["standard"]}}
    )

    text = format_pricing_selections(pricing)

    assert "single tier" in text
    assert "Starter" not in text


def test_process_summary_numbers_steps():
    process = ProcessSelections.model_validate(PROCESS_SELECTIONS)

    text = format_process_selections(process)

    assert "1. Discovery: Map sources and target models" in text
    assert format_process_selections(None) == NOT_PROVIDED


def test_runners_use_configured_temperatures():
    backend = ScriptedBackend(as_json(PROFILE_ANALYSIS), as_json(PROJECT_SUGGESTION))
    client = GenerationClient(backend)
    settings = get_settings()

    analysis = analyze_profile(make_profile(), client)
    suggestion = suggest_project(analysis, IDEA, client)

    assert backend.calls[0]["temperature"] == settings.PROFILE_TEMPERATURE
    assert backend.calls[1]["temperature"] == settings.SUGGESTION_TEMPERATURE
    assert suggestion.titles[0].confidence == 92
