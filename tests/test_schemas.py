"""Tests for wizard payload schemas."""

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from crafter.core.schemas_artifacts import Artifact, ProcessSuggestionsArtifact
from crafter.core.schemas_description import DescriptionSuggestion
from crafter.core.schemas_pricing import PricingSelections, PricingSuggestion, SelectedTiers
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectIdea, ProjectSelection
from tests.fixtures_wizard import (
    DESCRIPTION_SUGGESTION,
    PRICING_SELECTIONS,
    PRICING_SUGGESTION,
    PROCESS_SUGGESTION,
    PROFILE_ANALYSIS,
)


def test_profile_analysis_accepts_camel_case_and_dumps_camel_case():
    analysis = ProfileAnalysis.model_validate(PROFILE_ANALYSIS)

    assert analysis.gap_title == "Generalist positioning"
    dumped = analysis.to_store()
    assert dumped["gapTitle"] == "Generalist positioning"
    assert dumped["recommendedKeywords"] == PROFILE_ANALYSIS["recommendedKeywords"]
    assert "gap_title" not in dumped


def test_profile_analysis_accepts_field_names():
    analysis = ProfileAnalysis(
        archetype="Designer",
        proficiency=50,
        skills=["Figma", "UX", "UI", "Branding"],
        gap_title="t",
        gap_description="d",
        suggested_pivot="p",
        missing_skill_cluster="c",
        missing_skill="s",
        missing_skill_desc="sd",
        client_gap_type="ct",
        client_gap="cg",
        client_gap_desc="cgd",
        recommended_keywords=["a", "b", "c", "d", "e"],
    )
    assert analysis.projects == []
    assert analysis.signature_mechanism is None


@pytest.mark.parametrize("proficiency", [-1, 101])
def test_profile_analysis_rejects_proficiency_out_of_range(proficiency):
    with pytest.raises(PydanticValidationError):
        ProfileAnalysis.model_validate({**PROFILE_ANALYSIS, "proficiency": proficiency})


def test_profile_analysis_skill_and_keyword_cardinality():
    with pytest.raises(PydanticValidationError):
        ProfileAnalysis.model_validate({**PROFILE_ANALYSIS, "skills": ["a", "b", "c"]})
    with pytest.raises(PydanticValidationError):
        ProfileAnalysis.model_validate({**PROFILE_ANALYSIS, "recommendedKeywords": ["a"] * 8})


def test_pricing_suggestion_requires_all_three_tiers():
    tiers = dict(PRICING_SUGGESTION["tiers"])
    del tiers["advanced"]

    with pytest.raises(PydanticValidationError):
        PricingSuggestion.model_validate({**PRICING_SUGGESTION, "tiers": tiers})


def test_selected_tiers_reject_a_lone_outer_tier():
    standard = PRICING_SELECTIONS["tiers"]["standard"]
    starter = PRICING_SELECTIONS["tiers"]["starter"]

    with pytest.raises(PydanticValidationError):
        SelectedTiers.model_validate({"starter": starter, "standard": standard})

    single = SelectedTiers.model_validate({"standard": standard})
    assert single.starter is None and single.advanced is None


def test_pricing_selections_derive_use_3_tiers():
    three = PricingSelections.model_validate(PRICING_SELECTIONS)
    single = PricingSelections.model_validate(
        {"tiers": {"standard": PRICING_SELECTIONS["tiers"]["standard"]}}
    )

    assert three.use_3_tiers is True
    assert three.to_store()["use3Tiers"] is True
    assert single.use_3_tiers is False
    assert [name for name, _ in single.active_tiers()] == ["standard"]


def test_pricing_selections_reject_mismatched_use_3_tiers_flag():
    with pytest.raises(PydanticValidationError):
        PricingSelections.model_validate(
            {"use3Tiers": True, "tiers": {"standard": PRICING_SELECTIONS["tiers"]["standard"]}}
        )


def test_pricing_selections_reload_from_stored_shape():
    stored = PricingSelections.model_validate(PRICING_SELECTIONS).to_store()

    reloaded = PricingSelections.model_validate(stored)

    assert reloaded.use_3_tiers is True
    assert reloaded.tiers.standard.price == 600


def test_project_idea_is_stripped_and_checked_after_stripping():
    assert ProjectIdea(project_idea="  ETL pipelines for startups  ").project_idea == (
        "ETL pipelines for startups"
    )
    with pytest.raises(PydanticValidationError):
        ProjectIdea(project_idea="   tiny idea   ")


def test_project_selection_limits_search_tags():
    with pytest.raises(PydanticValidationError):
        ProjectSelection(title="Title", category="Cat", search_tags=["a", "b", "c", "d", "e", "f"])


def test_description_suggestion_allows_at_most_five_faqs():
    faq = DESCRIPTION_SUGGESTION["faqs"][0]
    with pytest.raises(PydanticValidationError):
        DescriptionSuggestion.model_validate({**DESCRIPTION_SUGGESTION, "faqs": [faq] * 6})


def test_artifact_union_dispatches_on_kind():
    artifact = TypeAdapter(Artifact).validate_python(
        {"kind": "process_suggestions", "payload": PROCESS_SUGGESTION}
    )

    assert isinstance(artifact, ProcessSuggestionsArtifact)
    assert artifact.payload.requirements[0].is_required is True
