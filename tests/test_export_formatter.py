"""Tests for the export formatter."""

from crafter.core.export_formatter import (
    BANNER,
    FOOTER,
    RULE,
    build_outline,
    format_export,
    format_plain_text,
)
from crafter.core.schemas_description import DescriptionData
from crafter.core.schemas_export import ExportBundle
from crafter.core.schemas_gallery import GallerySuggestion
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_profile import ProfileAnalysis
from tests.fixtures_wizard import (
    DESCRIPTION_DATA,
    GALLERY_SUGGESTION,
    PRICING_SELECTIONS,
    PROCESS_SELECTIONS,
    PROFILE_ANALYSIS,
)

SECTION_HEADINGS = [
    "Project Description",
    "Pricing Tiers",
    "Requirements & Steps",
    "Gallery Content",
    "Profile Context",
]


def full_bundle() -> ExportBundle:
    return ExportBundle(
        project_title="You will get a production-ready dbt and Snowflake data pipeline",
        project_category="Development & IT > Data Analysis & Reports > Data Modeling",
        project_idea="dbt pipelines",
        search_tags=["dbt", "ETL"],
        pricing=PricingSelections.model_validate(PRICING_SELECTIONS),
        gallery=GallerySuggestion.model_validate(GALLERY_SUGGESTION),
        process=ProcessSelections.model_validate(PROCESS_SELECTIONS),
        description=DescriptionData.model_validate(DESCRIPTION_DATA),
        analysis=ProfileAnalysis.model_validate(PROFILE_ANALYSIS),
    )


def level2_headings(bundle: ExportBundle) -> list[str]:
    return [b.text for b in build_outline(bundle) if b.kind == "heading" and b.level == 2]


def test_empty_bundle_renders_every_placeholder():
    text = format_plain_text(ExportBundle())

    assert text.startswith(BANNER)
    assert "PROJECT TITLE: Untitled Project" in text
    assert "CATEGORY: General" in text
    for section in ("description", "pricing", "process", "gallery", "profile context"):
        assert f"No {section} data available" in text
    assert text.endswith(RULE + "\n" + FOOTER + "\n")


def test_empty_bundle_outline_keeps_section_order():
    outline = build_outline(ExportBundle())

    assert level2_headings(ExportBundle()) == SECTION_HEADINGS
    paragraphs = [b.text for b in outline if b.kind == "paragraph"]
    assert paragraphs == [
        "No description data available",
        "No pricing data available",
        "No process data available",
        "No gallery data available",
        "No profile context data available",
    ]


def test_export_is_idempotent():
    bundle = full_bundle()

    assert format_export(bundle) == format_export(bundle)


def test_plain_text_section_order():
    text = format_plain_text(full_bundle())

    markers = [
        "=== PROJECT DESCRIPTION ===",
        "=== PRICING TIERS ===",
        "=== PROJECT REQUIREMENTS & STEPS ===",
        "=== GALLERY CONTENT ===",
        "=== PROFILE CONTEXT (for reference) ===",
        FOOTER,
    ]
    positions = [text.index(m) for m in markers]
    assert positions == sorted(positions)
    assert level2_headings(full_bundle()) == SECTION_HEADINGS


def test_plain_text_tier_metrics():
    text = format_plain_text(full_bundle())

    starter = text[text.index("STARTER TIER:") : text.index("STANDARD TIER:")]
    assert "  Price: $200\n" in starter
    assert "  Delivery: 3 days\n" in starter
    assert "  Estimated Hours: 5h\n" in starter
    assert "  Effective Rate: $40/hr\n" in starter
    assert "  Profitability: ⚠ LOW MARGIN\n" in starter

    standard = text[text.index("STANDARD TIER:") : text.index("ADVANCED TIER:")]
    assert "  Effective Rate: $120/hr\n" in standard
    assert "  Profitability: ✓ SUSTAINABLE\n" in standard
    assert "Target Hourly Rate: $100/hr" in text


def test_plain_text_lists_options_add_ons_and_profile():
    text = format_plain_text(full_bundle())

    assert "  - Data quality tests (included in: Standard, Advanced)\n" in text
    assert "  - Extra source: +$150\n" in text
    assert "Proficiency Level: 82/100" in text
    assert "  1. Read-only credentials for each data source (Required)\n" in text
    assert "Visual Style: photorealistic" in text


def test_single_tier_pricing_renders_standard_only():
    bundle = full_bundle().model_copy(
        update={
            "pricing": PricingSelections.model_validate(
                {"tiers": {"standard": PRICING_SELECTIONS["tiers"]["standard"]}}
            )
        }
    )

    text = format_plain_text(bundle)

    assert "STANDARD TIER:" in text
    assert "STARTER TIER:" not in text
    assert "ADVANCED TIER:" not in text


def test_outline_blocks():
    outline = build_outline(full_bundle())

    toggles = [b for b in outline if b.kind == "toggle"]
    assert toggles[0].text == "Do you work in my repo?"
    assert toggles[0].children[0].kind == "paragraph"

    code = [b for b in outline if b.kind == "code"]
    assert len(code) == 1
    assert code[0].language == "plain text"

    tier_paragraphs = [b.text for b in outline if b.kind == "paragraph" and "days delivery" in b.text]
    assert tier_paragraphs[0] == "Starter package • 3 days delivery • 5h estimated • Low Margin ($40/hr)"
    assert tier_paragraphs[1].endswith("Sustainable ($120/hr)")

    numbered = [b.text for b in outline if b.kind == "numbered_list_item"]
    assert numbered[0] == "Discovery: Map sources and target models"

    # Only toggles carry children
    assert all(not b.children for b in outline if b.kind != "toggle")
