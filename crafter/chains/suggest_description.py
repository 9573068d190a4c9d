"""LLM chain for the project summary and FAQs."""

from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, PromptSpec
from crafter.core.logging import get_logger
from crafter.core.schemas_description import (
    MAX_FAQS,
    MAX_SUMMARY_CHARS,
    MIN_SUMMARY_CHARS,
    DescriptionSuggestion,
)
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSelection
from crafter.core.stage_inputs import (
    format_analysis_summary,
    format_pricing_selections,
    format_process_selections,
    format_project_selection,
)
from crafter.core.upwork_knowledge import DESCRIPTION_BEST_PRACTICES

logger = get_logger(__name__)

STAGE = "description_suggestions"

OUTPUT_SCHEMA = f"""{{
  "projectSummary": "string - {MIN_SUMMARY_CHARS}-{MAX_SUMMARY_CHARS} characters",
  "summaryRationale": "string",
  "faqs": [{{"question": "string", "answer": "string", "rationale": "string"}}]
}}"""


def _description_tips() -> str:
    lines = [f"- {item}" for item in DESCRIPTION_BEST_PRACTICES["structure"]]
    lines.extend(f"- {tip}" for tip in DESCRIPTION_BEST_PRACTICES["tips"])
    return "\n".join(lines)


SYSTEM_PROMPT = f"""You write the project summary and FAQs for Upwork Project Catalog listings.

WRITING GUIDANCE:
{_description_tips()}

RULES:
1. The summary is between {MIN_SUMMARY_CHARS} and {MAX_SUMMARY_CHARS} characters
2. Lead with the buyer's outcome, then the scope, then why this freelancer
3. FAQs answer real buyer objections (scope, revisions, timeline, communication)
4. Never contradict the pricing tiers or process steps when they are provided

CARDINALITY:
- At most {MAX_FAQS} FAQs

Output valid JSON matching this schema:
{OUTPUT_SCHEMA}
"""


def build_description_prompt(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    pricing: PricingSelections | None,
    process: ProcessSelections | None,
) -> PromptSpec:
    """Build the description suggestions prompt."""
    user_prompt = f"""=== FREELANCER PROFILE ===
{format_analysis_summary(analysis)}

=== PROJECT IDEA ===
{project_idea}

=== SELECTED TITLE & CATEGORY ===
{format_project_selection(project_selection)}

=== PRICING ===
{format_pricing_selections(pricing)}

=== REQUIREMENTS & PROCESS ===
{format_process_selections(process)}

Write the project summary and FAQs for this listing. Return them as JSON."""

    return PromptSpec(
        stage=STAGE,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
        output_schema=OUTPUT_SCHEMA,
    )


def suggest_description(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    pricing: PricingSelections | None,
    process: ProcessSelections | None,
    client: GenerationClient,
) -> DescriptionSuggestion:
    """Run the description suggestions stage."""
    settings = get_settings()
    spec = build_description_prompt(analysis, project_idea, project_selection, pricing, process)
    suggestion = client.generate(
        spec, DescriptionSuggestion, temperature=settings.SUGGESTION_TEMPERATURE
    )

    summary_len = len(suggestion.project_summary)
    if not MIN_SUMMARY_CHARS <= summary_len <= MAX_SUMMARY_CHARS:
        # Stored anyway; the bound is enforced when the user accepts the description
        logger.warning(
            f"Suggested summary length {summary_len} outside bounds",
            extra={"stage": STAGE},
        )
    return suggestion
