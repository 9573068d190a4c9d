"""LLM chain for buyer requirements and the delivery process."""

from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, PromptSpec
from crafter.core.logging import get_logger
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSuggestion
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSelection
from crafter.core.stage_inputs import (
    format_analysis_summary,
    format_pricing_selections,
    format_project_selection,
)

logger = get_logger(__name__)

STAGE = "process_suggestions"

OUTPUT_SCHEMA = """{
  "requirements": [
    {"text": "string - what the buyer must provide, at least 10 characters", "isRequired": bool, "rationale": "string"}
  ],
  "steps": [
    {"title": "string - short step name", "description": "string", "estimatedDuration": "string e.g. 1-2 days", "rationale": "string"}
  ],
  "processStrategy": "string - why this process builds buyer trust"
}"""

SYSTEM_PROMPT = f"""You design the buyer requirements and delivery process for Upwork Project Catalog listings.

RULES:
1. Requirements are things the buyer must supply before work starts (access, assets, answers)
2. Mark a requirement isRequired=true only when work cannot start without it
3. Steps are in delivery order and match the scope and delivery days of the pricing tiers when provided
4. Use plain language a non-technical buyer understands

CARDINALITY:
- 3 to 6 requirements
- 4 to 7 steps

Output valid JSON matching this schema:
{OUTPUT_SCHEMA}
"""


def build_process_prompt(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    pricing: PricingSelections | None,
) -> PromptSpec:
    """
    Build the process suggestions prompt.

    Absent selections render as NOT YET PROVIDED rather than being dropped.
    """
    user_prompt = f"""=== FREELANCER PROFILE ===
{format_analysis_summary(analysis)}

=== PROJECT IDEA ===
{project_idea}

=== SELECTED TITLE & CATEGORY ===
{format_project_selection(project_selection)}

=== PRICING ===
{format_pricing_selections(pricing)}

Suggest buyer requirements and delivery steps for this listing. Return them as JSON."""

    return PromptSpec(
        stage=STAGE,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
        output_schema=OUTPUT_SCHEMA,
    )


def suggest_process(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    pricing: PricingSelections | None,
    client: GenerationClient,
) -> ProcessSuggestion:
    """Run the process suggestions stage."""
    settings = get_settings()
    spec = build_process_prompt(analysis, project_idea, project_selection, pricing)
    suggestion = client.generate(
        spec, ProcessSuggestion, temperature=settings.SUGGESTION_TEMPERATURE
    )

    logger.info(
        f"Generated {len(suggestion.requirements)} requirements and {len(suggestion.steps)} steps",
        extra={"stage": STAGE},
    )
    return suggestion
