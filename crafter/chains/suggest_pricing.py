"""LLM chain for three-tier package pricing suggestions."""

from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, PromptSpec
from crafter.core.logging import get_logger
from crafter.core.schemas_pricing import PricingSuggestion
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSelection
from crafter.core.stage_inputs import format_analysis_summary, format_project_selection

logger = get_logger(__name__)

STAGE = "pricing_suggestions"

_TIER_SCHEMA = """{
      "name": "string",
      "title": "string - short package name",
      "titleRationale": "string",
      "description": "string - what the buyer gets",
      "descriptionRationale": "string",
      "deliveryDays": integer >= 1,
      "deliveryRationale": "string",
      "price": number >= 0 (USD),
      "priceRationale": "string",
      "estimatedHours": number - hours of work to deliver this tier,
      "features": ["string"],
      "featuresRationale": "string"
    }"""

OUTPUT_SCHEMA = f"""{{
  "tiers": {{
    "starter": {_TIER_SCHEMA},
    "standard": {{ same shape as starter }},
    "advanced": {{ same shape as starter }}
  }},
  "serviceOptions": [
    {{"name": "string", "starterIncluded": bool, "standardIncluded": bool, "advancedIncluded": bool, "rationale": "string"}}
  ],
  "addOns": [{{"name": "string", "price": number, "rationale": "string"}}],
  "pricingStrategy": "string - how the tiers are meant to move buyers upward",
  "marketContext": "string - typical price range for comparable listings"
}}"""

SYSTEM_PROMPT = f"""You are a pricing strategist for Upwork Project Catalog listings.

RULES:
1. Always produce exactly 3 tiers: starter, standard, advanced
2. Prices rise from starter to advanced; delivery days do not shrink as scope grows
3. Estimate realistic hours per tier so the effective hourly rate can be checked
4. Aim for an effective hourly rate (price / estimatedHours) at or above the target hourly rate
5. Service options describe what each tier includes; add-ons are paid extras

CARDINALITY:
- Exactly 3 tiers
- 3 to 6 service options
- 2 to 4 add-ons

Output valid JSON matching this schema:
{OUTPUT_SCHEMA}
"""


def build_pricing_prompt(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    target_hourly_rate: float,
) -> PromptSpec:
    """
    Build the pricing suggestions prompt.

    Args:
        analysis: Accepted profile analysis
        project_idea: User's free-text description of the service
        project_selection: Accepted title/category, or None when not chosen yet
        target_hourly_rate: Rate the tiers should sustain

    Returns:
        PromptSpec for the pricing_suggestions stage
    """
    user_prompt = f"""=== FREELANCER PROFILE ===
{format_analysis_summary(analysis)}

=== PROJECT IDEA ===
{project_idea}

=== SELECTED TITLE & CATEGORY ===
{format_project_selection(project_selection)}

=== TARGET HOURLY RATE ===
${target_hourly_rate:g}/hr

Suggest three-tier pricing for this listing. Return the suggestions as JSON."""

    return PromptSpec(
        stage=STAGE,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
        output_schema=OUTPUT_SCHEMA,
    )


def suggest_pricing(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    client: GenerationClient,
    target_hourly_rate: float | None = None,
) -> PricingSuggestion:
    """Run the pricing suggestions stage."""
    settings = get_settings()
    rate = target_hourly_rate or settings.DEFAULT_TARGET_HOURLY_RATE
    spec = build_pricing_prompt(analysis, project_idea, project_selection, rate)

    suggestion = client.generate(
        spec, PricingSuggestion, temperature=settings.SUGGESTION_TEMPERATURE
    )
    logger.info(
        f"Generated pricing with standard tier at ${suggestion.tiers.standard.price:g}",
        extra={"stage": STAGE},
    )
    return suggestion
