"""LLM chain for project title, category, attribute and search tag suggestions."""

from crafter.core.category_taxonomy import format_taxonomy_outline, is_known_category
from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, PromptSpec
from crafter.core.logging import get_logger
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSuggestion
from crafter.core.stage_inputs import format_analysis_summary
from crafter.core.upwork_knowledge import PROJECT_ATTRIBUTES, TITLE_BEST_PRACTICES

logger = get_logger(__name__)

STAGE = "project_suggestions"

OUTPUT_SCHEMA = """{
  "titles": [
    {"text": "string - listing title, 50-80 characters", "rationale": "string", "confidence": integer 0-100}
  ],
  "categories": [
    {"level1": "string", "level2": "string", "level3": "string or null", "rationale": "string", "confidence": integer 0-100}
  ],
  "attributes": {
    "<attribute name>": {"recommended": ["option names"], "rationale": "string"}
  },
  "searchTags": [{"tag": "string", "rationale": "string"}],
  "marketInsights": "string - 2-3 sentences on demand and competition for this service"
}"""


def _title_rules() -> str:
    lines = [f"- {rule}" for rule in TITLE_BEST_PRACTICES["rules"]]
    lines.append("Good examples:")
    lines.extend(f"  * {example}" for example in TITLE_BEST_PRACTICES["examples"]["good"])
    lines.append("Bad examples:")
    lines.extend(f"  * {example}" for example in TITLE_BEST_PRACTICES["examples"]["bad"])
    return "\n".join(lines)


def _attribute_options() -> str:
    lines = []
    for name, options in PROJECT_ATTRIBUTES.items():
        lines.append(f"- {name}: {', '.join(option['name'] for option in options)}")
    return "\n".join(lines)


SYSTEM_PROMPT = f"""You are an Upwork Project Catalog strategist. You turn a freelancer's profile and service idea into a listing that ranks in search and converts buyers.

TITLE RULES:
{_title_rules()}

CATEGORY RULES:
- Pick categories ONLY from this taxonomy (level 1 > level 2); set level3 when the subcategory is obvious, otherwise null
{format_taxonomy_outline()}

ATTRIBUTES (use these attribute names and option names):
{_attribute_options()}

CARDINALITY:
- Exactly 3 titles, ranked best first
- 1 to 3 categories, ranked best first
- Exactly 5 search tags
- Confidence is an integer from 0 to 100

Output valid JSON matching this schema:
{OUTPUT_SCHEMA}
"""


def build_project_prompt(analysis: ProfileAnalysis, project_idea: str) -> PromptSpec:
    """
    Build the project suggestions prompt.

    Args:
        analysis: Accepted profile analysis
        project_idea: User's free-text description of the service

    Returns:
        PromptSpec for the project_suggestions stage
    """
    user_prompt = f"""=== FREELANCER PROFILE ===
{format_analysis_summary(analysis)}

=== PROJECT IDEA ===
{project_idea}

Suggest titles, categories, attributes and search tags for this Project Catalog listing.
Lean on the recommended keywords and the suggested pivot where they fit the idea.
Return the suggestions as JSON."""

    return PromptSpec(
        stage=STAGE,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
        output_schema=OUTPUT_SCHEMA,
    )


def suggest_project(
    analysis: ProfileAnalysis,
    project_idea: str,
    client: GenerationClient,
) -> ProjectSuggestion:
    """Run the project suggestions stage."""
    settings = get_settings()
    spec = build_project_prompt(analysis, project_idea)
    suggestion = client.generate(
        spec, ProjectSuggestion, temperature=settings.SUGGESTION_TEMPERATURE
    )

    unknown = [
        c for c in suggestion.categories if not is_known_category(c.level1, c.level2, c.level3)
    ]
    if unknown:
        logger.warning(
            f"{len(unknown)} suggested categories are not in the taxonomy",
            extra={"stage": STAGE},
        )

    logger.info(
        f"Generated {len(suggestion.titles)} titles and {len(suggestion.categories)} categories",
        extra={"stage": STAGE},
    )
    return suggestion
