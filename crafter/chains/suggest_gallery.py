"""LLM chain for gallery assets: thumbnail prompt, video script, sample documents."""

from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, PromptSpec
from crafter.core.schemas_gallery import GallerySuggestion
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSelection
from crafter.core.stage_inputs import (
    format_analysis_summary,
    format_pricing_selections,
    format_project_selection,
)

STAGE = "gallery_suggestions"

OUTPUT_SCHEMA = """{
  "thumbnailPrompt": {
    "prompt": "string - ready-to-paste image generation prompt for a 16:9 thumbnail",
    "styleNotes": "string",
    "colorPalette": ["hex or color names"],
    "compositionTips": "string",
    "visualStyle": "string"
  },
  "videoScript": {
    "hook": "string - first 5 seconds",
    "introduction": "string",
    "mainPoints": [{"point": "string", "duration": "string e.g. 15s", "visualSuggestion": "string"}],
    "callToAction": "string",
    "totalDuration": "string e.g. 60-90 seconds",
    "fullScript": "string - the complete script read aloud"
  },
  "sampleDocuments": [
    {
      "title": "string",
      "description": "string",
      "contentOutline": ["section headings"],
      "purpose": "string - what it proves to a buyer",
      "fileType": "string e.g. PDF",
      "dataEvidence": "string - metrics or results to feature"
    }
  ],
  "galleryStrategy": "string - how the assets work together"
}"""

SYSTEM_PROMPT = f"""You are a creative director producing gallery assets for an Upwork Project Catalog listing.

RULES:
1. The thumbnail prompt must be usable as-is in an image generator (no placeholders)
2. The video script runs 60 to 90 seconds and speaks directly to the buyer
3. Sample documents prove the outcome the listing sells; no confidential client data
4. Keep every asset consistent with the listing title and pricing when they are provided
5. When an input says NOT YET PROVIDED, do not invent details for it

CARDINALITY:
- 3 to 5 video main points
- 2 to 3 sample documents

Output valid JSON matching this schema:
{OUTPUT_SCHEMA}
"""


def build_gallery_prompt(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    pricing: PricingSelections | None,
) -> PromptSpec:
    user_prompt = f"""=== FREELANCER PROFILE ===
{format_analysis_summary(analysis)}

=== PROJECT IDEA ===
{project_idea}

=== SELECTED TITLE & CATEGORY ===
{format_project_selection(project_selection)}

=== PRICING ===
{format_pricing_selections(pricing)}

Create the gallery assets for this listing. Return them as JSON."""

    return PromptSpec(
        stage=STAGE,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
        output_schema=OUTPUT_SCHEMA,
    )


def suggest_gallery(
    analysis: ProfileAnalysis,
    project_idea: str,
    project_selection: ProjectSelection | None,
    pricing: PricingSelections | None,
    client: GenerationClient,
) -> GallerySuggestion:
    settings = get_settings()
    spec = build_gallery_prompt(analysis, project_idea, project_selection, pricing)
    return client.generate(spec, GallerySuggestion, temperature=settings.SUGGESTION_TEMPERATURE)
