"""Shared formatting of upstream wizard artifacts for stage prompts."""

from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.core.schemas_project import ProjectSelection

NOT_PROVIDED = "NOT YET PROVIDED"


def _money(value: float) -> str:
    return f"${value:g}"


def format_analysis_summary(analysis: ProfileAnalysis) -> str:
    """
    Render the profile analysis as a compact block for downstream prompts.

    Args:
        analysis: Accepted profile analysis

    Returns:
        Multi-line summary with archetype, skills, gaps and keywords
    """
    lines: list[str] = []
    lines.append(f"Archetype: {analysis.archetype}")
    lines.append(f"Proficiency: {analysis.proficiency}/100")
    lines.append(f"Core skills: {', '.join(analysis.skills)}")
    if analysis.projects:
        projects = "; ".join(f"{p.name} ({p.type})" for p in analysis.projects)
        lines.append(f"Notable projects: {projects}")
    lines.append(f"Strategic gap: {analysis.gap_title} - {analysis.gap_description}")
    lines.append(f"Suggested pivot: {analysis.suggested_pivot}")
    lines.append(f"Missing skill: {analysis.missing_skill} ({analysis.missing_skill_cluster})")
    lines.append(f"Target client: {analysis.client_gap} ({analysis.client_gap_type})")
    lines.append(f"Recommended keywords: {', '.join(analysis.recommended_keywords)}")
    if analysis.signature_mechanism:
        lines.append(f"Signature mechanism: {analysis.signature_mechanism}")
    return "\n".join(lines)


def format_project_selection(selection: ProjectSelection | None) -> str:
    if selection is None:
        return NOT_PROVIDED

    lines = [
        f"Title: {selection.title}",
        f"Category: {selection.category}",
        f"Search tags: {', '.join(selection.search_tags) if selection.search_tags else 'none'}",
    ]
    for name, values in sorted(selection.attributes.items()):
        lines.append(f"{name}: {', '.join(values)}")
    return "\n".join(lines)


def format_pricing_selections(pricing: PricingSelections | None) -> str:
    """Render the accepted tiers, options and add-ons, or the marker when absent."""
    if pricing is None:
        return NOT_PROVIDED

    lines: list[str] = []
    lines.append(f"Tier structure: {'3 tiers' if pricing.use_3_tiers else 'single tier'}")
    for name, tier in pricing.active_tiers():
        hours = (
            f", ~{tier.estimated_hours:g} hours" if tier.estimated_hours is not None else ""
        )
        lines.append(
            f"- {name.capitalize()}: {tier.title} | {_money(tier.price)} | "
            f"{tier.delivery_days} days{hours}"
        )
        if tier.description:
            lines.append(f"  {tier.description}")
    if pricing.service_options:
        lines.append("Service options:")
        for option in pricing.service_options:
            included = option.included_in(pricing.use_3_tiers)
            lines.append(f"- {option.name}: {', '.join(included) if included else 'none'}")
    if pricing.add_ons:
        lines.append("Add-ons:")
        for add_on in pricing.add_ons:
            lines.append(f"- {add_on.name}: +{_money(add_on.price)}")
    return "\n".join(lines)


def format_process_selections(process: ProcessSelections | None) -> str:
    if process is None:
        return NOT_PROVIDED

    lines = ["Requirements from the client:"]
    for req in process.requirements:
        lines.append(f"- {req.text} ({'required' if req.is_required else 'optional'})")
    lines.append("Delivery steps:")
    for index, step in enumerate(process.steps, 1):
        suffix = f": {step.description}" if step.description else ""
        lines.append(f"{index}. {step.title}{suffix}")
    return "\n".join(lines)
