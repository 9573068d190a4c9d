"""Export formatter: folds the wizard's accumulated state into text and an outline.

``format_export`` is pure and total. Every section has a placeholder when its
data is absent, and the same bundle always renders to the same output.
Section order is fixed: description, pricing, process, gallery, profile context.
"""

from crafter.core.pricing_metrics import (
    effective_rate,
    format_hours,
    format_money,
    is_sustainable,
    resolve_target_rate,
    tier_label,
)
from crafter.core.schemas_description import DescriptionData
from crafter.core.schemas_export import ExportBundle, ExportResult, OutlineBlock
from crafter.core.schemas_gallery import GallerySuggestion
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections

RULE = "═" * 63
BANNER = (
    "╔" + "═" * 62 + "╗\n"
    "║           UPWORK PROJECT EXPORT - READY FOR CREATION          ║\n"
    "╚" + "═" * 62 + "╝\n"
)
FOOTER = "Generated by Project Crafter"

DEFAULT_VISUAL_STYLE = "photorealistic"


def _placeholder(section: str) -> str:
    return f"No {section} data available"


# =======================
# Plain text
# =======================


def _description_text(description: DescriptionData | None) -> str:
    if description is None:
        return _placeholder("description")

    out = "=== PROJECT DESCRIPTION ===\n\n"
    out += f"PROJECT SUMMARY:\n{description.project_summary}\n\n"
    if description.faqs:
        out += "FREQUENTLY ASKED QUESTIONS:\n"
        for idx, faq in enumerate(description.faqs, 1):
            out += f"  Q{idx}: {faq.question}\n"
            out += f"  A{idx}: {faq.answer}\n"
            if faq.rationale:
                out += f"  [Data Evidence: {faq.rationale}]\n"
            out += "\n"
    return out


def _pricing_text(pricing: PricingSelections | None) -> str:
    if pricing is None:
        return _placeholder("pricing")

    target = resolve_target_rate(pricing)
    out = "=== PRICING TIERS ===\n\n"
    out += f"Target Hourly Rate: {format_money(target)}/hr\n\n"

    for name, tier in pricing.active_tiers():
        rate = effective_rate(tier.price, tier.estimated_hours)
        sustainable = is_sustainable(tier.price, tier.estimated_hours, target)
        out += f"{name.upper()} TIER:\n"
        out += f"  Title: {tier.title}\n"
        out += f"  Description: {tier.description}\n"
        out += f"  Price: {format_money(tier.price)}\n"
        out += f"  Delivery: {tier.delivery_days} days\n"
        out += f"  Estimated Hours: {format_hours(tier.estimated_hours)}\n"
        out += f"  Effective Rate: {format_money(rate)}/hr\n"
        out += f"  Profitability: {'✓ SUSTAINABLE' if sustainable else '⚠ LOW MARGIN'}\n\n"

    if pricing.service_options:
        out += "SERVICE OPTIONS:\n"
        for option in pricing.service_options:
            included = option.included_in(pricing.use_3_tiers)
            out += f"  - {option.name} (included in: {', '.join(included) or 'none'})\n"
        out += "\n"

    if pricing.add_ons:
        out += "ADD-ONS:\n"
        for add_on in pricing.add_ons:
            out += f"  - {add_on.name}: +{format_money(add_on.price)}\n"
    return out


def _process_text(process: ProcessSelections | None) -> str:
    if process is None:
        return _placeholder("process")

    out = "=== PROJECT REQUIREMENTS & STEPS ===\n\n"
    out += "REQUIREMENTS:\n"
    for idx, req in enumerate(process.requirements, 1):
        out += f"  {idx}. {req.text} {'(Required)' if req.is_required else '(Optional)'}\n"
    out += "\n"

    out += "PROJECT STEPS:\n"
    for idx, step in enumerate(process.steps, 1):
        out += f"  Step {idx}: {step.title}\n"
        out += f"    {step.description}\n\n"
    return out


def _gallery_text(gallery: GallerySuggestion | None) -> str:
    if gallery is None:
        return _placeholder("gallery")

    thumb = gallery.thumbnail_prompt
    script = gallery.video_script
    out = "=== GALLERY CONTENT ===\n\n"

    out += "THUMBNAIL IMAGE PROMPT:\n"
    out += f"{thumb.prompt}\n\n"
    out += f"Style Notes: {thumb.style_notes}\n"
    out += f"Visual Style: {thumb.visual_style or DEFAULT_VISUAL_STYLE}\n"
    out += f"Color Palette: {', '.join(thumb.color_palette)}\n"
    out += f"Composition Tips: {thumb.composition_tips}\n\n"

    out += "VIDEO SCRIPT:\n"
    out += f"Hook: {script.hook}\n\n"
    out += f"Introduction: {script.introduction}\n\n"
    out += "Main Points:\n"
    for idx, point in enumerate(script.main_points, 1):
        out += f"  {idx}. {point.point} ({point.duration})\n"
    out += f"\nCall to Action: {script.call_to_action}\n"
    out += f"Total Duration: {script.total_duration}\n\n"
    out += f"FULL SCRIPT:\n{script.full_script}\n\n"

    if gallery.sample_documents:
        out += "SAMPLE DOCUMENTS:\n"
        for idx, doc in enumerate(gallery.sample_documents, 1):
            file_type = f" ({doc.file_type})" if doc.file_type else ""
            out += f"  {idx}. {doc.title}{file_type}\n"
            out += f"     {doc.description}\n"
            if doc.data_evidence:
                out += f"     Evidence: {doc.data_evidence}\n"
            out += "\n"

    out += f"GALLERY STRATEGY:\n{gallery.gallery_strategy}\n"
    return out


def _profile_text(bundle: ExportBundle) -> str:
    if bundle.analysis is None and not bundle.profile_context:
        return _placeholder("profile context") + "\n"

    out = "=== PROFILE CONTEXT (for reference) ===\n\n"
    if bundle.profile_context:
        out += f"Context: {bundle.profile_context}\n"
    analysis = bundle.analysis
    if analysis is not None:
        out += f"Archetype: {analysis.archetype}\n"
        out += f"Proficiency Level: {analysis.proficiency}/100\n"
        out += f"Key Skills: {', '.join(analysis.skills)}\n"
        out += f"Recommended Keywords: {', '.join(analysis.recommended_keywords)}\n"
        if analysis.signature_mechanism:
            out += f"Signature Mechanism: {analysis.signature_mechanism}\n"
    return out


def format_plain_text(bundle: ExportBundle) -> str:
    """Render the copy-paste text block."""
    out = BANNER + "\n"
    out += f"PROJECT TITLE: {bundle.project_title}\n"
    out += f"CATEGORY: {bundle.project_category}\n"
    out += f"SEARCH TAGS: {', '.join(bundle.search_tags)}\n\n"
    out += RULE + "\n\n"

    for section in (
        _description_text(bundle.description),
        _pricing_text(bundle.pricing),
        _process_text(bundle.process),
        _gallery_text(bundle.gallery),
    ):
        out += section + "\n"
        out += RULE + "\n\n"

    out += _profile_text(bundle)
    out += "\n" + RULE + "\n"
    out += FOOTER + "\n"
    return out


# =======================
# Outline
# =======================


def _heading(text: str, level: int = 2) -> OutlineBlock:
    return OutlineBlock(kind="heading", text=text, level=level)


def _paragraph(text: str) -> OutlineBlock:
    return OutlineBlock(kind="paragraph", text=text)


def _bullet(text: str) -> OutlineBlock:
    return OutlineBlock(kind="bulleted_list_item", text=text)


def _description_blocks(description: DescriptionData | None) -> list[OutlineBlock]:
    blocks = [_heading("Project Description")]
    if description is None:
        blocks.append(_paragraph(_placeholder("description")))
        return blocks

    blocks.append(_paragraph(description.project_summary))
    if description.faqs:
        blocks.append(_heading("FAQs", 3))
        for faq in description.faqs:
            blocks.append(
                OutlineBlock(kind="toggle", text=faq.question, children=[_paragraph(faq.answer)])
            )
    return blocks


def _pricing_blocks(pricing: PricingSelections | None) -> list[OutlineBlock]:
    blocks = [_heading("Pricing Tiers")]
    if pricing is None:
        blocks.append(_paragraph(_placeholder("pricing")))
        return blocks

    target = resolve_target_rate(pricing)
    blocks.append(_paragraph(f"Target Hourly Rate: {format_money(target)}/hr"))

    for name, tier in pricing.active_tiers():
        blocks.append(_heading(f"{name.capitalize()}: {tier.title} - {format_money(tier.price)}", 3))
        details = [tier.description, f"{tier.delivery_days} days delivery"]
        if tier.estimated_hours:
            rate = effective_rate(tier.price, tier.estimated_hours)
            label = tier_label(tier.price, tier.estimated_hours, target)
            details.append(f"{format_hours(tier.estimated_hours)} estimated")
            details.append(f"{label} ({format_money(rate)}/hr)")
        blocks.append(_paragraph(" • ".join(d for d in details if d)))
        blocks.extend(_bullet(feature) for feature in tier.features)

    if pricing.add_ons:
        blocks.append(_heading("Add-Ons", 3))
        blocks.extend(
            _bullet(f"{add_on.name}: +{format_money(add_on.price)}") for add_on in pricing.add_ons
        )

    if pricing.service_options:
        blocks.append(_heading("Service Options Comparison", 3))
        for option in pricing.service_options:
            included = " | ".join(f"✓ {n}" for n in option.included_in(pricing.use_3_tiers))
            blocks.append(_bullet(f"{option.name}: {included or 'Not included'}"))
    return blocks


def _process_blocks(process: ProcessSelections | None) -> list[OutlineBlock]:
    blocks = [_heading("Requirements & Steps")]
    if process is None:
        blocks.append(_paragraph(_placeholder("process")))
        return blocks

    blocks.append(_heading("Requirements", 3))
    for req in process.requirements:
        blocks.append(_bullet(f"{req.text} ({'Required' if req.is_required else 'Optional'})"))

    blocks.append(_heading("Process Steps", 3))
    for step in process.steps:
        text = f"{step.title}: {step.description}" if step.description else step.title
        blocks.append(OutlineBlock(kind="numbered_list_item", text=text))
    return blocks


def _gallery_blocks(gallery: GallerySuggestion | None) -> list[OutlineBlock]:
    blocks = [_heading("Gallery Content")]
    if gallery is None:
        blocks.append(_paragraph(_placeholder("gallery")))
        return blocks

    thumb = gallery.thumbnail_prompt
    blocks.append(_heading("Thumbnail Prompt", 3))
    blocks.append(OutlineBlock(kind="code", text=thumb.prompt, language="plain text"))
    blocks.append(_paragraph(f"Visual Style: {thumb.visual_style or DEFAULT_VISUAL_STYLE}"))

    blocks.append(_heading("Video Script", 3))
    blocks.append(_paragraph(gallery.video_script.full_script))

    if gallery.sample_documents:
        blocks.append(_heading("Sample Documents", 3))
        for doc in gallery.sample_documents:
            blocks.append(_bullet(f"{doc.title}: {doc.description}" if doc.description else doc.title))
            if doc.data_evidence:
                blocks.append(_paragraph(f"Data Evidence: {doc.data_evidence}"))

    if gallery.gallery_strategy:
        blocks.append(_paragraph(f"Gallery Strategy: {gallery.gallery_strategy}"))
    return blocks


def _profile_blocks(bundle: ExportBundle) -> list[OutlineBlock]:
    blocks = [_heading("Profile Context")]
    analysis = bundle.analysis
    if analysis is None and not bundle.profile_context:
        blocks.append(_paragraph(_placeholder("profile context")))
        return blocks

    if bundle.profile_context:
        blocks.append(_paragraph(f"Profile Context: {bundle.profile_context}"))
    if analysis is not None:
        identity = [f"Archetype: {analysis.archetype}"]
        if analysis.signature_mechanism:
            identity.append(f"Signature: {analysis.signature_mechanism}")
        blocks.append(_paragraph(" • ".join(identity)))
        blocks.append(_paragraph(f"Key Skills: {', '.join(analysis.skills)}"))
        blocks.append(
            _paragraph(f"Recommended Keywords: {', '.join(analysis.recommended_keywords)}")
        )
    return blocks


def build_outline(bundle: ExportBundle) -> list[OutlineBlock]:
    """Generic block tree in the fixed section order."""
    return [
        *_description_blocks(bundle.description),
        *_pricing_blocks(bundle.pricing),
        *_process_blocks(bundle.process),
        *_gallery_blocks(bundle.gallery),
        *_profile_blocks(bundle),
    ]


def format_export(bundle: ExportBundle) -> ExportResult:
    """
    Render an export bundle.

    Args:
        bundle: Aggregated wizard state

    Returns:
        ExportResult with the plain text block and the outline
    """
    return ExportResult(plain_text=format_plain_text(bundle), outline=build_outline(bundle))
