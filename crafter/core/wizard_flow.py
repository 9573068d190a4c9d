"""Wizard flow rules: stage order, per-stage inputs, state machine, selection gating."""

from crafter.core.errors import StageTransitionError, ValidationError
from crafter.core.schemas_artifacts import StageState
from crafter.core.schemas_description import (
    MAX_FAQS,
    MAX_SUMMARY_CHARS,
    MIN_SUMMARY_CHARS,
    DescriptionData,
)
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_project import ProjectSelection

STAGES = (
    "profile_analysis",
    "project_suggestions",
    "pricing_suggestions",
    "gallery_suggestions",
    "process_suggestions",
    "description_suggestions",
)

# Store keys for user inputs and accepted selections
PROFILE_KEY = "profile"
PROJECT_IDEA_KEY = "project_idea"
PROJECT_SELECTION_KEY = "project_selection"
PRICING_SELECTIONS_KEY = "pricing_selections"
PROCESS_SELECTIONS_KEY = "process_selections"
DESCRIPTION_DATA_KEY = "description_data"

# stage -> (required inputs, optional inputs)
STAGE_REQUIREMENTS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "profile_analysis": ((PROFILE_KEY,), ()),
    "project_suggestions": (("profile_analysis", PROJECT_IDEA_KEY), ()),
    "pricing_suggestions": (
        ("profile_analysis", PROJECT_IDEA_KEY),
        (PROJECT_SELECTION_KEY,),
    ),
    "gallery_suggestions": (
        ("profile_analysis", PROJECT_IDEA_KEY),
        (PROJECT_SELECTION_KEY, PRICING_SELECTIONS_KEY),
    ),
    "process_suggestions": (
        ("profile_analysis", PROJECT_IDEA_KEY),
        (PROJECT_SELECTION_KEY, PRICING_SELECTIONS_KEY),
    ),
    "description_suggestions": (
        ("profile_analysis", PROJECT_IDEA_KEY),
        (PROJECT_SELECTION_KEY, PRICING_SELECTIONS_KEY, PROCESS_SELECTIONS_KEY),
    ),
}

# User edits built on top of each stage's artifact; dropped on regenerate
STAGE_EDIT_KEYS: dict[str, tuple[str, ...]] = {
    "profile_analysis": (),
    "project_suggestions": (PROJECT_SELECTION_KEY,),
    "pricing_suggestions": (PRICING_SELECTIONS_KEY,),
    "gallery_suggestions": (),
    "process_suggestions": (PROCESS_SELECTIONS_KEY,),
    "description_suggestions": (DESCRIPTION_DATA_KEY,),
}

# selection key -> stage whose artifact must be ready before accepting it
SELECTION_SOURCE_STAGE: dict[str, str] = {
    PROJECT_SELECTION_KEY: "project_suggestions",
    PRICING_SELECTIONS_KEY: "pricing_suggestions",
    PROCESS_SELECTIONS_KEY: "process_suggestions",
    DESCRIPTION_DATA_KEY: "description_suggestions",
}

# selection key -> cached artifacts made stale by accepting it
SELECTION_INVALIDATES: dict[str, tuple[str, ...]] = {
    PRICING_SELECTIONS_KEY: ("gallery_suggestions",),
}

ALLOWED_TRANSITIONS: dict[StageState, set[StageState]] = {
    StageState.EMPTY: {StageState.GENERATING},
    StageState.GENERATING: {StageState.READY, StageState.FAILED},
    StageState.READY: {StageState.REGENERATING, StageState.EMPTY},
    StageState.REGENERATING: {StageState.READY, StageState.FAILED},
    StageState.FAILED: {StageState.EMPTY},
}


def status_key(stage: str) -> str:
    return f"status:{stage}"


def started_key(stage: str) -> str:
    """When the stage last went in flight (ISO 8601, UTC)."""
    return f"started:{stage}"


def prompt_version_key(stage: str) -> str:
    """Prompt version that produced the stored artifact."""
    return f"prompt_version:{stage}"


def advance_state(current: StageState, target: StageState) -> StageState:
    """
    Move a stage from one state to another.

    Raises:
        StageTransitionError: If the transition is not allowed
    """
    if target not in ALLOWED_TRANSITIONS[current]:
        raise StageTransitionError(
            f"Invalid stage transition: {current.value} -> {target.value}",
            user_message="This step is busy or not ready yet. Please try again.",
        )
    return target


def can_advance(state: StageState) -> bool:
    """Only a ready stage lets the wizard move on or export."""
    return state == StageState.READY


def accept_project_selection(selection: ProjectSelection) -> ProjectSelection:
    """Drop blank tags and attribute values from the chosen title/category."""
    tags = [tag.strip() for tag in selection.search_tags if tag.strip()]
    attributes = {
        name: [value for value in values if value.strip()]
        for name, values in selection.attributes.items()
    }
    return selection.model_copy(
        update={"search_tags": tags, "attributes": {k: v for k, v in attributes.items() if v}}
    )


def accept_pricing_selections(
    pricing: PricingSelections, default_target_rate: float
) -> PricingSelections:
    """Fill in the default target hourly rate when the user left it unset."""
    if pricing.target_hourly_rate is None:
        return pricing.model_copy(update={"target_hourly_rate": default_target_rate})
    return pricing


def accept_process_selections(process: ProcessSelections) -> ProcessSelections:
    """
    Gate the process step and keep only qualifying entries.

    A requirement qualifies at 10+ characters of stripped text, a step at 3+
    characters of stripped title.

    Raises:
        ValidationError: If no requirement or no step qualifies
    """
    requirements = [req for req in process.requirements if req.qualifies()]
    steps = [step for step in process.steps if step.qualifies()]

    if not requirements:
        raise ValidationError(
            "No qualifying requirement",
            user_message="Please add at least one requirement (minimum 10 characters)",
        )
    if not steps:
        raise ValidationError(
            "No qualifying step",
            user_message="Please add at least one step (minimum 3 characters for title)",
        )

    return ProcessSelections(requirements=requirements, steps=steps)


def accept_description_data(description: DescriptionData) -> DescriptionData:
    """
    Gate the description step.

    The summary must be 120 to 1200 characters inclusive. FAQs missing a
    question or an answer are dropped; at most five remain.

    Raises:
        ValidationError: If the summary is out of bounds or too many FAQs remain
    """
    summary_len = len(description.project_summary)
    if summary_len < MIN_SUMMARY_CHARS:
        raise ValidationError(
            f"Summary too short: {summary_len}",
            user_message=f"Project summary must be at least {MIN_SUMMARY_CHARS} characters.",
        )
    if summary_len > MAX_SUMMARY_CHARS:
        raise ValidationError(
            f"Summary too long: {summary_len}",
            user_message=f"Project summary must be {MAX_SUMMARY_CHARS} characters or less.",
        )

    faqs = [faq for faq in description.faqs if faq.question.strip() and faq.answer.strip()]
    if len(faqs) > MAX_FAQS:
        raise ValidationError(
            f"Too many FAQs: {len(faqs)}",
            user_message=f"You can add up to {MAX_FAQS} FAQs.",
        )

    return DescriptionData(project_summary=description.project_summary, faqs=faqs)
