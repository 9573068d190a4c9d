"""Pydantic schemas for pricing suggestions and the user's pricing selections."""

from typing import Any

from pydantic import Field, computed_field, model_validator

from crafter.core.schemas_base import CamelModel

TIER_NAMES = ("starter", "standard", "advanced")


# =======================
# LLM suggestion models
# =======================


class SuggestedTier(CamelModel):
    """One package as suggested by the LLM, with a rationale per field."""

    name: str = ""
    title: str = Field(..., min_length=1)
    title_rationale: str = ""
    description: str = Field(..., min_length=1)
    description_rationale: str = ""
    delivery_days: int = Field(..., ge=1)
    delivery_rationale: str = ""
    price: float = Field(..., ge=0)
    price_rationale: str = ""
    estimated_hours: float | None = Field(default=None, ge=0)
    features: list[str] = Field(default_factory=list)
    features_rationale: str = ""


class SuggestedTiers(CamelModel):
    starter: SuggestedTier
    standard: SuggestedTier
    advanced: SuggestedTier


class SuggestedServiceOption(CamelModel):
    name: str = Field(..., min_length=1)
    starter_included: bool = False
    standard_included: bool = False
    advanced_included: bool = False
    rationale: str = ""


class SuggestedAddOn(CamelModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    rationale: str = ""


class PricingSuggestion(CamelModel):
    """Three-tier pricing proposal. Always contains exactly three tiers."""

    tiers: SuggestedTiers
    service_options: list[SuggestedServiceOption] = Field(default_factory=list)
    add_ons: list[SuggestedAddOn] = Field(default_factory=list)
    pricing_strategy: str = ""
    market_context: str = ""


# =======================
# User selection models
# =======================


class PricingTier(CamelModel):
    """A tier as the user accepted it."""

    title: str = Field(..., min_length=1)
    description: str = ""
    delivery_days: int = Field(..., ge=1)
    price: float = Field(..., ge=0)
    estimated_hours: float | None = Field(default=None, ge=0)
    features: list[str] = Field(default_factory=list)


class SelectedTiers(CamelModel):
    """Standard is mandatory; starter and advanced come as a pair or not at all."""

    starter: PricingTier | None = None
    standard: PricingTier
    advanced: PricingTier | None = None

    @model_validator(mode="after")
    def _paired_outer_tiers(self) -> "SelectedTiers":
        if (self.starter is None) != (self.advanced is None):
            raise ValueError("starter and advanced tiers must both be set or both be empty")
        return self


class ServiceOption(CamelModel):
    name: str = Field(..., min_length=1)
    starter_included: bool = False
    standard_included: bool = False
    advanced_included: bool = False

    def included_in(self, use_3_tiers: bool) -> list[str]:
        """Display names of the tiers that include this option."""
        names = []
        if use_3_tiers and self.starter_included:
            names.append("Starter")
        if self.standard_included:
            names.append("Standard")
        if use_3_tiers and self.advanced_included:
            names.append("Advanced")
        return names


class AddOn(CamelModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)


class PricingSelections(CamelModel):
    """Pricing the user accepted. ``use3Tiers`` is derived, never stored on its own."""

    tiers: SelectedTiers
    service_options: list[ServiceOption] = Field(default_factory=list)
    add_ons: list[AddOn] = Field(default_factory=list)
    target_hourly_rate: float | None = Field(default=None, gt=0)

    @model_validator(mode="before")
    @classmethod
    def _check_declared_tier_count(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        declared = data.pop("use3Tiers", data.pop("use_3_tiers", None))
        if declared is None:
            return data
        tiers = data.get("tiers") or {}
        if isinstance(tiers, dict):
            has_outer = tiers.get("starter") is not None and tiers.get("advanced") is not None
            if bool(declared) != has_outer:
                raise ValueError("use3Tiers does not match the tiers provided")
        return data

    @computed_field(alias="use3Tiers")
    @property
    def use_3_tiers(self) -> bool:
        return self.tiers.starter is not None and self.tiers.advanced is not None

    def active_tiers(self) -> list[tuple[str, PricingTier]]:
        """(name, tier) pairs in starter, standard, advanced order, skipping empty tiers."""
        return [
            (name, tier)
            for name in TIER_NAMES
            if (tier := getattr(self.tiers, name)) is not None
        ]
