"""Pricing arithmetic: effective hourly rate and profitability labels.

All rounding is half-up. Rates are kept to cents; money shown to users is
rounded to whole dollars.
"""

from decimal import ROUND_HALF_UP, Decimal

from crafter.core.schemas_pricing import PricingSelections

DEFAULT_TARGET_HOURLY_RATE = 100.0

SUSTAINABLE = "Sustainable"
LOW_MARGIN = "Low Margin"

# Listing-level thresholds as multiples of the target rate
HIGH_MARGIN_FACTOR = Decimal("1.2")
LOW_MARGIN_FACTOR = Decimal("0.8")


def _dec(value: float) -> Decimal:
    return Decimal(str(value))


def effective_rate(price: float, hours: float | None) -> float:
    """
    Price per estimated hour, rounded half-up to cents.

    Returns 0 when hours is missing or not positive.
    """
    if not hours or hours <= 0:
        return 0.0
    rate = (_dec(price) / _dec(hours)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(rate)


def is_sustainable(price: float, hours: float | None, target_rate: float) -> bool:
    if not hours or hours <= 0:
        return False
    return effective_rate(price, hours) >= target_rate


def tier_label(price: float, hours: float | None, target_rate: float) -> str:
    """Binary per-tier label: Sustainable or Low Margin."""
    return SUSTAINABLE if is_sustainable(price, hours, target_rate) else LOW_MARGIN


def resolve_target_rate(pricing: PricingSelections | None) -> float:
    if pricing is None or not pricing.target_hourly_rate:
        return DEFAULT_TARGET_HOURLY_RATE
    return pricing.target_hourly_rate


def profitability_status(pricing: PricingSelections | None) -> str:
    """
    Listing-level profitability judged on the standard tier.

    Returns one of: Unknown, Needs Review, High Margin, Sustainable,
    Low Margin, Unsustainable.
    """
    if pricing is None:
        return "Unknown"

    tier = pricing.tiers.standard
    hours = tier.estimated_hours or 0
    if hours <= 0:
        return "Needs Review"

    target = _dec(resolve_target_rate(pricing))
    rate = _dec(effective_rate(tier.price, hours))
    if rate >= target * HIGH_MARGIN_FACTOR:
        return "High Margin"
    if rate >= target:
        return SUSTAINABLE
    if rate >= target * LOW_MARGIN_FACTOR:
        return LOW_MARGIN
    return "Unsustainable"


def format_money(value: float) -> str:
    """Whole dollars, rounded half-up: 40.5 -> "$41"."""
    whole = _dec(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${whole}"


def format_hours(hours: float | None) -> str:
    value = _dec(hours or 0).normalize()
    # normalize() turns 10 into 1E+1
    return f"{value:f}h"
