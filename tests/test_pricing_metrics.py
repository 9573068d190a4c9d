"""Tests for effective rate and profitability labels."""

import pytest

from crafter.core.pricing_metrics import (
    DEFAULT_TARGET_HOURLY_RATE,
    effective_rate,
    format_hours,
    format_money,
    is_sustainable,
    profitability_status,
    resolve_target_rate,
    tier_label,
)
from crafter.core.schemas_pricing import PricingSelections


def make_pricing(price: float, hours: float | None, target: float | None = None) -> PricingSelections:
    return PricingSelections.model_validate(
        {
            "tiers": {
                "standard": {
                    "title": "Standard",
                    "deliveryDays": 5,
                    "price": price,
                    "estimatedHours": hours,
                }
            },
            "targetHourlyRate": target,
        }
    )


def test_low_margin_tier():
    assert effective_rate(200, 5) == 40.0
    assert is_sustainable(200, 5, 100) is False
    assert tier_label(200, 5, 100) == "Low Margin"


def test_sustainable_tier():
    assert effective_rate(600, 5) == 120.0
    assert is_sustainable(600, 5, 100) is True
    assert tier_label(600, 5, 100) == "Sustainable"


def test_rate_exactly_at_target_is_sustainable():
    assert tier_label(500, 5, 100) == "Sustainable"


@pytest.mark.parametrize("hours", [0, None, -2])
def test_missing_hours_give_zero_rate(hours):
    assert effective_rate(100, hours) == 0.0
    assert is_sustainable(100, hours, 100) is False
    assert tier_label(100, hours, 100) == "Low Margin"


def test_rate_rounds_half_up_to_cents():
    assert effective_rate(100, 3) == 33.33
    assert effective_rate(200, 3) == 66.67
    assert effective_rate(0.125, 1) == 0.13


def test_format_money_rounds_half_up_to_whole_dollars():
    assert format_money(40.5) == "$41"
    assert format_money(40.49) == "$40"
    assert format_money(1000.0) == "$1000"


def test_format_hours():
    assert format_hours(5.0) == "5h"
    assert format_hours(7.5) == "7.5h"
    assert format_hours(10) == "10h"
    assert format_hours(None) == "0h"


def test_target_rate_defaults():
    assert resolve_target_rate(None) == DEFAULT_TARGET_HOURLY_RATE
    assert resolve_target_rate(make_pricing(600, 5)) == DEFAULT_TARGET_HOURLY_RATE
    assert resolve_target_rate(make_pricing(600, 5, target=80)) == 80


@pytest.mark.parametrize(
    "price,hours,target,expected",
    [
        (600, 5, None, "High Margin"),
        (550, 5, None, "Sustainable"),
        (500, 5, None, "Sustainable"),
        (450, 5, None, "Low Margin"),
        (400, 5, None, "Low Margin"),
        (300, 5, None, "Unsustainable"),
        (300, 5, 50, "High Margin"),
        (300, None, None, "Needs Review"),
        (300, 0, None, "Needs Review"),
    ],
)
def test_profitability_status(price, hours, target, expected):
    assert profitability_status(make_pricing(price, hours, target)) == expected


def test_profitability_status_without_pricing():
    assert profitability_status(None) == "Unknown"
