"""
Price resolver tests — pure math, no I/O.

Tests:
1.  Default plan60 selections price to a known total
2.  Line items always sum to the total
3.  Every enum delta and add-on shows up as its own line item
4.  Zero attendees still lists the per-attendee items, at 0
5.  Changing one selection moves the total by exactly its delta
6.  Unknown tier raises
7.  Negative subtotal is clamped with an explicit adjustment line
8.  amount_due subtracts the coverage ceiling, never below 0
"""

import pytest

from funeral_configurator import pricing_engine
from funeral_configurator.errors import UnknownTierError
from funeral_configurator.models import (
    DecorationVolume,
    HospitalityGrade,
    MaterialGrade,
    ServiceAddOn,
    Theme,
)
from funeral_configurator.pricing_engine import PricingEngine, amount_due, resolve_price
from funeral_configurator.schemas import Selections
from funeral_configurator.tier_catalog import list_tiers


def _codes(breakdown):
    return [item.code for item in breakdown.line_items]


def test_default_plan60_total():
    breakdown = resolve_price(Selections())
    # 600k base + 50k modern + 80k cloth + 150k monk + 300k name + 30k van
    # + 30 × (6k catering + 3k gift)
    assert breakdown.total == 1_480_000
    assert breakdown.tier_id == "plan60"


@pytest.mark.parametrize("tier", [t.id for t in list_tiers()])
def test_line_items_sum_to_total(tier):
    selections = Selections(
        tier_id=tier,
        theme=Theme.NATURE,
        material_grade=MaterialGrade.LUXURY,
        decoration_volume=DecorationVolume.MINIMAL,
        service_add_ons={ServiceAddOn.MAKEUP},
        attendee_count=17,
    )
    breakdown = resolve_price(selections)
    assert sum(i.amount for i in breakdown.line_items) == breakdown.total
    assert breakdown.total >= 0


def test_line_item_codes():
    breakdown = resolve_price(Selections(service_add_ons={ServiceAddOn.MAKEUP}))
    assert _codes(breakdown) == [
        "base", "theme", "material_grade", "decoration_volume", "monk",
        "posthumous_name", "hearse", "add_on:makeup", "catering", "return_gift",
    ]
    makeup = [i for i in breakdown.line_items if i.code == "add_on:makeup"][0]
    assert makeup.amount == 100_000


def test_add_on_absent_when_not_selected():
    assert "add_on:makeup" not in _codes(resolve_price(Selections()))


def test_zero_attendees():
    breakdown = resolve_price(Selections(attendee_count=0, catering=HospitalityGrade.PREMIUM))
    per_attendee = {i.code: i.amount for i in breakdown.line_items
                    if i.code in ("catering", "return_gift")}
    assert per_attendee == {"catering": 0, "return_gift": 0}


def test_single_selection_delta():
    base = resolve_price(Selections(theme=Theme.TRADITIONAL)).total
    nature = resolve_price(Selections(theme=Theme.NATURE)).total
    assert nature - base == pricing_engine.THEME_DELTAS[Theme.NATURE]

    lavish = resolve_price(Selections(decoration_volume=DecorationVolume.LAVISH)).total
    minimal = resolve_price(Selections(decoration_volume=DecorationVolume.MINIMAL)).total
    assert lavish - minimal == 230_000


def test_attendee_scaling():
    one = resolve_price(Selections(attendee_count=1)).total
    eleven = resolve_price(Selections(attendee_count=11)).total
    assert eleven - one == 10 * (6_000 + 3_000)


def test_unknown_tier_raises():
    with pytest.raises(UnknownTierError):
        PricingEngine().resolve(Selections(tier_id="nope"))


def test_negative_subtotal_clamped(monkeypatch):
    monkeypatch.setitem(pricing_engine.DECORATION_VOLUME_DELTAS,
                        DecorationVolume.MINIMAL, -10_000_000)
    breakdown = resolve_price(Selections(tier_id="direct",
                                         decoration_volume=DecorationVolume.MINIMAL))
    assert breakdown.total == 0
    assert breakdown.line_items[-1].code == "floor_adjustment"
    assert breakdown.line_items[-1].amount > 0
    assert sum(i.amount for i in breakdown.line_items) == 0


def test_amount_due():
    assert amount_due(1_480_000) == 0
    assert amount_due(2_000_000) == 0
    assert amount_due(2_500_000) == 500_000
    assert amount_due(2_500_000, coverage_ceiling=0) == 2_500_000
