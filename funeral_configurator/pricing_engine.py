"""
Price Resolver — itemized quote for a set of Selections.

Pure integer math, no side effects. Tier base price + enum deltas +
per-attendee rates × attendee count + fixed add-ons.

Input: Selections
Output: PriceBreakdown (line items always sum to the total)
"""

import logging
from typing import Optional

from .config import settings
from .models import (
    DecorationVolume,
    HearseType,
    HospitalityGrade,
    MaterialGrade,
    PosthumousName,
    ServiceAddOn,
    Theme,
)
from .schemas import PriceBreakdown, PriceLineItem, Selections
from .tier_catalog import get_tier

logger = logging.getLogger(__name__)


# Delta tables in yen. Negative deltas are discounts.
THEME_DELTAS = {
    Theme.TRADITIONAL: 0,
    Theme.MODERN: 50_000,
    Theme.NATURE: 80_000,
}

MATERIAL_GRADE_DELTAS = {
    MaterialGrade.STANDARD: 0,
    MaterialGrade.CLOTH: 80_000,
    MaterialGrade.LUXURY: 350_000,
}

DECORATION_VOLUME_DELTAS = {
    DecorationVolume.MINIMAL: -30_000,
    DecorationVolume.STANDARD: 0,
    DecorationVolume.LAVISH: 200_000,
}

MONK_DELTAS = {1: 150_000, 2: 250_000, 3: 400_000}

POSTHUMOUS_NAME_DELTAS = {
    PosthumousName.NONE: 0,
    PosthumousName.SHINJI: 300_000,
    PosthumousName.KOJI: 500_000,
    PosthumousName.IN: 1_000_000,
}

HEARSE_DELTAS = {
    HearseType.VAN: 30_000,
    HearseType.WESTERN: 80_000,
    HearseType.JAPANESE: 150_000,
}

# Per attendee
CATERING_RATES = {
    HospitalityGrade.NONE: 0,
    HospitalityGrade.SIMPLE: 3_000,
    HospitalityGrade.STANDARD: 6_000,
    HospitalityGrade.PREMIUM: 12_000,
}

RETURN_GIFT_RATES = {
    HospitalityGrade.NONE: 0,
    HospitalityGrade.SIMPLE: 1_000,
    HospitalityGrade.STANDARD: 3_000,
    HospitalityGrade.PREMIUM: 5_000,
}

# Fixed cost when toggled on
ADD_ON_COSTS = {
    ServiceAddOn.MAKEUP: 100_000,
}

ADD_ON_LABELS = {
    ServiceAddOn.MAKEUP: "Washing & makeup",
}


class PricingEngine:
    """
    Assembles the itemized PriceBreakdown from Selections.
    Stateless — safe to call on every selection change.
    """

    def resolve(self, selections: Selections) -> PriceBreakdown:
        """
        Build the price breakdown.

        Raises:
            UnknownTierError: selections.tier_id is not in the catalog.
        """
        tier = get_tier(selections.tier_id)

        items = [
            self._item("base", f"Base plan — {tier.name}", tier.base_price),
            self._item("theme", f"Altar design ({selections.theme.value})",
                       THEME_DELTAS[selections.theme]),
            self._item("material_grade", f"Coffin ({selections.material_grade.value})",
                       MATERIAL_GRADE_DELTAS[selections.material_grade]),
            self._item("decoration_volume",
                       f"Floral volume ({selections.decoration_volume.value})",
                       DECORATION_VOLUME_DELTAS[selections.decoration_volume]),
            self._item("monk", f"Officiants ({selections.monk_count})",
                       MONK_DELTAS[selections.monk_count]),
            self._item("posthumous_name",
                       f"Posthumous name ({selections.posthumous_name.value})",
                       POSTHUMOUS_NAME_DELTAS[selections.posthumous_name]),
            self._item("hearse", f"Hearse ({selections.hearse.value})",
                       HEARSE_DELTAS[selections.hearse]),
        ]

        # Fixed add-ons, in declaration order so output is stable
        for add_on in ServiceAddOn:
            if add_on in selections.service_add_ons:
                items.append(self._item(f"add_on:{add_on.value}", ADD_ON_LABELS[add_on],
                                        ADD_ON_COSTS[add_on]))

        # Per-attendee items are always listed, at 0 when nobody is coming
        attendees = selections.attendee_count
        items.append(self._per_attendee_item(
            "catering", "Catering", selections.catering, CATERING_RATES, attendees))
        items.append(self._per_attendee_item(
            "return_gift", "Return gifts", selections.return_gift, RETURN_GIFT_RATES, attendees))

        subtotal = sum(item.amount for item in items)
        if subtotal < 0:
            # Total never goes below 0
            logger.warning("Negative subtotal %d for tier %s, clamping to 0",
                           subtotal, tier.id)
            items.append(self._item("floor_adjustment", "Minimum charge adjustment", -subtotal))
            subtotal = 0

        return PriceBreakdown(tier_id=tier.id, line_items=items, total=subtotal)

    def amount_due(self, total: int, coverage_ceiling: Optional[int] = None) -> int:
        """Out-of-pocket amount after a fixed coverage subtraction."""
        if coverage_ceiling is None:
            coverage_ceiling = settings.COVERAGE_CEILING
        return max(0, total - coverage_ceiling)

    def _item(self, code: str, label: str, amount: int) -> PriceLineItem:
        return PriceLineItem(code=code, label=label, amount=amount)

    def _per_attendee_item(self, code: str, label: str, grade: HospitalityGrade,
                           rates: dict, attendees: int) -> PriceLineItem:
        rate = rates[grade]
        return self._item(
            code,
            f"{label} ({grade.value}, {attendees} × ¥{rate:,})",
            rate * attendees,
        )


_engine = PricingEngine()


def resolve_price(selections: Selections) -> PriceBreakdown:
    """Module-level shortcut for PricingEngine().resolve()."""
    return _engine.resolve(selections)


def amount_due(total: int, coverage_ceiling: Optional[int] = None) -> int:
    return _engine.amount_due(total, coverage_ceiling)
