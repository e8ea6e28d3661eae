"""
Tier catalog — the purchasable service levels.

Static table, loaded once at import. Records are frozen pydantic models so
nothing downstream can mutate a tier's base price or structural class.
"""

from types import MappingProxyType

from .errors import UnknownTierError
from .models import StructuralClass
from .schemas import TierDefinition

_TIERS = [
    TierDefinition(
        id="direct",
        name="Direct cremation",
        description="Cremation only — a simple farewell",
        base_price=198_000,
        structural_class=StructuralClass.NONE,
        max_attendees=10,
        features=("Transfer", "Repose", "Cremation"),
    ),
    TierDefinition(
        id="plan45",
        name="Family service 45",
        description="A quiet farewell with family only",
        base_price=450_000,
        structural_class=StructuralClass.SMALL,
        max_attendees=20,
        features=("Transfer", "Repose", "Wake", "Funeral", "Cremation"),
    ),
    TierDefinition(
        id="plan60",
        name="Family service 60",
        description="Farewell with relatives and close friends",
        base_price=600_000,
        structural_class=StructuralClass.MEDIUM,
        max_attendees=30,
        features=("Transfer", "Repose", "Wake", "Funeral", "Cremation", "Memorial"),
    ),
    TierDefinition(
        id="plan100",
        name="General service 100",
        description="A full service with a rich floral arrangement",
        base_price=1_000_000,
        structural_class=StructuralClass.LARGE,
        max_attendees=80,
        features=("Transfer", "Repose", "Wake", "Funeral", "Cremation", "Memorial",
                  "Return gifts"),
    ),
    TierDefinition(
        id="plan140",
        name="General service 140",
        description="A grand, solemn service one level up",
        base_price=1_400_000,
        structural_class=StructuralClass.LARGE,
        max_attendees=150,
        features=("Transfer", "Repose", "Wake", "Funeral", "Cremation", "Memorial",
                  "Return gifts", "Reception meal"),
    ),
]

TIER_CATALOG = MappingProxyType({tier.id: tier for tier in _TIERS})


def get_tier(tier_id: str) -> TierDefinition:
    """Returns the tier for an id, or raises UnknownTierError."""
    try:
        return TIER_CATALOG[tier_id]
    except KeyError:
        raise UnknownTierError(tier_id) from None


def has_tier(tier_id: str) -> bool:
    return tier_id in TIER_CATALOG


def list_tiers() -> list[TierDefinition]:
    """All tiers, cheapest first."""
    return sorted(TIER_CATALOG.values(), key=lambda t: t.base_price)
