"""
Catalog API — read-only reference data for the configurator UI.

GET /api/catalog/tiers                 — All plans, cheapest first
GET /api/catalog/tiers/{tier_id}       — One plan
GET /api/catalog/performance-profiles  — Render presets by performance tier
"""

from fastapi import APIRouter, HTTPException

from ..errors import UnknownTierError
from ..performance import PERFORMANCE_PROFILES
from ..schemas import TierDefinition
from ..tier_catalog import get_tier, list_tiers

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/tiers", response_model=list[TierDefinition])
def get_tiers():
    return list_tiers()


@router.get("/tiers/{tier_id}", response_model=TierDefinition)
def get_tier_detail(tier_id: str):
    try:
        return get_tier(tier_id)
    except UnknownTierError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/performance-profiles")
def get_performance_profiles():
    return {tier.value: profile.model_dump() for tier, profile in PERFORMANCE_PROFILES.items()}
