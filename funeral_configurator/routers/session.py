"""
Configurator Session API — one visitor working through the configurator.

POST  /api/session/start             — Detect performance tier, start with default selections
GET   /api/session/{id}              — Current selections and profile
PATCH /api/session/{id}/selections   — Partial update of selections
GET   /api/session/{id}/price        — Itemized price for current selections
GET   /api/session/{id}/scene        — Scene descriptor (optional ?seed=)
DELETE /api/session/{id}             — Drop the session
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from ..errors import UnknownStructuralClassError, UnknownTierError
from ..performance import EnvironmentSignalProvider, StaticSignalProvider
from ..pricing_engine import amount_due
from ..schemas import (
    EnvironmentSignals,
    PerformanceProfile,
    PriceBreakdown,
    SceneDescriptor,
    Selections,
    SelectionsUpdate,
)
from ..session import ConfiguratorSession, SessionStore
from ..tier_catalog import has_tier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["configurator-session"])

# Process-wide store, swapped out in tests via dependency_overrides
store = SessionStore()


def get_store() -> SessionStore:
    return store


# --- Request/Response schemas ---

class StartSessionRequest(BaseModel):
    signals: Optional[EnvironmentSignals] = None
    selections: Optional[Selections] = None


class SessionResponse(BaseModel):
    session_id: str
    selections: Selections
    profile: PerformanceProfile


class SessionPriceResponse(BaseModel):
    breakdown: PriceBreakdown
    amount_due: int


def _load(session_id: str, sessions: SessionStore) -> ConfiguratorSession:
    try:
        return sessions.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")


def _response(session: ConfiguratorSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        selections=session.selections,
        profile=session.profile,
    )


# --- Endpoints ---

@router.post("/start", response_model=SessionResponse)
def start_session(request: StartSessionRequest, sessions: SessionStore = Depends(get_store)):
    """
    Start a configurator session.

    The performance tier is detected once here and stays fixed for the
    life of the session. Without client signals, the server-configured
    signals (DEVICE_MEMORY_GB etc.) are used.
    """
    selections = request.selections
    if selections is not None:
        _check_tier(selections.tier_id)
    if request.signals is not None:
        provider = StaticSignalProvider(request.signals)
    else:
        provider = EnvironmentSignalProvider()
    session = sessions.start(provider=provider, selections=selections)
    return _response(session)


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, sessions: SessionStore = Depends(get_store)):
    return _response(_load(session_id, sessions))


@router.patch("/{session_id}/selections", response_model=SessionResponse)
def update_selections(session_id: str, changes: SelectionsUpdate,
                      sessions: SessionStore = Depends(get_store)):
    session = _load(session_id, sessions)
    if changes.tier_id is not None:
        _check_tier(changes.tier_id)
    try:
        session.update(changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _response(session)


@router.get("/{session_id}/price", response_model=SessionPriceResponse)
def get_price(session_id: str, sessions: SessionStore = Depends(get_store)):
    session = _load(session_id, sessions)
    try:
        breakdown = session.price()
    except UnknownTierError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionPriceResponse(
        breakdown=breakdown,
        amount_due=amount_due(breakdown.total),
    )


@router.get("/{session_id}/scene", response_model=SceneDescriptor)
def get_scene(session_id: str, seed: Optional[int] = None,
              sessions: SessionStore = Depends(get_store)):
    session = _load(session_id, sessions)
    try:
        return session.scene(seed)
    except UnknownTierError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnknownStructuralClassError as e:
        # Catalog/structure tables out of sync
        logger.error("Structure lookup failed for session %s: %s", session_id, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{session_id}")
def end_session(session_id: str, sessions: SessionStore = Depends(get_store)):
    _load(session_id, sessions)
    sessions.end(session_id)
    return {"status": "ended", "session_id": session_id}


def _check_tier(tier_id: str):
    if not has_tier(tier_id):
        raise HTTPException(status_code=404, detail=f"Unknown tier: {tier_id!r}")
