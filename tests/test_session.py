"""
Configurator session tests.

Tests:
1. Profile is detected once at start
2. Partial updates merge; invalid merges are rejected and leave state alone
3. Price / amount due / scene follow the current selections
4. Store lookups and eviction of the oldest session when full
"""

import pytest
from pydantic import ValidationError

from funeral_configurator.models import DecorationVolume, PerformanceTier, Theme
from funeral_configurator.performance import StaticSignalProvider
from funeral_configurator.schemas import Selections, SelectionsUpdate
from funeral_configurator.session import ConfiguratorSession, SessionStore


def _session(**signals):
    return ConfiguratorSession(provider=StaticSignalProvider(**signals))


def test_profile_fixed_at_start():
    session = _session(graphics_renderer="NVIDIA GeForce")
    assert session.profile.tier_label == PerformanceTier.HIGH
    session.update(SelectionsUpdate(theme=Theme.TRADITIONAL))
    assert session.profile.tier_label == PerformanceTier.HIGH
    with pytest.raises(AttributeError):
        session.profile = None


def test_partial_update_merges():
    session = _session()
    session.update(SelectionsUpdate(theme=Theme.NATURE))
    session.update(SelectionsUpdate(attendee_count=5))
    assert session.selections.theme == Theme.NATURE
    assert session.selections.attendee_count == 5
    assert session.selections.tier_id == "plan60"


def test_invalid_update_rejected():
    session = _session()
    with pytest.raises(ValidationError):
        session.update(SelectionsUpdate(monk_count=7))
    assert session.selections.monk_count == 1


def test_price_tracks_selections():
    session = _session()
    before = session.price().total
    session.update(SelectionsUpdate(decoration_volume=DecorationVolume.LAVISH))
    assert session.price().total - before == 200_000
    assert session.amount_due() == 0
    assert session.amount_due(coverage_ceiling=0) == session.price().total


def test_scene_follows_tier():
    session = ConfiguratorSession(selections=Selections(tier_id="direct"))
    assert session.scene().group("flower_mass") == []
    session.update(SelectionsUpdate(tier_id="plan45"))
    assert len(session.scene(seed=2).group("flower_mass")) > 0


def test_store():
    store = SessionStore()
    session = store.start()
    assert store.get(session.session_id) is session
    assert len(store) == 1
    store.end(session.session_id)
    with pytest.raises(KeyError):
        store.get(session.session_id)


def test_store_evicts_oldest_when_full():
    store = SessionStore(max_sessions=2)
    first = store.start()
    second = store.start()
    third = store.start()
    assert len(store) == 2
    with pytest.raises(KeyError):
        store.get(first.session_id)
    assert store.get(second.session_id) is second
    assert store.get(third.session_id) is third


def test_update_model_rejects_bad_monk_count():
    with pytest.raises(ValidationError):
        SelectionsUpdate(monk_count=0)
    assert SelectionsUpdate(monk_count=None).monk_count is None
