"""
Configurator session — owns the user's Selections and the one-shot
performance profile.

The profile is detected when the session starts and is read-only after
that. Price and scene are recomputed from scratch on every call; both are
cheap and pure, so there is no caching or debouncing here.
"""

import logging
import uuid
from typing import Optional

from .config import settings
from .performance import SignalProvider, StaticSignalProvider, resolve_profile
from .pricing_engine import PricingEngine
from .scene_assembler import SceneAssembler
from .schemas import (
    PerformanceProfile,
    PriceBreakdown,
    SceneDescriptor,
    Selections,
    SelectionsUpdate,
    StructuralConfig,
)
from .structure import resolve_structure
from .tier_catalog import get_tier

logger = logging.getLogger(__name__)


class ConfiguratorSession:

    def __init__(self, provider: Optional[SignalProvider] = None,
                 selections: Optional[Selections] = None,
                 pricing: Optional[PricingEngine] = None,
                 assembler: Optional[SceneAssembler] = None):
        self.session_id = str(uuid.uuid4())
        self._profile = resolve_profile(provider or StaticSignalProvider())
        self.selections = selections or Selections()
        self._pricing = pricing or PricingEngine()
        self._assembler = assembler or SceneAssembler()

    @property
    def profile(self) -> PerformanceProfile:
        return self._profile

    def update(self, changes: SelectionsUpdate) -> Selections:
        """Apply a partial update. The merged result is re-validated as a whole."""
        merged = self.selections.model_dump()
        merged.update(changes.model_dump(exclude_unset=True, exclude_none=True))
        self.selections = Selections.model_validate(merged)
        return self.selections

    def price(self) -> PriceBreakdown:
        return self._pricing.resolve(self.selections)

    def amount_due(self, coverage_ceiling: Optional[int] = None) -> int:
        return self._pricing.amount_due(self.price().total, coverage_ceiling)

    def structure(self) -> StructuralConfig:
        tier = get_tier(self.selections.tier_id)
        return resolve_structure(tier.structural_class, self.selections.theme)

    def scene(self, seed: Optional[int] = None) -> SceneDescriptor:
        return self._assembler.assemble(self.selections, self.structure(), self._profile, seed)


class SessionStore:
    """
    In-process session registry. Nothing is persisted.

    Sessions live until ended or until the store is full, at which point
    the oldest session is evicted to make room.
    """

    def __init__(self, max_sessions: Optional[int] = None):
        self.max_sessions = max_sessions if max_sessions is not None else settings.MAX_SESSIONS
        self._sessions: dict[str, ConfiguratorSession] = {}

    def start(self, provider: Optional[SignalProvider] = None,
              selections: Optional[Selections] = None) -> ConfiguratorSession:
        session = ConfiguratorSession(provider=provider, selections=selections)
        while self._sessions and len(self._sessions) >= self.max_sessions:
            oldest = next(iter(self._sessions))
            del self._sessions[oldest]
            logger.info("Session %s evicted (store full)", oldest)
        self._sessions[session.session_id] = session
        logger.info("Session %s started (tier=%s, performance=%s)", session.session_id,
                    session.selections.tier_id, session.profile.tier_label.value)
        return session

    def get(self, session_id: str) -> ConfiguratorSession:
        """Raises KeyError for unknown ids."""
        return self._sessions[session_id]

    def end(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self):
        return len(self._sessions)
