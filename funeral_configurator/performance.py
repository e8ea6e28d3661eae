"""
Performance Tier Resolver — maps best-effort device signals to a quality profile.

Detection runs once per session. The decision table is evaluated top to
bottom, first match wins; a small-viewport / touch-primary device is always
forced down to "low". Missing signals fall through to "medium", never error.
"""

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Optional

from .config import settings
from .models import PerformanceTier
from .schemas import EnvironmentSignals, PerformanceProfile

logger = logging.getLogger(__name__)


# Renderer substrings, lowercase. Mid-range is checked before low-end
# because "mali-g7" also contains "mali".
HIGH_END_SIGNATURES = ("nvidia", "geforce", "radeon", "apple m")
MID_RANGE_SIGNATURES = ("adreno 6", "mali-g7", "apple gpu")
LOW_END_SIGNATURES = ("intel", "adreno 5", "mali")

HIGH_MEMORY_GB = 8
MEDIUM_MEMORY_GB = 4

PERFORMANCE_PROFILES = MappingProxyType({
    PerformanceTier.HIGH: PerformanceProfile(
        tier_label=PerformanceTier.HIGH,
        density_multiplier=1.0,
        shadows_enabled=True,
        post_effects_enabled=True,
        max_auxiliary_lights=6,
        particles_enabled=True,
        animations_enabled=True,
        antialias=True,
        shadow_map_size=2048,
        geometry_detail=1.0,
        pixel_ratio=2.0,
    ),
    PerformanceTier.MEDIUM: PerformanceProfile(
        tier_label=PerformanceTier.MEDIUM,
        density_multiplier=0.4,
        shadows_enabled=True,
        post_effects_enabled=False,
        max_auxiliary_lights=2,
        particles_enabled=True,
        animations_enabled=True,
        antialias=True,
        shadow_map_size=1024,
        geometry_detail=0.7,
        pixel_ratio=1.5,
    ),
    PerformanceTier.LOW: PerformanceProfile(
        tier_label=PerformanceTier.LOW,
        density_multiplier=0.2,
        shadows_enabled=False,
        post_effects_enabled=False,
        max_auxiliary_lights=0,
        particles_enabled=False,
        animations_enabled=False,
        antialias=False,
        shadow_map_size=512,
        geometry_detail=0.5,
        pixel_ratio=1.0,
    ),
})


def _match_renderer(renderer: str) -> Optional[PerformanceTier]:
    r = renderer.lower()
    if any(sig in r for sig in HIGH_END_SIGNATURES):
        return PerformanceTier.HIGH
    if any(sig in r for sig in MID_RANGE_SIGNATURES):
        return PerformanceTier.MEDIUM
    if any(sig in r for sig in LOW_END_SIGNATURES):
        return PerformanceTier.LOW
    return None


def _tier_from_memory(memory_gb: float) -> PerformanceTier:
    if memory_gb >= HIGH_MEMORY_GB:
        return PerformanceTier.HIGH
    if memory_gb >= MEDIUM_MEMORY_GB:
        return PerformanceTier.MEDIUM
    return PerformanceTier.LOW


def classify_signals(signals: EnvironmentSignals) -> PerformanceTier:
    """Run the decision table. Always returns a tier."""
    if signals.small_viewport:
        return PerformanceTier.LOW

    if signals.graphics_renderer:
        matched = _match_renderer(signals.graphics_renderer)
        if matched is not None:
            return matched

    if signals.device_memory_gb is not None and signals.device_memory_gb > 0:
        return _tier_from_memory(signals.device_memory_gb)

    return PerformanceTier.MEDIUM


def detect_performance_profile(signals: Optional[EnvironmentSignals] = None) -> PerformanceProfile:
    """Signals → PerformanceProfile. None is treated as 'nothing known'."""
    if signals is None:
        signals = EnvironmentSignals()
    tier = classify_signals(signals)
    logger.info("Performance tier %s (memory=%s, renderer=%r, small_viewport=%s)",
                tier.value, signals.device_memory_gb, signals.graphics_renderer,
                signals.small_viewport)
    return PERFORMANCE_PROFILES[tier]


# --- Signal providers ---

class SignalProvider(ABC):
    """Source of capability signals. Queried once per session."""

    @abstractmethod
    def read_signals(self) -> EnvironmentSignals:
        pass


class StaticSignalProvider(SignalProvider):
    """Signals supplied up front — by the client, or by a test."""

    def __init__(self, signals: Optional[EnvironmentSignals] = None, **fields):
        self._signals = signals if signals is not None else EnvironmentSignals(**fields)

    def read_signals(self) -> EnvironmentSignals:
        return self._signals


class EnvironmentSignalProvider(SignalProvider):
    """Signals configured in the process environment / .env file."""

    def __init__(self, config=None):
        self._config = config or settings

    def read_signals(self) -> EnvironmentSignals:
        return EnvironmentSignals(
            device_memory_gb=self._config.DEVICE_MEMORY_GB,
            graphics_renderer=self._config.GRAPHICS_RENDERER,
            small_viewport=self._config.SMALL_VIEWPORT,
        )


def resolve_profile(provider: SignalProvider) -> PerformanceProfile:
    """Query a provider and classify. A provider that blows up yields the default."""
    try:
        signals = provider.read_signals()
    except Exception as e:
        logger.warning("Signal provider %s failed: %s; using default tier",
                       type(provider).__name__, e)
        signals = EnvironmentSignals()
    return detect_performance_profile(signals)
