"""
Scene Descriptor Assembler.

Runs every registered generator for a configuration and collects the groups
into one SceneDescriptor for the 3D viewer.

- Structural flags and profile toggles decide which generators run; a
  skipped generator leaves its group as [].
- Each generator gets its own RNG seeded from (seed, group), so turning one
  group off never reshuffles another.
- A generator that raises or emits bad instances is a GeneratorFailure: its
  group becomes [], the failure is logged and recorded, assembly continues.
"""

import logging
import math
import random
from typing import Optional

from .config import settings
from .errors import GeneratorFailure
from .generators.base import BaseGenerator
from .generators.registry import default_generators
from .models import SCENE_GROUPS
from .schemas import (
    GeneratorFailureRecord,
    PerformanceProfile,
    PlacedInstance,
    RenderSettings,
    SceneDescriptor,
    Selections,
    StructuralConfig,
    StyleInputs,
)
from .structure import resolve_structure
from .tier_catalog import get_tier

logger = logging.getLogger(__name__)


def group_rng(seed: int, group: str) -> random.Random:
    """Independent, reproducible random stream for one group."""
    return random.Random(f"{seed}:{group}")


def _validate(group: str, instances) -> list[PlacedInstance]:
    if not isinstance(instances, list):
        raise GeneratorFailure(group, f"expected a list, got {type(instances).__name__}")
    for i, inst in enumerate(instances):
        if not isinstance(inst, PlacedInstance):
            raise GeneratorFailure(group, f"item {i} is {type(inst).__name__}, not PlacedInstance")
        values = (*inst.position, inst.scale)
        if not all(math.isfinite(v) for v in values):
            raise GeneratorFailure(group, f"item {i} has non-finite values {values}")
        if inst.scale <= 0:
            raise GeneratorFailure(group, f"item {i} has non-positive scale {inst.scale}")
    return instances


class SceneAssembler:
    """Composes generator output into a SceneDescriptor."""

    def __init__(self, generators: Optional[list[BaseGenerator]] = None):
        if generators is None:
            generators = default_generators()
        self.generators = {g.group: g for g in generators}

    def assemble(self, selections: Selections, structure: StructuralConfig,
                 profile: PerformanceProfile, seed: Optional[int] = None) -> SceneDescriptor:
        if seed is None:
            seed = settings.DEFAULT_LAYOUT_SEED
        style = StyleInputs.from_selections(selections)

        groups = {name: [] for name in SCENE_GROUPS}
        failures = []

        for name in SCENE_GROUPS:
            generator = self.generators.get(name)
            if generator is None:
                continue
            try:
                if not generator.applies(structure, profile):
                    continue
                instances = generator.generate(structure, profile, style, group_rng(seed, name))
                groups[name] = _validate(name, instances)
            except GeneratorFailure as failure:
                failures.append(self._record(failure))
            except Exception as e:
                failures.append(self._record(GeneratorFailure(name, f"{type(e).__name__}: {e}")))

        logger.debug("Assembled scene for %s: %s", selections.tier_id,
                     {name: len(items) for name, items in groups.items()})

        return SceneDescriptor(
            tier_id=selections.tier_id,
            performance_tier=profile.tier_label,
            seed=seed,
            structure=structure,
            groups=groups,
            render_settings=RenderSettings(
                shadows_enabled=profile.shadows_enabled,
                post_effects_enabled=profile.post_effects_enabled,
                shadow_map_size=profile.shadow_map_size,
                antialias=profile.antialias,
                pixel_ratio=profile.pixel_ratio,
                animations_enabled=profile.animations_enabled,
            ),
            failures=failures,
        )

    def _record(self, failure: GeneratorFailure) -> GeneratorFailureRecord:
        logger.warning("%s; substituting empty group", failure)
        return GeneratorFailureRecord(group=failure.group, reason=failure.reason)


_assembler = SceneAssembler()


def assemble_scene(selections: Selections, structure: StructuralConfig,
                   profile: PerformanceProfile, seed: Optional[int] = None) -> SceneDescriptor:
    """Module-level shortcut using the default generator set."""
    return _assembler.assemble(selections, structure, profile, seed)


def build_scene(selections: Selections, profile: PerformanceProfile,
                seed: Optional[int] = None) -> SceneDescriptor:
    """
    Full layout pipeline from Selections: tier → structure → scene.

    Raises:
        UnknownTierError: selections.tier_id is not in the catalog.
    """
    tier = get_tier(selections.tier_id)
    structure = resolve_structure(tier.structural_class, selections.theme)
    return assemble_scene(selections, structure, profile, seed)
