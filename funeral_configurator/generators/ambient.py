"""
Ambient generators gated by the performance profile.

- particles: floating dust motes filling the hall (off on low-end devices)
- auxiliary_lights: chandelier ring, sized by max_auxiliary_lights
"""

import math
import random

from ..palette import DUST, WARM_LIGHT
from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs
from .base import BaseGenerator

BASE_PARTICLE_COUNT = 500
CEILING_DROP = 0.4
LIGHT_INTENSITY = 0.5


class ParticleGenerator(BaseGenerator):

    group = "particles"

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        return profile.particles_enabled

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        count = self.scaled_count(BASE_PARTICLE_COUNT, profile.density_multiplier, minimum=1)
        instances = []
        for _ in range(count):
            x = (rng.random() - 0.5) * structure.width
            y = rng.random() * structure.height
            z = (rng.random() - 0.5) * structure.depth
            instances.append(self.place(x, y, z, scale=0.5 + rng.random() * 0.5, color=DUST))
        return instances


class AuxiliaryLightGenerator(BaseGenerator):
    """Point lights evenly spaced on a ring under the ceiling. scale = intensity."""

    group = "auxiliary_lights"

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        return profile.max_auxiliary_lights > 0

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        count = profile.max_auxiliary_lights
        radius = min(structure.width, structure.depth) / 6.0
        y = structure.height - CEILING_DROP

        instances = []
        for i in range(count):
            angle = (i / count) * math.pi * 2.0
            instances.append(self.place(
                math.cos(angle) * radius, y, math.sin(angle) * radius,
                scale=LIGHT_INTENSITY, color=WARM_LIGHT,
            ))
        return instances
