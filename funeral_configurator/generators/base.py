"""
Abstract base class for all procedural layout generators.

Input: StructuralConfig + PerformanceProfile + StyleInputs + random.Random
Output: list[PlacedInstance]

The random source is always passed in. Generators never touch the
module-level `random` functions, so a fixed seed gives a fixed layout.
"""

import logging
import math
import random
from abc import ABC, abstractmethod
from typing import Optional

from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs

logger = logging.getLogger(__name__)


class BaseGenerator(ABC):
    """All layout generators inherit from this."""

    # SceneDescriptor group this generator fills
    group: str = ""

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        """False → the assembler leaves the group empty without calling generate()."""
        return True

    @abstractmethod
    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        pass

    # --- Helper methods for all generators ---

    def place(self, x: float, y: float, z: float, scale: float = 1.0,
              color: str = "#ffffff", kind: Optional[str] = None) -> PlacedInstance:
        """Build a PlacedInstance, rounding to millimeters so snapshots stay readable."""
        return PlacedInstance(
            position=(round(x, 3), round(y, 3), round(z, 3)),
            scale=round(scale, 3),
            color=color,
            kind=kind,
        )

    def scaled_count(self, base: int, density: float, minimum: int = 0) -> int:
        """Density-scaled instance count. Floors, then applies the minimum."""
        return max(minimum, int(math.floor(base * density)))

    def jitter(self, rng: random.Random, amount: float) -> float:
        """Uniform offset in [-amount, amount)."""
        return (rng.random() - 0.5) * 2.0 * amount

    def altar_front_z(self, structure: StructuralConfig) -> float:
        """Z of the front face of the lowest altar tier."""
        if not structure.altar_tiers:
            return structure.altar_z
        return structure.altar_z + structure.altar_tiers[0].depth / 2.0
