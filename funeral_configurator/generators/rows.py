"""
Row generators — wreath stands along the side walls and candles along the altar.

Both are simple 1-D distributions at fixed spacing; neither uses randomness.
"""

import random

from ..palette import FLOWER_COLORS, IVORY, WHITE
from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs
from .base import BaseGenerator

WALL_INSET = 2.0         # stands sit this far in from the side walls
WREATH_SPACING = 2.0     # between consecutive pairs, front-to-back
WREATH_START = 1.5       # first pair, in front of the altar center

CANDLES_PER_TIER = 2
CANDLE_SPACING = 0.35
CANDLE_EDGE_INSET = 0.1


class WreathRowGenerator(BaseGenerator):
    """Alternating left/right stands; color alternates main / white."""

    group = "wreaths"

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        return structure.has_wreaths and structure.wreath_pairs > 0

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        main = FLOWER_COLORS[style.accent_color]["main"]
        x_offset = structure.width / 2.0 - WALL_INSET

        instances = []
        for i in range(structure.wreath_pairs * 2):
            side = -1 if i % 2 == 0 else 1
            pair = i // 2
            z = structure.altar_z + WREATH_START + pair * WREATH_SPACING
            color = main if i % 2 == 0 else WHITE
            instances.append(self.place(side * x_offset, 0.0, z, scale=1.0, color=color))
        return instances


class CandleRowGenerator(BaseGenerator):
    """Candles centered along the front edge of the lowest altar tier."""

    group = "candles"

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        return structure.has_altar and structure.has_religious_items

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        count = CANDLES_PER_TIER * structure.altar_tier_count
        base = structure.altar_tiers[0]
        y = base.y + base.height / 2.0
        z = self.altar_front_z(structure) - CANDLE_EDGE_INSET
        accent = FLOWER_COLORS[style.accent_color]["accent"]

        instances = []
        for i in range(count):
            x = (i - (count - 1) / 2.0) * CANDLE_SPACING
            color = IVORY if i % 2 == 0 else accent
            instances.append(self.place(x, y, z, scale=1.0, color=color))
        return instances
