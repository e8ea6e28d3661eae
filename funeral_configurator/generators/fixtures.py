"""
Fixed props — one instance per piece of furniture, tagged with `kind`.

Coffin (colored by material grade), portrait, incense stand, reception desk,
and the small bouquet used in the bare direct-cremation room.
"""

import random

from ..palette import COFFIN_COLORS, WHITE
from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs
from .base import BaseGenerator

PORTRAIT_COLOR = "#1a1a1a"
INCENSE_STAND_COLOR = "#2c1810"
RECEPTION_COLOR = "#f0e8e0"


class FixturesGenerator(BaseGenerator):

    group = "props"

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        coffin_color = COFFIN_COLORS[style.material_grade]
        props = []

        if structure.has_altar:
            props.append(self.place(0.0, 0.4, structure.altar_z + 1.5,
                                    color=coffin_color, kind="coffin"))
            props.append(self.place(0.0, structure.altar_height - 0.3, structure.altar_z + 0.3,
                                    color=PORTRAIT_COLOR, kind="portrait"))
        else:
            # Coffin on a plain trestle, small bouquet beside it
            props.append(self.place(0.0, 0.5, -0.5, color=coffin_color, kind="coffin"))
            for i in range(3):
                props.append(self.place(0.6 + (i - 1) * 0.06, 0.4, 0.0,
                                        color=WHITE, kind="bouquet"))

        if structure.has_religious_items:
            props.append(self.place(0.0, 0.0, structure.altar_z + 2.5,
                                    color=INCENSE_STAND_COLOR, kind="incense_stand"))

        if structure.has_reception:
            props.append(self.place(structure.width / 2.0 - 1.5, 0.0, structure.depth / 2.0 - 1.0,
                                    color=RECEPTION_COLOR, kind="reception"))
        return props
