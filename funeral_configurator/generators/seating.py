"""
Seating-grid generator.

rows × seats_per_row chairs facing the altar with a center aisle. Left and
right halves are laid out independently from the aisle edge outward, so the
aisle is exactly 2 × aisle_half_width wide whatever the seat count parity.
An odd seat goes to the right half.
"""

import random

from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs
from .base import BaseGenerator

SEAT_WIDTH = 0.45
CEREMONY_CHAIR_COLOR = "#1a1a1a"
FOLDING_CHAIR_COLOR = "#404040"


class SeatingGenerator(BaseGenerator):

    group = "seating"

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        left = structure.seats_per_row // 2
        right = structure.seats_per_row - left
        # Bare rooms get folding chairs
        color = CEREMONY_CHAIR_COLOR if structure.has_altar else FOLDING_CHAIR_COLOR
        # Chair edge never closer to the center line than the aisle half-width
        inner = structure.aisle_half_width + max(structure.seat_spacing, SEAT_WIDTH) / 2.0

        instances = []
        for row in range(structure.seat_rows):
            z = structure.first_row_z + row * structure.row_spacing
            for side, count in ((-1, left), (1, right)):
                for col in range(count):
                    x = side * (inner + col * structure.seat_spacing)
                    instances.append(self.place(x, 0.0, z, scale=1.0, color=color))
        return instances
