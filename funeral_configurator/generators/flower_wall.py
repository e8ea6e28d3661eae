"""
Flower-wall generator — the floral backdrop behind the altar.

Regular grid sized to fill the altar rectangle at a target flower size.
Cells whose normalized center falls inside the portrait exclusion zone are
skipped. Each kept cell gets a small jitter, bounded well inside the cell
so coverage stays complete.
"""

import math
import random
from typing import NamedTuple

from ..palette import FLOWER_COLORS, LEAF_GREEN, WHITE
from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs
from .base import BaseGenerator

TARGET_CELL_WIDTH = 0.35
TARGET_CELL_HEIGHT = 0.4
JITTER_FRACTION = 0.15      # of the cell size, per axis
DEPTH_JITTER = 0.025
ROW_SETBACK = 0.15          # each row leans back
WALL_OFFSET = 0.1           # behind the altar center line

GREEN_CHANCE = 0.15
WHITE_CHANCE = 0.25


class ExclusionZone(NamedTuple):
    """Rectangle in normalized wall coordinates (0..1 left→right, bottom→top)."""
    u_min: float
    u_max: float
    v_min: float
    v_max: float

    def contains(self, u: float, v: float) -> bool:
        return self.u_min <= u <= self.u_max and self.v_min <= v <= self.v_max


# Reserved for the portrait, upper middle of the wall
PORTRAIT_ZONE = ExclusionZone(u_min=0.38, u_max=0.62, v_min=0.55, v_max=0.95)


class WallCell(NamedTuple):
    col: int
    row: int
    u: float
    v: float


def grid_dimensions(width: float, height: float) -> tuple[int, int]:
    """(cols, rows) for a wall — at least one cell each way."""
    cols = max(1, int(math.floor(width / TARGET_CELL_WIDTH)))
    rows = max(1, int(math.floor(height / TARGET_CELL_HEIGHT)))
    return cols, rows


def wall_cells(width: float, height: float) -> list[WallCell]:
    """Every grid cell with its normalized center."""
    cols, rows = grid_dimensions(width, height)
    return [
        WallCell(col, row, (col + 0.5) / cols, (row + 0.5) / rows)
        for row in range(rows)
        for col in range(cols)
    ]


class FlowerWallGenerator(BaseGenerator):

    group = "flower_wall"

    def __init__(self, exclusion: ExclusionZone = PORTRAIT_ZONE):
        self.exclusion = exclusion

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        return structure.has_altar

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        width = structure.altar_width
        height = structure.altar_height
        cols, rows = grid_dimensions(width, height)
        cell_w = width / cols
        cell_h = height / rows
        main = FLOWER_COLORS[style.accent_color]["main"]
        wall_z = structure.altar_z - WALL_OFFSET

        instances = []
        for cell in wall_cells(width, height):
            if self.exclusion.contains(cell.u, cell.v):
                continue

            x = -width / 2.0 + (cell.col + 0.5) * cell_w
            y = (cell.row + 0.5) * cell_h
            x += self.jitter(rng, JITTER_FRACTION * cell_w)
            y += self.jitter(rng, JITTER_FRACTION * cell_h)
            z = wall_z - cell.row * ROW_SETBACK + self.jitter(rng, DEPTH_JITTER)

            roll = rng.random()
            if roll < GREEN_CHANCE:
                color = LEAF_GREEN
            elif roll < GREEN_CHANCE + WHITE_CHANCE:
                color = WHITE
            else:
                color = main

            instances.append(self.place(x, y, z, scale=1.0 + rng.random() * 0.67, color=color))
        return instances
