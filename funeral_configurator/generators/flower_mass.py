"""
Flower-mass generator — the dense floral heap on the altar.

Three shape modes, picked by theme:
- mountain (traditional): layered heap, parabolic silhouette, banded colors
- wave (modern): flowing sine/cosine ridge, white → accent gradient
- scatter (nature): polar-random meadow, greenery mixed with the main color

Shapes are computed in a reference frame sized for a 12 m altar centered
at z = -2, then scaled onto the actual altar. Instance count depends only
on decoration volume and the performance density, never on the theme.
"""

import math
import random

from ..config import settings
from ..models import DecorationVolume, FlowerMassMode, Theme
from ..palette import FLOWER_COLORS, GREENERY, WHITE, lerp_color
from ..schemas import PerformanceProfile, PlacedInstance, StructuralConfig, StyleInputs
from .base import BaseGenerator

BASE_COUNTS = {
    DecorationVolume.MINIMAL: 3000,
    DecorationVolume.STANDARD: 5000,
    DecorationVolume.LAVISH: 9000,
}

MODE_BY_THEME = {
    Theme.TRADITIONAL: FlowerMassMode.MOUNTAIN,
    Theme.MODERN: FlowerMassMode.WAVE,
    Theme.NATURE: FlowerMassMode.SCATTER,
}

REFERENCE_ALTAR_WIDTH = 12.0
REFERENCE_ALTAR_Z = -2.0

# Per-mode shape constants, reference-frame units
MASS_STYLES = {
    FlowerMassMode.MOUNTAIN: {
        "layers": 20,
        "span": 14.0,
        "peak": 2.8,
        "curvature": 0.08,
        "layer_narrowing": 0.02,   # span shrinks 2% per layer
        "layer_drop": 0.03,        # peak shrinks 3% per layer
        "layer_depth": 0.15,
        "lift": 0.5,
        "lift_jitter": 0.3,
        "accent_band": 2.0,        # |x| below this → accent color
        "base_band": 3.5,          # |x| below this → main color, beyond → white
    },
    FlowerMassMode.WAVE: {
        "span": 16.0,
        "depth_amplitude": 1.5,
        "depth_frequency": 0.4,
        "height_frequency": 0.3,
        "lift": 0.5,
        "taper_from": 3.0,         # right side beyond this x is lowered
        "taper": 0.7,
        "blend_chance": 0.2,
        "blend": 0.5,
    },
    FlowerMassMode.SCATTER: {
        "radius": 7.0,
        "depth_squash": 0.5,
        "lift": 0.5,
        "tall_chance": 0.1,
        "tall_lift": 1.0,
        "greenery_chance": 0.4,
    },
}


class FlowerMassGenerator(BaseGenerator):

    group = "flower_mass"

    def applies(self, structure: StructuralConfig, profile: PerformanceProfile) -> bool:
        return structure.has_altar

    def instance_count(self, volume: DecorationVolume, profile: PerformanceProfile) -> int:
        return self.scaled_count(BASE_COUNTS[volume], profile.density_multiplier,
                                 minimum=settings.MIN_FLOWER_COUNT)

    def generate(self, structure: StructuralConfig, profile: PerformanceProfile,
                 style: StyleInputs, rng: random.Random) -> list[PlacedInstance]:
        count = self.instance_count(style.decoration_volume, profile)
        mode = MODE_BY_THEME[style.theme]
        colors = FLOWER_COLORS[style.accent_color]

        shape = {
            FlowerMassMode.MOUNTAIN: self._mountain,
            FlowerMassMode.WAVE: self._wave,
            FlowerMassMode.SCATTER: self._scatter,
        }[mode]

        k = structure.altar_width / REFERENCE_ALTAR_WIDTH
        front_z = self.altar_front_z(structure)

        instances = []
        for i in range(count):
            x, y, z, color = shape(i, count, colors, rng)
            instances.append(self.place(
                x * k,
                y * k,
                front_z + (z - REFERENCE_ALTAR_Z) * k,
                scale=0.6 + rng.random() * 0.8,
                color=color,
            ))
        return instances

    def _mountain(self, i: int, count: int, colors: dict, rng: random.Random):
        s = MASS_STYLES[FlowerMassMode.MOUNTAIN]
        layers = s["layers"]
        u = i / count
        layer = min(int(u * layers), layers - 1)
        spread = (u * layers) % 1.0

        width = s["span"] * (1.0 - layer * s["layer_narrowing"])
        x = (spread - 0.5) * width
        h = max(0.0, s["peak"] - x * x * s["curvature"])
        z = REFERENCE_ALTAR_Z - layer * s["layer_depth"]
        y = h * (1.0 - layer * s["layer_drop"]) + s["lift"] + rng.random() * s["lift_jitter"]

        offset = abs(x)
        if offset < s["accent_band"]:
            color = colors["accent"]
        elif offset < s["base_band"]:
            color = colors["main"]
        else:
            color = WHITE
        return x, y, z, color

    def _wave(self, i: int, count: int, colors: dict, rng: random.Random):
        s = MASS_STYLES[FlowerMassMode.WAVE]
        half = s["span"] / 2.0
        x = (rng.random() - 0.5) * s["span"]
        z = (math.sin(x * s["depth_frequency"]) * s["depth_amplitude"]
             + REFERENCE_ALTAR_Z + rng.random() * 0.5)
        y = (math.cos(x * s["height_frequency"]) + 1.0) + s["lift"] + rng.random() * 0.5
        if x > s["taper_from"]:
            y *= s["taper"]

        color = lerp_color(WHITE, colors["main"], (x + half) / s["span"])
        if rng.random() < s["blend_chance"]:
            color = lerp_color(color, colors["accent"], s["blend"])
        return x, y, z, color

    def _scatter(self, i: int, count: int, colors: dict, rng: random.Random):
        s = MASS_STYLES[FlowerMassMode.SCATTER]
        # Uniform radius → density falls off as 1/r
        r = rng.random() * s["radius"]
        theta = rng.random() * math.pi * 2.0
        x = r * math.cos(theta)
        z = r * math.sin(theta) * s["depth_squash"] + REFERENCE_ALTAR_Z
        y = s["lift"] + rng.random() * 0.5
        if rng.random() < s["tall_chance"]:
            y += s["tall_lift"]

        color = GREENERY if rng.random() < s["greenery_chance"] else colors["main"]
        return x, y, z, color
