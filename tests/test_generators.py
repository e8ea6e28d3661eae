"""
Procedural layout generator tests.

Tests:
1.  Flower mass count depends on volume × density only, never theme
2.  Flower mass minimum count
3.  Lower density → fewer flowers
4.  Flower wall never places into the portrait zone, one flower per kept cell
5.  Seating count, aisle clearance, no duplicate seats
6.  Wreath stands come in mirrored pairs
7.  Candles centered on the altar front
8.  Fixed seed → identical output
9.  Registry lookups
"""

import random

import pytest

from funeral_configurator.generators.base import BaseGenerator
from funeral_configurator.generators.flower_mass import BASE_COUNTS, FlowerMassGenerator
from funeral_configurator.generators.flower_wall import (
    PORTRAIT_ZONE,
    FlowerWallGenerator,
    grid_dimensions,
    wall_cells,
)
from funeral_configurator.generators.registry import get_generator, has_generator, list_generators
from funeral_configurator.generators.rows import CandleRowGenerator, WreathRowGenerator
from funeral_configurator.generators.seating import SEAT_WIDTH, SeatingGenerator
from funeral_configurator.models import (
    SCENE_GROUPS,
    AccentColor,
    DecorationVolume,
    MaterialGrade,
    StructuralClass,
    Theme,
)
from funeral_configurator.schemas import StyleInputs
from funeral_configurator.structure import resolve_structure


def _style(theme=Theme.MODERN, volume=DecorationVolume.STANDARD):
    return StyleInputs(
        theme=theme,
        accent_color=AccentColor.PINK,
        material_grade=MaterialGrade.CLOTH,
        decoration_volume=volume,
    )


def _large(theme=Theme.MODERN):
    return resolve_structure(StructuralClass.LARGE, theme)


# --- Flower mass ---

@pytest.mark.parametrize("theme", list(Theme))
def test_flower_mass_count_ignores_theme(theme, high_profile, rng):
    flowers = FlowerMassGenerator().generate(_large(theme), high_profile, _style(theme), rng)
    assert len(flowers) == BASE_COUNTS[DecorationVolume.STANDARD]


def test_flower_mass_minimum(high_profile):
    thin = high_profile.model_copy(update={"density_multiplier": 0.01})
    count = FlowerMassGenerator().instance_count(DecorationVolume.MINIMAL, thin)
    assert count == 200


def test_flower_mass_scales_with_density(high_profile, low_profile):
    gen = FlowerMassGenerator()
    high = gen.generate(_large(), high_profile, _style(volume=DecorationVolume.LAVISH),
                        random.Random(1))
    low = gen.generate(_large(), low_profile, _style(volume=DecorationVolume.LAVISH),
                       random.Random(1))
    assert len(low) < len(high)
    assert len(low) == 1800


def test_flower_mass_skipped_without_altar(high_profile):
    bare = resolve_structure(StructuralClass.NONE, Theme.MODERN)
    assert not FlowerMassGenerator().applies(bare, high_profile)


@pytest.mark.parametrize("theme", list(Theme))
def test_flower_mass_instances_valid(theme, medium_profile, rng):
    for flower in FlowerMassGenerator().generate(_large(theme), medium_profile,
                                                 _style(theme), rng):
        assert flower.scale > 0
        assert flower.color.startswith("#") and len(flower.color) == 7


# --- Flower wall ---

@pytest.mark.parametrize("structural_class", [StructuralClass.SMALL, StructuralClass.MEDIUM,
                                              StructuralClass.LARGE])
def test_flower_wall_respects_exclusion(structural_class, high_profile, rng):
    structure = resolve_structure(structural_class, Theme.TRADITIONAL)
    width, height = structure.altar_width, structure.altar_height
    cols, rows = grid_dimensions(width, height)
    cell_w, cell_h = width / cols, height / rows

    flowers = FlowerWallGenerator().generate(structure, high_profile, _style(), rng)

    kept = [c for c in wall_cells(width, height) if not PORTRAIT_ZONE.contains(c.u, c.v)]
    assert len(flowers) == len(kept)

    seen = set()
    for flower in flowers:
        x, y, _ = flower.position
        col = round((x + width / 2) / cell_w - 0.5)
        row = round(y / cell_h - 0.5)
        u, v = (col + 0.5) / cols, (row + 0.5) / rows
        assert not PORTRAIT_ZONE.contains(u, v)
        seen.add((col, row))
    assert len(seen) == len(flowers)


def test_flower_wall_has_a_hole_on_large_altar():
    cells = wall_cells(4.0, 2.8)
    assert any(PORTRAIT_ZONE.contains(c.u, c.v) for c in cells)


# --- Seating ---

@pytest.mark.parametrize("structural_class", list(StructuralClass))
def test_seating_grid(structural_class, high_profile, rng):
    structure = resolve_structure(structural_class, Theme.MODERN)
    seats = SeatingGenerator().generate(structure, high_profile, _style(), rng)

    assert len(seats) == structure.seat_count
    for seat in seats:
        assert abs(seat.position[0]) - SEAT_WIDTH / 2 >= structure.aisle_half_width - 1e-9
    assert len({s.position for s in seats}) == len(seats)


def test_seating_rows_are_evenly_spaced(high_profile, rng):
    structure = _large()
    seats = SeatingGenerator().generate(structure, high_profile, _style(), rng)
    zs = sorted({s.position[2] for s in seats})
    assert len(zs) == structure.seat_rows
    gaps = {round(b - a, 3) for a, b in zip(zs, zs[1:])}
    assert gaps == {structure.row_spacing}


# --- Rows ---

def test_wreaths_mirrored(high_profile, rng):
    structure = _large()
    wreaths = WreathRowGenerator().generate(structure, high_profile, _style(), rng)
    assert len(wreaths) == 2 * structure.wreath_pairs
    for left, right in zip(wreaths[0::2], wreaths[1::2]):
        assert left.position[0] == -right.position[0]
        assert left.position[2] == right.position[2]


def test_wreaths_skipped_for_small_venue(high_profile):
    small = resolve_structure(StructuralClass.SMALL, Theme.MODERN)
    assert not WreathRowGenerator().applies(small, high_profile)


def test_candles_centered(high_profile, rng):
    structure = _large()
    candles = CandleRowGenerator().generate(structure, high_profile, _style(), rng)
    assert len(candles) == 2 * structure.altar_tier_count
    assert sum(c.position[0] for c in candles) == pytest.approx(0.0, abs=1e-6)


# --- Determinism ---

@pytest.mark.parametrize("group", SCENE_GROUPS)
def test_fixed_seed_is_reproducible(group, high_profile):
    gen = get_generator(group)
    structure = _large(Theme.NATURE)
    first = gen.generate(structure, high_profile, _style(Theme.NATURE), random.Random("7:x"))
    second = gen.generate(structure, high_profile, _style(Theme.NATURE), random.Random("7:x"))
    assert first == second


# --- Registry / base ---

def test_registry_covers_every_group():
    assert set(list_generators()) == set(SCENE_GROUPS)
    assert has_generator("seating")
    with pytest.raises(ValueError):
        get_generator("fireworks")


def test_place_rounds_to_millimeters():
    class Dummy(BaseGenerator):
        group = "dummy"

        def generate(self, structure, profile, style, rng):
            return []

    inst = Dummy().place(0.12345, 1.00049, -2.3333, scale=0.77777, color="#000000")
    assert inst.position == (0.123, 1.0, -2.333)
    assert inst.scale == 0.778
    assert Dummy().scaled_count(5000, 0.4, minimum=200) == 2000


def test_seating_clears_aisle_with_tight_spacing(high_profile, rng):
    structure = _large().model_copy(update={"seat_spacing": 0.3})
    seats = SeatingGenerator().generate(structure, high_profile, _style(), rng)
    for seat in seats:
        assert abs(seat.position[0]) - SEAT_WIDTH / 2 >= structure.aisle_half_width - 1e-9
