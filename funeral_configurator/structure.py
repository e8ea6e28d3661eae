"""
Structural Configuration Resolver.

(structural_class, theme) → StructuralConfig. Pure lookup plus a little
arithmetic. The structural class fixes every dimension, count and feature
flag; the theme only picks cosmetic colors.
"""

from .errors import UnknownStructuralClassError
from .models import StructuralClass, Theme
from .schemas import AltarTier, StructuralConfig


# One record per structural class. Dimensions in meters.
STRUCTURE_TABLE = {
    StructuralClass.NONE: {
        "width": 6.0, "depth": 5.0, "height": 3.0,
        "altar_tier_count": 0, "altar_width": 0.0, "altar_height": 0.0,
        "seat_rows": 1, "seats_per_row": 4,
        "first_row_z": 1.5,
        "wreath_pairs": 0,
        "has_religious_items": False,
        "has_reception": False,
    },
    StructuralClass.SMALL: {
        "width": 10.0, "depth": 8.0, "height": 4.0,
        "altar_tier_count": 2, "altar_width": 2.5, "altar_height": 2.0,
        "seat_rows": 2, "seats_per_row": 6,
        "first_row_z": 2.0,
        "wreath_pairs": 0,
        "has_religious_items": True,
        "has_reception": True,
    },
    StructuralClass.MEDIUM: {
        "width": 12.0, "depth": 10.0, "height": 4.5,
        "altar_tier_count": 3, "altar_width": 3.2, "altar_height": 2.4,
        "seat_rows": 3, "seats_per_row": 8,
        "first_row_z": 2.0,
        "wreath_pairs": 1,
        "has_religious_items": True,
        "has_reception": True,
    },
    StructuralClass.LARGE: {
        "width": 14.0, "depth": 12.0, "height": 5.0,
        "altar_tier_count": 4, "altar_width": 4.0, "altar_height": 2.8,
        "seat_rows": 4, "seats_per_row": 8,
        "first_row_z": 2.0,
        "wreath_pairs": 2,
        "has_religious_items": True,
        "has_reception": True,
    },
}

# Stepped white-wood altar, widest tier first. Widths are fractions of the
# widest tier so the stack scales with altar_width.
ALTAR_TIER_PROFILE = [
    {"width": 1.0, "height": 0.4, "depth": 1.5, "y": 0.2},
    {"width": 0.875, "height": 0.35, "depth": 1.3, "y": 0.6},
    {"width": 0.75, "height": 0.3, "depth": 1.1, "y": 0.95},
    {"width": 0.5, "height": 0.25, "depth": 0.8, "y": 1.25},
]

# Shared seating geometry
SEAT_SPACING = 0.6
ROW_SPACING = 0.9
AISLE_HALF_WIDTH = 0.5

# Cosmetic colors per theme (venues with an altar)
THEME_COLORS = {
    Theme.TRADITIONAL: {
        "back_wall_color": "#2a2035",
        "drape_color": "#1a1525",
        "altar_color": "#dcb47e",
        "carpet_color": "#8b0000",
    },
    Theme.MODERN: {
        "back_wall_color": "#2a2a35",
        "drape_color": "#1a1a2e",
        "altar_color": "#ffffff",
        "carpet_color": "#4a0040",
    },
    Theme.NATURE: {
        "back_wall_color": "#2f3a2a",
        "drape_color": "#1f2a1c",
        "altar_color": "#f5e6d3",
        "carpet_color": "#3d5229",
    },
}

# Bare room used for direct cremation, any theme
PLAIN_ROOM_COLORS = {
    "wall_color": "#f5f5f5",
    "back_wall_color": "#e8e8e8",
    "floor_color": "#c0b0a0",
}

HALL_WALL_COLOR = "#f8f4f0"
HALL_FLOOR_COLOR = "#4a3c32"


def _coerce(enum_cls, value, field: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownStructuralClassError(value, field=field) from None


def _altar_tiers(count: int, altar_width: float) -> list[AltarTier]:
    return [
        AltarTier(
            width=round(altar_width * p["width"], 3),
            height=p["height"],
            depth=p["depth"],
            y=p["y"],
        )
        for p in ALTAR_TIER_PROFILE[:count]
    ]


def resolve_structure(structural_class, theme) -> StructuralConfig:
    """
    Resolve venue geometry for a structural class and theme.

    Raises:
        UnknownStructuralClassError: structural_class (or theme) is outside
            its declared domain. Never defaults silently.
    """
    structural_class = _coerce(StructuralClass, structural_class, "structural_class")
    theme = _coerce(Theme, theme, "theme")

    record = STRUCTURE_TABLE[structural_class]
    tier_count = record["altar_tier_count"]
    has_altar = tier_count > 0

    if has_altar:
        colors = {
            "wall_color": HALL_WALL_COLOR,
            "floor_color": HALL_FLOOR_COLOR,
            **THEME_COLORS[theme],
        }
    else:
        colors = dict(PLAIN_ROOM_COLORS)

    return StructuralConfig(
        structural_class=structural_class,
        theme=theme,
        width=record["width"],
        depth=record["depth"],
        height=record["height"],
        has_altar=has_altar,
        altar_tier_count=tier_count,
        altar_width=record["altar_width"],
        altar_height=record["altar_height"],
        altar_tiers=_altar_tiers(tier_count, record["altar_width"]),
        # Altar sits 1.5 m in front of the back wall
        altar_z=-record["depth"] / 2 + 1.5 if has_altar else 0.0,
        seat_rows=record["seat_rows"],
        seats_per_row=record["seats_per_row"],
        aisle_half_width=AISLE_HALF_WIDTH,
        seat_spacing=SEAT_SPACING,
        row_spacing=ROW_SPACING,
        first_row_z=record["first_row_z"],
        has_wreaths=record["wreath_pairs"] > 0,
        wreath_pairs=record["wreath_pairs"],
        has_religious_items=record["has_religious_items"],
        has_reception=record["has_reception"],
        **colors,
    )
