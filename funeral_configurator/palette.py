# Hex colors used across the scene, plus interpolation helpers.

from .models import AccentColor, MaterialGrade

WHITE = "#ffffff"
GREENERY = "#2e8b57"
LEAF_GREEN = "#228b22"
IVORY = "#f5f5dc"
WARM_LIGHT = "#fff0e0"
DUST = "#ffffff"

# main = dominant flower color, accent = secondary highlight
FLOWER_COLORS = {
    AccentColor.WHITE: {"main": "#ffffff", "accent": "#f0f0f0"},
    AccentColor.PINK: {"main": "#ffb7c5", "accent": "#ff91a4"},
    AccentColor.PURPLE: {"main": "#d8bfd8", "accent": "#dda0dd"},
    AccentColor.YELLOW: {"main": "#fffacd", "accent": "#ffd700"},
}

COFFIN_COLORS = {
    MaterialGrade.STANDARD: "#8b7355",
    MaterialGrade.CLOTH: "#f8f8f8",
    MaterialGrade.LUXURY: "#3d2817",
}


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    def channel(c):
        return max(0, min(255, int(round(c))))
    return f"#{channel(r):02x}{channel(g):02x}{channel(b):02x}"


def lerp_color(a: str, b: str, t: float) -> str:
    """Linear blend from a (t=0) to b (t=1). t is clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    ar, ag, ab = hex_to_rgb(a)
    br, bg, bb = hex_to_rgb(b)
    return rgb_to_hex(ar + (br - ar) * t, ag + (bg - ag) * t, ab + (bb - ab) * t)
