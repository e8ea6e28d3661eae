import enum


# --- Option domains (user-facing selections) ---

class Theme(str, enum.Enum):
    TRADITIONAL = "traditional"
    MODERN = "modern"
    NATURE = "nature"


class AccentColor(str, enum.Enum):
    WHITE = "white"
    PINK = "pink"
    PURPLE = "purple"
    YELLOW = "yellow"


class MaterialGrade(str, enum.Enum):
    """Coffin finish."""
    STANDARD = "standard"
    CLOTH = "cloth"
    LUXURY = "luxury"


class DecorationVolume(str, enum.Enum):
    MINIMAL = "minimal"
    STANDARD = "standard"
    LAVISH = "lavish"


class HospitalityGrade(str, enum.Enum):
    """Shared grade scale for per-attendee catering and return gifts."""
    NONE = "none"
    SIMPLE = "simple"
    STANDARD = "standard"
    PREMIUM = "premium"


class PosthumousName(str, enum.Enum):
    NONE = "none"
    SHINJI = "shinji"
    KOJI = "koji"
    IN = "in"


class HearseType(str, enum.Enum):
    VAN = "van"
    WESTERN = "western"
    JAPANESE = "japanese"


class ServiceAddOn(str, enum.Enum):
    MAKEUP = "makeup"


# Monk count is an integer choice, not a string enum
MONK_COUNTS = (1, 2, 3)


# --- Derived domains ---

class StructuralClass(str, enum.Enum):
    NONE = "none"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class PerformanceTier(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FlowerMassMode(str, enum.Enum):
    MOUNTAIN = "mountain"
    WAVE = "wave"
    SCATTER = "scatter"


# Group names in the SceneDescriptor
# Altar-related groups are always empty when the venue has no altar.
SCENE_GROUPS = [
    "flower_mass",
    "flower_wall",
    "seating",
    "wreaths",
    "candles",
    "particles",
    "auxiliary_lights",
    "props",
]

ALTAR_GROUPS = ["flower_mass", "flower_wall", "candles"]
