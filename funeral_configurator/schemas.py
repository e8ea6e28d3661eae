from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import (
    AccentColor,
    DecorationVolume,
    HearseType,
    HospitalityGrade,
    MaterialGrade,
    MONK_COUNTS,
    PerformanceTier,
    PosthumousName,
    ServiceAddOn,
    StructuralClass,
    Theme,
)


# --- Catalog ---

class TierDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    base_price: int = Field(ge=0)
    structural_class: StructuralClass
    max_attendees: int = Field(ge=0)
    features: Tuple[str, ...] = ()


# --- User selections ---

class Selections(BaseModel):
    """Session-owned user state. Every field has a default so pricing is total."""

    tier_id: str = "plan60"
    theme: Theme = Theme.MODERN
    accent_color: AccentColor = AccentColor.PINK
    material_grade: MaterialGrade = MaterialGrade.CLOTH
    decoration_volume: DecorationVolume = DecorationVolume.STANDARD
    service_add_ons: Set[ServiceAddOn] = Field(default_factory=set)
    attendee_count: int = Field(default=30, ge=0)
    catering: HospitalityGrade = HospitalityGrade.STANDARD
    return_gift: HospitalityGrade = HospitalityGrade.STANDARD
    monk_count: int = 1
    posthumous_name: PosthumousName = PosthumousName.SHINJI
    hearse: HearseType = HearseType.VAN

    @field_validator("monk_count")
    @classmethod
    def _monk_count_in_range(cls, value: int) -> int:
        if value not in MONK_COUNTS:
            raise ValueError(f"monk_count must be one of {MONK_COUNTS}")
        return value


class SelectionsUpdate(BaseModel):
    """Partial update — unset fields keep their current value."""

    tier_id: Optional[str] = None
    theme: Optional[Theme] = None
    accent_color: Optional[AccentColor] = None
    material_grade: Optional[MaterialGrade] = None
    decoration_volume: Optional[DecorationVolume] = None
    service_add_ons: Optional[Set[ServiceAddOn]] = None
    attendee_count: Optional[int] = Field(default=None, ge=0)
    catering: Optional[HospitalityGrade] = None
    return_gift: Optional[HospitalityGrade] = None
    monk_count: Optional[int] = None
    posthumous_name: Optional[PosthumousName] = None
    hearse: Optional[HearseType] = None

    @field_validator("monk_count")
    @classmethod
    def _monk_count_in_range(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value not in MONK_COUNTS:
            raise ValueError(f"monk_count must be one of {MONK_COUNTS}")
        return value


# --- Pricing ---

class PriceLineItem(BaseModel):
    code: str
    label: str
    amount: int


class PriceBreakdown(BaseModel):
    tier_id: str
    line_items: List[PriceLineItem]
    total: int = Field(ge=0)


# --- Performance ---

class EnvironmentSignals(BaseModel):
    """Best-effort capability signals. Every field is optional."""

    device_memory_gb: Optional[float] = None
    graphics_renderer: Optional[str] = None
    small_viewport: Optional[bool] = None


class PerformanceProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    tier_label: PerformanceTier
    density_multiplier: float = Field(gt=0, le=1)
    shadows_enabled: bool
    post_effects_enabled: bool
    max_auxiliary_lights: int = Field(ge=0)
    particles_enabled: bool = True
    animations_enabled: bool = True
    antialias: bool = True
    shadow_map_size: int = 1024
    geometry_detail: float = 1.0
    pixel_ratio: float = 1.0


# --- Structure ---

class AltarTier(BaseModel):
    width: float
    height: float
    depth: float
    y: float


class StructuralConfig(BaseModel):
    structural_class: StructuralClass
    theme: Theme

    # Venue box
    width: float
    depth: float
    height: float

    # Altar
    has_altar: bool
    altar_tier_count: int = Field(ge=0, le=4)
    altar_width: float = 0.0
    altar_height: float = 0.0
    altar_tiers: List[AltarTier] = Field(default_factory=list)
    altar_z: float = 0.0

    # Seating
    seat_rows: int
    seats_per_row: int
    aisle_half_width: float
    seat_spacing: float
    row_spacing: float
    first_row_z: float

    # Decorative features
    has_wreaths: bool
    wreath_pairs: int = 0
    has_religious_items: bool
    has_reception: bool

    # Cosmetic palette (theme-dependent)
    wall_color: str
    back_wall_color: str
    drape_color: Optional[str] = None
    floor_color: str
    carpet_color: Optional[str] = None
    altar_color: Optional[str] = None

    @property
    def seat_count(self) -> int:
        return self.seat_rows * self.seats_per_row


# --- Layout output ---

class PlacedInstance(BaseModel):
    position: Tuple[float, float, float]
    scale: float
    color: str
    kind: Optional[str] = None  # only set in mixed groups (props)


class StyleInputs(BaseModel):
    """The subset of Selections that generators are allowed to see."""

    theme: Theme
    accent_color: AccentColor
    material_grade: MaterialGrade
    decoration_volume: DecorationVolume

    @classmethod
    def from_selections(cls, selections: Selections) -> "StyleInputs":
        return cls(
            theme=selections.theme,
            accent_color=selections.accent_color,
            material_grade=selections.material_grade,
            decoration_volume=selections.decoration_volume,
        )


class GeneratorFailureRecord(BaseModel):
    group: str
    reason: str


class RenderSettings(BaseModel):
    shadows_enabled: bool
    post_effects_enabled: bool
    shadow_map_size: int
    antialias: bool
    pixel_ratio: float
    animations_enabled: bool


class SceneDescriptor(BaseModel):
    tier_id: str
    performance_tier: PerformanceTier
    seed: int
    structure: StructuralConfig
    groups: Dict[str, List[PlacedInstance]]
    render_settings: RenderSettings
    failures: List[GeneratorFailureRecord] = Field(default_factory=list)

    def group(self, name: str) -> List[PlacedInstance]:
        return self.groups.get(name, [])
