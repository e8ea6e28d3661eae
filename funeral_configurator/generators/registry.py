"""
Generator registry — maps SceneDescriptor group names to generator classes.
"""

from .ambient import AuxiliaryLightGenerator, ParticleGenerator
from .base import BaseGenerator
from .fixtures import FixturesGenerator
from .flower_mass import FlowerMassGenerator
from .flower_wall import FlowerWallGenerator
from .rows import CandleRowGenerator, WreathRowGenerator
from .seating import SeatingGenerator

GENERATOR_REGISTRY: dict[str, type] = {
    "flower_mass": FlowerMassGenerator,
    "flower_wall": FlowerWallGenerator,
    "seating": SeatingGenerator,
    "wreaths": WreathRowGenerator,
    "candles": CandleRowGenerator,
    "particles": ParticleGenerator,
    "auxiliary_lights": AuxiliaryLightGenerator,
    "props": FixturesGenerator,
}


def get_generator(group: str) -> BaseGenerator:
    """Returns an instance of the generator for a group, or raises ValueError."""
    if group not in GENERATOR_REGISTRY:
        raise ValueError(
            f"No generator registered for group: {group}. "
            f"Available: {list(GENERATOR_REGISTRY.keys())}"
        )
    return GENERATOR_REGISTRY[group]()


def has_generator(group: str) -> bool:
    return group in GENERATOR_REGISTRY


def list_generators() -> list[str]:
    return list(GENERATOR_REGISTRY.keys())


def default_generators() -> list[BaseGenerator]:
    """One fresh instance per registered group, in registry order."""
    return [cls() for cls in GENERATOR_REGISTRY.values()]
