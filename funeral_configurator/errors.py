"""
Error taxonomy for the configurator core.

Catalog lookups (tier, structural class) are wiring bugs: fatal, never retried.
GeneratorFailure is the only recoverable error: the assembler swaps in an
empty group and keeps going.
"""


class ConfiguratorError(Exception):
    """Base class for all configurator errors."""


class UnknownTierError(ConfiguratorError, KeyError):
    def __init__(self, tier_id):
        self.tier_id = tier_id
        super().__init__(f"Unknown tier: {tier_id!r}")

    def __str__(self):
        return self.args[0]


class UnknownStructuralClassError(ConfiguratorError, ValueError):
    def __init__(self, value, field: str = "structural_class"):
        self.value = value
        self.field = field
        super().__init__(f"Unknown {field}: {value!r}")


class GeneratorFailure(ConfiguratorError):
    """A single decorative generator raised or emitted invalid instances."""

    def __init__(self, group: str, reason: str):
        self.group = group
        self.reason = reason
        super().__init__(f"Generator '{group}' failed: {reason}")
