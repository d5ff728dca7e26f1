"""Generate item loot filters from tiered item lists and switches."""

__version__ = "0.1.0"