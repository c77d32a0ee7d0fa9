"""Biome registry boundaries."""

from .registry import BiomeRegistry, BiomeRegistryError, UnknownBiomeError, default_registry

__all__ = ["BiomeRegistry", "BiomeRegistryError", "UnknownBiomeError", "default_registry"]
