"""World seed derivation and biome color profiles for seed-map tooling."""

__version__ = "0.1.0"
