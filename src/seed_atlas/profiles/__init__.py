"""Biome color profile boundaries."""

from .profile import DEFAULT_PROFILE_NAME, UNNAMED_PROFILE, BiomeProfile, get_default_profile
from .serialization import serialize_color_map, write_text

__all__ = [
    "BiomeProfile",
    "DEFAULT_PROFILE_NAME",
    "UNNAMED_PROFILE",
    "get_default_profile",
    "serialize_color_map",
    "write_text",
]
