"""Biome color profiles: named color tables over the biome registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType

from seed_atlas.biomes import BiomeRegistry, default_registry
from seed_atlas.models import BiomeColor

from .serialization import CRLF, serialize_color_map, write_text

logger = logging.getLogger(__name__)

UNNAMED_PROFILE = "<unnamed>"
DEFAULT_PROFILE_NAME = "default"


def _coerce_color(value: BiomeColor | Mapping[str, int] | tuple[int, int, int]) -> BiomeColor:
    if isinstance(value, BiomeColor):
        return value
    if isinstance(value, Mapping):
        return BiomeColor(value["r"], value["g"], value["b"])
    return BiomeColor(*value)


def _resolve(registry: BiomeRegistry | None) -> BiomeRegistry:
    return default_registry() if registry is None else registry


@dataclass(frozen=True, slots=True)
class BiomeProfile:
    """A named mapping from biome names to map colors.

    Every field may be missing, as happens for profiles read from incomplete files.
    Such a profile fails :meth:`validate` but still resolves colors, falling back
    to registry defaults. The color map is copied into a read-only mapping.
    """

    name: str | None = None
    shortcut: str | None = None
    color_map: Mapping[str, BiomeColor] | None = None

    def __post_init__(self) -> None:
        if self.color_map is not None:
            colors = {key: _coerce_color(value) for key, value in self.color_map.items()}
            object.__setattr__(self, "color_map", MappingProxyType(colors))

    def __hash__(self) -> int:
        # The read-only color map is unhashable; equal profiles still share name and shortcut.
        return hash((self.name, self.shortcut))

    @property
    def display_name(self) -> str:
        return UNNAMED_PROFILE if self.name is None else self.name

    def with_color(self, biome_name: str, color: BiomeColor) -> BiomeProfile:
        """Return a copy with ``biome_name`` mapped to ``color``."""
        colors = dict(self.color_map or {})
        colors[biome_name] = color
        return replace(self, color_map=colors)

    def validate(self, registry: BiomeRegistry | None = None) -> bool:
        """Check required fields; unknown biome keys are logged but do not fail validation."""
        if self.color_map is None:
            logger.info("biome_profile_missing_color_map", extra={"profile_name": self.name})
            return False

        if self.name is None:
            logger.info("biome_profile_missing_name")
            return False

        registry = _resolve(registry)
        for biome_name in self.color_map:
            if not registry.exists(biome_name):
                logger.info(
                    "biome_profile_unknown_biome",
                    extra={"profile_name": self.name, "biome": biome_name},
                )
        return True

    def create_color_array(self, registry: BiomeRegistry | None = None) -> list[BiomeColor]:
        """Resolve one color per registry biome, indexed by ``biome.index``."""
        colors = self.color_map or {}
        return [colors.get(biome.name, biome.default_color) for biome in _resolve(registry)]

    def serialize(self, registry: BiomeRegistry | None = None, *, newline: str = CRLF) -> str:
        return serialize_color_map(
            self.name,
            self.color_map,
            _resolve(registry),
            newline=newline,
        )

    def save(
        self,
        path: str | Path,
        *,
        registry: BiomeRegistry | None = None,
        newline: str = CRLF,
        atomic: bool = True,
    ) -> bool:
        """Write the profile to ``path``; returns False instead of raising on write errors."""
        document = self.serialize(registry, newline=newline)
        try:
            write_text(path, document, atomic=atomic)
        except (OSError, UnicodeError):
            logger.exception(
                "biome_profile_save_failed",
                extra={"profile_name": self.name, "path": str(path)},
            )
            return False

        logger.debug("biome_profile_saved", extra={"profile_name": self.name, "path": str(path)})
        return True


# Built once at import; the import lock makes this the only instance.
_DEFAULT_PROFILE = BiomeProfile(
    name=DEFAULT_PROFILE_NAME,
    shortcut=None,
    color_map={biome.name: biome.default_color for biome in default_registry()},
)


def get_default_profile() -> BiomeProfile:
    """Return the shared read-only profile holding every registry default color."""
    return _DEFAULT_PROFILE
