"""Index-ordered biome registry consumed by biome profiles and renderers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from seed_atlas.models import Biome, BiomeColor


class BiomeRegistryError(ValueError):
    """Raised when registry entries have duplicate names or non-dense indices."""


class UnknownBiomeError(KeyError):
    """Raised when looking up a biome name the registry does not know."""


# Classic biome ids 0-39 with the map colors used by seed-map viewers.
CLASSIC_BIOMES: tuple[tuple[str, tuple[int, int, int]], ...] = (
    ("Ocean", (0, 0, 112)),
    ("Plains", (141, 179, 96)),
    ("Desert", (250, 148, 24)),
    ("Extreme Hills", (96, 96, 96)),
    ("Forest", (5, 102, 33)),
    ("Taiga", (11, 102, 89)),
    ("Swampland", (7, 249, 178)),
    ("River", (0, 0, 255)),
    ("Hell", (255, 0, 0)),
    ("The End", (128, 128, 255)),
    ("Frozen Ocean", (144, 144, 160)),
    ("Frozen River", (160, 160, 255)),
    ("Ice Plains", (255, 255, 255)),
    ("Ice Mountains", (160, 160, 160)),
    ("Mushroom Island", (255, 0, 255)),
    ("Mushroom Island Shore", (160, 0, 255)),
    ("Beach", (250, 222, 85)),
    ("Desert Hills", (210, 95, 18)),
    ("Forest Hills", (34, 85, 28)),
    ("Taiga Hills", (22, 57, 51)),
    ("Extreme Hills Edge", (114, 120, 154)),
    ("Jungle", (83, 123, 9)),
    ("Jungle Hills", (44, 66, 5)),
    ("Jungle Edge", (98, 139, 23)),
    ("Deep Ocean", (0, 0, 48)),
    ("Stone Beach", (162, 162, 132)),
    ("Cold Beach", (250, 240, 192)),
    ("Birch Forest", (48, 116, 68)),
    ("Birch Forest Hills", (31, 95, 50)),
    ("Roofed Forest", (64, 81, 26)),
    ("Cold Taiga", (49, 85, 74)),
    ("Cold Taiga Hills", (36, 63, 54)),
    ("Mega Taiga", (89, 102, 81)),
    ("Mega Taiga Hills", (69, 79, 62)),
    ("Extreme Hills+", (80, 112, 80)),
    ("Savanna", (189, 178, 95)),
    ("Savanna Plateau", (167, 157, 100)),
    ("Mesa", (217, 69, 21)),
    ("Mesa Plateau F", (176, 151, 101)),
    ("Mesa Plateau", (202, 140, 101)),
)


class BiomeRegistry:
    """Immutable collection of biomes with stable dense indices ``0..n-1``."""

    def __init__(self, biomes: Iterable[Biome]) -> None:
        ordered = sorted(biomes, key=lambda biome: biome.index)
        by_name: dict[str, Biome] = {}
        for position, biome in enumerate(ordered):
            if biome.index != position:
                raise BiomeRegistryError(
                    f"Biome indices must be dense from 0; expected {position}, got {biome.index} ({biome.name})"
                )
            if biome.name in by_name:
                raise BiomeRegistryError(f"Duplicate biome name: {biome.name}")
            by_name[biome.name] = biome

        self._biomes: tuple[Biome, ...] = tuple(ordered)
        self._by_name = by_name

    @classmethod
    def from_colors(cls, entries: Iterable[tuple[str, tuple[int, int, int]]]) -> BiomeRegistry:
        """Build a registry from ``(name, (r, g, b))`` pairs, indexed in iteration order."""
        return cls(
            Biome(index=index, name=name, default_color=BiomeColor(*rgb))
            for index, (name, rgb) in enumerate(entries)
        )

    def __len__(self) -> int:
        return len(self._biomes)

    def __iter__(self) -> Iterator[Biome]:
        return iter(self._biomes)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def exists(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Biome:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownBiomeError(name) from None

    def by_index(self, index: int) -> Biome:
        if not 0 <= index < len(self._biomes):
            raise IndexError(f"Biome index out of range: {index}")
        return self._biomes[index]

    def index_of(self, name: str) -> int:
        return self.get(name).index

    def sort_key(self, name: str) -> tuple[int, int, str]:
        """Order known biomes by index, then unknown names alphabetically after them."""
        biome = self._by_name.get(name)
        if biome is None:
            return (1, 0, name)
        return (0, biome.index, "")


_DEFAULT_REGISTRY = BiomeRegistry.from_colors(CLASSIC_BIOMES)


def default_registry() -> BiomeRegistry:
    """Return the shared registry of classic biomes."""
    return _DEFAULT_REGISTRY
