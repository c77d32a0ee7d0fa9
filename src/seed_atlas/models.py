from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BiomeColor:
    """An RGB color with 8-bit components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color component {channel} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color component {channel} out of range 0-255: {value}")

    @classmethod
    def from_hex(cls, value: str) -> BiomeColor:
        digits = value.removeprefix("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True, slots=True)
class Biome:
    """A registry entry: stable dense index, unique name and default map color."""

    index: int
    name: str
    default_color: BiomeColor
