"""Deterministic text export of biome profiles.

The document is JSON, laid out one color entry per line::

    { "name":"default", "colorMap":[
    [ "Ocean", { "r":0, "g":0, "b":112 } ],
    [ "Plains", { "r":141, "g":179, "b":96 } ] ] }

Entries follow registry index order, so two exports of the same profile are
byte-identical no matter how the color map was built.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from collections.abc import Mapping
from pathlib import Path

from seed_atlas.biomes import BiomeRegistry
from seed_atlas.models import BiomeColor

CRLF = "\r\n"


def _string(value: str | None) -> str:
    return json.dumps(value, ensure_ascii=False)


def _entry(biome_name: str, color: BiomeColor) -> str:
    return f'[ {_string(biome_name)}, {{ "r":{color.r}, "g":{color.g}, "b":{color.b} }} ]'


def serialize_color_map(
    name: str | None,
    color_map: Mapping[str, BiomeColor] | None,
    registry: BiomeRegistry,
    *,
    newline: str = CRLF,
) -> str:
    """Render a profile document; unknown biome names sort after all registry biomes."""
    entries = [
        _entry(biome_name, color_map[biome_name])
        for biome_name in sorted(color_map or (), key=registry.sort_key)
    ]
    header = f'{{ "name":{_string(name)}, "colorMap":[{newline}'
    return header + f",{newline}".join(entries) + f" ] }}{newline}"


def _replacement_mode(target: Path) -> int:
    """Mode for a file that replaces ``target``: keep an existing mode, else honour the umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text(path: str | Path, text: str, *, atomic: bool = True) -> None:
    """Write ``text`` to ``path`` as UTF-8 without newline translation.

    With ``atomic`` the text goes to a temporary sibling file that replaces the
    target only once fully written, carrying the same permissions an in-place
    write would leave. Errors propagate to the caller.
    """
    target = Path(path)
    if not atomic:
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        return

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.chmod(tmp_name, _replacement_mode(target))
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
