from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from seed_atlas.biomes import BiomeRegistry, default_registry
from seed_atlas.models import BiomeColor
from seed_atlas.profiles import BiomeProfile, get_default_profile

REGISTRY = BiomeRegistry.from_colors([("Ocean", (0, 0, 112)), ("Plains", (141, 179, 96)), ("Desert", (250, 148, 24))])


def _colors_json(document: str) -> list:
    return json.loads(document)["colorMap"]


def test_serialize_exact_format() -> None:
    profile = BiomeProfile(name="mine", color_map={"Desert": BiomeColor(1, 2, 3), "Ocean": BiomeColor(4, 5, 6)})

    assert profile.serialize(REGISTRY) == (
        '{ "name":"mine", "colorMap":[\r\n'
        '[ "Ocean", { "r":4, "g":5, "b":6 } ],\r\n'
        '[ "Desert", { "r":1, "g":2, "b":3 } ] ] }\r\n'
    )


def test_serialize_orders_by_registry_index_regardless_of_insertion() -> None:
    colors = {"Desert": BiomeColor(1, 1, 1), "Plains": BiomeColor(2, 2, 2), "Ocean": BiomeColor(3, 3, 3)}
    forward = BiomeProfile(name="p", color_map=colors)
    backward = BiomeProfile(name="p", color_map=dict(reversed(list(colors.items()))))

    assert forward.serialize(REGISTRY) == backward.serialize(REGISTRY)
    assert [entry[0] for entry in _colors_json(forward.serialize(REGISTRY))] == ["Ocean", "Plains", "Desert"]


def test_serialize_empty_and_missing_color_map() -> None:
    expected = '{ "name":"p", "colorMap":[\r\n ] }\r\n'

    assert BiomeProfile(name="p", color_map={}).serialize(REGISTRY) == expected
    assert BiomeProfile(name="p", color_map=None).serialize(REGISTRY) == expected
    assert _colors_json(expected) == []


def test_serialize_keeps_unknown_biomes_after_known_ones() -> None:
    profile = BiomeProfile(
        name="p",
        color_map={"zeta": BiomeColor(0, 0, 0), "Plains": BiomeColor(1, 1, 1), "alpha": BiomeColor(2, 2, 2)},
    )

    assert [entry[0] for entry in _colors_json(profile.serialize(REGISTRY))] == ["Plains", "alpha", "zeta"]


def test_serialize_escapes_names_and_handles_missing_name() -> None:
    document = BiomeProfile(name='say "hi"', color_map={"Ocean": BiomeColor(0, 0, 0)}).serialize(REGISTRY)
    assert json.loads(document)["name"] == 'say "hi"'

    assert json.loads(BiomeProfile(color_map={}).serialize(REGISTRY))["name"] is None


def test_serialize_lf_newline() -> None:
    document = BiomeProfile(name="p", color_map={"Ocean": BiomeColor(0, 0, 0)}).serialize(REGISTRY, newline="\n")

    assert "\r" not in document
    assert document.endswith(" ] }\n")


def test_save_is_deterministic(tmp_path: Path) -> None:
    profile = get_default_profile()
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"

    assert profile.save(first) is True
    assert profile.save(second) is True
    assert first.read_bytes() == second.read_bytes()
    assert first.read_bytes().count(b"\r\n") == len(default_registry()) + 1

    entries = json.loads(first.read_text(encoding="utf-8"))["colorMap"]
    assert [name for name, _ in entries] == [biome.name for biome in default_registry()]
    assert entries[1] == ["Plains", {"r": 141, "g": 179, "b": 96}]


def test_atomic_save_leaves_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "profile.json"
    target.write_text("old", encoding="utf-8")

    assert BiomeProfile(name="p", color_map={}).save(target, registry=REGISTRY) is True
    assert os.listdir(tmp_path) == ["profile.json"]
    assert target.read_text(encoding="utf-8").startswith('{ "name":"p"')


def test_in_place_save(tmp_path: Path) -> None:
    target = tmp_path / "profile.json"

    assert BiomeProfile(name="p", color_map={}).save(target, registry=REGISTRY, atomic=False) is True
    assert target.read_bytes() == b'{ "name":"p", "colorMap":[\r\n ] }\r\n'


def test_save_failure_returns_false(tmp_path: Path) -> None:
    missing_dir = tmp_path / "missing" / "profile.json"
    profile = BiomeProfile(name="p", color_map={})

    assert profile.save(missing_dir) is False
    assert profile.save(missing_dir, atomic=False) is False
    assert profile.save(tmp_path) is False
    assert os.listdir(tmp_path) == []


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_atomic_save_uses_same_mode_as_in_place_save(tmp_path: Path, umask_022) -> None:
    profile = BiomeProfile(name="p", color_map={})
    atomic = tmp_path / "atomic.json"
    in_place = tmp_path / "in_place.json"

    assert profile.save(atomic, registry=REGISTRY) is True
    assert profile.save(in_place, registry=REGISTRY, atomic=False) is True
    assert _mode(atomic) == _mode(in_place) == 0o644


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_atomic_save_keeps_existing_file_mode(tmp_path: Path, umask_022) -> None:
    target = tmp_path / "profile.json"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o640)

    assert BiomeProfile(name="p", color_map={}).save(target, registry=REGISTRY) is True
    assert _mode(target) == 0o640
