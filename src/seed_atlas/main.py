"""CLI startup entrypoint for seed-atlas."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from seed_atlas.biomes import default_registry
from seed_atlas.config import settings
from seed_atlas.profiles import DEFAULT_PROFILE_NAME, get_default_profile
from seed_atlas.seed import from_save_game, from_user_input
from seed_atlas.telemetry import configure_logging

app = typer.Typer(help="World seed and biome profile tooling")


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)


@app.command("settings")
def show_settings() -> None:
    """Show effective runtime configuration."""
    print(settings.model_dump())


@app.command()
def seed(
    text: str = typer.Argument("", help="Seed text or number; empty for a random seed"),
    save_game: int = typer.Option(None, help="Raw seed read from an existing world save"),
) -> None:
    """Derive a world seed from user input or a save game.

    Negative numbers need a ``--`` separator, e.g. ``seed-atlas seed -- -7``.
    """
    if save_game is None:
        world_seed = from_user_input(text)
    else:
        try:
            world_seed = from_save_game(save_game)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--save-game") from exc
    print(world_seed.as_dict())


@app.command()
def biomes() -> None:
    """List known biomes in index order with their default colors."""
    print(
        [
            {"index": biome.index, "name": biome.name, "default_color": biome.default_color.to_hex()}
            for biome in default_registry()
        ]
    )


@app.command("export-default-profile")
def export_default_profile(
    path: str = typer.Argument(None, help="Output file; defaults to <profiles_dir>/default.json"),
) -> None:
    """Write the built-in default biome profile to disk."""
    target = Path(path) if path else Path(settings.profiles_dir) / f"{DEFAULT_PROFILE_NAME}.json"
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print({"profile": DEFAULT_PROFILE_NAME, "path": str(target), "saved": False, "error": str(exc)})
        raise typer.Exit(code=1)

    saved = get_default_profile().save(target, newline=settings.newline, atomic=settings.atomic_writes)
    print({"profile": DEFAULT_PROFILE_NAME, "path": str(target), "saved": saved})
    if not saved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
