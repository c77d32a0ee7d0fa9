"""Runtime configuration for seed-atlas."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NEWLINES = {"crlf": "\r\n", "lf": "\n"}


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SEED_ATLAS_", env_file=".env", extra="ignore")

    app_name: str = "seed-atlas"
    log_level: str = "INFO"
    profiles_dir: str = Field(
        default="biome",
        description="Directory where exported biome profiles are written.",
    )
    profile_newline: Literal["crlf", "lf"] = Field(
        default="crlf",
        description="Line terminator used in exported biome profiles.",
    )
    atomic_writes: bool = True

    @property
    def newline(self) -> str:
        return NEWLINES[self.profile_newline]


settings = Settings()
