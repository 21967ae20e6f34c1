from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

StrategyName = Literal["supermemo2", "simple"]


def config_file_candidates() -> list[Path]:
    return [
        Path.home() / ".config/spaced-repetition/config.toml",
        Path.home() / ".spaced-repetition.toml",
    ]


class SessionConfig(BaseSettings):
    """
    Study session configuration.
    Supports loading from:
    1. Config file (~/.config/spaced-repetition/config.toml)
    2. Environment variables (SPACED_REPETITION_*)
    3. Explicit overrides
    Later sources win.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPACED_REPETITION_",
        extra="ignore",
    )

    # Per-sitting caps (None = unbounded)
    max_new_cards: int | None = Field(default=None, ge=0)
    max_existing_cards: int | None = Field(default=None, ge=0)

    # Scheduling
    strategy: StrategyName = "supermemo2"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First existing file wins
        toml_file = next((f for f in config_file_candidates() if f.exists()), None)

        # Earlier sources take priority
        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (init_settings, env_settings)


def resolve_config(overrides: dict[str, Any] | None = None) -> SessionConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in SessionConfig
    2. ~/.config/spaced-repetition/config.toml (if exists)
    3. Environment variables (SPACED_REPETITION_*)
    4. overrides, ignoring None values
    """
    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    return SessionConfig(**explicit)
