"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. ``SPINDARE_TIMING__SPIN_DURATION_MS``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WheelSettings(BaseModel):
    """Rotation planning parameters."""

    # Full turns per spin, inclusive range
    min_full_turns: int = Field(default=3, ge=0)
    max_full_turns: int = Field(default=6, ge=0)

    # Smallest forward delta that still reads as a real spin (degrees)
    min_spin_delta: float = Field(default=1080.0, gt=0.0)

    # Drag continuation: target = current + delta * momentum_factor
    momentum_factor: float = Field(default=2.0, ge=1.0)

    initial_angle: float = 0.0

    @model_validator(mode="after")
    def _check_turn_range(self) -> "WheelSettings":
        if self.min_full_turns > self.max_full_turns:
            raise ValueError("min_full_turns must not exceed max_full_turns")
        return self


class TimingSettings(BaseModel):
    """Spin and reveal timing, in milliseconds."""

    spin_duration_ms: float = Field(default=4000.0, gt=0.0)

    # Reveal sweep (early commit only), nested inside the spin
    sweep_delay_ms: float = Field(default=2500.0, ge=0.0)
    sweep_duration_ms: float = Field(default=1000.0, ge=0.0)

    # How long REVEALING is held before returning to IDLE (0 = immediately)
    reveal_hold_ms: float = Field(default=0.0, ge=0.0)

    fps: int = Field(default=60, gt=0)

    @model_validator(mode="after")
    def _check_sweep_window(self) -> "TimingSettings":
        if self.sweep_delay_ms + self.sweep_duration_ms > self.spin_duration_ms:
            raise ValueError("reveal sweep must end within the spin duration")
        return self


class Settings(BaseSettings):
    """Main game settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPINDARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # "late": color read from where the dial stops
    # "early": color drawn at spin start, dial steered onto it
    commit_policy: Literal["late", "early"] = "early"

    # Raise InvalidStateTransition instead of returning False
    strict_commands: bool = False

    # Seed for the instance random source, None for OS entropy
    seed: Optional[int] = None

    # Spins played by the console entry point
    auto_spins: int = Field(default=1, ge=0)

    wheel: WheelSettings = Field(default_factory=WheelSettings)
    timing: TimingSettings = Field(default_factory=TimingSettings)

    @property
    def is_early_commit(self) -> bool:
        """Check if the color is committed at spin start."""
        return self.commit_policy == "early"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
