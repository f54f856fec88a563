"""Configuration for SPIN & DARE."""

from spindare.config.settings import Settings, WheelSettings, TimingSettings, get_settings

__all__ = ["Settings", "WheelSettings", "TimingSettings", "get_settings"]
