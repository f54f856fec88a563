"""Presentation helpers for SPIN & DARE."""

from spindare.graphics.dial import render_dial, screen_angles

__all__ = ["render_dial", "screen_angles"]
