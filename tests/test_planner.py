"""
Tests for rotation planning.
"""

import random

import pytest

from conftest import ScriptedRandom
from spindare.core.errors import ConfigurationError
from spindare.wheel.planner import RotationPlanner
from spindare.wheel.sectors import ColorSector, SECTOR_ORDER, sector_of


class TestFreeSpin:
    """Tests for plan_free_spin."""

    def test_moves_forward_past_floor(self):
        planner = RotationPlanner(random.Random(7))
        for start in (0.0, 45.0, 359.0, 1234.5, -200.0):
            for _ in range(50):
                target = planner.plan_free_spin(start)
                assert target - start >= 1080.0

    def test_formula(self):
        planner = RotationPlanner(ScriptedRandom(turns=4, offset=10.0, color=ColorSector.BLUE))
        assert planner.plan_free_spin(20.0) == pytest.approx(20.0 + 4 * 360 + 90 + 10)

    def test_short_draw_gets_extra_turns(self):
        planner = RotationPlanner(ScriptedRandom(turns=0, offset=10.0, color=ColorSector.RED))
        assert planner.plan_free_spin(0.0) == pytest.approx(1090.0)

    def test_upper_bound_of_uniform_stays_in_sector(self):
        planner = RotationPlanner(ScriptedRandom(turns=3, offset=90.0, color=ColorSector.RED))
        assert sector_of(planner.plan_free_spin(0.0)) == ColorSector.RED


class TestSteeredSpin:
    """Tests for plan_steered_spin."""

    def test_scripted_green(self):
        planner = RotationPlanner(ScriptedRandom(turns=3, offset=45.0))
        target = planner.plan_steered_spin(0.0, ColorSector.GREEN)
        assert target == pytest.approx(1305.0)
        assert sector_of(target) == ColorSector.GREEN

    @pytest.mark.parametrize("color", SECTOR_ORDER)
    def test_always_lands_on_color(self, color):
        rng = random.Random(1234)
        planner = RotationPlanner(rng)
        for _ in range(200):
            start = rng.uniform(-2000.0, 5000.0)
            target = planner.plan_steered_spin(start, color)
            assert sector_of(target) == color
            assert target - start >= 1080.0

    def test_independent_of_start_angle(self):
        planner = RotationPlanner(ScriptedRandom(turns=3, offset=0.0))
        for start in (10.0, 200.0, 359.9, 725.0, -45.0):
            assert sector_of(planner.plan_steered_spin(start, ColorSector.YELLOW)) == ColorSector.YELLOW

    def test_offset_at_upper_bound(self):
        planner = RotationPlanner(ScriptedRandom(turns=3, offset=90.0))
        target = planner.plan_steered_spin(0.0, ColorSector.RED)
        assert sector_of(target) == ColorSector.RED


class TestDragContinuation:
    """Tests for plan_drag_continuation."""

    def test_momentum(self):
        planner = RotationPlanner(momentum_factor=2.0)
        target = planner.plan_drag_continuation(700.0, 40.0, 250.0)
        assert target == pytest.approx(780.0)
        assert sector_of(target) == ColorSector.RED

    def test_backwards_drag(self):
        planner = RotationPlanner(momentum_factor=3.0)
        assert planner.plan_drag_continuation(100.0, -30.0, 0.0) == pytest.approx(10.0)


class TestPlannerParameters:
    """Tests for parameter validation."""

    @pytest.mark.parametrize("kwargs", [
        {"turn_range": (5, 3)},
        {"turn_range": (-1, 3)},
        {"min_spin_delta": 0.0},
        {"momentum_factor": 0.5},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ConfigurationError):
            RotationPlanner(**kwargs)

    def test_seeded_plans_repeat(self):
        first = RotationPlanner(random.Random(99))
        second = RotationPlanner(random.Random(99))
        assert [first.plan_free_spin(0.0) for _ in range(5)] == [
            second.plan_free_spin(0.0) for _ in range(5)
        ]
