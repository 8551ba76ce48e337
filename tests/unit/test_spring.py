"""
Unit tests for the damped spring integrator.
"""

import math

import pytest

from projinit.wizard.spring import Spring, SpringState, fps, is_settled


class TestFps:
    def test_sixty_frames(self):
        assert fps(60) == pytest.approx(1 / 60)

    def test_one_frame(self):
        assert fps(1) == 1.0


class TestSpringState:
    def test_reset_discards_velocity(self):
        state = SpringState(position=3.0, velocity=12.0, target=1.0)
        state.reset(-40.0, 0.0)
        assert state == SpringState(-40.0, 0.0, 0.0)

    def test_snap(self):
        state = SpringState(position=0.9995, velocity=0.0002, target=1.0)
        state.snap()
        assert state.position == 1.0
        assert state.velocity == 0.0


class TestSpring:
    """Tests for Spring.update across the damping regimes."""

    @pytest.mark.parametrize("damping", [0.3, 0.7, 1.0, 1.5])
    def test_at_rest_on_target_stays_put(self, damping):
        spring = Spring(fps(60), 6.0, damping)
        pos, vel = 5.0, 0.0
        for _ in range(100):
            pos, vel = spring.update(pos, vel, 5.0)
        assert pos == pytest.approx(5.0)
        assert vel == pytest.approx(0.0)

    @pytest.mark.parametrize(
        "frequency,damping",
        [(5.0, 0.7), (8.0, 0.85), (6.0, 1.0), (4.0, 2.0)],
    )
    def test_converges_to_target(self, frequency, damping):
        spring = Spring(fps(60), frequency, damping)
        state = SpringState(0.0, 0.0, 1.0)
        for _ in range(60 * 10):
            spring.step(state)
        assert is_settled(state, 0.001)

    def test_under_damped_stays_inside_decaying_envelope(self):
        frequency, damping = 5.0, 0.7
        spring = Spring(fps(60), frequency, damping)
        pos, vel = 0.0, 0.0
        decay = frequency * damping
        for tick in range(1, 600):
            pos, vel = spring.update(pos, vel, 1.0)
            t = tick / 60
            # Offset never exceeds the initial offset scaled by the damped
            # envelope, allowing for the phase factor of the solution.
            envelope = math.exp(-decay * t) / math.sqrt(1 - damping * damping)
            assert abs(pos - 1.0) <= envelope + 1e-9

    def test_under_damped_overshoots(self):
        spring = Spring(fps(60), 5.0, 0.3)
        pos, vel = 0.0, 0.0
        peak = 0.0
        for _ in range(120):
            pos, vel = spring.update(pos, vel, 1.0)
            peak = max(peak, pos)
        assert peak > 1.0

    @pytest.mark.parametrize("damping", [1.0, 1.5, 3.0])
    def test_critical_and_over_damped_approach_monotonically(self, damping):
        spring = Spring(fps(60), 6.0, damping)
        pos, vel = 0.0, 0.0
        previous_distance = 1.0
        for _ in range(300):
            pos, vel = spring.update(pos, vel, 1.0)
            distance = abs(1.0 - pos)
            assert distance <= previous_distance + 1e-12
            assert pos <= 1.0 + 1e-9
            previous_distance = distance

    def test_negative_offset_relaxes_toward_zero(self):
        spring = Spring(fps(60), 8.0, 0.85)
        state = SpringState()
        state.reset(-82.0, 0.0)
        for _ in range(600):
            spring.step(state)
        assert is_settled(state, 0.5)

    def test_zero_frequency_never_moves(self):
        spring = Spring(fps(60), 0.0, 0.5)
        assert spring.update(3.0, 0.0, 10.0) == (3.0, 0.0)

    def test_coefficients_fixed_at_construction(self):
        spring = Spring(fps(60), 5.0, 0.7)
        first = spring.update(0.0, 0.0, 1.0)
        spring.update(0.4, 2.0, 7.0)
        assert spring.update(0.0, 0.0, 1.0) == first


class TestIsSettled:
    def test_requires_position_and_velocity(self):
        assert is_settled(SpringState(0.9999, 0.0, 1.0), 0.001)
        assert not is_settled(SpringState(0.9999, 0.01, 1.0), 0.001)
        assert not is_settled(SpringState(0.99, 0.0, 1.0), 0.001)


class TestEntranceSpring:
    """The entrance spring as configured by default."""

    def test_settles_then_stays_fixed(self):
        spring = Spring(fps(60), 5.0, 0.7)
        state = SpringState(0.0, 0.0, 1.0)
        ticks = 0
        while not is_settled(state, 0.001):
            spring.step(state)
            ticks += 1
            assert ticks < 5000
            assert math.isfinite(state.position)
        state.snap()
        for _ in range(100):
            spring.step(state)
        assert (state.position, state.velocity) == (1.0, 0.0)
