"""
Damped harmonic oscillator used to animate scalar values.

The coefficients are solved once per spring in closed form, so every update
is four multiplications regardless of damping. Over-damped, critically damped
and under-damped cases each get their own solution.
"""

import math
from dataclasses import dataclass

# Below this the frequency/damping branches are treated as degenerate.
_EPSILON = 0.0001


def fps(n: int) -> float:
    """Return the timestep for a frame rate of ``n`` frames per second."""
    return 1.0 / n


@dataclass
class SpringState:
    """Position, velocity and target of one animated value."""

    position: float = 0.0
    velocity: float = 0.0
    target: float = 0.0

    def reset(self, position: float, target: float) -> None:
        """Jump to ``position`` at rest, heading for ``target``.

        Any in-flight motion is discarded.
        """
        self.position = position
        self.velocity = 0.0
        self.target = target

    def snap(self) -> None:
        """Place the value exactly on its target at rest."""
        self.position = self.target
        self.velocity = 0.0


class Spring:
    """Fixed-timestep damped spring.

    Args:
        delta_time: Timestep in seconds, see :func:`fps`.
        angular_frequency: Oscillation speed. Higher is snappier.
        damping_ratio: ``< 1`` bounces, ``1`` is critically damped,
            ``> 1`` approaches slowly without overshoot.
    """

    def __init__(self, delta_time: float, angular_frequency: float, damping_ratio: float):
        self.delta_time = delta_time
        self.angular_frequency = max(0.0, angular_frequency)
        self.damping_ratio = max(0.0, damping_ratio)

        self._pos_pos = 1.0
        self._pos_vel = 0.0
        self._vel_pos = 0.0
        self._vel_vel = 1.0
        self._solve()

    def _solve(self) -> None:
        omega = self.angular_frequency
        zeta = self.damping_ratio
        dt = self.delta_time

        if omega < _EPSILON:
            # No spring force, the value never moves.
            return

        if zeta > 1.0 + _EPSILON:
            za = -omega * zeta
            zb = omega * math.sqrt(zeta * zeta - 1.0)
            z1 = za - zb
            z2 = za + zb

            e1 = math.exp(z1 * dt)
            e2 = math.exp(z2 * dt)

            inv_two_zb = 1.0 / (2.0 * zb)
            e1_over_two_zb = e1 * inv_two_zb
            e2_over_two_zb = e2 * inv_two_zb
            z1e1_over_two_zb = z1 * e1_over_two_zb
            z2e2_over_two_zb = z2 * e2_over_two_zb

            self._pos_pos = e1_over_two_zb * z2 - z2e2_over_two_zb + e2
            self._pos_vel = -e1_over_two_zb + e2_over_two_zb
            self._vel_pos = (z1e1_over_two_zb - z2e2_over_two_zb + e2) * z2
            self._vel_vel = -z1e1_over_two_zb + z2e2_over_two_zb

        elif zeta < 1.0 - _EPSILON:
            omega_zeta = omega * zeta
            alpha = omega * math.sqrt(1.0 - zeta * zeta)

            exp_term = math.exp(-omega_zeta * dt)
            cos_term = math.cos(alpha * dt)
            sin_term = math.sin(alpha * dt)

            inv_alpha = 1.0 / alpha
            exp_sin = exp_term * sin_term
            exp_cos = exp_term * cos_term
            exp_omega_zeta_sin_over_alpha = exp_term * omega_zeta * sin_term * inv_alpha

            self._pos_pos = exp_cos + exp_omega_zeta_sin_over_alpha
            self._pos_vel = exp_sin * inv_alpha
            self._vel_pos = -exp_sin * alpha - omega_zeta * exp_omega_zeta_sin_over_alpha
            self._vel_vel = exp_cos - exp_omega_zeta_sin_over_alpha

        else:
            exp_term = math.exp(-omega * dt)
            time_exp = dt * exp_term
            time_exp_freq = time_exp * omega

            self._pos_pos = time_exp_freq + exp_term
            self._pos_vel = time_exp
            self._vel_pos = -omega * time_exp_freq
            self._vel_vel = -time_exp_freq + exp_term

    def update(self, position: float, velocity: float, target: float) -> tuple[float, float]:
        """Advance one timestep toward ``target``.

        Returns:
            The next ``(position, velocity)`` pair.
        """
        offset = position - target
        new_position = offset * self._pos_pos + velocity * self._pos_vel + target
        new_velocity = offset * self._vel_pos + velocity * self._vel_vel
        return new_position, new_velocity

    def step(self, state: SpringState) -> None:
        """Advance ``state`` one timestep in place."""
        state.position, state.velocity = self.update(state.position, state.velocity, state.target)


def is_settled(state: SpringState, epsilon: float) -> bool:
    """Check whether a spring has come to rest on its target."""
    return abs(state.position - state.target) < epsilon and abs(state.velocity) < epsilon
