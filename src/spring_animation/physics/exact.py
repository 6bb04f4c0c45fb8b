"""Closed-form damped-oscillator spring.

Shown beside the integrating :class:`SpringValue` in the demo as the
reference response: the position is evaluated from the analytic solution of
``x'' + c x' + k x = 0`` at the time since the last re-target instead of
being stepped, so it is exact for any ``elapsed``.
"""
from __future__ import annotations

import math
from typing import Tuple

from spring_animation.physics.spring import SpringValue
from spring_animation.physics.vector import V, coerce_like

# Damping ratios this close to 1 use the critically damped solution.
CRITICAL_TOLERANCE = 1e-6


def response_coefficients(
    stiffness: float, damping: float, t: float
) -> Tuple[float, float, float, float]:
    """Coefficients of the free response of a unit-mass oscillator at time ``t``.

    With initial displacement ``d0`` and velocity ``v0`` the state is
    ``x = a*d0 + b*v0`` and ``v = da*d0 + db*v0``; returns ``(a, b, da, db)``.
    """
    omega = math.sqrt(stiffness)
    zeta = damping / (2.0 * omega)
    if abs(zeta - 1.0) < CRITICAL_TOLERANCE:
        decay = math.exp(-omega * t)
        return (
            decay * (1.0 + omega * t),
            decay * t,
            -decay * omega * omega * t,
            decay * (1.0 - omega * t),
        )
    if zeta < 1.0:
        omega_d = omega * math.sqrt(1.0 - zeta * zeta)
        decay = math.exp(-zeta * omega * t)
        cos_t = math.cos(omega_d * t)
        sin_t = math.sin(omega_d * t)
        ratio = zeta * omega / omega_d
        return (
            decay * (cos_t + ratio * sin_t),
            decay * sin_t / omega_d,
            -decay * stiffness * sin_t / omega_d,
            decay * (cos_t - ratio * sin_t),
        )
    root = omega * math.sqrt(zeta * zeta - 1.0)
    r1 = -zeta * omega + root
    r2 = -zeta * omega - root
    e1 = math.exp(r1 * t)
    e2 = math.exp(r2 * t)
    span = r1 - r2
    return (
        (r1 * e2 - r2 * e1) / span,
        (e1 - e2) / span,
        r1 * r2 * (e2 - e1) / span,
        (r1 * e1 - r2 * e2) / span,
    )


class ExactSpringValue(SpringValue[V]):
    """Spring following the analytic solution from its last re-target."""

    def __init__(self, value: V, **kwargs) -> None:
        super().__init__(value, **kwargs)
        self._restart()

    def _restart(self) -> None:
        self.time = 0.0
        self._start_displacement = self.ops.sub(self.value, self.target)
        self._start_velocity = self.velocity

    def animate_to(self, target: V) -> None:
        self.target = coerce_like(target, self.ops, self.value)
        self._restart()
        if self.registry is not None:
            self.registry.register_or_refresh(self)

    def snap_to(self, value: V) -> None:
        super().snap_to(value)
        self._restart()

    def update(self, elapsed: float) -> None:
        if not elapsed > 0.0:
            return
        self.time += elapsed
        a, b, da, db = response_coefficients(self.stiffness, self.damping, self.time)
        ops = self.ops
        d0 = self._start_displacement
        v0 = self._start_velocity
        self.value = ops.add(self.target, ops.add(ops.scale(d0, a), ops.scale(v0, b)))
        self.velocity = ops.add(ops.scale(d0, da), ops.scale(v0, db))
