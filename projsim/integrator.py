"""
Trajectory Integrator
=====================
Produces the sampled flight path for a set of launch parameters using one
of two modes:

1. **Analytic** (no drag) — closed-form parabola sampled every 0.02 s
   until the time of flight 2·vy/g.
2. **Numerical** (quadratic drag) — fixed-step semi-implicit Euler at
   0.01 s, velocity updated before position:

       v_{n+1} = v_n + a(v_n) * dt
       x_{n+1} = x_n + v_{n+1} * dt

The mode is chosen once per call from `drag_enabled`. Both are pure
functions of their parameters.

Output: Trajectory dataclass holding the ordered Position samples.
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from .constants import ANALYTIC_DT, NUMERICAL_DT, SAMPLE_CAP
from .drag_model import drag_acceleration
from .kinematics import decompose, analytic_position, time_of_flight
from .projectile import SimulationParameters, Position


class IntegrationMode(Enum):
    ANALYTIC = 'analytic'
    NUMERICAL = 'numerical'

    @classmethod
    def for_params(cls, params: SimulationParameters) -> 'IntegrationMode':
        return cls.NUMERICAL if params.drag_enabled else cls.ANALYTIC

    @property
    def dt(self) -> float:
        """Nominal step between samples (s)."""
        return NUMERICAL_DT if self is IntegrationMode.NUMERICAL else ANALYTIC_DT


@dataclass(frozen=True)
class Trajectory:
    """Complete trajectory output. Behaves as a read-only sequence of Position."""
    params: SimulationParameters
    mode: IntegrationMode
    points: Tuple[Position, ...]

    @property
    def dt(self) -> float:
        return self.mode.dt

    @property
    def x(self) -> np.ndarray:
        """Downrange samples (m), shape (N,)."""
        return np.array([p.x for p in self.points], dtype=float)

    @property
    def y(self) -> np.ndarray:
        """Height samples (m), shape (N,)."""
        return np.array([p.y for p in self.points], dtype=float)

    @property
    def time(self) -> np.ndarray:
        """Nominal sample times: index × dt."""
        return np.arange(len(self.points)) * self.dt

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.points)


def simulate_analytic(params: SimulationParameters,
                      dt: float = ANALYTIC_DT) -> Tuple[Position, ...]:
    """
    Sample the drag-free parabola from t = 0 while t ≤ 2·vy/g.

    Sampling stops before the first negative height, so every recorded
    sample has y ≥ 0 even when rounding pushes the last t past impact.
    Zero gravity gives an unbounded time of flight; this is not guarded.
    """
    vx, vy = decompose(params.initial_speed, params.launch_angle_deg)
    total_time = time_of_flight(vy, params.gravity)

    points = []
    t = 0.0
    while t <= total_time:
        x, y = analytic_position(vx, vy, params.gravity, t)
        if y < 0:
            break
        points.append(Position(float(x), float(y)))
        t += dt

    return tuple(points)


def simulate_numerical(params: SimulationParameters, dt: float = NUMERICAL_DT,
                       max_samples: int = SAMPLE_CAP) -> Tuple[Position, ...]:
    """
    Fixed-step integration with quadratic drag.

    Each sample is recorded before the state is advanced, so (0, 0) is
    always first and the last sample is the final one with y ≥ 0.
    Stops silently after `max_samples` samples.
    """
    vx, vy = decompose(params.initial_speed, params.launch_angle_deg)
    x, y = 0.0, 0.0

    points = []
    with np.errstate(over='ignore', invalid='ignore'):
        while y >= 0:
            points.append(Position(float(x), float(y)))
            if len(points) >= max_samples:
                break

            ax, ay = drag_acceleration(vx, vy, params.drag_coefficient,
                                       params.mass)

            vx += ax * dt
            vy += (ay - params.gravity) * dt

            x += vx * dt
            y += vy * dt

    return tuple(points)


def compute_trajectory(params: SimulationParameters) -> Trajectory:
    """Compute a fresh trajectory, dispatching on `params.drag_enabled`."""
    mode = IntegrationMode.for_params(params)
    if mode is IntegrationMode.NUMERICAL:
        points = simulate_numerical(params)
    else:
        points = simulate_analytic(params)
    return Trajectory(params=params, mode=mode, points=points)
