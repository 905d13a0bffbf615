"""
Trajectory Metrics
==================
Summary values derived from a computed trajectory. Nothing here is cached;
metrics are recomputed from the samples on every call.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import ANALYTIC_DT, NUMERICAL_DT
from .projectile import Position, SimulationParameters


@dataclass(frozen=True)
class Metrics:
    max_height: float    # m
    range: float         # m
    flight_time: float   # s  (sample count × nominal step)
    samples: int


def max_height(trajectory: Sequence[Position]) -> float:
    """Highest y over all samples, 0 for an empty trajectory."""
    return max((p.y for p in trajectory), default=0.0)


def horizontal_range(trajectory: Sequence[Position]) -> float:
    """Downrange distance of the last sample, 0 for an empty trajectory."""
    if len(trajectory) == 0:
        return 0.0
    return trajectory[-1].x


def flight_time(trajectory: Sequence[Position], drag_enabled: bool) -> float:
    """
    Sample count × nominal step (0.01 s with drag, 0.02 s without).

    This is not the simulated elapsed time: it can be off by up to one
    step because the final partial step before impact is never sampled.
    """
    return len(trajectory) * (NUMERICAL_DT if drag_enabled else ANALYTIC_DT)


def impact_speed(params: SimulationParameters) -> Optional[float]:
    """
    Speed at landing for drag-free flight, which equals the launch speed.
    None with drag, where it has to come from the integration instead.
    """
    if params.drag_enabled:
        return None
    return params.initial_speed


def compute_metrics(trajectory) -> Metrics:
    """Bundle all metrics for a Trajectory from the integrator."""
    return Metrics(
        max_height=max_height(trajectory),
        range=horizontal_range(trajectory),
        flight_time=flight_time(trajectory, trajectory.params.drag_enabled),
        samples=len(trajectory),
    )
