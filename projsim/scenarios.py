"""
Scenario Runner
===============
Builds parameter sets for the standard studies, runs the integrator once
per configuration and collects the metrics:

  - Single run
  - Angle sweep (15°–75° in 5° steps, drag-free)
  - With vs. without air resistance
  - Planetary comparison (same launch, different surface gravity)
  - Optimal launch angle search (bounded scalar minimisation)

Results are plain dataclasses; formatting lives in visualization.py.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from scipy.optimize import minimize_scalar

from .constants import (
    EARTH_GRAVITY, PLANETS,
    SWEEP_START_DEG, SWEEP_STOP_DEG, SWEEP_STEP_DEG,
)
from .integrator import Trajectory, compute_trajectory
from .metrics import Metrics, compute_metrics, horizontal_range
from .projectile import SimulationParameters


@dataclass
class ScenarioResult:
    """One trajectory together with its metrics."""
    params: SimulationParameters
    trajectory: Trajectory
    metrics: Metrics


@dataclass
class AngleSweep:
    results: List[ScenarioResult]
    best_angle: float
    best_range: float


@dataclass
class DragComparison:
    without_drag: ScenarioResult
    with_drag: ScenarioResult

    @property
    def range_reduction_pct(self) -> float:
        """Range lost to air resistance, % of the drag-free range."""
        r0 = self.without_drag.metrics.range
        r1 = self.with_drag.metrics.range
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(r0 - r1) / r0 * 100.0)


@dataclass
class PlanetResult:
    key: str
    name: str
    gravity: float
    result: ScenarioResult


def get_planet(key: str) -> Dict:
    """Planet record from the gravity table."""
    key = key.lower()
    if key not in PLANETS:
        raise ValueError(
            f"Unknown planet '{key}'. "
            f"Available: {list(PLANETS.keys())}"
        )
    return PLANETS[key]


def run_single(params: SimulationParameters) -> ScenarioResult:
    trajectory = compute_trajectory(params)
    return ScenarioResult(params=params, trajectory=trajectory,
                          metrics=compute_metrics(trajectory))


def sweep_angles(speed: float, angles=None,
                 gravity: float = EARTH_GRAVITY) -> AngleSweep:
    """
    Drag-free runs across a range of launch angles.

    The best angle is the first one reaching the strictly largest range.
    """
    if angles is None:
        angles = range(SWEEP_START_DEG, SWEEP_STOP_DEG + 1, SWEEP_STEP_DEG)

    results = []
    best_angle, best_range = 0.0, 0.0
    for angle in angles:
        params = SimulationParameters(initial_speed=speed,
                                      launch_angle_deg=float(angle),
                                      gravity=gravity,
                                      drag_enabled=False)
        res = run_single(params)
        results.append(res)
        if res.metrics.range > best_range:
            best_angle, best_range = float(angle), res.metrics.range

    return AngleSweep(results=results, best_angle=best_angle,
                      best_range=best_range)


def compare_drag(speed: float, angle: float,
                 base: Optional[SimulationParameters] = None) -> DragComparison:
    """Same launch with and without air resistance."""
    if base is None:
        base = SimulationParameters()
    base = base.with_changes(initial_speed=speed, launch_angle_deg=angle)
    return DragComparison(
        without_drag=run_single(base.with_changes(drag_enabled=False)),
        with_drag=run_single(base.with_changes(drag_enabled=True)),
    )


def compare_planets(speed: float, angle: float,
                    planets: Optional[Dict[str, Dict]] = None) -> List[PlanetResult]:
    """Drag-free runs of the same launch under each planet's gravity."""
    if planets is None:
        planets = PLANETS

    out = []
    for key, data in planets.items():
        params = SimulationParameters(initial_speed=speed,
                                      launch_angle_deg=angle,
                                      gravity=data['gravity'],
                                      drag_enabled=False)
        out.append(PlanetResult(key=key, name=data['name'],
                                gravity=data['gravity'],
                                result=run_single(params)))
    return out


def optimize_angle(params: SimulationParameters,
                   bounds: Tuple[float, float] = (1.0, 89.0),
                   xatol: float = 1e-3) -> Tuple[float, float]:
    """
    Launch angle (deg) maximising range for the given parameters.

    Works in either mode: with drag the optimum drops below 45°.
    Returns (angle_deg, range_m).
    """
    def negative_range(angle_deg):
        traj = compute_trajectory(params.with_changes(launch_angle_deg=float(angle_deg)))
        return -horizontal_range(traj)

    result = minimize_scalar(
        negative_range,
        bounds=bounds,
        method='bounded',
        options={'xatol': xatol, 'maxiter': 200},
    )
    return float(result.x), float(-result.fun)
