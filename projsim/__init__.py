"""
Projectile Motion Simulator
===========================
Computes the 2D flight path of a projectile launched from level ground:
  - Drag-free flight from the closed-form parabola
  - Quadratic air drag by fixed-step numerical integration

Derives max height, range and flight time from the sampled trajectory and
runs the standard studies: angle sweep, drag comparison, planetary gravity
comparison and optimal launch angle.
"""

from .constants import PLANETS, SAMPLE_CAP, ANALYTIC_DT, NUMERICAL_DT
from .kinematics import decompose, time_of_flight, apex_height, ideal_range
from .drag_model import drag_force, drag_acceleration
from .projectile import SimulationParameters, Position
from .integrator import (
    compute_trajectory, simulate_analytic, simulate_numerical,
    Trajectory, IntegrationMode,
)
from .metrics import (
    max_height, horizontal_range, flight_time, compute_metrics, Metrics,
)
from .scenarios import (
    run_single, sweep_angles, compare_drag, compare_planets,
    optimize_angle, get_planet,
)

__version__ = "1.0.0"
__all__ = [
    'SimulationParameters', 'Position', 'Trajectory', 'IntegrationMode',
    'compute_trajectory', 'simulate_analytic', 'simulate_numerical',
    'decompose', 'time_of_flight', 'apex_height', 'ideal_range',
    'drag_force', 'drag_acceleration',
    'max_height', 'horizontal_range', 'flight_time',
    'compute_metrics', 'Metrics',
    'run_single', 'sweep_angles', 'compare_drag', 'compare_planets',
    'optimize_angle', 'get_planet',
    'PLANETS', 'SAMPLE_CAP', 'ANALYTIC_DT', 'NUMERICAL_DT',
]
