"""
Kinematics
==========
Stateless formulas for drag-free motion under constant gravity.

    x(t) = vx·t
    y(t) = vy·t − ½·g·t²

`decompose` is used by both integration modes; the remaining closed-form
results (time of flight, apex height, ideal range) serve as references for
the sampled trajectory.
"""

import numpy as np
from typing import Tuple

from .constants import PI


def decompose(speed: float, angle_deg: float) -> Tuple[float, float]:
    """
    Convert launch speed + elevation to (vx, vy).

    Any real angle is accepted; angles outside [0, 90] simply produce
    negative components.
    """
    angle_rad = angle_deg * PI / 180.0
    return speed * np.cos(angle_rad), speed * np.sin(angle_rad)


def analytic_position(vx: float, vy: float, gravity: float,
                      t: float) -> Tuple[float, float]:
    """Position at time t on the drag-free parabola."""
    return vx * t, vy * t - 0.5 * gravity * t * t


def time_of_flight(vy: float, gravity: float) -> float:
    """
    Time to return to launch height: 2·vy / g.

    Zero gravity gives inf (or NaN when vy is also zero) rather than raising.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(2.0 * vy) / gravity)


def apex_height(vy: float, gravity: float) -> float:
    """Maximum height: vy² / (2g)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(vy * vy) / (2.0 * gravity))


def ideal_range(speed: float, angle_deg: float, gravity: float) -> float:
    """Level-ground range: v²·sin(2θ) / g."""
    angle_rad = angle_deg * PI / 180.0
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(speed ** 2 * np.sin(2.0 * angle_rad)) / gravity)
