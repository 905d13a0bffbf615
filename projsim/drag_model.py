"""
Aerodynamic Drag Model
======================
Quadratic drag with a fixed coefficient, constant air density and a fixed
reference area:

    F_drag = ½ ρ Cd A |v|²      (opposes velocity)

No Mach dependence and no atmosphere model: the numerical integrator only
needs the acceleration at sea-level density.
"""

import numpy as np
from typing import Tuple

from .constants import AIR_DENSITY, CROSS_SECTION_AREA, MIN_DRAG_SPEED


def drag_force(speed: float, cd: float, rho: float = AIR_DENSITY,
               area: float = CROSS_SECTION_AREA) -> float:
    """
    Drag force magnitude (N) at the given speed.

    Parameters
    ----------
    speed : float
        Speed relative to still air (m/s)
    cd : float
        Drag coefficient (dimensionless)
    rho : float
        Air density (kg/m³)
    area : float
        Reference cross-sectional area (m²)
    """
    return 0.5 * rho * cd * area * speed * speed


def drag_acceleration(vx: float, vy: float, cd: float,
                      mass: float) -> Tuple[float, float]:
    """
    Drag acceleration components (m/s²) for velocity (vx, vy).

    Zero below MIN_DRAG_SPEED, where the direction of motion is not
    meaningful. A zero mass yields inf/NaN components instead of raising.
    """
    speed = np.sqrt(vx * vx + vy * vy)
    if not speed > MIN_DRAG_SPEED:
        return 0.0, 0.0

    with np.errstate(divide='ignore', invalid='ignore'):
        accel = np.float64(drag_force(speed, cd)) / mass
    return -accel * (vx / speed), -accel * (vy / speed)
