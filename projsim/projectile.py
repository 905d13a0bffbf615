"""
Projectile Definition
=====================
Launch parameters and trajectory samples.

Coordinate system:
  x = downrange (horizontal), launch at x = 0
  y = height    (vertical, up positive), ground at y = 0
"""

from dataclasses import dataclass, replace
from typing import NamedTuple

from .constants import (
    DEFAULT_SPEED, DEFAULT_ANGLE, EARTH_GRAVITY,
    DEFAULT_DRAG_COEFF, DEFAULT_MASS,
)


class Position(NamedTuple):
    """One trajectory sample (m)."""
    x: float
    y: float


@dataclass(frozen=True)
class SimulationParameters:
    """
    Complete specification of one simulation run.

    Values are taken as given: the integrator performs no validation, so
    out-of-range inputs (zero gravity, negative angles, zero mass) are the
    caller's responsibility.
    """
    initial_speed: float = DEFAULT_SPEED          # m/s
    launch_angle_deg: float = DEFAULT_ANGLE       # degrees above horizontal
    gravity: float = EARTH_GRAVITY                # m/s²
    drag_enabled: bool = False
    drag_coefficient: float = DEFAULT_DRAG_COEFF  # dimensionless
    mass: float = DEFAULT_MASS                    # kg

    def with_changes(self, **changes) -> 'SimulationParameters':
        """Copy with the given fields replaced."""
        return replace(self, **changes)
