"""
Simulation Constants
====================
Fixed numerical and physical constants shared by the integrator, the
metrics extractor and the scenario runner.

All quantities are SI.
"""

import math


# ── Integration ────────────────────────────────────────────────────────────
PI                   = math.pi
ANALYTIC_DT          = 0.02        # s  sampling step of the closed-form solution
NUMERICAL_DT         = 0.01        # s  time step of the drag integrator
SAMPLE_CAP           = 10000       # max samples recorded in numerical mode
MIN_DRAG_SPEED       = 1e-3        # m/s  below this, drag direction is undefined

# ── Air ────────────────────────────────────────────────────────────────────
AIR_DENSITY          = 1.225       # kg/m³  (sea level)
CROSS_SECTION_AREA   = 0.01        # m²

# ── Parameter defaults ─────────────────────────────────────────────────────
DEFAULT_SPEED        = 50.0        # m/s
DEFAULT_ANGLE        = 45.0        # degrees above horizontal
EARTH_GRAVITY        = 9.8         # m/s²
DEFAULT_DRAG_COEFF   = 0.47        # sphere
DEFAULT_MASS         = 1.0         # kg

# ── Angle sweep ────────────────────────────────────────────────────────────
SWEEP_START_DEG      = 15
SWEEP_STOP_DEG       = 75
SWEEP_STEP_DEG       = 5


# ══════════════════════════════════════════════════════════════════════════
#  Surface gravity table — used by the planetary comparison
# ══════════════════════════════════════════════════════════════════════════

PLANETS = {
    'earth':   {'name': 'Earth',   'gravity': 9.8,   'color': '#00d4ff'},
    'moon':    {'name': 'Moon',    'gravity': 1.62,  'color': '#e0e0e0'},
    'mars':    {'name': 'Mars',    'gravity': 3.71,  'color': '#ff5252'},
    'jupiter': {'name': 'Jupiter', 'gravity': 24.79, 'color': '#ff6b35'},
    'venus':   {'name': 'Venus',   'gravity': 8.87,  'color': '#ffeb3b'},
}
