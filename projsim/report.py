"""
Console Reports
===============
Plain-text renderings of computed results for the terminal:
  1. Run summary (inputs + metrics)
  2. Text-art trajectory canvas
  3. Sampled trajectory table
  4. Angle sweep, drag comparison and planetary tables

Every function returns a string; printing is left to the caller.
"""

import math
from typing import List

from .metrics import impact_speed
from .scenarios import ScenarioResult, AngleSweep, DragComparison, PlanetResult


CANVAS_WIDTH = 80
CANVAS_HEIGHT = 25
TABLE_ROWS = 10


def format_summary(result: ScenarioResult) -> str:
    """Inputs and metrics of a single run."""
    p = result.params
    m = result.metrics
    lines = [
        "╔════════════════════════════════════════╗",
        "║   PROJECTILE MOTION SIMULATOR          ║",
        "╚════════════════════════════════════════╝",
        "",
        "INPUT PARAMETERS:",
        f"├─ Initial Velocity: {p.initial_speed:g} m/s",
        f"├─ Launch Angle: {p.launch_angle_deg:g}°",
        f"├─ Gravity: {p.gravity:g} m/s²",
        f"└─ Air Resistance: {'ON' if p.drag_enabled else 'OFF'}",
        "",
        "RESULTS:",
        f"├─ Maximum Height: {m.max_height:.2f} m",
        f"├─ Range: {m.range:.2f} m",
        f"├─ Flight Time: {m.flight_time:.2f} s",
    ]
    v_impact = impact_speed(p)
    if v_impact is not None:
        lines.append(f"└─ Impact Velocity: {v_impact:.2f} m/s")
    else:
        lines.append("└─ (Air resistance affects impact velocity)")
    return '\n'.join(lines)


def render_ascii(result: ScenarioResult, width: int = CANVAS_WIDTH,
                 height: int = CANVAS_HEIGHT) -> str:
    """
    Text-art side view: `*` per sample, `S` at launch, `L` at landing.

    Samples are scaled so the range spans the full width and the apex the
    full height above the ground row.
    """
    canvas = [[' '] * width for _ in range(height)]
    canvas[height - 1] = ['─'] * width

    max_x = result.metrics.range
    max_y = result.metrics.max_height
    scalable = (max_x > 0 and max_y > 0
                and math.isfinite(max_x) and math.isfinite(max_y))

    if scalable:
        for point in result.trajectory:
            col = int(point.x / max_x * (width - 1))
            row = height - 2 - int(point.y / max_y * (height - 2))
            if 0 <= col < width and 0 <= row < height - 1:
                canvas[row][col] = '*'

    canvas[height - 2][0] = 'S'
    if scalable:
        canvas[height - 2][width - 1] = 'L'

    lines = ["TRAJECTORY VISUALIZATION:", ""]
    lines.append("  ┌" + "─" * width + "┐")
    lines.extend("  │" + ''.join(row) + "│" for row in canvas)
    lines.append("  └" + "─" * width + "┘")
    lines.append("  S = Start, L = Landing, * = Trajectory")
    lines.append("")
    lines.append(f"  Scale: {max_x:.1f} m horizontal, {max_y:.1f} m vertical")
    return '\n'.join(lines)


def format_sample_table(result: ScenarioResult, rows: int = TABLE_ROWS) -> str:
    """About `rows` evenly spaced samples; time is index × nominal step."""
    traj = result.trajectory
    step = max(len(traj) // rows, 1)

    lines = ["TRAJECTORY DATA (sample points):", "─" * 50,
             f"{'Time(s)':>10}{'X(m)':>15}{'Y(m)':>15}", "─" * 50]
    for i in range(0, len(traj), step):
        lines.append(f"{i * traj.dt:>10.2f}{traj[i].x:>15.2f}{traj[i].y:>15.2f}")
    lines.append("─" * 50)
    return '\n'.join(lines)


def format_angle_sweep(sweep: AngleSweep) -> str:
    lines = ["─" * 60,
             f"{'Angle':>15}{'Range(m)':>20}{'Max Height(m)':>20}",
             "─" * 60]
    for res in sweep.results:
        lines.append(f"{res.params.launch_angle_deg:>14.0f}°"
                     f"{res.metrics.range:>20.2f}{res.metrics.max_height:>20.2f}")
    lines.append("─" * 60)
    lines.append(f"Optimal angle: {sweep.best_angle:.0f}° with range: "
                 f"{sweep.best_range:.2f} m")
    return '\n'.join(lines)


def format_drag_comparison(cmp: DragComparison) -> str:
    a = cmp.without_drag.metrics
    b = cmp.with_drag.metrics
    lines = [
        "─" * 70,
        f"{'':>30}{'Without Air':>20}{'With Air':>20}",
        "─" * 70,
        f"{'Range (m):':>30}{a.range:>20.2f}{b.range:>20.2f}",
        f"{'Max Height (m):':>30}{a.max_height:>20.2f}{b.max_height:>20.2f}",
        f"{'Flight Time (s):':>30}{a.flight_time:>20.2f}{b.flight_time:>20.2f}",
        "─" * 70,
        "",
        f"Range reduction due to air resistance: {cmp.range_reduction_pct:.2f}%",
    ]
    return '\n'.join(lines)


def format_planets(results: List[PlanetResult]) -> str:
    lines = ["─" * 75,
             f"{'Planet':>15}{'Gravity(m/s²)':>15}{'Range(m)':>20}{'Max Height(m)':>20}",
             "─" * 75]
    for pr in results:
        m = pr.result.metrics
        lines.append(f"{pr.name:>15}{pr.gravity:>15.2f}"
                     f"{m.range:>20.2f}{m.max_height:>20.2f}")
    lines.append("─" * 75)
    return '\n'.join(lines)
