"""
Visualization Engine
====================
Figures for trajectory analysis:
  1. Single trajectory (height vs downrange)
  2. Angle sweep family
  3. With vs. without air resistance
  4. Planetary comparison
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from typing import List
import os

from .constants import PLANETS
from .scenarios import ScenarioResult, AngleSweep, DragComparison, PlanetResult


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
    'font_family': 'monospace',
}

def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _legend(ax):
    ax.legend(fontsize=9, facecolor='#1a1a1a', edgecolor='#444',
              labelcolor=STYLE['text_color'])


def _finish(fig, save_path):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])
    return fig


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Single Trajectory Plot
# ══════════════════════════════════════════════════════════════════════════

def plot_trajectory(result: ScenarioResult, save_path: str = None,
                    show: bool = False) -> plt.Figure:
    """Height vs downrange for a single run."""
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    traj = result.trajectory
    p = result.params
    x, y = traj.x, traj.y

    ax.plot(x, y, color=STYLE['accent_colors'][0], linewidth=2.5,
            label=traj.mode.value.capitalize())

    if len(traj) > 0:
        ax.plot(0, 0, 'o', color='#00e676', markersize=10,
                label='Launch', zorder=5)
        ax.plot(x[-1], y[-1], 'x', color='#ff5252', markersize=12,
                markeredgewidth=3, label='Landing', zorder=5)
        idx_max = np.argmax(y)
        ax.plot(x[idx_max], y[idx_max], '^', color='#ffeb3b', markersize=10,
                label='Apex', zorder=5)

    ax.set_xlabel('Downrange (m)', fontsize=12)
    ax.set_ylabel('Height (m)', fontsize=12)
    ax.set_title(f'Projectile Trajectory (v₀={p.initial_speed:.0f} m/s, '
                 f'θ={p.launch_angle_deg:.0f}°, g={p.gravity:.2f} m/s², '
                 f'drag {"ON" if p.drag_enabled else "OFF"})',
                 fontsize=13, fontweight='bold')
    ax.legend(loc='upper right', fontsize=10,
              facecolor='#1a1a1a', edgecolor='#444', labelcolor=STYLE['text_color'])
    ax.set_ylim(bottom=0)
    ax.set_xlim(left=0)

    _finish(fig, save_path)
    if show:
        plt.show()
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  2. Angle Sweep
# ══════════════════════════════════════════════════════════════════════════

def plot_angle_sweep(sweep: AngleSweep, save_path: str = None) -> plt.Figure:
    """Trajectory family on the left, range vs angle on the right."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))
    _apply_dark_style(fig, np.array([ax1, ax2]))

    cmap = plt.get_cmap('cool')
    n = max(len(sweep.results) - 1, 1)
    for i, res in enumerate(sweep.results):
        angle = res.params.launch_angle_deg
        lw = 2.5 if angle == sweep.best_angle else 1.2
        ax1.plot(res.trajectory.x, res.trajectory.y, color=cmap(i / n),
                 linewidth=lw, label=f'{angle:.0f}°')
    ax1.set_xlabel('Downrange (m)')
    ax1.set_ylabel('Height (m)')
    ax1.set_title('Trajectories by Launch Angle', fontweight='bold')
    ax1.set_ylim(bottom=0)
    _legend(ax1)

    angles = [r.params.launch_angle_deg for r in sweep.results]
    ranges = [r.metrics.range for r in sweep.results]
    ax2.plot(angles, ranges, 'o-', color=STYLE['accent_colors'][1], linewidth=2)
    ax2.axvline(x=sweep.best_angle, color='#00e676', linestyle='--', alpha=0.7,
                label=f'Best: {sweep.best_angle:.0f}°')
    ax2.set_xlabel('Launch Angle (°)')
    ax2.set_ylabel('Range (m)')
    ax2.set_title('Range vs Launch Angle', fontweight='bold')
    _legend(ax2)

    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  3. Air Resistance Comparison
# ══════════════════════════════════════════════════════════════════════════

def plot_drag_comparison(cmp: DragComparison, save_path: str = None) -> plt.Figure:
    """Overlay the drag-free and drag trajectories."""
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    for res, color, label in [
        (cmp.without_drag, '#888888', 'Without Air'),
        (cmp.with_drag, STYLE['accent_colors'][0], 'With Air'),
    ]:
        ax.plot(res.trajectory.x, res.trajectory.y, color=color, linewidth=2,
                linestyle='--' if not res.params.drag_enabled else '-',
                label=f'{label} — {res.metrics.range:.1f} m')

    ax.set_xlabel('Downrange (m)')
    ax.set_ylabel('Height (m)')
    ax.set_title(f'Effect of Air Resistance '
                 f'(range −{cmp.range_reduction_pct:.1f}%)', fontweight='bold')
    ax.set_ylim(bottom=0)
    _legend(ax)

    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  4. Planetary Comparison
# ══════════════════════════════════════════════════════════════════════════

def plot_planets(results: List[PlanetResult], save_path: str = None) -> plt.Figure:
    """Trajectories per planet plus a range bar chart."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))
    _apply_dark_style(fig, np.array([ax1, ax2]))

    colors = [PLANETS.get(pr.key, {}).get('color', '#888') for pr in results]
    for pr, color in zip(results, colors):
        ax1.plot(pr.result.trajectory.x, pr.result.trajectory.y, color=color,
                 linewidth=2, label=f'{pr.name} (g={pr.gravity:.2f})')
    ax1.set_xlabel('Downrange (m)')
    ax1.set_ylabel('Height (m)')
    ax1.set_title('Trajectory Comparison', fontweight='bold')
    ax1.set_ylim(bottom=0)
    _legend(ax1)

    names = [pr.name for pr in results]
    ranges = [pr.result.metrics.range for pr in results]
    bars = ax2.barh(names, ranges, color=colors, alpha=0.85, edgecolor='#555')
    ax2.set_xlabel('Range (m)')
    ax2.set_title('Range Comparison', fontweight='bold')
    for bar, r in zip(bars, ranges):
        ax2.text(bar.get_width(), bar.get_y() + bar.get_height()/2,
                 f' {r:.1f} m', va='center', color=STYLE['text_color'], fontsize=10)

    fig.suptitle('Planetary Comparison — Same Launch Conditions',
                 fontsize=15, fontweight='bold', color=STYLE['text_color'], y=1.02)
    return _finish(fig, save_path)
