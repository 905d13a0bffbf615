#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  PROJECTILE MOTION SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Interactive menu:
    1. Run new simulation
    2. Compare angles (optimize for range)
    3. Compare with/without air resistance
    4. Test different planets
    5. Exit
    6. Find optimal angle (continuous search)

  Batch mode runs one study from command-line flags, no prompts.

  Usage:
    python main.py                                   # interactive menu
    python main.py --speed 50 --angle 45 --drag      # single run
    python main.py --speed 50 --sweep --plot         # angle sweep + figure
    python main.py --speed 80 --angle 30 --planets   # planetary comparison
═══════════════════════════════════════════════════════════════════════════════
"""

import argparse
import os
import sys

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from projsim.constants import (
    DEFAULT_SPEED, DEFAULT_ANGLE, EARTH_GRAVITY,
    DEFAULT_DRAG_COEFF, DEFAULT_MASS,
)
from projsim.projectile import SimulationParameters
from projsim.scenarios import (
    run_single, sweep_angles, compare_drag, compare_planets, optimize_angle,
)
from projsim.report import (
    format_summary, render_ascii, format_sample_table,
    format_angle_sweep, format_drag_comparison, format_planets,
)
from projsim.visualization import (
    plot_trajectory, plot_angle_sweep, plot_drag_comparison, plot_planets,
    ensure_output_dir,
)


def banner():
    print("""
    ╔═══════════════════════════════════════════════════════╗
    ║                                                       ║
    ║     PROJECTILE MOTION SIMULATOR                       ║
    ║     Physics Simulation & Analysis Tool                ║
    ║                                                       ║
    ╚═══════════════════════════════════════════════════════╝
""")


def section(title):
    print(f"\n{'═'*3} {title} {'═'*3}")


def display_menu():
    print("\n╔════════════════════════════════════════╗")
    print("║          MENU OPTIONS                  ║")
    print("╚════════════════════════════════════════╝")
    print("1. Run new simulation")
    print("2. Compare angles (optimize for range)")
    print("3. Compare with/without air resistance")
    print("4. Test different planets")
    print("5. Exit")
    print("6. Find optimal angle")


# ── Prompt helpers ────────────────────────────────────────────────────────

def _ask(prompt: str, default=None, cast=float):
    """Prompt until the answer parses; blank returns the default."""
    suffix = f" [{default}]" if default is not None else ""
    while True:
        raw = input(f"{prompt}{suffix}: ").strip()
        if raw == "" and default is not None:
            return cast(default)
        try:
            return cast(raw)
        except ValueError:
            print(f"  ✗ Could not read '{raw}', try again.")


def _ask_yes(prompt: str, default: bool = False) -> bool:
    """1/0 or y/n question."""
    raw = input(f"{prompt} (1=Yes, 0=No) [{1 if default else 0}]: ").strip().lower()
    if raw == "":
        return default
    return raw in ('1', 'y', 'yes')


def _save(fig, outdir, name):
    path = os.path.join(ensure_output_dir(outdir), name)
    fig.savefig(path, dpi=150, bbox_inches='tight', facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"  ✓ Saved: {path}")


# ══════════════════════════════════════════════════════════════════════════
#  Scenarios
# ══════════════════════════════════════════════════════════════════════════

def show_single(params, table=False, ascii_art=True, plot=False,
                outdir='outputs'):
    result = run_single(params)
    print()
    print(format_summary(result))
    if ascii_art:
        print()
        print(render_ascii(result))
    if table:
        print()
        print(format_sample_table(result))
    if plot:
        _save(plot_trajectory(result), outdir, 'trajectory.png')
    return result


def show_sweep(speed, gravity=EARTH_GRAVITY, plot=False, outdir='outputs'):
    print(f"\nComparing angles from 15° to 75° "
          f"(g = {gravity:g} m/s², no air resistance):\n")
    sweep = sweep_angles(speed, gravity=gravity)
    print(format_angle_sweep(sweep))
    if plot:
        _save(plot_angle_sweep(sweep), outdir, 'angle_sweep.png')
    return sweep


def show_drag_comparison(speed, angle, base=None, plot=False, outdir='outputs'):
    cmp = compare_drag(speed, angle, base=base)
    print()
    print(format_drag_comparison(cmp))
    if plot:
        _save(plot_drag_comparison(cmp), outdir, 'drag_comparison.png')
    return cmp


def show_planets(speed, angle, plot=False, outdir='outputs'):
    results = compare_planets(speed, angle)
    print()
    print(format_planets(results))
    if plot:
        _save(plot_planets(results), outdir, 'planets.png')
    return results


def show_optimum(params):
    angle, best = optimize_angle(params)
    mode = "with" if params.drag_enabled else "without"
    print(f"\nOptimal angle {mode} air resistance: {angle:.2f}° "
          f"with range: {best:.2f} m")
    return angle, best


# ══════════════════════════════════════════════════════════════════════════
#  Interactive menu
# ══════════════════════════════════════════════════════════════════════════

def menu_run_simulation():
    section("NEW SIMULATION")
    speed = _ask("Enter initial velocity (m/s)", DEFAULT_SPEED)
    angle = _ask("Enter launch angle (0-90 degrees)", DEFAULT_ANGLE)
    drag = _ask_yes("Include air resistance?")
    params = SimulationParameters(initial_speed=speed, launch_angle_deg=angle,
                                  drag_enabled=drag)
    result = show_single(params)
    if _ask_yes("Show detailed trajectory data?"):
        print()
        print(format_sample_table(result))


def menu_compare_angles():
    section("ANGLE OPTIMIZATION")
    show_sweep(_ask("Enter velocity (m/s)", DEFAULT_SPEED))


def menu_compare_drag():
    section("AIR RESISTANCE COMPARISON")
    speed = _ask("Enter velocity (m/s)", DEFAULT_SPEED)
    angle = _ask("Enter angle (degrees)", DEFAULT_ANGLE)
    show_drag_comparison(speed, angle)


def menu_planets():
    section("PLANETARY COMPARISON")
    speed = _ask("Enter velocity (m/s)", DEFAULT_SPEED)
    angle = _ask("Enter angle (degrees)", DEFAULT_ANGLE)
    show_planets(speed, angle)


def menu_optimum():
    section("OPTIMAL ANGLE SEARCH")
    speed = _ask("Enter velocity (m/s)", DEFAULT_SPEED)
    drag = _ask_yes("Include air resistance?")
    show_optimum(SimulationParameters(initial_speed=speed, drag_enabled=drag))


MENU_ACTIONS = {
    1: menu_run_simulation,
    2: menu_compare_angles,
    3: menu_compare_drag,
    4: menu_planets,
    6: menu_optimum,
}
EXIT_CHOICE = 5


def interactive():
    banner()
    while True:
        display_menu()
        try:
            choice = _ask("\nEnter choice", cast=int)
        except (EOFError, KeyboardInterrupt):
            choice = EXIT_CHOICE

        if choice == EXIT_CHOICE:
            print("\nThanks for using the simulator! Goodbye!\n")
            return

        action = MENU_ACTIONS.get(choice)
        if action is None:
            print("\n✗ Invalid choice. Try again.")
            continue

        try:
            action()
            input("\nPress Enter to continue...")
        except (EOFError, KeyboardInterrupt):
            print("\nThanks for using the simulator! Goodbye!\n")
            return


# ══════════════════════════════════════════════════════════════════════════
#  Batch mode
# ══════════════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Projectile Motion Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  Interactive:   python main.py
  Single run:    python main.py --speed 50 --angle 45 --drag --table
  Sweep:         python main.py --speed 50 --sweep --plot
""",
    )
    p.add_argument('--speed', type=float, default=None,
                   help=f'Launch speed in m/s (default {DEFAULT_SPEED})')
    p.add_argument('--angle', type=float, default=DEFAULT_ANGLE,
                   help='Launch angle in degrees')
    p.add_argument('--gravity', type=float, default=EARTH_GRAVITY,
                   help='Gravitational acceleration in m/s²')
    p.add_argument('--drag', action='store_true',
                   help='Enable quadratic air drag (numerical integration)')
    p.add_argument('--cd', type=float, default=DEFAULT_DRAG_COEFF,
                   help='Drag coefficient')
    p.add_argument('--mass', type=float, default=DEFAULT_MASS,
                   help='Projectile mass in kg')

    study = p.add_mutually_exclusive_group()
    study.add_argument('--sweep', action='store_true',
                       help='Compare launch angles 15°–75°')
    study.add_argument('--compare-drag', action='store_true',
                       help='Compare with and without air resistance')
    study.add_argument('--planets', action='store_true',
                       help='Compare ranges across planetary gravities')
    study.add_argument('--optimize', action='store_true',
                       help='Search the launch angle that maximises range')

    p.add_argument('--table', action='store_true',
                   help='Print sampled trajectory data')
    p.add_argument('--no-ascii', action='store_true',
                   help='Skip the text-art trajectory')
    p.add_argument('--plot', action='store_true',
                   help='Save a PNG figure of the study')
    p.add_argument('--outdir', type=str, default='outputs',
                   help='Directory for saved figures')
    return p


def batch(args):
    speed = args.speed if args.speed is not None else DEFAULT_SPEED
    params = SimulationParameters(
        initial_speed=speed,
        launch_angle_deg=args.angle,
        gravity=args.gravity,
        drag_enabled=args.drag,
        drag_coefficient=args.cd,
        mass=args.mass,
    )

    if args.sweep:
        show_sweep(speed, gravity=args.gravity, plot=args.plot, outdir=args.outdir)
    elif args.compare_drag:
        show_drag_comparison(speed, args.angle, base=params, plot=args.plot,
                             outdir=args.outdir)
    elif args.planets:
        show_planets(speed, args.angle, plot=args.plot, outdir=args.outdir)
    elif args.optimize:
        show_optimum(params)
    else:
        show_single(params, table=args.table, ascii_art=not args.no_ascii,
                    plot=args.plot, outdir=args.outdir)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        interactive()
        return 0
    batch(build_parser().parse_args(argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())
