"""
Tests for the scenario runner, console reports and the command line.
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from projsim.constants import PLANETS
from projsim.projectile import SimulationParameters
from projsim.integrator import Trajectory, IntegrationMode
from projsim.metrics import compute_metrics
from projsim.scenarios import (
    ScenarioResult, run_single, sweep_angles, compare_drag, compare_planets,
    optimize_angle, get_planet,
)
from projsim.report import (
    format_summary, render_ascii, format_sample_table,
    format_angle_sweep, format_drag_comparison, format_planets,
    CANVAS_WIDTH, CANVAS_HEIGHT,
)
import main as cli


@pytest.fixture
def reference_run():
    return run_single(SimulationParameters())


@pytest.fixture
def empty_run():
    params = SimulationParameters(launch_angle_deg=-5.0)
    traj = Trajectory(params=params, mode=IntegrationMode.ANALYTIC, points=())
    return ScenarioResult(params=params, trajectory=traj,
                          metrics=compute_metrics(traj))


# ── Scenarios ─────────────────────────────────────────────────────

class TestAngleSweep:

    def test_default_angles(self):
        sweep = sweep_angles(50.0)
        angles = [r.params.launch_angle_deg for r in sweep.results]
        assert angles == [float(a) for a in range(15, 76, 5)]
        assert all(not r.params.drag_enabled for r in sweep.results)

    def test_45_degrees_is_best(self):
        sweep = sweep_angles(50.0)
        assert sweep.best_angle == 45.0
        at_45 = [r for r in sweep.results if r.params.launch_angle_deg == 45.0][0]
        assert all(at_45.metrics.range >= r.metrics.range for r in sweep.results)
        assert sweep.best_range == at_45.metrics.range

    def test_complementary_angles_similar_range(self):
        sweep = sweep_angles(50.0)
        by_angle = {r.params.launch_angle_deg: r.metrics.range for r in sweep.results}
        assert by_angle[30.0] == pytest.approx(by_angle[60.0], abs=1.0)

    def test_custom_angles_and_gravity(self):
        sweep = sweep_angles(20.0, angles=[10, 20], gravity=1.62)
        assert len(sweep.results) == 2
        assert sweep.results[0].params.gravity == 1.62
        assert sweep.best_angle == 20.0


class TestDragComparison:

    def test_drag_reduces_range(self):
        cmp = compare_drag(50.0, 45.0)
        assert not cmp.without_drag.params.drag_enabled
        assert cmp.with_drag.params.drag_enabled
        assert cmp.with_drag.metrics.range < cmp.without_drag.metrics.range
        assert 0.0 < cmp.range_reduction_pct < 100.0

    def test_uses_base_drag_settings(self):
        base = SimulationParameters(drag_coefficient=0.1, mass=5.0)
        cmp = compare_drag(50.0, 30.0, base=base)
        assert cmp.with_drag.params.drag_coefficient == 0.1
        assert cmp.with_drag.params.mass == 5.0
        assert cmp.with_drag.params.launch_angle_deg == 30.0


class TestPlanets:

    def test_all_planets_present(self):
        results = compare_planets(50.0, 45.0)
        assert [r.key for r in results] == list(PLANETS.keys())

    def test_range_decreases_with_gravity(self):
        results = sorted(compare_planets(50.0, 45.0), key=lambda r: r.gravity)
        ranges = [r.result.metrics.range for r in results]
        assert all(a > b for a, b in zip(ranges, ranges[1:]))

    def test_get_planet(self):
        assert get_planet('Mars')['gravity'] == 3.71
        with pytest.raises(ValueError):
            get_planet('pluto')


class TestOptimizeAngle:

    def test_drag_free_optimum_near_45(self):
        angle, best = optimize_angle(SimulationParameters())
        assert abs(angle - 45.0) < 5.0
        assert best == pytest.approx(255.1, rel=0.01)

    def test_drag_lowers_optimum(self):
        angle, best = optimize_angle(SimulationParameters(initial_speed=100.0,
                                                          drag_enabled=True))
        assert angle < 45.0
        assert best > 0.0


# ── Reports ───────────────────────────────────────────────────────

class TestReports:

    def test_summary_without_drag(self, reference_run):
        text = format_summary(reference_run)
        assert "Air Resistance: OFF" in text
        assert "Maximum Height: 63.7" in text
        assert "Impact Velocity: 50.00 m/s" in text

    def test_summary_with_drag(self):
        text = format_summary(run_single(SimulationParameters(drag_enabled=True)))
        assert "Air Resistance: ON" in text
        assert "affects impact velocity" in text

    def test_ascii_canvas(self, reference_run):
        lines = render_ascii(reference_run).splitlines()
        frame = [l for l in lines if l.startswith("  │")]
        assert len(frame) == CANVAS_HEIGHT
        assert all(len(l) == CANVAS_WIDTH + 4 for l in frame)
        body = '\n'.join(frame)
        assert '*' in body
        assert frame[-2][3] == 'S'
        assert frame[-2][3 + CANVAS_WIDTH - 1] == 'L'
        assert set(frame[-1][3:-1]) == {'─'}

    def test_ascii_apex_on_top_row(self, reference_run):
        frame = [l for l in render_ascii(reference_run).splitlines()
                 if l.startswith("  │")]
        assert '*' in frame[0]

    def test_ascii_empty_trajectory(self, empty_run):
        text = render_ascii(empty_run)
        assert '*' not in text.split("S = Start")[0]

    def test_sample_table(self, reference_run):
        lines = format_sample_table(reference_run).splitlines()
        rows = lines[4:-1]
        # 361 samples, step 36 -> indices 0, 36, ..., 360
        assert len(rows) == 11
        assert rows[0].split() == ['0.00', '0.00', '0.00']
        assert rows[1].split()[0] == '0.72'

    def test_sample_table_short_trajectory(self):
        res = run_single(SimulationParameters(launch_angle_deg=0.0))
        rows = format_sample_table(res).splitlines()[4:-1]
        assert len(rows) == 1

    def test_tables(self):
        assert "Optimal angle: 45°" in format_angle_sweep(sweep_angles(50.0))
        assert "Range reduction" in format_drag_comparison(compare_drag(50.0, 45.0))
        text = format_planets(compare_planets(50.0, 45.0))
        for data in PLANETS.values():
            assert data['name'] in text


# ── Command line ──────────────────────────────────────────────────

class TestCommandLine:

    def test_single_run(self, capsys):
        assert cli.main(['--speed', '50', '--angle', '45', '--table']) == 0
        out = capsys.readouterr().out
        assert "Range: 254.56 m" in out
        assert "TRAJECTORY DATA" in out

    def test_sweep(self, capsys):
        cli.main(['--speed', '50', '--sweep'])
        assert "Optimal angle: 45°" in capsys.readouterr().out

    def test_planets_plot(self, tmp_path, capsys):
        cli.main(['--planets', '--plot', '--outdir', str(tmp_path)])
        assert (tmp_path / 'planets.png').exists()

    def test_exclusive_studies(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(['--sweep', '--planets'])

    def test_interactive_exit(self, monkeypatch, capsys):
        answers = iter(['9', '5'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Invalid choice" in out
        assert "Goodbye" in out

    def test_interactive_run(self, monkeypatch, capsys):
        answers = iter(['1', '', '', '0', '0', '', '5'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))
        cli.main([])
        assert "Range: 254.56 m" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
