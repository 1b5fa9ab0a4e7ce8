"""End-to-end runs: the autopilot plays the whole procedure."""
import pytest

from relining import signals
from relining.__main__ import main
from relining.autopilot import Autopilot
from relining.config import SiteConfig
from relining.engine import Simulation
from relining.types import SegmentState, Stage

CONFIG = SiteConfig.for_viewport(1024, 768)

EXPECTED_STAGES = (
    [("intro", "demolish"), ("demolish", "clean"), ("clean", "construct.mold")]
    + [
        ("construct.mold", "construct.pour"),
        ("construct.pour", "construct.demold"),
        ("construct.demold", "construct.mold"),
    ] * 3
    + [
        ("construct.mold", "construct.pour"),
        ("construct.pour", "construct.demold"),
        ("construct.demold", "heat"),
        ("heat", "victory"),
    ]
)


class TestFullRun:
    """Test cases for autopilot runs from INTRO to VICTORY."""

    def test_autopilot_reaches_victory(self):
        """The autopilot drives a run to VICTORY."""
        # Arrange
        sim = Simulation(CONFIG, seed=42)
        changes = []
        sim.bus.subscribe(signals.STAGE_CHANGED,
                          lambda name, data: changes.append((data["old"], data["new"])))

        # Act
        final = Autopilot(CONFIG).drive(sim, max_ticks=5000)

        # Assert
        assert final.stage is Stage.VICTORY
        assert final.temperature == 100.0
        assert changes == EXPECTED_STAGES

    def test_layers_cure_in_order(self):
        """Rings cure from the innermost layer outward."""
        sim = Simulation(CONFIG, seed=8)
        cured = []

        def watch(snap):
            if snap.stage is Stage.CONSTRUCT:
                done = [s.id for s in snap.segments if s.state is SegmentState.CONCRETE]
                if done and (not cured or cured[-1] != done):
                    cured.append(done)

        sim.on_snapshot(watch)
        Autopilot(CONFIG).drive(sim, max_ticks=5000)

        assert cured == [[0], [0, 1], [0, 1, 2]]

    def test_actor_stays_contained_for_the_whole_run(self):
        """The actor never leaves the band during a full run."""
        sim = Simulation(CONFIG, seed=11)
        cx, cy = CONFIG.center
        outside = []

        def watch(snap):
            r = ((snap.actor.x - cx) ** 2 + (snap.actor.y - cy) ** 2) ** 0.5
            if not CONFIG.robot_min_radius - 1e-6 <= r <= CONFIG.robot_max_radius + 1e-6:
                outside.append(snap.tick_number)

        sim.on_snapshot(watch)
        Autopilot(CONFIG).drive(sim, max_ticks=5000)

        assert outside == []

    def test_same_seed_same_outcome(self):
        """Equal seeds replay to identical snapshots."""
        a = Autopilot(CONFIG).drive(Simulation(CONFIG, seed=21), max_ticks=5000)
        b = Autopilot(CONFIG).drive(Simulation(CONFIG, seed=21), max_ticks=5000)
        assert a.to_dict() == b.to_dict()

    def test_reset_then_replay(self):
        """A reset run replays to VICTORY like a fresh one."""
        sim = Simulation(CONFIG, seed=4)
        Autopilot(CONFIG).drive(sim, max_ticks=300)
        sim.reset()
        assert sim.snapshot.stage is Stage.INTRO

        final = Autopilot(CONFIG).drive(sim, max_ticks=5000)
        assert final.stage is Stage.VICTORY

    def test_tick_budget_stops_early(self):
        """The tick budget stops a run before it finishes."""
        final = Autopilot(CONFIG).drive(Simulation(CONFIG, seed=1), max_ticks=50)
        assert final.stage is Stage.DEMOLISH
        assert final.tick_number == 50

    def test_other_viewport(self):
        """A run on an 800x600 viewport reaches VICTORY."""
        config = SiteConfig.for_viewport(800, 600)
        final = Autopilot(config).drive(Simulation(config, seed=2), max_ticks=5000)
        assert final.stage is Stage.VICTORY


class TestCommandLine:
    """Test cases for the relining run command."""

    def test_run_exits_zero_on_victory(self, capsys):
        """relining run exits 0 when the run reaches VICTORY."""
        with pytest.raises(SystemExit) as exc:
            main(["run", "--seed", "3", "--max-ticks", "5000"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "heat -> victory" in out
        assert "Relined in" in out

    def test_run_exits_one_when_out_of_ticks(self, capsys):
        """relining run exits 1 when the tick budget runs out."""
        with pytest.raises(SystemExit) as exc:
            main(["run", "--max-ticks", "10"])
        assert exc.value.code == 1
        assert "Stopped in stage demolish" in capsys.readouterr().out

    def test_json_output(self, capsys):
        """--json prints the final snapshot as JSON."""
        with pytest.raises(SystemExit):
            main(["run", "--seed", "3", "--max-ticks", "20", "--json"])
        out = capsys.readouterr().out
        assert '"stage": "demolish"' in out

    def test_command_is_required(self):
        """Calling with no command exits with usage error 2."""
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2
