"""Tests for the headless runner."""

from pong_engine import InputSample, Side
from pong_sim import autopilot, main, run


class TestAutopilot:
    """Tests for autopilot()."""

    def test_chases_up(self, engine, cfg, place_ball):
        place_ball(400, 100, 0, 0)
        assert autopilot(engine.state, cfg) == InputSample(up=True)

    def test_chases_down(self, engine, cfg, place_ball):
        place_ball(400, 400, 0, 0)
        assert autopilot(engine.state, cfg) == InputSample(down=True)

    def test_waits_inside_band(self, engine, cfg, place_ball):
        place_ball(400, 265, 0, 0)
        assert autopilot(engine.state, cfg, lag=20) == InputSample()


class TestRun:
    """Tests for run() and the CLI."""

    def test_collects_score_event(self, engine, place_ball):
        engine.state.opponent.y = 400
        place_ball(805, 20, 5, 0)
        events = run(engine, steps=1)
        assert [e.scorer for e in events] == [Side.HUMAN]

    def test_stops_at_points(self, engine, place_ball):
        """Reaching the target score ends the run early."""
        engine.state.opponent.y = 400
        place_ball(805, 20, 5, 0)
        events = run(engine, steps=500, points=1)
        assert len(events) == 1
        assert engine.state.scores.human == 1

    def test_events_match_scoreboard(self, engine):
        events = run(engine, steps=5000, lag=40)
        scores = engine.state.scores
        assert len(events) == scores.human + scores.opponent
        if events:
            assert (events[-1].human_score, events[-1].opponent_score) == (scores.human, scores.opponent)

    def test_cli_short_run(self, capsys):
        """50 frames is too short for anyone to score."""
        assert main(["--steps", "50", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Points played: 0" in out
        assert "Player 0 - 0 Computer" in out
