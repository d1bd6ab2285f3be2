"""
Headless Pong runs: the human paddle is driven by a simple autopilot so the
engine can be exercised without a window.

Usage:
- python pong_sim.py --steps 5000          # run a fixed number of frames
- python pong_sim.py --points 5 --seed 3   # stop once either side reaches 5
"""
import argparse
import logging

from pong_engine import Config, InputSample, SimulationEngine

logger = logging.getLogger(__name__)

FRAME_DT = 1 / 60


def autopilot(state, cfg, lag=0.0):
    """Up/down intent chasing the ball; lag widens the band where it waits."""
    center = state.human.center(cfg.paddle_h)
    band = cfg.opponent_dead_zone + lag
    if state.ball.y < center - band:
        return InputSample(up=True)
    if state.ball.y > center + band:
        return InputSample(down=True)
    return InputSample()


def run(engine, steps=10_000, points=None, lag=0.0):
    """Step the engine; returns the list of score events in order."""
    events = []
    for _ in range(steps):
        ev = engine.step(FRAME_DT, autopilot(engine.state, engine.cfg, lag))
        if ev is None:
            continue
        events.append(ev)
        logger.info("Point %d to %s (%d-%d)", len(events), ev.scorer.value, ev.human_score, ev.opponent_score)
        if points and max(ev.human_score, ev.opponent_score) >= points:
            break
    return events


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run Pong headlessly.")
    parser.add_argument("--steps", type=int, default=10_000)
    parser.add_argument("--points", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--lag", type=float, default=20.0,
                        help="autopilot slack in pixels; higher loses more points")
    parser.add_argument("--serve-to-scorer", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    engine = SimulationEngine(Config(serve_to_scorer=args.serve_to_scorer), seed=args.seed)
    events = run(engine, steps=args.steps, points=args.points, lag=args.lag)

    scores = engine.state.scores
    print(f"Points played: {len(events)}")
    print(f"Player {scores.human} - {scores.opponent} Computer")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
