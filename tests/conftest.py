"""Shared pytest fixtures for the Pong engine tests."""

import pytest

from pong_engine import Config, SimulationEngine


@pytest.fixture
def cfg() -> Config:
    """Default 800x500 court."""
    return Config()


@pytest.fixture
def engine(cfg) -> SimulationEngine:
    """Engine with a fixed seed so serves are reproducible."""
    return SimulationEngine(cfg, seed=7)


@pytest.fixture
def place_ball(engine):
    """Put the ball at (x, y) with velocity (vx, vy)."""

    def _place(x, y, vx, vy, speed=None):
        ball = engine.state.ball
        ball.x, ball.y, ball.vx, ball.vy = x, y, vx, vy
        ball.speed = speed if speed is not None else (vx * vx + vy * vy) ** 0.5
        return ball

    return _place
