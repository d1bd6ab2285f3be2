"""Tests for the numpy court renderer."""

import numpy as np

from pong_render import BALL, BG, PADDLE, render_rgb


class TestRenderRgb:
    """Tests for render_rgb()."""

    def test_shape_and_dtype(self, engine, cfg):
        img = render_rgb(engine.state, cfg)
        assert img.shape == (500, 800, 3)
        assert img.dtype == np.uint8

    def test_scaled(self, engine, cfg):
        assert render_rgb(engine.state, cfg, scale=2).shape == (1000, 1600, 3)

    def test_draws_paddles_and_ball(self, engine, cfg):
        """Paddle and ball pixels should carry their colors."""
        img = render_rgb(engine.state, cfg)
        assert tuple(img[250, 15]) == PADDLE
        assert tuple(img[250, 780]) == PADDLE
        assert tuple(img[250, 400]) == BALL
        assert tuple(img[5, 100]) == BG

    def test_paddle_moves_with_state(self, engine, cfg):
        engine.state.human.y = 0
        img = render_rgb(engine.state, cfg)
        assert tuple(img[50, 15]) == PADDLE
        assert tuple(img[250, 15]) == BG

    def test_paused_is_dimmed(self, engine, cfg):
        """The paused frame should be darker everywhere it is not black."""
        running = render_rgb(engine.state, cfg)
        engine.toggle_pause()
        paused = render_rgb(engine.state, cfg)
        assert (paused[5, 100] < running[5, 100]).all()
        assert (paused <= running).all()

    def test_does_not_mutate_state(self, engine, cfg):
        before = (engine.state.ball.x, engine.state.human.y)
        render_rgb(engine.state, cfg)
        assert (engine.state.ball.x, engine.state.human.y) == before
