"""
Headless Pong simulation: one human paddle on the left, one tracking opponent
on the right. No pygame dependency, so it can be stepped from tests or the CLI.

Usage:
    engine = SimulationEngine(Config(), seed=1)
    event = engine.step(dt, InputSample(up=True))
"""
import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Side(Enum):
    HUMAN = "human"        # left paddle
    OPPONENT = "opponent"  # right paddle

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.HUMAN else Side.HUMAN


# -----------------------------
# Config dataclass
# -----------------------------
@dataclass
class Config:
    width: float = 800
    height: float = 500
    paddle_w: float = 12
    paddle_h: float = 100
    paddle_inset: float = 12   # distance from the side walls
    ball_radius: float = 8
    initial_ball_speed: float = 5
    ball_speed_increment: float = 0.25
    max_ball_speed: float = 12
    max_bounce_angle: float = math.pi / 3    # 60 degrees
    launch_half_angle: float = math.pi / 8   # serves leave within +/-22.5 degrees
    human_speed: float = 6
    opponent_speed: float = 5
    opponent_dead_zone: float = 4
    bounce_nudge: float = 0.5
    serve_to_scorer: bool = False
    scale_by_elapsed: bool = False
    reference_rate: float = 60.0
    max_elapsed: float = 0.25   # longer frames are simulated as this long

    def __post_init__(self):
        for name in ("width", "height", "paddle_w", "paddle_h", "ball_radius", "reference_rate",
                     "max_elapsed"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("paddle_inset", "ball_speed_increment", "human_speed",
                     "opponent_speed", "opponent_dead_zone", "bounce_nudge",
                     "max_bounce_angle", "launch_half_angle"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.paddle_h > self.height:
            raise ValueError(f"paddle_h {self.paddle_h} does not fit playfield height {self.height}")
        if 2 * (self.paddle_inset + self.paddle_w) >= self.width:
            raise ValueError(f"paddles do not fit playfield width {self.width}")
        if not 0 < self.initial_ball_speed <= self.max_ball_speed:
            raise ValueError(
                f"initial_ball_speed must be in (0, max_ball_speed], got "
                f"{self.initial_ball_speed} with max {self.max_ball_speed}")

    @property
    def max_paddle_y(self) -> float:
        return self.height - self.paddle_h


# -----------------------------
# Entities
# -----------------------------
@dataclass
class Paddle:
    side: Side
    x: float
    y: float
    speed: float  # max movement per step

    def center(self, paddle_h: float) -> float:
        return self.y + paddle_h / 2


@dataclass
class Ball:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 0.0


@dataclass
class ScoreBoard:
    human: int = 0
    opponent: int = 0

    def add(self, side: Side) -> int:
        if side is Side.HUMAN:
            self.human += 1
            return self.human
        self.opponent += 1
        return self.opponent

    def clear(self):
        self.human = 0
        self.opponent = 0


@dataclass(frozen=True)
class InputSample:
    """One frame of human input. pointer_y, when set, wins over up/down."""
    up: bool = False
    down: bool = False
    pointer_y: Optional[float] = None


@dataclass(frozen=True)
class ScoreEvent:
    scorer: Side
    human_score: int
    opponent_score: int


@dataclass
class EngineState:
    human: Paddle
    opponent: Paddle
    ball: Ball
    scores: ScoreBoard = field(default_factory=ScoreBoard)
    paused: bool = False


# -----------------------------
# Geometry helpers
# -----------------------------
def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def circle_hits_rect(cx, cy, radius, rx, ry, rw, rh) -> bool:
    # nearest point on the rectangle to the circle center
    nearest_x = clamp(cx, rx, rx + rw)
    nearest_y = clamp(cy, ry, ry + rh)
    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy <= radius * radius


def bounce_velocity(relative, speed, direction, max_angle):
    """Velocity leaving a paddle.

    relative is the hit offset from the paddle center in half-heights
    (-1 top edge .. 1 bottom edge); direction is +1 for the left paddle
    and -1 for the right one.
    """
    angle = relative * max_angle
    return direction * speed * math.cos(angle), speed * math.sin(angle)


def track_target(paddle_center, target_y, max_step, dead_zone):
    """Signed move for a paddle chasing target_y, capped at max_step."""
    delta = target_y - paddle_center
    if abs(delta) <= dead_zone:
        return 0.0
    return clamp(delta, -max_step, max_step)


# -----------------------------
# Engine
# -----------------------------
class SimulationEngine:
    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None, seed=None):
        self.cfg = config or Config()
        self.rng = rng or random.Random(seed)
        cfg = self.cfg
        start_y = (cfg.height - cfg.paddle_h) / 2
        self.state = EngineState(
            human=Paddle(Side.HUMAN, cfg.paddle_inset, start_y, cfg.human_speed),
            opponent=Paddle(Side.OPPONENT, cfg.width - cfg.paddle_inset - cfg.paddle_w,
                            start_y, cfg.opponent_speed),
            ball=Ball(cfg.width / 2, cfg.height / 2, speed=cfg.initial_ball_speed),
        )
        self.reset()

    def reset(self, toward: Optional[Side] = None):
        """Serve from the center; toward=None picks a side at random."""
        cfg = self.cfg
        ball = self.state.ball
        if toward is None:
            toward = Side.OPPONENT if self.rng.random() >= 0.5 else Side.HUMAN
        ball.x = cfg.width / 2
        ball.y = cfg.height / 2
        ball.speed = cfg.initial_ball_speed
        angle = self.rng.uniform(-cfg.launch_half_angle, cfg.launch_half_angle)
        sign = 1 if toward is Side.OPPONENT else -1
        ball.vx = sign * ball.speed * math.cos(angle)
        ball.vy = ball.speed * math.sin(angle)
        logger.debug("Ball served toward %s at %.1f deg", toward.value, math.degrees(angle))

    def request_reset(self):
        self.state.scores.clear()
        self.reset()
        logger.info("Scores cleared, new rally")

    def toggle_pause(self) -> bool:
        self.state.paused = not self.state.paused
        logger.info("Paused" if self.state.paused else "Resumed")
        return self.state.paused

    def step(self, elapsed: float, sample: Optional[InputSample] = None) -> Optional[ScoreEvent]:
        if self.state.paused:
            return None
        cfg = self.cfg
        s = self.state
        k = self._scale(elapsed)

        self._move_human(sample or InputSample(), k)

        # opponent: follow the ball, never faster than its own speed
        opp = s.opponent
        opp.y += track_target(opp.center(cfg.paddle_h), s.ball.y, opp.speed * k, cfg.opponent_dead_zone)
        opp.y = clamp(opp.y, 0, cfg.max_paddle_y)

        # ball moves in slices of at most one reference frame so it cannot skip a paddle
        slices = max(1, math.ceil(k))
        for _ in range(slices):
            event = self._advance_ball(k / slices)
            if event:
                return event
        return None

    def _advance_ball(self, k: float) -> Optional[ScoreEvent]:
        cfg = self.cfg
        s = self.state
        ball = s.ball
        ball.x += ball.vx * k
        ball.y += ball.vy * k

        # top/bottom walls
        r = cfg.ball_radius
        if ball.y - r < 0:
            ball.y = r
            ball.vy = -ball.vy
        elif ball.y + r > cfg.height:
            ball.y = cfg.height - r
            ball.vy = -ball.vy

        # paddles, left first
        if ball.x - r < s.human.x + cfg.paddle_w and self._touches(s.human):
            self._bounce(s.human)
        if ball.x + r > s.opponent.x and self._touches(s.opponent):
            self._bounce(s.opponent)

        # score: ball fully past a side wall
        if ball.x + r < 0:
            return self._score(Side.OPPONENT)
        if ball.x - r > cfg.width:
            return self._score(Side.HUMAN)
        return None

    def _scale(self, elapsed):
        if not self.cfg.scale_by_elapsed:
            return 1.0
        if elapsed is None or not math.isfinite(elapsed) or elapsed < 0:
            return 0.0
        return min(elapsed, self.cfg.max_elapsed) * self.cfg.reference_rate

    def _move_human(self, sample: InputSample, k: float):
        cfg = self.cfg
        paddle = self.state.human
        pointer = sample.pointer_y
        if pointer is not None and math.isfinite(pointer):
            paddle.y = pointer - cfg.paddle_h / 2
        elif sample.up:
            paddle.y -= paddle.speed * k
        elif sample.down:
            paddle.y += paddle.speed * k
        paddle.y = clamp(paddle.y, 0, cfg.max_paddle_y)

    def _touches(self, paddle: Paddle) -> bool:
        cfg = self.cfg
        ball = self.state.ball
        return circle_hits_rect(ball.x, ball.y, cfg.ball_radius,
                                paddle.x, paddle.y, cfg.paddle_w, cfg.paddle_h)

    def _bounce(self, paddle: Paddle):
        cfg = self.cfg
        ball = self.state.ball
        half = cfg.paddle_h / 2
        relative = clamp((ball.y - paddle.center(cfg.paddle_h)) / half, -1.0, 1.0)
        ball.speed = min(cfg.max_ball_speed, ball.speed + cfg.ball_speed_increment)
        direction = 1 if paddle.side is Side.HUMAN else -1
        ball.vx, ball.vy = bounce_velocity(relative, ball.speed, direction, cfg.max_bounce_angle)
        # nudge out so the next step does not hit again
        if direction > 0:
            ball.x = paddle.x + cfg.paddle_w + cfg.ball_radius + cfg.bounce_nudge
        else:
            ball.x = paddle.x - cfg.ball_radius - cfg.bounce_nudge

    def _score(self, scorer: Side) -> ScoreEvent:
        scores = self.state.scores
        scores.add(scorer)
        event = ScoreEvent(scorer, scores.human, scores.opponent)
        logger.debug("Point to %s (%d-%d)", scorer.value, scores.human, scores.opponent)
        self.reset(scorer if self.cfg.serve_to_scorer else scorer.other)
        return event
