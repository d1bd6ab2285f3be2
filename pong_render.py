import numpy as np

from pong_engine import Config, EngineState

BG = (25, 25, 30)
NET = (70, 70, 80)
PADDLE = (0, 229, 168)
BALL = (255, 255, 255)
PAUSE_DIM = 0.55


def _fill_rect(img, x, y, w, h, color):
    H, W = img.shape[:2]
    x0, y0 = max(0, int(round(x))), max(0, int(round(y)))
    x1, y1 = min(W, int(round(x + w))), min(H, int(round(y + h)))
    if x0 < x1 and y0 < y1:
        img[y0:y1, x0:x1] = color


def render_rgb(state: EngineState, cfg: Config, scale=1):
    """Return an RGB image (H, W, 3) of the court for the current state."""
    W, H = int(cfg.width), int(cfg.height)
    img = np.zeros((H, W, 3), dtype=np.uint8)
    img[:] = BG
    for y in range(0, H, 20):  # dashed net: 12px dash, 8px gap
        img[y:y+12, W//2-1:W//2+1] = NET

    for paddle in (state.human, state.opponent):
        _fill_rect(img, paddle.x, paddle.y, cfg.paddle_w, cfg.paddle_h, PADDLE)

    # ball as a filled disc
    r = cfg.ball_radius
    yy, xx = np.ogrid[:H, :W]
    disc = (xx - state.ball.x) ** 2 + (yy - state.ball.y) ** 2 <= r * r
    img[disc] = BALL

    if state.paused:
        img = (img * PAUSE_DIM).astype(np.uint8)
    if scale != 1:
        img = np.repeat(np.repeat(img, scale, axis=0), scale, axis=1)
    return img
