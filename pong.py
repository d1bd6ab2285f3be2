import argparse
import logging

import pygame

from pong_engine import Config, InputSample, SimulationEngine
from pong_render import render_rgb

FPS = 60
TOOLBAR_H = 44
FONT_NAME = "arial"

WHITE = (240, 240, 240)
DIM = (150, 150, 165)
BAR_BG = (18, 18, 22)
BUTTON = (45, 45, 55)

logger = logging.getLogger(__name__)


def court_pointer(y, height):
    """Window y as a paddle target, or None when it is off the court."""
    return y if 0 <= y < height else None


def read_input(pointer_y):
    keys = pygame.key.get_pressed()
    return InputSample(
        up=bool(keys[pygame.K_UP] or keys[pygame.K_w]),
        down=bool(keys[pygame.K_DOWN] or keys[pygame.K_s]),
        pointer_y=pointer_y,
    )


def draw_hud(surface, state, cfg, font_big, font_small):
    w = cfg.width
    for score, label, cx in ((state.scores.human, "Player", w * 0.25),
                             (state.scores.opponent, "Computer", w * 0.75)):
        num = font_big.render(str(score), True, WHITE)
        surface.blit(num, (cx - num.get_width() // 2, 20))
        tag = font_small.render(label, True, DIM)
        surface.blit(tag, (cx - tag.get_width() // 2, 54))
    if state.paused:
        text = font_big.render("Paused", True, WHITE)
        surface.blit(text, (w // 2 - text.get_width() // 2, cfg.height // 2 - text.get_height() // 2))


def draw_button(surface, rect, label, font):
    pygame.draw.rect(surface, BUTTON, rect, border_radius=6)
    text = font.render(label, True, WHITE)
    surface.blit(text, text.get_rect(center=rect.center))


def game(cfg, seed=None):
    pygame.init()
    width, height = int(cfg.width), int(cfg.height)
    screen = pygame.display.set_mode((width, height + TOOLBAR_H))
    pygame.display.set_caption("Pong")
    clock = pygame.time.Clock()
    font_small = pygame.font.SysFont(FONT_NAME, 16)
    font_big = pygame.font.SysFont(FONT_NAME, 30)

    engine = SimulationEngine(cfg, seed=seed)
    reset_btn = pygame.Rect(12, height + 7, 90, 30)
    pause_btn = pygame.Rect(112, height + 7, 90, 30)
    pointer_y = None

    try:
        while True:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return
                    if event.key in (pygame.K_SPACE, pygame.K_p):
                        engine.toggle_pause()
                    elif event.key == pygame.K_r:
                        engine.request_reset()
                elif event.type == pygame.MOUSEMOTION:
                    pointer_y = court_pointer(event.pos[1], height)
                elif event.type == pygame.WINDOWLEAVE:
                    pointer_y = None
                elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
                    # finger y is normalized to the whole window, toolbar included
                    pointer_y = court_pointer(event.y * (height + TOOLBAR_H), height)
                elif event.type == pygame.FINGERUP:
                    pointer_y = None
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if reset_btn.collidepoint(event.pos):
                        engine.request_reset()
                    elif pause_btn.collidepoint(event.pos):
                        engine.toggle_pause()

            scored = engine.step(dt, read_input(pointer_y))
            if scored:
                logger.info("Score %d - %d", scored.human_score, scored.opponent_score)

            # Draw
            state = engine.state
            frame = render_rgb(state, cfg)
            screen.blit(pygame.surfarray.make_surface(frame.swapaxes(0, 1)), (0, 0))
            draw_hud(screen, state, cfg, font_big, font_small)
            pygame.draw.rect(screen, BAR_BG, (0, height, width, TOOLBAR_H))
            draw_button(screen, reset_btn, "Reset", font_small)
            draw_button(screen, pause_btn, "Resume" if state.paused else "Pause", font_small)
            info = font_small.render("Up/Down or mouse: move | Space: pause | R: reset", True, DIM)
            screen.blit(info, (220, height + 13))

            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Pong against the computer.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=500)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--serve-to-scorer", action="store_true")
    parser.add_argument("--scale-by-elapsed", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    cfg = Config(width=args.width, height=args.height,
                 serve_to_scorer=args.serve_to_scorer, scale_by_elapsed=args.scale_by_elapsed)
    game(cfg, seed=args.seed)


if __name__ == "__main__":
    main()
