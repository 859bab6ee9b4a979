import logging
import os
import sys

import pygame
from tetris_config import CONFIG
from tetris_engine import (Engine, Start, Reset, Pause, Resume, Move, SoftDrop,
                           HardDrop, Rotate, Hold, HydrateHighScore, RUNNING, PAUSED)
from tetris_scheduler import Scheduler
from tetris_highscore import HighScoreStore
from tetris_input import ShiftRepeat, DropRepeat
from tetris_layout import compute_dims
from tetris_render import RenderAssets

KEY_ACTIONS = {
    pygame.K_UP: Rotate("CW"),
    pygame.K_x: Rotate("CW"),
    pygame.K_z: Rotate("CCW"),
    pygame.K_a: Rotate("180"),
    pygame.K_c: Hold(),
    pygame.K_LSHIFT: Hold(),
    pygame.K_RSHIFT: Hold(),
    pygame.K_SPACE: HardDrop(),
    pygame.K_RETURN: Start(),
    pygame.K_KP_ENTER: Start(),
    pygame.K_r: Reset(),
}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def pause_toggle(engine):
    if engine.state.status == RUNNING: return Pause()
    if engine.state.status == PAUSED: return Resume()
    return None


def main():
    logging.basicConfig(level=os.environ.get("TETRIS_LOG", "WARNING").upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris - 7-bag, SRS, hold, T-spins")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    engine = Engine(seed=CONFIG["SEED"])
    store = HighScoreStore()
    engine.dispatch(HydrateHighScore(store.load()))
    engine.subscribe(store.observe)

    scheduler = Scheduler()
    shift = ShiftRepeat()
    drop = DropRepeat()

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                action = pause_toggle(engine) if e.key == pygame.K_p else KEY_ACTIONS.get(e.key)
                if action is not None:
                    engine.dispatch(action)

        # Held keys: horizontal auto-shift and soft drop
        keys = pygame.key.get_pressed()
        step = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
        if step:
            engine.dispatch(Move(step))
        if drop.update(dt, keys[pygame.K_DOWN]):
            engine.dispatch(SoftDrop())

        for action in scheduler.update(engine.state, dt):
            engine.dispatch(action)

        render.draw(screen, engine.state)
        pygame.display.flip()


if __name__ == '__main__':
    main()
