#!/usr/bin/env python3
"""
flappy_client.py

pygame window, input mapping and rendering around the GameEngine.
The renderer only reads engine state; all mutation goes through tap() and step().
"""

import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional, Tuple

import pygame

from .audio import AudioSink, SilentAudio, SoundBank
from .constants import (
    BIRD_RADIUS, DB_FILE, FPS, GROUND_HEIGHT, GROUND_TILE_WIDTH, GROUND_Y, OVER_INPUT_DELAY_FRAMES,
    PIPE_HEIGHT, PIPE_WIDTH, PLAY_BUTTON, SCORE_BUTTON, SCREEN_HEIGHT, SCREEN_WIDTH
)
from .data_models import ScreenState, Session
from .engine import GameEngine
from .log_setup import setup_logging
from .scheduler import Scheduler
from .score_db import ScoreDatabase

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SKY_COLORS = [(112, 197, 206), (0, 135, 147)]          # day, night
BIRD_BODY_COLORS = [(250, 200, 40), (80, 170, 230), (230, 70, 50)]
PIPE_COLOR = (115, 191, 46)
PIPE_EDGE_COLOR = (84, 56, 71)
GROUND_COLOR = (222, 216, 149)
GRASS_COLOR = (94, 190, 57)
BUTTON_COLOR = (232, 97, 1)
PANEL_COLOR = (222, 216, 149)


# ----------------- Input -----------------

class InputMapper:
    """Converts window and touch coordinates into game space."""

    def __init__(self, window_size: Tuple[int, int]):
        self.window_size = window_size

    def to_game(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        width, height = self.window_size
        return pos[0] * SCREEN_WIDTH / width, pos[1] * SCREEN_HEIGHT / height

    @staticmethod
    def from_touch(fx: float, fy: float) -> Tuple[float, float]:
        """Touch events report positions normalized to 0..1."""
        return fx * SCREEN_WIDTH, fy * SCREEN_HEIGHT

    def taps(self, events: List[pygame.event.Event]) -> List[Tuple[float, float]]:
        taps = []
        for event in events:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                # Touches already arrive as FINGERDOWN
                if getattr(event, "touch", False):
                    continue
                taps.append(self.to_game(event.pos))
            elif event.type == pygame.FINGERDOWN:
                taps.append(self.from_touch(event.x, event.y))
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_UP):
                # Keyboard taps land on the play button so they work on every screen
                taps.append((PLAY_BUTTON[0], PLAY_BUTTON[1]))
        return taps


# ----------------- Rendering -----------------

class Renderer:
    """Draws a Session with pygame primitives onto a game-sized surface."""

    def __init__(self):
        self.surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 20)

    def draw(self, session: Session, fade_opacity: float) -> pygame.Surface:
        screen = self.surface
        if session.screen is ScreenState.SPLASH:
            screen.fill(BLACK)
            self._text("FLAPPY", self.large_font, SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2, WHITE)
        else:
            screen.fill(SKY_COLORS[session.background])
            self._draw_pipes(session)
            self._draw_ground(session)
            self._draw_bird(session)
            self._draw_ui(session)

        if session.notice:
            self._text(session.notice, self.small_font, SCREEN_WIDTH // 2, 470, WHITE)

        self._fill_overlay(WHITE, session.flash_opacity)
        self._fill_overlay(BLACK, fade_opacity)
        return screen

    def _fill_overlay(self, color, opacity: float):
        if opacity <= 0:
            return
        self.overlay.fill((*color, int(255 * min(opacity, 1.0))))
        self.surface.blit(self.overlay, (0, 0))

    def _text(self, text: str, font: pygame.font.Font, cx: int, cy: int, color):
        surf = font.render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=(cx, cy)))

    def _draw_pipes(self, session: Session):
        for pipe in session.pipes:
            top = pygame.Rect(int(pipe.x), int(pipe.gap_y) - PIPE_HEIGHT, PIPE_WIDTH, PIPE_HEIGHT)
            bottom = pygame.Rect(int(pipe.x), int(pipe.gap_bottom), PIPE_WIDTH, PIPE_HEIGHT)
            for rect in (top, bottom):
                pygame.draw.rect(self.surface, PIPE_COLOR, rect)
                pygame.draw.rect(self.surface, PIPE_EDGE_COLOR, rect, 2)

    def _draw_ground(self, session: Session):
        for offset in (0, GROUND_TILE_WIDTH):
            x = int(session.ground_x) + offset
            pygame.draw.rect(self.surface, GROUND_COLOR, (x, GROUND_Y, GROUND_TILE_WIDTH, GROUND_HEIGHT))
            for stripe in range(0, GROUND_TILE_WIDTH, 12):
                pygame.draw.line(self.surface, GRASS_COLOR, (x + stripe, GROUND_Y + 12),
                                 (x + stripe + 8, GROUND_Y), 3)

    def _draw_bird(self, session: Session):
        bird = session.bird
        size = BIRD_RADIUS * 5
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        center = size // 2
        body = pygame.Rect(0, 0, int(BIRD_RADIUS * 3.4), int(BIRD_RADIUS * 2.6))
        body.center = (center, center)
        pygame.draw.ellipse(sprite, BIRD_BODY_COLORS[session.bird_color], body)
        pygame.draw.ellipse(sprite, BLACK, body, 1)

        # Wing rises, levels and drops with the animation frame
        wing_y = center + (bird.animation_frame - 1) * 4
        pygame.draw.ellipse(sprite, WHITE, (center - 11, wing_y - 3, 10, 6))
        pygame.draw.circle(sprite, WHITE, (center + 6, center - 4), 4)
        pygame.draw.circle(sprite, BLACK, (center + 7, center - 4), 2)
        pygame.draw.polygon(sprite, (240, 90, 40),
                            [(center + 8, center), (center + 16, center + 2), (center + 8, center + 5)])

        # Screen y grows downward, so positive rotation is clockwise
        rotated = pygame.transform.rotate(sprite, -bird.rotation)
        self.surface.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))

    def _draw_button(self, spec, label: str):
        x, y, w, h = spec
        rect = pygame.Rect(0, 0, w, h)
        rect.center = (x, y)
        pygame.draw.rect(self.surface, WHITE, rect, border_radius=6)
        pygame.draw.rect(self.surface, BUTTON_COLOR, rect.inflate(-8, -8), border_radius=4)
        self._text(label, self.font, x, y, WHITE)

    def _draw_ui(self, session: Session):
        mid = SCREEN_WIDTH // 2
        if session.screen is ScreenState.MENU:
            self._text("Flappy Bird", self.large_font, mid, 100, WHITE)
            self._draw_button(PLAY_BUTTON, "PLAY")
            self._draw_button(SCORE_BUTTON, "SCORE")
        elif session.screen is ScreenState.READY:
            self._text("Get Ready", self.large_font, mid, 150, WHITE)
            self._text("Tap to flap", self.font, mid, 250, WHITE)
            self._text(str(session.score), self.large_font, mid, 50, WHITE)
        elif session.screen is ScreenState.OVER:
            self._text("Game Over", self.large_font, mid, 150, WHITE)
            if session.frame > OVER_INPUT_DELAY_FRAMES:
                panel = pygame.Rect(0, 0, 226, 114)
                panel.center = (mid, 250)
                pygame.draw.rect(self.surface, PANEL_COLOR, panel, border_radius=8)
                pygame.draw.rect(self.surface, PIPE_EDGE_COLOR, panel, 2, border_radius=8)
                self._text(f"Score  {session.score}", self.font, mid, 231, BLACK)
                self._text(f"Best  {session.best_score}", self.font, mid, 273, BLACK)
                if session.is_new_best:
                    self._text("NEW", self.small_font, mid + 80, 250, (230, 70, 50))
                self._draw_button(PLAY_BUTTON, "PLAY")
                self._draw_button(SCORE_BUTTON, "SCORE")
        else:
            self._text(str(session.score), self.large_font, mid, 50, WHITE)


# ----------------- Game Client -----------------

class FlappyClient:
    def __init__(self, engine: GameEngine, scale: float = 1.0):
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        pygame.init()
        self.engine = engine
        size = (int(SCREEN_WIDTH * scale), int(SCREEN_HEIGHT * scale))
        self.window = pygame.display.set_mode(size)
        pygame.display.set_caption("Flappy Bird")
        self.input = InputMapper(size)
        self.renderer = Renderer()
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        self.engine.start()
        running = True
        while running:
            self.clock.tick(FPS)

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            for x, y in self.input.taps(events):
                self.engine.tap(x, y)

            self.engine.scheduler.poll()
            self.engine.step()
            self._present()

        pygame.quit()

    def _present(self):
        frame = self.renderer.draw(self.engine.session, self.engine.fade.opacity)
        if frame.get_size() != self.window.get_size():
            frame = pygame.transform.scale(frame, self.window.get_size())
        self.window.blit(frame, (0, 0))
        pygame.display.flip()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Bird.")
    parser.add_argument("--seed", type=int, help="Random seed for pipes and bird colors.")
    parser.add_argument("--db", default=DB_FILE, help=f"Best score database (default: {DB_FILE}).")
    parser.add_argument("--scale", type=float, default=1.5, help="Window scale factor.")
    parser.add_argument("--assets", type=Path, default=Path("assets/sounds"),
                        help="Directory holding sfx_<name>.ogg files.")
    parser.add_argument("--mute", action="store_true", help="Disable sound.")
    parser.add_argument("--reset-best", action="store_true", help="Reset the best score to 0 and exit.")
    parser.add_argument("--log-level", default="info", help="Logging level.")
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    store = ScoreDatabase(args.db)
    if args.reset_best:
        store.reset_best_score()
        logger.info("High score reset to 0")
        store.close()
        return

    audio: AudioSink = SilentAudio()
    if not args.mute:
        pygame.mixer.pre_init(44100, -16, 2, 512)
        bank = SoundBank()
        bank.load_directory(args.assets)
        audio = bank

    engine = GameEngine(store=store, audio=audio, scheduler=Scheduler(),
                        rng=random.Random(args.seed))
    try:
        FlappyClient(engine, scale=args.scale).run()
    finally:
        store.close()


if __name__ == "__main__":
    main()
