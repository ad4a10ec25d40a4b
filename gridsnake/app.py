"""Window, start screen and the main event loop."""

import logging
import random
from typing import Optional

import pygame

from .audio import EatTone
from .config import (
    BOARD_HEIGHT, BOARD_WIDTH, FPS, GRID_HEIGHT, GRID_WIDTH, MAX_NAME_LENGTH,
    PANEL_WIDTH, TICK_INTERVAL_MS, WINDOW_HEIGHT, WINDOW_WIDTH,
)
from .grid import DOWN, LEFT, RIGHT, UP, is_reverse, move
from .render import (
    draw_board, draw_notice, draw_scoreboard, draw_start_screen, load_fonts,
    start_screen_layout,
)
from .session import TICK_EVENT, Phase, Session, TickTimer
from .state import GameState

logger = logging.getLogger(__name__)

DIRECTION_KEY_NAMES = {UP: 'up', DOWN: 'down', LEFT: 'left', RIGHT: 'right'}


class App:
    """Main game window"""

    def __init__(self, player_name: str = "", tick_ms: int = TICK_INTERVAL_MS,
                 seed: Optional[int] = None, mute: bool = False):
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.fonts = load_fonts()

        self.session = Session(
            GRID_WIDTH, GRID_HEIGHT,
            timer=TickTimer(tick_ms),
            sound=EatTone(enabled=not mute),
            rng=random.Random(seed),
        )
        self.name_text = player_name[:MAX_NAME_LENGTH]
        self.notice_open = False
        self.elapsed = 0.0

        # Last rendered board; stays on screen under the game-over notice
        self.frame = pygame.Surface((BOARD_WIDTH + PANEL_WIDTH, BOARD_HEIGHT))

    def start_game(self):
        self.name_text = self.session.start(self.name_text)
        self.notice_open = False

    def handle_events(self) -> bool:
        """Dispatch queued events, return False to quit"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            if event.type == TICK_EVENT:
                result = self.session.tick()
                if result is not None and result.collided:
                    self.notice_open = True
                continue

            if self.session.running:
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return False
                    self.session.handle_key(event.key)
            elif self.notice_open:
                if event.type == pygame.KEYDOWN and event.key in (
                        pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_ESCAPE):
                    self.notice_open = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.notice_open = False
            else:
                if not self.handle_start_screen_event(event):
                    return False

        return True

    def handle_start_screen_event(self, event: pygame.event.Event) -> bool:
        """Name typing and the start button"""
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.start_game()
            elif event.key == pygame.K_BACKSPACE:
                self.name_text = self.name_text[:-1]
            elif event.unicode and event.unicode.isprintable() and len(self.name_text) < MAX_NAME_LENGTH:
                self.name_text += event.unicode
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            _input_rect, button_rect = start_screen_layout(self.screen.get_size())
            if button_rect.collidepoint(event.pos):
                self.start_game()
        return True

    def draw(self):
        session = self.session
        if session.running:
            draw_board(self.frame, session.state)
            draw_scoreboard(self.frame, self.fonts, session.player_name, session.score)
            self.screen.blit(self.frame, (0, 0))
        elif self.notice_open:
            self.screen.blit(self.frame, (0, 0))
            draw_notice(self.screen, self.fonts, "Game over", [
                session.message,
                "Press Enter or click to continue",
            ])
        else:
            cursor_visible = int(self.elapsed * 2) % 2 == 0
            draw_start_screen(self.screen, self.fonts, self.name_text, cursor_visible)

        pygame.display.flip()

    def run(self):
        """Main game loop"""
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            self.elapsed += dt

            running = self.handle_events()
            if running:
                self.draw()

        self.session.timer.stop()
        pygame.quit()


def autopilot_key(state: GameState) -> Optional[str]:
    """Key name that steers toward the food without an immediate self-hit"""
    best = None
    best_dist = None
    for direction in (state.direction, UP, RIGHT, DOWN, LEFT):
        if is_reverse(direction, state.direction):
            continue
        nxt = move(state.head, direction, state.width, state.height)
        if nxt in state.snake:
            continue
        dist = 0
        if state.food is not None:
            dx = abs(nxt[0] - state.food[0])
            dy = abs(nxt[1] - state.food[1])
            dist = min(dx, state.width - dx) + min(dy, state.height - dy)
        if best_dist is None or dist < best_dist:
            best, best_dist = direction, dist
    if best is None or best == state.direction:
        return None
    return DIRECTION_KEY_NAMES[best]


def run_headless(ticks: int = 500, name: str = "", seed: Optional[int] = None) -> Session:
    """Play without a window, drawing each frame off-screen"""
    session = Session(GRID_WIDTH, GRID_HEIGHT, timer=TickTimer(), sound=None,
                      rng=random.Random(seed))
    fonts = load_fonts()
    frame = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))

    session.start(name)
    for _ in range(ticks):
        key = autopilot_key(session.state)
        if key is not None:
            session.handle_key(key)
        session.tick()
        draw_board(frame, session.state)
        draw_scoreboard(frame, fonts, session.player_name, session.score)
        if not session.running:
            break

    if session.running:
        session.end()
    return session
