"""
Drawing routines.

Every function here only reads the game state and paints onto the surface it
is given, so drawing the same state twice gives the same pixels.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pygame

from .config import (
    BOARD_BG, BUTTON_COLOR, BUTTON_TEXT_COLOR, CELL_SIZE, FOOD_COLOR, FOOD_INSET,
    INPUT_ACTIVE_BORDER, INPUT_BG, MUTED_TEXT_COLOR, NOTICE_BG, PANEL_BG,
    PANEL_WIDTH, SEGMENT_INSET, SNAKE_HUE, SNAKE_LIGHTNESS_HEAD,
    SNAKE_LIGHTNESS_SPAN, SNAKE_SATURATION, TEXT_COLOR,
)
from .state import GameState


@dataclass
class Fonts:
    large: pygame.font.Font
    medium: pygame.font.Font
    small: pygame.font.Font


def load_fonts() -> Fonts:
    """Load the default font, falling back to a system font"""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return Fonts(
            large=pygame.font.Font(None, 56),
            medium=pygame.font.Font(None, 36),
            small=pygame.font.Font(None, 26),
        )
    except pygame.error:
        return Fonts(
            large=pygame.font.SysFont('arial', 56),
            medium=pygame.font.SysFont('arial', 36),
            small=pygame.font.SysFont('arial', 26),
        )


def board_rect(state: GameState) -> pygame.Rect:
    return pygame.Rect(0, 0, state.width * CELL_SIZE, state.height * CELL_SIZE)


def segment_color(index: int, length: int) -> pygame.Color:
    """Dark green at the head, lighter towards the tail."""
    lightness = SNAKE_LIGHTNESS_HEAD + (index / length) * SNAKE_LIGHTNESS_SPAN
    color = pygame.Color(0, 0, 0)
    color.hsla = (SNAKE_HUE, SNAKE_SATURATION, lightness, 100)
    return color


def draw_board(surface: pygame.Surface, state: GameState,
               area: Optional[pygame.Rect] = None):
    """Paint one frame of the board: background, food, then the snake"""
    area = area or board_rect(state)
    cell_w = area.width / state.width
    cell_h = area.height / state.height

    surface.fill(BOARD_BG, area)

    if state.food is not None:
        fx, fy = state.food
        food_rect = pygame.Rect(
            round(area.x + fx * cell_w + cell_w * FOOD_INSET),
            round(area.y + fy * cell_h + cell_h * FOOD_INSET),
            round(cell_w * (1 - 2 * FOOD_INSET)),
            round(cell_h * (1 - 2 * FOOD_INSET)),
        )
        pygame.draw.rect(surface, FOOD_COLOR, food_rect)

    length = len(state.snake)
    for i, (x, y) in enumerate(state.snake):
        seg_rect = pygame.Rect(
            round(area.x + x * cell_w + SEGMENT_INSET),
            round(area.y + y * cell_h + SEGMENT_INSET),
            round(cell_w - 2 * SEGMENT_INSET),
            round(cell_h - 2 * SEGMENT_INSET),
        )
        pygame.draw.rect(surface, segment_color(i, length), seg_rect)


def draw_scoreboard(surface: pygame.Surface, fonts: Fonts, name: str, score: int,
                    area: Optional[pygame.Rect] = None):
    """Side panel with the player's name and current score"""
    if area is None:
        area = pygame.Rect(surface.get_width() - PANEL_WIDTH, 0, PANEL_WIDTH, surface.get_height())
    surface.fill(PANEL_BG, area)

    heading = fonts.medium.render("Score", True, TEXT_COLOR)
    surface.blit(heading, (area.x + 16, area.y + 16))

    row_y = area.y + 16 + heading.get_height() + 14
    swatch = pygame.Rect(area.x + 16, row_y + 3, 14, 14)
    pygame.draw.rect(surface, FOOD_COLOR, swatch)

    name_surface = fonts.small.render(name, True, TEXT_COLOR)
    surface.blit(name_surface, (swatch.right + 8, row_y))

    score_surface = fonts.small.render(str(score), True, TEXT_COLOR)
    surface.blit(score_surface, (area.right - 16 - score_surface.get_width(), row_y))


def draw_notice(surface: pygame.Surface, fonts: Fonts, title: str, lines: Sequence[str]):
    """Dim the screen and show a centred message box"""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 160))
    surface.blit(overlay, (0, 0))

    title_surface = fonts.large.render(title, True, TEXT_COLOR)
    line_surfaces = [fonts.small.render(line, True, MUTED_TEXT_COLOR) for line in lines]

    width = max([title_surface.get_width()] + [s.get_width() for s in line_surfaces]) + 60
    height = title_surface.get_height() + sum(s.get_height() + 10 for s in line_surfaces) + 50
    box = pygame.Rect(0, 0, width, height)
    box.center = surface.get_rect().center
    pygame.draw.rect(surface, NOTICE_BG, box, border_radius=8)
    pygame.draw.rect(surface, FOOD_COLOR, box, width=2, border_radius=8)

    y = box.y + 20
    title_rect = title_surface.get_rect(midtop=(box.centerx, y))
    surface.blit(title_surface, title_rect)
    y = title_rect.bottom + 10
    for line_surface in line_surfaces:
        line_rect = line_surface.get_rect(midtop=(box.centerx, y))
        surface.blit(line_surface, line_rect)
        y = line_rect.bottom + 10


def start_screen_layout(size: Tuple[int, int]) -> Tuple[pygame.Rect, pygame.Rect]:
    """Rects of the name field and the start button"""
    width, height = size
    input_rect = pygame.Rect(0, 0, 320, 44)
    input_rect.center = (width // 2, height // 2)
    button_rect = pygame.Rect(0, 0, 160, 48)
    button_rect.center = (width // 2, input_rect.bottom + 50)
    return input_rect, button_rect


def draw_start_screen(surface: pygame.Surface, fonts: Fonts, name: str,
                      cursor_visible: bool = True):
    """Title, name field and start button"""
    surface.fill(PANEL_BG)
    input_rect, button_rect = start_screen_layout(surface.get_size())

    title_surface = fonts.large.render("Snake", True, TEXT_COLOR)
    surface.blit(title_surface, title_surface.get_rect(midbottom=(input_rect.centerx, input_rect.top - 50)))

    label_surface = fonts.small.render("Your name", True, MUTED_TEXT_COLOR)
    surface.blit(label_surface, label_surface.get_rect(bottomleft=(input_rect.x, input_rect.top - 6)))

    pygame.draw.rect(surface, INPUT_BG, input_rect, border_radius=4)
    pygame.draw.rect(surface, INPUT_ACTIVE_BORDER, input_rect, width=2, border_radius=4)
    text = name + ("|" if cursor_visible else "") or " "
    text_surface = fonts.medium.render(text, True, TEXT_COLOR)
    surface.blit(text_surface, text_surface.get_rect(midleft=(input_rect.x + 10, input_rect.centery)))

    pygame.draw.rect(surface, BUTTON_COLOR, button_rect, border_radius=6)
    button_text = fonts.medium.render("Start", True, BUTTON_TEXT_COLOR)
    surface.blit(button_text, button_text.get_rect(center=button_rect.center))

    hint = fonts.small.render("Arrow keys or WASD to steer", True, MUTED_TEXT_COLOR)
    surface.blit(hint, hint.get_rect(midtop=(button_rect.centerx, button_rect.bottom + 24)))
