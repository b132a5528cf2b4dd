"""Main menu and game-over screen."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

import pygame

from dodgeball.widgets import (
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    IMAGE_MARGIN,
    IMAGE_SIZE,
    OVERLAY_COLOR,
    WHITE,
    Assets,
    stack_buttons,
)

TITLE_HEIGHT_FRACTION = 0.3
LINE_HEIGHT = 40
LEFT_IMAGE = "sprites/ball_blue_small.png"
RIGHT_IMAGE = "sprites/ball_red_large.png"
QUIT_LABEL = "Quit"


class MenuAction(Enum):
    """What the player chose on a menu this frame."""

    NONE = auto()
    PLAY = auto()
    QUIT = auto()


class Menu:
    """A full-screen menu: a title between two balls, text lines, Play and Quit."""

    def __init__(
        self,
        title: str,
        lines: Iterable[str],
        play_label: str,
        width: float,
        height: float,
    ) -> None:
        self.title = title
        self.lines = list(lines)
        self.width = width
        self.height = height
        step = BUTTON_HEIGHT + 2 * BUTTON_MARGIN
        self.title_height = height * TITLE_HEIGHT_FRACTION
        content = self.title_height + len(self.lines) * LINE_HEIGHT + 2 * step
        self.top = (height - content) / 2
        buttons_top = self.top + self.title_height + len(self.lines) * LINE_HEIGHT
        self.play_button, self.quit_button = stack_buttons(
            [play_label, QUIT_LABEL], width / 2, buttons_top
        )
        self.buttons = [self.play_button, self.quit_button]

    def handle(self, mouse_pos: tuple[float, float], pressed: bool) -> MenuAction:
        """Update button states and report the action started this frame."""
        for button in self.buttons:
            button.interaction(mouse_pos, pressed)
        if self.play_button.clicked:
            return MenuAction.PLAY
        if self.quit_button.clicked:
            return MenuAction.QUIT
        return MenuAction.NONE

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Dim the screen and draw the title, text lines and buttons."""
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        font = assets.font()
        center_x = round(self.width / 2)
        title_y = round(self.top + self.title_height / 2)
        title = font.render(self.title, True, WHITE)
        title_rect = title.get_rect(center=(center_x, title_y))
        size = (IMAGE_SIZE, IMAGE_SIZE)
        left = pygame.Rect(0, 0, *size)
        left.right = title_rect.left - IMAGE_MARGIN
        left.centery = title_y
        right = pygame.Rect(0, 0, *size)
        right.left = title_rect.right + IMAGE_MARGIN
        right.centery = title_y
        surface.blit(assets.image(LEFT_IMAGE, size), left)
        surface.blit(title, title_rect)
        surface.blit(assets.image(RIGHT_IMAGE, size), right)

        for index, line in enumerate(self.lines):
            y = self.top + self.title_height + index * LINE_HEIGHT + LINE_HEIGHT / 2
            rendered = font.render(line, True, WHITE)
            surface.blit(rendered, rendered.get_rect(center=(center_x, round(y))))

        for button in self.buttons:
            button.draw(surface, assets)


def main_menu(highest_score: int, width: float, height: float) -> Menu:
    """The opening menu showing the best score on record."""
    return Menu("Dogde Ball", [f"Highest Score: {highest_score}"], "Play", width, height)


def game_over_menu(score: int, highest_score: int, width: float, height: float) -> Menu:
    """The menu shown after the player was hit."""
    return Menu(
        "Game Over",
        [f"Score: {score}", f"Highest Score: {highest_score}"],
        "Play Again",
        width,
        height,
    )