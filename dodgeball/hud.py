"""In-game interface: pause menu, score, fuel bar, power-up bar and countdown."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

import pygame

from dodgeball.powerups import Powerup
from dodgeball.widgets import (
    BLACK,
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    OVERLAY_COLOR,
    WHITE,
    Assets,
    PowerupSymbol,
    stack_buttons,
)

SCORE_MARGIN = 10
FUEL_RIGHT = 20
FUEL_TOP = 20
FUEL_WIDTH = 200
FUEL_HEIGHT = 30
FUEL_BORDER = 2
FUEL_FRAME_COLOR = (26, 26, 26)  # sRGB (0.1, 0.1, 0.1)
FUEL_BACKGROUND = BLACK
FUEL_COLOR = (128, 128, 0)  # sRGB (0.5, 0.5, 0.0)
POWERUP_BAR_LEFT = 0.45
POWERUP_BAR_TOP = 10
POWERUP_BAR_HEIGHT = 50
POWERUP_SYMBOL_SIZE = 40
POWERUP_GAP = 10
INITIAL_COUNTDOWN_TEXT = "4"


def _draw_overlay(surface: pygame.Surface) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surface.blit(overlay, (0, 0))


class PauseAction(Enum):
    """What the player chose in the pause menu this frame."""

    NONE = auto()
    RESUME = auto()
    QUIT = auto()


class PauseMenu:
    """Full-screen pause menu with Resume and Quit buttons."""

    def __init__(self, width: float, height: float) -> None:
        step = BUTTON_HEIGHT + 2 * BUTTON_MARGIN
        labels = ["Resume", "Quit"]
        top = height / 2 - len(labels) * step / 2
        self.resume_button, self.quit_button = stack_buttons(labels, width / 2, top)
        self.buttons = [self.resume_button, self.quit_button]

    def handle(self, mouse_pos: tuple[float, float], pressed: bool) -> PauseAction:
        """Update button states and report the action started this frame."""
        for button in self.buttons:
            button.interaction(mouse_pos, pressed)
        if self.resume_button.clicked:
            return PauseAction.RESUME
        if self.quit_button.clicked:
            return PauseAction.QUIT
        return PauseAction.NONE

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Dim the screen and draw the buttons."""
        _draw_overlay(surface)
        for button in self.buttons:
            button.draw(surface, assets)


class Hud:
    """Score display, fuel bar and the bar of active power-up symbols."""

    def __init__(self, width: float) -> None:
        self.width = width
        self.score_text = "Score: "
        self.fuel_amount = 100.0
        self.symbols: list[PowerupSymbol] = []

    def update_score(self, value: int) -> None:
        """Show the current score."""
        self.score_text = f"Score: {value}"

    def update_fuel(self, amount: float) -> None:
        """Set the fuel bar fill, as a percentage."""
        self.fuel_amount = amount

    def on_powerup_collected(self, powerup: Powerup) -> None:
        """Add a symbol for a freshly collected power-up."""
        self.symbols.append(PowerupSymbol(powerup.image_path(), powerup.duration, powerup.duration))

    def on_powerup_expired(self, active: Iterable[Powerup]) -> None:
        """Redraw the symbols from the power-ups that are still active."""
        self.symbols = [
            PowerupSymbol(powerup.image_path(), powerup.duration, powerup.duration)
            for powerup in active
        ]

    def clear(self) -> None:
        """Reset the display for a new round."""
        self.score_text = "Score: "
        self.fuel_amount = 100.0
        self.symbols.clear()

    def _fuel_frame(self) -> pygame.Rect:
        return pygame.Rect(
            round(self.width - FUEL_RIGHT - FUEL_WIDTH), FUEL_TOP, FUEL_WIDTH, FUEL_HEIGHT
        )

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Draw the score, fuel bar and power-up symbols."""
        text = assets.font().render(self.score_text, True, WHITE)
        surface.blit(text, (SCORE_MARGIN, SCORE_MARGIN))

        frame = self._fuel_frame()
        pygame.draw.rect(surface, FUEL_FRAME_COLOR, frame)
        pygame.draw.rect(surface, FUEL_BACKGROUND, frame)
        inner = frame.inflate(-2 * FUEL_BORDER, -2 * FUEL_BORDER)
        fill_width = round(inner.width * max(self.fuel_amount, 0.0) / 100.0)
        if fill_width > 0:
            pygame.draw.rect(surface, FUEL_COLOR, (inner.left, inner.top, fill_width, inner.height))

        left = round(self.width * POWERUP_BAR_LEFT)
        top = POWERUP_BAR_TOP + (POWERUP_BAR_HEIGHT - POWERUP_SYMBOL_SIZE) // 2
        size = (POWERUP_SYMBOL_SIZE, POWERUP_SYMBOL_SIZE)
        for index, symbol in enumerate(self.symbols):
            rect = pygame.Rect(left + index * (POWERUP_SYMBOL_SIZE + POWERUP_GAP), top, *size)
            pygame.draw.circle(surface, BLACK, rect.center, POWERUP_SYMBOL_SIZE // 2)
            surface.blit(assets.image(f"sprites/{symbol.image}", size), rect)


@dataclass
class CountdownOverlay:
    """Full-screen overlay showing the seconds left before a round starts."""

    width: float
    height: float
    text: str = INITIAL_COUNTDOWN_TEXT

    def set_text(self, text: str) -> None:
        """Change the number shown."""
        self.text = text

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Dim the screen and draw the number in the middle."""
        _draw_overlay(surface)
        rendered = assets.font().render(self.text, True, WHITE)
        surface.blit(rendered, rendered.get_rect(center=(round(self.width / 2), round(self.height / 2))))