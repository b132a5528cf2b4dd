"""Shared UI pieces: colours, buttons, asset loading and power-up symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

import pygame


def _srgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return (round(r * 255), round(g * 255), round(b * 255))


def _srgba(r: float, g: float, b: float, a: float) -> tuple[int, int, int, int]:
    return (*_srgb(r, g, b), round(a * 255))


DEFAULT_BUTTON_COLOR = _srgb(0.3, 0.3, 0.3)
CLICKED_BUTTON_COLOR = _srgb(0.1, 0.1, 0.1)
HOVERED_BUTTON_COLOR = _srgb(0.26, 0.26, 0.26)
OVERLAY_COLOR = _srgba(0.1, 0.1, 0.1, 0.9)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
MISSING_IMAGE_COLOR = (128, 128, 128, 255)

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 80
BUTTON_MARGIN = 10
BUTTON_RADIUS = 10

IMAGE_SIZE = 64
IMAGE_MARGIN = 8

FONT_PATH = "fonts/FiraSans-Bold.ttf"
FONT_SIZE = 32


class Interaction(Enum):
    """How the mouse relates to a button this frame."""

    NONE = auto()
    HOVERED = auto()
    PRESSED = auto()


def button_color(interaction: Interaction) -> tuple[int, int, int]:
    """Background colour of a button in the given interaction state."""
    if interaction is Interaction.PRESSED:
        return CLICKED_BUTTON_COLOR
    if interaction is Interaction.HOVERED:
        return HOVERED_BUTTON_COLOR
    return DEFAULT_BUTTON_COLOR


class Assets:
    """Loads and caches images and the UI font from an asset directory."""

    def __init__(self, root: str | Path = "assets") -> None:
        self.root = Path(root)
        self._images: dict[tuple[str, tuple[int, int]], pygame.Surface] = {}
        self._font: pygame.font.Font | None = None

    def image(self, name: str, size: tuple[int, int]) -> pygame.Surface:
        """The image at ``name`` below the root, scaled to ``size``.

        A plain placeholder is returned when the file is missing.
        """
        size = (int(size[0]), int(size[1]))
        key = (name, size)
        cached = self._images.get(key)
        if cached is None:
            path = self.root / name
            if path.is_file():
                cached = pygame.transform.scale(pygame.image.load(str(path)), size)
            else:
                cached = pygame.Surface(size, pygame.SRCALPHA)
                cached.fill(MISSING_IMAGE_COLOR)
            self._images[key] = cached
        return cached

    def font(self) -> pygame.font.Font:
        """The UI font, falling back to pygame's default face if missing."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            path = self.root / FONT_PATH
            self._font = pygame.font.Font(str(path) if path.is_file() else None, FONT_SIZE)
        return self._font


@dataclass
class Button:
    """A clickable labelled button that reports a click once per press."""

    label: str
    rect: pygame.Rect
    state: Interaction = Interaction.NONE
    clicked: bool = False

    @property
    def color(self) -> tuple[int, int, int]:
        """Background colour for the current state."""
        return button_color(self.state)

    def interaction(self, mouse_pos: tuple[float, float], pressed: bool) -> Interaction:
        """Update the state from the mouse; ``clicked`` is set when a press begins."""
        if self.rect.collidepoint(mouse_pos):
            new_state = Interaction.PRESSED if pressed else Interaction.HOVERED
        else:
            new_state = Interaction.NONE
        self.clicked = new_state is Interaction.PRESSED and self.state is not Interaction.PRESSED
        self.state = new_state
        return new_state

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Draw the rounded button with its centred label."""
        pygame.draw.rect(surface, self.color, self.rect, border_radius=BUTTON_RADIUS)
        text = assets.font().render(self.label, True, WHITE)
        surface.blit(text, text.get_rect(center=self.rect.center))


@dataclass
class PowerupSymbol:
    """Icon of an active power-up shown in the power-up bar."""

    image: str
    time_remaining: float
    total_time: float = field(default=0.0)


def stack_buttons(labels: list[str], center_x: float, top: float) -> list[Button]:
    """Buttons laid out in a centred column, each with its margin around it."""
    step = BUTTON_HEIGHT + 2 * BUTTON_MARGIN
    buttons = []
    for index, label in enumerate(labels):
        rect = pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
        rect.centerx = round(center_x)
        rect.top = round(top + BUTTON_MARGIN + index * step)
        buttons.append(Button(label, rect))
    return buttons