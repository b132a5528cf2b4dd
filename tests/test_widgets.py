import pygame
import pytest

from dodgeball.widgets import (
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    BUTTON_WIDTH,
    CLICKED_BUTTON_COLOR,
    DEFAULT_BUTTON_COLOR,
    HOVERED_BUTTON_COLOR,
    Assets,
    Button,
    Interaction,
    PowerupSymbol,
    button_color,
    stack_buttons,
)


@pytest.mark.parametrize(
    "interaction, expected",
    [
        (Interaction.NONE, DEFAULT_BUTTON_COLOR),
        (Interaction.HOVERED, HOVERED_BUTTON_COLOR),
        (Interaction.PRESSED, CLICKED_BUTTON_COLOR),
    ],
)
def test_button_color(interaction, expected):
    assert button_color(interaction) == expected


def test_stack_buttons_layout():
    buttons = stack_buttons(["Play", "Quit"], 400, 100)
    assert [b.label for b in buttons] == ["Play", "Quit"]
    assert all(b.rect.size == (BUTTON_WIDTH, BUTTON_HEIGHT) for b in buttons)
    assert all(b.rect.centerx == 400 for b in buttons)
    assert buttons[0].rect.top == 100 + BUTTON_MARGIN
    assert buttons[1].rect.top - buttons[0].rect.top == BUTTON_HEIGHT + 2 * BUTTON_MARGIN


def test_stack_buttons_empty():
    assert stack_buttons([], 0, 0) == []


def test_button_interaction_sequence():
    button = Button("Play", pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT))
    assert button.interaction((500, 500), False) is Interaction.NONE
    assert button.color == DEFAULT_BUTTON_COLOR
    assert button.interaction((10, 10), False) is Interaction.HOVERED
    assert button.color == HOVERED_BUTTON_COLOR
    assert button.clicked is False
    assert button.interaction((10, 10), True) is Interaction.PRESSED
    assert button.clicked is True
    assert button.color == CLICKED_BUTTON_COLOR
    button.interaction((10, 10), True)
    assert button.clicked is False


def test_button_draw_rounded(tmp_path):
    surface = pygame.Surface((300, 200))
    surface.fill((0, 0, 0))
    button = stack_buttons(["Go"], 150, 0)[0]
    button.draw(surface, Assets(tmp_path))
    assert tuple(surface.get_at((button.rect.left + 5, button.rect.centery)))[:3] == DEFAULT_BUTTON_COLOR
    assert tuple(surface.get_at(button.rect.topleft))[:3] == (0, 0, 0)


def test_assets_missing_image_placeholder(tmp_path):
    assets = Assets(tmp_path)
    image = assets.image("sprites/none.png", (64, 64))
    assert image.get_size() == (64, 64)
    assert assets.image("sprites/none.png", (64, 64)) is image


def test_assets_loads_image(tmp_path):
    (tmp_path / "sprites").mkdir()
    source = pygame.Surface((8, 8))
    source.fill((10, 200, 30))
    pygame.image.save(source, str(tmp_path / "sprites" / "dot.png"))
    image = Assets(tmp_path).image("sprites/dot.png", (64, 64))
    assert image.get_size() == (64, 64)
    assert tuple(image.get_at((32, 32)))[:3] == (10, 200, 30)


def test_assets_font_cached(tmp_path):
    assets = Assets(tmp_path)
    font = assets.font()
    assert assets.font() is font
    assert font.size("Play")[1] > 0


def test_powerup_symbol_fields():
    symbol = PowerupSymbol("speed_boost.png", 7.0, 7.0)
    assert symbol.time_remaining == symbol.total_time == 7.0
    assert symbol.image == "speed_boost.png"