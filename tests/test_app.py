import random

import pygame

from dodgeball.app import BACKGROUND_COLOR, DodgeBall
from dodgeball.enemy import Enemy, NUMBER_OF_ENEMIES
from dodgeball.powerups import POWERUP_DEFINITIONS, PowerupItem, PowerupKind
from dodgeball.states import AppState, GameState
from dodgeball.widgets import Assets


def _game(tmp_path):
    return DodgeBall(800, 600, tmp_path / "scores.txt", random.Random(1))


def _running(tmp_path):
    game = _game(tmp_path)
    game.play()
    for _ in range(4):
        game.update(1.0)
    game.enemies.enemies.clear()
    return game


def _definition(kind):
    return next(d for d in POWERUP_DEFINITIONS if d[0].kind is kind)


def test_start_creates_score_file_and_main_menu(tmp_path):
    game = _game(tmp_path)
    assert (tmp_path / "scores.txt").read_text() == "0"
    assert game.states.app is AppState.MAIN_MENU
    assert game.menu.title == "Dogde Ball"


def test_start_reads_existing_high_score(tmp_path):
    (tmp_path / "scores.txt").write_text("50")
    game = _game(tmp_path)
    assert game.score.highest_score == 50
    assert game.menu.lines == ["Highest Score: 50"]


def test_play_spawns_round(tmp_path):
    game = _game(tmp_path)
    assert game.play() is True
    assert game.states.app is AppState.IN_GAME
    assert game.states.game is GameState.COUNTDOWN
    assert len(game.enemies.enemies) == NUMBER_OF_ENEMIES
    assert (game.player.x, game.player.y) == (0.0, 0.0)
    assert game.menu is None
    assert game.play() is False


def test_countdown_then_running(tmp_path):
    game = _game(tmp_path)
    game.play()
    for _ in range(3):
        game.update(1.0)
    assert game.states.game is GameState.COUNTDOWN
    assert game.countdown_overlay.text == "1"
    game.update(1.0)
    assert game.states.game is GameState.RUNNING
    assert game.countdown_overlay is None


def test_escape_ignored_during_countdown(tmp_path):
    game = _game(tmp_path)
    game.play()
    game.update(0.1, just_pressed={"escape"})
    assert game.states.game is GameState.COUNTDOWN
    assert game.pause_menu is None


def test_pause_and_resume(tmp_path):
    game = _running(tmp_path)
    game.update(0.01, just_pressed={"escape"})
    assert game.states.game is GameState.PAUSED
    assert game.pause_menu is not None and game.states.is_running() is False
    assert game.resume() is True
    assert game.states.game is GameState.RUNNING
    assert game.pause_menu is None
    assert game.resume() is False


def test_escape_toggles_back(tmp_path):
    game = _running(tmp_path)
    game.update(0.01, just_pressed={"escape"})
    game.update(0.01, just_pressed={"escape"})
    assert game.states.game is GameState.RUNNING
    assert game.pause_menu is None


def test_movement_right(tmp_path):
    game = _running(tmp_path)
    game.update(0.1, pressed={"d"})
    assert game.player.x > 0.0
    assert game.player.y == 0.0


def test_collision_ends_round_and_saves_score(tmp_path):
    game = _running(tmp_path)
    game.score.value = 120
    game.enemies.enemies.append(Enemy(0.0, 0.0, 1.0, 0.0))
    game.update(0.01)
    assert game.states.app is AppState.GAME_OVER
    assert game.player is None
    assert game.enemies.enemies == []
    assert game.score.value >= 120
    assert (tmp_path / "scores.txt").read_text() == str(game.score.value)
    assert game.score.highest_score == game.score.value
    assert game.menu.title == "Game Over"
    assert f"Score: {game.score.value}" in game.menu.lines


def test_immunity_prevents_death(tmp_path):
    game = _running(tmp_path)
    game.update(0.01, pressed={"space"}, just_pressed={"space"})
    assert game.player.can_collide is False
    game.enemies.enemies.append(Enemy(0.0, 0.0, 1.0, 0.0))
    game.update(0.01, pressed={"space"})
    assert game.states.app is AppState.IN_GAME
    assert game.fuel.amount < 100.0


def test_collect_speed_boost(tmp_path):
    game = _running(tmp_path)
    powerup, texture = _definition(PowerupKind.SPEED_BOOST)
    game.spawner.items.append(PowerupItem(powerup, 0.0, 0.0, texture))
    game.update(0.01)
    assert game.spawner.items == []
    assert list(game.active) == [powerup]
    assert game.player_speed.speed > game.player_speed.original_speed
    assert len(game.hud.symbols) == 1


def test_collect_freeze_slows_enemies(tmp_path):
    game = _running(tmp_path)
    powerup, texture = _definition(PowerupKind.FREEZE)
    game.spawner.items.append(PowerupItem(powerup, 0.0, 0.0, texture))
    game.update(0.01)
    assert game.enemies.speed.speed < game.enemies.speed.original_speed


def test_death_undoes_powerups(tmp_path):
    game = _running(tmp_path)
    powerup, texture = _definition(PowerupKind.SPEED_BOOST)
    game.spawner.items.append(PowerupItem(powerup, 0.0, 0.0, texture))
    game.update(0.01)
    game.enemies.enemies.append(Enemy(0.0, 0.0, 1.0, 0.0))
    game.update(0.01)
    assert game.states.app is AppState.GAME_OVER
    assert game.player_speed.speed == game.player_speed.original_speed
    assert len(game.active) == 0


def test_play_again_resets_score(tmp_path):
    game = _running(tmp_path)
    game.score.value = 70
    game.enemies.enemies.append(Enemy(0.0, 0.0, 1.0, 0.0))
    game.update(0.01)
    assert game.play() is True
    assert game.score.value == 0
    assert game.states.game is GameState.COUNTDOWN


def test_draw_background(tmp_path):
    game = _running(tmp_path)
    surface = pygame.Surface((800, 600))
    game.draw(surface, Assets(tmp_path))
    assert tuple(surface.get_at((0, 599)))[:3] == BACKGROUND_COLOR