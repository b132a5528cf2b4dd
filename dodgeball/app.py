"""The game: states, world, score and interface driven frame by frame."""

from __future__ import annotations

import argparse
import random
from collections.abc import Collection
from pathlib import Path

import pygame

from dodgeball.enemy import ENEMY_SIZE, EnemySwarm
from dodgeball.hud import CountdownOverlay, Hud, PauseAction, PauseMenu
from dodgeball.menus import Menu, MenuAction, game_over_menu, main_menu
from dodgeball.player import PLAYER_SIZE, ActivePowerups, FreezeEvent, Fuel, Player, PlayerSpeed
from dodgeball.powerups import POWERUP_SIZE, PowerupSpawner
from dodgeball.score import DEFAULT_PATH, Score
from dodgeball.states import AppState, GameState, StateMachine
from dodgeball.timing import Countdown
from dodgeball.widgets import Assets

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
WINDOW_TITLE = "Dogde Ball"
BACKGROUND_COLOR = (43, 44, 47)
FPS = 60

KEY_UP = "w"
KEY_DOWN = "s"
KEY_LEFT = "a"
KEY_RIGHT = "d"
KEY_IMMUNITY = "space"
KEY_PAUSE = "escape"

_KEY_NAMES = {
    pygame.K_w: KEY_UP,
    pygame.K_s: KEY_DOWN,
    pygame.K_a: KEY_LEFT,
    pygame.K_d: KEY_RIGHT,
    pygame.K_SPACE: KEY_IMMUNITY,
    pygame.K_ESCAPE: KEY_PAUSE,
}

_NO_KEYS: frozenset[str] = frozenset()


class DodgeBall:
    """The whole game, advanced by explicit frame updates."""

    def __init__(
        self,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        score_path: str | Path = DEFAULT_PATH,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.assets_root: str | Path = "assets"
        self.states = StateMachine()
        self.score = Score(score_path)
        self.score.load_highest()
        self.countdown = Countdown()
        self.enemies = EnemySwarm(self.rng)
        self.spawner = PowerupSpawner(self.rng)
        self.player: Player | None = None
        self.player_speed = PlayerSpeed()
        self.fuel = Fuel()
        self.active = ActivePowerups()
        self.hud = Hud(width)
        self.countdown_overlay: CountdownOverlay | None = None
        self.pause_menu: PauseMenu | None = None
        self.menu: Menu | None = main_menu(self.score.highest_score, width, height)
        self.quit_requested = False

    def play(self) -> bool:
        """Start a round from the main menu or the game-over screen."""
        if not self.states.on_play_clicked():
            return False
        self.score.reset()
        self.menu = None
        self.enemies.spawn_initial(self.width, self.height)
        self.player = Player()
        self.countdown.reset()
        self.countdown_overlay = CountdownOverlay(self.width, self.height)
        self.hud.clear()
        return True

    def resume(self) -> bool:
        """Leave the pause menu."""
        if not self.states.on_resume_clicked():
            return False
        self.pause_menu = None
        return True

    def update(
        self,
        delta: float,
        pressed: Collection[str] = _NO_KEYS,
        just_pressed: Collection[str] = _NO_KEYS,
        just_released: Collection[str] = _NO_KEYS,
    ) -> None:
        """Advance the game by ``delta`` seconds given the keys held and changed."""
        self.score.tick_timer(delta)
        if self.states.app is not AppState.IN_GAME:
            return
        if KEY_PAUSE in just_pressed and self.states.toggle_pause():
            if self.states.game is GameState.PAUSED:
                self.pause_menu = PauseMenu(self.width, self.height)
            else:
                self.pause_menu = None
        if self.states.game is GameState.COUNTDOWN:
            done = self.countdown.update(delta)
            if self.countdown_overlay is not None:
                self.countdown_overlay.set_text(self.countdown.text)
            if done:
                self.states.start_running()
                self.countdown_overlay = None
        elif self.states.is_running():
            self._run_frame(delta, pressed, just_pressed, just_released)

    def _run_frame(
        self,
        delta: float,
        pressed: Collection[str],
        just_pressed: Collection[str],
        just_released: Collection[str],
    ) -> None:
        width, height = self.width, self.height
        self.enemies.update_spawn(delta, width, height)
        self.enemies.confine(width, height)
        self.enemies.move(delta)

        player = self.player
        if player is None:
            return
        player.move(
            KEY_UP in pressed,
            KEY_DOWN in pressed,
            KEY_LEFT in pressed,
            KEY_RIGHT in pressed,
            self.player_speed.speed,
            delta,
        )
        player.confine(width, height)
        player.toggle_collision(
            KEY_IMMUNITY in just_pressed, KEY_IMMUNITY in just_released, self.fuel.empty
        )
        dead = player.hits_enemy((enemy.x, enemy.y) for enemy in self.enemies.enemies)

        collected = player.collect(self.spawner.items)
        taken = {id(item) for item in collected}
        self.spawner.items = [item for item in self.spawner.items if id(item) not in taken]
        for item in collected:
            self._apply_freeze(self.active.apply(item.powerup, self.player_speed))
            self.hud.on_powerup_collected(item.powerup)
        for powerup in self.active.tick(delta):
            self._apply_freeze(self.active.expire(powerup, self.player_speed))
            self.hud.on_powerup_expired(self.active)

        self.fuel.update(player.can_collide, delta)
        self.spawner.update(delta, width, height)
        self.score.award()
        self.hud.update_score(self.score.value)
        self.hud.update_fuel(self.fuel.amount)

        if dead:
            self._end_round()

    def _apply_freeze(self, event: FreezeEvent | None) -> None:
        if event is None:
            return
        if event.being_applied:
            self.enemies.speed.apply_freeze(event.multiplier)
        else:
            self.enemies.speed.remove_freeze()

    def _end_round(self) -> None:
        if not self.states.on_player_death():
            return
        self.enemies.clear()
        self.player = None
        for event in self.active.force_remove(self.player_speed):
            self._apply_freeze(event)
        self.active.entries.clear()
        self.fuel.reset()
        self.spawner.clear()
        self.score.save()
        self.hud.clear()
        self.countdown_overlay = None
        self.pause_menu = None
        self.menu = game_over_menu(
            self.score.value, self.score.highest_score, self.width, self.height
        )

    def _pointer(self, mouse_pos: tuple[float, float], pressed: bool) -> None:
        if self.states.app is AppState.IN_GAME:
            if self.states.game is GameState.PAUSED and self.pause_menu is not None:
                action = self.pause_menu.handle(mouse_pos, pressed)
                if action is PauseAction.RESUME:
                    self.resume()
                elif action is PauseAction.QUIT:
                    self.quit_requested = True
        elif self.menu is not None:
            action = self.menu.handle(mouse_pos, pressed)
            if action is MenuAction.PLAY:
                self.play()
            elif action is MenuAction.QUIT:
                self.quit_requested = True

    def _screen_rect(self, x: float, y: float, size: float) -> pygame.Rect:
        rect = pygame.Rect(0, 0, round(size), round(size))
        rect.center = (round(self.width / 2 + x), round(self.height / 2 - y))
        return rect

    def draw(self, surface: pygame.Surface, assets: Assets) -> None:
        """Draw the current frame."""
        surface.fill(BACKGROUND_COLOR)
        if self.states.app is AppState.IN_GAME:
            item_size = POWERUP_SIZE * 2
            for item in self.spawner.items:
                surface.blit(
                    assets.image(item.texture, (round(item_size), round(item_size))),
                    self._screen_rect(item.x, item.y, item_size),
                )
            enemy_size = (round(ENEMY_SIZE), round(ENEMY_SIZE))
            for enemy in self.enemies.enemies:
                surface.blit(
                    assets.image(enemy.texture, enemy_size),
                    self._screen_rect(enemy.x, enemy.y, ENEMY_SIZE),
                )
            if self.player is not None:
                player_size = (round(PLAYER_SIZE), round(PLAYER_SIZE))
                surface.blit(
                    assets.image(self.player.texture, player_size),
                    self._screen_rect(self.player.x, self.player.y, PLAYER_SIZE),
                )
            self.hud.draw(surface, assets)
            if self.states.game is GameState.COUNTDOWN and self.countdown_overlay is not None:
                self.countdown_overlay.draw(surface, assets)
            if self.states.game is GameState.PAUSED and self.pause_menu is not None:
                self.pause_menu.draw(surface, assets)
        elif self.menu is not None:
            self.menu.draw(surface, assets)

    def run(self) -> None:
        """Open the window and play until the player quits."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((int(self.width), int(self.height)))
            pygame.display.set_caption(WINDOW_TITLE)
            assets = Assets(self.assets_root)
            clock = pygame.time.Clock()
            while not self.quit_requested:
                delta = clock.tick(FPS) / 1000.0
                just_pressed: set[str] = set()
                just_released: set[str] = set()
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.quit_requested = True
                    elif event.type == pygame.KEYDOWN and event.key in _KEY_NAMES:
                        just_pressed.add(_KEY_NAMES[event.key])
                    elif event.type == pygame.KEYUP and event.key in _KEY_NAMES:
                        just_released.add(_KEY_NAMES[event.key])
                keys = pygame.key.get_pressed()
                pressed = {name for key, name in _KEY_NAMES.items() if keys[key]}
                self._pointer(pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0])
                self.update(delta, pressed, just_pressed, just_released)
                self.draw(screen, assets)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="dodgeball", description="Dodge the red balls.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--score-file", type=Path, default=DEFAULT_PATH)
    parser.add_argument("--assets", type=Path, default=Path("assets"))
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    game = DodgeBall(args.width, args.height, args.score_file, random.Random(args.seed))
    game.assets_root = args.assets
    game.run()
    return 0