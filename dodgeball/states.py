"""Application and in-game state machine."""

from __future__ import annotations

from enum import Enum, auto


class AppState(Enum):
    """Top-level screen the application is on."""

    MAIN_MENU = auto()
    IN_GAME = auto()
    GAME_OVER = auto()


class GameState(Enum):
    """Phase of a round while the application is in game."""

    COUNTDOWN = auto()
    RUNNING = auto()
    PAUSED = auto()


class StateMachine:
    """Holds the current app and game state and applies the allowed transitions."""

    def __init__(self) -> None:
        self.app = AppState.MAIN_MENU
        self.game = GameState.COUNTDOWN

    def on_player_death(self) -> bool:
        """Switch to the game-over screen if a round is in progress."""
        if self.app is not AppState.IN_GAME:
            return False
        self.app = AppState.GAME_OVER
        return True

    def on_play_clicked(self) -> bool:
        """Start a new round from the main menu or the game-over screen."""
        if self.app not in (AppState.MAIN_MENU, AppState.GAME_OVER):
            return False
        self.app = AppState.IN_GAME
        self.game = GameState.COUNTDOWN
        return True

    def toggle_pause(self) -> bool:
        """Flip between running and paused; ignored during the countdown."""
        if self.app is not AppState.IN_GAME:
            return False
        if self.game is GameState.RUNNING:
            self.game = GameState.PAUSED
        elif self.game is GameState.PAUSED:
            self.game = GameState.RUNNING
        else:
            return False
        return True

    def on_resume_clicked(self) -> bool:
        """Leave the pause menu."""
        if self.game is not GameState.PAUSED:
            return False
        self.game = GameState.RUNNING
        return True

    def start_running(self) -> None:
        """Enter the running phase once the countdown is over."""
        self.game = GameState.RUNNING

    def is_running(self) -> bool:
        """True while a round is being played and not paused."""
        return self.app is AppState.IN_GAME and self.game is GameState.RUNNING