"""Enemy balls: spawning, bouncing off the window edges and movement."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from dodgeball.timing import Timer, TimerMode

NUMBER_OF_ENEMIES = 10
ENEMY_SIZE = 64.0
ENEMY_TEXTURE = "sprites/ball_red_small.png"
ENEMY_SPEED = 270.0
SPAWN_INTERVAL = 10.0
MIN_SPAWN_DISTANCE = 100.0


@dataclass
class Enemy:
    """A bouncing enemy ball with a unit direction of travel."""

    x: float
    y: float
    dx: float
    dy: float
    texture: str = ENEMY_TEXTURE


@dataclass
class EnemySpeed:
    """Shared enemy speed, lowered while a freeze power-up is active."""

    speed: float = ENEMY_SPEED
    original_speed: float = ENEMY_SPEED

    def apply_freeze(self, multiplier: float) -> None:
        """Slow enemies down by ``multiplier``."""
        self.speed /= multiplier

    def remove_freeze(self) -> None:
        """Restore the original enemy speed."""
        self.speed = self.original_speed


def random_spawn_position(
    width: float, height: float, rng: random.Random
) -> tuple[float, float]:
    """A random point inside the window, away from the edges and the centre."""
    while True:
        x = rng.random() * (width - ENEMY_SIZE * 2.0) - (width / 2.0 - ENEMY_SIZE)
        y = rng.random() * (height - ENEMY_SIZE * 2.0) - (height / 2.0 - ENEMY_SIZE)
        if math.hypot(x, y) >= MIN_SPAWN_DISTANCE:
            return x, y


def random_direction(rng: random.Random) -> tuple[float, float]:
    """A random unit vector in the plane."""
    while True:
        dx = rng.random() * 2.0 - 1.0
        dy = rng.random() * 2.0 - 1.0
        length = math.hypot(dx, dy)
        if length > 0.0:
            return dx / length, dy / length


class EnemySwarm:
    """All enemies on the field, their shared speed and the spawn timer."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.enemies: list[Enemy] = []
        self.speed = EnemySpeed()
        self.spawn_timer = Timer(SPAWN_INTERVAL, TimerMode.REPEATING)

    def _spawn(self, width: float, height: float) -> Enemy:
        x, y = random_spawn_position(width, height, self.rng)
        dx, dy = random_direction(self.rng)
        enemy = Enemy(x, y, dx, dy)
        self.enemies.append(enemy)
        return enemy

    def spawn_initial(self, width: float, height: float) -> list[Enemy]:
        """Place the opening set of enemies and return them."""
        return [self._spawn(width, height) for _ in range(NUMBER_OF_ENEMIES)]

    def update_spawn(self, delta: float, width: float, height: float) -> Enemy | None:
        """Advance the spawn timer and return the enemy added this frame, if any."""
        if not self.spawn_timer.tick(delta).finished():
            return None
        return self._spawn(width, height)

    def confine(self, width: float, height: float) -> None:
        """Reverse the direction of enemies that reached a window edge."""
        radius = ENEMY_SIZE / 2.0
        left = -width / 2.0
        right = -left
        upper = height / 2.0
        lower = -upper
        for enemy in self.enemies:
            if enemy.x <= left + radius or enemy.x >= right - radius:
                enemy.dx = -enemy.dx
            if enemy.y <= lower or enemy.y >= upper - radius:
                enemy.dy = -enemy.dy

    def move(self, delta: float) -> None:
        """Move every enemy along its direction at the current speed."""
        step = self.speed.speed * delta
        for enemy in self.enemies:
            enemy.x += step * enemy.dx
            enemy.y += step * enemy.dy

    def clear(self) -> None:
        """Remove all enemies and undo any freeze."""
        self.enemies.clear()
        self.speed.remove_freeze()