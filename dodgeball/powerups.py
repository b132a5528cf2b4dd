"""Power-up kinds, their definitions and the spawner that places them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

from dodgeball.timing import Timer, TimerMode

POWERUP_SIZE = 32.0
SPAWN_INTERVAL = 13.0


class PowerupKind(Enum):
    """What a power-up does when collected."""

    SPEED_BOOST = auto()
    FREEZE = auto()


@dataclass(frozen=True)
class Powerup:
    """A power-up with its strength and how long it lasts, in seconds."""

    kind: PowerupKind
    multiplier: float
    duration: float

    def image_path(self) -> str:
        """File name of the symbol shown while the power-up is active."""
        if self.kind is PowerupKind.SPEED_BOOST:
            return "speed_boost.png"
        return "test_power.png"


POWERUP_DEFINITIONS: tuple[tuple[Powerup, str], ...] = (
    (Powerup(PowerupKind.SPEED_BOOST, multiplier=1.5, duration=7.0), "sprites/speed_boost.png"),
    (Powerup(PowerupKind.FREEZE, multiplier=2.0, duration=5.0), "sprites/test_power.png"),
)


@dataclass
class PowerupItem:
    """A power-up lying on the field waiting to be collected."""

    powerup: Powerup
    x: float
    y: float
    texture: str


def random_powerup(rng: random.Random) -> tuple[Powerup, str]:
    """Pick one of the defined power-ups with its texture."""
    return POWERUP_DEFINITIONS[rng.randrange(len(POWERUP_DEFINITIONS))]


def random_position(width: float, height: float, rng: random.Random) -> tuple[float, float]:
    """A random point inside the window, kept one power-up size from the edges."""
    x = rng.random() * (width - POWERUP_SIZE * 2.0) - (width / 2.0 - POWERUP_SIZE)
    y = rng.random() * (height - POWERUP_SIZE * 2.0) - (height / 2.0 - POWERUP_SIZE)
    return x, y


@dataclass
class PowerupSpawner:
    """Drops a random power-up onto the field at a fixed interval."""

    rng: random.Random = field(default_factory=random.Random)
    items: list[PowerupItem] = field(default_factory=list)
    timer: Timer = field(default_factory=lambda: Timer(SPAWN_INTERVAL, TimerMode.REPEATING))

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.items = []
        self.timer = Timer(SPAWN_INTERVAL, TimerMode.REPEATING)

    def update(self, delta: float, width: float, height: float) -> PowerupItem | None:
        """Advance the spawn timer and return the item placed this frame, if any."""
        if not self.timer.tick(delta).finished():
            return None
        x, y = random_position(width, height, self.rng)
        powerup, texture = random_powerup(self.rng)
        item = PowerupItem(powerup, x, y, texture)
        self.items.append(item)
        return item

    def clear(self) -> None:
        """Remove every power-up from the field."""
        self.items.clear()