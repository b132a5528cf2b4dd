"""The player ball, its speed, fuel for immunity and active power-ups."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from dodgeball.powerups import POWERUP_SIZE, Powerup, PowerupItem, PowerupKind
from dodgeball.timing import Timer, TimerMode

PLAYER_SIZE = 64.0
PLAYER_SPEED = 469.0
COLLISION_THRESHOLD = 64.0
PLAYER_Z = 1.0
ENEMY_Z = 0.0
COLLIDABLE_TEXTURE = "sprites/ball_blue_small.png"
NOT_COLLIDABLE_TEXTURE = "sprites/hole.png"
FUEL_MAX = 100.0


@dataclass(frozen=True)
class FreezeEvent:
    """Asks the enemies to slow down (applied) or return to normal speed."""

    multiplier: float
    being_applied: bool


@dataclass
class PlayerSpeed:
    """Player movement speed, raised while a speed boost is active."""

    speed: float = PLAYER_SPEED
    original_speed: float = PLAYER_SPEED

    def boost(self, multiplier: float) -> None:
        """Multiply the current speed."""
        self.speed *= multiplier

    def restore(self) -> None:
        """Return to the original speed."""
        self.speed = self.original_speed


def _clamp_fuel(value: float) -> float:
    return min(max(value, 0.0), FUEL_MAX)


@dataclass
class Fuel:
    """Fuel burnt while immune to collisions; refills only once emptied."""

    amount: float = FUEL_MAX
    decrease_speed: float = 80.0
    increase_speed: float = 20.0
    empty: bool = False

    def update(self, can_collide: bool, delta: float) -> None:
        """Drain fuel while immune, or refill it once it has run out."""
        amount = self.amount
        if not can_collide and not self.empty:
            amount -= self.decrease_speed * delta
        self.amount = _clamp_fuel(amount)
        if self.amount == 0.0 and not self.empty:
            self.empty = True
        if self.empty:
            amount += self.increase_speed * delta
        self.amount = _clamp_fuel(amount)
        if self.amount == FUEL_MAX and self.empty:
            self.empty = False

    def reset(self) -> None:
        """Fill the tank for a new round."""
        self.empty = False
        self.amount = FUEL_MAX


@dataclass
class Player:
    """The player ball, starting at the centre of the window."""

    x: float = 0.0
    y: float = 0.0
    can_collide: bool = True

    @property
    def texture(self) -> str:
        """Sprite matching the current collision state."""
        return COLLIDABLE_TEXTURE if self.can_collide else NOT_COLLIDABLE_TEXTURE

    def move(
        self, up: bool, down: bool, left: bool, right: bool, speed: float, delta: float
    ) -> None:
        """Move in the direction of the held keys, diagonals normalised."""
        dx = float(right) - float(left)
        dy = float(up) - float(down)
        length = math.hypot(dx, dy)
        if length == 0.0:
            return
        step = speed * delta / length
        self.x += dx * step
        self.y += dy * step

    def confine(self, width: float, height: float) -> None:
        """Keep the whole ball inside the window."""
        offset = PLAYER_SIZE / 2.0
        half_w = width / 2.0
        half_h = height / 2.0
        self.x = min(max(self.x, -half_w + offset), half_w - offset)
        self.y = min(max(self.y, -half_h + offset), half_h - offset)

    def hits_enemy(self, enemy_positions: Iterable[tuple[float, float]]) -> bool:
        """True if the player can collide and touches any enemy."""
        if not self.can_collide:
            return False
        me = (self.x, self.y, PLAYER_Z)
        return any(
            math.dist((ex, ey, ENEMY_Z), me) <= COLLISION_THRESHOLD
            for ex, ey in enemy_positions
        )

    def collect(self, items: Iterable[PowerupItem]) -> list[PowerupItem]:
        """Return the power-up items the player is touching, if it can collide."""
        if not self.can_collide:
            return []
        threshold = PLAYER_SIZE / 2.0 + POWERUP_SIZE
        return [
            item
            for item in items
            if math.hypot(item.x - self.x, item.y - self.y) <= threshold
        ]

    def toggle_collision(
        self, space_pressed: bool, space_released: bool, fuel_empty: bool
    ) -> list[bool]:
        """Switch immunity from the space key; return the states entered, in order."""
        changes: list[bool] = []
        if fuel_empty:
            if not self.can_collide:
                self.can_collide = True
                changes.append(True)
            return changes
        if space_pressed and self.can_collide:
            self.can_collide = False
            changes.append(False)
        if space_released and not self.can_collide:
            self.can_collide = True
            changes.append(True)
        return changes


@dataclass
class ActivePowerups:
    """Power-ups currently in effect, each with its remaining-time timer."""

    entries: list[tuple[Powerup, Timer]] = field(default_factory=list)

    def __iter__(self) -> Iterator[Powerup]:
        return (powerup for powerup, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def apply(self, powerup: Powerup, speed: PlayerSpeed) -> FreezeEvent | None:
        """Start a collected power-up; a freeze is returned as an event for the enemies."""
        self.entries.append((powerup, Timer(powerup.duration, TimerMode.ONCE)))
        if powerup.kind is PowerupKind.SPEED_BOOST:
            speed.boost(powerup.multiplier)
            return None
        return FreezeEvent(powerup.multiplier, True)

    def tick(self, delta: float) -> list[Powerup]:
        """Advance all timers; drop and return the power-ups that ran out."""
        expired: list[Powerup] = []
        remaining: list[tuple[Powerup, Timer]] = []
        for powerup, timer in self.entries:
            if timer.tick(delta).finished():
                expired.append(powerup)
            else:
                remaining.append((powerup, timer))
        self.entries = remaining
        return expired

    @staticmethod
    def expire(powerup: Powerup, speed: PlayerSpeed) -> FreezeEvent | None:
        """Undo an expired power-up."""
        if powerup.kind is PowerupKind.SPEED_BOOST:
            speed.restore()
            return None
        return FreezeEvent(powerup.multiplier, False)

    def force_remove(self, speed: PlayerSpeed) -> list[FreezeEvent]:
        """Undo the effect of every active power-up at the end of a round."""
        events: list[FreezeEvent] = []
        for powerup in self:
            event = self.expire(powerup, speed)
            if event is not None:
                events.append(event)
        return events