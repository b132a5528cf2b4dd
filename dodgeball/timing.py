"""Frame timers and the pre-round countdown."""

from __future__ import annotations

from enum import Enum, auto


class TimerMode(Enum):
    """Whether a timer stops when it finishes or starts over."""

    ONCE = auto()
    REPEATING = auto()


class Timer:
    """A timer advanced by explicit frame deltas, in seconds."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self.times_finished_this_tick = 0
        self._finished = False

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        if delta < 0:
            raise ValueError("delta must not be negative")
        if self.mode is TimerMode.ONCE and self._finished:
            self.times_finished_this_tick = 0
            return self
        self.elapsed += delta
        self._finished = self.elapsed >= self.duration
        if not self._finished:
            self.times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration > 0:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished_this_tick = 1
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def finished(self) -> bool:
        """True if the timer reached its duration on the last tick (or ever, for ONCE)."""
        return self._finished

    def reset(self) -> None:
        """Start the timer over."""
        self.elapsed = 0.0
        self.times_finished_this_tick = 0
        self._finished = False


class Countdown:
    """Counts down once per second before a round starts."""

    def __init__(self, ticks: int = 3) -> None:
        if ticks < 0:
            raise ValueError("ticks must not be negative")
        self.initial_ticks = ticks
        self.ticks = ticks
        self.timer = Timer(1.0, TimerMode.REPEATING)
        self.text = str(ticks + 1)

    def update(self, delta: float) -> bool:
        """Advance the countdown; return True once it has run out."""
        if not self.timer.tick(delta).finished():
            return False
        if self.ticks >= 1:
            self.text = str(self.ticks)
            self.ticks -= 1
            return False
        self.ticks = self.initial_ticks
        return True

    def reset(self) -> None:
        """Prepare the countdown for another round."""
        self.ticks = self.initial_ticks
        self.timer.reset()
        self.text = str(self.initial_ticks + 1)