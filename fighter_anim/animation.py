"""Frame timing for fighter attack animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

FRAMES_PER_ATTACK = 3
FRAME_DELAY_MS = 200
LOOP_DURATION_MS = 1000


class Action(IntEnum):
    """What a fighter is doing: resting or one of three attacks."""

    REST = 0
    ATTACK_1 = 1
    ATTACK_2 = 2
    ATTACK_3 = 3

    @property
    def is_attack(self) -> bool:
        return self is not Action.REST


@dataclass
class AttackAnimation:
    """Plays the frames of one attack once, then falls back to rest."""

    last_change: int = 0
    action: Action = Action.REST
    frame_index: int = 0
    frame_delay: int = FRAME_DELAY_MS
    frame_count: int = FRAMES_PER_ATTACK

    def start(self, action: Action, now: int | None = None) -> None:
        """Begin playing ``action`` from its first frame.

        When ``now`` is None the previous frame timestamp is kept, so the
        first step may come sooner than a full delay.
        """
        self.action = Action(action)
        self.frame_index = 0
        if now is not None:
            self.last_change = now

    def update(self, now: int) -> bool:
        """Advance the animation to time ``now``; return True if the frame changed."""
        if self.is_resting():
            return False
        if now - self.last_change <= self.frame_delay:
            return False
        self.last_change = now
        self.frame_index += 1
        if self.frame_index >= self.frame_count:
            self.action = Action.REST
            self.frame_index = 0
        return True

    def current_frame(self) -> tuple[Action, int]:
        """The action and frame index to display now."""
        return self.action, self.frame_index

    def is_resting(self) -> bool:
        return self.action is Action.REST


@dataclass
class LoopingAnimation:
    """Cycles through one attack's frames until a fixed duration has passed."""

    action: Action
    started_at: int
    duration: int = LOOP_DURATION_MS
    frame_delay: int = FRAME_DELAY_MS
    frame_count: int = FRAMES_PER_ATTACK
    frame_index: int = 0
    last_change: int = field(default=-1)
    finished: bool = False

    def __post_init__(self) -> None:
        if not Action(self.action).is_attack:
            raise ValueError("a looping animation needs an attack action")
        self.action = Action(self.action)
        if self.last_change < 0:
            self.last_change = self.started_at

    def update(self, now: int) -> bool:
        """Advance to time ``now``; return False once the duration has run out."""
        if self.finished or now - self.started_at > self.duration:
            self.finished = True
            return False
        if now - self.last_change > self.frame_delay:
            self.last_change = now
            self.frame_index = (self.frame_index + 1) % self.frame_count
        return True

    def current_frame(self) -> tuple[Action, int]:
        """The action and frame index to display now."""
        return self.action, self.frame_index