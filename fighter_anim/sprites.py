"""Loading fighter images and drawing a fighter's current frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import pygame

from .animation import FRAMES_PER_ATTACK, Action, AttackAnimation
from .roster import Character, get_character

LARGE_CELL = (600, 600)
SMALL_CELL = (96, 96)


class ImageLoadError(OSError):
    """An image file could not be read or decoded."""

    def __init__(self, path: str | PathLike, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot load image {self.path}: {reason}")


def load_image(
    path: str | PathLike, size: tuple[int, int] | None = None
) -> pygame.Surface:
    """Read an image file, scaled to ``size`` when one is given."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise ImageLoadError(path, str(exc) or type(exc).__name__) from exc
    if size is not None and image.get_size() != tuple(size):
        image = pygame.transform.scale(image, tuple(size))
    return image


@dataclass
class SpriteSet:
    """A character's rest image and the frames of its three attacks."""

    rest: pygame.Surface
    attacks: tuple[tuple[pygame.Surface, ...], ...]
    size: tuple[int, int]

    @classmethod
    def load(
        cls,
        character: Character | str,
        directory: str | PathLike = ".",
        size: tuple[int, int] = LARGE_CELL,
    ) -> SpriteSet:
        """Load every image of ``character`` from ``directory``."""
        if isinstance(character, str):
            character = get_character(character)
        base = Path(directory)
        rest = load_image(base / character.rest_image(), size)
        attacks = tuple(
            tuple(
                load_image(base / character.attack_image(attack, frame), size)
                for frame in range(FRAMES_PER_ATTACK)
            )
            for attack in Action
            if attack.is_attack
        )
        return cls(rest=rest, attacks=attacks, size=tuple(size))

    def frame_for(self, action: Action, index: int = 0) -> pygame.Surface:
        """The image to show for ``action`` at frame ``index``."""
        action = Action(action)
        if not action.is_attack:
            return self.rest
        frames = self.attacks[action - 1]
        if not 0 <= index < len(frames):
            raise IndexError(
                f"frame index {index} out of range for {len(frames)} frames"
            )
        return frames[index]


@dataclass
class Fighter:
    """A character on screen, with its sprites and its attack animation."""

    sprites: SpriteSet
    position: tuple[int, int] = (0, 0)
    animation: AttackAnimation = field(default_factory=AttackAnimation)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.position, self.sprites.size)

    def trigger(self, action: Action, now: int | None = None) -> None:
        """Start playing ``action`` from its first frame."""
        self.animation.start(action, now)

    def update(self, now: int) -> bool:
        """Advance the animation to time ``now``; True if the frame changed."""
        return self.animation.update(now)

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the current frame onto ``surface`` at the fighter's position."""
        action, index = self.animation.current_frame()
        surface.blit(self.sprites.frame_for(action, index), self.position)