"""The playable characters and the image files that belong to them."""

from __future__ import annotations

from dataclasses import dataclass

from .animation import FRAMES_PER_ATTACK, Action

ATTACK_COUNT = 3


@dataclass(frozen=True)
class Character:
    """A fighter, known by name, whose images share a file prefix."""

    name: str
    prefix: str
    selection_file: str

    def rest_image(self) -> str:
        return f"{self.prefix}_sel.jpeg"

    def attack_image(self, attack: int, frame: int) -> str:
        """File name of frame ``frame`` (from 0) of attack ``attack`` (1 to 3)."""
        attack = int(attack)
        if not 1 <= attack <= ATTACK_COUNT:
            raise ValueError(f"attack must be between 1 and {ATTACK_COUNT}, got {attack}")
        if not 0 <= frame < FRAMES_PER_ATTACK:
            raise ValueError(
                f"frame must be between 0 and {FRAMES_PER_ATTACK - 1}, got {frame}"
            )
        return f"{self.prefix}_coup{attack}_{frame}.jpeg"

    def image_paths(self) -> list[str]:
        """Every image file: the rest image, then each attack's frames in order."""
        attacks = [a for a in Action if a.is_attack]
        return [self.rest_image()] + [
            self.attack_image(attack, frame)
            for attack in attacks
            for frame in range(FRAMES_PER_ATTACK)
        ]


# Ordered as on the selection screen. Sonic has no frames of its own and
# reuses Itachi's.
_ROSTER = {
    c.name: c
    for c in (
        Character("aizen", "aizen", "aizen_sel.png"),
        Character("archer", "archer", "archer_sel.png"),
        Character("itachi", "itachi", "itachi_sel.png"),
        Character("naruto", "naruto", "naruto_sel.png"),
        Character("shoto", "shoto", "shoto_sel.png"),
        Character("sonic", "itachi", "sonic_sel.png"),
        Character("zoro", "zoro", "Zoro_sel.png"),
        Character("guerrier", "guerrier", "guerrier_sel.png"),
        Character("soigneur", "soigneur", "soigneur_sel.png"),
    )
}


def get_character(name: str) -> Character:
    """Look a character up by name, ignoring case."""
    try:
        return _ROSTER[name.lower()]
    except KeyError:
        raise ValueError(f"unknown character: {name!r}") from None


def character_names() -> list[str]:
    """Names of all characters in selection-screen order."""
    return list(_ROSTER)


def selection_image(name: str) -> str:
    """File name of the character's portrait on the selection screen."""
    return get_character(name).selection_file