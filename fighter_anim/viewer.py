"""Interactive viewer: press 1, 2 or 3 to play a fighter's attacks."""

from __future__ import annotations

import argparse
import sys
from os import PathLike

import pygame

from .animation import Action
from .roster import Character, character_names, get_character
from .sprites import LARGE_CELL, SMALL_CELL, Fighter, ImageLoadError, SpriteSet

BACKGROUND = (30, 30, 30)
FRAME_PAUSE_MS = 1000 // 60
WINDOW_TITLE = "Attack Animations"

_KEY_ACTIONS = {
    pygame.K_1: Action.ATTACK_1,
    pygame.K_2: Action.ATTACK_2,
    pygame.K_3: Action.ATTACK_3,
}


def action_for_key(key: int) -> Action | None:
    """The attack a key starts, or None if the key does nothing."""
    return _KEY_ACTIONS.get(key)


def run_viewer(
    character: Character | str,
    directory: str | PathLike = ".",
    size: tuple[int, int] = SMALL_CELL,
) -> list[tuple[Action, int]]:
    """Show ``character`` until the window is closed; return the frames drawn.

    The fighter rests until a key from 1 to 3 starts the matching attack,
    which plays once before the fighter returns to rest.
    """
    if isinstance(character, str):
        character = get_character(character)

    pygame.init()
    try:
        screen = pygame.display.set_mode(tuple(size))
        pygame.display.set_caption(WINDOW_TITLE)
        fighter = Fighter(SpriteSet.load(character, directory, size))
        fighter.animation.last_change = pygame.time.get_ticks()

        shown: list[tuple[Action, int]] = []
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    action = action_for_key(event.key)
                    if action is not None:
                        # The frame clock is deliberately left running.
                        fighter.trigger(action)

            fighter.update(pygame.time.get_ticks())

            screen.fill(BACKGROUND)
            fighter.draw(screen)
            pygame.display.flip()

            frame = fighter.animation.current_frame()
            if not shown or shown[-1] != frame:
                shown.append(frame)
            pygame.time.delay(FRAME_PAUSE_MS)
        return shown
    finally:
        pygame.quit()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fighter-viewer",
        description="Show a fighter; keys 1, 2 and 3 play its attacks.",
    )
    parser.add_argument("character", type=str.lower, choices=character_names())
    parser.add_argument(
        "-d", "--directory", default=".", help="folder holding the images"
    )
    parser.add_argument(
        "--large", action="store_true", help="use 600x600 cells instead of 96x96"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    size = LARGE_CELL if args.large else SMALL_CELL
    try:
        run_viewer(args.character, args.directory, size)
    except ImageLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())