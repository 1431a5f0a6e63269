"""Loop one attack of a character for a fixed time in a window."""

from __future__ import annotations

import argparse
import sys
from os import PathLike

import pygame

from .animation import LOOP_DURATION_MS, Action, LoopingAnimation
from .roster import Character, character_names, get_character
from .sprites import LARGE_CELL, ImageLoadError, SpriteSet

BACKGROUND = (30, 30, 30)
FRAME_PAUSE_MS = 1000 // 60


def run_loop(
    character: Character | str,
    action: Action | int = Action.ATTACK_1,
    directory: str | PathLike = ".",
    duration_ms: int = LOOP_DURATION_MS,
) -> list[tuple[Action, int]]:
    """Cycle the frames of ``action`` for ``duration_ms``; return the frames drawn.

    Once the time is up a quit event is posted and the window closes on the
    next pass, as it does when the user closes it.
    """
    action = Action(action)
    if not action.is_attack:
        raise ValueError("run_loop needs an attack action, not rest")
    if duration_ms < 0:
        raise ValueError(f"duration must not be negative, got {duration_ms}")
    if isinstance(character, str):
        character = get_character(character)

    pygame.init()
    try:
        screen = pygame.display.set_mode(LARGE_CELL)
        pygame.display.set_caption(f"Attack {int(action)} animation")
        sprites = SpriteSet.load(character, directory, LARGE_CELL)
        animation = LoopingAnimation(
            action, pygame.time.get_ticks(), duration=duration_ms
        )

        shown: list[tuple[Action, int]] = []
        quit_posted = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            if not animation.update(pygame.time.get_ticks()) and not quit_posted:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                quit_posted = True

            frame = animation.current_frame()
            screen.fill(BACKGROUND)
            screen.blit(sprites.frame_for(*frame), (0, 0))
            pygame.display.flip()

            if not shown or shown[-1] != frame:
                shown.append(frame)
            pygame.time.delay(FRAME_PAUSE_MS)
        return shown
    finally:
        pygame.quit()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fighter-loop",
        description="Loop one attack of a fighter for a fixed time.",
    )
    parser.add_argument("character", type=str.lower, choices=character_names())
    parser.add_argument(
        "attack", type=int, nargs="?", default=1, choices=(1, 2, 3),
        help="which attack to loop (default: 1)",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="folder holding the images"
    )
    parser.add_argument(
        "--duration", type=int, default=LOOP_DURATION_MS,
        help=f"how long to play, in milliseconds (default: {LOOP_DURATION_MS})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        run_loop(args.character, Action(args.attack), args.directory, args.duration)
    except ImageLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())