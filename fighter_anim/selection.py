"""Character selection screen: every fighter's portrait in a grid."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path

import pygame

from .roster import character_names, selection_image
from .sprites import SMALL_CELL, ImageLoadError, load_image

COLUMNS = 3
ROWS = 3
BACKGROUND = (20, 20, 20)
FRAME_PAUSE_MS = 16
WINDOW_TITLE = "Character Selection"


def grid_positions(
    columns: int = COLUMNS,
    rows: int = ROWS,
    width: int = SMALL_CELL[0],
    height: int = SMALL_CELL[1],
) -> list[tuple[int, int]]:
    """Top-left corners of the grid cells, row by row."""
    if columns < 0 or rows < 0:
        raise ValueError("columns and rows must not be negative")
    if width <= 0 or height <= 0:
        raise ValueError("cell width and height must be positive")
    return [(col * width, row * height) for row in range(rows) for col in range(columns)]


def run_selection(directory: str | PathLike = ".") -> list[tuple[str, tuple[int, int]]]:
    """Show all portraits until the window is closed.

    Returns each character's name with the cell it was drawn in.
    """
    base = Path(directory)
    names = character_names()
    positions = grid_positions(COLUMNS, ROWS, *SMALL_CELL)
    if len(names) > len(positions):
        raise ValueError("the grid has fewer cells than there are characters")

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (COLUMNS * SMALL_CELL[0], ROWS * SMALL_CELL[1])
        )
        pygame.display.set_caption(WINDOW_TITLE)
        tiles = [
            (name, load_image(base / selection_image(name), SMALL_CELL), position)
            for name, position in zip(names, positions)
        ]

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            screen.fill(BACKGROUND)
            for _, image, position in tiles:
                screen.blit(image, position)
            pygame.display.flip()
            pygame.time.delay(FRAME_PAUSE_MS)
        return [(name, position) for name, _, position in tiles]
    finally:
        pygame.quit()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fighter-select",
        description="Show every fighter's portrait in a grid.",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="folder holding the images"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        run_selection(args.directory)
    except ImageLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())