"""Window front end: opens the display window and runs its event loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

WINDOW_TITLE = "test"
WINDOW_SIZE = (800, 600)
BACKGROUND = (0, 0, 0)
PURPLE = (255, 0, 255)
SQUARE = (0, 0, 200, 200)
FRAME_DELAY_MS = 33


def run_window(max_frames: int | None = None) -> int:
    """Show the window until it is closed or ``max_frames`` have passed.

    Returns the number of frames run.
    """
    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        surface.fill(BACKGROUND)
        surface.fill(PURPLE, pygame.Rect(*SQUARE))
        pygame.display.flip()

        frames = 0
        running = True
        while running and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    print("Quit")
                    running = False
            pygame.time.delay(FRAME_DELAY_MS)
            frames += 1
        return frames
    finally:
        pygame.quit()


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Open the emulator window.")
    parser.add_argument(
        "--frames",
        type=_positive,
        default=None,
        help="stop after this many frames instead of waiting for the window to close",
    )
    args = parser.parse_args(argv)
    run_window(args.frames)
    return 0