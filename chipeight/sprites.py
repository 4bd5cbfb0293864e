"""Built-in hexadecimal font sprites."""

from __future__ import annotations

SPRITE_BYTES = 5

# Each character sprite is five bytes, one row of eight pixels per byte.
FONT_SET: dict[int, tuple[int, int, int, int, int]] = {
    0x0: (0xF0, 0x90, 0x90, 0x90, 0xF0),
    0x1: (0x20, 0x60, 0x20, 0x20, 0x70),
    0x2: (0xF0, 0x10, 0xF0, 0x80, 0xF0),
    0x3: (0xF0, 0x10, 0xF0, 0x10, 0xF0),
    0x4: (0x90, 0x90, 0xF0, 0x10, 0x10),
    0x5: (0xF0, 0x80, 0xF0, 0x10, 0xF0),
    0x6: (0xF0, 0x80, 0xF0, 0x90, 0xF0),
    0x7: (0xF0, 0x10, 0x20, 0x40, 0x40),
    0x8: (0xF0, 0x90, 0xF0, 0x90, 0xF0),
    0x9: (0xF0, 0x90, 0xF0, 0x10, 0xF0),
    0xA: (0xF0, 0x90, 0xF0, 0x90, 0x90),
    0xB: (0xE0, 0x90, 0xE0, 0x90, 0xE0),
    0xC: (0xF0, 0x80, 0x80, 0x80, 0xF0),
    0xD: (0xE0, 0x90, 0x90, 0x90, 0xE0),
    0xE: (0xF0, 0x80, 0xF0, 0x80, 0xF0),
    0xF: (0xF0, 0x80, 0xF0, 0x80, 0x80),
}


def font_sprite(character: int) -> tuple[int, int, int, int, int]:
    """Return the five sprite bytes for a hexadecimal digit 0x0-0xF."""
    try:
        return FONT_SET[character]
    except KeyError:
        raise ValueError(f"no font sprite for character {character!r}") from None