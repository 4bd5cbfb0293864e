"""Machine state: registers, memory, timers, keys and video."""

from __future__ import annotations

import os
import random

from .sprites import FONT_SET, SPRITE_BYTES
from .stack import Stack

MEMORY_SIZE = 4096
REGISTER_COUNT = 16
KEY_COUNT = 16
VIDEO_WIDTH = 64
VIDEO_HEIGHT = 32

INSTRUCTION_START = 0x200
FONT_START = 0x050
MAX_ROM_SIZE = 0xFFF - INSTRUCTION_START

PIXEL_OFF = 0x00000000
PIXEL_ON = 0xFFFFFFFF


class RomError(ValueError):
    """Raised when a ROM cannot be loaded."""


def random_byte() -> int:
    """Return a random value in the range 0-254."""
    return random.randrange(255)


class Chip8:
    """The complete state of one interpreter."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Clear all state, point PC at the program area and load the font."""
        self.registers = bytearray(REGISTER_COUNT)
        self.index = 0
        self.pc = INSTRUCTION_START
        self.stack = Stack()
        self.delay_timer = 0
        self.sound_timer = 0
        self.keys: dict[int, bool] = {key: False for key in range(KEY_COUNT)}
        self.memory = bytearray(MEMORY_SIZE)
        self.video = [[0] * VIDEO_WIDTH for _ in range(VIDEO_HEIGHT)]
        self.opcode = 0
        for character, sprite in FONT_SET.items():
            start = FONT_START + character * SPRITE_BYTES
            self.memory[start:start + SPRITE_BYTES] = bytes(sprite)

    def load_rom(self, path: str | os.PathLike[str]) -> int:
        """Copy a ROM file into memory at the program area; return bytes loaded."""
        with open(path, "rb") as rom:
            data = rom.read(MAX_ROM_SIZE)
        if not data:
            raise RomError(f"ROM {os.fspath(path)!r} is empty")
        self.memory[INSTRUCTION_START:INSTRUCTION_START + len(data)] = data
        return len(data)

    def cycle(self) -> int:
        """Fetch the opcode at PC, advance PC past it and tick the timers."""
        if self.pc + 1 >= MEMORY_SIZE:
            raise IndexError(f"program counter {self.pc:#05x} outside memory")
        self.opcode = (self.memory[self.pc] << 8) | self.memory[self.pc + 1]
        self.pc += 2
        if self.delay_timer:
            self.delay_timer -= 1
        if self.sound_timer:
            self.sound_timer -= 1
        return self.opcode