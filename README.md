# chipeight

An early-stage CHIP-8 virtual machine. It provides the following pieces:

- **Machine state.** `chipeight.machine.Chip8` holds:
  - sixteen 8-bit registers, the index register and the program counter;
  - a sixteen-level call stack;
  - the delay and sound timers;
  - the sixteen-key keypad;
  - 4 KiB of memory;
  - the 64×32 video buffer.
- **The hexadecimal font.** It lives in `chipeight.sprites`.
- **The instruction handlers.** They live in `chipeight.instructions`.
- **The opcode table.** `chipeight.opcodes` maps opcode patterns such as `"6xkk"` to their handlers.
- **A window.** A small pygame window front end.

## Installing

```
pip install .
```

The window uses `pygame`, which is installed as a dependency.

## Using the machine

```python
from chipeight.machine import Chip8
from chipeight.opcodes import execute, handler_for
from chipeight.sprites import font_sprite

machine = Chip8()               # PC at 0x200, font loaded at 0x050
loaded = machine.load_rom("game.ch8")

machine.opcode = 0x6A42         # LD VA, 0x42
execute(machine, "6xkk")
assert machine.registers[0xA] == 0x42

print(font_sprite(0xA))         # the five bytes that draw the glyph "A"
```

### Chip8

- **`Chip8()`** starts in the reset state.
- **`reset()`** does the following:
  - clears registers, memory, stack, timers, keys and video;
  - sets the program counter to `0x200`;
  - copies the font into memory starting at `0x050`.
- **`load_rom(path)`** copies a ROM file into memory at `0x200` and returns the number of bytes loaded.
  - It reads at most `0xDFF` bytes.
  - An empty file raises `RomError`.
- **`cycle()`** does the following:
  - fetches the two-byte opcode at the program counter into `opcode`;
  - advances the program counter by two;
  - decrements each timer that is non-zero;
  - returns the opcode.

  A program counter past the end of memory raises `IndexError`.
- **`random_byte()`** returns a random value in `0`–`254`. It is used by the `Cxkk` instruction.

### Stack

`chipeight.stack.Stack` holds up to sixteen return addresses.

- `push(pc)` raises `StackOverflowError` when the stack is full.
- `pop()` raises `StackUnderflowError` when the stack is empty.

### Instructions and opcodes

Each handler in `chipeight.instructions` takes the machine as its only argument and reads its operands from `machine.opcode`.

`chipeight.opcodes` looks up and runs handlers by pattern:

- `handler_for(pattern)` returns the handler for a pattern.
- `execute(machine, pattern)` runs that handler on the machine.

An unknown pattern raises `UnknownOpcodeError`.

Notes on particular instructions:

- **`0nnn` (SYS)** is ignored.
- **`Fx0A` (wait for key)** steps the program counter back by two while no key is down, so the instruction repeats on the next cycle.
- **`Dxyn` (draw)** XORs the sprite onto `machine.video`.
  - Pixels past the right or bottom edge are clipped.
  - VF is set to 1 when a lit pixel is turned off.

## The window

```
chipeight
chipeight --frames 100
```

The window shows a purple square on a black background. It stays open until it is closed, or, with `--frames N`, for at most `N` frames of about 33 ms each.

## What it does not do

The pieces are not yet joined into a running emulator:

- `Chip8.cycle()` fetches an opcode but does not decode or execute it. The caller picks the pattern and calls `execute`.
- The window does not show the machine's video buffer.
- The window does not feed key presses into the keypad.
- Nothing plays sound when the sound timer runs.

## Running the tests

```
pip install .[test]
pytest
```