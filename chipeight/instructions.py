"""Handlers for the interpreter's instruction set.

Every handler takes a machine whose ``opcode`` holds the instruction
being executed. Its operands are read from the opcode fields:
``x`` (bits 8-11), ``y`` (bits 4-7), ``n`` (bits 0-3), ``kk`` (low byte)
and ``nnn`` (low twelve bits).
"""

from __future__ import annotations

from collections.abc import Mapping

from .machine import (
    FONT_START,
    MEMORY_SIZE,
    PIXEL_OFF,
    PIXEL_ON,
    VIDEO_HEIGHT,
    VIDEO_WIDTH,
    Chip8,
    random_byte,
)
from .sprites import SPRITE_BYTES

FLAG = 0xF
SPRITE_WIDTH = 8


def _x(machine: Chip8) -> int:
    return (machine.opcode >> 8) & 0xF


def _y(machine: Chip8) -> int:
    return (machine.opcode >> 4) & 0xF


def _n(machine: Chip8) -> int:
    return machine.opcode & 0xF


def _kk(machine: Chip8) -> int:
    return machine.opcode & 0xFF


def _nnn(machine: Chip8) -> int:
    return machine.opcode & 0x0FFF


def _skip(machine: Chip8) -> None:
    machine.pc = (machine.pc + 2) & 0xFFFF


def _check_range(machine: Chip8, count: int) -> None:
    if machine.index + count > MEMORY_SIZE:
        raise IndexError(
            f"{count} bytes at {machine.index:#05x} run past the end of memory"
        )


def op_sys(machine: Chip8) -> None:
    """0nnn - SYS addr: machine-code routines are not supported; ignored."""


def op_cls(machine: Chip8) -> None:
    """00E0 - CLS: clear the video display."""
    for line in machine.video:
        line[:] = [PIXEL_OFF] * len(line)


def op_ret(machine: Chip8) -> None:
    """00EE - RET: return from a subroutine."""
    machine.pc = machine.stack.pop()


def op_jp_addr(machine: Chip8) -> None:
    """1nnn - JP addr: set PC to nnn."""
    machine.pc = _nnn(machine)


def op_call_addr(machine: Chip8) -> None:
    """2nnn - CALL addr: push PC and jump to nnn."""
    machine.stack.push(machine.pc)
    machine.pc = _nnn(machine)


def op_se_vx_byte(machine: Chip8) -> None:
    """3xkk - SE Vx, byte: skip the next instruction if Vx == kk."""
    if machine.registers[_x(machine)] == _kk(machine):
        _skip(machine)


def op_sne_vx_byte(machine: Chip8) -> None:
    """4xkk - SNE Vx, byte: skip the next instruction if Vx != kk."""
    if machine.registers[_x(machine)] != _kk(machine):
        _skip(machine)


def op_se_vx_vy(machine: Chip8) -> None:
    """5xy0 - SE Vx, Vy: skip the next instruction if Vx == Vy."""
    if machine.registers[_x(machine)] == machine.registers[_y(machine)]:
        _skip(machine)


def op_ld_vx_byte(machine: Chip8) -> None:
    """6xkk - LD Vx, byte: set Vx = kk."""
    machine.registers[_x(machine)] = _kk(machine)


def op_add_vx_byte(machine: Chip8) -> None:
    """7xkk - ADD Vx, byte: set Vx = Vx + kk, wrapping, without carry."""
    x = _x(machine)
    machine.registers[x] = (machine.registers[x] + _kk(machine)) & 0xFF


def op_ld_vx_vy(machine: Chip8) -> None:
    """8xy0 - LD Vx, Vy: set Vx = Vy."""
    machine.registers[_x(machine)] = machine.registers[_y(machine)]


def op_or_vx_vy(machine: Chip8) -> None:
    """8xy1 - OR Vx, Vy: set Vx = Vx | Vy."""
    machine.registers[_x(machine)] |= machine.registers[_y(machine)]


def op_and_vx_vy(machine: Chip8) -> None:
    """8xy2 - AND Vx, Vy: set Vx = Vx & Vy."""
    machine.registers[_x(machine)] &= machine.registers[_y(machine)]


def op_xor_vx_vy(machine: Chip8) -> None:
    """8xy3 - XOR Vx, Vy: set Vx = Vx ^ Vy."""
    machine.registers[_x(machine)] ^= machine.registers[_y(machine)]


def op_add_vx_vy(machine: Chip8) -> None:
    """8xy4 - ADD Vx, Vy: set Vx = Vx + Vy and VF = carry."""
    x = _x(machine)
    total = machine.registers[x] + machine.registers[_y(machine)]
    machine.registers[FLAG] = 1 if total > 0xFF else 0
    machine.registers[x] = total & 0xFF


def op_sub_vx_vy(machine: Chip8) -> None:
    """8xy5 - SUB Vx, Vy: set Vx = Vx - Vy and VF = NOT borrow."""
    x = _x(machine)
    vx, vy = machine.registers[x], machine.registers[_y(machine)]
    machine.registers[FLAG] = 1 if vx > vy else 0
    machine.registers[x] = (vx - vy) & 0xFF


def op_shr_vx(machine: Chip8) -> None:
    """8xy6 - SHR Vx: VF = least significant bit of Vx, then Vx is halved."""
    x = _x(machine)
    vx = machine.registers[x]
    machine.registers[FLAG] = vx & 1
    machine.registers[x] = vx >> 1


def op_subn_vx_vy(machine: Chip8) -> None:
    """8xy7 - SUBN Vx, Vy: set Vx = Vy - Vx and VF = NOT borrow."""
    x = _x(machine)
    vx, vy = machine.registers[x], machine.registers[_y(machine)]
    machine.registers[FLAG] = 0 if vx > vy else 1
    machine.registers[x] = (vy - vx) & 0xFF


def op_shl_vx(machine: Chip8) -> None:
    """8xyE - SHL Vx: VF = most significant bit of Vx, then Vx is doubled."""
    x = _x(machine)
    vx = machine.registers[x]
    machine.registers[FLAG] = (vx >> 7) & 1
    machine.registers[x] = (vx << 1) & 0xFF


def op_sne_vx_vy(machine: Chip8) -> None:
    """9xy0 - SNE Vx, Vy: skip the next instruction if Vx != Vy."""
    if machine.registers[_x(machine)] != machine.registers[_y(machine)]:
        _skip(machine)


def op_ld_i_addr(machine: Chip8) -> None:
    """Annn - LD I, addr: set I = nnn."""
    machine.index = _nnn(machine)


def op_jp_v0_addr(machine: Chip8) -> None:
    """Bnnn - JP V0, addr: set PC = nnn + V0."""
    machine.pc = (_nnn(machine) + machine.registers[0]) & 0xFFFF


def op_rnd_vx_byte(machine: Chip8) -> None:
    """Cxkk - RND Vx, byte: set Vx = random byte & kk."""
    machine.registers[_x(machine)] = random_byte() & _kk(machine)


def op_drw_vx_vy_nibble(machine: Chip8) -> None:
    """Dxyn - DRW Vx, Vy, nibble: XOR an n-byte sprite from I onto the display.

    The sprite starts at (Vx, Vy), wrapped onto the screen; pixels that fall
    past the right or bottom edge are clipped. VF is set to 1 when any lit
    pixel is switched off, otherwise 0.
    """
    left = machine.registers[_x(machine)] % VIDEO_WIDTH
    top = machine.registers[_y(machine)] % VIDEO_HEIGHT
    rows = machine.memory[machine.index:machine.index + _n(machine)]
    collision = False
    for y, sprite_byte in enumerate(rows, start=top):
        if y >= VIDEO_HEIGHT:
            break
        line = machine.video[y]
        for bit in range(SPRITE_WIDTH):
            x = left + bit
            if x >= VIDEO_WIDTH:
                break
            if not sprite_byte & (0x80 >> bit):
                continue
            if line[x]:
                line[x] = PIXEL_OFF
                collision = True
            else:
                line[x] = PIXEL_ON
    machine.registers[FLAG] = int(collision)


def op_skp_vx(machine: Chip8) -> None:
    """Ex9E - SKP Vx: skip the next instruction if key Vx is pressed."""
    if machine.keys.get(machine.registers[_x(machine)], False):
        _skip(machine)


def op_sknp_vx(machine: Chip8) -> None:
    """ExA1 - SKNP Vx: skip the next instruction if key Vx is not pressed."""
    if not machine.keys.get(machine.registers[_x(machine)], False):
        _skip(machine)


def op_ld_vx_dt(machine: Chip8) -> None:
    """Fx07 - LD Vx, DT: set Vx = delay timer."""
    machine.registers[_x(machine)] = machine.delay_timer


def changed_key(machine: Chip8, snapshot: Mapping[int, bool]) -> int | None:
    """Return the first key whose state differs from ``snapshot``, or None."""
    return next(
        (
            key
            for key, pressed in snapshot.items()
            if machine.keys.get(key, False) != pressed
        ),
        None,
    )


def op_ld_vx_k(machine: Chip8) -> None:
    """Fx0A - LD Vx, K: wait for a key press and store the key in Vx.

    Waiting is done by stepping PC back so the instruction runs again on
    the next cycle until some key is down.
    """
    released = {key: False for key in machine.keys}
    key = changed_key(machine, released)
    if key is None:
        machine.pc = (machine.pc - 2) & 0xFFFF
    else:
        machine.registers[_x(machine)] = key


def op_ld_dt_vx(machine: Chip8) -> None:
    """Fx15 - LD DT, Vx: set delay timer = Vx."""
    machine.delay_timer = machine.registers[_x(machine)]


def op_ld_st_vx(machine: Chip8) -> None:
    """Fx18 - LD ST, Vx: set sound timer = Vx."""
    machine.sound_timer = machine.registers[_x(machine)]


def op_add_i_vx(machine: Chip8) -> None:
    """Fx1E - ADD I, Vx: set I = I + Vx."""
    machine.index = (machine.index + machine.registers[_x(machine)]) & 0xFFFF


def op_ld_f_vx(machine: Chip8) -> None:
    """Fx29 - LD F, Vx: set I to the font sprite for the digit in Vx."""
    digit = machine.registers[_x(machine)] & 0xF
    machine.index = FONT_START + digit * SPRITE_BYTES


def op_ld_b_vx(machine: Chip8) -> None:
    """Fx33 - LD B, Vx: store the decimal digits of Vx at I, I+1 and I+2."""
    _check_range(machine, 3)
    value = machine.registers[_x(machine)]
    hundreds, rest = divmod(value, 100)
    tens, ones = divmod(rest, 10)
    machine.memory[machine.index:machine.index + 3] = bytes((hundreds, tens, ones))


def op_ld_i_vx(machine: Chip8) -> None:
    """Fx55 - LD [I], Vx: store V0-Vx in memory from I; I moves past them."""
    count = _x(machine) + 1
    _check_range(machine, count)
    machine.memory[machine.index:machine.index + count] = machine.registers[:count]
    machine.index += count


def op_ld_vx_i(machine: Chip8) -> None:
    """Fx65 - LD Vx, [I]: read V0-Vx from memory at I; I moves past them."""
    count = _x(machine) + 1
    _check_range(machine, count)
    machine.registers[:count] = machine.memory[machine.index:machine.index + count]
    machine.index += count


def op_null(machine: Chip8) -> None:
    """Do nothing."""