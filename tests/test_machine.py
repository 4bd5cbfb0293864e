import pytest

from chipeight.machine import (
    FONT_START,
    INSTRUCTION_START,
    MAX_ROM_SIZE,
    MEMORY_SIZE,
    Chip8,
    RomError,
    random_byte,
)
from chipeight.sprites import font_sprite


def test_reset_points_pc_at_program_start():
    machine = Chip8()
    assert machine.pc == INSTRUCTION_START == 0x200


def test_font_loaded_at_font_start():
    machine = Chip8()
    assert tuple(machine.memory[FONT_START:FONT_START + 5]) == font_sprite(0)
    for character in range(16):
        start = FONT_START + character * 5
        assert tuple(machine.memory[start:start + 5]) == font_sprite(character)


def test_program_area_starts_empty():
    machine = Chip8()
    assert not any(machine.memory[INSTRUCTION_START:])
    assert len(machine.memory) == MEMORY_SIZE


def test_reset_clears_state():
    machine = Chip8()
    machine.registers[3] = 7
    machine.pc = 0x400
    machine.keys[2] = True
    machine.video[0][0] = 1
    machine.stack.push(0x300)
    machine.reset()
    assert machine.registers[3] == 0
    assert machine.pc == INSTRUCTION_START
    assert not any(machine.keys.values())
    assert machine.video[0][0] == 0
    assert len(machine.stack) == 0


def test_load_rom_copies_bytes(tmp_path):
    data = bytes([0x12, 0x34, 0xAB, 0xCD])
    rom = tmp_path / "game.ch8"
    rom.write_bytes(data)
    machine = Chip8()
    assert machine.load_rom(rom) == len(data)
    assert bytes(machine.memory[INSTRUCTION_START:INSTRUCTION_START + len(data)]) == data


def test_load_rom_truncates_oversized(tmp_path):
    rom = tmp_path / "big.ch8"
    rom.write_bytes(b"\x01" * (MAX_ROM_SIZE + 100))
    machine = Chip8()
    assert machine.load_rom(rom) == MAX_ROM_SIZE
    assert len(machine.memory) == MEMORY_SIZE


def test_load_empty_rom_raises(tmp_path):
    rom = tmp_path / "empty.ch8"
    rom.write_bytes(b"")
    with pytest.raises(RomError):
        Chip8().load_rom(rom)


def test_load_missing_rom_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Chip8().load_rom(tmp_path / "missing.ch8")


def test_cycle_fetches_big_endian_opcode():
    machine = Chip8()
    machine.memory[INSTRUCTION_START] = 0x12
    machine.memory[INSTRUCTION_START + 1] = 0x34
    assert machine.cycle() == 0x1234
    assert machine.opcode == 0x1234
    assert machine.pc == INSTRUCTION_START + 2


def test_cycle_ticks_timers_down_to_zero():
    machine = Chip8()
    machine.delay_timer = 1
    machine.sound_timer = 2
    machine.cycle()
    assert (machine.delay_timer, machine.sound_timer) == (0, 1)
    machine.cycle()
    assert (machine.delay_timer, machine.sound_timer) == (0, 0)


def test_cycle_past_memory_end_raises():
    machine = Chip8()
    machine.pc = MEMORY_SIZE - 1
    with pytest.raises(IndexError):
        machine.cycle()


def test_random_byte_range():
    values = [random_byte() for _ in range(2000)]
    assert all(0 <= v < 255 for v in values)
    assert len(set(values)) > 1