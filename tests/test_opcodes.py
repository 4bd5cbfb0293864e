import pytest

from chipeight import instructions as ops
from chipeight.machine import Chip8
from chipeight.opcodes import OPCODE_TABLE, UnknownOpcodeError, execute, handler_for


def test_handler_for_known_patterns():
    assert handler_for("00E0") is ops.op_cls
    assert handler_for("00EE") is ops.op_ret
    assert handler_for("Dxyn") is ops.op_drw_vx_vy_nibble


def test_subtract_and_timer_patterns_map_to_distinct_handlers():
    assert handler_for("8xy5") is ops.op_sub_vx_vy
    assert handler_for("8xy7") is ops.op_subn_vx_vy
    assert handler_for("Fx07") is ops.op_ld_vx_dt
    assert handler_for("Fx15") is ops.op_ld_dt_vx


def test_every_handler_comes_from_instructions():
    public = {getattr(ops, name) for name in dir(ops) if name.startswith("op_")}
    assert set(OPCODE_TABLE.values()) <= public


@pytest.mark.parametrize("pattern", ["", "ZZZZ", "8xy9", "00e0"])
def test_unknown_pattern_raises(pattern):
    with pytest.raises(UnknownOpcodeError):
        handler_for(pattern)


def test_execute_runs_handler():
    machine = Chip8()
    machine.opcode = 0x6A42
    execute(machine, "6xkk")
    assert machine.registers[0xA] == 0x42


def test_execute_jump():
    machine = Chip8()
    machine.opcode = 0x1ABC
    execute(machine, "1nnn")
    assert machine.pc == 0xABC


def test_execute_unknown_leaves_machine_untouched():
    machine = Chip8()
    start = machine.pc
    with pytest.raises(UnknownOpcodeError):
        execute(machine, "Gxyz")
    assert machine.pc == start