"""Table mapping instruction patterns to their handlers."""

from __future__ import annotations

from collections.abc import Callable

from . import instructions as ops
from .machine import Chip8

Handler = Callable[[Chip8], None]


class UnknownOpcodeError(LookupError):
    """Raised for a pattern that names no instruction."""


OPCODE_TABLE: dict[str, Handler] = {
    "0nnn": ops.op_sys,
    "00E0": ops.op_cls,
    "00EE": ops.op_ret,
    "1nnn": ops.op_jp_addr,
    "2nnn": ops.op_call_addr,
    "3xkk": ops.op_se_vx_byte,
    "4xkk": ops.op_sne_vx_byte,
    "5xy0": ops.op_se_vx_vy,
    "6xkk": ops.op_ld_vx_byte,
    "7xkk": ops.op_add_vx_byte,
    "8xy0": ops.op_ld_vx_vy,
    "8xy1": ops.op_or_vx_vy,
    "8xy2": ops.op_and_vx_vy,
    "8xy3": ops.op_xor_vx_vy,
    "8xy4": ops.op_add_vx_vy,
    "8xy5": ops.op_sub_vx_vy,
    "8xy6": ops.op_shr_vx,
    "8xy7": ops.op_subn_vx_vy,
    "8xyE": ops.op_shl_vx,
    "9xy0": ops.op_sne_vx_vy,
    "Annn": ops.op_ld_i_addr,
    "Bnnn": ops.op_jp_v0_addr,
    "Cxkk": ops.op_rnd_vx_byte,
    "Dxyn": ops.op_drw_vx_vy_nibble,
    "Ex9E": ops.op_skp_vx,
    "ExA1": ops.op_sknp_vx,
    "Fx07": ops.op_ld_vx_dt,
    "Fx0A": ops.op_ld_vx_k,
    "Fx15": ops.op_ld_dt_vx,
    "Fx18": ops.op_ld_st_vx,
    "Fx1E": ops.op_add_i_vx,
    "Fx29": ops.op_ld_f_vx,
    "Fx33": ops.op_ld_b_vx,
    "Fx55": ops.op_ld_i_vx,
    "Fx65": ops.op_ld_vx_i,
}


def handler_for(pattern: str) -> Handler:
    """Return the handler for an instruction pattern such as ``"8xy4"``."""
    try:
        return OPCODE_TABLE[pattern]
    except KeyError:
        raise UnknownOpcodeError(f"no instruction for pattern {pattern!r}") from None


def execute(machine: Chip8, pattern: str) -> None:
    """Run the instruction named by ``pattern`` on ``machine``."""
    handler_for(pattern)(machine)