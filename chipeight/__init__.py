"""CHIP-8 machine state, font, instruction handlers, opcode table and a window."""

__version__ = "0.1.0"
__all__ = ["app", "instructions", "machine", "opcodes", "sprites", "stack"]