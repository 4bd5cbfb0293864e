"""Call stack for nested subroutines."""

from __future__ import annotations

STACK_LEVELS = 16


class StackError(Exception):
    """Base class for call stack errors."""


class StackOverflowError(StackError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(StackError):
    """Raised when popping from an empty stack."""


class Stack:
    """A fixed-depth stack of 16-bit return addresses."""

    def __init__(self, levels: int = STACK_LEVELS) -> None:
        self.levels = levels
        self._addresses: list[int] = []

    def push(self, pc: int) -> None:
        """Store a return address on top of the stack."""
        if len(self._addresses) >= self.levels:
            raise StackOverflowError(f"stack holds at most {self.levels} addresses")
        self._addresses.append(pc & 0xFFFF)

    def pop(self) -> int:
        """Remove and return the address on top of the stack."""
        if not self._addresses:
            raise StackUnderflowError("stack is empty")
        return self._addresses.pop()

    @property
    def pointer(self) -> int:
        """Number of addresses currently held."""
        return len(self._addresses)

    def clear(self) -> None:
        self._addresses.clear()

    def __len__(self) -> int:
        return len(self._addresses)

    def __iter__(self):
        return iter(self._addresses)

    def __repr__(self) -> str:
        return f"Stack({[hex(a) for a in self._addresses]})"