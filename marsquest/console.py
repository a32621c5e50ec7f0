"""Text console output, number formatting and machine exception handling."""

from __future__ import annotations

import sys
from typing import TextIO

_EXCEPTION_MESSAGES = {
    0: "Instruction address misalignment. ",
    2: "Illegal instruction. ",
}
_UNKNOWN_EXCEPTION = "Unknown error. "

ENVIRONMENT_CALL = 11
SYSCALL_PRINT = 4
SYSCALL_PRINT_CHAR = 11


def format_dec(value: int) -> str:
    """Format a value as an unsigned 32-bit decimal number."""
    return str(value & 0xFFFFFFFF)


def format_hex32(value: int) -> str:
    """Format a value as '0x' followed by eight upper-case hex digits."""
    return f"0x{value & 0xFFFFFFFF:08X}"


class Console:
    """A character console writing to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write_char(self, ch: str | int) -> None:
        """Write one character, given as a string or a character code."""
        if isinstance(ch, int):
            ch = chr(ch & 0xFF)
        elif len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self.stream.write(ch)

    def write(self, text: str) -> None:
        """Write a string."""
        self.stream.write(text)

    def write_dec(self, value: int) -> None:
        """Write a value as an unsigned decimal number."""
        self.stream.write(format_dec(value))

    def write_hex32(self, value: int) -> None:
        """Write a value as a 32-bit hexadecimal number."""
        self.stream.write(format_hex32(value))


class MachineException(RuntimeError):
    """A fatal processor exception; the machine cannot continue."""

    def __init__(self, mcause: int, address: int) -> None:
        self.mcause = mcause
        self.address = address
        super().__init__(f"exception cause {mcause} at {format_hex32(address)}")


def handle_exception(console: Console, arg0, mcause: int, syscall_num: int) -> None:
    """Serve a print system call, or report a fatal exception and raise it."""
    if mcause == ENVIRONMENT_CALL:
        if syscall_num == SYSCALL_PRINT:
            console.write(arg0)
        elif syscall_num == SYSCALL_PRINT_CHAR:
            console.write_char(arg0)
        return
    console.write("\n[EXCEPTION] " + _EXCEPTION_MESSAGES.get(mcause, _UNKNOWN_EXCEPTION))
    console.write("Exception Address: ")
    console.write_hex32(arg0)
    console.write_char("\n")
    raise MachineException(mcause, arg0)


def nextprime(inval: int) -> int:
    """Return the first prime larger than inval; 1 for zero or negative input."""
    if inval <= 0:
        return 1
    if inval == 1:
        return 2
    if inval == 2:
        return 3
    candidate = (inval + 1) | 1
    while any(candidate % factor == 0 for factor in range(3, (candidate >> 1) + 2)):
        candidate += 2
    return candidate