"""Text output and switch input shared by the game's interactions."""

from __future__ import annotations

import time
from collections.abc import Iterable

from .board import Board
from .console import Console

SWITCH_EAST = 1 << 0
SWITCH_WEST = 1 << 1
SWITCH_SOUTH = 1 << 2
SWITCH_NORTH = 1 << 3
SWITCH_DRINK = 1 << 6
SWITCH_EAT = 1 << 7
SWITCH_BACK = 1 << 8
SWITCH_INTERACT = 1 << 9

SLOT_SWITCHES = (1 << 0, 1 << 1, 1 << 2, 1 << 3, 1 << 4)

HOLD_SECONDS = 2
DEFAULT_EXIT_MESSAGE = "Press BACK to exit.\n"


class Session:
    """Couples a board and a console, and feeds the board switch input."""

    def __init__(
        self,
        board: Board,
        console: Console | None = None,
        switch_input: Iterable[int] = (),
        tick_seconds: float = 0.0,
    ) -> None:
        self.board = board
        self.console = console if console is not None else Console()
        self.tick_seconds = tick_seconds
        self.running = True
        self._inputs = iter(switch_input)
        self._seen = -1

    def say(self, text: str) -> None:
        """Write text to the console."""
        self.console.write(text)

    def say_hold(self, text: str) -> None:
        """Write text, then wait for two one-second timer events."""
        if not self.board.timer_running:
            raise RuntimeError("timer is not running")
        self.say(text)
        remaining = HOLD_SECONDS
        while remaining:
            if self.board.take_timer_event():
                remaining -= 1
                continue
            if self.tick_seconds:
                time.sleep(self.tick_seconds)
            self.board.tick()

    def read_switches(self) -> int:
        """Return the switches; once a state has been read, wait for the next one."""
        if self.board.switch_changes == self._seen:
            try:
                value = next(self._inputs)
            except StopIteration:
                raise EOFError("no more switch input") from None
            self.board.set_switches(value)
        self._seen = self.board.switch_changes
        return self.board.get_sw()

    def wait_for_yes_no(self) -> bool:
        """Wait until EAST (yes) or WEST (no) is switched on."""
        self.say("Press EAST for Yes, WEST for No.\n")
        while True:
            switches = self.read_switches()
            if switches & SWITCH_EAST:
                return True
            if switches & SWITCH_WEST:
                return False

    def wait_for_exit(self, message: str | None = None) -> None:
        """Show a message and wait until BACK is switched on."""
        self.say_hold(message if message else DEFAULT_EXIT_MESSAGE)
        while not self.read_switches() & SWITCH_BACK:
            pass
        self.say_hold("Exiting...\n")