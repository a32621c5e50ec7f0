"""A simulated board: switches, push button, LEDs, seven-segment displays and timer."""

from __future__ import annotations

DISPLAY_COUNT = 6
SWITCH_MASK = 0x3FF
LED_MASK = 0x3FF
TIMER_PERIOD = 3_000_000  # 100 ms at 30 MHz
TIMEOUTS_PER_SECOND = 10

CAUSE_TIMER = 16
CAUSE_SWITCH = 17
CAUSE_BUTTON = 18

BLANK = 100

# Segment patterns are active low: a 0 bit lights the segment.
_SEGMENTS = {
    0: 0b1000000,
    1: 0b1111001,
    2: 0b0100100,
    3: 0b0110000,
    4: 0b0011001,
    5: 0b0010010,
    6: 0b0000010,
    7: 0b1111000,
    8: 0b0000000,
    9: 0b0011000,
    10: 0b0001110,  # F
    11: 0b0100011,  # o
    12: 0b0100001,  # d
    13: 0b0001001,  # H
    BLANK: 0b1111111,
}


def segment_pattern(value: int) -> int:
    """Return the segment pattern for a digit or glyph code; unknown codes show 0."""
    return _SEGMENTS.get(value, _SEGMENTS[0])


class Board:
    """The board's inputs and outputs, with its timer and interrupt logic."""

    def __init__(self) -> None:
        self.switches = 0
        self.switch_changes = 0
        self.button = 0
        self.leds = 0
        self.displays = [segment_pattern(BLANK)] * DISPLAY_COUNT
        self.timer_period = 0
        self.timer_control = 0
        self.timer_status = 0
        self.button_irq_mask = 0
        self.switch_irq_mask = 0
        self.interrupts_enabled = False
        self.timeout_count = 0
        self.button_toggle = False
        self.switch_event = False
        self.timer_event = False
        self.button_event = False

    @property
    def timer_running(self) -> bool:
        """True once the timer has been started."""
        return bool(self.timer_control & 0b100) and self.timer_period > 0

    def get_btn(self) -> int:
        """Return 1 while the push button is held, else 0."""
        return self.button & 0x1

    def get_sw(self) -> int:
        """Return the state of the ten toggle switches."""
        return self.switches & SWITCH_MASK

    def set_switches(self, value: int) -> None:
        """Move the toggle switches to a new state, raising an interrupt on change."""
        changed = (self.switches ^ value) & SWITCH_MASK
        self.switches = value & SWITCH_MASK
        self.switch_changes += 1
        if changed & self.switch_irq_mask and self.interrupts_enabled:
            self.handle_interrupt(CAUSE_SWITCH)

    def set_display(self, display_number: int, value: int) -> None:
        """Show a digit or glyph code on one of the six displays."""
        if not 0 <= display_number < DISPLAY_COUNT:
            raise ValueError("Invalid display number")
        self.displays[display_number] = segment_pattern(value)

    def set_leds(self, led_mask: int) -> None:
        """Light the LEDs given by a bit mask."""
        self.leds = led_mask

    def get_leds(self) -> int:
        """Return which of the ten LEDs are lit."""
        return self.leds & LED_MASK

    def labinit(self) -> None:
        """Start the 100 ms timer and enable timer, button and switch interrupts."""
        self.timer_period = TIMER_PERIOD
        self.timer_control = 0b111
        self.button_irq_mask = 0b1
        self.switch_irq_mask = SWITCH_MASK
        self.interrupts_enabled = True

    def handle_interrupt(self, cause: int) -> None:
        """Service an interrupt and raise the matching event flag."""
        if cause == CAUSE_TIMER:
            self.timer_status &= ~0x1
            self.timeout_count += 1
            if self.timeout_count >= TIMEOUTS_PER_SECOND:
                self.timeout_count = 0
                self.timer_event = True
        elif cause == CAUSE_SWITCH:
            self.switch_event = True
        elif cause == CAUSE_BUTTON:
            # Press and release both interrupt; only every second one counts.
            if self.button_toggle:
                self.button_event = True
                self.button_toggle = False
            else:
                self.button_toggle = True

    def tick(self) -> None:
        """Let one timer period elapse."""
        if not self.timer_running:
            return
        self.timer_status |= 0x1
        if self.interrupts_enabled and self.timer_control & 0b1:
            self.handle_interrupt(CAUSE_TIMER)

    def press_button(self) -> None:
        """Press and release the push button."""
        for state in (1, 0):
            self.button = state
            if self.interrupts_enabled and self.button_irq_mask:
                self.handle_interrupt(CAUSE_BUTTON)

    def _take(self, name: str) -> bool:
        raised = getattr(self, name)
        setattr(self, name, False)
        return raised

    def take_switch_event(self) -> bool:
        """Return whether a switch event was pending, clearing it."""
        return self._take("switch_event")

    def take_timer_event(self) -> bool:
        """Return whether a one-second timer event was pending, clearing it."""
        return self._take("timer_event")

    def take_button_event(self) -> bool:
        """Return whether a button event was pending, clearing it."""
        return self._take("button_event")