"""Demonstration of reading button events by polling instead of callbacks."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Optional, Sequence, TextIO

from .button import TICKS_INTERVAL, Button, ButtonEvent, ButtonGroup

DEMO_PATTERN: tuple[int, ...] = (
    0, 0, 0, 0, 0,
    1, 1, 1, 1, 0,
    0, 0, 0, 0, 0,
    1, 1, 0, 1, 1,
    0, 0, 0, 0, 0,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0,
    0, 0, 0, 0, 0,
    1, 0, 1, 0, 1, 0, 1, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)
"""Levels played back by the demo pin: idle, short press, double click,
long press, rapid clicks and a final idle stretch."""

HOLD_CYCLES = 10
"""Reads after which the demo pin moves on to the next pattern entry."""

STATUS_EVERY = 200
"""Calls of :meth:`EventPoller.status` between two status lines."""

DEMO_TICKS = 2000
"""Ticks the polling demo runs before it stops on its own."""

_TICK_SECONDS = TICKS_INTERVAL / 1000

_EVENT_LABELS = {
    ButtonEvent.PRESS_DOWN: "Press Down",
    ButtonEvent.PRESS_UP: "Press Up",
    ButtonEvent.SINGLE_CLICK: "Single Click ✨",
    ButtonEvent.DOUBLE_CLICK: "Double Click ✨✨",
    ButtonEvent.LONG_PRESS_START: "Long Press Start 🔥",
    ButtonEvent.LONG_PRESS_HOLD: "Long Press Hold 🔥🔥",
}


class PatternPin:
    """A pin reader that plays a fixed level pattern in a loop."""

    def __init__(self, pattern: Sequence[int] = DEMO_PATTERN, hold_cycles: int = HOLD_CYCLES) -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        if hold_cycles < 0:
            raise ValueError("hold_cycles must not be negative")
        self._pattern = tuple(pattern)
        self._hold_cycles = hold_cycles
        self._cycle = 0
        self._index = 0

    def __call__(self, button_id: int) -> int:
        """Return the current pattern level; ``button_id`` is ignored."""
        cycle = self._cycle
        self._cycle += 1
        if cycle >= self._hold_cycles:
            self._cycle = 0
            self._index = (self._index + 1) % len(self._pattern)
        return self._pattern[self._index]


class EventPoller:
    """Reports each new event of one button and a periodic status line."""

    def __init__(self, button: Button, out: Optional[TextIO] = None) -> None:
        self.button = button
        self.out = sys.stdout if out is None else out
        self.event_count = 0
        self._last = ButtonEvent.NONE_PRESS
        self._status_counter = 0

    def _pressed_text(self) -> str:
        return "Yes" if self.button.is_pressed() else "No"

    def poll(self) -> Optional[ButtonEvent]:
        """Print and return the button's event if it differs from the last one seen."""
        current = self.button.event
        if current == self._last or current is ButtonEvent.NONE_PRESS:
            return None
        self.event_count += 1
        if current is ButtonEvent.PRESS_REPEAT:
            label = f"Press Repeat (count: {self.button.repeat_count}) 🔄"
        else:
            label = _EVENT_LABELS.get(current, "Unknown Event ❓")
        print(
            f"📡 [{self.event_count}] Polled Event: {label} | Pressed: {self._pressed_text()}",
            file=self.out,
        )
        self._last = current
        return current

    def status(self) -> Optional[str]:
        """Count one call; every :data:`STATUS_EVERY` calls print and return a status line."""
        self._status_counter += 1
        if self._status_counter < STATUS_EVERY:
            return None
        self._status_counter = 0
        line = (
            f"📊 Status - Pressed: {self._pressed_text()}, "
            f"Repeat: {self.button.repeat_count}, Event: {int(self.button.event)}"
        )
        print(line, file=self.out)
        return line


def run_polling(
    out: Optional[TextIO] = None,
    ticks: int = DEMO_TICKS,
    sleep: Optional[Callable[[float], object]] = None,
) -> list[ButtonEvent]:
    """Drive a pattern-fed button, polling after every tick; return the events seen."""
    out = sys.stdout if out is None else out
    sleep = time.sleep if sleep is None else sleep

    print("🔧 Initializing button for polling mode...", file=out)
    button = Button(PatternPin(), 1, 1)
    group = ButtonGroup()
    group.start(button)
    print("✅ Button initialized for polling\n", file=out)

    print("🎭 Starting simulation with predefined patterns...", file=out)
    print("   Pattern includes: short press, double click, long press, rapid clicks", file=out)
    print("   Press Ctrl+C to exit\n", file=out)

    poller = EventPoller(button, out)
    events: list[ButtonEvent] = []
    tick_count = 0
    try:
        while True:
            group.ticks()
            event = poller.poll()
            if event is not None:
                events.append(event)
            poller.status()
            sleep(_TICK_SECONDS)
            tick_count += 1
            if tick_count > ticks:
                print("\n🏁 Demo pattern completed!", file=out)
                break
    except KeyboardInterrupt:
        print("\n🛑 Exiting polling example...", file=out)

    print("\n🧹 Cleaning up...", file=out)
    group.stop(button)
    print("✅ Polling example finished!", file=out)
    return events


def main(argv: Optional[list[str]] = None) -> int:
    """Run the polling demonstration."""
    parser = argparse.ArgumentParser(
        prog="multibutton-poll",
        description="Detect button events by polling a button fed with a fixed pattern.",
    )
    parser.parse_args(argv)
    out = sys.stdout
    print("🚀 MultiButton Library Polling Example", file=out)
    print("========================================\n", file=out)
    print("💡 This example demonstrates polling-based event detection", file=out)
    print("📡 Events are detected by polling Button.event instead of using callbacks", file=out)
    print("🎬 A predefined pattern will simulate button presses\n", file=out)

    run_polling(out)

    print("\n📚 Key takeaways:", file=out)
    print("   • Polling mode allows checking events at your own pace", file=out)
    print("   • No callback functions needed", file=out)
    print("   • Use Button.event to check the current event", file=out)
    print(f"   • Still need to call tick() every {TICKS_INTERVAL}ms", file=out)
    print("   • Useful for main loop architectures without interrupts", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())