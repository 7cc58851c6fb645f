"""Scripted demonstration of two simulated buttons reporting through callbacks."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Optional, TextIO

from .button import TICKS_INTERVAL, Button, ButtonEvent, ButtonGroup

RELEASE_TICKS = 10
"""Ticks run after a simulated release so the release is processed."""

_TICK_SECONDS = TICKS_INTERVAL / 1000


class SimulatedPins:
    """In-memory GPIO levels for buttons numbered from 1 to ``count``."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._levels = {button_id: 0 for button_id in range(1, count + 1)}

    def __call__(self, button_id: int) -> int:
        """Return the level of ``button_id``; unknown ids read as 0."""
        return self._levels.get(button_id, 0)

    def set(self, button_id: int, level: int) -> None:
        """Drive the pin of ``button_id`` to ``level``."""
        if button_id not in self._levels:
            raise ValueError(f"unknown button id: {button_id}")
        self._levels[button_id] = 1 if level else 0


class BasicDemo:
    """Two active-high buttons with callbacks that print what they see."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], object]] = None,
    ) -> None:
        self.out = sys.stdout if out is None else out
        self._sleep = time.sleep if sleep is None else sleep
        self.pins = SimulatedPins(2)
        self.group = ButtonGroup()

        self.button1 = Button(self.pins, 1, 1)
        self.button1.attach(ButtonEvent.SINGLE_CLICK, self._printer("🔘 Button 1: Single Click"))
        self.button1.attach(ButtonEvent.DOUBLE_CLICK, self._printer("🔘🔘 Button 1: Double Click"))
        self.button1.attach(
            ButtonEvent.LONG_PRESS_START, self._printer("⏹️ Button 1: Long Press Start")
        )
        self.button1.attach(
            ButtonEvent.LONG_PRESS_HOLD, self._printer("⏸️ Button 1: Long Press Hold...")
        )
        self.button1.attach(ButtonEvent.PRESS_REPEAT, self._on_repeat)

        self.button2 = Button(self.pins, 1, 2)
        self.button2.attach(ButtonEvent.SINGLE_CLICK, self._printer("🔵 Button 2: Single Click"))
        self.button2.attach(ButtonEvent.DOUBLE_CLICK, self._printer("🔵🔵 Button 2: Double Click"))
        self.button2.attach(ButtonEvent.PRESS_DOWN, self._printer("⬇️ Button 2: Press Down"))
        self.button2.attach(ButtonEvent.PRESS_UP, self._printer("⬆️ Button 2: Press Up"))

        self.group.start(self.button1)
        self.group.start(self.button2)

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _printer(self, text: str) -> Callable[[Button], None]:
        def callback(_button: Button) -> None:
            self._say(text)

        return callback

    def _on_repeat(self, button: Button) -> None:
        self._say(f"🔄 Button 1: Press Repeat (count: {button.repeat_count})")

    def _run_ticks(self, count: int) -> None:
        for _ in range(count):
            self.group.ticks()
            self._sleep(_TICK_SECONDS)

    def simulate_press(self, button_id: int, duration_ms: int) -> None:
        """Hold ``button_id`` for ``duration_ms`` of ticks, then release it."""
        self._say(f"\n📱 Simulating button {button_id} press for {duration_ms} ms...")
        self.pins.set(button_id, 1)
        self._run_ticks(duration_ms // TICKS_INTERVAL)
        self.pins.set(button_id, 0)
        self._run_ticks(RELEASE_TICKS)

    def run(self) -> None:
        """Play the whole demonstration sequence."""
        self._say("🚀 MultiButton Library Basic Example")
        self._say("=====================================\n")
        self._say("✅ Buttons initialized successfully\n")

        self._say("📋 Demo sequence:")
        self._say("1. Single click simulation")
        self._say("2. Double click simulation")
        self._say("3. Long press simulation")
        self._say("4. Repeat press simulation\n")

        self._say("--- Single Click Demo ---")
        self.simulate_press(1, 100)
        self._sleep(0.5)

        self._say("\n--- Double Click Demo ---")
        self.simulate_press(1, 100)
        self._sleep(0.05)
        self.simulate_press(1, 100)
        self._sleep(0.5)

        self._say("\n--- Long Press Demo ---")
        self.simulate_press(1, 1500)
        self._sleep(0.2)

        self._say("\n--- Repeat Press Demo ---")
        for _ in range(3):
            self.simulate_press(2, 80)
            self._sleep(0.08)
        self._sleep(0.5)

        self._say("\n--- Button State Query Demo ---")
        self._say(f"Button 1 pressed: {'Yes' if self.button1.is_pressed() else 'No'}")
        self._say(f"Button 2 pressed: {'Yes' if self.button2.is_pressed() else 'No'}")
        self._say(f"Button 1 repeat count: {self.button1.repeat_count}")
        self._say(f"Button 2 repeat count: {self.button2.repeat_count}")

        self._say("\n✅ Demo completed successfully!")
        self._say(
            "💡 In a real application, tick() would be called from a "
            f"{TICKS_INTERVAL}ms timer interrupt."
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the basic demonstration."""
    parser = argparse.ArgumentParser(
        prog="multibutton-basic",
        description="Simulate clicks, double clicks and long presses on two buttons.",
    )
    parser.parse_args(argv)
    demo = BasicDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        print("\nReceived SIGINT, exiting...", file=demo.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())