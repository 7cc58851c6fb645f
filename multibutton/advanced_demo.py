"""Demonstration of several buttons, runtime rebinding and a configuration button."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Optional, TextIO

from .basic_demo import RELEASE_TICKS, SimulatedPins
from .button import TICKS_INTERVAL, Button, ButtonEvent, ButtonGroup

MAX_BUTTONS = 4
"""Number of simulated buttons, numbered from 1."""

_TICK_SECONDS = TICKS_INTERVAL / 1000

_EVENT_NAMES = {
    ButtonEvent.PRESS_DOWN: "Press Down",
    ButtonEvent.PRESS_UP: "Press Up",
    ButtonEvent.SINGLE_CLICK: "Single Click",
    ButtonEvent.DOUBLE_CLICK: "Double Click",
    ButtonEvent.LONG_PRESS_START: "Long Press Start",
    ButtonEvent.LONG_PRESS_HOLD: "Long Press Hold",
    ButtonEvent.PRESS_REPEAT: "Press Repeat",
}

_ALL_EVENTS = (
    ButtonEvent.PRESS_DOWN,
    ButtonEvent.PRESS_UP,
    ButtonEvent.SINGLE_CLICK,
    ButtonEvent.DOUBLE_CLICK,
    ButtonEvent.LONG_PRESS_START,
    ButtonEvent.LONG_PRESS_HOLD,
    ButtonEvent.PRESS_REPEAT,
)

_ESSENTIAL_EVENTS = (
    ButtonEvent.SINGLE_CLICK,
    ButtonEvent.DOUBLE_CLICK,
    ButtonEvent.LONG_PRESS_START,
)


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


class AdvancedDemo:
    """Four active-high buttons with differing handler sets.

    Button 1 reports every event, buttons 2 and 4 only the essential ones,
    and a single click on button 3 steps through configuration actions.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], object]] = None,
        verbose: bool = False,
        demo: bool = True,
    ) -> None:
        self.out = sys.stdout if out is None else out
        self._sleep = time.sleep if sleep is None else sleep
        self.verbose = verbose
        self.demo_mode = demo
        self.running = True
        self._config_state = 0
        self.pins = SimulatedPins(MAX_BUTTONS)
        self.group = ButtonGroup()
        self.buttons: list[Button] = []

        self._say(f"🔧 Initializing {MAX_BUTTONS} buttons...")
        self._add_button(1, full=True)
        self._say("  ✅ Button 1: Full feature set")
        self._add_button(2, full=False)
        self._say("  ✅ Button 2: Essential events only")
        config = self._add_button(3, full=False)
        config.detach(ButtonEvent.SINGLE_CLICK)
        config.attach(ButtonEvent.SINGLE_CLICK, self.on_config_click)
        self._say("  ✅ Button 3: Configuration button")
        self._add_button(4, full=False)
        self._say("  ✅ Button 4: Dynamic configuration demo")
        self._say("🎯 All buttons initialized successfully!\n")

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _handler(self, event: ButtonEvent) -> Callable[[Button], None]:
        name = _EVENT_NAMES[event]

        def callback(button: Button) -> None:
            if self.verbose:
                pressed = "Yes" if button.is_pressed() else "No"
                self._say(
                    f"🔘 Button {button.button_id}: {name} "
                    f"(repeat: {button.repeat_count}, pressed: {pressed})"
                )
            else:
                self._say(f"🔘 Button {button.button_id}: {name}")

        return callback

    def _add_button(self, button_id: int, full: bool) -> Button:
        button = Button(self.pins, 1, button_id)
        for event in _ALL_EVENTS if full else _ESSENTIAL_EVENTS:
            button.attach(event, self._handler(event))
        self.group.start(button)
        self.buttons.append(button)
        return button

    def _run_ticks(self, count: int) -> None:
        for _ in range(count):
            self.group.ticks()
            self._sleep(_TICK_SECONDS)

    def simulate_press(self, button_id: int, duration_ms: int) -> None:
        """Hold ``button_id`` for ``duration_ms`` of ticks, then release it.

        Ids outside 1..MAX_BUTTONS are ignored.
        """
        if not 1 <= button_id <= MAX_BUTTONS:
            return
        if self.verbose:
            self._say(f"📱 Simulating button {button_id} press ({duration_ms} ms)")
        self.pins.set(button_id, 1)
        self._run_ticks(duration_ms // TICKS_INTERVAL)
        self.pins.set(button_id, 0)
        self._run_ticks(RELEASE_TICKS)

    def on_config_click(self, button: Button) -> None:
        """Perform the next configuration action in turn."""
        self._say(f"⚙️ Config Button {button.button_id} clicked!")
        state = self._config_state
        if state == 0:
            self.verbose = not self.verbose
            self._say(f"📝 Verbose mode: {_on_off(self.verbose)}")
        elif state == 1:
            self.demo_mode = not self.demo_mode
            self._say(f"🎭 Demo mode: {_on_off(self.demo_mode)}")
        elif state == 2:
            self._say("🔄 Resetting all buttons...")
            for entry in self.buttons:
                entry.reset()
        else:
            self._say("👋 Stopping demo...")
            self.running = False
        self._config_state = (state + 1) % 4

    def run_demo_sequence(self) -> None:
        """Play clicks, a double click, a long press and rapid presses."""
        self._say("\n🎭 Interactive Demo Sequence")
        self._say("=====================================")

        self._say("Demo 1: Single clicks on all buttons")
        for button_id in range(1, MAX_BUTTONS + 1):
            self.simulate_press(button_id, 100)
            self._sleep(0.2)

        self._say("\nDemo 2: Double click patterns")
        self.simulate_press(1, 80)
        self._sleep(0.05)
        self.simulate_press(1, 80)
        self._sleep(0.5)

        self._say("\nDemo 3: Long press demonstration")
        self.simulate_press(2, 1200)
        self._sleep(0.3)

        self._say("\nDemo 4: Rapid press sequence")
        for _ in range(4):
            self.simulate_press(1, 60)
            self._sleep(0.07)
        self._sleep(0.5)

        self._say("\nDemo 5: Configuration button test")
        for _ in range(3):
            self.simulate_press(3, 100)
            self._sleep(0.2)

    def dynamic_config_demo(self) -> None:
        """Add and remove handlers of button 4 between presses."""
        button = self.buttons[3]
        self._say("\n🔄 Dynamic Configuration Demo")
        self._say("=====================================")

        self._say("1. Testing button 4 with minimal handlers...")
        self.simulate_press(4, 100)
        self._sleep(0.3)

        self._say("2. Adding more event handlers to button 4...")
        for event in (ButtonEvent.PRESS_DOWN, ButtonEvent.PRESS_UP, ButtonEvent.PRESS_REPEAT):
            button.attach(event, self._handler(event))

        self._say("3. Testing button 4 with full handlers...")
        self.simulate_press(4, 100)
        self._sleep(0.3)

        self._say("4. Removing press down/up handlers...")
        button.detach(ButtonEvent.PRESS_DOWN)
        button.detach(ButtonEvent.PRESS_UP)

        self._say("5. Testing button 4 with reduced handlers...")
        self.simulate_press(4, 100)

    def status_report(self) -> list[str]:
        """Print and return one status line per button."""
        self._say("\n📊 Button Status Report")
        self._say("========================")
        lines = [
            f"Button {button.button_id}: State={int(button.is_pressed())}, "
            f"Repeat={button.repeat_count}, Event={int(button.event)}"
            for button in self.buttons
        ]
        for line in lines:
            self._say(line)
        return lines

    def idle(self) -> None:
        """Keep ticking until :attr:`running` is cleared."""
        while self.running:
            self.group.ticks()
            self._sleep(_TICK_SECONDS)

    def shutdown(self) -> None:
        """Stop every button."""
        self._say("\n🧹 Cleaning up...")
        for button in self.buttons:
            self.group.stop(button)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the advanced demonstration."""
    parser = argparse.ArgumentParser(
        prog="multibutton-advanced",
        description="Simulate four buttons with differing and changing handler sets.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show repeat count and level")
    parser.add_argument("-q", "--quiet", action="store_true", help="skip the scripted demo")
    args = parser.parse_args(argv)

    out = sys.stdout
    print("🚀 MultiButton Library Advanced Example", file=out)
    print("==========================================", file=out)
    print(
        f"Configuration: Demo={_on_off(not args.quiet)}, Verbose={_on_off(args.verbose)}\n",
        file=out,
    )

    demo = AdvancedDemo(out=out, verbose=args.verbose, demo=not args.quiet)
    try:
        if demo.demo_mode:
            demo.run_demo_sequence()
            demo.dynamic_config_demo()
            demo.status_report()
            print("\n✅ Advanced demo completed!", file=out)
            print("💡 Use Ctrl+C to exit, or run with --quiet for manual testing", file=out)
        else:
            print("🎮 Manual test mode - buttons are ready for interaction", file=out)
            print("💡 Use Ctrl+C to exit", file=out)
        demo.idle()
    except KeyboardInterrupt:
        print("\n🛑 Received SIGINT, cleaning up...", file=out)

    demo.shutdown()
    print("👋 Advanced example finished!", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())