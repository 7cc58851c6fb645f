"""Debounced button state machine with click, repeat and long-press detection."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterator, Optional

TICKS_INTERVAL = 5
"""Milliseconds between two calls of :meth:`Button.tick`."""

DEBOUNCE_TICKS = 3
"""Consecutive differing reads needed before a level change is accepted."""

SHORT_TICKS = 300 // TICKS_INTERVAL
"""Ticks after a release within which another press counts as a repeat."""

LONG_TICKS = 1000 // TICKS_INTERVAL
"""Ticks a press must be held before it becomes a long press."""

PRESS_REPEAT_MAX_NUM = 15
"""Upper bound of the repeat counter."""

_TICKS_MASK = 0xFFFF


class ButtonEvent(IntEnum):
    """Events a button reports."""

    PRESS_DOWN = 0
    PRESS_UP = 1
    PRESS_REPEAT = 2
    SINGLE_CLICK = 3
    DOUBLE_CLICK = 4
    LONG_PRESS_START = 5
    LONG_PRESS_HOLD = 6
    NONE_PRESS = 8


_CALLBACK_EVENTS = frozenset(e for e in ButtonEvent if e is not ButtonEvent.NONE_PRESS)


class ButtonState(IntEnum):
    """States of the button state machine."""

    IDLE = 0
    PRESS = 1
    RELEASE = 2
    REPEAT = 3
    LONG_HOLD = 4


class ButtonAlreadyStartedError(ValueError):
    """Raised when a button is started in a group that already holds it."""


Callback = Callable[["Button"], None]
PinReader = Callable[[int], int]


class Button:
    """A single button driven by periodic calls to :meth:`tick`.

    ``pin_level`` is called with the button id and returns the current
    GPIO level; ``active_level`` is the level read while the button is held.
    """

    def __init__(self, pin_level: PinReader, active_level: int, button_id: int) -> None:
        if not callable(pin_level):
            raise TypeError("pin_level must be callable")
        self._pin_level = pin_level
        self.active_level = int(active_level) & 1
        self.button_id = int(button_id) & 0xFF
        self._callbacks: dict[ButtonEvent, Callback] = {}
        self.button_level = int(not self.active_level)
        self._ticks = 0
        self._repeat = 0
        self._event = ButtonEvent.NONE_PRESS
        self._state = ButtonState.IDLE
        self._debounce_cnt = 0

    def __repr__(self) -> str:
        return (
            f"Button(id={self.button_id}, state={self._state.name}, "
            f"event={self._event.name}, repeat={self._repeat})"
        )

    @property
    def event(self) -> ButtonEvent:
        """The most recent event."""
        return self._event

    @property
    def repeat_count(self) -> int:
        """How many presses the current sequence has counted."""
        return self._repeat

    @property
    def state(self) -> ButtonState:
        """The current state of the state machine."""
        return self._state

    @property
    def ticks(self) -> int:
        """Ticks spent in the current state."""
        return self._ticks

    @staticmethod
    def _check_event(event: ButtonEvent | int) -> ButtonEvent:
        try:
            ev = ButtonEvent(event)
        except ValueError:
            raise ValueError(f"invalid button event: {event!r}") from None
        if ev not in _CALLBACK_EVENTS:
            raise ValueError(f"no callback can be bound to {ev.name}")
        return ev

    def attach(self, event: ButtonEvent | int, callback: Optional[Callback]) -> None:
        """Bind ``callback`` to ``event``; ``None`` unbinds it."""
        ev = self._check_event(event)
        if callback is None:
            self._callbacks.pop(ev, None)
        else:
            self._callbacks[ev] = callback

    def detach(self, event: ButtonEvent | int) -> None:
        """Remove the callback bound to ``event``, if any."""
        self._callbacks.pop(self._check_event(event), None)

    def reset(self) -> None:
        """Return the state machine to idle and clear counters and event."""
        self._state = ButtonState.IDLE
        self._ticks = 0
        self._repeat = 0
        self._event = ButtonEvent.NONE_PRESS
        self._debounce_cnt = 0

    def is_pressed(self) -> bool:
        """Whether the debounced level equals the active level."""
        return self.button_level == self.active_level

    def _emit(self, event: ButtonEvent) -> None:
        callback = self._callbacks.get(event)
        if callback is not None:
            callback(self)

    def _set_event(self, event: ButtonEvent) -> None:
        self._event = event
        self._emit(event)

    def tick(self) -> None:
        """Read the pin once and advance debouncing and the state machine."""
        level = int(self._pin_level(self.button_id)) & 0xFF

        if self._state > ButtonState.IDLE:
            self._ticks = (self._ticks + 1) & _TICKS_MASK

        if level != self.button_level:
            self._debounce_cnt += 1
            if self._debounce_cnt >= DEBOUNCE_TICKS:
                self.button_level = level & 1
                self._debounce_cnt = 0
        else:
            self._debounce_cnt = 0

        pressed = self.button_level == self.active_level
        state = self._state

        if state is ButtonState.IDLE:
            if pressed:
                self._set_event(ButtonEvent.PRESS_DOWN)
                self._ticks = 0
                self._repeat = 1
                self._state = ButtonState.PRESS
            else:
                self._event = ButtonEvent.NONE_PRESS

        elif state is ButtonState.PRESS:
            if not pressed:
                self._set_event(ButtonEvent.PRESS_UP)
                self._ticks = 0
                self._state = ButtonState.RELEASE
            elif self._ticks > LONG_TICKS:
                self._set_event(ButtonEvent.LONG_PRESS_START)
                self._state = ButtonState.LONG_HOLD

        elif state is ButtonState.RELEASE:
            if pressed:
                self._set_event(ButtonEvent.PRESS_DOWN)
                if self._repeat < PRESS_REPEAT_MAX_NUM:
                    self._repeat += 1
                self._emit(ButtonEvent.PRESS_REPEAT)
                self._ticks = 0
                self._state = ButtonState.REPEAT
            elif self._ticks > SHORT_TICKS:
                if self._repeat == 1:
                    self._set_event(ButtonEvent.SINGLE_CLICK)
                elif self._repeat == 2:
                    self._set_event(ButtonEvent.DOUBLE_CLICK)
                self._state = ButtonState.IDLE

        elif state is ButtonState.REPEAT:
            if not pressed:
                self._set_event(ButtonEvent.PRESS_UP)
                if self._ticks < SHORT_TICKS:
                    self._ticks = 0
                    self._state = ButtonState.RELEASE
                else:
                    self._state = ButtonState.IDLE
            elif self._ticks > SHORT_TICKS:
                self._state = ButtonState.PRESS

        elif state is ButtonState.LONG_HOLD:
            if pressed:
                self._set_event(ButtonEvent.LONG_PRESS_HOLD)
            else:
                self._set_event(ButtonEvent.PRESS_UP)
                self._state = ButtonState.IDLE

        else:
            self._state = ButtonState.IDLE


class ButtonGroup:
    """The set of started buttons, scanned together by :meth:`ticks`.

    The most recently started button is scanned first.
    """

    def __init__(self) -> None:
        self._buttons: list[Button] = []

    def start(self, button: Button) -> None:
        """Add ``button`` to the group."""
        if button is None:
            raise TypeError("button must not be None")
        if button in self:
            raise ButtonAlreadyStartedError(f"button {button.button_id} is already started")
        self._buttons.insert(0, button)

    def stop(self, button: Button) -> None:
        """Remove ``button`` from the group; does nothing if it is absent."""
        for index, entry in enumerate(self._buttons):
            if entry is button:
                del self._buttons[index]
                return

    def ticks(self) -> None:
        """Advance every started button by one tick."""
        for button in list(self._buttons):
            button.tick()

    def __contains__(self, button: object) -> bool:
        return any(entry is button for entry in self._buttons)

    def __iter__(self) -> Iterator[Button]:
        return iter(list(self._buttons))

    def __len__(self) -> int:
        return len(self._buttons)