# multibutton

A small library that turns raw button levels into events. Each button gets
a function that reads its pin level. You call `tick()` on the button, or
`ticks()` on a group of buttons, at a fixed interval. The interval is 5 ms
(`TICKS_INTERVAL`). The library debounces the level and reports these events:

- press down and press up
- single click and double click
- repeated presses, with a repeat counter
- long-press start and long-press hold

Events reach you through callbacks. You can also poll each button for its
latest event.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Usage

```python
from multibutton.button import Button, ButtonEvent, ButtonGroup

levels = {1: 0}

def read_pin(button_id):
    return levels[button_id]

button = Button(read_pin, active_level=1, button_id=1)
button.attach(ButtonEvent.SINGLE_CLICK, lambda b: print("click", b.button_id))
button.attach(ButtonEvent.LONG_PRESS_START, lambda b: print("long press"))

group = ButtonGroup()
group.start(button)

# Call this every 5 ms, for example from a timer or from the main loop.
group.ticks()
```

### Callbacks

- `Button.attach(event, callback)` binds a callback to an event. The
  callback receives the button. Passing `None` as the callback unbinds the
  event.
- `Button.detach(event)` removes the callback for an event.
- Every `ButtonEvent` except `NONE_PRESS` can have a callback. For any other
  value, both methods raise `ValueError`.

### Timing and limits

The thresholds are module constants in `multibutton.button`.

- **Debouncing.** A level change is accepted after `DEBOUNCE_TICKS` (3)
  consecutive reads of the new level.
- **Clicks.** A click is reported once the button has stayed released for
  more than `SHORT_TICKS` (60 ticks, 300 ms) with no new press.
  - One press gives `SINGLE_CLICK`.
  - Two presses give `DOUBLE_CLICK`.
  - Three or more presses give no click event. Only `PRESS_REPEAT` and the
    repeat count report them.
- **Long press.** A long press starts once the button has been held for more
  than `LONG_TICKS` (200 ticks, 1 s). After that, every tick while the button
  is still held reports `LONG_PRESS_HOLD`.
- **Repeat counter.** The count stops rising at `PRESS_REPEAT_MAX_NUM` (15).

### Buttons and groups

- `ButtonGroup.start(button)` adds a button to the group. It raises
  `ButtonAlreadyStartedError`, a subclass of `ValueError`, if the button is
  already in the group.
- `ButtonGroup.stop(button)` removes a button from the group. It does nothing
  if the button is not in the group.
- `ButtonGroup.ticks()` advances every button in the group. The most recently
  started button is advanced first.
- A group supports `len()`, `in` and iteration.
- `Button.tick()` advances a single button without a group.
- `Button.reset()` returns a button to idle and clears its counters and its
  event.

### Polling

Instead of attaching callbacks, you can read these values after each tick:

- `button.event`: the most recent `ButtonEvent` (`NONE_PRESS` while idle)
- `button.repeat_count`: the repeat count
- `button.is_pressed()`: whether the debounced level equals the active level
- `button.state`: the state-machine state, as a `ButtonState`

## Demo programs

Three demos drive simulated buttons and print the events they detect.

```
multibutton-basic-demo
multibutton-poll-demo
multibutton-advanced-demo
```

- **`multibutton-basic-demo`** plays a fixed sequence on two buttons:
  - a single click
  - a double click
  - a long press
  - repeated presses
- **`multibutton-poll-demo`** feeds one button from a fixed level pattern.
  It reads the button's events by polling, with no callbacks. It stops on
  its own after 2000 ticks.
- **`multibutton-advanced-demo`** runs four buttons with different sets of
  handlers:
  - It changes the handlers of button 4 while the demo runs.
  - Single clicks on button 3 step through configuration actions. In order,
    they toggle verbose output, toggle demo mode, reset all buttons, and
    stop the demo.
  - After its scripted sequence, it keeps ticking until Ctrl+C or until that
    stop action.

The advanced demo has two options:

- `-v` / `--verbose` prints the repeat count and the pressed state with each
  event.
- `-q` / `--quiet` skips the scripted sequence and leaves the buttons ticking
  until Ctrl+C.

## What it does not do

- The package does not read hardware pins. The pin-reading function you pass
  to `Button` supplies the level.
- The package does not run a timer. Your program must call `tick()` or
  `ticks()` at the interval the thresholds assume.
- The demos only simulate button presses.