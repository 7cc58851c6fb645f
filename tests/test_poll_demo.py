import io

import pytest

from multibutton.button import Button, ButtonEvent
from multibutton.poll_demo import (
    DEMO_PATTERN,
    HOLD_CYCLES,
    STATUS_EVERY,
    EventPoller,
    PatternPin,
    main,
    run_polling,
)


def make_button():
    level = {"value": 0}
    button = Button(lambda _button_id: level["value"], 1, 1)
    return button, level


def tick(button, count):
    for _ in range(count):
        button.tick()


def test_pattern_pin_steps_through_pattern():
    pin = PatternPin((0, 1), hold_cycles=2)
    assert [pin(1) for _ in range(6)] == [0, 0, 1, 1, 1, 0]


def test_pattern_pin_single_value_is_constant():
    pin = PatternPin((1,), hold_cycles=3)
    assert {pin(4) for _ in range(20)} == {1}


def test_default_pattern_pin_starts_with_first_entry():
    pin = PatternPin()
    first = [pin(1) for _ in range(HOLD_CYCLES)]
    assert first == [DEMO_PATTERN[0]] * HOLD_CYCLES
    assert {pin(1) for _ in range(2000)} <= set(DEMO_PATTERN)


def test_pattern_pin_rejects_empty_pattern():
    with pytest.raises(ValueError):
        PatternPin(())


def test_pattern_pin_rejects_negative_hold():
    with pytest.raises(ValueError):
        PatternPin((0, 1), hold_cycles=-1)


def test_poll_ignores_no_event():
    button, _ = make_button()
    out = io.StringIO()
    poller = EventPoller(button, out)
    button.tick()
    assert poller.poll() is None
    assert out.getvalue() == ""
    assert poller.event_count == 0


def test_poll_reports_each_new_event_once():
    button, level = make_button()
    out = io.StringIO()
    poller = EventPoller(button, out)

    level["value"] = 1
    tick(button, 3)
    assert poller.poll() is ButtonEvent.PRESS_DOWN
    assert poller.poll() is None
    assert "[1] Polled Event: Press Down | Pressed: Yes" in out.getvalue()

    level["value"] = 0
    tick(button, 3)
    assert poller.poll() is ButtonEvent.PRESS_UP
    assert poller.event_count == 2
    assert "[2] Polled Event: Press Up | Pressed: No" in out.getvalue()


def test_status_prints_every_interval():
    button, _ = make_button()
    out = io.StringIO()
    poller = EventPoller(button, out)
    lines = [poller.status() for _ in range(STATUS_EVERY)]
    assert lines[:-1] == [None] * (STATUS_EVERY - 1)
    assert lines[-1].startswith("📊 Status - Pressed: No")
    assert f"Event: {int(ButtonEvent.NONE_PRESS)}" in lines[-1]
    assert out.getvalue().strip() == lines[-1]
    assert poller.status() is None


def test_run_polling_reports_distinct_consecutive_events():
    out = io.StringIO()
    sleeps = []
    ticks = 300
    events = run_polling(out=out, ticks=ticks, sleep=sleeps.append)
    text = out.getvalue()
    assert len(sleeps) == ticks + 1
    assert events[0] is ButtonEvent.PRESS_DOWN
    assert all(a != b for a, b in zip(events, events[1:]))
    assert ButtonEvent.NONE_PRESS not in events
    assert text.count("Polled Event:") == len(events)
    assert "Demo pattern completed!" in text
    assert text.rstrip().endswith("Polling example finished!")


def test_main_runs_polling_demo(monkeypatch, capsys):
    monkeypatch.setattr("time.sleep", lambda _seconds: None)
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Demo pattern completed!" in text
    assert "Key takeaways:" in text
    assert "Polled Event: Press Down" in text


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])