import io

import pytest

from multibutton.basic_demo import BasicDemo, SimulatedPins, main
from multibutton.button import SHORT_TICKS, TICKS_INTERVAL, ButtonEvent, ButtonState


def make_demo():
    out = io.StringIO()
    sleeps = []
    demo = BasicDemo(out=out, sleep=sleeps.append)
    return demo, out, sleeps


def tick_group(demo, count):
    for _ in range(count):
        demo.group.ticks()


def test_pins_start_low_and_follow_set():
    pins = SimulatedPins(2)
    assert pins(1) == 0
    pins.set(2, 1)
    assert pins(2) == 1
    assert pins(1) == 0
    pins.set(2, 0)
    assert pins(2) == 0


def test_pins_unknown_id_reads_low():
    pins = SimulatedPins(2)
    assert pins(7) == 0


def test_pins_set_unknown_id_raises():
    pins = SimulatedPins(2)
    with pytest.raises(ValueError):
        pins.set(3, 1)


def test_pins_negative_count_raises():
    with pytest.raises(ValueError):
        SimulatedPins(-1)


def test_both_buttons_are_started():
    demo, _, _ = make_demo()
    assert len(demo.group) == 2
    assert demo.button1 in demo.group
    assert demo.button2 in demo.group


def test_short_press_then_timeout_is_single_click():
    demo, out, _ = make_demo()
    demo.simulate_press(1, 100)
    assert demo.button1.state is ButtonState.RELEASE
    assert demo.button1.event is ButtonEvent.PRESS_UP
    assert demo.button1.repeat_count == 1
    assert "Single Click" not in out.getvalue()

    tick_group(demo, SHORT_TICKS + 1)
    assert "🔘 Button 1: Single Click" in out.getvalue()
    assert demo.button1.state is ButtonState.IDLE


def test_two_presses_make_double_click():
    demo, out, _ = make_demo()
    demo.simulate_press(1, 100)
    demo.simulate_press(1, 100)
    assert "Press Repeat (count: 2)" in out.getvalue()
    tick_group(demo, SHORT_TICKS + 1)
    text = out.getvalue()
    assert "🔘🔘 Button 1: Double Click" in text
    assert "Button 1: Single Click" not in text


def test_button_two_reports_down_before_up():
    demo, out, _ = make_demo()
    demo.simulate_press(2, 80)
    text = out.getvalue()
    assert "⬇️ Button 2: Press Down" in text
    assert "⬆️ Button 2: Press Up" in text
    assert text.index("Press Down") < text.index("Press Up")


def test_simulate_press_announces_itself():
    demo, out, _ = make_demo()
    demo.simulate_press(2, 80)
    assert "Simulating button 2 press for 80 ms..." in out.getvalue()


def test_simulate_press_sleeps_one_tick_interval_each_time():
    demo, _, short_sleeps = make_demo()
    demo.simulate_press(1, 100)
    longer, _, long_sleeps = make_demo()
    longer.simulate_press(1, 200)
    assert set(short_sleeps) == {TICKS_INTERVAL / 1000}
    assert len(long_sleeps) > len(short_sleeps)


def test_simulate_press_unknown_button_raises():
    demo, _, _ = make_demo()
    with pytest.raises(ValueError):
        demo.simulate_press(5, 100)


def test_run_completes_with_buttons_released():
    demo, out, _ = make_demo()
    demo.run()
    text = out.getvalue()
    assert "Demo completed successfully!" in text
    assert "Button 1 pressed: No" in text
    assert "Button 2 pressed: No" in text
    assert "Button 1: Long Press Start" in text
    assert demo.button1.is_pressed() is False


def test_main_runs_demo(monkeypatch, capsys):
    monkeypatch.setattr("time.sleep", lambda _seconds: None)
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "MultiButton Library Basic Example" in text
    assert "Demo completed successfully!" in text


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])