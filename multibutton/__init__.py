"""Tick-driven button event detection: debouncing, clicks, repeats and long presses, with demo programs."""

__version__ = "1.0.0"
__all__ = ["button", "basic_demo", "poll_demo", "advanced_demo"]