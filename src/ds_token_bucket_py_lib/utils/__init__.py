from .clock import Clock, ManualClock

__all__ = [
    "Clock",
    "ManualClock",
]
