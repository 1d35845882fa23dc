"""Uptime counters and local wall-clock formatting."""

from __future__ import annotations

import time

TIME_NOW_FORMAT = "%d.%m.%Y. %H:%M:%S"


def boot_seconds() -> int:
    """Whole seconds elapsed on the monotonic clock."""
    return int(time.monotonic())


def seconds_since(last_time: int) -> int:
    """Seconds elapsed since a value earlier returned by boot_seconds()."""
    return boot_seconds() - last_time


def time_fmt(fmt: str) -> str:
    """Format the current local time with a strftime pattern."""
    return time.strftime(fmt, time.localtime(time.time()))


def time_now() -> str:
    """Current local time as 'DD.MM.YYYY. HH:MM:SS'."""
    return time_fmt(TIME_NOW_FORMAT)