import re
import time

from core2kit import clock


def test_time_now_shape():
    text = clock.time_now()
    assert len(text) == 20
    match = re.fullmatch(r"\d{2}\.\d{2}\.\d{4}\. \d{2}:\d{2}:\d{2}", text)
    assert match.group(0) == text


def test_time_now_parses_back_to_current_time():
    before = time.time()
    text = clock.time_now()
    parsed = time.mktime(time.strptime(text, clock.TIME_NOW_FORMAT))
    assert before - 2 <= parsed <= time.time() + 1


def test_time_fmt_suffix_pattern():
    text = clock.time_fmt("%d%m%Y_%H%M%S")
    assert len(text) == 15
    match = re.fullmatch(r"\d{8}_\d{6}", text)
    assert match.group(0) == text


def test_time_fmt_literal_text_passes_through():
    assert clock.time_fmt("log-%%") == "log-%"


def test_seconds_since_now_is_small_and_nonnegative():
    start = clock.boot_seconds()
    elapsed = clock.seconds_since(start)
    assert 0 <= elapsed <= 1


def test_boot_seconds_monotonic():
    first = clock.boot_seconds()
    second = clock.boot_seconds()
    assert second >= first


def test_seconds_since_earlier_point():
    start = clock.boot_seconds()
    assert clock.seconds_since(start - 10) >= 10