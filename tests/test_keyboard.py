import string

import pytest

from core2kit.keyboard import map_char, translate_keys

KNOWN = (
    string.ascii_letters
    + string.digits
    + " .,:;!?$%&@#_-=+*<>/|\\()[]{}^~'\""
)


@pytest.mark.parametrize("c", ["\0", "\r", "\n"])
def test_control_chars_have_no_position(c):
    assert map_char(c) is None


def test_known_positions_are_distinct():
    positions = [map_char(c) for c in KNOWN]
    assert len(set(positions)) == len(positions)


def test_pinned_positions():
    assert map_char("A") == (0, 7)
    assert map_char(" ") == (10, 3)


def test_lowercase_two_rows_below_uppercase():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        ux, uy = map_char(upper)
        lx, ly = map_char(lower)
        assert ux == lx
        assert uy == ly + 2


def test_letters_run_along_a_row():
    x0, y0 = map_char("A")
    for offset, c in enumerate("ABCDEFGHIJKLM"):
        assert map_char(c) == (x0 + offset, y0)


def test_zero_follows_nine():
    nine = map_char("9")
    zero = map_char("0")
    assert zero[1] == nine[1]
    assert zero[0] == nine[0] + 1
    assert map_char("1")[0] < nine[0]


def test_unknown_char_shares_default_position():
    assert map_char("`") == map_char("}")


def test_map_char_rejects_multiple_chars():
    with pytest.raises(ValueError):
        map_char("ab")


def test_translate_keys_converts_cr_and_drops_nul():
    assert translate_keys(b"ab\r\x00c") == b"ab\nc"


def test_translate_keys_all_nul_is_empty():
    assert translate_keys(b"\x00\x00\x00") == translate_keys(b"")


def test_translate_keys_keeps_plain_text():
    text = b"hello world"
    assert translate_keys(text) == text