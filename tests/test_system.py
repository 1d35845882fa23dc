import pytest

from core2kit.system import (
    EspError,
    ResetReason,
    banner,
    err_to_str,
    random_u32,
    reset_reason_to_str,
    string_ends_with,
)


def test_banner_has_five_lines():
    lines = banner().split("\n")
    assert lines[-1] == ""
    assert len(lines) == 6
    assert lines[0] == "  _____             ___ "


def test_err_to_str_known_codes():
    assert err_to_str(0) == "ESP_OK"
    assert err_to_str(EspError.ESP_ERR_TIMEOUT) == "ESP_ERR_TIMEOUT"
    assert err_to_str(EspError.ESP_FAIL) == "ESP_FAIL"


@pytest.mark.parametrize("code", list(EspError))
def test_err_to_str_round_trip(code):
    assert EspError[err_to_str(int(code))] is code


def test_err_to_str_unknown():
    assert err_to_str(12345) == "UNKNOWN"


def test_reset_reason_name_and_description():
    assert reset_reason_to_str(ResetReason.ESP_RST_POWERON, False) == "ESP_RST_POWERON"
    assert (
        reset_reason_to_str(ResetReason.ESP_RST_POWERON, True)
        == "Reset due to power-on event"
    )
    assert reset_reason_to_str(ResetReason.ESP_RST_SDIO, True) == "Reset over SDIO"


@pytest.mark.parametrize("reason", list(ResetReason))
def test_reset_reason_descriptions_differ_from_names(reason):
    name = reset_reason_to_str(reason, False)
    assert name == reason.name
    assert reset_reason_to_str(reason, True) != name


@pytest.mark.parametrize("describe", [False, True])
def test_reset_reason_unknown(describe):
    assert reset_reason_to_str(99, describe) == "UNKNOWN"


def test_string_ends_with():
    assert string_ends_with("logfile.txt", ".txt") is True
    assert string_ends_with("logfile.txt", ".csv") is False
    assert string_ends_with("a", "abc") is False
    assert string_ends_with("abc", "") is True
    assert string_ends_with(None, "x") is False
    assert string_ends_with("x", None) is False


def test_random_u32_range():
    values = [random_u32() for _ in range(200)]
    assert all(0 <= v < 2**32 for v in values)
    assert len(set(values)) > 1