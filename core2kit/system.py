"""Error and reset-reason names, the start-up banner and small string helpers."""

from __future__ import annotations

import enum
import secrets
from typing import Dict, Optional

_BANNER_LINES = (
    "  _____             ___ ",
    " / ___/__  _______ |_  |",
    "/ /__/ _ \\/ __/ -_) __/ ",
    "\\___/\\___/_/  \\__/____/ ",
    "                        ",
)

UNKNOWN = "UNKNOWN"


class EspError(enum.IntEnum):
    """Error codes reported by the platform."""

    ESP_OK = 0
    ESP_FAIL = -1
    ESP_ERR_NO_MEM = 0x101
    ESP_ERR_INVALID_ARG = 0x102
    ESP_ERR_INVALID_STATE = 0x103
    ESP_ERR_INVALID_SIZE = 0x104
    ESP_ERR_NOT_FOUND = 0x105
    ESP_ERR_NOT_SUPPORTED = 0x106
    ESP_ERR_TIMEOUT = 0x107
    ESP_ERR_INVALID_RESPONSE = 0x108
    ESP_ERR_INVALID_CRC = 0x109
    ESP_ERR_INVALID_VERSION = 0x10A
    ESP_ERR_INVALID_MAC = 0x10B
    ESP_ERR_NOT_FINISHED = 0x10C
    ESP_ERR_WIFI_BASE = 0x3000
    ESP_ERR_MESH_BASE = 0x4000
    ESP_ERR_FLASH_BASE = 0x6000
    ESP_ERR_HW_CRYPTO_BASE = 0xC000
    ESP_ERR_MEMPROT_BASE = 0xD000


class ResetReason(enum.IntEnum):
    """Reasons the chip last reset."""

    ESP_RST_UNKNOWN = 0
    ESP_RST_POWERON = 1
    ESP_RST_EXT = 2
    ESP_RST_SW = 3
    ESP_RST_PANIC = 4
    ESP_RST_INT_WDT = 5
    ESP_RST_TASK_WDT = 6
    ESP_RST_WDT = 7
    ESP_RST_DEEPSLEEP = 8
    ESP_RST_BROWNOUT = 9
    ESP_RST_SDIO = 10


_RESET_DESCRIPTIONS: Dict[ResetReason, str] = {
    ResetReason.ESP_RST_UNKNOWN: "Reset reason can not be determined",
    ResetReason.ESP_RST_POWERON: "Reset due to power-on event",
    ResetReason.ESP_RST_EXT: "Reset by external pin (not applicable for ESP32)",
    ResetReason.ESP_RST_SW: "Software reset via esp_restart",
    ResetReason.ESP_RST_PANIC: "Software reset due to exception/panic",
    ResetReason.ESP_RST_INT_WDT: "Reset (software or hardware) due to interrupt watchdog",
    ResetReason.ESP_RST_TASK_WDT: "Reset due to task watchdog",
    ResetReason.ESP_RST_WDT: "Reset due to other watchdogs",
    ResetReason.ESP_RST_DEEPSLEEP: "Reset after exiting deep sleep mode",
    ResetReason.ESP_RST_BROWNOUT: "Brownout reset (software or hardware)",
    ResetReason.ESP_RST_SDIO: "Reset over SDIO",
}


def banner() -> str:
    """The start-up logo, one line per row, each ending with a newline."""
    return "".join(line + "\n" for line in _BANNER_LINES)


def err_to_str(err: int) -> str:
    """Symbolic name of an error code, or 'UNKNOWN'."""
    try:
        return EspError(err).name
    except ValueError:
        return UNKNOWN


def reset_reason_to_str(reason: int, describe: bool = False) -> str:
    """Name of a reset reason, or its description when describe is true.

    Unknown values give 'UNKNOWN'.
    """
    try:
        member = ResetReason(reason)
    except ValueError:
        return UNKNOWN
    return _RESET_DESCRIPTIONS[member] if describe else member.name


def string_ends_with(text: Optional[str], end: Optional[str]) -> bool:
    """True if text ends with end; False when either is None."""
    if text is None or end is None:
        return False
    return text.endswith(end)


def random_u32() -> int:
    """A random unsigned 32-bit integer."""
    return secrets.randbits(32)