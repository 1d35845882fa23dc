"""Monochrome 128x64 frame buffer with a small 5-column bitmap font."""

from __future__ import annotations

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64
DISP_MEM_LEN = (SCREEN_WIDTH * SCREEN_HEIGHT) // 8
FONT_W = 5
FONT_H = 8
FIRST_CHAR = 0x20
LAST_CHAR = 0x7E

# Five column bytes per character, from ' ' to '~'.
_FONT = bytes.fromhex(
    "0000000000" "00002E0000" "0600060000" "147F147F14"
    "06497F4930" "2410082400" "3649365000" "0000000600"
    "0036410000" "0041360000" "0008000000" "00081C0800"
    "4020000000" "0008080000" "2000000000" "0030060000"
    "3641413600" "0000003600" "3049490600" "0049493600"
    "0608083600" "0649493000" "3649493000" "0001013600"
    "3649493600" "0649493600" "0014000000" "2014000000"
    "0008142200" "0014141400" "0022140800" "0001310600"
    "3649555 92E".replace(" ", "")
    + "3609093600" "7749493600" "3641410000" "7741413600"
    "3649490000" "3609090000" "3641513000" "3608083600"
    "0000360000" "0040403600" "3608142200" "3640400000"
    "3601060136" "3604103600" "3641413600" "3609090600"
    "3641215600" "3609192600" "0649493000" "0001370100"
    "3640403600" "3640360000" "3640304036" "3608083600"
    "0648483600" "2051494502" "7741410000" "0006300000"
    "0041417700" "0002010200" "0040400000" "0001020000"
    "2054543840" "0036483000" "3048480000" "3048487600"
    "3854540800" "086C0A0000" "0854543800" "3608083000"
    "0034000000" "0040340000" "3610280000" "3600000000"
    "3008100830" "3008083000" "3048483000" "7814140800"
    "0814146800" "3008080000" "0854542000" "082C480000"
    "3040403000" "3040300000" "3040204030" "2810102800"
    "0850503800" "24342C2400" "0836410000" "0036000000"
    "0041360800" "0808101000"
)


def _font_bit(index: int) -> int:
    byte, bit = divmod(index, 8)
    if byte >= len(_FONT):
        return 0
    return (_FONT[byte] >> (7 - bit)) & 1


class FrameBuffer:
    """A 1-bit display buffer, rows of 16 bytes, most significant bit leftmost."""

    def __init__(self) -> None:
        self._mem = bytearray(DISP_MEM_LEN)

    def __len__(self) -> int:
        return DISP_MEM_LEN

    @staticmethod
    def _locate(x: int, y: int):
        idx = y * SCREEN_WIDTH + x
        if not 0 <= idx < SCREEN_WIDTH * SCREEN_HEIGHT:
            return None
        byte, bit = divmod(idx, 8)
        return byte, 7 - bit

    def get_pixel(self, x: int, y: int) -> int:
        """1 if the pixel is lit, else 0; positions outside the buffer read as 0."""
        loc = self._locate(x, y)
        if loc is None:
            return 0
        byte, bit = loc
        return (self._mem[byte] >> bit) & 1

    def set_pixel(self, x: int, y: int, value) -> None:
        """Light (truthy value) or clear a pixel; positions outside the buffer are ignored."""
        loc = self._locate(x, y)
        if loc is None:
            return
        byte, bit = loc
        if value:
            self._mem[byte] |= 1 << bit
        else:
            self._mem[byte] &= ~(1 << bit) & 0xFF

    def blit_char(self, x: int, y: int, chr_: str) -> None:
        """Draw one character with its top-left corner at (x, y)."""
        code = ord(chr_)
        if not FIRST_CHAR <= code <= LAST_CHAR:
            raise ValueError(f"character {chr_!r} is not in the font")
        base = (code - FIRST_CHAR) * FONT_W * 8
        for col in range(FONT_W):
            offset = base + FONT_H * col
            for i in range(FONT_H):
                self.set_pixel(x + col, y + i, _font_bit(offset + (FONT_H - i)))

    def scroll(self, pixels: int) -> None:
        """Move the content up by the given number of rows, clearing the bottom."""
        shift = (SCREEN_WIDTH // 8) * pixels
        if shift <= 0:
            return
        if shift >= DISP_MEM_LEN:
            self._mem[:] = bytes(DISP_MEM_LEN)
            return
        self._mem[: DISP_MEM_LEN - shift] = self._mem[shift:]
        self._mem[DISP_MEM_LEN - shift :] = bytes(shift)

    def print_xy(self, x: int, y: int, text: str) -> None:
        """Draw text left to right starting at (x, y)."""
        for i, ch in enumerate(text):
            self.blit_char(x + i * FONT_W, y, ch)

    def print_line(self, text: str) -> None:
        """Scroll up by one text line and draw text on the bottom line."""
        self.scroll(FONT_H)
        self.print_xy(0, 7 * FONT_H, text)

    def to_bytes(self) -> bytes:
        """The raw buffer contents."""
        return bytes(self._mem)