"""Packed 32-bit ARGB colors."""

import re
from typing import Tuple

COLOR_WHITE = 0xFFFFFFFF
COLOR_BLACK = 0x00000000
COLOR_RED = 0xFFFF0000

MARKER_COLOR = COLOR_BLACK
BACKGROUND_COLOR = 0xFF333333

DEFAULT_PALETTE = (
    0xFFDFFF00, 0xFFFFBF00, 0xFFFF7F50, 0xFFDE3163, 0xFF9FE2BF,
    0xFF40E0D0, 0xFF6495ED, 0xFFCCCCFF, 0xFF3355FF, 0xFFFF33FF,
)


def unpack_color(color) -> Tuple[int, int, int, int]:
    """Return (alpha, red, green, blue) of a packed color or uint32 array of colors."""
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def parse_color(text: str) -> int:
    """
    Parse a color from configuration text.

    Accepts ``0xAARRGGBB``, ``#AARRGGBB`` or ``#RRGGBB`` (opaque).

    Raises:
        ValueError: If the text is not one of the accepted forms
    """
    value = text.strip()
    if value.lower().startswith("0x"):
        digits = value[2:]
        if not re.fullmatch(r"[0-9A-Fa-f]{8}", digits):
            raise ValueError(f"Expected 0xAARRGGBB color, got {text!r}")
    elif value.startswith("#"):
        digits = value[1:]
        if re.fullmatch(r"[0-9A-Fa-f]{6}", digits):
            digits = "FF" + digits
        elif not re.fullmatch(r"[0-9A-Fa-f]{8}", digits):
            raise ValueError(f"Expected #RRGGBB or #AARRGGBB color, got {text!r}")
    else:
        raise ValueError(f"Unrecognized color {text!r}")

    return int(digits, 16)


def format_color(color: int) -> str:
    return f"0x{color:08X}"
