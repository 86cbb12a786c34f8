"""Hex and packed RGB color conversion."""

import re

from govee_control.utils.errors import InvalidColorFormat

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]{6}")


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """Convert a hex color ("#RRGGBB" or "RRGGBB") to an RGB tuple.

    Raises:
        InvalidColorFormat: If the value is not exactly 6 hex digits
    """
    clean = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_PATTERN.fullmatch(clean):
        raise InvalidColorFormat(hex_color)
    return unpack_rgb(int(clean, 16))


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack RGB channels into the integer value used by colorRgb."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_rgb(value: int) -> tuple[int, int, int]:
    """Split a packed colorRgb value into its channels."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB to hex color."""
    return f"#{r & 0xFF:02x}{g & 0xFF:02x}{b & 0xFF:02x}"


def hex_to_color_value(hex_color: str) -> int:
    """Convert a hex color straight to a packed colorRgb value."""
    return pack_rgb(*parse_hex(hex_color))
