"""
Global constants used throughout the project
"""
from typing import Final

# Coordinates are unsigned 16-bit
COORD_MIN: Final[int] = 0
COORD_MAX: Final[int] = 0xFFFF

# Pixel keys pack y in the high half and x in the low half
KEY_SHIFT: Final[int] = 16
KEY_MASK: Final[int] = 0xFFFF


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


RESET = "\033[0m"

# Cycled through when rendering the rectangles of a cache
PALETTE = (
    bg_color_24b(30, 147, 255),  # Blue (#1E93FF)
    bg_color_24b(249, 60, 49),  # Red (#F93C31)
    bg_color_24b(79, 204, 48),  # Green (#4FCC30)
    bg_color_24b(255, 220, 0),  # Yellow (#FFDC00)
    bg_color_24b(229, 58, 163),  # Magenta (#E53AA3)
    bg_color_24b(255, 133, 27),  # Orange (#FF851B)
    bg_color_24b(135, 216, 241),  # Blue light (#87D8F1)
    bg_color_24b(146, 18, 49),  # Maroon (#921231)
)

MEMBER_COLOR = bg_color_24b(255, 255, 255)
BG_COLOR = bg_color_24b(85, 85, 85)
