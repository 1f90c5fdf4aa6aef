"""
DHCP option decoding and text formatting.
"""

from .option_decoder import (
    INVALID,
    OPTION_CATEGORIES,
    OptionCategory,
    category_of,
    decode,
    decode_option,
    render_option,
)
from .formatter import format_packet

__all__ = [
    'INVALID',
    'OPTION_CATEGORIES',
    'OptionCategory',
    'category_of',
    'decode',
    'decode_option',
    'format_packet',
    'render_option',
]
