"""Metadata formatting utilities for media."""

from typing import Final

_UNITS: Final = ('B', 'KB', 'MB', 'GB', 'TB', 'PB')
_UNIT_STEP: Final = 1024


def readable_size(size_bytes: int, precision: int = 1) -> str:
    """Format a byte count in human-readable notation.

    Example: 1536 -> '1.5 KB', 1048576 -> '1 MB'

    Args:
        size_bytes: Size in bytes (non-negative).
        precision: Number of decimal places to keep.

    Returns:
        Formatted size string.
    """
    if size_bytes <= 0:
        return '0 B'

    exponent = 0
    scaled = float(size_bytes)
    while scaled >= _UNIT_STEP and exponent < len(_UNITS) - 1:
        scaled /= _UNIT_STEP
        exponent += 1

    value = round(scaled, precision)
    return f'{value:g} {_UNITS[exponent]}'
