"""Различные вспомогательные функции."""

from __future__ import annotations

_UNIT = 1024
_PREFIXES = "KMGTPE"


def format_size(num_bytes: int) -> str:
    """Форматирует размер в двоичных единицах: `512 B`, `1.5 KB`, `1.0 MB`."""

    if num_bytes < 0:
        raise ValueError(f"Size must not be negative: {num_bytes}")
    if num_bytes < _UNIT:
        return f"{num_bytes} B"
    divisor, exponent = _UNIT, 0
    quotient = num_bytes // _UNIT
    while quotient >= _UNIT and exponent < len(_PREFIXES) - 1:
        divisor *= _UNIT
        exponent += 1
        quotient //= _UNIT
    return f"{num_bytes / divisor:.1f} {_PREFIXES[exponent]}B"
