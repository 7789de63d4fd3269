import math
from typing import Optional

_UNITS = [
    (1e18, "E"),
    (1e15, "P"),
    (1e12, "T"),
    (1e9, "G"),
    (1e6, "M"),
    (1e3, "k"),
]

_SCIENTIFIC_ABOVE = 1e21


def _format_number(value: float, decimals: int) -> str:
    fmt = f"{value:.{decimals}f}"
    if "." in fmt:
        fmt = fmt.rstrip("0").rstrip(".")
    return fmt


def format_difficulty(value: Optional[float], decimals: Optional[int] = None) -> str:
    """Format a difficulty with k/M/G/T/P/E suffixes; huge values go scientific."""
    if value is None:
        return "-"
    if decimals is None:
        from ..config import get_settings
        decimals = get_settings().diff_decimals
    decimals = max(0, int(decimals))

    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return str(value)

    abs_value = abs(value)
    if abs_value >= _SCIENTIFIC_ABOVE:
        return f"{value:.{decimals}e}"
    for scale, suffix in _UNITS:
        if abs_value >= scale:
            return f"{_format_number(value / scale, decimals)}{suffix}"
    return _format_number(value, decimals)
