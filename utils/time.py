from __future__ import annotations

import math


def format_hour(hour: float) -> str:
    """
    Render an hour of the day the way a plain number prints: whole hours
    drop the fractional part ('6' not '6.0'), fractional hours keep their
    shortest representation ('6.5'), and a missing value prints as 'NaN'.
    """
    value = float(hour)
    if math.isnan(value):
        return "NaN"
    if value.is_integer():
        return str(int(value))
    return repr(value)
