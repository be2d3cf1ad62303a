# ============== regu_ai/ui/formatting.py ==============

import math


def format_idr(value) -> str:
    """Rupiah, dot thousands separators, no decimals: ``Rp 1.500.000.000``."""
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        return ""
    rounded = int(round(value))
    body = f"{abs(rounded):,}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {body}"


def format_rate(rate: float) -> str:
    return f"{rate * 100:.0f}%"
