"""Display helpers for Vietnamese (vi-VN) amounts, percentages and dates.

These never consult the process locale so the output is identical on every
host: ``.`` groups thousands, ``,`` separates decimals, and VND amounts carry a
trailing ``₫`` after a non-breaking space.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional, Union

CURRENCY_SYMBOL = "₫"
NBSP = "\u00a0"
NOT_AVAILABLE = "N/A"

_SEPARATORS = str.maketrans({",": ".", ".": ","})


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_number(amount: float) -> str:
    """Group thousands with dots, keeping up to three decimals."""
    text = f"{abs(amount):,.3f}".rstrip("0").rstrip(".")
    sign = "-" if amount < 0 and text != "0" else ""
    return sign + text.translate(_SEPARATORS)


def format_currency(amount: float) -> str:
    """Format as whole Vietnamese dong, e.g. ``10.000.000 ₫``."""
    return f"{format_number(_round_half_away(amount))}{NBSP}{CURRENCY_SYMBOL}"


def format_percentage(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    formatted = f"{value:.2f}"
    return f"+{formatted}%" if value > 0 else f"{formatted}%"


def format_date(value: Union[str, int, float, None]) -> str:
    """Render epoch milliseconds or an ISO-8601 string as ``dd/mm/yyyy``."""
    if not value:
        return NOT_AVAILABLE
    try:
        if isinstance(value, str):
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        else:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return NOT_AVAILABLE
    return parsed.strftime("%d/%m/%Y")
