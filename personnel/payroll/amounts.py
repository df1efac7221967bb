from __future__ import annotations

import math


DEFAULT_TAX_PERCENTAGE = 10.0
MANAGER_TAX_PERCENTAGE = 33.99


def truncate_to_integer_precision(value: float) -> float:
    """
    Drop the fractional part (toward zero) and keep a float:
      19.7  -> 19.0
      -19.7 -> -19.0
    """
    v = float(value)
    if not math.isfinite(v):
        raise ValueError(f"El importe debe ser un número finito: {value}")
    return float(int(v))


def apply_tax(amount: float, percentage: float) -> float:
    return amount - (amount * percentage) / 100


def format_amount(value: float) -> str:
    # fixed-point, two decimals, no grouping; f-strings ignore the locale
    return f"{value:.2f}"
