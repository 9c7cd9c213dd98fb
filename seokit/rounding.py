"""Decimal rounding shared by the metric extractors."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero at ``ndigits`` decimals.

    Unlike the built-in ``round`` (62.5 -> 62), halves always go up in
    magnitude (62.5 -> 63, -0.0625 -> -0.063 at 3 decimals).
    """
    factor = 10**ndigits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    return math.copysign(rounded, value) if rounded else 0.0


def percentage(part: float, whole: float, ndigits: int = 1) -> float:
    """Return ``part / whole`` as a percentage rounded to ``ndigits``.

    The ratio is scaled once (``part / whole * 10**(ndigits + 2)``) before
    rounding so ``percentage(1, 16)`` is exactly ``round(62.5) / 10``.
    Returns 0 when ``whole`` is not positive.
    """
    if whole <= 0:
        return 0.0
    factor = 10**ndigits
    return math.floor(part / whole * (factor * 100) + 0.5) / factor
