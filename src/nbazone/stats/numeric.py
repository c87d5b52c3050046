"""Numeric helpers shared by the career and comparison reducers."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, Optional, Tuple


def weighted_mean(pairs: Iterable[Tuple[float, float]]) -> float:
    """Return sum(value * weight) / sum(weight), or ``0.0`` when the weights sum to zero."""

    total = 0.0
    weight_sum = 0.0
    for value, weight in pairs:
        total += value * weight
        weight_sum += weight
    if weight_sum == 0:
        return 0.0
    return total / weight_sum


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    """Return ``numerator / denominator`` or ``None`` for a zero denominator."""

    if denominator == 0:
        return None
    return numerator / denominator


def finite_or_none(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def round_half_away(value: float, places: int = 2) -> float:
    """Round ``value`` to ``places`` decimals with ties going away from zero.

    Rounding works on the shortest decimal repr of the float, so ``2.675``
    rounds to ``2.68`` even though its binary value sits just below the tie.
    The decimal context is built per call and sized to the value, so large
    magnitudes and the caller's ambient context never affect the result.
    Callers must pass a finite number.
    """

    number = Decimal(repr(float(value)))
    if number.as_tuple().exponent >= -places:
        return float(value)
    context = Context(prec=max(1, number.adjusted() + places + 2), rounding=ROUND_HALF_UP)
    return float(number.quantize(Decimal(1).scaleb(-places, context=context), context=context))
