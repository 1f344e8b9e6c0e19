"""IEEE-754 float helpers: division and trigonometry that degrade to inf/nan instead of raising."""
from __future__ import annotations

import math

TAU = 2.0 * math.pi


def fdiv(a: float, b: float) -> float:
    """Divide *a* by *b* following IEEE-754.

    A zero divisor gives ``inf`` signed by the operands (``-0.0`` counts as
    negative) or ``nan`` when *a* is zero or nan, where Python would raise
    ``ZeroDivisionError``.
    """
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def acos_or_nan(x: float) -> float:
    """``math.acos`` returning nan for arguments outside [-1, 1]."""
    if not -1.0 <= x <= 1.0:
        return math.nan
    return math.acos(x)


def cos_or_nan(x: float) -> float:
    """``math.cos`` returning nan for infinite arguments."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def sin_or_nan(x: float) -> float:
    """``math.sin`` returning nan for infinite arguments."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)
