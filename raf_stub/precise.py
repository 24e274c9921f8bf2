from __future__ import annotations

import math
from decimal import Decimal


def _as_decimal(value: float) -> Decimal:
    # str() of a float is its shortest round-tripping (canonical) form.
    return Decimal(str(value))


def get_precision(value: float) -> int:
    """
    Number of digits after the decimal point in the canonical form of value.

    Integers (and integral floats such as 10.0) have precision 0. Exponent
    forms are measured on their expansion: 1e-07 has precision 7.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    exponent = _as_decimal(value).normalize().as_tuple().exponent
    return max(0, -int(exponent))


def get_max_precision(*values: float) -> int:
    return max((get_precision(v) for v in values), default=0)


def add(*values: float) -> float:
    """
    Sum values without binary floating point artifacts.

    Strategy: make all numbers integers for the operation, then convert back
    to the original scale.

      values     = 10.203, 1.1
      precision  = 3            (10.203)
      scaled     = 10203, 1100
      sum        = 11303
      result     = 11303 / 10**3 = 11.303

    Scaling goes through Decimal so every scaled value is an exact integer,
    and int / int true division rounds once, to the nearest float.
    """
    if any(isinstance(v, float) and not math.isfinite(v) for v in values):
        return float(sum(values))

    precision = get_max_precision(*values)
    modifier = 10**precision
    total = sum(int(_as_decimal(v).scaleb(precision)) for v in values)
    return total / modifier
