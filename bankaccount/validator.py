"""
Range checks on plain numbers.

Validator.is_within_range answers the OPPOSITE of what its name says: it is
True when the value lies outside the inclusive range [min_value, max_value].
Callers that want a readable name should use is_out_of_range, which has the
same truth table.

Comparison is done on floats, so IEEE 754 rules apply as-is:
- boundaries count as inside (1.0 in [1.0, 10.0] -> False)
- a NaN anywhere makes both comparisons false -> False
- +inf/-inf compare normally against finite bounds -> True
- min_value > max_value is not special-cased

Inputs that float() cannot take still get an answer: a signaling NaN counts
as NaN and an int too large for a float counts as +/-inf.
"""

import math
from decimal import Decimal


def _as_float(value) -> float:
    if isinstance(value, Decimal) and value.is_snan():
        return math.nan
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class Validator:
    """Stateless; one instance can be shared freely."""

    def is_within_range(self, value, min_value, max_value) -> bool:
        value, min_value, max_value = _as_float(value), _as_float(min_value), _as_float(max_value)
        return value < min_value or value > max_value

    is_out_of_range = is_within_range

    def __call__(self, value, min_value, max_value) -> bool:
        return self.is_within_range(value, min_value, max_value)
