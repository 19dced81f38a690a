"""
Capacity utilization derivation and the shared rounding rule.

Utilization is not user-authoritative: whenever monthly output or production
capacity changes, the caller re-derives it with ``derive_utilization()`` and
overwrites the stored value.  See ``mfg_scorer.forms.session.apply_change``.

Rounding
--------
Both the one-decimal utilization and the integer score round half away from
zero, applied to the shortest decimal representation of the float
(``repr``).  So ``12.25`` → ``12.3`` and ``64.5`` → ``65`` regardless of the
binary approximation of the input.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

from mfg_scorer.models.metrics import parse_number


def round_half_up(value: float, places: int = 0) -> float:
    """Round ``value`` to ``places`` decimals, halves away from zero."""
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    # quantize() needs every integer digit plus ``places`` within precision.
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def derive_utilization(output: Any, capacity: Any) -> Optional[float]:
    """Return ``(output / capacity) * 100`` rounded to one decimal place.

    Args:
        output:   Monthly output; number, numeric text or empty.  Unparseable → 0.
        capacity: Production capacity; number, numeric text or empty.
            Unparseable → 0.

    Returns:
        Utilization percentage, or ``None`` when capacity is not positive
        (the caller keeps whatever value it held before).
    """
    out = parse_number(output) or 0.0
    cap = parse_number(capacity) or 0.0
    if cap <= 0:
        return None
    return round_half_up((out / cap) * 100, 1)


def format_utilization(value: Optional[float]) -> str:
    """Render utilization as fixed-point text with one decimal, or ``""`` if unset."""
    if value is None:
        return ""
    return f"{round_half_up(value, 1):.1f}"
