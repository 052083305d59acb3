"""Decimal rounding helpers shared by ingestion and query formatting.

Values are rounded half-up on their exact binary representation, which is
how the device firmware and the dashboard format numbers. Python's built-in
``round`` uses banker's rounding and would disagree on exact ties
(``round(0.25, 1) == 0.2`` while the dashboard shows ``0.3``).
"""

from decimal import ROUND_HALF_UP, Context, Decimal

BYTES_PER_KILOBYTE = 1024

# Wide enough to quantize any finite double without raising InvalidOperation.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _quantize(value: float, digits: int) -> Decimal:
    quantum = Decimal(1).scaleb(-digits)
    return Decimal(value).quantize(quantum, context=_CONTEXT)


def round_half_up(value: float, digits: int = 1) -> float:
    """Round ``value`` to ``digits`` decimal places, ties away from zero."""
    return float(_quantize(value, digits))


def format_kilobytes(byte_count: float, digits: int = 2) -> str:
    """Render a raw byte count as a kilobyte label, e.g. ``204800 -> "200.00KB"``."""
    return f"{_quantize(byte_count / BYTES_PER_KILOBYTE, digits)}KB"
