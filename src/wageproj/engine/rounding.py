"""Money and percentage formatting, including the whole-number snap."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """Render a wage with exactly two fraction digits."""
    return str(round_cents(amount))


def percentage_change(new: Decimal, old: Decimal) -> Decimal:
    return (new - old) / old * HUNDRED


def snap_percentage(value: Decimal, tolerance: Decimal, round_first: bool = True) -> Decimal:
    """Snap to the nearest integer if within ``tolerance`` of it, else round to 2 digits.

    With ``round_first`` the distance is measured after rounding to 2 digits
    (cumulative figures); without it, on the raw value (step-over-step figures).
    """
    candidate = round_cents(value) if round_first else value
    whole = candidate.to_integral_value(rounding=ROUND_HALF_UP)
    if abs(candidate - whole) <= tolerance:
        return whole
    return round_cents(value)


def format_percentage(
    value: Decimal, tolerance: Decimal | None = None, round_first: bool = True,
) -> str:
    """Render a percentage.

    With a tolerance, snapped values render as bare integers ("4") and the
    rest with two fraction digits ("3.90"). Without one, always two digits.
    """
    if tolerance is None:
        return str(round_cents(value))
    snapped = snap_percentage(value, tolerance, round_first)
    if snapped == snapped.to_integral_value():
        return str(int(snapped))
    return str(snapped)
