"""Number rendering helpers shared by the formatters."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from threading import Lock
from typing import Union

import inflect

from .args import Number

# inflect engines keep per-call scratch state on the instance.
_inflect = inflect.engine()
_inflect_lock = Lock()


def to_words(value: Number) -> str:
    """Return the cardinal English words for an integral number ("two", "twenty-one").

    Non-finite values and numbers past inflect's range fall back to digits.
    """

    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    number = int(value)
    with _inflect_lock:
        try:
            return _inflect.number_to_words(number)
        except inflect.NumOutOfRangeError:
            return str(number)


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def to_fixed(value: Number, digits: int = 2, shift: int = 0) -> str:
    """Render ``value / 10**shift`` with exactly ``digits`` decimals.

    Halves round away from zero. Precision grows with the magnitude of the
    value, so large numbers render in full. Non-finite values render as-is.
    """

    number = _to_decimal(value)
    if not number.is_finite():
        return str(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
        quantum = Decimal(1).scaleb(-digits)
        return str(number.scaleb(-shift).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: Number, shift: int = 0) -> str:
    """Render ``value / 10**shift`` the way it reads in descriptions: ``10`` not ``10.0``."""

    number = _to_decimal(value)
    if not number.is_finite():
        return str(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + 2)
        number = number.scaleb(-shift)
        if number == number.to_integral_value():
            return str(number.quantize(Decimal(1)))
        return str(number.normalize())


def _to_decimal(value: Union[Number, Decimal]) -> Decimal:
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


__all__ = ["format_number", "to_fixed", "to_words", "upper_first"]
