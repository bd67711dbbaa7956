"""Canonical residue reduction."""

from __future__ import annotations

from typing import Any

from modicum.arith.integer import T, check_operand, trunc_rem
from modicum.arith.modulus import cast


def constrain(value: T, modulus: Any) -> T:
    """Reduce *value* into ``[0, modulus)``.

    The first remainder carries the sign of *value*; adding the modulus and
    reducing again lands negative values in range as well.

    The intermediate sum reaches ``2 * modulus - 1``.  A fixed-width operand
    type must hold that sum: with ``I8``, moduli above 64 can wrap and give
    a value outside ``[0, modulus)`` (``constrain(I8(100), 120) == -36``).
    Overflow is not detected.
    """
    check_operand(value)
    m = cast(modulus, value)
    return trunc_rem(trunc_rem(value, m) + m, m)
