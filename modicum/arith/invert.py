"""Modular multiplicative inverse."""

from __future__ import annotations

from typing import Any, Optional

from modicum.arith.egcd import egcd
from modicum.arith.integer import T, check_operand, is_signed, one
from modicum.arith.modulus import cast
from modicum.arith.reduction import constrain
from modicum.errors import OperandError


def invert(a: T, modulus: Any) -> Optional[T]:
    """Return the inverse of *a* in ``[0, modulus)``, or ``None`` if there is none.

    An inverse exists iff ``gcd(a mod modulus, modulus) == 1``; in particular
    multiples of the modulus (including zero) have none.
    """
    check_operand(a)
    if not is_signed(a):
        # Bezout coefficients go negative.
        raise OperandError(f"invert needs a signed operand type, got {type(a).__name__}")
    d, x, _ = egcd(constrain(a, modulus), cast(modulus, a))
    if d != one(d):
        return None
    return constrain(x, modulus)
