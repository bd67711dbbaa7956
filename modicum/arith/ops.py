"""Modular combinators built on reduction and inversion.

None of these guard against overflow of the operand type: ``a * b`` must
fit in ``T`` before it is reduced.
"""

from __future__ import annotations

from typing import Any, Optional

from modicum.arith.integer import T, check_operand, one, trunc_divmod, zero
from modicum.arith.invert import invert
from modicum.arith.modulus import cast
from modicum.arith.reduction import constrain
from modicum.errors import ExponentError

__all__ = [
    "constrain",
    "add_mod",
    "sub_mod",
    "mul_mod",
    "div_mod",
    "pow_mod",
    "eq_mod",
    "ne_mod",
]


def add_mod(a: T, b: T, modulus: Any) -> T:
    return constrain(a + b, modulus)


def sub_mod(a: T, b: T, modulus: Any) -> T:
    return constrain(a - b, modulus)


def mul_mod(a: T, b: T, modulus: Any) -> T:
    return constrain(a * b, modulus)


def div_mod(a: T, b: T, modulus: Any) -> Optional[T]:
    """``a / b`` modulo *modulus*, or ``None`` if *b* is not invertible."""
    inverse = invert(b, modulus)
    if inverse is None:
        return None
    return constrain(inverse * a, modulus)


def pow_mod(base: T, exponent: Any, modulus: Any) -> T:
    """Square-and-multiply exponentiation.

    *exponent* must be non-negative.  ``pow_mod(a, 0, m)`` is 1 for every
    *a*, zero included.
    """
    check_operand(base)
    check_operand(exponent)
    cast(modulus, base)
    if exponent < zero(exponent):
        raise ExponentError(f"exponent must be non-negative, got {exponent}")

    two = type(exponent)(2)
    result = one(base)
    while exponent != zero(exponent):
        exponent, bit = trunc_divmod(exponent, two)
        if bit == one(bit):
            result = mul_mod(result, base, modulus)
        base = mul_mod(base, base, modulus)
    return result


def eq_mod(a: T, b: T, modulus: Any) -> bool:
    """True if *a* and *b* are congruent modulo *modulus*."""
    return constrain(a, modulus) == constrain(b, modulus)


def ne_mod(a: T, b: T, modulus: Any) -> bool:
    return constrain(a, modulus) != constrain(b, modulus)
