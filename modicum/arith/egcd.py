"""Extended Euclidean algorithm."""

from __future__ import annotations

from typing import Tuple

from modicum.arith.integer import T, check_operand, one, trunc_divmod, zero
from modicum.errors import OperandError


def egcd(a: T, b: T) -> Tuple[T, T, T]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b)`` and ``a*x + b*y == d``.

    Each step replaces ``(a, b)`` by ``(b, a rem b)`` and the coefficients
    of the tail ``(d, x', y')`` by ``(d, y', x' - (a quo b) * y')``; this
    loop applies the same steps front to back.  Division truncates, so
    negative inputs give the same coefficients a machine-integer
    implementation would.
    """
    check_operand(a)
    check_operand(b)
    if type(a) is not type(b):
        raise OperandError(f"egcd operands differ in type: {type(a).__name__}, {type(b).__name__}")

    old_r, r = a, b
    old_x, x = one(a), zero(a)
    old_y, y = zero(a), one(a)
    while r != zero(r):
        q, rem = trunc_divmod(old_r, r)
        old_r, r = r, rem
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y
