"""Integer capability.

The generic operations accept any operand type that behaves like a machine
integer: it has a zero and a one of its own type, ``==``, ordering against
zero, ``+ - *`` and ``divmod``, and is a value (operations return new
objects).  Python ``int`` qualifies, as do the fixed-width types in
``modicum.arith.fixed``.

Host types disagree on the sign convention of ``//`` and ``%``; Python
floors, machine integers truncate.  The algorithms are written against
truncating division, so they go through ``trunc_divmod`` rather than the
operators.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, TypeVar, runtime_checkable

from modicum.errors import OperandError


@runtime_checkable
class Integer(Protocol):
    """Operand capability: zero/one, equality, ``+ - *``, ``divmod``, copy.

    ``divmod`` must floor like Python's ``int`` (remainder takes the sign of
    the divisor).  ``trunc_divmod`` corrects from floor to truncation, so a
    type whose ``divmod`` already truncates would be corrected twice.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __divmod__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __index__(self) -> int: ...


T = TypeVar("T", bound=Integer)


def check_operand(value: T) -> T:
    """Return *value* unchanged if it can be used as an operand."""
    if isinstance(value, bool) or not isinstance(value, Integer):
        raise OperandError(f"{type(value).__name__} is not an integer type")
    return value


def zero(like: T) -> T:
    return type(like)(0)


def one(like: T) -> T:
    return type(like)(1)


def is_signed(like: Any) -> bool:
    """True if the operand type can hold negative values."""
    if isinstance(like, int):
        return True
    return bool(getattr(type(like), "SIGNED", True))


def trunc_divmod(a: T, b: T) -> Tuple[T, T]:
    """Quotient rounded toward zero and the remainder with the sign of *a*.

    Raises ``ZeroDivisionError`` when *b* is zero.
    """
    q, r = divmod(a, b)
    z = zero(r)
    # Floor and truncation differ only when the division is inexact and
    # the signs of the operands differ.
    if r != z and (a < z) != (b < z):
        q = q + one(q)
        r = r - b
    return q, r


def trunc_div(a: T, b: T) -> T:
    return trunc_divmod(a, b)[0]


def trunc_rem(a: T, b: T) -> T:
    return trunc_divmod(a, b)[1]
