"""Modulus capability.

A modulus is a strictly positive, unsigned integer that can be converted
into the operand type.  Keeping the modulus unsigned while letting operands
be signed allows calculations on negative values without a negative
modulus ever being possible.
"""

from __future__ import annotations

import operator
from typing import Any

from modicum.arith.integer import T
from modicum.errors import InvalidModulusError, ModulusConversionError


def check_modulus(modulus: Any) -> int:
    """Validate *modulus* and return its value as a Python ``int``."""
    if isinstance(modulus, bool):
        raise InvalidModulusError("bool is not a modulus type")
    if getattr(type(modulus), "SIGNED", False):
        raise InvalidModulusError(f"modulus type {type(modulus).__name__} must be unsigned")
    try:
        value = operator.index(modulus)
    except TypeError:
        raise InvalidModulusError(f"{type(modulus).__name__} is not an integer type") from None
    if value <= 0:
        raise InvalidModulusError(f"modulus must be positive, got {value}")
    return value


def cast(modulus: Any, like: T) -> T:
    """Convert *modulus* into the operand type of *like*.

    Raises ``ModulusConversionError`` if the value does not fit.
    """
    value = check_modulus(modulus)
    target = type(like)
    if target is int:
        return value
    try_from = getattr(target, "try_from", None)
    try:
        if try_from is not None:
            return try_from(value)
        converted = target(value)
    except OverflowError as exc:
        raise ModulusConversionError(
            f"cannot convert modulus {value} to {target.__name__}"
        ) from exc
    if operator.index(converted) != value:
        raise ModulusConversionError(f"cannot convert modulus {value} to {target.__name__}")
    return converted
