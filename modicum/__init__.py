"""Modular arithmetic over integer-like types."""

from modicum.arith import (
    add_mod,
    constrain,
    div_mod,
    egcd,
    eq_mod,
    invert,
    mul_mod,
    ne_mod,
    pow_mod,
    sub_mod,
)
from modicum.arith.fixed import DTYPES, I8, I16, I32, I64, U8, U16, U32, U64, FixedInt
from modicum.errors import (
    ExponentError,
    InvalidModulusError,
    ModicumError,
    ModulusConversionError,
    OperandError,
)

__all__ = [
    "constrain",
    "egcd",
    "invert",
    "add_mod",
    "sub_mod",
    "mul_mod",
    "div_mod",
    "pow_mod",
    "eq_mod",
    "ne_mod",
    "FixedInt",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "DTYPES",
    "ModicumError",
    "InvalidModulusError",
    "ModulusConversionError",
    "OperandError",
    "ExponentError",
]
