from modicum.arith.egcd import egcd
from modicum.arith.invert import invert
from modicum.arith.ops import (
    add_mod,
    constrain,
    div_mod,
    eq_mod,
    mul_mod,
    ne_mod,
    pow_mod,
    sub_mod,
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
]
