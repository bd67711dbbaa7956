"""Tests for modular inversion."""

import math

import pytest

from modicum.arith.fixed import I8, I32, U8, U32
from modicum.arith.invert import invert
from modicum.arith.reduction import constrain
from modicum.errors import InvalidModulusError, ModulusConversionError, OperandError


def test_invert_mod_11():
    modulus = 11
    assert invert(3, modulus) == 4
    assert invert(5, modulus) == 9
    assert invert(7, modulus) == 8
    assert invert(9, modulus) == 5
    assert invert(10, modulus) == 10


def test_invert_multiple_of_modulus():
    assert invert(11, 11) is None
    assert invert(0, 11) is None
    assert invert(-11, 11) is None


def test_invert_negative_canonicalised_first():
    modulus = 11
    assert invert(-3, modulus) == invert(8, modulus) == 7
    assert invert(-5, modulus) == 2
    assert invert(-7, modulus) == 3
    assert invert(-9, modulus) == 6
    assert invert(-10, modulus) == 1


def test_invert_shared_factor():
    assert invert(4, 10) is None
    assert invert(6, 9) is None


def test_invert_modulus_one():
    # everything is congruent to 0, and gcd(0, 1) == 1
    assert invert(5, 1) == 0


def test_invert_property():
    for m in (2, 7, 10, 12, 97, 100):
        for a in range(-2 * m, 2 * m):
            inv = invert(a, m)
            if math.gcd(constrain(a, m), m) == 1:
                assert inv is not None
                assert 0 <= inv < m
                assert constrain(a * inv, m) == constrain(1, m)
            else:
                assert inv is None


def test_invert_fixed_width():
    inv = invert(I8(-3), U8(11))
    assert inv == 7
    assert type(inv) is I8


def test_invert_large_modulus():
    p = 2**127 - 1
    a = 123456789
    assert (a * invert(a, p)) % p == 1


def test_invert_unsigned_operand_rejected():
    with pytest.raises(OperandError, match="signed"):
        invert(U32(3), 11)


def test_invert_modulus_too_wide():
    with pytest.raises(ModulusConversionError):
        invert(I8(3), 1000)


def test_invert_zero_modulus():
    with pytest.raises(InvalidModulusError):
        invert(I32(3), 0)
