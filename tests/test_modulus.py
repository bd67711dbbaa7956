"""Tests for modulus validation and conversion."""

import pytest

from modicum.arith.fixed import I8, I16, U8, U64
from modicum.arith.modulus import cast, check_modulus
from modicum.errors import InvalidModulusError, ModicumError, ModulusConversionError


def test_cast_to_int():
    assert cast(7, 123) == 7
    assert cast(U8(7), -5) == 7


def test_cast_to_fixed_width():
    m = cast(U8(7), I8(0))
    assert type(m) is I8
    assert m == 7


def test_cast_does_not_fit():
    with pytest.raises(ModulusConversionError, match="I8"):
        cast(200, I8(0))
    with pytest.raises(ModulusConversionError):
        cast(U64(2**40), I16(0))


def test_conversion_error_is_overflow():
    with pytest.raises(OverflowError):
        cast(256, U8(0))


def test_zero_modulus():
    with pytest.raises(InvalidModulusError, match="positive"):
        check_modulus(0)


def test_negative_modulus():
    with pytest.raises(InvalidModulusError):
        cast(-7, 3)


def test_signed_modulus_type_rejected():
    with pytest.raises(InvalidModulusError, match="unsigned"):
        check_modulus(I8(7))


def test_non_integer_modulus_rejected():
    with pytest.raises(InvalidModulusError):
        check_modulus(7.0)
    with pytest.raises(InvalidModulusError):
        check_modulus(True)


def test_errors_share_base():
    for exc in (InvalidModulusError, ModulusConversionError):
        assert issubclass(exc, ModicumError)
