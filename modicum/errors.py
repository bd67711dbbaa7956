"""Precondition violations.

A non-invertible operand is an ordinary outcome and is reported as ``None``
by ``invert`` / ``div_mod``.  Everything here means the caller asked for a
computation that has no meaning, so it is raised and never caught inside the
library.
"""


class ModicumError(Exception):
    """Base class for precondition violations."""


class InvalidModulusError(ModicumError, ValueError):
    """Raised when the modulus is not a strictly positive unsigned integer."""


class ModulusConversionError(ModicumError, OverflowError):
    """Raised when the modulus does not fit in the operand type."""


class OperandError(ModicumError, TypeError):
    """Raised when an operand lacks a capability the operation needs."""


class ExponentError(ModicumError, ValueError):
    """Raised for a negative exponent in ``pow_mod``."""
