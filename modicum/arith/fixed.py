"""Fixed-width integer value types.

Python has a single unbounded ``int``; these classes give the operations
something narrower to be generic over.  Arithmetic wraps in two's
complement the way machine integers do, and ``try_from`` is the checked
conversion used when a modulus is cast into an operand type.

``//`` and ``%`` keep Python's floor convention so the types mix with
``int`` without surprises; the modular operations use truncating division
through ``modicum.arith.integer.trunc_divmod`` regardless.

Wrapping also applies inside the modular operations.  ``constrain`` adds
the modulus to a remainder, so a modulus above ``(MAX + 1) // 2`` can wrap even
when operand and modulus both fit; pick a type at least twice as wide as
the modulus (and as wide as its square for ``mul_mod``/``pow_mod``).
"""

from __future__ import annotations

import operator
from typing import Any, Dict, Optional, Tuple

from modicum.arith import ops
from modicum.arith.egcd import egcd as _egcd
from modicum.arith.invert import invert as _invert
from modicum.errors import OperandError


class FixedInt:
    """Base class; subclasses set ``BITS`` and ``SIGNED``."""

    BITS = 0
    SIGNED = True

    __slots__ = ("_v",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "BITS" not in cls.__dict__:
            return
        if cls.BITS <= 0:
            raise ValueError("BITS must be positive")
        cls._MASK = (1 << cls.BITS) - 1
        if cls.SIGNED:
            cls.MIN = -(1 << (cls.BITS - 1))
            cls.MAX = (1 << (cls.BITS - 1)) - 1
        else:
            cls.MIN = 0
            cls.MAX = cls._MASK

    def __init__(self, value: Any = 0) -> None:
        cls = type(self)
        if not hasattr(cls, "_MASK"):
            raise TypeError(f"{cls.__name__} has no width")
        v = operator.index(value) & cls._MASK
        if cls.SIGNED and v > cls.MAX:
            v -= 1 << cls.BITS
        self._v = v

    @classmethod
    def try_from(cls, value: Any) -> "FixedInt":
        """Checked conversion; raises ``OverflowError`` if *value* is out of range."""
        v = operator.index(value)
        if not cls.MIN <= v <= cls.MAX:
            raise OverflowError(f"{v} out of range for {cls.__name__} [{cls.MIN}, {cls.MAX}]")
        return cls(v)

    @property
    def value(self) -> int:
        return self._v

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------

    def _c(self, other: Any) -> Optional[int]:  # raw int of a compatible operand
        if isinstance(other, type(self)):
            return other._v
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else type(self)(self._v + o)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else type(self)(self._v - o)

    def __rsub__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else type(self)(o - self._v)

    def __mul__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else type(self)(self._v * o)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __divmod__(self, other):
        o = self._c(other)
        if o is None:
            return NotImplemented
        q, r = divmod(self._v, o)
        return type(self)(q), type(self)(r)

    def __rdivmod__(self, other):
        o = self._c(other)
        if o is None:
            return NotImplemented
        q, r = divmod(o, self._v)
        return type(self)(q), type(self)(r)

    def __floordiv__(self, other):
        res = self.__divmod__(other)
        return res if res is NotImplemented else res[0]

    def __rfloordiv__(self, other):
        res = self.__rdivmod__(other)
        return res if res is NotImplemented else res[0]

    def __mod__(self, other):
        res = self.__divmod__(other)
        return res if res is NotImplemented else res[1]

    def __rmod__(self, other):
        res = self.__rdivmod__(other)
        return res if res is NotImplemented else res[1]

    def __neg__(self):
        return type(self)(-self._v)

    # ------------------------------------------------------------------
    # comparison / conversion
    # ------------------------------------------------------------------

    def __eq__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else self._v == o

    def __ne__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else self._v != o

    def __lt__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else self._v < o

    def __le__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else self._v <= o

    def __gt__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else self._v > o

    def __ge__(self, other):
        o = self._c(other)
        return NotImplemented if o is None else self._v >= o

    def __hash__(self):
        return hash(self._v)

    def __bool__(self):
        return self._v != 0

    def __int__(self):
        return self._v

    def __index__(self):
        return self._v

    def __repr__(self):
        return f"{type(self).__name__}({self._v})"

    def __str__(self):
        return str(self._v)

    # ------------------------------------------------------------------
    # modular operations, method style
    # ------------------------------------------------------------------

    def constrain(self, modulus: Any) -> "FixedInt":
        return ops.constrain(self, modulus)

    def add_mod(self, rhs: Any, modulus: Any) -> "FixedInt":
        return ops.add_mod(self, rhs, modulus)

    def sub_mod(self, rhs: Any, modulus: Any) -> "FixedInt":
        return ops.sub_mod(self, rhs, modulus)

    def mul_mod(self, rhs: Any, modulus: Any) -> "FixedInt":
        return ops.mul_mod(self, rhs, modulus)

    def div_mod(self, rhs: Any, modulus: Any) -> Optional["FixedInt"]:
        return ops.div_mod(self, rhs, modulus)

    def pow_mod(self, exponent: Any, modulus: Any) -> "FixedInt":
        return ops.pow_mod(self, exponent, modulus)

    def eq_mod(self, rhs: Any, modulus: Any) -> bool:
        return ops.eq_mod(self, rhs, modulus)

    def ne_mod(self, rhs: Any, modulus: Any) -> bool:
        return ops.ne_mod(self, rhs, modulus)

    def invert(self, modulus: Any) -> Optional["FixedInt"]:
        return _invert(self, modulus)

    def egcd(self, other: Any) -> Tuple["FixedInt", "FixedInt", "FixedInt"]:
        return _egcd(self, type(self)(other) if isinstance(other, int) else other)


class I8(FixedInt):
    __slots__ = ()
    BITS = 8


class I16(FixedInt):
    __slots__ = ()
    BITS = 16


class I32(FixedInt):
    __slots__ = ()
    BITS = 32


class I64(FixedInt):
    __slots__ = ()
    BITS = 64


class U8(FixedInt):
    __slots__ = ()
    BITS = 8
    SIGNED = False


class U16(FixedInt):
    __slots__ = ()
    BITS = 16
    SIGNED = False


class U32(FixedInt):
    __slots__ = ()
    BITS = 32
    SIGNED = False


class U64(FixedInt):
    __slots__ = ()
    BITS = 64
    SIGNED = False


DTYPES: Dict[str, type] = {
    "int": int,
    "i8": I8,
    "i16": I16,
    "i32": I32,
    "i64": I64,
    "u8": U8,
    "u16": U16,
    "u32": U32,
    "u64": U64,
}


def resolve_dtype(name: str) -> type:
    """Look up an operand type by name."""
    try:
        return DTYPES[name.lower()]
    except KeyError:
        raise OperandError(f"unknown dtype {name!r}; expected one of {sorted(DTYPES)}") from None
