# Integer types a Ratio can be built on
import functools
import logging
import math
import typing

import numpy as np

module_logger = logging.getLogger(__name__)


__all__ = [
    "IntegerCapability",
    "BigInteger",
    "FixedWidthInteger",
    "BIG_INTEGER",
    "get_integer"
]


def _trunc_divmod(a: int, b: int) -> typing.Tuple[int, int]:
    """
    Division rounding towards zero, remainder taking the sign of `a`.
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b*q


class IntegerCapability:
    """
    The operations Ratio needs from its numerator and denominator type.

    Subclasses decide how values are stored and what happens when a
    result does not fit. Every method takes and returns values of the
    stored type, except `to_int`, which always gives a Python int.
    """
    name = None
    bounded = False
    signed = True
    min_value = None
    max_value = None

    def coerce(self, value):
        raise NotImplementedError()

    def to_int(self, value) -> int:
        return int(value)

    def fits(self, value: int) -> bool:
        """
        Whether a Python int can be stored without overflow.
        """
        if not self.bounded:
            return True
        return self.min_value <= value <= self.max_value

    def zero(self):
        return self.coerce(0)

    def one(self):
        return self.coerce(1)

    def is_integer(self, value) -> bool:
        return (isinstance(value, (int, np.integer)) and
                not isinstance(value, bool))

    def add(self, a, b):
        raise NotImplementedError()

    def sub(self, a, b):
        raise NotImplementedError()

    def mul(self, a, b):
        raise NotImplementedError()

    def div(self, a, b):
        raise NotImplementedError()

    def rem(self, a, b):
        raise NotImplementedError()

    def div_mod_floor(self, a, b):
        raise NotImplementedError()

    def neg(self, a):
        raise NotImplementedError()

    def abs(self, a):
        raise NotImplementedError()

    def gcd(self, a, b):
        raise NotImplementedError()

    def pow(self, a, exponent: int):
        """
        Raise `a` to a non-negative power by repeated squaring, with the
        same overflow behaviour as `mul`.
        """
        if exponent < 0:
            raise ValueError(f"negative exponent {exponent}")
        result = self.one()
        base = a
        while exponent > 0:
            if exponent & 1:
                result = self.mul(result, base)
            exponent >>= 1
            if exponent > 0:
                base = self.mul(base, base)
        return result

    def checked_add(self, a, b):
        raise NotImplementedError()

    def checked_sub(self, a, b):
        raise NotImplementedError()

    def checked_mul(self, a, b):
        raise NotImplementedError()

    def checked_div(self, a, b):
        raise NotImplementedError()

    def checked_rem(self, a, b):
        raise NotImplementedError()

    def checked_neg(self, a):
        raise NotImplementedError()

    def checked_gcd(self, a, b):
        raise NotImplementedError()

    def checked_pow(self, a, exponent: int):
        result = self.one()
        base = a
        while exponent > 0:
            if exponent & 1:
                result = self.checked_mul(result, base)
                if result is None:
                    return None
            exponent >>= 1
            if exponent > 0:
                base = self.checked_mul(base, base)
                if base is None:
                    return None
        return result

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class BigInteger(IntegerCapability):
    """
    Arbitrary precision integers, stored as Python ints. Nothing overflows;
    the checked operations only fail on a zero divisor.
    """
    name = "bigint"

    def coerce(self, value) -> int:
        if not self.is_integer(value):
            raise TypeError(
                f"Expected an integer, got {value!r} of type {type(value)}")
        return int(value)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        if b == 0:
            raise ZeroDivisionError("attempt to divide by zero")
        return _trunc_divmod(a, b)[0]

    def rem(self, a, b):
        if b == 0:
            raise ZeroDivisionError("attempt to calculate the remainder "
                                    "with a divisor of zero")
        return _trunc_divmod(a, b)[1]

    def div_mod_floor(self, a, b):
        return divmod(a, b)

    def neg(self, a):
        return -a

    def abs(self, a):
        return abs(a)

    def gcd(self, a, b):
        return math.gcd(a, b)

    def checked_add(self, a, b):
        return a + b

    def checked_sub(self, a, b):
        return a - b

    def checked_mul(self, a, b):
        return a * b

    def checked_div(self, a, b):
        if b == 0:
            return None
        return _trunc_divmod(a, b)[0]

    def checked_rem(self, a, b):
        if b == 0:
            return None
        return _trunc_divmod(a, b)[1]

    def checked_neg(self, a):
        return -a

    def checked_gcd(self, a, b):
        return math.gcd(a, b)


class FixedWidthInteger(IntegerCapability):
    """
    Machine integers of a numpy integer dtype.

    Results are computed exactly and then brought back into the dtype's
    range according to `overflow`: "wrap" keeps the low bits (two's
    complement, as numpy arrays do), "raise" raises OverflowError.
    Checked operations return None instead of doing either.

    Args:
        dtype: any numpy integer dtype, signed or unsigned
        overflow (str): "wrap" or "raise"
    """
    overflow_policies = ("wrap", "raise")

    def __init__(self, dtype: typing.Any, overflow: str = "wrap"):
        dtype = np.dtype(dtype)
        if dtype.kind not in ("i", "u"):
            raise TypeError(f"{dtype} is not an integer dtype")
        if overflow not in self.overflow_policies:
            raise ValueError(
                (f"Unknown overflow policy {overflow!r}, "
                 f"expected one of {self.overflow_policies}"))
        self.dtype = dtype
        self.overflow = overflow
        self.name = dtype.name
        self.bounded = True
        self.signed = dtype.kind == "i"
        self.bits = dtype.itemsize * 8
        info = np.iinfo(dtype)
        self.min_value = int(info.min)
        self.max_value = int(info.max)
        self._type = dtype.type
        self._mask = (1 << self.bits) - 1

    def __repr__(self):
        return (f"{type(self).__name__}({self.name!r}, "
                f"overflow={self.overflow!r})")

    def _wrap(self, value: int):
        if self.fits(value):
            return self._type(value)
        if self.overflow == "raise":
            raise OverflowError(
                f"{value} does not fit in {self.name}")
        value &= self._mask
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return self._type(value)

    def _checked(self, value: int):
        if self.fits(value):
            return self._type(value)
        return None

    def coerce(self, value):
        if not self.is_integer(value):
            raise TypeError(
                f"Expected an integer, got {value!r} of type {type(value)}")
        value = int(value)
        if not self.fits(value):
            raise OverflowError(
                (f"{value} is out of range for {self.name} "
                 f"[{self.min_value}, {self.max_value}]"))
        return self._type(value)

    def add(self, a, b):
        return self._wrap(int(a) + int(b))

    def sub(self, a, b):
        return self._wrap(int(a) - int(b))

    def mul(self, a, b):
        return self._wrap(int(a) * int(b))

    def div(self, a, b):
        if b == 0:
            raise ZeroDivisionError("attempt to divide by zero")
        return self._wrap(_trunc_divmod(int(a), int(b))[0])

    def rem(self, a, b):
        if b == 0:
            raise ZeroDivisionError("attempt to calculate the remainder "
                                    "with a divisor of zero")
        return self._wrap(_trunc_divmod(int(a), int(b))[1])

    def div_mod_floor(self, a, b):
        q, r = divmod(int(a), int(b))
        return self._wrap(q), self._type(r)

    def neg(self, a):
        return self._wrap(-int(a))

    def abs(self, a):
        return self._wrap(abs(int(a)))

    def gcd(self, a, b):
        return self._wrap(math.gcd(int(a), int(b)))

    def checked_add(self, a, b):
        return self._checked(int(a) + int(b))

    def checked_sub(self, a, b):
        return self._checked(int(a) - int(b))

    def checked_mul(self, a, b):
        return self._checked(int(a) * int(b))

    def checked_div(self, a, b):
        if b == 0:
            return None
        return self._checked(_trunc_divmod(int(a), int(b))[0])

    def checked_rem(self, a, b):
        if b == 0:
            return None
        q, r = _trunc_divmod(int(a), int(b))
        # MIN % -1 overflows the quotient
        if not self.fits(q):
            return None
        return self._type(r)

    def checked_neg(self, a):
        return self._checked(-int(a))

    def checked_gcd(self, a, b):
        return self._checked(math.gcd(int(a), int(b)))


BIG_INTEGER = BigInteger()

# Supported names, as numpy dtypes. None means arbitrary precision.
_REGISTRY = {
    "int8": np.int8,
    "i8": np.int8,
    "int16": np.int16,
    "i16": np.int16,
    "int32": np.int32,
    "i32": np.int32,
    "int64": np.int64,
    "i64": np.int64,
    "isize": np.intp,

    "uint8": np.uint8,
    "u8": np.uint8,
    "uint16": np.uint16,
    "u16": np.uint16,
    "uint32": np.uint32,
    "u32": np.uint32,
    "uint64": np.uint64,
    "u64": np.uint64,
    "usize": np.uintp,

    "bigint": None,
    "big": None,
    "int": None,
}


@functools.lru_cache(maxsize=None)
def _get_integer(dtype_name: str, overflow: str) -> IntegerCapability:
    module_logger.debug(
        f"_get_integer: creating {dtype_name} with overflow={overflow}")
    return FixedWidthInteger(dtype_name, overflow=overflow)


def get_integer(name: str, overflow: str = "wrap") -> IntegerCapability:
    """
    Look up an integer capability by name. Repeated lookups return the same
    object, so Ratio types built on them compare as the same type.

    Args:
        name (str): e.g. "int8", "i32", "uint64", "bigint"
        overflow (str): overflow policy for fixed width types, ignored
            for "bigint"
    Returns:
        IntegerCapability
    """
    key = (name or "bigint").lower()
    if key not in _REGISTRY:
        raise NotImplementedError(
            (f"Integer type '{name}' not implemented. "
             f"Supported types {list(_REGISTRY.keys())}"))
    if overflow not in FixedWidthInteger.overflow_policies:
        raise ValueError(
            (f"Unknown overflow policy {overflow!r}, "
             f"expected one of {FixedWidthInteger.overflow_policies}"))
    dtype = _REGISTRY[key]
    if dtype is None:
        return BIG_INTEGER
    return _get_integer(np.dtype(dtype).name, overflow)
