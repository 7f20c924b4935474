import functools
import logging
import math
import numbers
import sys
import typing

import numpy as np

from . import floats, text, util
from .exceptions import ParseRatioError, RatioErrorKind
from .integer import IntegerCapability, BIG_INTEGER, get_integer

module_logger = logging.getLogger(__name__)


__all__ = [
    "Ratio",
    "ratio_type",
    "BigRational",
    "Rational",
    "Rational8",
    "Rational16",
    "Rational32",
    "Rational64",
    "RationalU8",
    "RationalU16",
    "RationalU32",
    "RationalU64"
]

_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


class _Unrepresentable(Exception):
    """A checked integer operation had no result."""
    pass


def _raise_zero_division(message: str):
    raise ZeroDivisionError(message)


def _raise_unrepresentable(message: str):
    raise _Unrepresentable(message)


def _must(checked_op: typing.Callable) -> typing.Callable:
    @functools.wraps(checked_op)
    def op(*args):
        result = checked_op(*args)
        if result is None:
            raise _Unrepresentable(checked_op.__name__)
        return result
    return op


class _Operations(typing.NamedTuple):
    add: typing.Callable
    sub: typing.Callable
    mul: typing.Callable
    div: typing.Callable
    rem: typing.Callable
    neg: typing.Callable
    gcd: typing.Callable
    fail: typing.Callable


@functools.lru_cache(maxsize=None)
def _operations(integer: IntegerCapability, checked: bool) -> _Operations:
    """
    The integer operations one family of Ratio methods runs on. Unchecked
    operations keep the capability's own overflow behaviour; checked ones
    raise _Unrepresentable, which the public checked methods turn into None.
    """
    if not checked:
        return _Operations(
            integer.add, integer.sub, integer.mul, integer.div,
            integer.rem, integer.neg, integer.gcd, _raise_zero_division)
    return _Operations(
        _must(integer.checked_add), _must(integer.checked_sub),
        _must(integer.checked_mul), _must(integer.checked_div),
        _must(integer.checked_rem), _must(integer.checked_neg),
        _must(integer.checked_gcd), _raise_unrepresentable)


def _reduce_parts(ops: _Operations, numerator, denominator):
    if denominator == 0:
        ops.fail("denominator == 0")
    g = ops.gcd(numerator, denominator)
    numerator = ops.div(numerator, g)
    denominator = ops.div(denominator, g)
    if denominator < 0:
        numerator = ops.neg(numerator)
        denominator = ops.neg(denominator)
    return numerator, denominator


# The parts functions below take a/b and c/d and return an unreduced pair.

def _add_parts(ops: _Operations, a, b, c, d):
    if b == d:
        return ops.add(a, c), b
    return ops.add(ops.mul(a, d), ops.mul(b, c)), ops.mul(b, d)


def _sub_parts(ops: _Operations, a, b, c, d):
    if b == d:
        return ops.sub(a, c), b
    return ops.sub(ops.mul(a, d), ops.mul(b, c)), ops.mul(b, d)


def _mul_parts(ops: _Operations, a, b, c, d):
    # cancel across before multiplying, so fewer products overflow
    gcd_ad = ops.gcd(a, d)
    gcd_bc = ops.gcd(b, c)
    a = ops.div(a, gcd_ad)
    d = ops.div(d, gcd_ad)
    b = ops.div(b, gcd_bc)
    c = ops.div(c, gcd_bc)
    return ops.mul(a, c), ops.mul(b, d)


def _div_parts(ops: _Operations, a, b, c, d):
    if c == 0:
        ops.fail("division by zero")
    gcd_ac = ops.gcd(a, c)
    gcd_bd = ops.gcd(b, d)
    a = ops.div(a, gcd_ac)
    c = ops.div(c, gcd_ac)
    b = ops.div(b, gcd_bd)
    d = ops.div(d, gcd_bd)
    return ops.mul(a, d), ops.mul(b, c)


def _rem_parts(ops: _Operations, a, b, c, d):
    if c == 0:
        ops.fail("remainder with a divisor of zero")
    if b == d:
        return ops.rem(a, c), b
    return ops.rem(ops.mul(a, d), ops.mul(b, c)), ops.mul(b, d)


def _compare(integer: IntegerCapability, a, b, c, d) -> int:
    """
    Compare a/b with c/d without forming a*d or c*b, so nothing overflows.

    The integer parts are compared first; on a tie the fractional parts
    are compared through their reciprocals, which reverses the order.
    Denominators may be negative, as for values made by Ratio.new_raw.
    """
    while True:
        if b == d:
            result = util.cmp(a, c)
            return -result if b < 0 else result
        if a == c:
            # zero over any denominator is zero
            if a == 0:
                return 0
            result = util.cmp(b, d)
            return result if a < 0 else -result

        a_int, a_rem = integer.div_mod_floor(a, b)
        c_int, c_rem = integer.div_mod_floor(c, d)
        if a_int != c_int:
            return util.cmp(a_int, c_int)
        if a_rem == 0 and c_rem == 0:
            return 0
        if a_rem == 0:
            return -1
        if c_rem == 0:
            return 1
        a, b, c, d = d, c_rem, b, a_rem


class Ratio:
    """
    An exact fraction numerator/denominator.

    Every public constructor and operation leaves the value in lowest
    terms with a positive denominator; the only way to get anything else
    is `new_raw`. Values are treated as immutable: operators return new
    instances.

    The integer type the two parts are stored in is given by the class
    attribute `integer`. `Ratio` itself uses arbitrary precision ints; use
    `ratio_type` (or the aliases Rational8 ... Rational64) for machine
    integers.

    Args:
        numerator (int)
        denominator (int): must not be zero
    """
    __slots__ = ("_numerator", "_denominator")

    integer: IntegerCapability = BIG_INTEGER
    # numpy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, numerator: util.integer_type,
                 denominator: util.integer_type = 1):
        integer = self.integer
        numerator = integer.coerce(numerator)
        denominator = integer.coerce(denominator)
        if denominator == 0:
            raise ZeroDivisionError("denominator == 0")
        self._numerator = numerator
        self._denominator = denominator
        self.reduce()

    # construction

    @classmethod
    def _make(cls, numerator, denominator) -> "Ratio":
        ratio = object.__new__(cls)
        ratio._numerator = numerator
        ratio._denominator = denominator
        return ratio

    @classmethod
    def _finish(cls, ops: _Operations, numerator, denominator) -> "Ratio":
        return cls._make(*_reduce_parts(ops, numerator, denominator))

    @classmethod
    def new_raw(cls, numerator: util.integer_type,
                denominator: util.integer_type) -> "Ratio":
        """
        Build a Ratio from parts as given: no check for a zero denominator
        and no reduction. Only for parts already known to be in lowest
        terms with a positive denominator; comparisons still work on
        anything else, arithmetic results do not.
        """
        integer = cls.integer
        return cls._make(integer.coerce(numerator),
                         integer.coerce(denominator))

    @classmethod
    def checked_new(cls, numerator: util.integer_type,
                    denominator: util.integer_type
                    ) -> typing.Optional["Ratio"]:
        """
        Like the constructor, but returns None for a zero denominator or
        when the value has no reduced form in the integer type (e.g. -128/-1
        for int8).
        """
        integer = cls.integer
        numerator = integer.coerce(numerator)
        denominator = integer.coerce(denominator)
        try:
            return cls._finish(_operations(integer, True),
                               numerator, denominator)
        except _Unrepresentable:
            return None

    @classmethod
    def from_integer(cls, value: util.integer_type) -> "Ratio":
        integer = cls.integer
        return cls._make(integer.coerce(value), integer.one())

    @classmethod
    def from_pair(cls, pair: typing.Tuple[typing.Any, typing.Any]
                  ) -> "Ratio":
        """
        Rebuild a value from a (numerator, denominator) pair, e.g. one
        produced by `to_pair` and sent through a serializer. The pair is
        validated and reduced, never trusted.
        """
        numerator, denominator = pair
        return cls(numerator, denominator)

    @classmethod
    def zero(cls) -> "Ratio":
        return cls._make(cls.integer.zero(), cls.integer.one())

    @classmethod
    def one(cls) -> "Ratio":
        return cls._make(cls.integer.one(), cls.integer.one())

    @classmethod
    def from_float(cls, value: util.float_type) -> typing.Optional["Ratio"]:
        """
        The exact value of a binary float as a Ratio: 0.5 gives 1/2, and
        0.1 gives 3602879701896397/36028797018963968, not 1/10.

        Args:
            value (float/np.floating)
        Returns:
            Ratio, or None if value is infinite or not a number, or if the
                exact fraction does not fit in the integer type.
        """
        if not math.isfinite(value):
            return None
        mantissa, exponent, sign = floats.integer_decode(value)
        if exponent < 0:
            numerator, denominator = sign*mantissa, 1 << -exponent
        else:
            numerator, denominator = sign*(mantissa << exponent), 1
        integer = cls.integer
        if not (integer.fits(numerator) and integer.fits(denominator)):
            module_logger.debug(
                (f"from_float: {value} needs {numerator}/{denominator}, "
                 f"which does not fit in {integer.name}"))
            return None
        # mantissa is odd or zero, so the pair is already in lowest terms
        return cls._make(integer.coerce(numerator),
                         integer.coerce(denominator))

    @classmethod
    def approximate_float(cls, value: util.float_type,
                          max_error: float = 10e-20,
                          max_iterations: int = 30
                          ) -> typing.Optional["Ratio"]:
        """
        Approximate a float with the continued fraction expansion, stopping
        before numerator or denominator would overflow the integer type.

        Args:
            value (float/np.floating)
            max_error (float): stop once this close to value
            max_iterations (int): maximum number of expansion terms
        Returns:
            Ratio, or None if value is not a number or is out of range.
        """
        integer = cls.integer
        if not integer.bounded:
            raise TypeError(
                (f"approximate_float needs a bounded integer type, "
                 f"not {integer.name}; use from_float"))
        negative = False
        if integer.signed:
            negative = math.copysign(1.0, value) < 0
            value = abs(value)
        pair = floats.approximate_unsigned(
            value, integer.max_value, max_error, max_iterations)
        if pair is None:
            return None
        numerator, denominator = pair
        ratio = cls(numerator, denominator)
        return -ratio if negative else ratio

    @classmethod
    def from_str(cls, rational_str: typing.Any,
                 radix: int = 10,
                 delimiter: str = "/") -> "Ratio":
        """
        Return a new instance from text "numer/denom" or "numer".
        If `rational_str` is already an instance of this class, return it.

        Args:
            rational_str (str/Ratio)
            radix (int): base of both integers, 2 to 36
            delimiter (str)
        Returns:
            Ratio
        """
        if isinstance(rational_str, cls):
            return rational_str
        numerator, denominator = text.parse_ratio_pair(
            rational_str, radix=radix, delimiter=delimiter)
        integer = cls.integer
        if not (integer.fits(numerator) and integer.fits(denominator)):
            raise ParseRatioError(RatioErrorKind.PARSE_ERROR, rational_str)
        return cls(numerator, denominator)

    # accessors

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def to_pair(self) -> typing.Tuple[typing.Any, typing.Any]:
        return self._numerator, self._denominator

    def reduce(self) -> None:
        """
        Put self into lowest terms with a positive denominator, in place.
        Only values made by `new_raw` can need this.
        """
        self._numerator, self._denominator = _reduce_parts(
            _operations(self.integer, False),
            self._numerator, self._denominator)

    def reduced(self) -> "Ratio":
        return self._finish(_operations(self.integer, False),
                            self._numerator, self._denominator)

    def is_integer(self) -> bool:
        return bool(self._denominator == 1)

    def is_zero(self) -> bool:
        return bool(self._numerator == 0)

    def is_one(self) -> bool:
        return bool(self._numerator == self._denominator)

    def is_positive(self) -> bool:
        return bool((self._numerator > 0 and self._denominator > 0) or
                    (self._numerator < 0 and self._denominator < 0))

    def is_negative(self) -> bool:
        return bool((self._numerator < 0 and self._denominator > 0) or
                    (self._numerator > 0 and self._denominator < 0))

    def signum(self) -> "Ratio":
        if self.is_positive():
            return self.one()
        if self.is_zero():
            return self.zero()
        return -self.one()

    # arithmetic

    def _operand(self, other) -> typing.Optional[typing.Tuple]:
        if isinstance(other, Ratio):
            if other.integer is self.integer:
                return other._numerator, other._denominator
            return None
        integer = self.integer
        if integer.is_integer(other):
            return integer.coerce(other), integer.one()
        return None

    def _apply(self, parts: typing.Callable, other, reflected: bool = False):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        ops = _operations(self.integer, False)
        if reflected:
            result = parts(ops, *operand, self._numerator, self._denominator)
        else:
            result = parts(ops, self._numerator, self._denominator, *operand)
        return self._finish(ops, *result)

    def _apply_checked(self, parts: typing.Callable, other
                       ) -> typing.Optional["Ratio"]:
        operand = self._operand(other)
        if operand is None:
            raise TypeError(
                (f"unsupported operand for {type(self).__name__}: "
                 f"{other!r} of type {type(other)}"))
        ops = _operations(self.integer, True)
        try:
            result = parts(ops, self._numerator, self._denominator, *operand)
            return self._finish(ops, *result)
        except _Unrepresentable:
            return None

    def __add__(self, other):
        return self._apply(_add_parts, other)

    def __radd__(self, other):
        return self._apply(_add_parts, other, reflected=True)

    def __sub__(self, other):
        return self._apply(_sub_parts, other)

    def __rsub__(self, other):
        return self._apply(_sub_parts, other, reflected=True)

    def __mul__(self, other):
        return self._apply(_mul_parts, other)

    def __rmul__(self, other):
        return self._apply(_mul_parts, other, reflected=True)

    def __truediv__(self, other):
        return self._apply(_div_parts, other)

    def __rtruediv__(self, other):
        return self._apply(_div_parts, other, reflected=True)

    def __mod__(self, other):
        """
        Remainder of truncating division: the result has the sign of self,
        as in C, not of other as for Python ints.
        """
        return self._apply(_rem_parts, other)

    def __rmod__(self, other):
        return self._apply(_rem_parts, other, reflected=True)

    def _floor_divmod(self, other, reflected: bool = False):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        a, b = self, self._make(*operand)
        if reflected:
            a, b = b, a
        quotient = (a / b).floor()
        return quotient, a - quotient * b

    def __floordiv__(self, other):
        """
        Floor of self / other as a Python int, like int // int.
        """
        result = self._floor_divmod(other)
        if result is NotImplemented:
            return result
        return int(result[0]._numerator)

    def __rfloordiv__(self, other):
        result = self._floor_divmod(other, reflected=True)
        if result is NotImplemented:
            return result
        return int(result[0]._numerator)

    def __divmod__(self, other):
        """
        (self // other, self - (self // other) * other). The remainder here
        takes the sign of other, unlike `%`.
        """
        result = self._floor_divmod(other)
        if result is NotImplemented:
            return result
        quotient, remainder = result
        return int(quotient._numerator), remainder

    def __rdivmod__(self, other):
        result = self._floor_divmod(other, reflected=True)
        if result is NotImplemented:
            return result
        quotient, remainder = result
        return int(quotient._numerator), remainder

    def checked_add(self, other) -> typing.Optional["Ratio"]:
        return self._apply_checked(_add_parts, other)

    def checked_sub(self, other) -> typing.Optional["Ratio"]:
        return self._apply_checked(_sub_parts, other)

    def checked_mul(self, other) -> typing.Optional["Ratio"]:
        return self._apply_checked(_mul_parts, other)

    def checked_div(self, other) -> typing.Optional["Ratio"]:
        return self._apply_checked(_div_parts, other)

    def checked_rem(self, other) -> typing.Optional["Ratio"]:
        return self._apply_checked(_rem_parts, other)

    def __neg__(self) -> "Ratio":
        return self._make(self.integer.neg(self._numerator),
                          self._denominator)

    def __pos__(self) -> "Ratio":
        return self

    def abs(self) -> "Ratio":
        if self.is_negative():
            return -self
        return self

    def __abs__(self) -> "Ratio":
        return self.abs()

    def abs_sub(self, other) -> "Ratio":
        """
        self - other when self is the larger, otherwise zero.
        """
        if self <= other:
            return self.zero()
        return self - other

    def _recip_with(self, ops: _Operations) -> "Ratio":
        if self._numerator == 0:
            ops.fail("numerator == 0")
        if self._numerator > 0:
            return self._make(self._denominator, self._numerator)
        return self._make(ops.neg(self._denominator),
                          ops.neg(self._numerator))

    def recip(self) -> "Ratio":
        """
        1/self. Raises ZeroDivisionError if self is zero.
        """
        return self._recip_with(_operations(self.integer, False))

    def checked_recip(self) -> typing.Optional["Ratio"]:
        try:
            return self._recip_with(_operations(self.integer, True))
        except _Unrepresentable:
            return None

    def _pow_with(self, ops: _Operations, exponent: int,
                  power: typing.Callable) -> "Ratio":
        if exponent == 0:
            return self.one()
        base = self
        if exponent < 0:
            base = self._recip_with(ops)
            exponent = -exponent
        numerator = power(base._numerator, exponent)
        denominator = power(base._denominator, exponent)
        if numerator is None or denominator is None:
            ops.fail("overflow")
        return self._finish(ops, numerator, denominator)

    def pow(self, exponent: int) -> "Ratio":
        """
        self raised to an integer power. Negative powers go through the
        reciprocal, so zero to a negative power raises ZeroDivisionError.
        """
        exponent = int(exponent)
        return self._pow_with(_operations(self.integer, False), exponent,
                              self.integer.pow)

    def checked_pow(self, exponent: int) -> typing.Optional["Ratio"]:
        exponent = int(exponent)
        try:
            return self._pow_with(_operations(self.integer, True), exponent,
                                  self.integer.checked_pow)
        except _Unrepresentable:
            return None

    def __pow__(self, exponent):
        if not BIG_INTEGER.is_integer(exponent):
            return NotImplemented
        return self.pow(exponent)

    # comparison

    def _cmp(self, other) -> typing.Optional[int]:
        """
        -1, 0 or 1; None when other is a NaN, NotImplemented when other
        is not a number we compare with.
        """
        if isinstance(other, Ratio):
            if other.integer is self.integer:
                return _compare(self.integer,
                                self._numerator, self._denominator,
                                other._numerator, other._denominator)
            return _compare(BIG_INTEGER,
                            *self._int_pair(), *other._int_pair())
        if BIG_INTEGER.is_integer(other):
            return _compare(BIG_INTEGER, *self._int_pair(), int(other), 1)
        if isinstance(other, (float, np.floating)):
            if math.isnan(other):
                return None
            if math.isinf(other):
                return -1 if other > 0 else 1
            mantissa, exponent, sign = floats.integer_decode(other)
            if exponent < 0:
                c, d = sign*mantissa, 1 << -exponent
            else:
                c, d = sign*(mantissa << exponent), 1
            return _compare(BIG_INTEGER, *self._int_pair(), c, d)
        return NotImplemented

    def cmp(self, other) -> int:
        """
        -1, 0 or 1 as self is less than, equal to or greater than other.
        """
        result = self._cmp(other)
        if result is NotImplemented or result is None:
            raise TypeError(
                f"Cannot compare {self!r} with {other!r}")
        return result

    def __eq__(self, other):
        result = self._cmp(other)
        if result is NotImplemented:
            return result
        return result == 0

    def __lt__(self, other):
        result = self._cmp(other)
        if result is NotImplemented:
            return result
        return result is not None and result < 0

    def __le__(self, other):
        result = self._cmp(other)
        if result is NotImplemented:
            return result
        return result is not None and result <= 0

    def __gt__(self, other):
        result = self._cmp(other)
        if result is NotImplemented:
            return result
        return result is not None and result > 0

    def __ge__(self, other):
        result = self._cmp(other)
        if result is NotImplemented:
            return result
        return result is not None and result >= 0

    def __hash__(self):
        # same scheme as int, float and fractions.Fraction, so equal
        # numbers hash equal
        numerator, denominator = self._int_pair()
        g = math.gcd(numerator, denominator)
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        dinv = pow(denominator, _HASH_MODULUS - 2, _HASH_MODULUS)
        if not dinv:
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(numerator)) * dinv)
        result = hash_ if numerator >= 0 else -hash_
        return -2 if result == -1 else result

    def __bool__(self):
        return bool(self._numerator != 0)

    # rounding

    def trunc(self) -> "Ratio":
        """Rounds towards zero."""
        return self._make(self.integer.div(self._numerator,
                                           self._denominator),
                          self.integer.one())

    def floor(self) -> "Ratio":
        """Rounds towards minus infinity."""
        quotient, _ = self.integer.div_mod_floor(self._numerator,
                                                 self._denominator)
        return self._make(quotient, self.integer.one())

    def ceil(self) -> "Ratio":
        """Rounds towards plus infinity."""
        integer = self.integer
        quotient, remainder = integer.div_mod_floor(self._numerator,
                                                    self._denominator)
        if remainder != 0:
            quotient = integer.add(quotient, integer.one())
        return self._make(quotient, integer.one())

    def round(self) -> "Ratio":
        """
        Rounds to the nearest integer. Halfway cases round away from zero:
        1/2 -> 1, -1/2 -> -1, 5/2 -> 3.
        """
        integer = self.integer
        one = integer.one()
        two = integer.add(one, one)

        fractional = self.fract().abs()
        numerator, denominator = fractional.to_pair()
        # |fract| >= 1/2 without forming 2*numerator
        half = integer.div(denominator, two)
        if integer.rem(denominator, two) == 0:
            half_or_larger = numerator >= half
        else:
            half_or_larger = numerator >= integer.add(half, one)

        truncated = self.trunc()
        if not half_or_larger:
            return truncated
        if self.is_negative():
            return truncated - one
        return truncated + one

    def fract(self) -> "Ratio":
        """
        The fractional part, signed like self: self == trunc() + fract().
        """
        return self._make(self.integer.rem(self._numerator,
                                           self._denominator),
                          self._denominator)

    def to_integer(self):
        """Converts to the integer type, rounding towards zero."""
        return self.integer.div(self._numerator, self._denominator)

    def __trunc__(self) -> int:
        return int(self.trunc()._numerator)

    def __floor__(self) -> int:
        return int(self.floor()._numerator)

    def __ceil__(self) -> int:
        return int(self.ceil()._numerator)

    def __round__(self, ndigits: int = None):
        """
        round(x) gives an int, round(x, ndigits) a value of the same type,
        both rounding halfway cases away from zero like `round`.
        """
        if ndigits is None:
            return int(self.round()._numerator)
        shift = self.integer.coerce(10 ** abs(ndigits))
        if ndigits > 0:
            return (self * shift).round() / shift
        return (self / shift).round() * shift

    # conversion

    def _int_pair(self) -> typing.Tuple[int, int]:
        integer = self.integer
        return integer.to_int(self._numerator), \
            integer.to_int(self._denominator)

    def __int__(self) -> int:
        return int(self.to_integer())

    def to_float(self) -> float:
        """
        Nearest float to the value; +/-inf beyond the float range.
        """
        return floats.ratio_to_float(*self._int_pair())

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self):
        return text.format_ratio(self._numerator, self._denominator)

    def __repr__(self):
        return (f"{type(self).__name__}({self._numerator}, "
                f"{self._denominator})")

    def __format__(self, format_spec: str):
        return format(str(self), format_spec)


numbers.Rational.register(Ratio)


_ratio_types = {BIG_INTEGER: Ratio}


def ratio_type(integer: IntegerCapability, name: str = None) -> type:
    """
    The Ratio class whose parts are stored with `integer`. Asking twice
    for the same capability gives the same class.

    Args:
        integer (IntegerCapability): e.g. from integer.get_integer
        name (str): class name, only used the first time
    Returns:
        type: subclass of Ratio
    """
    try:
        return _ratio_types[integer]
    except KeyError:
        pass
    if name is None:
        name = f"Ratio_{integer.name}"
        overflow = getattr(integer, "overflow", "wrap")
        if overflow != "wrap":
            name = f"{name}_{overflow}"
    module_logger.debug(f"ratio_type: creating {name} for {integer!r}")
    cls = type(name, (Ratio,), {
        "__slots__": (),
        "__module__": __name__,
        "__doc__": f"Ratio stored as {integer.name} integers.",
        "integer": integer
    })
    _ratio_types[integer] = cls
    return cls


BigRational = Ratio
Rational8 = ratio_type(get_integer("int8"), "Rational8")
Rational16 = ratio_type(get_integer("int16"), "Rational16")
Rational32 = ratio_type(get_integer("int32"), "Rational32")
Rational64 = ratio_type(get_integer("int64"), "Rational64")
RationalU8 = ratio_type(get_integer("uint8"), "RationalU8")
RationalU16 = ratio_type(get_integer("uint16"), "RationalU16")
RationalU32 = ratio_type(get_integer("uint32"), "RationalU32")
RationalU64 = ratio_type(get_integer("uint64"), "RationalU64")
# machine sized
Rational = ratio_type(get_integer("isize"))
