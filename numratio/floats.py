import logging
import math
import typing

import numpy as np

module_logger = logging.getLogger(__name__)


__all__ = [
    "integer_decode",
    "approximate_unsigned",
    "ratio_to_float"
]

# bits of mantissa in a binary64 float, including the implicit one
_MANTISSA_BITS = 53


def _as_float(value: typing.Any) -> float:
    if isinstance(value, np.floating):
        # float16 and float32 widen to float64 exactly
        return float(value)
    if isinstance(value, float):
        return value
    raise TypeError(
        f"Expected a float, got {value!r} of type {type(value)}")


def integer_decode(value: typing.Any) -> typing.Tuple[int, int, int]:
    """
    Split a finite float into integers such that
    value == sign * mantissa * 2**exponent exactly.

    Args:
        value (float/np.floating)
    Returns:
        tuple: (mantissa, exponent, sign), sign being 1 or -1
    """
    value = _as_float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot decode non-finite value {value}")
    sign = -1 if math.copysign(1.0, value) < 0 else 1
    fraction, exponent = math.frexp(abs(value))
    mantissa = int(math.ldexp(fraction, _MANTISSA_BITS))
    exponent -= _MANTISSA_BITS
    if mantissa == 0:
        exponent = 0
    else:
        # drop trailing zero bits so small exponents stay small
        shift = (mantissa & -mantissa).bit_length() - 1
        mantissa >>= shift
        exponent += shift
    module_logger.debug(
        (f"integer_decode: value={value}, mantissa={mantissa}, "
         f"exponent={exponent}, sign={sign}"))
    return mantissa, exponent, sign


def approximate_unsigned(value: typing.Any,
                         max_value: int,
                         max_error: float = 10e-20,
                         max_iterations: int = 30
                         ) -> typing.Optional[typing.Tuple[int, int]]:
    """
    Find a fraction close to a non-negative float using its continued
    fraction expansion, keeping numerator and denominator <= max_value.

    Stops once the convergent is within max_error of value, after
    max_iterations terms, or when the next convergent would not fit.

    Args:
        value (float/np.floating)
        max_value (int): largest numerator or denominator allowed
        max_error (float)
        max_iterations (int)
    Returns:
        tuple: (numerator, denominator), or None if value is negative,
            not a number, or larger than max_value.
    """
    val = _as_float(value)
    if val < 0.0 or math.isnan(val):
        return None

    t_max_f = float(max_value)
    if val > t_max_f:
        return None
    # 1/epsilon > max_value
    epsilon = 1.0 / t_max_f

    q = val
    n0, d0 = 0, 1
    n1, d1 = 1, 0

    for _ in range(max_iterations):
        if math.isinf(q):
            break
        a = int(q)
        if a > max_value:
            break
        f = q - float(a)

        if a != 0 and (n1 > max_value // a or
                       d1 > max_value // a or
                       a*n1 > max_value - n0 or
                       a*d1 > max_value - d0):
            break

        n = a*n1 + n0
        d = a*d1 + d0

        n0, d0 = n1, d1
        n1, d1 = n, d

        g = math.gcd(n1, d1)
        if g != 0:
            n1 //= g
            d1 //= g

        if abs(n / d - val) < max_error:
            break

        if f < epsilon:
            break
        q = 1.0 / f

    if d1 == 0:
        return None

    module_logger.debug(
        (f"approximate_unsigned: value={val}, max_value={max_value}, "
         f"result={n1}/{d1}"))
    return n1, d1


def ratio_to_float(numerator: int, denominator: int) -> float:
    """
    Nearest float to numerator/denominator. Python's int division is
    correctly rounded; quotients beyond the float range become infinities.
    """
    try:
        return numerator / denominator
    except OverflowError:
        negative = (numerator < 0) != (denominator < 0)
        return -math.inf if negative else math.inf
