__version__ = "0.4.2"

from . import integer
from .exceptions import RatioError, RatioErrorKind, ParseRatioError
from .integer import (
    IntegerCapability,
    BigInteger,
    FixedWidthInteger,
    BIG_INTEGER,
    get_integer
)
from .ratio import (
    Ratio,
    ratio_type,
    BigRational,
    Rational,
    Rational8,
    Rational16,
    Rational32,
    Rational64,
    RationalU8,
    RationalU16,
    RationalU32,
    RationalU64
)

__all__ = [
    "integer",
    "RatioError",
    "RatioErrorKind",
    "ParseRatioError",
    "IntegerCapability",
    "BigInteger",
    "FixedWidthInteger",
    "BIG_INTEGER",
    "get_integer",
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
