import functools
import logging
import re
import typing

from .exceptions import ParseRatioError, RatioErrorKind

module_logger = logging.getLogger(__name__)


__all__ = [
    "parse_integer",
    "parse_ratio_pair",
    "format_ratio"
]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@functools.lru_cache(maxsize=None)
def _integer_pattern(radix: int) -> re.Pattern:
    # only the digits of this radix, so "0x1f" is rejected for radix 16
    digits = _DIGITS[:radix]
    return re.compile(f"[+-]?[{digits}]+", re.IGNORECASE)


def parse_integer(text: str, radix: int = 10) -> int:
    """
    Parse a single signed integer. Unlike int(), no whitespace,
    underscores or base prefixes ("0x", "0b") are accepted.
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in [2, 36], got {radix}")
    if _integer_pattern(radix).fullmatch(text) is None:
        raise ParseRatioError(RatioErrorKind.PARSE_ERROR, text)
    try:
        return int(text, radix)
    except ValueError:
        raise ParseRatioError(RatioErrorKind.PARSE_ERROR, text) from None


def parse_ratio_pair(text: str,
                     radix: int = 10,
                     delimiter: str = "/") -> typing.Tuple[int, int]:
    """
    Split text of the form "numer/denom" or "numer" into two ints.
    The pair is not reduced.

    Args:
        text (str)
        radix (int)
        delimiter (str)
    Returns:
        tuple: (numerator, denominator)
    """
    module_logger.debug(
        f"parse_ratio_pair: text={text!r}, radix={radix}")
    if not isinstance(text, str):
        raise TypeError(
            f"Couldn't parse {text!r} of type {type(text)}")
    numer_str, sep, denom_str = text.partition(delimiter)
    try:
        numerator = parse_integer(numer_str, radix)
        denominator = parse_integer(denom_str, radix) if sep else 1
    except ParseRatioError as err:
        raise ParseRatioError(err.kind, text) from None
    if denominator == 0:
        raise ParseRatioError(RatioErrorKind.ZERO_DENOMINATOR, text)
    return numerator, denominator


def format_ratio(numerator: typing.Any,
                 denominator: typing.Any,
                 delimiter: str = "/") -> str:
    """
    Render "numer/denom", or just "numer" when denom is one.
    """
    if denominator == 1:
        return f"{numerator}"
    return f"{numerator}{delimiter}{denominator}"
