import argparse
import logging
import operator
import sys
import typing

from .integer import get_integer
from .ratio import Ratio, ratio_type

module_logger = logging.getLogger(__name__)

__all__ = [
    "create_parser",
    "evaluate"
]

_operators = {
    "+": (operator.add, "checked_add"),
    "-": (operator.sub, "checked_sub"),
    "*": (operator.mul, "checked_mul"),
    "/": (operator.truediv, "checked_div"),
    "%": (operator.mod, "checked_rem"),
}


def evaluate(left: str,
             op: str,
             right: str,
             integer_name: str = "bigint",
             overflow: str = "wrap",
             checked: bool = False) -> typing.Any:
    """
    Parse two values and apply one operation to them.

    Args:
        left (str): e.g. "3/4"
        op (str): one of "+", "-", "*", "/", "%" or "cmp"
        right (str)
        integer_name (str): integer type, see integer.get_integer
        overflow (str): "wrap" or "raise"
        checked (bool): use the checked methods, giving None on failure
    Returns:
        Ratio, int for "cmp", or None
    """
    cls = ratio_type(get_integer(integer_name, overflow=overflow))
    module_logger.debug(f"evaluate: using {cls.__name__}")
    a = cls.from_str(left)
    b = cls.from_str(right)
    module_logger.debug(f"evaluate: {a!r} {op} {b!r}")
    if op == "cmp":
        return a.cmp(b)
    try:
        func, checked_name = _operators[op]
    except KeyError:
        raise ValueError(
            (f"Unknown operator {op!r}, expected one of "
             f"{list(_operators.keys()) + ['cmp']}")) from None
    if checked:
        return getattr(a, checked_name)(b)
    return func(a, b)


def create_parser():

    parser = argparse.ArgumentParser(
        description="evaluate an operation on two rational numbers")

    parser.add_argument("left", type=str)

    parser.add_argument("op", type=str,
                        choices=list(_operators.keys()) + ["cmp"])

    parser.add_argument("right", type=str)

    parser.add_argument("-i", "--integer",
                        dest="integer_name", default="bigint", type=str)

    parser.add_argument("--overflow",
                        dest="overflow", default="wrap",
                        choices=["wrap", "raise"])

    parser.add_argument("--checked",
                        dest="checked", action="store_true")

    parser.add_argument("-f", "--float",
                        dest="as_float", action="store_true")

    parser.add_argument("-v", "--verbose",
                        dest="verbose", action="store_true")

    return parser


def main(argv: typing.List[str] = None) -> int:
    parsed = create_parser().parse_args(argv)
    level = logging.ERROR
    if parsed.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level)

    result = evaluate(parsed.left, parsed.op, parsed.right,
                      integer_name=parsed.integer_name,
                      overflow=parsed.overflow,
                      checked=parsed.checked)
    if parsed.as_float and isinstance(result, Ratio):
        result = float(result)
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
