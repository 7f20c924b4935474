import typing

import numpy as np

__all__ = [
    "integer_type",
    "float_type",
    "cmp"
]


integer_type = typing.Union[int, np.integer]
float_type = typing.Union[float, np.floating]


def cmp(a: typing.Any, b: typing.Any) -> int:
    """
    -1, 0 or 1. Works for numpy scalars, whose comparisons give np.bool_.
    """
    return int(a > b) - int(a < b)
