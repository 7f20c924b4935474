import enum

__all__ = [
    "RatioError",
    "RatioErrorKind",
    "ParseRatioError"
]


class RatioError(Exception):
    """Base class for errors raised by numratio."""
    pass


class RatioErrorKind(enum.Enum):
    PARSE_ERROR = "failed to parse integer"
    ZERO_DENOMINATOR = "zero value denominator"

    @property
    def description(self) -> str:
        return self.value


class ParseRatioError(RatioError, ValueError):
    """
    Raised when text cannot be turned into a Ratio.

    Args:
        kind (RatioErrorKind)
        text (str): the text that failed to parse
    """

    def __init__(self, kind: RatioErrorKind, text: str = None):
        super(ParseRatioError, self).__init__(kind.description)
        self.kind = kind
        self.text = text

    def __str__(self):
        if self.text is None:
            return self.kind.description
        return f"{self.kind.description}: {self.text!r}"
