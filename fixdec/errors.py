"""Decimal error classes.

Every failing call reports the operation that failed, the offending input
text, and one of three kinds (see DecimalErrorKind).
"""

from enum import Enum


class DecimalErrorKind(Enum):
    """Types of decimal errors."""

    SYNTAX = "syntax"
    RANGE = "range"
    NOT_VALID = "not_valid"

    @property
    def reason(self) -> str:
        """Human-readable reason used in error messages."""
        return _REASONS[self]


_REASONS = {
    DecimalErrorKind.SYNTAX: "invalid syntax",
    DecimalErrorKind.RANGE: "value out of range",
    DecimalErrorKind.NOT_VALID: "value is not valid",
}


class DecimalError(ArithmeticError):
    """Base error for decimal operations.

    Attributes:
        func: Name of the failing operation (e.g. "ParseDecimal", "Add")
        num: The input text, or a rendering of the operands
        kind: Why the operation failed
    """

    kind: DecimalErrorKind

    def __init__(self, func: str, num: str, kind: DecimalErrorKind | None = None) -> None:
        if kind is None:
            kind = getattr(type(self), "kind", None)
            if kind is None:
                raise TypeError("DecimalError requires an error kind")
        self.kind = kind
        self.func = func
        self.num = num
        super().__init__(f"fixdec.{func}: parsing '{num}': {self.kind.reason}")


class DecimalSyntaxError(DecimalError):
    """Text does not match the decimal grammar."""

    kind = DecimalErrorKind.SYNTAX


class DecimalRangeError(DecimalError):
    """A component would leave the uint64 range."""

    kind = DecimalErrorKind.RANGE


class DecimalNotValidError(DecimalError):
    """Operation attempted on a value that was never parsed."""

    kind = DecimalErrorKind.NOT_VALID


def syntax_error(func: str, num: str) -> DecimalSyntaxError:
    return DecimalSyntaxError(func, num)


def range_error(func: str, num: str) -> DecimalRangeError:
    return DecimalRangeError(func, num)


def not_valid_error(func: str, num: str = "") -> DecimalNotValidError:
    return DecimalNotValidError(func, num)
