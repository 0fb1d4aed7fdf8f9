"""Fixed-point decimal value type.

A FixedDecimal is sign * (integer_part + fractional_part / 10^fractional_digits)
with both parts held as unsigned 64-bit integers. The fractional width is kept
separately so leading zeros after the separator survive ("1.05" is stored as
fractional_part=5, fractional_digits=2).

Values are created by parse_decimal() or as the result of arithmetic. All
component arithmetic goes through SafeUint64, so anything that would leave
the uint64 range surfaces as DecimalRangeError instead of wrapping.

Usage:
    from fixdec import parse_decimal

    total = parse_decimal("111.555")
    total.add(parse_decimal("111.666"))  # in place, returns total
    assert str(total) == "223.221"

    diff = parse_decimal("111.111") - parse_decimal("0.999")  # new value
    assert str(diff) == "110.112"
"""

from __future__ import annotations

import structlog

from fixdec.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from fixdec.digits import pow10, printed_length, simplify
from fixdec.errors import DecimalError, not_valid_error, range_error, syntax_error
from fixdec.formatting import to_grouped_string, to_string
from fixdec.safe_uint import SafeUintError, U, Uint64Overflow

__all__ = ["FixedDecimal", "parse_decimal"]

logger = structlog.get_logger()

# str.isdigit() also accepts non-ASCII digits, which the grammar rejects
_ASCII_DIGITS = "0123456789"


def _rejected(event: str, error: DecimalError) -> DecimalError:
    logger.debug(event, operation=error.func, text=error.num, kind=error.kind.value)
    return error


class FixedDecimal:
    """Exact decimal with uint64 integer and fractional components.

    A default-constructed FixedDecimal() is invalid: it is a placeholder
    that every comparison, arithmetic and rendering call rejects with
    DecimalNotValidError. Valid values come from parse_decimal().

    add() and sub() overwrite the receiver on success and leave it untouched
    on failure. plus(), minus() and the + and - operators return new values
    and never modify either operand.

    Attributes:
        valid: True if the value was produced by a parse or arithmetic
        negative: Sign flag, never set for zero
        integer_part: Digits left of the separator
        fractional_part: Digits right of the separator, as an integer
        fractional_digits: Printed width of fractional_part (0 if absent)
    """

    __slots__ = ("_valid", "_negative", "_integer", "_fraction", "_fraction_digits")
    __hash__ = None  # type: ignore[assignment]  # Mutable in place via add()/sub()

    def __init__(self) -> None:
        """Create an invalid placeholder value."""
        self._valid = False
        self._negative = False
        self._integer = 0
        self._fraction = 0
        self._fraction_digits = 0

    @classmethod
    def _make(cls, negative: bool, integer: int, fraction: int, fraction_digits: int) -> FixedDecimal:
        value = cls()
        value._valid = True
        # Zero is never negative
        value._negative = negative and (integer != 0 or fraction != 0)
        value._integer = integer
        value._fraction = fraction
        value._fraction_digits = fraction_digits
        return value

    @classmethod
    def from_str(cls, text: str, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> FixedDecimal:
        """Parse a FixedDecimal from text. See parse_decimal()."""
        return parse_decimal(text, config)

    # --- Read-only fields ---

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def integer_part(self) -> int:
        return self._integer

    @property
    def fractional_part(self) -> int:
        return self._fraction

    @property
    def fractional_digits(self) -> int:
        return self._fraction_digits

    @property
    def is_zero(self) -> bool:
        """True if both components are zero."""
        return self._integer == 0 and self._fraction == 0

    # --- Comparison ---

    def compare(self, other: FixedDecimal) -> int:
        """Compare self and other.

        Fractions are scaled to a common width before comparing, so
        1.5 == 1.50 and 1.5 > 1.05.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other

        Raises:
            DecimalNotValidError: If either operand is invalid
        """
        self._check_operands("Cmp", other)
        if self._negative != other._negative:
            return -1 if self._negative else 1
        self_fraction, other_fraction, _ = _align(self, other)
        result = _compare_magnitudes(self._integer, self_fraction, other._integer, other_fraction)
        return -result if self._negative else result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        if not self._valid or not other._valid:
            return False
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.compare(other) >= 0

    # --- Arithmetic ---

    def plus(self, other: FixedDecimal) -> FixedDecimal:
        """Return self + other as a new value.

        Raises:
            DecimalNotValidError: If either operand is invalid
            DecimalRangeError: If any component would exceed 2^64-1
        """
        self._check_operands("Add", other)
        try:
            return self._add(other)
        except SafeUintError as exc:
            raise _rejected("decimal_arithmetic_rejected", range_error("Add", f"{self} + {other}")) from exc

    def minus(self, other: FixedDecimal) -> FixedDecimal:
        """Return self - other as a new value.

        Raises:
            DecimalNotValidError: If either operand is invalid
            DecimalRangeError: If any component would exceed 2^64-1
        """
        self._check_operands("Sub", other)
        try:
            if self._negative != other._negative:
                # a - (-b) == a + b and -a - b == -a + (-b)
                return self._add(other.negated())
            return self._subtract(other)
        except SafeUintError as exc:
            raise _rejected("decimal_arithmetic_rejected", range_error("Sub", f"{self} - {other}")) from exc

    def add(self, other: FixedDecimal) -> FixedDecimal:
        """Set self to self + other and return self.

        self is unchanged if an error is raised.
        """
        self._assign(self.plus(other))
        return self

    def sub(self, other: FixedDecimal) -> FixedDecimal:
        """Set self to self - other and return self.

        self is unchanged if an error is raised.
        """
        self._assign(self.minus(other))
        return self

    def __add__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> FixedDecimal:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.minus(other)

    def negated(self) -> FixedDecimal:
        """Return a copy with the sign flipped. Zero stays non-negative."""
        if not self._valid:
            raise _rejected("decimal_arithmetic_rejected", not_valid_error("Neg", repr(self)))
        return FixedDecimal._make(not self._negative, self._integer, self._fraction, self._fraction_digits)

    def __neg__(self) -> FixedDecimal:
        return self.negated()

    def __abs__(self) -> FixedDecimal:
        if not self._valid:
            raise _rejected("decimal_arithmetic_rejected", not_valid_error("Abs", repr(self)))
        return FixedDecimal._make(False, self._integer, self._fraction, self._fraction_digits)

    def __pos__(self) -> FixedDecimal:
        return self.copy()

    def copy(self) -> FixedDecimal:
        """Return an independent copy (invalid values stay invalid)."""
        value = FixedDecimal()
        value._assign(self)
        return value

    def _add(self, other: FixedDecimal) -> FixedDecimal:
        self_fraction, other_fraction, width = _align(self, other)

        if self._negative == other._negative:
            fraction = U(self_fraction) + other_fraction
            integer = U(self._integer) + other._integer
            negative = self._negative
        elif _compare_magnitudes(self._integer, self_fraction, other._integer, other_fraction) >= 0:
            integer, fraction = _subtract_magnitudes(
                self._integer, self_fraction, other._integer, other_fraction, width
            )
            negative = self._negative
        else:
            integer, fraction = _subtract_magnitudes(
                other._integer, other_fraction, self._integer, self_fraction, width
            )
            negative = other._negative

        # Carry whatever no longer fits in the fractional slot.
        # The modulus comes from the aligned width, so widths past 19 digits
        # are still exact.
        if printed_length(fraction.value) > width:
            modulus = pow10(width)
            integer = integer + fraction // modulus
            fraction = fraction % modulus

        return _result(negative, integer, fraction, width)

    def _subtract(self, other: FixedDecimal) -> FixedDecimal:
        """self - other for operands of the same sign."""
        self_fraction, other_fraction, width = _align(self, other)

        if _compare_magnitudes(self._integer, self_fraction, other._integer, other_fraction) >= 0:
            integer, fraction = _subtract_magnitudes(
                self._integer, self_fraction, other._integer, other_fraction, width
            )
            negative = self._negative
        else:
            integer, fraction = _subtract_magnitudes(
                other._integer, other_fraction, self._integer, self_fraction, width
            )
            negative = not self._negative

        return _result(negative, integer, fraction, width)

    def _check_operands(self, func: str, other: FixedDecimal) -> None:
        if not isinstance(other, FixedDecimal):
            raise TypeError(f"FixedDecimal operand required, got {type(other).__name__}")
        if not self._valid or not other._valid:
            raise _rejected("decimal_arithmetic_rejected", not_valid_error(func, f"{self!r}, {other!r}"))

    def _assign(self, other: FixedDecimal) -> None:
        self._valid = other._valid
        self._negative = other._negative
        self._integer = other._integer
        self._fraction = other._fraction
        self._fraction_digits = other._fraction_digits

    # --- Rendering ---

    def to_string(self, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
        """Render as [-]INTEGER<sep>FRACTION. See formatting.to_string()."""
        return to_string(self, config)

    def to_grouped_string(self, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
        """Render with thousands grouping. See formatting.to_grouped_string()."""
        return to_grouped_string(self, config)

    def __str__(self) -> str:
        return to_string(self)

    def __format__(self, format_spec: str) -> str:
        """Support f"{value}" and f"{value:,}" (grouped)."""
        if format_spec == "":
            return to_string(self)
        if format_spec == ",":
            return to_grouped_string(self)
        raise ValueError(f"Unsupported format specifier for FixedDecimal: {format_spec!r}")

    def __repr__(self) -> str:
        if not self._valid:
            return "FixedDecimal(<invalid>)"
        return f"FixedDecimal('{to_string(self)}')"


def parse_decimal(text: str, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> FixedDecimal:
    """Convert text into a FixedDecimal.

    A valid decimal string has the form SNN.DD:
    - S is an optional sign (+ or -)
    - NN is zero or more ASCII digits (up to 2^64-1)
    - . is config.decimal_separator
    - DD is zero or more ASCII digits (up to 2^64-1)

    NN or DD can be omitted, but not both. "123." is accepted and has no
    fractional part.

    Args:
        text: Input text
        config: Formatting symbols (default: "." separator)

    Returns:
        Parsed FixedDecimal

    Raises:
        TypeError: If text is not a str
        DecimalSyntaxError: If text does not match the grammar
        DecimalRangeError: If either component exceeds 2^64-1
    """
    fn_name = "ParseDecimal"

    if not isinstance(text, str):
        raise TypeError(f"parse_decimal requires str, got {type(text).__name__}")
    if not text:
        raise _rejected("decimal_parse_rejected", syntax_error(fn_name, text))

    negative = False
    start = 0
    if text[0] == "+":
        start = 1
    elif text[0] == "-":
        start = 1
        negative = True

    integer = U.zero()
    fraction = U.zero()
    fraction_digits = -1  # -1 until the separator is seen
    seen_digit = False

    for char in text[start:]:
        if char == config.decimal_separator:
            if fraction_digits != -1:
                raise _rejected("decimal_parse_rejected", syntax_error(fn_name, text))
            fraction_digits = 0
            continue

        digit = _ASCII_DIGITS.find(char)
        if digit == -1:
            raise _rejected("decimal_parse_rejected", syntax_error(fn_name, text))

        try:
            if fraction_digits == -1:
                integer = integer * 10 + digit
            else:
                fraction = fraction * 10 + digit
                fraction_digits += 1
        except Uint64Overflow as exc:
            raise _rejected("decimal_parse_rejected", range_error(fn_name, text)) from exc
        seen_digit = True

    if not seen_digit:
        raise _rejected("decimal_parse_rejected", syntax_error(fn_name, text))

    return FixedDecimal._make(negative, integer.value, fraction.value, max(fraction_digits, 0))


def _trimmed_fraction(fraction: int, width: int) -> tuple[int, int]:
    """Strip trailing zeros from a fraction, shrinking its width to match.

    The value is unchanged ("0.1000" becomes fraction 1, width 1). A zero
    fraction gets width 0.
    """
    reduced, reduced_length = simplify(fraction)
    if reduced == 0:
        return 0, 0
    return reduced, width - (printed_length(fraction) - reduced_length)


def _align(a: FixedDecimal, b: FixedDecimal) -> tuple[int, int, int]:
    """Scale both fractions to the wider of the two trimmed widths.

    Trailing zeros are dropped first, so "0.10000000000000000000" works at
    width 1 rather than 20.

    Returns plain ints: comparison needs no range check, while arithmetic
    wraps the results in SafeUint64 (which raises if they do not fit).

    Returns:
        Tuple of (a fraction, b fraction, common width)
    """
    a_fraction, a_width = _trimmed_fraction(a._fraction, a._fraction_digits)
    b_fraction, b_width = _trimmed_fraction(b._fraction, b._fraction_digits)
    width = max(a_width, b_width)
    a_fraction *= pow10(width - a_width)
    b_fraction *= pow10(width - b_width)
    return a_fraction, b_fraction, width


def _compare_magnitudes(a_integer: int, a_fraction: int, b_integer: int, b_fraction: int) -> int:
    """Compare unsigned magnitudes whose fractions share a width."""
    if a_integer != b_integer:
        return 1 if a_integer > b_integer else -1
    if a_fraction != b_fraction:
        return 1 if a_fraction > b_fraction else -1
    return 0


def _subtract_magnitudes(
    big_integer: int, big_fraction: int, small_integer: int, small_fraction: int, width: int
) -> tuple[U, U]:
    """Compute big - small component-wise, borrowing from the integer part.

    Requires big >= small and both fractions aligned to width.

    Returns:
        Tuple of (integer, fraction)
    """
    integer = U(big_integer)
    fraction = U(big_fraction)
    deficit = U(small_fraction).checked_sub(fraction)
    if deficit is not None and deficit:
        # Borrow one integer unit, worth 10^width in the fractional slot
        integer = integer - 1
        fraction = pow10(width) - deficit
    else:
        fraction = fraction - small_fraction
    integer = integer - small_integer
    return integer, fraction


def _result(negative: bool, integer: U, fraction: U, width: int) -> FixedDecimal:
    """Build the simplified result of an arithmetic operation."""
    reduced, width = _trimmed_fraction(fraction.value, width)
    return FixedDecimal._make(negative, integer.value, reduced, width)
