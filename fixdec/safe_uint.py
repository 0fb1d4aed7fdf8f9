"""Checked unsigned 64-bit integer wrapper for decimal components.

This module provides SafeUint64, a lightweight wrapper that makes arithmetic
on the integer and fractional components of a FixedDecimal safe by default:
- Results above 2^64-1 raise Uint64Overflow
- Results below zero raise Underflow
- Division or modulo by zero raises DivisionByZero

Usage pattern:
    from fixdec.safe_uint import U

    def accumulate(acc: int, digit: int) -> int:
        # Wrap at entry
        sa = U(acc)

        # Natural arithmetic - automatically checked
        result = sa * 10 + digit  # Raises Uint64Overflow past 2^64-1

        # Unwrap at exit
        return result.value

Plain int operands may be of any size (for example 10**20 used as a
modulus). SafeUint64 values themselves always fit, and every result is
range-checked.
"""

from __future__ import annotations

UINT64_MAX = 2**64 - 1


class SafeUintError(ArithmeticError):
    """Base class for SafeUint64 arithmetic errors."""

    pass


class DivisionByZero(SafeUintError):
    """Division or modulo by zero."""

    pass


class Underflow(SafeUintError):
    """Result would be negative."""

    pass


class Uint64Overflow(SafeUintError):
    """Value exceeds the uint64 maximum."""

    pass


def _checked(result: int, expression: str) -> SafeUint64:
    if result < 0:
        raise Underflow(f"Underflow: {expression} = {result}")
    if result > UINT64_MAX:
        raise Uint64Overflow(f"Overflow: {expression} = {result} > 2^64-1")
    return SafeUint64(result)


class SafeUint64:
    """Unsigned 64-bit integer with checked arithmetic.

    Every operation validates its result, so a SafeUint64 always holds a
    value in [0, 2^64-1]:
    - Addition and multiplication raise Uint64Overflow past the maximum
    - Subtraction raises Underflow below zero
    - Division and modulo by zero raise DivisionByZero

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeUint64) -> None:
        """Create a SafeUint64 from an integer or another SafeUint64.

        Args:
            value: Integer value to wrap, or SafeUint64 to copy

        Raises:
            TypeError: If value is not an int or SafeUint64
            Underflow: If value is negative
            Uint64Overflow: If value exceeds 2^64-1
        """
        if isinstance(value, SafeUint64):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise Underflow(f"Negative value cannot be uint64: {value}")
            if value > UINT64_MAX:
                raise Uint64Overflow(f"Value exceeds uint64 max: {value}")
            self._value = value
        else:
            raise TypeError(f"SafeUint64 requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeUint64({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeUint64 | int) -> SafeUint64:
        """Add two values.

        Raises:
            Uint64Overflow: If the sum exceeds 2^64-1
        """
        other_val = _extract_value(other)
        return _checked(self._value + other_val, f"{self._value} + {other_val}")

    def __radd__(self, other: int) -> SafeUint64:
        return _checked(other + self._value, f"{other} + {self._value}")

    def __sub__(self, other: SafeUint64 | int) -> SafeUint64:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        return _checked(self._value - other_val, f"{self._value} - {other_val}")

    def __rsub__(self, other: int) -> SafeUint64:
        """Subtract self from other (other - self).

        Raises:
            Underflow: If result would be negative
            Uint64Overflow: If result exceeds 2^64-1
        """
        return _checked(other - self._value, f"{other} - {self._value}")

    def __mul__(self, other: SafeUint64 | int) -> SafeUint64:
        """Multiply two values.

        Raises:
            Uint64Overflow: If the product exceeds 2^64-1
        """
        other_val = _extract_value(other)
        return _checked(self._value * other_val, f"{self._value} * {other_val}")

    def __rmul__(self, other: int) -> SafeUint64:
        return _checked(other * self._value, f"{other} * {self._value}")

    def __floordiv__(self, other: SafeUint64 | int) -> SafeUint64:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return _checked(self._value // other_val, f"{self._value} // {other_val}")

    def __mod__(self, other: SafeUint64 | int) -> SafeUint64:
        """Modulo operation.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return _checked(self._value % other_val, f"{self._value} % {other_val}")

    def __truediv__(self, other: SafeUint64 | int) -> SafeUint64:
        raise TypeError("SafeUint64 does not support true division, use floor division (//)")

    def __rtruediv__(self, other: int) -> SafeUint64:
        raise TypeError("SafeUint64 does not support true division, use floor division (//)")

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeUint64):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeUint64 | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeUint64 | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeUint64 | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeUint64 | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        """Convert to int."""
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def checked_sub(self, other: SafeUint64 | int) -> SafeUint64 | None:
        """Subtract, returning None on underflow instead of raising.

        Unlike __sub__, this returns None instead of raising Underflow.
        """
        result = self._value - _extract_value(other)
        if result < 0:
            return None
        return SafeUint64(result)

    def checked_add(self, other: SafeUint64 | int) -> SafeUint64 | None:
        """Add, returning None on overflow instead of raising."""
        result = self._value + _extract_value(other)
        if result > UINT64_MAX:
            return None
        return SafeUint64(result)

    @classmethod
    def zero(cls) -> SafeUint64:
        """Create a SafeUint64 with value 0."""
        return cls(0)

    @classmethod
    def max(cls) -> SafeUint64:
        """Create a SafeUint64 holding 2^64-1."""
        return cls(UINT64_MAX)


def _extract_value(x: SafeUint64 | int) -> int:
    """Extract integer value from SafeUint64 or int."""
    if isinstance(x, SafeUint64):
        return x._value
    return x


# Convenience alias for concise code
U = SafeUint64
