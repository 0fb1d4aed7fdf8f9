"""Digit helpers for decimal components.

Exact integer replacements for log10-based digit counting, which loses
precision near the top of the uint64 range (float64 cannot represent
2^64-1 exactly).
"""

from __future__ import annotations

__all__ = ["printed_length", "simplify", "pow10"]


def printed_length(n: int) -> int:
    """Number of base-10 digits needed to print n.

    Args:
        n: Non-negative integer

    Returns:
        Digit count, 1 for zero

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"printed_length requires a non-negative value, got {n}")
    return len(str(n))


def simplify(n: int) -> tuple[int, int]:
    """Strip trailing zero digits from n.

    A lone zero is kept: simplify(0) == (0, 1).

    Returns:
        Tuple of (reduced value, printed length of the reduced value)
    """
    while n >= 10 and n % 10 == 0:
        n //= 10
    return n, printed_length(n)


def pow10(exponent: int) -> int:
    """Exact 10**exponent for a non-negative exponent."""
    if exponent < 0:
        raise ValueError(f"pow10 requires a non-negative exponent, got {exponent}")
    return 10**exponent
