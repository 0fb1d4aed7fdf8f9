"""Text rendering for FixedDecimal values.

Output is always [-]INTEGER<sep>FRACTION with at least one fractional digit,
so a value parsed from "123" renders as "123.0".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fixdec.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from fixdec.errors import DecimalError, not_valid_error

if TYPE_CHECKING:
    from fixdec.value import FixedDecimal

__all__ = ["to_string", "to_grouped_string", "group_digits"]

logger = structlog.get_logger()


def _invalid(func: str, value: FixedDecimal) -> DecimalError:
    error = not_valid_error(func, repr(value))
    logger.debug("decimal_render_rejected", operation=func, text=error.num, kind=error.kind.value)
    return error


def group_digits(digits: str, separator: str) -> str:
    """Insert separator every three digits, counting from the right.

    Example:
        group_digits("1234567", ",") == "1,234,567"
    """
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def _render(value: FixedDecimal, integer_digits: str, config: FormatConfig) -> str:
    # Width 0 (no fractional part) still prints a single "0"
    width = max(value.fractional_digits, 1)
    sign = "-" if value.negative else ""
    return f"{sign}{integer_digits}{config.decimal_separator}{value.fractional_part:0{width}d}"


def to_string(value: FixedDecimal, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """Render value without grouping.

    Raises:
        DecimalNotValidError: If value is invalid
    """
    if not value.valid:
        raise _invalid("String", value)
    return _render(value, str(value.integer_part), config)


def to_grouped_string(value: FixedDecimal, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """Render value with the integer part grouped in threes.

    Integer parts below 1000 render exactly as to_string().

    Raises:
        DecimalNotValidError: If value is invalid
    """
    if not value.valid:
        raise _invalid("FormattedString", value)
    return _render(value, group_digits(str(value.integer_part), config.grouping_separator), config)
