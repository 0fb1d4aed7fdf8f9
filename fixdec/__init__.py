"""Fixed-point decimal arithmetic on uint64 components.

Exact parsing, comparison, addition and subtraction of decimal strings
without floating point or arbitrary-precision magnitudes.

Usage:
    from fixdec import parse_decimal

    a = parse_decimal("1234567890.01")
    a.to_grouped_string()  # "1,234,567,890.01"
"""

from fixdec.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from fixdec.errors import (
    DecimalError,
    DecimalErrorKind,
    DecimalNotValidError,
    DecimalRangeError,
    DecimalSyntaxError,
)
from fixdec.formatting import to_grouped_string, to_string
from fixdec.value import FixedDecimal, parse_decimal

__version__ = "0.1.0"
__all__ = [
    # Value
    "FixedDecimal",
    "parse_decimal",
    # Rendering
    "to_string",
    "to_grouped_string",
    # Config
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    # Errors
    "DecimalError",
    "DecimalErrorKind",
    "DecimalSyntaxError",
    "DecimalRangeError",
    "DecimalNotValidError",
    "__version__",
]
