"""Pydantic types for decimal amounts carried as strings.

Usage:
    from pydantic import BaseModel
    from fixdec.types import DecimalString

    class Payment(BaseModel):
        amount: DecimalString

    Payment(amount="-12").amount == "-12.0"
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from fixdec.errors import DecimalError
from fixdec.value import parse_decimal


def validate_decimal_string(value: Any) -> str:
    """Validate that a value is a decimal within the uint64 component range.

    Args:
        value: Value to validate (string or int)

    Returns:
        Canonical decimal string (e.g. "123" becomes "123.0")

    Raises:
        ValueError: If value is not a valid decimal string or int
    """
    if isinstance(value, bool):
        raise ValueError("Decimal must be string or int, got bool")
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"Decimal must be string or int, got {type(value).__name__}")

    try:
        return parse_decimal(value).to_string()
    except DecimalError as err:
        raise ValueError(str(err)) from err


# Fixed-point decimal as a canonical string (validated)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Fixed-point decimal with uint64 integer and fractional parts"),
]
