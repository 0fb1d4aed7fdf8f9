"""Formatting configuration for parsing and rendering."""

from dataclasses import dataclass

_RESERVED = frozenset("0123456789+-")


@dataclass(frozen=True)
class FormatConfig:
    """Separator symbols used when parsing and rendering decimals.

    Passed explicitly to parse and render calls instead of being held in
    process-wide mutable state. Instances are immutable, so one config can
    be shared between threads.

    Attributes:
        decimal_separator: Character between integer and fractional digits
            (default: ".")
        grouping_separator: Character inserted every three integer digits by
            grouped rendering (default: ",")
    """

    decimal_separator: str = "."
    grouping_separator: str = ","

    def __post_init__(self) -> None:
        for name in ("decimal_separator", "grouping_separator"):
            symbol = getattr(self, name)
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(f"{name} must be a single character, got {symbol!r}")
            if symbol in _RESERVED:
                raise ValueError(f"{name} cannot be a digit or sign, got {symbol!r}")
        if self.decimal_separator == self.grouping_separator:
            raise ValueError(
                f"decimal_separator and grouping_separator must differ, "
                f"both are {self.decimal_separator!r}"
            )


# Default configuration instance
DEFAULT_FORMAT_CONFIG = FormatConfig()
