"""Tests for plain and grouped rendering."""

import pytest
from structlog.testing import capture_logs

from fixdec import (
    DecimalNotValidError,
    FixedDecimal,
    FormatConfig,
    parse_decimal,
    to_grouped_string,
    to_string,
)
from fixdec.formatting import group_digits

GROUPED_CASES = {
    "1.01": "1.01",
    "12.01": "12.01",
    "123.01": "123.01",
    "1234.01": "1,234.01",
    "12345.01": "12,345.01",
    "123456.01": "123,456.01",
    "1234567.01": "1,234,567.01",
    "12345678.01": "12,345,678.01",
    "123456789.01": "123,456,789.01",
    "1234567890.01": "1,234,567,890.01",
    "18446744073709551615.18446744073709551615": "18,446,744,073,709,551,615.18446744073709551615",
    "-1.01": "-1.01",
    "-12.01": "-12.01",
    "-123.01": "-123.01",
    "-1234.01": "-1,234.01",
    "-12345.01": "-12,345.01",
    "-123456.01": "-123,456.01",
    "-1234567.01": "-1,234,567.01",
    "-12345678.01": "-12,345,678.01",
    "-123456789.01": "-123,456,789.01",
    "-1234567890.01": "-1,234,567,890.01",
    "-18446744073709551615.18446744073709551615": "-18,446,744,073,709,551,615.18446744073709551615",
    "1000": "1,000.0",
    "999": "999.0",
}


class TestToString:
    """Plain rendering."""

    @pytest.mark.parametrize(
        "text,output",
        [
            ("123", "123.0"),
            ("0", "0.0"),
            (".5", "0.5"),
            ("1.05", "1.05"),
            ("1.000", "1.000"),
            ("-0.007", "-0.007"),
            ("1234567.5", "1234567.5"),
        ],
    )
    def test_round_trip(self, text, output):
        assert to_string(parse_decimal(text)) == output
        assert parse_decimal(text).to_string() == output

    @pytest.mark.parametrize("text", ["1.5", "-42.125", "0.001", "18446744073709551615.1"])
    def test_canonical_round_trip(self, text):
        """Canonical strings render back unchanged."""
        assert str(parse_decimal(text)) == text

    def test_custom_decimal_separator(self):
        config = FormatConfig(decimal_separator=",", grouping_separator=".")
        assert parse_decimal("1234.5").to_string(config) == "1234,5"

    def test_invalid_raises(self):
        with pytest.raises(DecimalNotValidError):
            to_string(FixedDecimal())
        with pytest.raises(DecimalNotValidError):
            str(FixedDecimal())

    def test_invalid_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(DecimalNotValidError):
                to_string(FixedDecimal())
        assert logs == [
            {
                "event": "decimal_render_rejected",
                "log_level": "debug",
                "operation": "String",
                "text": "FixedDecimal(<invalid>)",
                "kind": "not_valid",
            }
        ]

    def test_repr(self):
        assert repr(parse_decimal("-1.50")) == "FixedDecimal('-1.50')"
        assert repr(FixedDecimal()) == "FixedDecimal(<invalid>)"


class TestToGroupedString:
    """Thousands grouping of the integer part."""

    @pytest.mark.parametrize("text,output", list(GROUPED_CASES.items()))
    def test_grouping(self, text, output):
        assert parse_decimal(text).to_grouped_string() == output

    def test_grouping_example(self):
        assert to_grouped_string(parse_decimal("1234567890.01")) == "1,234,567,890.01"

    def test_custom_separators(self):
        config = FormatConfig(decimal_separator=",", grouping_separator=".")
        assert parse_decimal("-1234567.25").to_grouped_string(config) == "-1.234.567,25"

    def test_space_grouping(self):
        config = FormatConfig(grouping_separator=" ")
        assert parse_decimal("1234567.25").to_grouped_string(config) == "1 234 567.25"

    def test_format_spec(self):
        value = parse_decimal("1234.5")
        assert f"{value}" == "1234.5"
        assert f"{value:,}" == "1,234.5"
        with pytest.raises(ValueError):
            f"{value:.2f}"

    def test_invalid_raises(self):
        with pytest.raises(DecimalNotValidError):
            FixedDecimal().to_grouped_string()

    def test_invalid_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(DecimalNotValidError):
                FixedDecimal().to_grouped_string()
        assert logs[-1]["event"] == "decimal_render_rejected"
        assert logs[-1]["operation"] == "FormattedString"
        assert logs[-1]["kind"] == "not_valid"


class TestGroupDigits:
    @pytest.mark.parametrize(
        "digits,output",
        [
            ("1", "1"),
            ("12", "12"),
            ("123", "123"),
            ("1234", "1,234"),
            ("123456", "123,456"),
            ("1234567", "1,234,567"),
        ],
    )
    def test_group_digits(self, digits, output):
        assert group_digits(digits, ",") == output
