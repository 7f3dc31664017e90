#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for ordinal label generation."""

from itertools import islice

import pytest

from bibi.parsers.numbering import NumberingGenerator, NumberingStyle, format_ordinal, to_roman


@pytest.mark.unit
class TestNumberingStyle:
    """Tests for NumberingStyle lookup."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1", NumberingStyle.DECIMAL),
            ("a", NumberingStyle.LOWER_ALPHA),
            ("A", NumberingStyle.UPPER_ALPHA),
            ("i", NumberingStyle.LOWER_ROMAN),
            ("I", NumberingStyle.UPPER_ROMAN),
        ],
    )
    def test_from_attribute(self, value: str, expected: NumberingStyle) -> None:
        """Each type= value selects its style."""
        assert NumberingStyle.from_attribute(value) is expected

    @pytest.mark.parametrize("value", ["", "x", "ii", "01", " a"])
    def test_unknown_attribute(self, value: str) -> None:
        """Anything else is not a style."""
        assert NumberingStyle.from_attribute(value) is None


@pytest.mark.unit
class TestRoman:
    """Tests for Roman numeral encoding."""

    @pytest.mark.parametrize(
        "number,expected",
        [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL"), (90, "XC"), (1994, "MCMXCIV"), (3999, "MMMCMXCIX")],
    )
    def test_to_roman(self, number: int, expected: str) -> None:
        """Subtractive notation is used."""
        assert to_roman(number) == expected

    def test_large_values_repeat_m(self) -> None:
        """Values past 3999 keep adding M."""
        assert to_roman(5000) == "MMMMM"

    @pytest.mark.parametrize("number", [0, -1, -32768])
    def test_non_positive_rejected(self, number: int) -> None:
        """Roman numerals have no zero or negatives."""
        with pytest.raises(ValueError):
            to_roman(number)


@pytest.mark.unit
class TestFormatOrdinal:
    """Tests for single label formatting."""

    def test_decimal(self) -> None:
        assert format_ordinal(NumberingStyle.DECIMAL, 0) == "0"
        assert format_ordinal(NumberingStyle.DECIMAL, -3) == "-3"
        assert format_ordinal(NumberingStyle.DECIMAL, 42) == "42"

    def test_alpha_indexes_from_zero(self) -> None:
        """Value 0 is the first letter."""
        assert format_ordinal(NumberingStyle.LOWER_ALPHA, 0) == "a"
        assert format_ordinal(NumberingStyle.UPPER_ALPHA, 2) == "C"
        assert format_ordinal(NumberingStyle.LOWER_ALPHA, 25) == "z"

    def test_alpha_wraps_after_z(self) -> None:
        """Labels wrap to the first letter instead of growing."""
        assert format_ordinal(NumberingStyle.LOWER_ALPHA, 26) == "a"
        assert format_ordinal(NumberingStyle.UPPER_ALPHA, 27) == "B"

    def test_alpha_negative_values_wrap(self) -> None:
        assert format_ordinal(NumberingStyle.LOWER_ALPHA, -1) == "z"

    def test_roman_case(self) -> None:
        assert format_ordinal(NumberingStyle.LOWER_ROMAN, 4) == "iv"
        assert format_ordinal(NumberingStyle.UPPER_ROMAN, 4) == "IV"

    def test_roman_non_positive_falls_back_to_decimal(self) -> None:
        assert format_ordinal(NumberingStyle.LOWER_ROMAN, 0) == "0"
        assert format_ordinal(NumberingStyle.UPPER_ROMAN, -2) == "-2"


@pytest.mark.unit
class TestNumberingGenerator:
    """Tests for the label iterator."""

    def test_labels_carry_suffix(self) -> None:
        labels = NumberingGenerator(NumberingStyle.DECIMAL, 5)
        assert list(islice(labels, 3)) == ["5. ", "6. ", "7. "]

    def test_default_start_is_zero(self) -> None:
        labels = NumberingGenerator(NumberingStyle.LOWER_ALPHA)
        assert next(labels) == "a. "
        assert next(labels) == "b. "

    def test_cursor_advances_per_label(self) -> None:
        labels = NumberingGenerator(NumberingStyle.UPPER_ROMAN, 3)
        next(labels)
        assert labels.current == 4

    def test_more_than_26_alpha_labels(self) -> None:
        """Pulling past z wraps without error."""
        labels = list(islice(NumberingGenerator(NumberingStyle.LOWER_ALPHA), 28))
        assert labels[25] == "z. "
        assert labels[26] == "a. "
        assert labels[27] == "b. "

    def test_is_its_own_iterator(self) -> None:
        labels = NumberingGenerator(NumberingStyle.DECIMAL)
        assert iter(labels) is labels
